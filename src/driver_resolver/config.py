"""INI configuration management for driver-resolver."""

import configparser
import logging
from pathlib import Path

from driver_resolver.constants import (
    CONFIG_DIR_NAME,
    CONFIG_FILE_NAME,
    DEFAULT_CONFIG_SUBDIR,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    DEFAULT_TIMEOUT_SECONDS,
    DIRECTORY_KEYS,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_LOG_LEVEL,
    KEY_TIMEOUT_SECONDS,
    SECTION_DEFAULT,
    SECTION_DIRECTORY,
    SECTION_NETWORK,
)
from driver_resolver.types import GlobalConfig

# Plain logging here: the logger package imports this module lazily
logger = logging.getLogger(__name__)

RawConfigDict = dict[str, str | dict[str, str]]


class ConfigManager:
    """Manages the global INI settings file."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize config manager.

        Args:
            config_dir: Configuration directory path
                (defaults to ~/.config/driver-resolver)

        """
        self.config_dir = config_dir or (
            Path.home() / CONFIG_DIR_NAME / DEFAULT_CONFIG_SUBDIR
        )
        self.settings_file = self.config_dir / CONFIG_FILE_NAME

    def get_default_global_config(self) -> RawConfigDict:
        """Get default global configuration values."""
        return {
            KEY_LOG_LEVEL: DEFAULT_LOG_LEVEL,
            KEY_CONSOLE_LOG_LEVEL: DEFAULT_CONSOLE_LOG_LEVEL,
            SECTION_NETWORK: {
                KEY_TIMEOUT_SECONDS: str(DEFAULT_TIMEOUT_SECONDS),
            },
            SECTION_DIRECTORY: {
                "cache": str(self.config_dir / "cache"),
                "logs": str(self.config_dir / "logs"),
            },
        }

    def _create_config_from_defaults(
        self, defaults: RawConfigDict
    ) -> configparser.ConfigParser:
        """Create ConfigParser populated with defaults.

        Args:
            defaults: Default configuration values

        Returns:
            ConfigParser populated with defaults

        """
        config = configparser.ConfigParser(
            inline_comment_prefixes=("#", ";"),
            interpolation=None,
        )

        flat_defaults = {
            key: str(value)
            for key, value in defaults.items()
            if not isinstance(value, dict)
        }
        config.read_dict({SECTION_DEFAULT: flat_defaults})

        for key, value in defaults.items():
            if isinstance(value, dict):
                config.add_section(key)
                for subkey, subvalue in value.items():
                    config.set(key, subkey, str(subvalue))

        return config

    def load_global_config(self) -> GlobalConfig:
        """Load global configuration from the INI file.

        The settings file is created with defaults when it does not exist.

        Returns:
            Loaded global configuration

        """
        defaults = self.get_default_global_config()
        config = self._create_config_from_defaults(defaults)

        if self.settings_file.exists():
            config.read(self.settings_file, encoding="utf-8")
        else:
            self.save_config(config)

        return self._convert_to_global_config(config, defaults)

    def save_config(self, config: configparser.ConfigParser) -> None:
        """Write configuration to the settings file.

        Args:
            config: Parser holding the values to save

        """
        self.config_dir.mkdir(parents=True, exist_ok=True)
        with self.settings_file.open("w", encoding="utf-8") as f:
            f.write("# driver-resolver settings\n")
            config.write(f)
        logger.debug("Wrote settings file %s", self.settings_file)

    def _convert_to_global_config(
        self,
        config: configparser.ConfigParser,
        defaults: RawConfigDict,
    ) -> GlobalConfig:
        """Convert ConfigParser into a typed GlobalConfig.

        Args:
            config: Parser with defaults and user overrides applied
            defaults: Default values used when a user value is invalid

        Returns:
            Typed configuration dictionary

        """
        network_defaults = defaults[SECTION_NETWORK]
        assert isinstance(network_defaults, dict)

        raw_timeout = config.get(SECTION_NETWORK, KEY_TIMEOUT_SECONDS)
        try:
            timeout_seconds = int(raw_timeout)
        except ValueError:
            logger.warning(
                "Invalid %s value %r, using default %s",
                KEY_TIMEOUT_SECONDS,
                raw_timeout,
                network_defaults[KEY_TIMEOUT_SECONDS],
            )
            timeout_seconds = int(network_defaults[KEY_TIMEOUT_SECONDS])

        directory = {
            key: Path(config.get(SECTION_DIRECTORY, key)).expanduser()
            for key in DIRECTORY_KEYS
        }

        return GlobalConfig(
            log_level=config.get(SECTION_DEFAULT, KEY_LOG_LEVEL).upper(),
            console_log_level=config.get(
                SECTION_DEFAULT, KEY_CONSOLE_LOG_LEVEL
            ).upper(),
            network={"timeout_seconds": timeout_seconds},
            directory={
                "cache": directory["cache"],
                "logs": directory["logs"],
            },
        )
