"""Browser drivers published as GitHub release assets.

Each source knows its repository and how its release assets are named for
the running platform. Platform names follow the ones used in the assets
themselves, which differ between projects.
"""

from __future__ import annotations

import platform
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from driver_resolver.core.github import ProjectIdentity, ReleaseResolver

if TYPE_CHECKING:
    from driver_resolver.core.github import NamingPolicy
    from driver_resolver.core.protocols import ReleaseCache, Transport

_ARM_MACHINES = ("arm64", "aarch64")


def _is_64bit(machine: str) -> bool:
    return machine.endswith("64")


def geckodriver_platform(
    system: str | None = None, machine: str | None = None
) -> str:
    """Return the geckodriver platform qualifier, e.g. ``linux64``."""
    system = (system or platform.system()).lower()
    machine = (machine or platform.machine()).lower()

    if system == "windows":
        if machine in _ARM_MACHINES:
            return "win-aarch64"
        return "win64" if _is_64bit(machine) else "win32"
    if system == "darwin":
        return "macos-aarch64" if machine in _ARM_MACHINES else "macos"
    if machine in _ARM_MACHINES:
        return "linux-aarch64"
    return "linux64" if _is_64bit(machine) else "linux32"


def operadriver_platform(
    system: str | None = None, machine: str | None = None
) -> str:
    """Return the operadriver platform qualifier, e.g. ``mac64``."""
    system = (system or platform.system()).lower()
    machine = (machine or platform.machine()).lower()

    if system == "windows":
        return "win64" if _is_64bit(machine) else "win32"
    if system == "darwin":
        return "mac64"
    return "linux64"


def geckodriver_pattern(version: str, platform_id: str | None = None) -> str:
    """File name regex of a geckodriver archive.

    Assets look like ``geckodriver-v0.35.0-linux64.tar.gz``; Windows builds
    ship as zip files.
    """
    platform_id = platform_id or geckodriver_platform()
    extension = r"\.zip" if platform_id.startswith("win") else r"\.tar\.gz"
    return (
        f"geckodriver-{re.escape(version)}-{re.escape(platform_id)}"
        f"{extension}"
    )


def operadriver_pattern(version: str, platform_id: str | None = None) -> str:
    """File name regex of an operadriver archive (``operadriver_linux64.zip``).

    Opera publishes unversioned file names, so version is unused.
    """
    platform_id = platform_id or operadriver_platform()
    return f"operadriver_{re.escape(platform_id)}\\.zip"


@dataclass(slots=True, frozen=True)
class GitHubDriverSource:
    """A driver binary released on GitHub.

    Attributes:
        name: Short name used on the command line
        project: Repository the driver is released in
        naming_policy: Maps a version to the asset file name regex

    """

    name: str
    project: ProjectIdentity
    naming_policy: NamingPolicy

    def create_resolver(
        self, transport: Transport, cache: ReleaseCache
    ) -> ReleaseResolver:
        """Create a resolver for this driver."""
        return ReleaseResolver(
            project=self.project,
            transport=transport,
            cache=cache,
            naming_policy=self.naming_policy,
        )


def pattern_from_template(template: str) -> NamingPolicy:
    """Build a naming policy from a regex template.

    ``{version}`` in template is replaced by the escaped release version.

    Args:
        template: Regex such as ``mydriver-{version}-linux\\.zip``

    Returns:
        Naming policy callable

    """

    def naming_policy(version: str) -> str:
        return template.replace("{version}", re.escape(version))

    return naming_policy


DRIVER_SOURCES: dict[str, GitHubDriverSource] = {
    "gecko": GitHubDriverSource(
        name="gecko",
        project=ProjectIdentity("mozilla", "geckodriver"),
        naming_policy=geckodriver_pattern,
    ),
    "opera": GitHubDriverSource(
        name="opera",
        project=ProjectIdentity("operasoftware", "operachromiumdriver"),
        naming_policy=operadriver_pattern,
    ),
}
