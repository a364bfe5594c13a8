"""Command-line interface for resolving driver releases.

Examples:
  driver-resolver latest gecko
  driver-resolver version gecko v0.34.0
  driver-resolver latest --org acme --project fastdriver \\
      --pattern 'fastdriver-{version}-linux\\.zip'
"""

from __future__ import annotations

import argparse
from argparse import Namespace
from typing import TYPE_CHECKING

from driver_resolver import __version__
from driver_resolver.config import ConfigManager
from driver_resolver.constants import CACHE_SUBDIR
from driver_resolver.core.cache import ReleaseCacheManager
from driver_resolver.core.github import (
    AiohttpTransport,
    ProjectIdentity,
    ReleaseResolver,
)
from driver_resolver.core.http_session import create_http_session
from driver_resolver.drivers import DRIVER_SOURCES, pattern_from_template
from driver_resolver.logger import get_logger

if TYPE_CHECKING:
    from driver_resolver.core.github import ReleaseRecord
    from driver_resolver.core.protocols import ReleaseCache, Transport

logger = get_logger(__name__)

# Matches any asset; resolves the version only
_ANY_ASSET = r".+"


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="driver-resolver",
        description="Resolve browser-driver downloads from GitHub releases",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    latest = subparsers.add_parser("latest", help="Resolve the latest release")
    _add_source_arguments(latest)

    version = subparsers.add_parser(
        "version", help="Resolve the release with an exact tag"
    )
    _add_source_arguments(version)
    version.add_argument("tag", help="Release tag, e.g. v0.34.0")

    return parser


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "driver",
        nargs="?",
        choices=sorted(DRIVER_SOURCES),
        help="Known driver to resolve",
    )
    parser.add_argument("--org", help="GitHub organization or user")
    parser.add_argument("--project", help="GitHub repository name")
    parser.add_argument(
        "--pattern",
        help="Asset file name regex; {version} is replaced by the tag",
    )


def build_resolver(
    args: Namespace, transport: Transport, cache: ReleaseCache
) -> ReleaseResolver:
    """Create the resolver selected by the command-line arguments.

    Raises:
        ValueError: If neither a known driver nor --org/--project is given

    """
    if args.driver:
        source = DRIVER_SOURCES[args.driver]
        if args.pattern:
            return ReleaseResolver(
                project=source.project,
                transport=transport,
                cache=cache,
                naming_policy=pattern_from_template(args.pattern),
            )
        return source.create_resolver(transport, cache)

    if not args.org or not args.project:
        msg = "Specify a driver or both --org and --project"
        raise ValueError(msg)

    return ReleaseResolver(
        project=ProjectIdentity(args.org, args.project),
        transport=transport,
        cache=cache,
        naming_policy=pattern_from_template(args.pattern or _ANY_ASSET),
    )


async def run(
    args: Namespace, config_manager: ConfigManager | None = None
) -> ReleaseRecord:
    """Resolve the release requested on the command line.

    Args:
        args: Parsed command-line arguments
        config_manager: Configuration manager (default location if None)

    Returns:
        Resolved release

    """
    config_manager = config_manager or ConfigManager()
    global_config = config_manager.load_global_config()
    cache = ReleaseCacheManager(
        cache_dir=global_config["directory"]["cache"] / CACHE_SUBDIR
    )

    async with create_http_session(global_config) as session:
        resolver = build_resolver(args, AiohttpTransport(session), cache)
        logger.debug("Resolving %s (%s)", resolver.key, args.command)
        if args.command == "version":
            return await resolver.get_release_for_version(args.tag)
        return await resolver.get_latest_release()


def format_release(release: ReleaseRecord) -> str:
    """Render a release for terminal output."""
    url = release.download_url or "no matching asset for this platform"
    return f"{release.version}\n{url}"


def parse_args(argv: list[str] | None = None) -> Namespace:
    """Parse command-line arguments, validating the source selection."""
    parser = create_parser()
    args = parser.parse_args(argv)
    if not args.driver and not (args.org and args.project):
        parser.error("specify a driver or both --org and --project")
    return args
