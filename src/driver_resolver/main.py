"""Main CLI entry point for driver-resolver."""

import sys

import aiohttp
import uvloop

from driver_resolver.cli import format_release, parse_args, run
from driver_resolver.exceptions import DriverResolverError
from driver_resolver.logger import get_logger, update_logger_from_config

logger = get_logger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Run the CLI application.

    Args:
        argv: Command-line arguments (sys.argv[1:] if None)

    Returns:
        Process exit code

    """
    args = parse_args(argv)
    update_logger_from_config()
    try:
        release = uvloop.run(run(args))
    except KeyboardInterrupt:
        logger.info("Cancelled by user")
        return 1
    except DriverResolverError as e:
        logger.error("%s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (aiohttp.ClientError, TimeoutError) as e:
        logger.error("GitHub request failed: %s", e)
        print(f"Error: GitHub request failed: {e}", file=sys.stderr)
        return 1

    print(format_release(release))
    return 0


if __name__ == "__main__":
    sys.exit(main())
