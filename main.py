import argparse
import asyncio
import logging
import sys
from pathlib import Path

from jobboard.config.settings import settings
from jobboard.core.errors import JobBoardError
from jobboard.core.runner import GATEWAYS, runner

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)],
)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Scrape the YES student job board.")
    parser.add_argument(
        "--gateway",
        choices=sorted(GATEWAYS),
        default=settings.GATEWAY,
        help="How to reach the portal (default: %(default)s)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write postings JSON to this file instead of stdout",
    )
    return parser.parse_args(argv)


async def main(argv=None):
    """
    Main entry point.
    """
    args = parse_args(argv)
    await runner.run(gateway=args.gateway, output=args.output)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
    except JobBoardError:
        sys.exit(1)
