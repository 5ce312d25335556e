"""Main entry point for the lazy sequence demos."""

import argparse
import logging
import sys
from typing import List, Optional

from .config import get_app_config
from .console import ConsoleDriver

# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)

DEMO_CHOICES = ["names", "evens", "letter", "ordered", "non-blank", "fake", "all"]


def setup_logging(level: str = "WARNING", verbose: bool = False):
    """Configure logging level.

    Args:
        level: Level name used when not verbose
        verbose: Enable verbose logging
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    else:
        logging.getLogger().setLevel(getattr(logging, level, logging.WARNING))


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Step through lazy sequence generation and filtering demos."
    )
    parser.add_argument(
        "--demo",
        choices=DEMO_CHOICES,
        help="Run a single demo (or all of them) without the interactive menu.",
    )
    parser.add_argument(
        "--no-pause",
        action="store_true",
        help="Do not wait for a key press between sections.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main execution function."""
    args = parse_args(argv)

    try:
        config = get_app_config()
        if args.no_pause:
            config.pause_between_sections = False
        setup_logging(config.log_level, args.verbose)

        logger.debug(f"Loaded configuration: {config}")

        driver = ConsoleDriver(config)
        if args.demo:
            driver.run_demo(args.demo)
        else:
            driver.run_menu()
        return 0

    except KeyboardInterrupt:
        logger.warning("Execution interrupted by user")
        return 130
    except Exception as e:
        logger.error(f"Error during execution: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
