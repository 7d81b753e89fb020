"""Main entry point for the sitetree exporter."""
import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from . import __version__
from .core import ExportConfig, ExportService
from .exceptions import SitetreeError
from .exporter.classifiers import available_classifiers

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments.

    Options left unset fall back to ``SITETREE_*`` environment variables
    and then to the defaults of :class:`ExportConfig`.

    Returns:
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="sitetree",
        description="Export the pages of a static site that opt into the sitemap as a JSON tree",
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Project root to scan (default: current directory)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output JSON file, relative to the root unless absolute (default: assets/data/tree.json)",
    )
    parser.add_argument(
        "--classifier",
        type=str,
        default=None,
        choices=available_classifiers(),
        help="Page classification policy (default: meta)",
    )
    parser.add_argument(
        "--exclude-dir",
        dest="exclude_dirs",
        action="append",
        default=None,
        metavar="NAME",
        help="Directory name to skip; may be repeated",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Build and print the tree without writing the output file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=os.getenv("LOG_LEVEL", "info").lower(),
        choices=["debug", "info", "warning", "error", "critical"],
        help="Logging level",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"sitetree {__version__}",
        help="Show version and exit",
    )
    return parser.parse_args(argv)


def configure_logging(level: str) -> None:
    """Send log records to stdout at the given level."""
    logging.basicConfig(
        level=level.upper(),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger().setLevel(level.upper())


def main(argv: Optional[List[str]] = None) -> int:
    """Run one export.

    Returns:
        Process exit status: 0 on success, 1 if the export failed.
    """
    # Load environment variables from .env file if it exists
    env_path = Path(".") / ".env"
    if env_path.exists():
        load_dotenv(dotenv_path=env_path)

    args = parse_args(argv)
    configure_logging(args.log_level)
    if env_path.exists():
        logger.debug(f"Loaded environment variables from {env_path}")

    try:
        config = ExportConfig.from_env(
            root=args.root,
            output=args.output,
            classifier=args.classifier,
            exclude_dirs=args.exclude_dirs,
            dry_run=args.dry_run or None,
        )
        result = ExportService(config).run()
    except (SitetreeError, ValueError) as e:
        logger.error(f"Export failed: {e}")
        return 1

    if not result.succeeded:
        return 1

    # Summary goes to stdout regardless of --log-level
    if result.dry_run:
        print(f"Dry run complete: {result.page_count} page(s) found, nothing written")
    else:
        print(f"Export complete: {result.page_count} page(s) written to {result.output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
