from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .config import load_settings
from .converter import convert
from .log import get_logger, setup_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="eps2pdf",
        description="Convert EPS files to PDF pages sized to their bounding box, using Ghostscript.",
    )
    parser.add_argument("files", nargs="*", metavar="EPS", help="EPS file(s) to convert")
    parser.add_argument("--gs", dest="ghostscript", help="full path to the Ghostscript executable")
    parser.add_argument(
        "--orientation",
        type=int,
        help="0 keeps the orientation directive, 1 flips it, 2 removes it",
    )
    parser.add_argument("--config", help="JSON file with default settings")
    parser.add_argument("--log-level", help="logging level (DEBUG, INFO, WARNING, ...)")
    parser.add_argument("--info", action="store_true", help="print the page size of each created PDF")
    parser.add_argument("--gui", action="store_true", help="start the desktop app")
    return parser


def _print_page_info(pdf_path: str) -> None:
    from .pdf_info import read_page_info

    try:
        info = read_page_info(pdf_path)
    except Exception as exc:  # noqa: BLE001
        logger.warning("Could not read %s: %s", pdf_path, exc)
        return
    print(f"{pdf_path}: {info.describe()}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.config)
    except (OSError, ValueError) as exc:
        print(f"eps2pdf: {exc}", file=sys.stderr)
        return 2
    try:
        setup_logger("eps2pdf", args.log_level or settings.log_level)
    except ValueError as exc:
        print(f"eps2pdf: {exc}", file=sys.stderr)
        return 2

    if args.ghostscript:
        settings.ghostscript_path = args.ghostscript
    if args.orientation is not None:
        settings.orientation = args.orientation

    if args.gui:
        from .app import run_app

        run_app(settings)
        return 0

    if not args.files:
        parser.error("at least one EPS file is required")

    status = 0
    for eps_file in args.files:
        result = convert(eps_file, settings.ghostscript_path, settings.orientation)
        print(f"{eps_file}: {result.message}")
        if not result.ok:
            status = 1
        elif args.info:
            _print_page_info(result.target)
    return status


if __name__ == "__main__":
    sys.exit(main())
