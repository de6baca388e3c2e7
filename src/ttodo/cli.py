"""ttodo command-line interface."""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .storage import ParseError, read_file, write_file

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    p = argparse.ArgumentParser(
        prog="ttodo", description="Two-list terminal task manager."
    )
    p.add_argument("file", nargs="?", help="Path to the task file (created on quit if missing)")
    p.add_argument(
        "--log-file",
        metavar="PATH",
        help="Write debug logs to PATH (the terminal belongs to the UI)",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def configure_logging(log_file: Optional[str]) -> None:
    if log_file is None:
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point: load, run the TUI, save on quit."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.file is None:
        parser.print_usage(sys.stderr)
        sys.exit("ERROR: no input file is provided")

    configure_logging(args.log_file)

    try:
        board = read_file(args.file)
    except ParseError as e:
        sys.exit(f"{e.path}:{e.line_no}: ERROR: ill-formed item line")
    except (OSError, UnicodeDecodeError) as e:
        sys.exit(f"ERROR: could not load file {args.file}: {e}")

    from .tui import main as tui_main

    tui_main(args.file, board)

    try:
        write_file(args.file, board)
    except OSError as e:
        sys.exit(f"ERROR: could not save state to {args.file}: {e}")
    print(f"Saved state to {args.file}")


if __name__ == "__main__":
    main()
