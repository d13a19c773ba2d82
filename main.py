#!/usr/bin/env python3

__VERSION__ = "1.0.0"
__DESCRIPTION__ = "Detect left/right column alignment for formatted tables."
__AUTHOR__ = "numform contributors"

import os
import sys

import argparse
import logging
from pathlib import Path

from typing import List, Optional

from numform import ADDITIONAL_NUMERIC, AlignmentError, classify_alignment
from modules.formatting import (
    build_rich_table, format_markdown, format_table, format_tabulate, frame_to_rows
)
from modules.io_tools import load_table

STYLES = ["plain", "grid", "markdown", "tabulate", "rich"]


def _default_style() -> str:
    """Return the render style to use when --style is not given."""
    return os.environ.get("NUMFORM_ALIGN_STYLE", "plain")


def check_dependencies(required=["pandas", "rich", "tabulate"]) -> None:
    """
    Verify that the Python dependencies used for loading and rendering import.
    """
    missing = []
    for mod in required:
        try:
            __import__(mod)
        except ImportError:
            missing.append(mod)

    if missing:
        print("[ERROR] Missing dependencies:")
        for item in missing:
            print(f"  - {item}")
        print("Please install required Python modules before running.")
        sys.exit(1)


def align_command(args) -> int:
    df = load_table(args.input, args.format)
    numeric_pattern = None if args.no_additional_numeric else args.numeric_pattern
    tags = classify_alignment(
        df,
        left_tag=args.left,
        right_tag=args.right,
        numeric_pattern=numeric_pattern,
        separator=args.sep,
    )
    logging.debug("Classified %d columns from %s", df.shape[1], args.input)

    if args.sep is not None:
        print(tags)
    else:
        for tag in tags:
            print(tag)
    return 0


def render_command(args) -> int:
    df = load_table(args.input, args.format)
    style = args.style or _default_style()
    if style not in STYLES:
        logging.error("Unknown render style '%s' (choose from: %s)", style, ", ".join(STYLES))
        return 1
    logging.debug("Rendering %s with style '%s'", args.input, style)

    if style == "rich":
        from rich.console import Console
        Console().print(build_rich_table(df))
    elif style == "tabulate":
        print(format_tabulate(df))
    elif style == "markdown":
        headers, rows = frame_to_rows(df)
        print(format_markdown(headers, rows))
    else:
        headers, rows = frame_to_rows(df)
        print(format_table(headers=headers, rows=rows, style=style))
    return 0


def setup_logging(verbose: bool = False, log_file: Optional[Path] = None) -> None:
    """Configure logging to the console and, optionally, a plain log file."""
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Console handler
    c_handler = logging.StreamHandler()
    c_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    c_handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    root.addHandler(c_handler)

    # File handler
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        f_handler = logging.FileHandler(log_file, encoding="utf-8")
        f_handler.setLevel(logging.DEBUG)
        f_handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(f_handler)
        logging.getLogger(__name__).debug("Logging initialized at %s", log_file)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=f"numform-align v{__VERSION__} | {__DESCRIPTION__}",
        epilog=f"{__AUTHOR__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--input", type=Path, required=True, help="Table file (csv, tsv or json), or '-' for stdin")
    common.add_argument("--format", choices=["csv", "tsv", "json"], default=None,
                        help="Input format (default: inferred from the file suffix)")
    common.add_argument("--verbose", action="store_true")
    common.add_argument("--log-file", type=Path, default=None, help="Also write a debug log to this file")

    # --- ALIGN SUBCOMMAND ---
    al = subparsers.add_parser("align", parents=[common], help="Print the alignment tag of each column")
    al.add_argument("--left", default="left", help="Tag for left-aligned columns (default: left)")
    al.add_argument("--right", default=None,
                    help="Tag for right-aligned columns (default: 'r' if --left is 'l', else 'right')")
    al.add_argument("--numeric-pattern", default=ADDITIONAL_NUMERIC,
                    help="Additional regex to treat as numeric")
    al.add_argument("--no-additional-numeric", action="store_true",
                    help="Only use the built-in numeric pattern")
    al.add_argument("--sep", default=None, help="Join the tags into one string with this separator")

    # --- RENDER SUBCOMMAND ---
    rd = subparsers.add_parser("render", parents=[common], help="Print the table using the detected alignment")
    rd.add_argument("--style", default=None,
                    help=f"One of: {', '.join(STYLES)} (default: $NUMFORM_ALIGN_STYLE or plain)")

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    check_dependencies()
    setup_logging(verbose=args.verbose, log_file=args.log_file)

    # Dispatch to modular command functions
    try:
        if args.command == "align":
            return align_command(args)
        elif args.command == "render":
            return render_command(args)
    except AlignmentError as e:
        logging.error("%s", e)
        return 1
    except (OSError, ValueError) as e:
        logging.error("Could not load table %s: %s", args.input, e)
        return 1
    print("[ERROR] Unknown command.")
    return 1


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n[INFO] Cancelled by user.")
        sys.exit(1)
