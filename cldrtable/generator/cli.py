# cldrtable/generator/cli.py
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from .errors import MalformedAnnotationsError, MissingAnnotationsError
from .generate import DEFAULT_OUTPUTS, DOWNLOAD_URL, JSON_FILENAME, NameFormat, generate

__all__ = ["main", "build_main", "update_main"]


def _build_parser(default_mode: NameFormat) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cldrtable",
        description="Generates a Rust constant table of CLDR annotation names from annotations.json.",
    )
    parser.add_argument(
        "-i", "--input",
        dest="input_path",
        type=Path,
        default=Path(JSON_FILENAME),
        help=f"Path to the CLDR annotations JSON file. Default is '{JSON_FILENAME}'.",
    )
    parser.add_argument(
        "-o", "--output",
        dest="output_path",
        type=Path,
        help="Override the output file path. Defaults depend on --mode.",
    )
    parser.add_argument(
        "-m", "--mode",
        dest="name_format",
        choices=sorted(DEFAULT_OUTPUTS),
        default=default_mode,
        help="'sanitized' lowercases and escapes names; 'raw' embeds them verbatim (legacy).",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress unsupported-codepoint warnings.",
    )
    return parser


def _print_download_help(filename: str) -> None:
    print(
        "Please download the JSON version of the Unicode CLDR annotations "
        f"and save it in the current directory as {filename}."
    )
    print(f"You can download it from: {DOWNLOAD_URL}")


def main(argv: List[str] | None = None, *, default_mode: NameFormat = "sanitized") -> None:
    """
    CLI entrypoint.

    Usage::

        cldrtable [-i annotations.json] [-o out.rs] [-m sanitized|raw]

    Exits with status 1 when the input is missing or malformed, or the
    output cannot be written.
    """
    args = _build_parser(default_mode).parse_args(argv)
    logging.basicConfig(
        level=logging.ERROR if args.quiet else logging.WARNING,
        format="%(message)s",
        stream=sys.stderr,
    )

    try:
        report = generate(
            args.input_path,
            args.output_path,
            name_format=args.name_format,
        )
    except MissingAnnotationsError as e:
        _print_download_help(Path(e.path).name)
        sys.exit(1)
    except (MalformedAnnotationsError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Wrote {report.output_path}.")


def build_main(argv: List[str] | None = None) -> None:
    main(argv, default_mode="sanitized")


def update_main(argv: List[str] | None = None) -> None:
    main(argv, default_mode="raw")
