"""Command-line front end: decode an AIVDM/AIVDO log into CSV.

Usage:
    ais-decode nmea-sample.txt -o decoded.csv
    ais-decode nmea-sample.txt --types 1,2,3 --position-only
    ais-decode '!AIVDM,1,1,,A,38IFDN0Ohj7JvbN0fABtpbJ401w@,0*69' --inspect
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .api import decode_file
from .config import get_default_options, load_options
from .decoder import inspect
from .errors import DecodeError

logger = logging.getLogger(__name__)


def _parse_types(value: str) -> List[int]:
    try:
        return [int(v) for v in value.split(",") if v.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected comma-separated integers, got {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ais-decode", description="Decode AIVDM/AIVDO sentences to CSV")
    parser.add_argument("input", help="Input file of NMEA lines, or a single sentence with --inspect")
    parser.add_argument("-o", "--output", default=None, help="Output CSV path (default: stdout)")
    parser.add_argument("--config", default=None, help="Path to JSON with batch options")
    parser.add_argument("--types", type=_parse_types, default=None, help="Only emit these message types, e.g. 1,2,3")
    parser.add_argument("--position-only", action="store_true", help="Only emit messages with a position")
    parser.add_argument("--no-header", action="store_true", help="Omit the CSV header row")
    parser.add_argument("--inspect", action="store_true", help="Print raw header fields of one sentence")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log skipped lines")
    return parser


def run_inspect(sentence: str) -> int:
    try:
        info = inspect(sentence)
    except DecodeError as e:
        print(f"Could not parse NMEA message: {e}")
        return 1
    for key, value in info.items():
        print(f"{key}: {value}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.inspect:
        return run_inspect(args.input)

    options = get_default_options() if args.config is None else load_options(args.config)
    if args.types is not None:
        options["types"] = args.types
    if args.position_only:
        options["position_only"] = True
    if args.no_header:
        options["header"] = False

    input_path = Path(args.input)
    if not input_path.exists():
        logger.error("input file not found: %s", input_path)
        return 1

    output = args.output if args.output is not None else sys.stdout
    stats = decode_file(input_path, output, options)

    for line in stats.summary_lines():
        print(line, file=sys.stderr)
    if args.output is not None:
        print(f"\nDecoded data saved to: {args.output}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
