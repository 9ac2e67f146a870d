from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Iterable, Iterator, List, Optional, Union
import csv
import logging
import os

from .config import get_default_options
from .decoder import decode
from .errors import DecodeError, UnsupportedType
from .message import CSV_FIELDS, DecodedMessage

logger = logging.getLogger(__name__)

PathOrFile = Union[str, "os.PathLike[str]", IO[str]]


@dataclass
class DecodeStats:
    """Per-run tallies owned by the caller of decode_lines()."""
    total: int = 0
    decoded: int = 0
    filtered: int = 0
    with_position: int = 0
    without_position: int = 0
    types: Counter = field(default_factory=Counter)
    skipped: Counter = field(default_factory=Counter)
    invalid_types: Counter = field(default_factory=Counter)

    def record(self, message: DecodedMessage) -> None:
        self.decoded += 1
        self.types[message.message_type] += 1
        if message.has_position:
            self.with_position += 1
        else:
            self.without_position += 1

    def record_error(self, err: DecodeError) -> None:
        self.skipped[err.reason] += 1
        if isinstance(err, UnsupportedType):
            self.invalid_types[err.message_type] += 1

    def summary_lines(self) -> List[str]:
        lines = [
            f"Total messages processed: {self.total}",
            f"Successfully decoded: {self.decoded}",
            f"Invalid/non-standard message types: {sum(self.invalid_types.values())}",
        ]
        for reason, count in sorted(self.skipped.items()):
            lines.append(f"Skipped ({reason}): {count}")
        if self.filtered:
            lines.append(f"Filtered out: {self.filtered}")
        lines.append("")
        lines.append(f"Valid messages with position data: {self.with_position}")
        lines.append(f"Valid messages without position data: {self.without_position}")
        if self.types:
            lines.append("")
            lines.append("Valid message type summary:")
            for t in sorted(self.types):
                lines.append(f"  Type {t}: {self.types[t]} messages")
        if self.invalid_types:
            lines.append("")
            lines.append("Invalid/non-standard message types found:")
            for t in sorted(self.invalid_types):
                lines.append(f"  Type {t}: {self.invalid_types[t]} messages")
        return lines


def iter_lines(source: PathOrFile) -> Iterator[str]:
    """Yield non-blank lines with line endings removed."""
    if hasattr(source, "read"):
        for line in source:  # type: ignore[union-attr]
            line = line.rstrip("\r\n")
            if line:
                yield line
        return
    with Path(source).open("r", encoding="ascii", errors="replace") as f:  # type: ignore[arg-type]
        yield from iter_lines(f)


def decode_lines(
    lines: Iterable[str],
    stats: Optional[DecodeStats] = None,
    options: Optional[dict] = None,
) -> Iterator[DecodedMessage]:
    """Decode lines one by one, yielding records in input order.

    Lines that fail to decode are counted on `stats` by reason and skipped.
    `options` may restrict output by message type or to positioned messages.
    """
    stats = stats if stats is not None else DecodeStats()
    opts = get_default_options()
    if options:
        opts.update(options)
    wanted = set(opts["types"]) if opts["types"] is not None else None

    for line in lines:
        stats.total += 1
        try:
            message = decode(line)
        except DecodeError as e:
            stats.record_error(e)
            logger.debug("skipping line %d (%s): %s", stats.total, e.reason, e)
            continue
        stats.record(message)
        if wanted is not None and message.message_type not in wanted:
            stats.filtered += 1
            continue
        if opts["position_only"] and not message.has_position:
            stats.filtered += 1
            continue
        yield message


def write_csv(records: Iterable[DecodedMessage], out: IO[str], header: bool = True) -> int:
    """Write records as CSV to an open text stream. Returns the number of rows."""
    w = csv.writer(out, lineterminator="\n")
    if header:
        w.writerow(CSV_FIELDS)
    n = 0
    for rec in records:
        w.writerow(rec.as_row())
        n += 1
    return n


def decode_file(
    input_path: PathOrFile,
    output_path: Union[str, "os.PathLike[str]", IO[str]],
    options: Optional[dict] = None,
) -> DecodeStats:
    """Decode every line of `input_path` into a CSV at `output_path`."""
    opts = get_default_options()
    if options:
        opts.update(options)
    stats = DecodeStats()
    records = decode_lines(iter_lines(input_path), stats, opts)
    if hasattr(output_path, "write"):
        rows = write_csv(records, output_path, header=opts["header"])  # type: ignore[arg-type]
    else:
        with Path(output_path).open("w", newline="", encoding="utf-8") as f:
            rows = write_csv(records, f, header=opts["header"])
    logger.info("decoded %d of %d lines, wrote %d rows", stats.decoded, stats.total, rows)
    return stats
