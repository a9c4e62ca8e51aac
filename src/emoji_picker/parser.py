"""
Record parser for emoji-sequences data files.

Data lines look like::

    1F600..1F64F  ; Basic_Emoji  ; grinning face..folded hands
    231A          ; Basic_Emoji  ; watch

Lines whose first character is not alphanumeric (comments, blank lines) are
ignored. Only single code points tagged with the selectable label are turned
into records; ranges are expanded in ascending order. Records are produced
lazily so a whole data file is never held in memory.
"""

import re
from contextlib import contextmanager
from enum import Enum
from typing import Iterable, Iterator, NamedTuple, Optional

from emoji_picker.console import log_verbose
from emoji_picker.errors import DataFileError, FormatError

BASIC_EMOJI_LABEL = "Basic_Emoji"
RANGE_SEPARATOR = ".."
MAX_RAW_VALUE = 0xFFFFFFFF

HEX_RE = re.compile(r"[0-9A-Fa-f]+")


class EmojiType(Enum):
    BASIC = "basic"
    UNKNOWN = "unknown"


class EmojiRecord(NamedTuple):
    """A raw code point value and its classification."""

    raw: int
    emoji_type: EmojiType

    @property
    def selectable(self) -> bool:
        return self.emoji_type is EmojiType.BASIC


class ParseStats:
    """Line and record counters gathered while parsing."""

    def __init__(self):
        self.lines = 0
        self.skipped = 0
        self.rejected = 0
        self.sequences = 0
        self.records = 0

    def summary(self) -> str:
        return (
            f"{self.lines} lines read, {self.skipped} comment/blank, "
            f"{self.rejected} other labels, {self.sequences} sequences, "
            f"{self.records} records"
        )


def classify(label: str, selectable_label: str = BASIC_EMOJI_LABEL) -> EmojiType:
    """Map a type label to an EmojiType; anything unrecognised is UNKNOWN."""
    if label == selectable_label:
        return EmojiType.BASIC
    return EmojiType.UNKNOWN


def parse_hex(text: str, line_number: Optional[int] = None, line: Optional[str] = None) -> int:
    """Parse a bare hexadecimal field as an unsigned 32-bit value."""
    if not HEX_RE.fullmatch(text):
        raise FormatError(f"invalid hex value '{text}'", line_number, line)
    value = int(text, 16)
    if value > MAX_RAW_VALUE:
        raise FormatError(f"hex value '{text}' out of range", line_number, line)
    return value


def parse_code_points(field: str, line_number: Optional[int] = None, line: Optional[str] = None) -> range:
    """
    Parse a code point field into the range of values it covers.

    Args:
        field: Either a single value ("231A") or an inclusive range ("1F600..1F64F")

    Returns:
        Ascending range of raw values; empty when low > high
    """
    bounds = field.split(RANGE_SEPARATOR)
    if len(bounds) == 1:
        value = parse_hex(field, line_number, line)
        return range(value, value + 1)
    if len(bounds) != 2:
        raise FormatError(f"malformed range '{field}'", line_number, line)

    low = parse_hex(bounds[0], line_number, line)
    high = parse_hex(bounds[1], line_number, line)
    return range(low, high + 1)


def parse_line(
    line: str,
    line_number: Optional[int] = None,
    selectable_label: str = BASIC_EMOJI_LABEL,
    stats: Optional[ParseStats] = None,
) -> Iterator[EmojiRecord]:
    """Yield the records one data line contributes (possibly none)."""
    if stats is not None:
        stats.lines += 1

    line = line.rstrip("\r\n")
    if not line or not line[0].isalnum():
        if stats is not None:
            stats.skipped += 1
        return

    fields = [segment.strip() for segment in line.split(";")]
    if len(fields) < 2:
        raise FormatError("expected '<code points> ; <type>'", line_number, line)

    hex_field = fields[0]
    emoji_type = classify(fields[1], selectable_label)

    # Don't accept other types or multi-code-point sequences
    if emoji_type is not EmojiType.BASIC:
        if stats is not None:
            stats.rejected += 1
        return
    if " " in hex_field:
        if stats is not None:
            stats.sequences += 1
        return

    for raw in parse_code_points(hex_field, line_number, line):
        if stats is not None:
            stats.records += 1
        yield EmojiRecord(raw, emoji_type)


def parse_emoji_data(
    lines: Iterable[str],
    selectable_label: str = BASIC_EMOJI_LABEL,
    stats: Optional[ParseStats] = None,
) -> Iterator[EmojiRecord]:
    """Lazily turn data file lines into selectable emoji records."""
    for line_number, line in enumerate(lines, start=1):
        yield from parse_line(line, line_number, selectable_label, stats)


@contextmanager
def open_records(
    path,
    encoding: str = "utf-8",
    selectable_label: str = BASIC_EMOJI_LABEL,
    stats: Optional[ParseStats] = None,
):
    """
    Open a data file and yield its lazy record iterator.

    The file is opened before anything is parsed, so a missing or unreadable
    file is reported up front. It is closed when the block exits, however it
    exits.
    """
    try:
        f = open(path, "r", encoding=encoding)
    except OSError as e:
        raise DataFileError(path, e.strerror or str(e))

    with f:
        log_verbose(f"Reading emoji data from {path}")
        try:
            yield parse_emoji_data(f, selectable_label, stats)
        except UnicodeDecodeError as e:
            raise DataFileError(path, f"not valid {encoding} text ({e.reason})")
        except OSError as e:
            raise DataFileError(path, e.strerror or str(e))
