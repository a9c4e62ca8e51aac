"""
Uniform random selection over a stream of emoji records.

The record stream is never materialised: a single pass keeps one candidate
and replaces it with the k-th record with probability 1/k, which leaves every
record equally likely to be the final pick.
"""

import random
from typing import Iterable, Optional

from emoji_picker.config import Config
from emoji_picker.console import log_verbose
from emoji_picker.errors import ConversionError, EmptyPoolError
from emoji_picker.parser import EmojiRecord, ParseStats, open_records

MAX_CODE_POINT = 0x10FFFF
SURROGATE_MIN = 0xD800
SURROGATE_MAX = 0xDFFF


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Return a seeded generator, or an OS-seeded one when seed is None."""
    if seed is None:
        return random.Random()
    return random.Random(seed)


def choose_record(records: Iterable[EmojiRecord], rng=None) -> EmojiRecord:
    """
    Pick one record uniformly at random in a single pass.

    Args:
        records: Any iterable of records, consumed once
        rng: Object with a ``randrange`` method (defaults to a fresh random.Random)

    Returns:
        The chosen record

    Raises:
        EmptyPoolError: if ``records`` yields nothing
    """
    if rng is None:
        rng = make_rng()

    chosen = None
    for k, record in enumerate(records, start=1):
        if rng.randrange(k) == 0:
            chosen = record

    if chosen is None:
        raise EmptyPoolError()
    return chosen


def count_records(records: Iterable[EmojiRecord]) -> int:
    return sum(1 for _ in records)


def is_scalar_value(value: int) -> bool:
    return 0 <= value <= MAX_CODE_POINT and not SURROGATE_MIN <= value <= SURROGATE_MAX


def code_point_to_char(value: int) -> str:
    """Convert a raw value to a character, rejecting non-scalar values."""
    if not is_scalar_value(value):
        raise ConversionError(value)
    return chr(value)


def to_char(record: EmojiRecord) -> str:
    return code_point_to_char(record.raw)


def pick_emoji(path, config: Optional[Config] = None, rng=None) -> str:
    """Read a data file and return one uniformly chosen basic emoji."""
    if config is None:
        config = Config()
    if rng is None:
        if config.SEED is not None:
            log_verbose(f"Using seed {config.SEED}")
        rng = make_rng(config.SEED)

    stats = ParseStats()
    with open_records(path, config.ENCODING, config.SELECTABLE_LABEL, stats) as records:
        record = choose_record(records, rng)
    log_verbose(f"Parsed {stats.summary()}")

    char = to_char(record)
    log_verbose(f"Selected U+{record.raw:04X}")
    return char


def count_emoji(path, config: Optional[Config] = None) -> int:
    """Return how many selectable code points a data file contains."""
    if config is None:
        config = Config()

    stats = ParseStats()
    with open_records(path, config.ENCODING, config.SELECTABLE_LABEL, stats) as records:
        total = count_records(records)
    log_verbose(f"Parsed {stats.summary()}")
    return total
