"""
Configuration for the emoji picker.

Values are class attributes with defaults; a handful can be overridden from
the environment so the tool can be driven from scripts without flags:

  EMOJI_PICKER_DATA_FILE   path used when no FILE argument is given
  EMOJI_PICKER_SEED        integer seed for reproducible picks
  EMOJI_PICKER_VERBOSE     "1", "true" or "yes" to enable verbose logging
  EMOJI_PICKER_LOG_FILE    append verbose output to this file
"""

import os
from typing import Optional

from emoji_picker.errors import UsageError

TRUE_VALUES = ("1", "true", "yes")


class Config:
    """Configuration class for the data source and selection settings"""

    # Data file (emoji-sequences.txt format)
    DATA_FILE = None
    ENCODING = "utf-8"

    # Only this type label is eligible for selection
    SELECTABLE_LABEL = "Basic_Emoji"

    # Selection
    SEED = None

    # Verbose logging
    VERBOSE = False
    LOG_FILE = None

    def __init__(self, environ=None):
        env = os.environ if environ is None else environ

        data_file = env.get("EMOJI_PICKER_DATA_FILE")
        if data_file:
            self.DATA_FILE = data_file

        seed = env.get("EMOJI_PICKER_SEED")
        if seed:
            self.SEED = parse_seed(seed)

        if env.get("EMOJI_PICKER_VERBOSE", "").lower() in TRUE_VALUES:
            self.VERBOSE = True

        log_file = env.get("EMOJI_PICKER_LOG_FILE")
        if log_file:
            self.LOG_FILE = log_file

    def resolve_data_file(self, path: Optional[str] = None) -> str:
        """Return the data file to read, preferring an explicit path."""
        chosen = path or self.DATA_FILE
        if not chosen:
            raise UsageError(
                "No data file given. Pass FILE or set EMOJI_PICKER_DATA_FILE."
            )
        return str(chosen)


def parse_seed(value) -> Optional[int]:
    """Convert a seed given on the command line or in the environment."""
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise UsageError(f"Seed must be an integer, got '{value}'")
