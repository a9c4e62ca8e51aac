"""
Error types for the emoji picker.

Every failure the pipeline can hit is one of these. The command-line layers
catch ``EmojiPickerError`` and turn it into a diagnostic plus ``exit_code``.
"""

from typing import Optional


class EmojiPickerError(Exception):
    """Base class for all emoji picker failures."""

    exit_code = 1


class UsageError(EmojiPickerError):
    """No data file was given, or an option value is unusable."""

    exit_code = 2


class DataFileError(EmojiPickerError):
    """The data file cannot be opened or read."""

    def __init__(self, path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Could not read data file '{self.path}': {reason}")


class FormatError(EmojiPickerError):
    """A data line passed the structural filters but its fields are malformed."""

    def __init__(self, message: str, line_number: Optional[int] = None, line: Optional[str] = None):
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class EmptyPoolError(EmojiPickerError):
    """The data file contains no selectable code points."""

    def __init__(self, message: str = "No selectable emoji found in data file"):
        super().__init__(message)


class ConversionError(EmojiPickerError):
    """A selected raw value is not a valid Unicode scalar value."""

    def __init__(self, value: int):
        self.value = value
        super().__init__(f"U+{value:04X} is not a valid character")
