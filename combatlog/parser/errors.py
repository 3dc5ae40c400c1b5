"""
Decoding errors raised for malformed combat log lines.
"""

from enum import Enum
from typing import Optional


class ParseErrorType(Enum):
    """Reason a combat log line could not be decoded."""

    WRONG_HEAD_LENGTH = "wrong_head_length"
    WRONG_TIME_FORMAT = "wrong_time_format"
    INVALID_ARG = "invalid_arg"
    NO_TARGET = "no_target"
    UNKNOWN_EVENT_TYPE = "unknown_event_type"


class LogParseError(ValueError):
    """A single line of a combat log failed to decode."""

    def __init__(
        self,
        error_type: ParseErrorType,
        column: int = 0,
        detail: str = "",
        line_number: Optional[int] = None,
    ):
        self.error_type = error_type
        self.column = column
        self.detail = detail
        self.line_number = line_number
        super().__init__(str(self))

    def __str__(self) -> str:
        location = f"column {self.column}"
        if self.line_number is not None:
            location = f"line {self.line_number}, {location}"
        reason = self.error_type.name
        if self.detail:
            reason = f"{reason} ({self.detail})"
        return f"{location}: {reason}"
