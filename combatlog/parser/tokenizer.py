"""
Line tokenizer for decoding WoW combat log lines into events.
"""

import re
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from ..config.settings import DEFAULT_LOG_YEAR
from .errors import LogParseError, ParseErrorType
from .events import Event, EventType
from .units import Unit


class LineTokenizer:
    """
    Tokenizes individual lines from WoW combat logs.

    Handles the 3.x format, where the head holds the timestamp and event type
    separated by whitespace and the rest of the line is comma separated:

        3/9 19:05:22.252  SPELL_HEAL,0x..,"Erle",0x514,0x..,"Telta",0x514,48785,"Flash of Light",0x2,1709,0,0,nil
    """

    # Trailing timezone offset, as written by newer clients ("20:23:42.758-4")
    TIMEZONE_SUFFIX = re.compile(r"[-+]\d+$")

    # sourceGUID, sourceName, sourceFlags, destGUID, destName, destFlags
    BASE_PARAM_COUNT = 6

    # Parameters inserted between the base and the suffix, by prefix
    PREFIX_PARAM_COUNTS = {"SWING": 0, "RANGE": 3, "SPELL": 3, "ENVIRONMENTAL": 1, "": 0}

    def __init__(self, year: Optional[int] = None, require_target: bool = True):
        """
        Initialize the tokenizer.

        Args:
            year: Year to assume for timestamps that carry none
            require_target: Reject records without a target unit
        """
        self.year = year or DEFAULT_LOG_YEAR
        self.require_target = require_target
        self.line_count = 0
        self.error_count = 0

    def parse_line(self, line: str) -> Event:
        """
        Decode a single combat log line into an Event.

        Args:
            line: Raw line from combat log file

        Returns:
            Decoded Event

        Raises:
            LogParseError: If the line is malformed
        """
        self.line_count += 1
        try:
            return self._decode(line.rstrip("\r\n"))
        except LogParseError:
            self.error_count += 1
            raise

    def _decode(self, line: str) -> Event:
        head, _, rest = line.partition(",")
        head_parts = head.split()
        if len(head_parts) != 3:
            raise LogParseError(
                ParseErrorType.WRONG_HEAD_LENGTH,
                column=len(head),
                detail=f"expected 3 head fields, found {len(head_parts)}",
            )

        date_str, time_str, type_str = head_parts
        timestamp = self._parse_timestamp(date_str, time_str)

        try:
            event_type = EventType(type_str)
        except ValueError:
            raise LogParseError(
                ParseErrorType.UNKNOWN_EVENT_TYPE,
                column=head.index(type_str, len(date_str) + len(time_str)),
                detail=type_str,
            )

        params = self._split_params(rest, offset=len(head) + 1)
        if len(params) < self.BASE_PARAM_COUNT:
            raise LogParseError(
                ParseErrorType.INVALID_ARG,
                column=len(line),
                detail=f"expected {self.BASE_PARAM_COUNT} base parameters, found {len(params)}",
            )

        source = Unit.from_raw(params[0][0], params[1][0])
        target = Unit.from_raw(params[3][0], params[4][0])
        if target is None and self.require_target:
            raise LogParseError(ParseErrorType.NO_TARGET, column=params[3][1])

        prefix_params, suffix_params = self._split_prefix(event_type, params[self.BASE_PARAM_COUNT:])

        spell_id = None
        spell_name = None
        if event_type.prefix in ("SPELL", "RANGE") and len(prefix_params) == 3:
            spell_id = self._to_int(*prefix_params[0])
            spell_name = prefix_params[1][0].strip('"')

        amount = None
        if event_type.has_amount:
            if not suffix_params:
                raise LogParseError(
                    ParseErrorType.INVALID_ARG,
                    column=len(line),
                    detail=f"{event_type.value} without amount",
                )
            amount = self._to_int(*suffix_params[0])
            if amount < 0:
                raise LogParseError(
                    ParseErrorType.INVALID_ARG,
                    column=suffix_params[0][1],
                    detail=f"negative amount {amount}",
                )

        return Event(
            timestamp=timestamp,
            event_type=event_type,
            source=source,
            target=target,
            amount=amount,
            spell_id=spell_id,
            spell_name=spell_name,
            raw_line=line,
        )

    def _parse_timestamp(self, date_str: str, time_str: str) -> datetime:
        """
        Parse the "M/D" (or "M/D/YYYY") date and "HH:MM:SS.mmm" time fields.

        The timezone offset is dropped. Timestamps are only compared within a
        single log, so a naive datetime is sufficient.
        """
        time_clean = self.TIMEZONE_SUFFIX.sub("", time_str)
        if date_str.count("/") == 1:
            date_str = f"{date_str}/{self.year}"

        try:
            return datetime.strptime(f"{date_str} {time_clean}", "%m/%d/%Y %H:%M:%S.%f")
        except ValueError as e:
            raise LogParseError(ParseErrorType.WRONG_TIME_FORMAT, column=0, detail=str(e))

    def _split_prefix(
        self, event_type: EventType, params: List[Tuple[str, int]]
    ) -> Tuple[List[Tuple[str, int]], List[Tuple[str, int]]]:
        """
        Split the parameters after the base into prefix and suffix parameters.

        Args:
            event_type: The event type (e.g., SPELL_DAMAGE)
            params: Parameters after the base parameters

        Returns:
            Tuple of (prefix_params, suffix_params)
        """
        count = self.PREFIX_PARAM_COUNTS[event_type.prefix]
        if event_type in (EventType.ENCHANT_APPLIED, EventType.ENCHANT_REMOVED):
            # spellName, itemID, itemName
            count = 3
        if len(params) < count:
            return params, []
        return params[:count], params[count:]

    def _split_params(self, params_str: str, offset: int = 0) -> List[Tuple[str, int]]:
        """
        Split parameter string by commas, keeping quoted names intact.

        Args:
            params_str: Comma-separated parameter string
            offset: Column of the first character of params_str in the line

        Returns:
            List of (raw value, column) pairs
        """
        params = []
        current = []
        start = 0
        in_quotes = False

        for i, char in enumerate(params_str):
            if char == '"':
                in_quotes = not in_quotes
                current.append(char)
            elif char == "," and not in_quotes:
                params.append(("".join(current).strip(), offset + start))
                current = []
                start = i + 1
            else:
                current.append(char)

        if current or params_str.endswith(","):
            params.append(("".join(current).strip(), offset + start))

        return params

    def _to_int(self, value: str, column: int) -> int:
        """Convert a decimal or hex parameter to int."""
        try:
            if value.startswith("0x"):
                return int(value, 16)
            return int(value)
        except ValueError:
            raise LogParseError(ParseErrorType.INVALID_ARG, column=column, detail=value)

    def get_stats(self) -> Dict[str, float]:
        """
        Get parsing statistics.

        Returns:
            Dictionary with line_count and error_count
        """
        return {
            "lines_processed": self.line_count,
            "errors": self.error_count,
            "success_rate": (self.line_count - self.error_count) / max(self.line_count, 1),
        }
