"""
In-memory combat log: the ordered, position addressable event stream.
"""

import logging
from typing import Iterator, List, Optional, Sequence, Set, Tuple

from .errors import LogParseError
from .events import Event
from .parser import CombatLogParser
from .units import Unit

logger = logging.getLogger(__name__)


class CombatLog:
    """
    An ordered, read-only sequence of decoded events.

    Positions are stable for the lifetime of the log, which is what lets
    filtered views and encounters refer to events by index.
    """

    def __init__(self, events: Sequence[Event], parse_errors: Optional[List[LogParseError]] = None):
        self._events: Tuple[Event, ...] = tuple(events)
        self.parse_errors: List[LogParseError] = list(parse_errors or [])

    @classmethod
    def read_file(cls, path, parser: Optional[CombatLogParser] = None) -> "CombatLog":
        """
        Load a combat log file.

        Args:
            path: Path to the combat log file
            parser: Parser to use, a default one is created otherwise

        Returns:
            CombatLog holding every event that decoded
        """
        parser = parser or CombatLogParser()
        events = list(parser.parse_file(path))
        log = cls(events, parser.parse_errors)
        log._log_loaded()
        return log

    @classmethod
    def from_string(cls, text: str, parser: Optional[CombatLogParser] = None) -> "CombatLog":
        """Parse a combat log held in memory."""
        parser = parser or CombatLogParser()
        events = parser.parse_string(text)
        log = cls(events, parser.parse_errors)
        log._log_loaded()
        return log

    def _log_loaded(self):
        logger.info(
            f"Loaded {len(self._events)} events successfully into memory "
            f"({len(self.parse_errors)} lines skipped)"
        )

    @property
    def events(self) -> Tuple[Event, ...]:
        return self._events

    def units(self) -> Set[Unit]:
        """All units appearing as source or target of any event."""
        units = set()
        for event in self._events:
            units.update(event.units())
        return units

    def and_(self, by):
        """Start a filtered view with every event included, then narrow it."""
        from ..filters.filtered_events import FilteredEvents

        return FilteredEvents.all_included(self).and_(by)

    def or_(self, by):
        """Start a filtered view with every event excluded, then widen it."""
        from ..filters.filtered_events import FilteredEvents

        return FilteredEvents.all_excluded(self).or_(by)

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[Event]:
        return iter(self._events)

    def __getitem__(self, index):
        return self._events[index]

    def __repr__(self) -> str:
        return f"CombatLog({len(self._events)} events, {len(self.parse_errors)} errors)"
