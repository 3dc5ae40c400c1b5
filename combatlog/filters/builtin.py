"""
Ready made filters for common event selections.
"""

from datetime import datetime
from typing import Iterable, Optional

from ..parser.events import Event, EventType
from ..parser.units import Unit
from .base import Filter


class HostileFilter(Filter):
    """Harmful actions between opposing sides."""

    def check(self, event: Event) -> bool:
        return event.is_hostile()


class DamagingFilter(Filter):
    def check(self, event: Event) -> bool:
        return event.is_damaging()


class HealingFilter(Filter):
    def check(self, event: Event) -> bool:
        return event.is_healing()


class DeathFilter(Filter):
    def check(self, event: Event) -> bool:
        return event.is_death()


class EventTypeFilter(Filter):
    """Events of any of the given types."""

    def __init__(self, *event_types: EventType):
        self.event_types = frozenset(event_types)

    def check(self, event: Event) -> bool:
        return event.event_type in self.event_types


class SourceFilter(Filter):
    """Events done by one of the given units."""

    def __init__(self, *units: Unit):
        self.units = frozenset(units)

    def check(self, event: Event) -> bool:
        return event.source in self.units


class TargetFilter(Filter):
    """Events affecting one of the given units."""

    def __init__(self, *units: Unit):
        self.units = frozenset(units)

    def check(self, event: Event) -> bool:
        return event.target in self.units


class InvolvesFilter(Filter):
    """Events where any of the given units is source or target."""

    def __init__(self, units: Iterable[Unit]):
        self.units = frozenset(units)

    def check(self, event: Event) -> bool:
        return event.source in self.units or event.target in self.units


class PlayerSourceFilter(Filter):
    def check(self, event: Event) -> bool:
        return event.source is not None and event.source.is_player


class SpellFilter(Filter):
    """Events of a spell, by id or name."""

    def __init__(self, spell_id: Optional[int] = None, spell_name: Optional[str] = None):
        if spell_id is None and spell_name is None:
            raise ValueError("SpellFilter needs a spell_id or a spell_name")
        self.spell_id = spell_id
        self.spell_name = spell_name

    def check(self, event: Event) -> bool:
        if self.spell_id is not None and event.spell_id != self.spell_id:
            return False
        if self.spell_name is not None and event.spell_name != self.spell_name:
            return False
        return True


class TimeRangeFilter(Filter):
    """Events between two timestamps, both inclusive. Open ended if a bound is None."""

    def __init__(self, start: Optional[datetime] = None, end: Optional[datetime] = None):
        self.start = start
        self.end = end

    def check(self, event: Event) -> bool:
        if self.start is not None and event.timestamp < self.start:
            return False
        if self.end is not None and event.timestamp > self.end:
            return False
        return True
