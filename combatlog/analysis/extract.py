"""
Extraction of per-unit totals from event streams.

Every function here is a single pass fold and works on any iterable of
events: a whole log, an encounter or a filtered view.
"""

from collections import defaultdict
from typing import Callable, Dict, Iterable

from ..parser.events import Event
from ..parser.units import Unit


class MissingAmountError(ValueError):
    """A damaging or healing event has no amount. The decoder broke its contract."""


def _amount_of(event: Event) -> int:
    if event.amount is None:
        raise MissingAmountError(
            f"{event.event_type.value} event does not have an amount: {event.raw_line or event!r}"
        )
    return event.amount


def _sum_by_source(unit: Unit, events: Iterable[Event], predicate: Callable[[Event], bool]) -> int:
    total = 0
    for event in events:
        if event.source == unit and predicate(event):
            total += _amount_of(event)
    return total


def damage_dealt(unit: Unit, events: Iterable[Event]) -> int:
    """
    Total damage done by a unit.

    Args:
        unit: The unit whose damage is summed
        events: Events to look at

    Returns:
        Sum of the amounts of all damaging events with the unit as source

    Raises:
        MissingAmountError: If a matching event carries no amount
    """
    return _sum_by_source(unit, events, Event.is_damaging)


def healing_done(unit: Unit, events: Iterable[Event]) -> int:
    """
    Total healing done by a unit, overhealing included.

    Raises:
        MissingAmountError: If a matching event carries no amount
    """
    return _sum_by_source(unit, events, Event.is_healing)


def _totals_by_source(events: Iterable[Event], predicate: Callable[[Event], bool]) -> Dict[Unit, int]:
    totals: Dict[Unit, int] = defaultdict(int)
    for event in events:
        if event.source is not None and predicate(event):
            totals[event.source] += _amount_of(event)
    return dict(totals)


def damage_by_source(events: Iterable[Event]) -> Dict[Unit, int]:
    """Damage done per source unit in one pass."""
    return _totals_by_source(events, Event.is_damaging)


def healing_by_source(events: Iterable[Event]) -> Dict[Unit, int]:
    """Healing done per source unit in one pass."""
    return _totals_by_source(events, Event.is_healing)
