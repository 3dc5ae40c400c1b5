"""
Filters and filtered views over combat log events.
"""

from .base import Filter, FunctionFilter, AllOf, AnyOf, Not, as_filter
from .builtin import (
    HostileFilter,
    DamagingFilter,
    HealingFilter,
    DeathFilter,
    EventTypeFilter,
    SourceFilter,
    TargetFilter,
    InvolvesFilter,
    PlayerSourceFilter,
    SpellFilter,
    TimeRangeFilter,
)
from .filtered_events import FilteredEvents

__all__ = [
    "Filter",
    "FunctionFilter",
    "AllOf",
    "AnyOf",
    "Not",
    "as_filter",
    "HostileFilter",
    "DamagingFilter",
    "HealingFilter",
    "DeathFilter",
    "EventTypeFilter",
    "SourceFilter",
    "TargetFilter",
    "InvolvesFilter",
    "PlayerSourceFilter",
    "SpellFilter",
    "TimeRangeFilter",
    "FilteredEvents",
]
