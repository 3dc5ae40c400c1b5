"""
Combat log toolkit for World of Warcraft combat logs.

Splits a combat log into encounters, builds filtered views over its events
and extracts per-unit damage and healing totals.
"""

__version__ = "0.1.0"

from .parser import CombatLog, CombatLogParser, Event, EventType, LogParseError, Unit
from .segmentation import AliveSetSegmenter, Encounter, EncounterSegmenter, segment
from .filters import Filter, FilteredEvents
from .analysis import damage_dealt, healing_done

__all__ = [
    "CombatLog",
    "CombatLogParser",
    "Event",
    "EventType",
    "LogParseError",
    "Unit",
    "Encounter",
    "EncounterSegmenter",
    "AliveSetSegmenter",
    "segment",
    "Filter",
    "FilteredEvents",
    "damage_dealt",
    "healing_done",
]
