"""
Event types and the decoded event record for WoW combat logs.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from .units import Unit


class EventType(Enum):
    """Enumeration of known event types."""

    # Damage events
    SWING_DAMAGE = "SWING_DAMAGE"
    SWING_MISSED = "SWING_MISSED"
    RANGE_DAMAGE = "RANGE_DAMAGE"
    RANGE_MISSED = "RANGE_MISSED"
    SPELL_DAMAGE = "SPELL_DAMAGE"
    SPELL_MISSED = "SPELL_MISSED"
    SPELL_PERIODIC_DAMAGE = "SPELL_PERIODIC_DAMAGE"
    SPELL_PERIODIC_MISSED = "SPELL_PERIODIC_MISSED"
    DAMAGE_SHIELD = "DAMAGE_SHIELD"
    DAMAGE_SHIELD_MISSED = "DAMAGE_SHIELD_MISSED"
    DAMAGE_SPLIT = "DAMAGE_SPLIT"
    ENVIRONMENTAL_DAMAGE = "ENVIRONMENTAL_DAMAGE"

    # Healing and resources
    SPELL_HEAL = "SPELL_HEAL"
    SPELL_PERIODIC_HEAL = "SPELL_PERIODIC_HEAL"
    SPELL_ENERGIZE = "SPELL_ENERGIZE"
    SPELL_PERIODIC_ENERGIZE = "SPELL_PERIODIC_ENERGIZE"
    SPELL_DRAIN = "SPELL_DRAIN"
    SPELL_PERIODIC_DRAIN = "SPELL_PERIODIC_DRAIN"
    SPELL_LEECH = "SPELL_LEECH"
    SPELL_PERIODIC_LEECH = "SPELL_PERIODIC_LEECH"

    # Aura events
    SPELL_AURA_APPLIED = "SPELL_AURA_APPLIED"
    SPELL_AURA_APPLIED_DOSE = "SPELL_AURA_APPLIED_DOSE"
    SPELL_AURA_REMOVED = "SPELL_AURA_REMOVED"
    SPELL_AURA_REMOVED_DOSE = "SPELL_AURA_REMOVED_DOSE"
    SPELL_AURA_REFRESH = "SPELL_AURA_REFRESH"
    SPELL_AURA_BROKEN = "SPELL_AURA_BROKEN"
    SPELL_AURA_BROKEN_SPELL = "SPELL_AURA_BROKEN_SPELL"

    # Cast events
    SPELL_CAST_START = "SPELL_CAST_START"
    SPELL_CAST_SUCCESS = "SPELL_CAST_SUCCESS"
    SPELL_CAST_FAILED = "SPELL_CAST_FAILED"

    # Special events
    SPELL_INTERRUPT = "SPELL_INTERRUPT"
    SPELL_DISPEL = "SPELL_DISPEL"
    SPELL_DISPEL_FAILED = "SPELL_DISPEL_FAILED"
    SPELL_STOLEN = "SPELL_STOLEN"
    SPELL_EXTRA_ATTACKS = "SPELL_EXTRA_ATTACKS"
    SPELL_INSTAKILL = "SPELL_INSTAKILL"
    SPELL_SUMMON = "SPELL_SUMMON"
    SPELL_CREATE = "SPELL_CREATE"
    SPELL_RESURRECT = "SPELL_RESURRECT"
    ENCHANT_APPLIED = "ENCHANT_APPLIED"
    ENCHANT_REMOVED = "ENCHANT_REMOVED"

    # Unit state
    PARTY_KILL = "PARTY_KILL"
    UNIT_DIED = "UNIT_DIED"
    UNIT_DESTROYED = "UNIT_DESTROYED"

    @property
    def is_hostile(self) -> bool:
        """Harmful action between opposing sides. Environmental damage has no actor."""
        return self in HOSTILE_EVENT_TYPES

    @property
    def is_damaging(self) -> bool:
        """Event carries a damage amount."""
        return self in DAMAGING_EVENT_TYPES

    @property
    def is_healing(self) -> bool:
        """Event carries a healing amount."""
        return self in HEALING_EVENT_TYPES

    @property
    def is_death(self) -> bool:
        return self in DEATH_EVENT_TYPES

    @property
    def has_amount(self) -> bool:
        return self.is_damaging or self.is_healing

    @property
    def prefix(self) -> str:
        """Combat log prefix that determines the prefix parameter layout."""
        for prefix in ("SWING", "RANGE", "SPELL", "ENVIRONMENTAL"):
            if self.value.startswith(prefix + "_"):
                return prefix
        if self in (EventType.DAMAGE_SHIELD, EventType.DAMAGE_SHIELD_MISSED, EventType.DAMAGE_SPLIT):
            return "SPELL"
        return ""


HOSTILE_EVENT_TYPES = frozenset(
    {
        EventType.SWING_DAMAGE,
        EventType.SWING_MISSED,
        EventType.RANGE_DAMAGE,
        EventType.RANGE_MISSED,
        EventType.SPELL_DAMAGE,
        EventType.SPELL_MISSED,
        EventType.SPELL_PERIODIC_DAMAGE,
        EventType.SPELL_PERIODIC_MISSED,
        EventType.DAMAGE_SHIELD,
        EventType.DAMAGE_SHIELD_MISSED,
        EventType.SPELL_INTERRUPT,
        EventType.SPELL_STOLEN,
    }
)

DAMAGING_EVENT_TYPES = frozenset(
    {
        EventType.SWING_DAMAGE,
        EventType.RANGE_DAMAGE,
        EventType.SPELL_DAMAGE,
        EventType.SPELL_PERIODIC_DAMAGE,
        EventType.DAMAGE_SHIELD,
        EventType.DAMAGE_SPLIT,
        EventType.ENVIRONMENTAL_DAMAGE,
    }
)

HEALING_EVENT_TYPES = frozenset({EventType.SPELL_HEAL, EventType.SPELL_PERIODIC_HEAL})

DEATH_EVENT_TYPES = frozenset({EventType.UNIT_DIED, EventType.UNIT_DESTROYED})


@dataclass(frozen=True)
class Event:
    """One decoded combat log record."""

    timestamp: datetime
    event_type: EventType
    source: Optional[Unit] = None
    target: Optional[Unit] = None
    amount: Optional[int] = None
    spell_id: Optional[int] = None
    spell_name: Optional[str] = None
    raw_line: str = field(default="", repr=False, compare=False)

    def is_hostile(self) -> bool:
        return self.event_type.is_hostile

    def is_damaging(self) -> bool:
        return self.event_type.is_damaging

    def is_healing(self) -> bool:
        return self.event_type.is_healing

    def is_death(self) -> bool:
        return self.event_type.is_death

    def units(self):
        """Yield the source and target units that are present."""
        if self.source is not None:
            yield self.source
        if self.target is not None:
            yield self.target

    def involves(self, unit: Unit) -> bool:
        return self.source == unit or self.target == unit

    def is_engagement(self) -> bool:
        """Hostile event between a player and a non-player."""
        return (
            self.is_hostile()
            and self.source is not None
            and self.target is not None
            and self.source.is_opposed_to(self.target)
        )

    def is_side_anomaly(self) -> bool:
        """Hostile event whose source and target are on the same side."""
        return (
            self.is_hostile()
            and self.source is not None
            and self.target is not None
            and not self.source.is_opposed_to(self.target)
        )
