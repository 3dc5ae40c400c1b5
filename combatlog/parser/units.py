"""
Unit identity for combat log participants.
"""

import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

# Players live in the lower 32 bits of the GUID space, creatures above it.
PLAYER_ID_MAX = 0xFFFFFFFF


@dataclass(frozen=True)
class Unit:
    """A participant in the combat log, identified by GUID and display name."""

    id: int
    name: str

    @classmethod
    def from_raw(cls, raw_id: Optional[str], raw_name: Optional[str]) -> Optional["Unit"]:
        """
        Convert the raw GUID and name fields of a log line into a Unit.

        Args:
            raw_id: Hex encoded GUID such as "0x000000000014EABC"
            raw_name: Unit name, optionally quoted, or "nil"

        Returns:
            Unit, or None if the fields do not point to one
        """
        if raw_id is None or not raw_id.startswith("0x"):
            logger.warning(f"Invalid unit id detected: {raw_id}")
            return None

        try:
            unit_id = int(raw_id[2:], 16)
        except ValueError as e:
            logger.error(f"Error parsing unit id {raw_id}: {e}")
            return None

        if raw_name is None:
            return None
        name = raw_name.strip('"')
        if unit_id == 0 or name == "nil":
            return None

        return cls(id=unit_id, name=name)

    @property
    def is_player(self) -> bool:
        """
        Check if this unit represents a player.

        Players occupy the lower id spectrum and creatures the higher one. This
        is a heuristic taken from observed logs, not a documented guarantee.
        """
        return self.id <= PLAYER_ID_MAX

    def is_opposed_to(self, other: "Unit") -> bool:
        """Check if the two units are on opposite sides."""
        return self.is_player != other.is_player

    def __str__(self) -> str:
        return f"[{self.id:x}, \"{self.name}\"]"
