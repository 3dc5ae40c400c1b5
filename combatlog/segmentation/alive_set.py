"""
Single pass encounter segmentation driven by unit deaths.
"""

import logging
from typing import List, Optional, Sequence, Set

from ..parser.events import Event, EventType
from ..parser.units import Unit
from .encounters import Encounter, EncounterSegmenter

logger = logging.getLogger(__name__)


class AliveSetSegmenter(EncounterSegmenter):
    """
    Segments encounters by tracking which engaged units are still alive.

    An encounter opens on the first hostile event between a player and a
    non-player, and closes on the death that leaves either side without
    living engaged units. A death of a unit that is not tracked changes
    nothing, and a unit that died in one encounter can be pulled again in a
    later one.
    """

    def segment(self, events: Sequence[Event]) -> List[Encounter]:
        self.warnings = []
        events = events if isinstance(events, (list, tuple)) else tuple(events)

        encounters: List[Encounter] = []
        players: Set[Unit] = set()
        hostiles: Set[Unit] = set()
        start: Optional[int] = None
        last = 0

        for i, event in enumerate(events):
            if event.is_engagement():
                if event.source.is_player:
                    players.add(event.source)
                    hostiles.add(event.target)
                else:
                    players.add(event.target)
                    hostiles.add(event.source)
                if start is None:
                    start = i
            elif event.is_side_anomaly():
                self._report_anomaly(i, event)

            if start is None:
                continue

            if event.event_type is not EventType.ENVIRONMENTAL_DAMAGE and any(
                u in players or u in hostiles for u in event.units()
            ):
                last = i

            if event.is_death() and event.target is not None:
                dying = event.target
                tracked = players if dying.is_player else hostiles
                if dying in tracked:
                    tracked.discard(dying)
                    if not players or not hostiles:
                        encounters.append(Encounter.from_events(events[start : i + 1], start_index=start))
                        players.clear()
                        hostiles.clear()
                        start = None

        if start is not None:
            encounters.append(Encounter.from_events(events[start : last + 1], start_index=start))

        logger.debug(f"Found {len(encounters)} encounters by tracking alive units")
        return encounters
