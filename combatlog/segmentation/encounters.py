"""
Encounter detection and segmentation for combat logs.

An encounter starts when no other encounter is active and a hostile event
between a player and a non-player is seen. It lasts as long as any hostile
unit pulled into it keeps appearing in the log.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Dict, FrozenSet, Iterable, List, Optional, Sequence, Tuple

from ..parser.events import Event, EventType
from ..parser.units import Unit

logger = logging.getLogger(__name__)

LifeWindow = Tuple[int, int]


@dataclass(frozen=True)
class SegmentationWarning:
    """A data anomaly found while segmenting. Never fatal."""

    index: int
    event: Event
    reason: str

    def __str__(self) -> str:
        return f"event {self.index} ({self.event.event_type.value}): {self.reason}"


WarningSink = Callable[[SegmentationWarning], None]


@dataclass(frozen=True)
class Encounter:
    """
    One continuous engagement between players and hostile units.

    Holds its own copy of the event slice, so it stays valid after the source
    log is discarded.
    """

    events: Tuple[Event, ...]
    involved: FrozenSet[Unit]
    start_index: int = 0
    end_index: int = -1

    @classmethod
    def from_events(cls, events: Iterable[Event], start_index: int = 0) -> "Encounter":
        """
        Build an encounter from an event slice.

        Args:
            events: The events of the encounter, in log order
            start_index: Position of the first event in the source log
        """
        events = tuple(events)
        involved = set()
        for event in events:
            involved.update(event.units())
        return cls(
            events=events,
            involved=frozenset(involved),
            start_index=start_index,
            end_index=start_index + len(events) - 1,
        )

    @property
    def players(self) -> FrozenSet[Unit]:
        return frozenset(u for u in self.involved if u.is_player)

    @property
    def hostiles(self) -> FrozenSet[Unit]:
        return frozenset(u for u in self.involved if not u.is_player)

    @property
    def start_time(self) -> Optional[datetime]:
        return self.events[0].timestamp if self.events else None

    @property
    def end_time(self) -> Optional[datetime]:
        return self.events[-1].timestamp if self.events else None

    @property
    def duration(self) -> float:
        """Duration in seconds."""
        if not self.events:
            return 0.0
        return (self.end_time - self.start_time).total_seconds()

    def get_duration_str(self) -> str:
        """Get human-readable duration string."""
        minutes = int(self.duration // 60)
        seconds = int(self.duration % 60)
        return f"{minutes}:{seconds:02d}"

    def __len__(self) -> int:
        return len(self.events)

    def __iter__(self):
        return iter(self.events)


def compute_life_windows(
    events: Sequence[Event], on_anomaly: Optional[Callable[[int, Event], None]] = None
) -> Dict[Unit, LifeWindow]:
    """
    Record the lives of all hostile units pulled by players.

    A life starts at the first hostile event between the unit and a player and
    ends at the last event, hostile or not, the unit takes part in. Environmental
    damage neither starts nor extends a life. The last appearance is
    considered the end of its life even without a death event.

    Args:
        events: The full event stream
        on_anomaly: Called with (index, event) for hostile events between two
            units of the same side

    Returns:
        Mapping of hostile unit to its (first, last) event index
    """
    starts: Dict[Unit, int] = {}
    for i, event in enumerate(events):
        if not event.is_hostile() or event.source is None or event.target is None:
            continue

        source, target = event.source, event.target
        if source.is_player and not target.is_player:
            starts.setdefault(target, i)
        elif target.is_player and not source.is_player:
            starts.setdefault(source, i)
        elif on_anomaly is not None:
            on_anomaly(i, event)

    windows: Dict[Unit, LifeWindow] = {}
    if not starts:
        return windows

    # Walk backwards so the first hit per unit is its last appearance
    for i in range(len(events) - 1, -1, -1):
        if events[i].event_type is EventType.ENVIRONMENTAL_DAMAGE:
            continue
        for unit in events[i].units():
            if unit in starts and unit not in windows:
                windows[unit] = (starts[unit], i)
        if len(windows) == len(starts):
            break

    return windows


def merge_windows(windows: Iterable[LifeWindow]) -> List[LifeWindow]:
    """
    Connect overlapping life windows into encounter spans.

    A window that starts while the current span is still running, including
    on its very last event, extends that span. Otherwise it starts a new one.

    Args:
        windows: (start, end) index pairs in any order

    Returns:
        Disjoint (start, end) spans in log order
    """
    ordered = sorted(windows)
    if not ordered:
        return []

    spans = []
    current_start, current_end = ordered[0]
    for life_start, life_end in ordered[1:]:
        if life_start <= current_end:
            current_end = max(life_end, current_end)
        else:
            spans.append((current_start, current_end))
            current_start, current_end = life_start, life_end

    spans.append((current_start, current_end))
    return spans


class EncounterSegmenter:
    """
    Splits an event stream into encounters by merging hostile life windows.

    The stream is read twice: once forward to find where each hostile unit is
    pulled, once backward to find its last appearance. The result depends only
    on event order, so re-running on the same log always gives the same
    encounters.
    """

    def __init__(self, on_warning: Optional[WarningSink] = None):
        """
        Initialize the encounter segmenter.

        Args:
            on_warning: Optional sink receiving each anomaly as it is found
        """
        self.on_warning = on_warning
        self.warnings: List[SegmentationWarning] = []

    def segment(self, events: Sequence[Event]) -> List[Encounter]:
        """
        Split the given events into all encounters contained within.

        Args:
            events: The full, ordered event stream

        Returns:
            Encounters in log order
        """
        self.warnings = []
        events = events if isinstance(events, (list, tuple)) else tuple(events)

        windows = compute_life_windows(events, on_anomaly=self._report_anomaly)
        spans = merge_windows(windows.values())

        encounters = [
            Encounter.from_events(events[start : end + 1], start_index=start) for start, end in spans
        ]
        logger.debug(f"Found {len(encounters)} encounters from {len(windows)} hostile units")
        return encounters

    def _report_anomaly(self, index: int, event: Event):
        side = "players" if event.source.is_player else "non-players"
        warning = SegmentationWarning(
            index=index,
            event=event,
            reason=f"hostile event between two {side}: {event.source} -> {event.target}",
        )
        self._warn(warning)

    def _warn(self, warning: SegmentationWarning):
        self.warnings.append(warning)
        logger.warning(f"Segmentation anomaly at {warning}")
        if self.on_warning is not None:
            self.on_warning(warning)


def segment(events: Sequence[Event], on_warning: Optional[WarningSink] = None) -> List[Encounter]:
    """Split events into encounters using life window merging."""
    return EncounterSegmenter(on_warning=on_warning).segment(events)
