"""
Filtered views over a combat log.

A view never copies or reorders events. It keeps one inclusion flag per
position of the underlying log and narrows or widens that mask as filters are
applied.
"""

from typing import Iterator, List, Sequence, Tuple

from ..parser.events import Event
from .base import FilterLike, as_filter


class FilteredEvents:
    """
    A subset of a fixed event stream, represented as an inclusion mask.

    The view refers to the stream, it does not own it. Chained ``and_`` and
    ``or_`` calls must not be interleaved from several threads on the same
    view; once composition is done the view can be read concurrently.
    """

    def __init__(self, log: Sequence[Event], include: Sequence[bool]):
        """
        Create a view.

        Args:
            log: The event stream this view is based upon
            include: One flag per event, True where the event is included
        """
        if len(include) != len(log):
            raise ValueError(
                f"Inclusion mask length {len(include)} does not match {len(log)} events"
            )
        self.log = log
        self._include = bytearray(1 if flag else 0 for flag in include)

    @classmethod
    def all_included(cls, log: Sequence[Event]) -> "FilteredEvents":
        return cls(log, [True] * len(log))

    @classmethod
    def all_excluded(cls, log: Sequence[Event]) -> "FilteredEvents":
        return cls(log, [False] * len(log))

    def and_(self, by: FilterLike) -> "FilteredEvents":
        """
        Exclude every included event that fails the filter.

        Excluded positions are skipped without calling the filter, since the
        flag check is much cheaper than most filters.
        """
        check = as_filter(by).check
        include = self._include
        for i, event in enumerate(self.log):
            if include[i] and not check(event):
                include[i] = 0
        return self

    def or_(self, by: FilterLike) -> "FilteredEvents":
        """
        Include every excluded event that passes the filter.

        Included positions are skipped without calling the filter.
        """
        check = as_filter(by).check
        include = self._include
        for i, event in enumerate(self.log):
            if not include[i] and check(event):
                include[i] = 1
        return self

    @property
    def mask(self) -> Tuple[bool, ...]:
        return tuple(bool(flag) for flag in self._include)

    def is_included(self, index: int) -> bool:
        return bool(self._include[index])

    def indices(self) -> List[int]:
        """Positions of included events, in log order."""
        return [i for i, flag in enumerate(self._include) if flag]

    def events(self) -> List[Event]:
        """Included events, in log order."""
        return list(self)

    def __iter__(self) -> Iterator[Event]:
        for i, event in enumerate(self.log):
            if self._include[i]:
                yield event

    def __len__(self) -> int:
        return sum(self._include)

    def __repr__(self) -> str:
        return f"FilteredEvents({len(self)} of {len(self._include)} events)"
