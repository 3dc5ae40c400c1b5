"""
Event filters: predicates deciding whether an event passes.
"""

from abc import ABC, abstractmethod
from typing import Callable, Union

from ..parser.events import Event


class Filter(ABC):
    """
    A predicate over a single event.

    Filters only look at the event's content, never at its position; the
    filtered view supplies the position bookkeeping. They combine with
    ``&``, ``|`` and ``~``.
    """

    @abstractmethod
    def check(self, event: Event) -> bool:
        """
        Check whether an event passes this filter.

        Returns:
            True if the event should be included, False if it should be excluded
        """

    def __call__(self, event: Event) -> bool:
        return self.check(event)

    def __and__(self, other: "FilterLike") -> "Filter":
        return AllOf(self, as_filter(other))

    def __or__(self, other: "FilterLike") -> "Filter":
        return AnyOf(self, as_filter(other))

    def __invert__(self) -> "Filter":
        return Not(self)


FilterLike = Union[Filter, Callable[[Event], bool]]


class FunctionFilter(Filter):
    """Wraps a plain callable as a Filter."""

    def __init__(self, func: Callable[[Event], bool]):
        self.func = func

    def check(self, event: Event) -> bool:
        return bool(self.func(event))

    def __repr__(self) -> str:
        return f"FunctionFilter({getattr(self.func, '__name__', self.func)!r})"


class AllOf(Filter):
    """Passes when every inner filter passes. Stops at the first failure."""

    def __init__(self, *filters: Filter):
        self.filters = filters

    def check(self, event: Event) -> bool:
        return all(f.check(event) for f in self.filters)


class AnyOf(Filter):
    """Passes when any inner filter passes. Stops at the first success."""

    def __init__(self, *filters: Filter):
        self.filters = filters

    def check(self, event: Event) -> bool:
        return any(f.check(event) for f in self.filters)


class Not(Filter):
    def __init__(self, inner: Filter):
        self.inner = inner

    def check(self, event: Event) -> bool:
        return not self.inner.check(event)


def as_filter(by: FilterLike) -> Filter:
    """Accept either a Filter or a plain callable."""
    if isinstance(by, Filter):
        return by
    if callable(by):
        return FunctionFilter(by)
    raise TypeError(f"Expected a Filter or callable, got {type(by).__name__}")
