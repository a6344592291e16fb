"""
Named event filters.

Each filter takes a raw Sensu event plus an optional threshold and returns
whether the event passes. Routes look filters up by name.
"""

from typing import Any, Callable, Optional

from filters.recency import DEFAULT_SECONDS, is_recently_started, started_less_than_seconds_ago

EventFilter = Callable[[Any, Optional[int]], bool]

FILTERS: dict[str, EventFilter] = {
    "started_less_than_seconds_ago": started_less_than_seconds_ago,
}


class UnknownFilterError(KeyError):
    pass


def get_filter(name: str) -> EventFilter:
    try:
        return FILTERS[name]
    except KeyError:
        raise UnknownFilterError(name) from None


__all__ = [
    "DEFAULT_SECONDS",
    "FILTERS",
    "EventFilter",
    "UnknownFilterError",
    "get_filter",
    "is_recently_started",
    "started_less_than_seconds_ago",
]
