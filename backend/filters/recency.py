"""
Recency filter — was the event's entity started within the last N seconds?

Used as a Sensu event filter: handlers only fire for entities that came up
recently (e.g. to silence freshly provisioned hosts while they settle).

Accepts the raw event mapping posted by Sensu, or any object exposing an
`entity` attribute. Missing keys are an expected state and simply yield
False. Malformed input is logged and also yields False; nothing is raised.

NOTE: presence is checked on entity["started_at"], but the elapsed time is
computed from the event's top-level started_at. Earlier versions of this filter did the
same and it is most likely a defect. It is kept as-is until the filter's
owners confirm which field is intended; tests pin the current behaviour.
"""

import logging
import time
from collections.abc import Mapping
from typing import Any, Optional

from pydantic import BaseModel

logger = logging.getLogger(__name__)

DEFAULT_SECONDS = 600


def _field(obj: Any, name: str) -> Any:
    """Read `name` off a mapping or an attribute-style object, None if absent."""
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def started_less_than_seconds_ago(event: Any, seconds: Optional[int] = None) -> bool:
    """
    True iff the entity carries "annotations" and "started_at" keys and the
    event's started_at lies less than `seconds` ago.

    A falsy `seconds` (None or 0) falls back to DEFAULT_SECONDS.
    """
    seconds = seconds or DEFAULT_SECONDS

    try:
        entity = _field(event, "entity")
        if isinstance(entity, BaseModel):
            entity = entity.model_dump(exclude_unset=True)
    except Exception as exc:
        logger.warning("Failed to get entity annotations: %s", exc)
        return False

    if not isinstance(entity, Mapping):
        logger.warning(
            "Failed to get entity annotations: expected a mapping for event.entity, got %s",
            type(entity).__name__,
        )
        return False

    if "annotations" not in entity or "started_at" not in entity:
        return False

    # Top-level field, see module docstring
    try:
        started_at = _field(event, "started_at")
        if started_at is None:
            return False
        return (time.time() - float(started_at)) < seconds
    except Exception as exc:
        logger.warning("Failed to get entity annotations: %s", exc)
        return False


is_recently_started = started_less_than_seconds_ago
