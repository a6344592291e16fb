"""
Tests for the started_less_than_seconds_ago recency filter.

Time is frozen with unittest.mock.patch so thresholds are exact.
"""

import logging
from unittest.mock import patch

from filters import get_filter, is_recently_started
from filters.recency import DEFAULT_SECONDS, started_less_than_seconds_ago
from models.event import SensuEvent

NOW = 1_700_000_000.0


def _event(started_at=None, entity_started_at=None, annotations=True):
    entity = {"metadata": {"name": "web-01", "namespace": "default"}}
    if annotations:
        entity["annotations"] = {}
    if entity_started_at is not None:
        entity["started_at"] = entity_started_at
    event = {"entity": entity}
    if started_at is not None:
        event["started_at"] = started_at
    return event


def _check(event, seconds=None):
    with patch("filters.recency.time.time", return_value=NOW):
        return started_less_than_seconds_ago(event, seconds)


class TestPresenceGates:
    def test_no_annotations_is_false(self):
        event = _event(started_at=NOW - 10, entity_started_at=NOW - 10, annotations=False)
        assert _check(event, 600) is False

    def test_annotations_without_started_at_is_false(self):
        event = _event(started_at=NOW - 10)
        assert _check(event, 600) is False

    def test_annotation_value_is_not_inspected(self):
        event = _event(started_at=NOW - 10, entity_started_at=NOW - 10)
        event["entity"]["annotations"] = None
        assert _check(event, 600) is True


class TestElapsedSource:
    """
    Presence is checked on entity.started_at but elapsed time is read from the
    event's top-level started_at. Pinned here until the intended field is confirmed.
    """

    def test_uses_top_level_started_at(self):
        event = _event(started_at=NOW - 100, entity_started_at=NOW - 5000)
        assert _check(event, 600) is True

    def test_ignores_entity_started_at_value(self):
        event = _event(started_at=NOW - 5000, entity_started_at=NOW - 100)
        assert _check(event, 600) is False

    def test_missing_top_level_started_at_is_false(self):
        # {entity: {annotations: {}, started_at: now - 100}} with no top-level field
        event = _event(entity_started_at=NOW - 100)
        assert _check(event, 600) is False

    def test_old_entity_is_false(self):
        event = _event(started_at=NOW - 5000, entity_started_at=NOW - 5000)
        assert _check(event, 600) is False

    def test_threshold_is_exclusive(self):
        event = _event(started_at=NOW - 600, entity_started_at=NOW - 600)
        assert _check(event, 600) is False
        event = _event(started_at=NOW - 599, entity_started_at=NOW - 599)
        assert _check(event, 600) is True

    def test_numeric_string_timestamp(self):
        event = _event(started_at=str(int(NOW - 30)), entity_started_at=NOW - 30)
        assert _check(event, 600) is True


class TestThreshold:
    def test_default_is_600(self):
        assert DEFAULT_SECONDS == 600
        assert _check(_event(started_at=NOW - 599, entity_started_at=NOW - 599)) is True
        assert _check(_event(started_at=NOW - 601, entity_started_at=NOW - 601)) is False

    def test_zero_falls_back_to_default(self):
        event = _event(started_at=NOW - 300, entity_started_at=NOW - 300)
        assert _check(event, 0) is True

    def test_custom_threshold(self):
        event = _event(started_at=NOW - 1000, entity_started_at=NOW - 1000)
        assert _check(event, 1800) is True
        assert _check(event, 900) is False


class TestMalformedInput:
    def test_none_event(self, caplog):
        with caplog.at_level(logging.WARNING, logger="filters.recency"):
            assert _check(None) is False
        assert "Failed to get entity annotations" in caplog.text

    def test_missing_entity(self):
        assert _check({"started_at": NOW}) is False

    def test_entity_not_a_mapping(self, caplog):
        with caplog.at_level(logging.WARNING, logger="filters.recency"):
            assert _check({"entity": ["annotations", "started_at"], "started_at": NOW}) is False
        assert "Failed to get entity annotations" in caplog.text

    def test_non_numeric_started_at(self, caplog):
        event = _event(started_at="yesterday", entity_started_at=NOW)
        with caplog.at_level(logging.WARNING, logger="filters.recency"):
            assert _check(event) is False
        assert "Failed to get entity annotations" in caplog.text

    def test_non_dict_event(self):
        assert _check("not an event") is False
        assert _check(42) is False

    def test_huge_started_at(self, caplog):
        event = _event(started_at=10**400, entity_started_at=1)
        with caplog.at_level(logging.WARNING, logger="filters.recency"):
            assert _check(event, 600) is False
        assert "Failed to get entity annotations" in caplog.text

    def test_entity_property_raises(self, caplog):
        class Broken:
            @property
            def entity(self):
                raise RuntimeError("backend gone")

        with caplog.at_level(logging.WARNING, logger="filters.recency"):
            assert _check(Broken()) is False
        assert "backend gone" in caplog.text

    def test_started_at_property_raises(self):
        class Broken:
            entity = {"annotations": {}, "started_at": NOW}

            @property
            def started_at(self):
                raise RuntimeError("backend gone")

        assert _check(Broken()) is False

    def test_input_not_mutated(self):
        event = _event(started_at=NOW - 10, entity_started_at=NOW - 10)
        snapshot = {"entity": dict(event["entity"]), "started_at": event["started_at"]}
        _check(event)
        assert event == snapshot


class TestEventShapes:
    def test_pydantic_event(self):
        event = SensuEvent.model_validate(_event(started_at=NOW - 10, entity_started_at=NOW - 10))
        assert _check(event) is True

    def test_attribute_style_event(self):
        class Obj:
            entity = {"annotations": {}, "started_at": NOW - 10}
            started_at = NOW - 10

        assert _check(Obj()) is True

    def test_real_clock(self):
        import time

        now = time.time()
        assert is_recently_started(_event(started_at=now - 100, entity_started_at=now - 100), 600) is True
        assert is_recently_started(_event(started_at=now - 5000, entity_started_at=now - 5000), 600) is False

    def test_registry_lookup(self):
        assert get_filter("started_less_than_seconds_ago") is started_less_than_seconds_ago
