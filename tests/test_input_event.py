"""
Tests for the InputEvent dataclass.

Tests cover:
- Factory constructors for each event type
- Validation (timestamps, required fields)
- Immutability
- String representation
"""

import dataclasses

import pytest

from bearwatch.games.input import InputEvent
from bearwatch.models import EventType, Point2D


class TestInputEventConstruction:
    """Test InputEvent creation with valid data."""

    def test_click_factory(self):
        event = InputEvent.click(100, 200, timestamp=1.5)

        assert event.event_type == EventType.CLICK
        assert event.position == Point2D(x=100.0, y=200.0)
        assert event.timestamp == 1.5
        assert event.visible is None

    def test_click_outside_playfield_is_allowed(self):
        """Negative coordinates are ordinary points; the game decides what to do."""
        event = InputEvent.click(-10, -20, timestamp=0.0)
        assert event.position.x == -10.0

    def test_visibility_factory(self):
        event = InputEvent.visibility(False, timestamp=3.0)

        assert event.event_type == EventType.VISIBILITY
        assert event.visible is False
        assert event.position is None

    def test_reset_factory(self):
        event = InputEvent.reset(timestamp=0.0)

        assert event.event_type == EventType.RESET
        assert event.position is None
        assert event.visible is None


class TestInputEventValidation:
    """Test InputEvent validation rules."""

    def test_negative_timestamp_raises_error(self):
        with pytest.raises(ValueError, match='non-negative'):
            InputEvent.click(1, 1, timestamp=-0.5)

    def test_click_without_position_raises_error(self):
        with pytest.raises(ValueError, match='position'):
            InputEvent(EventType.CLICK, 1.0)

    def test_visibility_without_flag_raises_error(self):
        with pytest.raises(ValueError, match='visible'):
            InputEvent(EventType.VISIBILITY, 1.0)


class TestInputEventImmutability:
    """Test InputEvent is frozen."""

    def test_cannot_modify_timestamp(self):
        event = InputEvent.reset(timestamp=1.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            event.timestamp = 2.0  # type: ignore

    def test_equal_events_compare_equal(self):
        assert InputEvent.click(5, 6, 1.0) == InputEvent.click(5, 6, 1.0)


class TestInputEventString:
    """Test InputEvent string representation."""

    def test_click_str(self):
        text = str(InputEvent.click(100, 200, timestamp=1.5))
        assert "pos=(100.00, 200.00)" in text
        assert "type=click" in text

    def test_visibility_str(self):
        assert "visible=True" in str(InputEvent.visibility(True, 0.0))

    def test_reset_str(self):
        assert "type=reset" in str(InputEvent.reset(0.0))
