"""
Tests for the primitive pydantic models and ChaseConfig.

Tests cover:
- Point2D, Extent and Resolution construction and validation
- Immutability
- Resolution parsing
- ChaseConfig defaults, ranges and derived values
"""

import pytest
from pydantic import ValidationError

from bearwatch.models import ChaseConfig, Extent, Point2D, Resolution, Vector2D


class TestPoint2D:

    def test_negative_coordinates_allowed(self):
        p = Point2D(x=-15.0, y=2000.0)
        assert p.x == -15.0

    def test_int_coerced_to_float(self):
        p = Point2D(x=3, y=4)
        assert isinstance(p.x, float)

    def test_frozen(self):
        p = Point2D(x=1.0, y=2.0)
        with pytest.raises(ValidationError):
            p.x = 5.0  # type: ignore

    def test_vector_alias(self):
        assert Vector2D is Point2D

    def test_str(self):
        assert str(Point2D(x=1.0, y=2.5)) == "Point2D(x=1.00, y=2.50)"


class TestExtent:

    def test_half_sizes(self):
        bear = Extent(width=225, height=180)
        assert bear.half_width == 112.5
        assert bear.half_height == 90.0

    @pytest.mark.parametrize("width,height", [(0, 10), (10, 0), (-5, 10)])
    def test_non_positive_rejected(self, width, height):
        with pytest.raises(ValidationError):
            Extent(width=width, height=height)


class TestResolution:

    def test_parse(self):
        res = Resolution.parse("1920x1080")
        assert (res.width, res.height) == (1920, 1080)

    def test_parse_is_case_insensitive(self):
        assert Resolution.parse("800X600") == Resolution(width=800, height=600)

    @pytest.mark.parametrize("text", ["1920", "axb", "0x600", "1x2x3"])
    def test_parse_rejects_bad_input(self, text):
        with pytest.raises(ValueError):
            Resolution.parse(text)

    def test_aspect_ratio(self):
        assert Resolution(width=1280, height=720).aspect_ratio == pytest.approx(16 / 9)


class TestChaseConfig:

    def test_defaults(self):
        chase = ChaseConfig()
        assert chase.avatar_ease == 0.2
        assert chase.guardian_speed == 30.0
        assert chase.chase_radius == 200.0
        assert chase.catch_radius == 80.0
        assert chase.flash_duration_ms == 200
        assert chase.target_count == 5
        assert chase.avatar_size == Extent(width=90, height=70)
        assert chase.guardian_size == Extent(width=225, height=180)

    def test_derived_values(self):
        chase = ChaseConfig(flash_duration_ms=250)
        assert chase.flash_duration == 0.25
        assert chase.home_separation == 160.0

    def test_ease_of_one_is_allowed(self):
        assert ChaseConfig(avatar_ease=1.0).avatar_ease == 1.0

    @pytest.mark.parametrize("field,value", [
        ('avatar_ease', 0.0),
        ('avatar_ease', 1.5),
        ('guardian_speed', 0.0),
        ('chase_radius', -1.0),
        ('catch_radius', 0.0),
        ('flash_duration_ms', -1),
        ('target_count', 0),
    ])
    def test_out_of_range_rejected(self, field, value):
        with pytest.raises(ValidationError):
            ChaseConfig(**{field: value})

    def test_frozen(self):
        chase = ChaseConfig()
        with pytest.raises(ValidationError):
            chase.guardian_speed = 10.0  # type: ignore
