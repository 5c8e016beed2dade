"""Unit tests for render settings and quality presets.

Tests cover:
- Defaults and derived image height
- Preset lookup and overrides
- Validation of every field
"""

import pytest

from pathtracer.core.settings import QUALITY_PRESETS, RenderSettings


class TestRenderSettings:
    """Tests for RenderSettings."""

    def test_defaults(self):
        settings = RenderSettings()
        assert settings.width == 300
        assert settings.height == 300
        assert settings.workers == 1
        assert settings.axis_mode == "random"

    def test_height_from_aspect_ratio(self):
        assert RenderSettings(width=320, aspect_ratio=2.0).height == 160

    def test_height_at_least_one(self):
        assert RenderSettings(width=2, aspect_ratio=10.0).height == 1

    @pytest.mark.parametrize("field, value", [
        ("width", 0),
        ("aspect_ratio", -1.0),
        ("samples_per_pixel", 0),
        ("max_depth", 0),
        ("workers", 0),
        ("axis_mode", "sah"),
    ])
    def test_invalid_values_rejected(self, field, value):
        with pytest.raises(ValueError):
            RenderSettings(**{field: value})


class TestPresets:
    """Tests for quality presets."""

    @pytest.mark.parametrize("name", sorted(QUALITY_PRESETS))
    def test_presets_apply(self, name):
        settings = RenderSettings.from_preset(name)
        assert settings.width == QUALITY_PRESETS[name]["width"]
        assert settings.samples_per_pixel == QUALITY_PRESETS[name]["samples_per_pixel"]
        assert settings.max_depth == QUALITY_PRESETS[name]["max_depth"]

    def test_overrides_win_and_none_is_ignored(self):
        settings = RenderSettings.from_preset("preview", width=64, samples_per_pixel=None)
        assert settings.width == 64
        assert settings.samples_per_pixel == QUALITY_PRESETS["preview"]["samples_per_pixel"]

    def test_unknown_preset(self):
        with pytest.raises(ValueError):
            RenderSettings.from_preset("ultra")

    def test_with_overrides(self):
        settings = RenderSettings().with_overrides(seed=5, workers=None)
        assert settings.seed == 5
        assert settings.workers == 1
