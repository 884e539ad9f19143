"""Tests for the property registry and the settings field descriptors."""

import dataclasses

import pytest

from surfacecss.model.settings import (
    DEFAULT_SETTINGS,
    SETTINGS_TYPES,
    EffectMode,
    FieldKind,
)
from surfacecss.registry import (
    PROPERTIES_BY_MODE,
    SETTING_FIELDS,
    SETTING_RANGES,
    is_known_property,
    range_for,
)

ALL_MODES = list(EffectMode)


class TestVocabulary:
    def test_every_mode_registered(self) -> None:
        assert set(PROPERTIES_BY_MODE) == set(EffectMode)
        assert set(SETTING_RANGES) == set(EffectMode)

    def test_neumorphism_vocabulary(self) -> None:
        assert set(PROPERTIES_BY_MODE[EffectMode.NEUMORPHISM]) == {
            "background",
            "border-radius",
            "box-shadow",
        }

    @pytest.mark.parametrize("mode", [EffectMode.LIQUID_GLASS, EffectMode.GLASSMORPHISM, EffectMode.GLOW])
    def test_translucent_modes_know_webkit_alias(self, mode: EffectMode) -> None:
        assert is_known_property(mode, "backdrop-filter")
        assert is_known_property(mode, "-webkit-backdrop-filter")

    def test_unknown_property(self) -> None:
        assert not is_known_property(EffectMode.GLOW, "position")

    def test_tables_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            PROPERTIES_BY_MODE[EffectMode.GLOW]["color"] = "x"  # type: ignore[index]
        with pytest.raises(TypeError):
            SETTING_RANGES[EffectMode.GLOW]["blur"] = (0, 1)  # type: ignore[index]


class TestRanges:
    def test_known_ranges(self) -> None:
        assert range_for(EffectMode.GLASSMORPHISM, "blur") == (0, 50)
        assert range_for(EffectMode.LIQUID_GLASS, "blur") == (0, 60)
        assert range_for(EffectMode.NEUMORPHISM, "distance") == (1, 20)
        assert range_for(EffectMode.GLOW, "glow_blur") == (0, 200)

    def test_unranged_field(self) -> None:
        assert range_for(EffectMode.GLOW, "bg_color") is None

    @pytest.mark.parametrize("mode", ALL_MODES)
    def test_defaults_within_ranges(self, mode: EffectMode) -> None:
        defaults = DEFAULT_SETTINGS[mode]
        for name, (low, high) in SETTING_RANGES[mode].items():
            assert low <= getattr(defaults, name) <= high, name


class TestFieldDescriptors:
    @pytest.mark.parametrize("mode", ALL_MODES)
    def test_descriptors_match_dataclass(self, mode: EffectMode) -> None:
        names = [f.name for f in dataclasses.fields(SETTINGS_TYPES[mode])]
        assert [spec.name for spec in SETTING_FIELDS[mode]] == names

    @pytest.mark.parametrize("mode", ALL_MODES)
    def test_ranges_only_on_numeric_fields(self, mode: EffectMode) -> None:
        for spec in SETTING_FIELDS[mode]:
            if spec.range is not None:
                assert spec.kind is FieldKind.NUMERIC
            assert spec.range == SETTING_RANGES[mode].get(spec.name)

    def test_kinds(self) -> None:
        kinds = {spec.name: spec.kind for spec in SETTING_FIELDS[EffectMode.NEUMORPHISM]}
        assert kinds["bg_color"] is FieldKind.COLOR
        assert kinds["shape"] is FieldKind.ENUM
        assert kinds["distance"] is FieldKind.NUMERIC

    @pytest.mark.parametrize("mode", ALL_MODES)
    def test_color_defaults_are_hex(self, mode: EffectMode) -> None:
        defaults = DEFAULT_SETTINGS[mode]
        for spec in SETTING_FIELDS[mode]:
            if spec.kind is FieldKind.COLOR:
                value = getattr(defaults, spec.name)
                assert value.startswith("#") and len(value) == 7
