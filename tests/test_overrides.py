from __future__ import annotations

from duskmode.themes.presets import get_preset, theme_ids
from duskmode.tokens.classes import split_classes
from duskmode.tokens.overrides import (
    THEME_OVERRIDES,
    build_overrides,
    dark_class_for,
    overrides_for,
    resolve,
)


def test_override_keys_are_unique() -> None:
    keys = [(record.theme_id, record.token) for record in THEME_OVERRIDES]
    assert len(keys) == len(set(keys))


def test_every_replacement_is_a_light_dark_pair() -> None:
    for record in THEME_OVERRIDES:
        parts = split_classes(record.replacement)
        assert parts[0] == record.token
        assert len(parts) == 2
        assert parts[1].startswith("dark:")


def test_every_preset_overrides_the_page_background() -> None:
    for theme_id in theme_ids():
        assert resolve("bg-white", theme_id) is not None


def test_named_and_literal_overrides() -> None:
    assert resolve("bg-white", "vercel") == "bg-white dark:bg-black"
    assert resolve("bg-white", "v0") == "bg-white dark:bg-[oklch(0.145_0_0)]"
    assert resolve("text-gray-600", "openai") == "text-gray-600 dark:text-[#424242]"


def test_slot_derived_overrides_use_preset_palette() -> None:
    assert resolve("bg-white", "custom") == "bg-white dark:bg-gray-900"
    assert resolve("text-black", "openai") == "text-black dark:text-[#f7fafc]"


def test_resolve_misses() -> None:
    assert resolve("p-4", "vercel") is None
    assert resolve("bg-white", "unknown") is None


def test_explicit_records_are_not_replaced_by_slot_records() -> None:
    records = build_overrides([get_preset("vercel")])
    vercel_bg = [r for r in records if r.theme_id == "vercel" and r.token == "bg-white"]
    assert len(vercel_bg) == 1
    assert vercel_bg[0].replacement == "bg-white dark:bg-black"


def test_dark_class_for_names_palette_colours() -> None:
    assert dark_class_for("bg", "#111827") == "bg-gray-900"
    assert dark_class_for("text", "#FFFFFF") == "text-white"
    assert dark_class_for("border", "#123456") == "border-[#123456]"


def test_overrides_for_filters_by_theme() -> None:
    records = overrides_for("linear")
    assert records
    assert {record.theme_id for record in records} == {"linear"}
