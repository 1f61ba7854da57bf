"""Theme-specific dark replacements for core palette tokens."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, Tuple

from ..io.models import ThemeOverride, ThemePreset
from ..themes.presets import THEME_PRESETS
from .palette import tailwind_name

# token -> (palette slot, dark class used when the preset leaves the slot empty)
SLOT_TOKENS: Dict[str, Tuple[str, str]] = {
    "bg-white": ("background", "bg-gray-900"),
    "bg-gray-50": ("muted", "bg-gray-800"),
    "bg-gray-100": ("muted", "bg-gray-800"),
    "bg-gray-900": ("background", "bg-white"),
    "text-black": ("foreground", "text-white"),
    "text-white": ("background", "text-black"),
    "text-gray-900": ("foreground", "text-gray-100"),
    "text-gray-600": ("secondary", "text-gray-400"),
    "border-gray-200": ("border", "border-gray-700"),
    "border-gray-300": ("border", "border-gray-600"),
}

_NAMED_OVERRIDES: Dict[str, Dict[str, str]] = {
    "vercel": {
        "bg-white": "bg-black",
        "bg-gray-50": "bg-gray-900",
        "bg-gray-100": "bg-gray-900",
        "bg-gray-900": "bg-white",
        "text-black": "text-white",
        "text-white": "text-black",
        "text-gray-900": "text-gray-100",
        "text-gray-600": "text-gray-300",
        "border-gray-200": "border-gray-800",
        "border-gray-300": "border-gray-700",
    },
}

# Arbitrary values use "_" for spaces so each replacement stays one class token.
_LITERAL_OVERRIDES: Dict[str, Dict[str, str]] = {
    "v0": {
        "bg-white": "oklch(0.145_0_0)",
        "bg-gray-50": "oklch(0.182_0_0)",
        "bg-gray-100": "oklch(0.182_0_0)",
        "bg-gray-900": "oklch(0.946_0_0)",
        "text-gray-900": "oklch(0.946_0_0)",
        "text-gray-700": "oklch(0.706_0_0)",
        "text-gray-600": "oklch(0.39_0_0)",
        "border-gray-200": "oklch(0.239_0_0)",
    },
    "linear": {
        "bg-white": "lch(12.236_2.213_272.695)",
        "bg-gray-50": "lch(17.236_4.213_272.695)",
        "bg-gray-100": "lch(18.236_2.213_272.695)",
        "bg-gray-200": "lch(20.636_4.613_272.695)",
        "text-gray-900": "lch(91.024_1.106_272.695)",
        "text-gray-700": "lch(64.894_2.106_272.695)",
        "text-gray-600": "lch(64.094_1.106_272.695)",
        "border-gray-200": "lch(22.236_2.613_272.695)",
    },
    "supabase": {
        "bg-white": "#171717",
        "bg-gray-50": "#1F1F1F",
        "bg-gray-100": "#212121",
        "bg-gray-900": "#FAFAFA",
        "text-gray-900": "#FAFAFA",
        "text-gray-700": "#B4B4B4",
        "text-gray-600": "#898989",
        "border-gray-200": "#313131",
        "border-gray-300": "#454545",
    },
    "openai": {
        "bg-white": "#0D0D0D",
        "bg-gray-50": "#171717",
        "bg-gray-100": "#212121",
        "bg-gray-900": "#F3F3F3",
        "text-gray-900": "#F3F3F3",
        "text-gray-700": "#AFAFAF",
        "text-gray-600": "#424242",
        "border-gray-200": "#303030",
        "border-gray-300": "#424242",
    },
}


def _utility_prefix(token: str) -> str:
    return token.split("-", 1)[0]


def _combined(token: str, dark_class: str) -> str:
    return f"{token} dark:{dark_class}"


def dark_class_for(prefix: str, color: str) -> str:
    """Return a utility class for *color*, named when it is a palette colour."""
    name = tailwind_name(color)
    if name is not None:
        return f"{prefix}-{name}"
    return f"{prefix}-[{color.lower()}]"


def _explicit_records() -> Iterator[ThemeOverride]:
    for theme_id, entries in _NAMED_OVERRIDES.items():
        for token, dark_class in entries.items():
            yield ThemeOverride(theme_id, token, _combined(token, dark_class))
    for theme_id, entries in _LITERAL_OVERRIDES.items():
        for token, value in entries.items():
            dark_class = f"{_utility_prefix(token)}-[{value}]"
            yield ThemeOverride(theme_id, token, _combined(token, dark_class))


def _slot_records(preset: ThemePreset) -> Iterator[ThemeOverride]:
    for token, (slot, default) in SLOT_TOKENS.items():
        color = getattr(preset.dark, slot, None)
        if color:
            dark_class = dark_class_for(_utility_prefix(token), color)
        else:
            dark_class = default
        yield ThemeOverride(preset.id, token, _combined(token, dark_class))


def build_overrides(presets: Iterable[ThemePreset] = THEME_PRESETS) -> Tuple[ThemeOverride, ...]:
    """Return explicit records followed by slot-derived records for uncovered tokens."""
    records = list(_explicit_records())
    seen = {(record.theme_id, record.token) for record in records}
    for preset in presets:
        for record in _slot_records(preset):
            key = (record.theme_id, record.token)
            if key in seen:
                continue
            seen.add(key)
            records.append(record)
    return tuple(records)


THEME_OVERRIDES: Tuple[ThemeOverride, ...] = build_overrides()

_INDEX: Dict[Tuple[str, str], str] = {
    (record.theme_id, record.token): record.replacement for record in THEME_OVERRIDES
}


def resolve(token: str, theme_id: str) -> str | None:
    """Return the combined light/dark token for *token* under *theme_id*."""
    return _INDEX.get((theme_id, token))


def overrides_for(theme_id: str) -> list[ThemeOverride]:
    return [record for record in THEME_OVERRIDES if record.theme_id == theme_id]
