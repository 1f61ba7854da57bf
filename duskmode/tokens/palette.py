"""Tailwind colour scale values used by the mapping and brand tables."""

from __future__ import annotations

import re
from typing import Dict

BRAND_FAMILIES = (
    "blue",
    "red",
    "green",
    "purple",
    "yellow",
    "pink",
    "indigo",
    "cyan",
    "teal",
    "orange",
    "emerald",
    "violet",
    "sky",
    "rose",
)

TAILWIND_COLORS: Dict[str, Dict[str, str]] = {
    "gray": {
        "50": "#f9fafb", "100": "#f3f4f6", "200": "#e5e7eb", "300": "#d1d5db",
        "400": "#9ca3af", "500": "#6b7280", "600": "#4b5563", "700": "#374151",
        "800": "#1f2937", "900": "#111827", "950": "#030712",
    },
    "slate": {
        "50": "#f8fafc", "100": "#f1f5f9", "200": "#e2e8f0", "300": "#cbd5e1",
        "400": "#94a3b8", "500": "#64748b", "600": "#475569", "700": "#334155",
        "800": "#1e293b", "900": "#0f172a", "950": "#020617",
    },
    "zinc": {
        "50": "#fafafa", "100": "#f4f4f5", "200": "#e4e4e7", "300": "#d4d4d8",
        "400": "#a1a1aa", "500": "#71717a", "600": "#52525b", "700": "#3f3f46",
        "800": "#27272a", "900": "#18181b", "950": "#09090b",
    },
    "neutral": {
        "50": "#fafafa", "100": "#f5f5f5", "200": "#e5e5e5", "300": "#d4d4d4",
        "400": "#a3a3a3", "500": "#737373", "600": "#525252", "700": "#404040",
        "800": "#262626", "900": "#171717", "950": "#0a0a0a",
    },
    "blue": {
        "50": "#eff6ff", "100": "#dbeafe", "400": "#60a5fa", "500": "#3b82f6",
        "600": "#2563eb", "700": "#1d4ed8", "900": "#1e3a8a", "950": "#172554",
    },
    "red": {
        "50": "#fef2f2", "400": "#f87171", "500": "#ef4444", "600": "#dc2626",
        "700": "#b91c1c", "950": "#450a0a",
    },
    "green": {
        "50": "#f0fdf4", "400": "#4ade80", "500": "#22c55e", "600": "#16a34a",
        "700": "#15803d", "950": "#052e16",
    },
    "yellow": {
        "50": "#fefce8", "400": "#facc15", "500": "#eab308", "600": "#ca8a04",
        "700": "#a16207", "950": "#422006",
    },
    "purple": {"400": "#c084fc", "500": "#a855f7", "600": "#9333ea", "700": "#7e22ce"},
    "pink": {"400": "#f472b6", "500": "#ec4899", "600": "#db2777", "700": "#be185d"},
    "indigo": {"400": "#818cf8", "500": "#6366f1", "600": "#4f46e5", "700": "#4338ca"},
    "cyan": {"400": "#22d3ee", "500": "#06b6d4", "600": "#0891b2", "700": "#0e7490"},
    "teal": {"400": "#2dd4bf", "500": "#14b8a6", "600": "#0d9488", "700": "#0f766e"},
    "orange": {"400": "#fb923c", "500": "#f97316", "600": "#ea580c", "700": "#c2410c"},
    "emerald": {"400": "#34d399", "500": "#10b981", "600": "#059669", "700": "#047857"},
    "violet": {"400": "#a78bfa", "500": "#8b5cf6", "600": "#7c3aed", "700": "#6d28d9"},
    "sky": {"400": "#38bdf8", "500": "#0ea5e9", "600": "#0284c7", "700": "#0369a1"},
    "rose": {"400": "#fb7185", "500": "#f43f5e", "600": "#e11d48", "700": "#be123c"},
}

_SPECIAL_COLORS = {"white": "#ffffff", "black": "#000000"}

_COLOR_SUFFIX = re.compile(r"^(?P<family>[a-z]+)(?:-(?P<shade>\d{2,3}))?$")


def color_hex(name: str) -> str | None:
    """Return the hex value for a colour name such as ``gray-900`` or ``white``."""
    match = _COLOR_SUFFIX.match(name or "")
    if not match:
        return None
    family, shade = match.group("family"), match.group("shade")
    if shade is None:
        return _SPECIAL_COLORS.get(family)
    return TAILWIND_COLORS.get(family, {}).get(shade)


def token_color(token: str) -> str | None:
    """Return the hex colour referenced by a utility token like ``text-gray-100``."""
    utility = token.rsplit(":", 1)[-1]
    _, _, name = utility.partition("-")
    return color_hex(name.split("/", 1)[0])


def _build_reverse_index() -> Dict[str, str]:
    index: Dict[str, str] = dict((value, key) for key, value in _SPECIAL_COLORS.items())
    for family, shades in TAILWIND_COLORS.items():
        for shade, value in shades.items():
            index.setdefault(value, f"{family}-{shade}")
    return index


_REVERSE_INDEX = _build_reverse_index()


def tailwind_name(hex_value: str) -> str | None:
    """Return the first palette name whose value equals *hex_value*."""
    return _REVERSE_INDEX.get((hex_value or "").lower())
