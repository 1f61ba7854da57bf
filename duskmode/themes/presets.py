"""Catalog of light/dark theme presets."""

from __future__ import annotations

from typing import Dict, Tuple

from ..errors import UnknownThemeError
from ..io.models import Palette, ThemePreset

THEME_PRESETS: Tuple[ThemePreset, ...] = (
    ThemePreset(
        id="vercel",
        name="Vercel",
        description="Clean black and white aesthetic with subtle grays",
        light=Palette(
            background="#ffffff",
            foreground="#000000",
            primary="#000000",
            secondary="#666666",
            accent="#0070f3",
            muted="#fafafa",
            border="#eaeaea",
        ),
        dark=Palette(
            background="#000000",
            foreground="#ffffff",
            primary="#ffffff",
            secondary="#888888",
            accent="#0070f3",
            muted="#111111",
            border="#333333",
        ),
    ),
    ThemePreset(
        id="v0",
        name="v0",
        description="Monochrome neutrals defined in OKLCH for perceptual uniformity",
        light=Palette(
            background="#ffffff",
            foreground="#0a0a0a",
            primary="#171717",
            secondary="#737373",
            accent="#f5f5f5",
            muted="#f5f5f5",
            border="#e5e5e5",
        ),
        dark=Palette(
            background="#0a0a0a",
            foreground="#ededed",
            primary="#ededed",
            secondary="#a0a0a0",
            accent="#262626",
            muted="#121212",
            border="#1f1f1f",
        ),
    ),
    ThemePreset(
        id="supabase",
        name="Supabase",
        description="Green-focused theme with modern gradients",
        light=Palette(
            background="#ffffff",
            foreground="#1f2937",
            primary="#10b981",
            secondary="#6b7280",
            accent="#3b82f6",
            muted="#f9fafb",
            border="#e5e7eb",
        ),
        dark=Palette(
            background="#0f172a",
            foreground="#f8fafc",
            primary="#10b981",
            secondary="#94a3b8",
            accent="#3b82f6",
            muted="#1e293b",
            border="#334155",
        ),
    ),
    ThemePreset(
        id="linear",
        name="Linear",
        description="Purple and blue gradient theme with clean typography",
        light=Palette(
            background="#ffffff",
            foreground="#18181b",
            primary="#8b5cf6",
            secondary="#71717a",
            accent="#6366f1",
            muted="#fafafa",
            border="#e4e4e7",
        ),
        dark=Palette(
            background="#09090b",
            foreground="#fafafa",
            primary="#a78bfa",
            secondary="#a1a1aa",
            accent="#8b5cf6",
            muted="#1c1c1f",
            border="#27272a",
        ),
    ),
    ThemePreset(
        id="openai",
        name="OpenAI",
        description="Teal and warm theme inspired by ChatGPT",
        light=Palette(
            background="#ffffff",
            foreground="#2d3748",
            primary="#10a37f",
            secondary="#718096",
            accent="#3182ce",
            muted="#f7fafc",
            border="#e2e8f0",
        ),
        dark=Palette(
            background="#1a202c",
            foreground="#f7fafc",
            primary="#10a37f",
            secondary="#a0aec0",
            accent="#3182ce",
            muted="#2d3748",
            border="#4a5568",
        ),
    ),
    ThemePreset(
        id="custom",
        name="Custom Theme",
        description="Configure your own colors manually",
        light=Palette(
            background="#ffffff",
            foreground="#1f2937",
            primary="#3b82f6",
            secondary="#6b7280",
            accent="#8b5cf6",
            muted="#f9fafb",
            border="#e5e7eb",
        ),
        dark=Palette(
            background="#111827",
            foreground="#f9fafb",
            primary="#60a5fa",
            secondary="#9ca3af",
            accent="#a78bfa",
            muted="#1f2937",
            border="#374151",
        ),
    ),
)

_BY_ID: Dict[str, ThemePreset] = {preset.id: preset for preset in THEME_PRESETS}


def get_preset(theme_id: str) -> ThemePreset:
    """Return the preset registered under *theme_id*."""
    try:
        return _BY_ID[theme_id]
    except KeyError:
        raise UnknownThemeError(theme_id) from None


def find_preset(theme_id: str | None) -> ThemePreset | None:
    if not theme_id:
        return None
    return _BY_ID.get(theme_id)


def theme_ids() -> list[str]:
    return [preset.id for preset in THEME_PRESETS]
