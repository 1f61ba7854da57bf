"""Static table mapping single-mode utility tokens to dual-mode tokens."""

from __future__ import annotations

import re
from typing import Dict, Iterable, Iterator, Sequence, Tuple

from ..features.color import contrast_ratio
from ..io.models import TokenMapping
from .palette import TAILWIND_COLORS, token_color

CATEGORIES = (
    "background",
    "text",
    "border",
    "ring",
    "divide",
    "placeholder",
    "accent",
    "interactive",
    "shadow",
    "gradient",
)

DEFAULT_DARK_SURFACE = TAILWIND_COLORS["gray"]["900"]

BODY_TEXT_CONTRAST = 4.5
MUTED_TEXT_CONTRAST = 3.0

_TOKEN_PARTS = re.compile(r"-(?P<family>[a-z]+)-(?P<shade>\d{2,3})(?:/\d+)?$")

_RING_FAMILIES = (
    "gray", "blue", "indigo", "purple", "pink", "red", "orange", "amber",
    "yellow", "lime", "green", "emerald", "teal", "cyan", "sky",
)

Pair = Tuple[str, str]

_BACKGROUND: Dict[str, Sequence[Pair]] = {
    "gray": (
        ("50", "800"), ("100", "800"), ("200", "700"), ("300", "600"), ("400", "500"),
        ("500", "400"), ("600", "300"), ("700", "200"), ("800", "100"), ("900", "white"),
    ),
    "slate": (
        ("50", "800"), ("100", "800"), ("200", "700"), ("300", "600"), ("800", "200"),
        ("900", "100"),
    ),
    "zinc": (("50", "800"), ("100", "800"), ("200", "700"), ("800", "200"), ("900", "100")),
    "neutral": (("50", "800"), ("100", "800"), ("200", "700"), ("800", "200"), ("900", "100")),
}

_TEXT_STEPS: Sequence[Pair] = (
    ("900", "100"), ("800", "200"), ("700", "300"), ("600", "400"), ("500", "400"),
    ("400", "500"), ("300", "600"), ("200", "700"), ("100", "800"),
)

_BORDER: Dict[str, Sequence[Pair]] = {
    "gray": (("200", "700"), ("300", "600"), ("400", "500"), ("500", "400"), ("600", "300"), ("700", "200")),
    "slate": (("200", "700"), ("300", "600"), ("400", "500"), ("500", "400"), ("600", "300"), ("700", "200")),
    "zinc": (("200", "700"), ("300", "600"), ("700", "200")),
    "neutral": (("200", "700"), ("300", "600"), ("700", "200")),
}

_DIVIDE: Dict[str, Sequence[Pair]] = {
    "gray": (("200", "700"), ("300", "600")),
    "slate": (("200", "700"), ("300", "600")),
    "zinc": (("200", "700"),),
    "neutral": (("200", "700"),),
}

_PLACEHOLDER: Dict[str, Sequence[Pair]] = {
    "gray": (("400", "500"), ("500", "400")),
    "slate": (("400", "500"),),
    "zinc": (("400", "500"),),
    "neutral": (("400", "500"),),
}

_STATUS_FAMILIES = ("green", "red", "yellow", "blue")

_LITERAL_ENTRIES: Sequence[Tuple[str, str, str]] = (
    ("bg-white", "bg-white dark:bg-gray-900", "background"),
    ("text-black", "text-black dark:text-white", "text"),
    ("text-white", "text-white dark:text-black", "text"),
    ("hover:bg-gray-50", "hover:bg-gray-50 dark:hover:bg-gray-800", "interactive"),
    ("hover:bg-gray-100", "hover:bg-gray-100 dark:hover:bg-gray-700", "interactive"),
    ("hover:text-gray-900", "hover:text-gray-900 dark:hover:text-gray-100", "interactive"),
    ("focus:ring-blue-500", "focus:ring-blue-500 dark:focus:ring-blue-400", "interactive"),
    ("focus:ring-purple-500", "focus:ring-purple-500 dark:focus:ring-purple-400", "interactive"),
    ("shadow-sm", "shadow-sm dark:shadow-lg dark:shadow-black/25", "shadow"),
    ("shadow-md", "shadow-md dark:shadow-xl dark:shadow-black/30", "shadow"),
    ("shadow-lg", "shadow-lg dark:shadow-2xl dark:shadow-black/40", "shadow"),
    ("from-white", "from-white dark:from-gray-900", "gradient"),
    ("to-gray-100", "to-gray-100 dark:to-gray-800", "gradient"),
    ("from-blue-50", "from-blue-50 dark:from-blue-950", "gradient"),
    ("to-blue-100", "to-blue-100 dark:to-blue-900", "gradient"),
)


def _target_contrast(category: str, shade: str | None) -> float | None:
    if category not in ("text", "placeholder", "accent") or shade is None:
        return None
    step = int(shade)
    if step >= 700:
        return BODY_TEXT_CONTRAST
    if step >= 400:
        return MUTED_TEXT_CONTRAST if category != "accent" else BODY_TEXT_CONTRAST
    return None


def _entry(token: str, replacement: str, category: str) -> TokenMapping:
    match = _TOKEN_PARTS.search(token)
    family = match.group("family") if match else None
    shade = match.group("shade") if match else None
    target = _target_contrast(category, shade)
    if token == "text-black":
        target = BODY_TEXT_CONTRAST
    return TokenMapping(
        token=token,
        replacement=replacement,
        category=category,
        family=family,
        shade=shade,
        target_contrast=target,
    )


def _scale_entries(
    category: str, prefix: str, table: Dict[str, Sequence[Pair]]
) -> Iterator[TokenMapping]:
    for family, pairs in table.items():
        for light, dark in pairs:
            dark_name = dark if dark in ("white", "black") else f"{family}-{dark}"
            token = f"{prefix}-{family}-{light}"
            yield _entry(token, f"{token} dark:{prefix}-{dark_name}", category)


def _build_table() -> Tuple[TokenMapping, ...]:
    entries: list[TokenMapping] = []
    entries.extend(_scale_entries("background", "bg", _BACKGROUND))
    entries.extend(
        _scale_entries("text", "text", {scale: _TEXT_STEPS for scale in _BACKGROUND})
    )
    entries.extend(_scale_entries("border", "border", _BORDER))
    entries.extend(_scale_entries("divide", "divide", _DIVIDE))
    entries.extend(_scale_entries("placeholder", "placeholder", _PLACEHOLDER))
    for family in _RING_FAMILIES:
        token = f"ring-{family}-500"
        entries.append(_entry(token, f"{token} dark:ring-{family}-400", "ring"))
    for family in _STATUS_FAMILIES:
        text_token = f"text-{family}-600"
        bg_token = f"bg-{family}-50"
        entries.append(_entry(text_token, f"{text_token} dark:text-{family}-400", "accent"))
        entries.append(_entry(bg_token, f"{bg_token} dark:bg-{family}-950/50", "accent"))
    for token, replacement, category in _LITERAL_ENTRIES:
        entries.append(_entry(token, replacement, category))
    return tuple(entries)


TOKEN_MAPPINGS: Tuple[TokenMapping, ...] = _build_table()

_BY_TOKEN: Dict[str, TokenMapping] = {entry.token: entry for entry in TOKEN_MAPPINGS}


def lookup(token: str) -> str | None:
    """Return the dual-mode replacement for *token*, or ``None`` when unmapped."""
    entry = _BY_TOKEN.get(token)
    return entry.replacement if entry is not None else None


def get_mapping(token: str) -> TokenMapping | None:
    return _BY_TOKEN.get(token)


def mappings_by_category(category: str) -> list[TokenMapping]:
    if category not in CATEGORIES:
        raise ValueError(f"unknown mapping category: {category}")
    return [entry for entry in TOKEN_MAPPINGS if entry.category == category]


def dark_color(entry: TokenMapping) -> str | None:
    """Return the hex colour of the first ``dark:`` token in *entry*'s replacement."""
    for part in entry.replacement.split():
        if part.startswith("dark:"):
            return token_color(part)
    return None


def measured_contrast(
    entry: TokenMapping, surface: str = DEFAULT_DARK_SURFACE
) -> float | None:
    """Return the dark-mode contrast of *entry* against *surface* when measurable."""
    color = dark_color(entry)
    if color is None:
        return None
    return contrast_ratio(color, surface)


def contrast_shortfalls(
    surface: str = DEFAULT_DARK_SURFACE,
    entries: Iterable[TokenMapping] = TOKEN_MAPPINGS,
) -> list[tuple[TokenMapping, float]]:
    """Return entries whose dark half misses its target contrast on *surface*."""
    misses: list[tuple[TokenMapping, float]] = []
    for entry in entries:
        if entry.target_contrast is None:
            continue
        ratio = measured_contrast(entry, surface)
        if ratio is not None and ratio < entry.target_contrast:
            misses.append((entry, ratio))
    return misses
