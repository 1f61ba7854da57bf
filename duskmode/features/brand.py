"""Infer brand colours from literal colour usage across a project."""

from __future__ import annotations

import logging
import re
from collections import Counter
from dataclasses import replace
from typing import Dict, Iterable, Iterator, List, Tuple

from ..io.models import BrandColorProfile, ColorSample
from ..tokens import mapping
from ..tokens.palette import BRAND_FAMILIES, TAILWIND_COLORS, tailwind_name
from .color import (
    from_hsl,
    hue_temperature,
    mix,
    normalize_color,
    relative_luminance,
    to_hsl,
)

logger = logging.getLogger(__name__)

MIN_USAGE = 2
MIN_SATURATION = 0.2
LUMINANCE_RANGE: Tuple[float, float] = (0.1, 0.9)
PALETTE_SIZE = 5
ACCENT_SATURATION = 0.6
STRONG_BRAND_CONFIDENCE = 0.6
BRAND_TINT = 0.05

# Majority ties resolve to the earliest entry.
TEMPERATURE_ORDER = ("warm", "cool", "neutral")

_HEX_PATTERN = re.compile(r"#(?:[0-9a-fA-F]{6}|[0-9a-fA-F]{3})(?![\w-])")
_RGB_PATTERN = re.compile(r"rgb\(\s*\d+\s*,\s*\d+\s*,\s*\d+\s*\)")
_HSL_PATTERN = re.compile(
    r"hsl\(\s*\d+(?:\.\d+)?\s*,\s*\d+(?:\.\d+)?%?\s*,\s*\d+(?:\.\d+)?%?\s*\)"
)
_BRAND_CLASS_PATTERN = re.compile(
    r"\b(?:bg|text|border)-(?P<family>{families})-(?P<shade>\d{{2,3}})\b".format(
        families="|".join(BRAND_FAMILIES)
    )
)
_LITERAL_PATTERNS = (_HEX_PATTERN, _RGB_PATTERN, _HSL_PATTERN)

_TINTED_TOKENS = (
    "bg-white",
    "bg-gray-50",
    "bg-gray-100",
    "bg-gray-200",
    "border-gray-200",
    "border-gray-300",
)


def iter_color_literals(content: str) -> Iterator[str]:
    """Yield normalised hex values for every parseable colour in *content*."""
    for pattern in _LITERAL_PATTERNS:
        for match in pattern.finditer(content):
            literal = match.group(0)
            try:
                yield normalize_color(literal)
            except ValueError:
                logger.debug("Skipping unparseable colour literal %r", literal)

    for match in _BRAND_CLASS_PATTERN.finditer(content):
        value = TAILWIND_COLORS.get(match.group("family"), {}).get(match.group("shade"))
        if value is None:
            logger.debug("No palette value for %s", match.group(0))
            continue
        yield value


def collect_color_samples(project_text: Iterable[Tuple[str, str]]) -> List[ColorSample]:
    """Aggregate colour occurrences by value, in first-seen order."""
    usage: Counter[str] = Counter()
    locations: Dict[str, List[str]] = {}
    for path, content in project_text:
        for value in iter_color_literals(content or ""):
            usage[value] += 1
            seen = locations.setdefault(value, [])
            if path not in seen:
                seen.append(path)

    samples: List[ColorSample] = []
    for value, paths in locations.items():
        hue, saturation, _ = to_hsl(value)
        samples.append(
            ColorSample(
                value=value,
                usage_count=usage[value],
                locations=tuple(paths),
                saturation=saturation,
                luminance=relative_luminance(value),
                hue=hue,
                temperature=hue_temperature(hue),
            )
        )
    return samples


def _qualifies(
    sample: ColorSample,
    min_usage: int,
    min_saturation: float,
    luminance_range: Tuple[float, float],
) -> bool:
    low, high = luminance_range
    return (
        sample.usage_count >= min_usage
        and sample.saturation >= min_saturation
        and low < sample.luminance < high
    )


def _role_for(index: int, sample: ColorSample) -> str:
    if index == 0:
        return "primary"
    if index == 1:
        return "secondary"
    if index <= 4 and sample.saturation > ACCENT_SATURATION:
        return "accent"
    return "neutral"


def dominant_temperature(samples: Iterable[ColorSample]) -> str:
    counts = Counter(sample.temperature for sample in samples)
    if not counts:
        return "neutral"
    best = max(counts.values())
    return next(name for name in TEMPERATURE_ORDER if counts.get(name, 0) == best)


def brand_confidence(primary: ColorSample | None) -> float:
    if primary is None:
        return 0.0
    usage_factor = min(primary.usage_count / 10.0, 1.0)
    location_factor = min(len(primary.locations) / 3.0, 1.0)
    score = (usage_factor + primary.saturation + location_factor) / 3.0
    return float(max(0.0, min(1.0, score)))


def build_profile(
    samples: Iterable[ColorSample],
    min_usage: int = MIN_USAGE,
    min_saturation: float = MIN_SATURATION,
    luminance_range: Tuple[float, float] = LUMINANCE_RANGE,
) -> BrandColorProfile:
    """Filter, rank and classify *samples* into a brand profile."""
    candidates = [
        sample
        for sample in samples
        if _qualifies(sample, min_usage, min_saturation, luminance_range)
    ]
    candidates.sort(key=lambda item: item.usage_count * item.saturation, reverse=True)

    palette = tuple(
        replace(sample, role=_role_for(index, sample))
        for index, sample in enumerate(candidates[:PALETTE_SIZE])
    )
    primary = palette[0] if palette else None
    secondary = palette[1] if len(palette) > 1 else None
    accent = next((sample for sample in palette if sample.role == "accent"), None)

    return BrandColorProfile(
        primary=primary,
        secondary=secondary,
        accent=accent,
        palette=palette,
        temperature=dominant_temperature(palette),
        confidence=brand_confidence(primary),
    )


def extract_brand_profile(
    project_text: Iterable[Tuple[str, str]],
    min_usage: int = MIN_USAGE,
    min_saturation: float = MIN_SATURATION,
    luminance_range: Tuple[float, float] = LUMINANCE_RANGE,
) -> BrandColorProfile:
    """Return the brand profile for ``(path, content)`` pairs."""
    samples = collect_color_samples(project_text)
    profile = build_profile(samples, min_usage, min_saturation, luminance_range)
    logger.debug(
        "Brand extraction: %d colours, %d qualified, primary=%s",
        len(samples),
        len(profile.palette),
        profile.primary.value if profile.primary else None,
    )
    return profile


def quick_brand_analysis(
    project_text: Iterable[Tuple[str, str]],
) -> Tuple[bool, str | None, float]:
    """Return ``(has_strong_brand, primary_hex, confidence)``."""
    profile = extract_brand_profile(project_text)
    primary = profile.primary.value if profile.primary else None
    return profile.confidence > STRONG_BRAND_CONFIDENCE, primary, profile.confidence


def profile_from_color(value: str) -> BrandColorProfile:
    """Build a single-colour profile for a user-supplied brand colour."""
    normalized = normalize_color(value)
    hue, saturation, _ = to_hsl(normalized)
    primary = ColorSample(
        value=normalized,
        usage_count=1,
        locations=(),
        saturation=saturation,
        luminance=relative_luminance(normalized),
        hue=hue,
        temperature=hue_temperature(hue),
        role="primary",
    )
    return BrandColorProfile(
        primary=primary,
        palette=(primary,),
        temperature=primary.temperature,
        confidence=1.0,
    )


def adapt_for_dark(value: str) -> str:
    """Desaturate and lighten *value* so it reads on dark surfaces."""
    hue, saturation, lightness = to_hsl(value)
    return from_hsl(hue, saturation * 0.8, max(lightness * 1.3, 0.6))


def brand_aware_mappings(profile: BrandColorProfile) -> Dict[str, str]:
    """Return token replacements tinted toward the profile's primary colour."""
    if profile.primary is None:
        return {}
    primary = profile.primary.value
    result: Dict[str, str] = {}

    for token in _TINTED_TOKENS:
        entry = mapping.get_mapping(token)
        dark = mapping.dark_color(entry) if entry is not None else None
        if dark is None:
            continue
        prefix = token.split("-", 1)[0]
        tinted = mix(dark, primary, BRAND_TINT)
        result[token] = f"{token} dark:{prefix}-[{tinted}]"

    adapted = adapt_for_dark(primary)
    names = [f"[{primary}]"]
    palette_name = tailwind_name(primary)
    if palette_name is not None:
        names.append(palette_name)
    for name in names:
        for prefix in ("bg", "text", "border"):
            token = f"{prefix}-{name}"
            result[token] = f"{token} dark:{prefix}-[{adapted}]"
    return result
