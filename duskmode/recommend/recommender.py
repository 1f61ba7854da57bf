"""Weighted theme recommendation from brand, archetype and contrast signals."""

from __future__ import annotations

import logging
from typing import Callable, Dict, Mapping, Sequence, Tuple

from ..features.archetype import classify, extract_features
from ..features.brand import extract_brand_profile
from ..features.color import contrast_ratio
from ..io.models import (
    ArchetypeResult,
    BrandColorProfile,
    ColorSample,
    ScanResult,
    SmartRecommendation,
    ThemePreset,
    ThemeScore,
)
from ..themes.presets import THEME_PRESETS

logger = logging.getLogger(__name__)

WEIGHTS: Dict[str, float] = {
    "brand": 0.4,
    "archetype": 0.35,
    "accessibility": 0.25,
}

WCAG_AA_TEXT: float = 4.5
NO_BRAND_MATCH: float = 0.7
DEFAULT_MATCH: float = 0.5
ALTERNATIVE_COUNT = 3

# preset -> ((low_hue, high_hue, score), ...), fallback score
HUE_BANDS: Dict[str, Tuple[Tuple[Tuple[float, float, float], ...], float]] = {
    "linear": (((240.0, 300.0, 0.95), (200.0, 340.0, 0.8)), 0.6),
    "supabase": (((120.0, 160.0, 0.95), (100.0, 180.0, 0.8)), 0.5),
    "openai": (((180.0, 240.0, 0.95), (160.0, 260.0, 0.8)), 0.7),
}

ARCHETYPE_MATRIX: Dict[str, Dict[str, float]] = {
    "v0": {"corporate": 0.95, "modern": 0.8, "developer": 0.6, "creative": 0.3},
    "linear": {"corporate": 0.7, "modern": 0.95, "developer": 0.9, "creative": 0.8},
    "supabase": {"corporate": 0.8, "modern": 0.85, "developer": 0.9, "creative": 0.7},
    "openai": {"corporate": 0.75, "modern": 0.9, "developer": 0.95, "creative": 0.6},
}


def _monochrome_match(primary: ColorSample) -> float:
    return 0.9 if primary.saturation < 0.3 else 0.4


_CUSTOM_BRAND_RULES: Dict[str, Callable[[ColorSample], float]] = {
    "v0": _monochrome_match,
}


def brand_match(profile: BrandColorProfile, theme_id: str) -> float:
    """Return how well *theme_id* suits the profile's primary colour."""
    primary = profile.primary
    if primary is None:
        return NO_BRAND_MATCH
    rule = _CUSTOM_BRAND_RULES.get(theme_id)
    if rule is not None:
        return rule(primary)
    bands = HUE_BANDS.get(theme_id)
    if bands is None:
        return DEFAULT_MATCH
    ranges, fallback = bands
    for low, high, score in ranges:
        if low <= primary.hue <= high:
            return score
    return fallback


def archetype_match(theme_id: str, archetype: str) -> float:
    return ARCHETYPE_MATRIX.get(theme_id, {}).get(archetype, DEFAULT_MATCH)


def accessibility_score(preset: ThemePreset) -> float:
    """Average of light and dark text contrast, each scaled by the AA threshold."""
    light = contrast_ratio(preset.light.foreground, preset.light.background)
    dark = contrast_ratio(preset.dark.foreground, preset.dark.background)
    return (min(light / WCAG_AA_TEXT, 1.0) + min(dark / WCAG_AA_TEXT, 1.0)) / 2.0


def combine_components(components: Mapping[str, float]) -> float:
    score = 0.0
    for key, weight in WEIGHTS.items():
        score += weight * float(components.get(key, 0.0))
    return float(max(0.0, min(1.0, score)))


def _reasoning(brand: float, archetype: float, accessibility: float) -> Tuple[str, ...]:
    if brand > 0.8:
        brand_note = "Excellent brand color preservation"
    elif brand > 0.6:
        brand_note = "Good brand color compatibility"
    else:
        brand_note = "Limited brand color support"

    if archetype > 0.8:
        archetype_note = "Perfect archetype alignment"
    elif archetype > 0.6:
        archetype_note = "Good design pattern fit"
    else:
        archetype_note = "Moderate archetype compatibility"

    if accessibility > 0.9:
        accessibility_note = "Excellent accessibility (WCAG AA+)"
    elif accessibility > 0.7:
        accessibility_note = "Good accessibility compliance"
    else:
        accessibility_note = "Meets basic accessibility standards"
    return brand_note, archetype_note, accessibility_note


def score_preset(
    profile: BrandColorProfile, archetype: str, preset: ThemePreset
) -> ThemeScore:
    components = {
        "brand": brand_match(profile, preset.id),
        "archetype": archetype_match(preset.id, archetype),
        "accessibility": accessibility_score(preset),
    }
    return ThemeScore(
        theme_id=preset.id,
        score=combine_components(components),
        brand_match=components["brand"],
        archetype_match=components["archetype"],
        accessibility_score=components["accessibility"],
        reasoning=_reasoning(
            components["brand"], components["archetype"], components["accessibility"]
        ),
    )


def recommend(
    profile: BrandColorProfile,
    archetype: str,
    catalog: Sequence[ThemePreset] = THEME_PRESETS,
) -> list[ThemeScore]:
    """Return catalog presets ranked by weighted score, best first.

    Equal scores keep catalog order.
    """
    ranked = [score_preset(profile, archetype, preset) for preset in catalog]
    ranked.sort(key=lambda item: item.score, reverse=True)
    return ranked


def recommend_theme(
    scan: ScanResult, catalog: Sequence[ThemePreset] = THEME_PRESETS
) -> SmartRecommendation:
    """Analyse a scanned project and recommend a theme preset."""
    if not catalog:
        raise ValueError("catalog must contain at least one preset")

    profile = extract_brand_profile(scan.project_text())
    archetype = classify(extract_features(scan))
    ranked = recommend(profile, archetype.archetype, catalog)
    top = ranked[0]
    names = {preset.id: preset.name for preset in catalog}
    logger.debug("Recommendation ranking: %s", [(item.theme_id, item.score) for item in ranked])

    return SmartRecommendation(
        recommended=top,
        alternatives=tuple(ranked[1 : 1 + ALTERNATIVE_COUNT]),
        brand_profile=profile,
        archetype=archetype,
        confidence=top.score,
        reasoning=_summary_reasoning(profile, archetype, names.get(top.theme_id, top.theme_id), top),
    )


def _summary_reasoning(
    profile: BrandColorProfile,
    archetype: ArchetypeResult,
    theme_name: str,
    top: ThemeScore,
) -> Tuple[str, ...]:
    lines: list[str] = []
    if profile.primary is not None:
        lines.append(f"Detected primary brand color: {profile.primary.value}")
        lines.append(f"Brand color usage: {profile.primary.usage_count} occurrences")
    lines.append(f"Project archetype: {archetype.archetype}")
    lines.append(f"Recommended theme: {theme_name}")
    lines.append(f"Overall compatibility: {top.score * 100:.1f}%")
    return tuple(lines)
