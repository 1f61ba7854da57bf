"""Design feature extraction and project archetype classification."""

from __future__ import annotations

import math
import re
from typing import Callable, Dict, Iterable, Sequence, Tuple

import numpy as np

from ..io.models import ArchetypeResult, DesignFeatureVector, ScanResult
from ..tokens.classes import split_classes
from .brand import collect_color_samples

ARCHETYPES = ("corporate", "modern", "developer", "creative")

_SPACING_TOKEN = re.compile(r"^(m|p|gap|space)[lrtbxy]?-\d+")
_SPACING_VALUE = re.compile(r"-(\d+)$")
_TYPOGRAPHY_TOKEN = re.compile(
    r"^text-(xs|sm|base|lg|xl|2xl|3xl|4xl|5xl|6xl)"
    r"|^font-(thin|light|normal|medium|semibold|bold|extrabold|black)"
)
_MARKUP_TAG = re.compile(r"<[^>]+>")

STRATEGIES: Dict[str, Dict[str, str]] = {
    "corporate": {
        "color_strategy": "conservative-professional",
        "surface_strategy": "subtle-elevation",
        "brand_strategy": "brand-preservation",
        "contrast_target": "high",
    },
    "modern": {
        "color_strategy": "systematic-scaling",
        "surface_strategy": "layered-surfaces",
        "brand_strategy": "perceptual-uniform",
        "contrast_target": "optimal",
    },
    "developer": {
        "color_strategy": "brand-centric",
        "surface_strategy": "brand-influenced",
        "brand_strategy": "enhanced-vibrancy",
        "contrast_target": "high",
    },
    "creative": {
        "color_strategy": "artistic-adaptation",
        "surface_strategy": "creative-surfaces",
        "brand_strategy": "expressive-enhancement",
        "contrast_target": "dynamic",
    },
}


def color_complexity(colors: Sequence[Tuple[float, float]]) -> float:
    """Score ``(hue, saturation)`` pairs by hue-bucket diversity and saturation spread."""
    if not colors:
        return 0.0
    buckets = {math.floor(hue / 30.0) for hue, saturation in colors if saturation > 0}
    hue_diversity = len(buckets) / 12.0
    saturation_variance = float(np.var([saturation for _, saturation in colors]))
    return float(min((hue_diversity + saturation_variance) / 2.0, 1.0))


def spacing_consistency(classes: Iterable[str]) -> float:
    """Return 1 minus the variance of numeric spacing steps / 100, floored at 0."""
    values: list[int] = []
    for token in classes:
        if not _SPACING_TOKEN.match(token):
            continue
        match = _SPACING_VALUE.search(token)
        values.append(int(match.group(1)) if match else 0)
    if not values:
        return 0.0
    return float(max(1.0 - float(np.var(values)) / 100.0, 0.0))


def typography_variance(classes: Iterable[str]) -> float:
    distinct = {token for token in classes if _TYPOGRAPHY_TOKEN.match(token)}
    return float(min(len(distinct) / 10.0, 1.0))


def component_complexity(contents: Sequence[str]) -> float:
    """Average ``(lines + tags) / 100`` across files, capped at 1."""
    if not contents:
        return 0.0
    scores = [
        (len(content.split("\n")) + len(_MARKUP_TAG.findall(content))) / 100.0
        for content in contents
    ]
    return float(min(float(np.mean(scores)), 1.0))


def build_feature_vector(
    framework: str,
    contents: Sequence[str],
    classes: Sequence[str],
    colors: Sequence[Tuple[float, float]],
) -> DesignFeatureVector:
    return DesignFeatureVector(
        framework=framework,
        component_count=len(contents),
        color_complexity=color_complexity(colors),
        spacing_patterns=spacing_consistency(classes),
        typography_variance=typography_variance(classes),
        component_complexity=component_complexity(contents),
    )


def extract_features(scan: ScanResult) -> DesignFeatureVector:
    """Derive the design feature vector for a scanned project."""
    classes = [
        token
        for item in scan.files
        for class_string in item.class_strings
        for token in split_classes(class_string)
    ]
    samples = collect_color_samples(scan.project_text())
    colors = [(sample.hue, sample.saturation) for sample in samples]
    return build_feature_vector(
        scan.framework,
        [item.content for item in scan.files],
        classes,
        colors,
    )


Check = Tuple[str, Callable[[DesignFeatureVector], float], float]


def _flag(condition: bool) -> float:
    return 1.0 if condition else 0.0


DEVTOOL_RUBRIC: Tuple[Check, ...] = (
    ("many-components", lambda f: _flag(f.component_count > 20), 0.3),
    ("dense-components", lambda f: _flag(f.component_complexity > 0.7), 0.4),
    ("rich-colour", lambda f: _flag(f.color_complexity > 0.5), 0.3),
)


def score_rubric(rubric: Sequence[Check], features: DesignFeatureVector) -> float:
    """Sum ``weight * check(features)`` over *rubric*, clamped to [0, 1]."""
    total = 0.0
    for _, check, weight in rubric:
        total += weight * check(features)
    return float(max(0.0, min(1.0, total)))


RUBRICS: Dict[str, Tuple[Check, ...]] = {
    "corporate": (
        ("restrained-colour", lambda f: _flag(f.color_complexity < 0.3), 0.25),
        ("consistent-spacing", lambda f: _flag(f.spacing_patterns > 0.7), 0.25),
        ("calm-typography", lambda f: _flag(f.typography_variance < 0.4), 0.25),
        ("simple-components", lambda f: _flag(f.component_complexity < 0.5), 0.25),
    ),
    "modern": (
        (
            "balanced-colour",
            lambda f: _flag(0.3 <= f.color_complexity <= 0.6),
            0.25,
        ),
        ("systematic-spacing", lambda f: _flag(f.spacing_patterns > 0.8), 0.25),
        ("react-stack", lambda f: _flag(f.framework in ("react", "nextjs")), 0.25),
        ("component-library", lambda f: _flag(f.component_count > 10), 0.25),
    ),
    "developer": (
        ("rich-colour", lambda f: _flag(f.color_complexity > 0.6), 0.25),
        ("dense-components", lambda f: _flag(f.component_complexity > 0.6), 0.25),
        ("vue-stack", lambda f: _flag(f.framework in ("vue", "nuxt")), 0.1),
        ("devtool-patterns", lambda f: score_rubric(DEVTOOL_RUBRIC, f), 0.4),
    ),
    "creative": (
        ("vivid-colour", lambda f: _flag(f.color_complexity > 0.7), 0.3),
        ("expressive-type", lambda f: _flag(f.typography_variance > 0.6), 0.3),
        ("layered-components", lambda f: _flag(f.component_complexity > 0.5), 0.2),
        ("many-components", lambda f: _flag(f.component_count > 15), 0.2),
    ),
}


def score_archetypes(features: DesignFeatureVector) -> Dict[str, float]:
    return {name: score_rubric(RUBRICS[name], features) for name in ARCHETYPES}


def classify(features: DesignFeatureVector) -> ArchetypeResult:
    """Return the best-scoring archetype and a difference-based confidence.

    Ties go to the archetype listed first in ``ARCHETYPES``.
    """
    scores = score_archetypes(features)
    winner = ARCHETYPES[0]
    for name in ARCHETYPES[1:]:
        if scores[name] > scores[winner]:
            winner = name
    runner_up = max(score for name, score in scores.items() if name != winner)
    confidence = scores[winner] - runner_up + 0.5
    return ArchetypeResult(
        archetype=winner,
        confidence=float(max(0.0, min(1.0, confidence))),
        scores=scores,
    )
