from __future__ import annotations

import pytest

from duskmode.features.archetype import (
    ARCHETYPES,
    RUBRICS,
    STRATEGIES,
    classify,
    color_complexity,
    component_complexity,
    extract_features,
    score_archetypes,
    score_rubric,
    spacing_consistency,
    typography_variance,
)
from duskmode.io.models import DesignFeatureVector, ScanResult, SourceFile, TailwindConfig


def _features(**overrides) -> DesignFeatureVector:
    values = dict(
        framework="html",
        component_count=5,
        color_complexity=0.2,
        spacing_patterns=0.9,
        typography_variance=0.1,
        component_complexity=0.2,
    )
    values.update(overrides)
    return DesignFeatureVector(**values)


def test_restrained_project_is_corporate() -> None:
    features = _features()

    assert score_rubric(RUBRICS["corporate"], features) == 1.0
    result = classify(features)
    assert result.archetype == "corporate"
    assert result.confidence == 1.0
    assert result.scores["corporate"] == 1.0


def test_ties_go_to_first_archetype() -> None:
    features = _features(color_complexity=0.4, component_complexity=0.6)
    scores = score_archetypes(features)
    assert scores["corporate"] == pytest.approx(0.5)
    assert scores["modern"] == pytest.approx(0.5)

    result = classify(features)
    assert result.archetype == "corporate"
    assert result.confidence == pytest.approx(0.5)


def test_developer_and_creative_rubrics() -> None:
    developer = _features(
        framework="vue",
        component_count=30,
        color_complexity=0.65,
        spacing_patterns=0.1,
        typography_variance=0.5,
        component_complexity=0.9,
    )
    assert classify(developer).archetype == "developer"

    creative = _features(
        color_complexity=0.9,
        spacing_patterns=0.1,
        typography_variance=0.9,
        component_complexity=0.3,
        component_count=16,
    )
    assert classify(creative).archetype == "creative"


def test_scores_and_confidence_stay_in_unit_interval() -> None:
    for features in (_features(), _features(color_complexity=0.9), _features(component_count=100)):
        result = classify(features)
        assert 0.0 <= result.confidence <= 1.0
        assert set(result.scores) == set(ARCHETYPES)
        assert all(0.0 <= score <= 1.0 for score in result.scores.values())


def test_every_archetype_has_a_strategy() -> None:
    assert set(STRATEGIES) == set(ARCHETYPES)


def test_feature_helpers() -> None:
    assert color_complexity([]) == 0.0
    assert color_complexity([(0.0, 0.0), (0.0, 0.0)]) == 0.0
    assert 0.0 < color_complexity([(0.0, 1.0), (200.0, 0.5)]) <= 1.0

    assert spacing_consistency([]) == 0.0
    assert spacing_consistency(["p-4", "m-4", "gap-4"]) == 1.0
    assert spacing_consistency(["p-0", "m-40"]) == 0.0
    assert spacing_consistency(["p-2.5", "m-10"]) == pytest.approx(0.75)

    assert typography_variance(["text-sm", "text-lg", "font-bold", "text-sm"]) == pytest.approx(0.3)
    assert component_complexity([]) == 0.0
    assert component_complexity(["<div>\n</div>"]) == pytest.approx(0.04)


def test_extract_features_from_scan(tmp_path) -> None:
    files = (
        SourceFile(
            path=tmp_path / "index.html",
            content='<div class="p-4 text-sm bg-violet-500">\n</div>',
            class_strings=("p-4 text-sm bg-violet-500",),
        ),
    )
    scan = ScanResult(
        root=tmp_path,
        framework="html",
        files=files,
        stylesheets=(),
        config=TailwindConfig(version="unknown"),
        total_files=1,
        transformable_files=0,
        estimated_changes=0,
    )
    features = extract_features(scan)

    assert features.framework == "html"
    assert features.component_count == 1
    assert features.spacing_patterns == 1.0
    assert features.typography_variance == pytest.approx(0.1)
    assert features.color_complexity > 0.0
