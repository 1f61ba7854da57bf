from __future__ import annotations

import pytest

from duskmode.features.brand import extract_brand_profile, profile_from_color
from duskmode.io.models import ScanResult, SourceFile, TailwindConfig
from duskmode.recommend.recommender import (
    NO_BRAND_MATCH,
    WEIGHTS,
    accessibility_score,
    archetype_match,
    brand_match,
    combine_components,
    recommend,
    recommend_theme,
)
from duskmode.themes.presets import THEME_PRESETS, get_preset, theme_ids


def _scan(tmp_path, content: str) -> ScanResult:
    source = SourceFile(path=tmp_path / "index.html", content=content, class_strings=())
    return ScanResult(
        root=tmp_path,
        framework="html",
        files=(source,),
        stylesheets=(),
        config=TailwindConfig(version="unknown"),
        total_files=1,
        transformable_files=0,
        estimated_changes=0,
    )


def test_weights_sum_to_one() -> None:
    assert sum(WEIGHTS.values()) == pytest.approx(1.0)


def test_brand_match_uses_hue_bands() -> None:
    violet = profile_from_color("#8b5cf6")
    assert brand_match(violet, "linear") == 0.95
    assert brand_match(violet, "openai") == 0.8
    assert brand_match(violet, "supabase") == 0.5
    assert brand_match(violet, "v0") == 0.4
    assert brand_match(violet, "vercel") == 0.5

    grey = profile_from_color("#6b6b6b")
    assert brand_match(grey, "v0") == 0.9


def test_brand_match_without_primary() -> None:
    empty = extract_brand_profile([])
    for theme_id in theme_ids():
        assert brand_match(empty, theme_id) == NO_BRAND_MATCH


def test_archetype_match_defaults() -> None:
    assert archetype_match("linear", "modern") == 0.95
    assert archetype_match("vercel", "corporate") == 0.5
    assert archetype_match("linear", "unknown") == 0.5


def test_accessibility_score_caps_at_one() -> None:
    assert accessibility_score(get_preset("vercel")) == pytest.approx(1.0)
    for preset in THEME_PRESETS:
        assert 0.0 <= accessibility_score(preset) <= 1.0


def test_combine_components_clamps() -> None:
    assert combine_components({"brand": 1.0, "archetype": 1.0, "accessibility": 1.0}) == pytest.approx(1.0)
    assert combine_components({"brand": 5.0, "archetype": 5.0}) == 1.0
    assert combine_components({}) == 0.0


def test_recommend_ranks_violet_brand_towards_linear() -> None:
    ranked = recommend(profile_from_color("#8b5cf6"), "modern")
    assert ranked[0].theme_id == "linear"
    assert ranked[0].reasoning[0] == "Excellent brand color preservation"
    scores = [item.score for item in ranked]
    assert scores == sorted(scores, reverse=True)


def test_equal_scores_keep_catalog_order() -> None:
    ranked = recommend(extract_brand_profile([]), "none")
    assert [item.theme_id for item in ranked] == theme_ids()
    assert ranked[0].score == pytest.approx(0.705)


def test_recommend_theme_from_scan(tmp_path) -> None:
    content = '<div class="bg-violet-500 text-violet-500 border-violet-500">#8b5cf6</div>'
    recommendation = recommend_theme(_scan(tmp_path, content))

    assert recommendation.brand_profile.primary.value == "#8b5cf6"
    assert recommendation.recommended.theme_id == "linear"
    assert len(recommendation.alternatives) == 3
    assert recommendation.confidence == recommendation.recommended.score
    assert "Recommended theme: Linear" in recommendation.reasoning


def test_recommend_theme_requires_catalog(tmp_path) -> None:
    with pytest.raises(ValueError) as exc:
        recommend_theme(_scan(tmp_path, ""), catalog=())
    assert "catalog" in str(exc.value)
