"""Score theme presets against the quality rules."""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Iterable, Sequence, Tuple

from ..io.models import ThemePreset, ThemeValidationResult, ValidationIssue
from .presets import THEME_PRESETS
from .rules import (
    SUGGESTION_GROUPS,
    THEME_IMPROVEMENT_SUGGESTIONS,
    THEME_QUALITY_RULES,
    ThemeRule,
)

PASS_SCORE = 80

GRADE_BANDS: Tuple[Tuple[int, str], ...] = (
    (97, "A+"),
    (93, "A"),
    (90, "B+"),
    (87, "B"),
    (83, "C+"),
    (80, "C"),
    (70, "D"),
)
LOWEST_GRADE = "F"
REPORT_SUGGESTION_LIMIT = 3


def grade_from_score(score: float) -> str:
    for threshold, grade in GRADE_BANDS:
        if score >= threshold:
            return grade
    return LOWEST_GRADE


def severity_for(category: str) -> str:
    if category == "contrast":
        return "error"
    if category in ("color", "semantic"):
        return "warning"
    return "info"


def suggestions_for(issues: Iterable[ValidationIssue]) -> Tuple[str, ...]:
    """Return deduplicated improvement suggestions for the issue categories."""
    groups: list[str] = []
    for issue in issues:
        for group in SUGGESTION_GROUPS.get(issue.category, ()):
            if group not in groups:
                groups.append(group)
    groups.append("technical")

    seen: dict[str, None] = {}
    for group in groups:
        for suggestion in THEME_IMPROVEMENT_SUGGESTIONS[group]:
            seen.setdefault(suggestion, None)
    return tuple(seen)


def validate(
    preset: ThemePreset, rules: Sequence[ThemeRule] = THEME_QUALITY_RULES
) -> ThemeValidationResult:
    """Run *rules* against *preset* and grade the outcome."""
    if not rules:
        raise ValueError("at least one rule is required")

    issues: list[ValidationIssue] = []
    passed_count = 0
    for rule in rules:
        outcome = rule.check(preset)
        if outcome.passed:
            passed_count += 1
            continue
        issues.append(
            ValidationIssue(
                rule_id=rule.id,
                category=rule.category,
                severity=severity_for(rule.category),
                message=outcome.message,
                suggestion=outcome.suggestion,
            )
        )

    score = round(100 * passed_count / len(rules))
    return ThemeValidationResult(
        theme_id=preset.id,
        theme_name=preset.name,
        score=score,
        grade=grade_from_score(score),
        passed=score >= PASS_SCORE,
        issues=tuple(issues),
        suggestions=suggestions_for(issues),
    )


def validate_catalog(
    catalog: Sequence[ThemePreset] = THEME_PRESETS,
) -> list[ThemeValidationResult]:
    return [validate(preset) for preset in catalog]


def catalog_report_json(results: Sequence[ThemeValidationResult]) -> str:
    payload = {
        "summary": summarize(results),
        "results": [asdict(result) for result in results],
    }
    return json.dumps(payload, indent=2)


def summarize(results: Sequence[ThemeValidationResult]) -> dict[str, float]:
    total = len(results)
    passed = sum(1 for result in results if result.passed)
    average = sum(result.score for result in results) / total if total else 0.0
    return {
        "total": total,
        "passed": passed,
        "failed": total - passed,
        "average_score": round(average, 1),
    }


def catalog_report_text(results: Sequence[ThemeValidationResult]) -> str:
    """Render a human-readable quality report."""
    lines = ["Theme Quality Report", "=" * 50, ""]
    for result in results:
        status = "PASSED" if result.passed else "NEEDS IMPROVEMENT"
        lines.append(f"Theme: {result.theme_name}")
        lines.append(f"Score: {result.score}% ({result.grade})")
        lines.append(f"Status: {status}")
        if result.issues:
            lines.append("")
            lines.append("Issues:")
            for issue in result.issues:
                lines.append(f"  [{issue.severity}] {issue.message}")
                if issue.suggestion:
                    lines.append(f"      -> {issue.suggestion}")
        if result.suggestions:
            lines.append("")
            lines.append("Suggestions:")
            for suggestion in result.suggestions[:REPORT_SUGGESTION_LIMIT]:
                lines.append(f"  - {suggestion}")
        lines.append("")
        lines.append("-" * 40)
        lines.append("")

    summary = summarize(results)
    lines.append(
        "Summary: {total} themes, {passed} passed, {failed} need improvement, "
        "average score {average_score}%".format(**summary)
    )
    return "\n".join(lines) + "\n"
