"""Data models shared across the dark-mode pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Tuple


@dataclass(frozen=True, slots=True)
class TokenMapping:
    """A single-mode utility token and its dual-mode replacement."""

    token: str
    replacement: str
    category: str
    family: str | None = None
    shade: str | None = None
    target_contrast: float | None = None


@dataclass(frozen=True, slots=True)
class ThemeOverride:
    """Exact replacement for *token* when theme *theme_id* is selected."""

    theme_id: str
    token: str
    replacement: str


@dataclass(frozen=True, slots=True)
class Palette:
    """Seven-slot colour palette for one mode of a theme."""

    background: str
    foreground: str
    primary: str
    secondary: str
    accent: str
    muted: str
    border: str


@dataclass(frozen=True, slots=True)
class ThemePreset:
    """Named light/dark palette pair from the preset catalog."""

    id: str
    name: str
    description: str
    light: Palette
    dark: Palette


@dataclass(frozen=True, slots=True)
class ColorSample:
    """Aggregated occurrences of one normalised colour value."""

    value: str
    usage_count: int
    locations: Tuple[str, ...]
    saturation: float
    luminance: float
    hue: float
    temperature: str
    role: str = "neutral"


@dataclass(frozen=True, slots=True)
class BrandColorProfile:
    """Brand colours inferred from a project's sources."""

    primary: ColorSample | None = None
    secondary: ColorSample | None = None
    accent: ColorSample | None = None
    palette: Tuple[ColorSample, ...] = ()
    temperature: str = "neutral"
    confidence: float = 0.0


@dataclass(frozen=True, slots=True)
class DesignFeatureVector:
    """Design signals derived from a project scan."""

    framework: str
    component_count: int
    color_complexity: float
    spacing_patterns: float
    typography_variance: float
    component_complexity: float


@dataclass(frozen=True, slots=True)
class ArchetypeResult:
    """Winning archetype plus the per-archetype rubric scores."""

    archetype: str
    confidence: float
    scores: Dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ThemeScore:
    """Weighted recommendation score for one preset."""

    theme_id: str
    score: float
    brand_match: float
    archetype_match: float
    accessibility_score: float
    reasoning: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class SmartRecommendation:
    """Recommended preset with ranked alternatives and supporting analysis."""

    recommended: ThemeScore
    alternatives: Tuple[ThemeScore, ...]
    brand_profile: BrandColorProfile
    archetype: ArchetypeResult
    confidence: float
    reasoning: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """A failed validator rule."""

    rule_id: str
    category: str
    severity: str
    message: str
    suggestion: str | None = None


@dataclass(frozen=True, slots=True)
class ThemeValidationResult:
    """Quality score and grade for one preset."""

    theme_id: str
    theme_name: str
    score: int
    grade: str
    passed: bool
    issues: Tuple[ValidationIssue, ...] = ()
    suggestions: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class SourceFile:
    """A scanned file with its raw text and literal class strings."""

    path: Path
    content: str
    class_strings: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class TailwindConfig:
    """Location and dark-mode state of the project's Tailwind setup."""

    version: str
    config_path: Path | None = None
    stylesheet_path: Path | None = None
    dark_mode_enabled: bool = False


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Immutable snapshot of a project scan."""

    root: Path
    framework: str
    files: Tuple[SourceFile, ...]
    stylesheets: Tuple[SourceFile, ...]
    config: TailwindConfig
    total_files: int
    transformable_files: int
    estimated_changes: int

    @property
    def alternate_mode_enabled(self) -> bool:
        return self.config.dark_mode_enabled

    def project_text(self) -> list[tuple[str, str]]:
        """Return ``(path, content)`` pairs for components and stylesheets."""
        return [(str(item.path), item.content) for item in (*self.files, *self.stylesheets)]


@dataclass(frozen=True, slots=True)
class TransformabilityReport:
    """How many tokens in a set of class strings have a dark mapping."""

    total: int
    transformable: int
    percentage: float
    transformable_tokens: Tuple[str, ...] = ()
    unmapped_tokens: Tuple[str, ...] = ()
    dark_tokens: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class TransformationResult:
    """Outcome of rewriting the class strings of one file."""

    path: Path
    success: bool
    original_content: str
    transformed_content: str
    changes_count: int = 0
    transformed_classes: Tuple[str, ...] = ()
    error: str | None = None


@dataclass(frozen=True, slots=True)
class TransformationSummary:
    """Batch totals over per-file transformation results."""

    total_files: int
    success_count: int
    failure_count: int
    total_changes: int
    results: Tuple[TransformationResult, ...] = ()


@dataclass(frozen=True, slots=True)
class ToggleComponent:
    """A generated theme toggle and how to wire it into the app."""

    path: Path
    framework: str
    content: str
    instructions: Tuple[str, ...] = ()
    written: bool = False


@dataclass(frozen=True, slots=True)
class DarkModeRun:
    """Outcome of a dry-run or applied dark-mode run."""

    summary: TransformationSummary
    dry_run: bool
    written: Tuple[Path, ...] = ()
    write_errors: Dict[Path, str] = field(default_factory=dict)
    config_status: str = "skipped"
    decision: str | None = None
    backup_dir: Path | None = None
    notes: Dict[str, str] = field(default_factory=dict)
