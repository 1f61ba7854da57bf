"""Quality rules applied to theme presets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from ..features.color import contrast_ratio, relative_luminance
from ..io.models import ThemePreset
from ..tokens.mapping import contrast_shortfalls

TEXT_CONTRAST_MIN = 4.5
BUTTON_CONTRAST_MIN = 3.0
BUTTON_TEXT = "#ffffff"


@dataclass(frozen=True, slots=True)
class RuleOutcome:
    passed: bool
    message: str
    suggestion: str | None = None


@dataclass(frozen=True, slots=True)
class ThemeRule:
    id: str
    name: str
    category: str
    check: Callable[[ThemePreset], RuleOutcome]


def _text_contrast(theme: ThemePreset) -> RuleOutcome:
    light = contrast_ratio(theme.light.foreground, theme.light.background)
    dark = contrast_ratio(theme.dark.foreground, theme.dark.background)
    if light >= TEXT_CONTRAST_MIN and dark >= TEXT_CONTRAST_MIN:
        return RuleOutcome(True, f"Text contrast passes: light {light:.1f}:1, dark {dark:.1f}:1")
    return RuleOutcome(
        False,
        f"Text contrast too low: light {light:.1f}:1, dark {dark:.1f}:1",
        "Adjust foreground colors for better contrast",
    )


def _button_contrast(theme: ThemePreset) -> RuleOutcome:
    light = contrast_ratio(BUTTON_TEXT, theme.light.primary)
    dark = contrast_ratio(BUTTON_TEXT, theme.dark.primary)
    if light >= BUTTON_CONTRAST_MIN and dark >= BUTTON_CONTRAST_MIN:
        return RuleOutcome(True, f"Button contrast passes: light {light:.1f}:1, dark {dark:.1f}:1")
    return RuleOutcome(
        False,
        f"Button contrast too low: light {light:.1f}:1, dark {dark:.1f}:1",
        "Use darker primary colors or lighter button text",
    )


def _primary_accent_distinct(theme: ThemePreset) -> RuleOutcome:
    same_light = theme.light.primary.lower() == theme.light.accent.lower()
    same_dark = theme.dark.primary.lower() == theme.dark.accent.lower()
    if not same_light and not same_dark:
        return RuleOutcome(True, "Primary and accent colors are distinct")
    return RuleOutcome(
        False,
        "Primary and accent colors are identical",
        "Choose an accent that contrasts with the primary color",
    )


def _muted_lightness(theme: ThemePreset) -> RuleOutcome:
    light_ok = relative_luminance(theme.light.muted) > relative_luminance(theme.light.foreground)
    dark_ok = relative_luminance(theme.dark.muted) < relative_luminance(theme.dark.foreground)
    if light_ok and dark_ok:
        return RuleOutcome(True, "Muted surfaces sit on the background side of the text")
    return RuleOutcome(
        False,
        "Muted colors are not lighter than text in light mode and darker in dark mode",
        "Keep muted surfaces close to the background lightness",
    )


def _border_subtlety(theme: ThemePreset) -> RuleOutcome:
    same_light = theme.light.border.lower() == theme.light.foreground.lower()
    same_dark = theme.dark.border.lower() == theme.dark.foreground.lower()
    if not same_light and not same_dark:
        return RuleOutcome(True, "Border colors are subtle")
    return RuleOutcome(
        False,
        "Border colors too similar to text",
        "Use more subtle border colors",
    )


def _token_table_contrast(theme: ThemePreset) -> RuleOutcome:
    foreground = contrast_ratio(theme.dark.foreground, theme.dark.background)
    if foreground < TEXT_CONTRAST_MIN:
        return RuleOutcome(
            False,
            f"Dark foreground misses {TEXT_CONTRAST_MIN}:1 on the dark background ({foreground:.1f}:1)",
            "Lighten the dark foreground or darken the dark background",
        )
    misses = contrast_shortfalls(theme.dark.background)
    if not misses:
        return RuleOutcome(True, "Mapped dark text tokens meet their contrast targets")
    worst, ratio = min(misses, key=lambda item: item[1])
    return RuleOutcome(
        False,
        f"{len(misses)} mapped dark text tokens miss their contrast target "
        f"(worst {worst.token}: {ratio:.1f}:1)",
        "Use a darker dark-mode background or lighter dark text shades",
    )


THEME_QUALITY_RULES: Tuple[ThemeRule, ...] = (
    ThemeRule("contrast-aa-text", "WCAG AA text contrast", "contrast", _text_contrast),
    ThemeRule("contrast-button-text", "Button text contrast", "contrast", _button_contrast),
    ThemeRule(
        "color-harmony-primary-accent",
        "Primary/accent distinctness",
        "color",
        _primary_accent_distinct,
    ),
    ThemeRule("semantic-muted-lightness", "Muted lightness ordering", "semantic", _muted_lightness),
    ThemeRule("semantic-border-subtlety", "Border subtlety", "semantic", _border_subtlety),
    ThemeRule(
        "contrast-token-table",
        "Mapped token contrast on dark background",
        "contrast",
        _token_table_contrast,
    ),
)

THEME_IMPROVEMENT_SUGGESTIONS: Dict[str, Tuple[str, ...]] = {
    "color": (
        "Use tools like Coolors.co or Adobe Color for harmonious palettes",
        "Test colors with different types of color blindness",
        "Ensure sufficient contrast between all color pairs",
        "Use semantic color naming for clarity",
    ),
    "interaction": (
        "Add hover states for all interactive elements",
        "Include focus states for keyboard navigation",
        "Use consistent transition durations (150-300ms)",
        "Provide clear visual feedback for state changes",
    ),
    "accessibility": (
        "Test with screen readers and keyboard navigation",
        "Ensure minimum 4.5:1 contrast for normal text",
        "Ensure minimum 3:1 contrast for large text and UI elements",
        "Provide alternative ways to distinguish colors (icons, patterns)",
    ),
    "technical": (
        "Use CSS custom properties for theme variables",
        "Implement theme persistence with localStorage",
        "Respect user system preferences (prefers-color-scheme)",
        "Add loading states and smooth transitions",
    ),
}

# issue category -> suggestion groups
SUGGESTION_GROUPS: Dict[str, Tuple[str, ...]] = {
    "contrast": ("accessibility",),
    "color": ("color",),
    "semantic": ("color",),
    "animation": ("interaction",),
}
