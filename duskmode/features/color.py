"""Colour parsing, luminance and contrast utilities."""

from __future__ import annotations

import colorsys

import numpy as np
from PIL import ImageColor

_MAX_LITERAL_LENGTH = 64
_WCAG_LINEAR_THRESHOLD = 0.03928

RGB = tuple[int, int, int]


def parse_color(value: str) -> RGB:
    """Return the ``(r, g, b)`` triple for a hex, ``rgb()`` or ``hsl()`` literal.

    Raises ``ValueError`` for anything Pillow cannot interpret or for channels
    outside the 0-255 range.
    """
    text = (value or "").strip()
    if not text or len(text) > _MAX_LITERAL_LENGTH:
        raise ValueError(f"invalid colour literal: {value!r}")

    rgb = ImageColor.getrgb(text)[:3]
    if any(channel < 0 or channel > 255 for channel in rgb):
        raise ValueError(f"colour channel out of range: {value!r}")
    return int(rgb[0]), int(rgb[1]), int(rgb[2])


def rgb_to_hex(rgb: RGB) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def normalize_color(value: str) -> str:
    """Return *value* as a lowercase ``#rrggbb`` string."""
    return rgb_to_hex(parse_color(value))


def to_hsl(value: str) -> tuple[float, float, float]:
    """Return ``(hue_degrees, saturation, lightness)`` for *value*."""
    r, g, b = (channel / 255.0 for channel in parse_color(value))
    hue, lightness, saturation = colorsys.rgb_to_hls(r, g, b)
    return hue * 360.0, saturation, lightness


def from_hsl(hue: float, saturation: float, lightness: float) -> str:
    saturation = max(0.0, min(1.0, saturation))
    lightness = max(0.0, min(1.0, lightness))
    r, g, b = colorsys.hls_to_rgb((hue % 360.0) / 360.0, lightness, saturation)
    return rgb_to_hex((round(r * 255), round(g * 255), round(b * 255)))


def _linear_channels(value: str) -> np.ndarray:
    srgb = np.asarray(parse_color(value), dtype=float) / 255.0
    return np.where(
        srgb <= _WCAG_LINEAR_THRESHOLD,
        srgb / 12.92,
        ((srgb + 0.055) / 1.055) ** 2.4,
    )


def relative_luminance(value: str) -> float:
    """Return the WCAG relative luminance of *value* in the unit interval."""
    r, g, b = _linear_channels(value)
    return float(0.2126 * r + 0.7152 * g + 0.0722 * b)


def contrast_ratio(color_a: str, color_b: str) -> float:
    """Return the WCAG contrast ratio between two colours (1.0 to 21.0)."""
    lum_a = relative_luminance(color_a)
    lum_b = relative_luminance(color_b)
    lighter, darker = max(lum_a, lum_b), min(lum_a, lum_b)
    return float((lighter + 0.05) / (darker + 0.05))


def hue_temperature(hue: float) -> str:
    """Bucket a hue angle into ``warm``, ``cool`` or ``neutral``."""
    if 0.0 <= hue <= 60.0 or 300.0 <= hue <= 360.0:
        return "warm"
    if 120.0 <= hue <= 240.0:
        return "cool"
    return "neutral"


def mix(color_a: str, color_b: str, ratio: float) -> str:
    """Blend *color_b* into *color_a* by *ratio* in linear RGB."""
    ratio = max(0.0, min(1.0, ratio))
    blended = (1.0 - ratio) * _linear_channels(color_a) + ratio * _linear_channels(color_b)
    srgb = np.where(
        blended <= 0.0031308,
        blended * 12.92,
        1.055 * np.power(blended, 1 / 2.4) - 0.055,
    )
    channels = np.clip(np.round(srgb * 255.0), 0, 255).astype(int)
    return rgb_to_hex((int(channels[0]), int(channels[1]), int(channels[2])))
