"""Enable class-based dark mode in Tailwind v3 configs and v4 stylesheets."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from ..errors import MissingConfigTargetError
from ..io.models import TailwindConfig
from ..scan.project import find_dark_mode_setting, read_source, v3_dark_mode_enabled

logger = logging.getLogger(__name__)

V3_DARK_MODE_ENTRY = "darkMode: 'class',"
V4_DARK_VARIANT = "@custom-variant dark (&:where(.dark, .dark *));"

_V3_EXPORT = re.compile(
    r"module\.exports\s*=\s*\{"
    r"|export\s+default\s*\{"
    r"|(?:const|let|var)\s+\w+(?:\s*:\s*[\w.]+)?\s*=\s*\{"
)
_V4_IMPORT_LINE = re.compile(r"""@import\s+["']tailwindcss["']\s*;?""")
_V4_VARIANT_LINE = re.compile(r"@custom-variant\s+dark\b[^;]*;")


def _write(path: Path, content: str) -> None:
    with path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(content)


def patch_config_text(text: str, overwrite: bool = False) -> str | None:
    """Return *text* with ``darkMode: 'class'`` set, or ``None`` if unchanged.

    An enabled ``darkMode`` value is kept unless *overwrite* is set; any other
    active value, such as ``false``, is replaced. Commented-out entries are ignored.
    """
    setting = find_dark_mode_setting(text)
    if setting is not None:
        if v3_dark_mode_enabled(text) and not overwrite:
            return None
        updated = f"{text[: setting.start()]}{V3_DARK_MODE_ENTRY}{text[setting.end():]}"
        return updated if updated != text else None
    match = _V3_EXPORT.search(text)
    if match is None:
        raise ValueError("no exported config object found")
    return f"{text[: match.end()]}\n  {V3_DARK_MODE_ENTRY}{text[match.end():]}"


def patch_stylesheet_text(text: str, overwrite: bool = False) -> str | None:
    """Return *text* with the dark custom variant declared, or ``None`` if unchanged."""
    existing = _V4_VARIANT_LINE.search(text)
    if existing is not None:
        if not overwrite or existing.group(0) == V4_DARK_VARIANT:
            return None
        return f"{text[: existing.start()]}{V4_DARK_VARIANT}{text[existing.end():]}"
    match = _V4_IMPORT_LINE.search(text)
    if match is None:
        return f"{V4_DARK_VARIANT}\n{text}"
    return f"{text[: match.end()]}\n\n{V4_DARK_VARIANT}{text[match.end():]}"


def enable_alternate_mode(config: TailwindConfig, overwrite: bool = False) -> bool:
    """Enable class-based dark mode for *config*; return whether a file changed.

    Raises ``MissingConfigTargetError`` when there is nothing to patch.
    """
    if config.version == "v4" and config.stylesheet_path is not None:
        path, patcher = config.stylesheet_path, patch_stylesheet_text
    elif config.config_path is not None:
        path, patcher = config.config_path, patch_config_text
    elif config.stylesheet_path is not None:
        path, patcher = config.stylesheet_path, patch_stylesheet_text
    else:
        raise MissingConfigTargetError(None)

    text = read_source(path)
    if text is None:
        raise MissingConfigTargetError(path.parent, f"cannot read {path.name}")
    try:
        updated = patcher(text, overwrite)
    except ValueError as exc:
        raise MissingConfigTargetError(path.parent, f"{path.name}: {exc}") from exc
    if updated is None:
        logger.debug("Dark mode already configured in %s", path)
        return False
    _write(path, updated)
    logger.info("Enabled class-based dark mode in %s", path)
    return True
