"""Scan a front-end project for class strings and Tailwind setup."""

from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Sequence, Tuple

from ..errors import ProjectNotFoundError
from ..io.models import ScanResult, SourceFile, TailwindConfig
from ..tokens.classes import transform_classes, transformable_tokens
from .markup import dialect_for, extract_class_strings

logger = logging.getLogger(__name__)

IGNORED_DIRS = frozenset(
    {"node_modules", "dist", "build", ".next", ".nuxt", "coverage", ".git"}
)
COMPONENT_EXTENSIONS = (".js", ".jsx", ".ts", ".tsx", ".vue", ".html")
STYLESHEET_EXTENSIONS = (".css", ".scss", ".sass")
TAILWIND_CONFIG_NAMES = (
    "tailwind.config.js",
    "tailwind.config.ts",
    "tailwind.config.cjs",
    "tailwind.config.mjs",
)

_CONFIG_FILE_PATTERN = re.compile(r"\.config\.[cm]?[jt]s$")
_V4_IMPORT = re.compile(r"""@import\s+["']tailwindcss["']""")
_V4_DARK_VARIANT = re.compile(r"@custom-variant\s+dark\b")
_V3_DARK_MODE_SETTING = re.compile(r"darkMode\s*:\s*(\[[^\]]*\]|[^,\n}]+),?")
_V3_DARK_MODE_ENABLED = re.compile(r"""\[?\s*["'](?:class|media|selector)["']""")

_DEPENDENCY_FRAMEWORKS: Tuple[Tuple[str, str], ...] = (
    ("next", "nextjs"),
    ("nuxt", "nuxt"),
    ("react", "react"),
    ("vue", "vue"),
)
_CONFIG_FRAMEWORKS: Tuple[Tuple[str, str], ...] = (
    ("next.config", "nextjs"),
    ("nuxt.config", "nuxt"),
)


def iter_project_files(root: Path, extensions: Sequence[str]) -> Iterator[Path]:
    """Yield files under *root* with one of *extensions*, skipping build output."""
    for directory, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(name for name in dirnames if name not in IGNORED_DIRS)
        for filename in sorted(filenames):
            if filename.lower().endswith(tuple(extensions)):
                yield Path(directory) / filename


def read_source(path: Path) -> str | None:
    """Return the text of *path*, or ``None`` when it cannot be decoded."""
    try:
        with path.open("r", encoding="utf-8", newline="") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Skipping unreadable file %s: %s", path, exc)
        return None


def _read_package_json(root: Path) -> Dict[str, Any]:
    package_path = root / "package.json"
    if not package_path.is_file():
        return {}
    try:
        data = json.loads(package_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Ignoring unreadable package.json: %s", exc)
        return {}
    return data if isinstance(data, dict) else {}


def detect_framework(root: Path, paths: Iterable[Path]) -> str:
    """Return ``nextjs``, ``nuxt``, ``react``, ``vue``, ``html`` or ``unknown``."""
    package = _read_package_json(root)
    dependencies: Dict[str, Any] = {}
    for key in ("dependencies", "devDependencies"):
        section = package.get(key)
        if isinstance(section, dict):
            dependencies.update(section)
    for dependency, framework in _DEPENDENCY_FRAMEWORKS:
        if dependency in dependencies:
            return framework

    suffixes = {path.suffix.lower() for path in paths}
    if suffixes & {".jsx", ".tsx"}:
        return "react"
    if ".vue" in suffixes:
        return "vue"
    names = [entry.name for entry in root.iterdir()] if root.is_dir() else []
    for prefix, framework in _CONFIG_FRAMEWORKS:
        if any(name.startswith(prefix) for name in names):
            return framework
    if suffixes & {".html", ".htm"}:
        return "html"
    return "unknown"


def _is_project_config(path: Path) -> bool:
    return bool(_CONFIG_FILE_PATTERN.search(path.name))


def find_dark_mode_setting(text: str) -> re.Match[str] | None:
    """Return the first ``darkMode`` entry of a v3 config that is not commented out."""
    for match in _V3_DARK_MODE_SETTING.finditer(text):
        line_start = text.rfind("\n", 0, match.start()) + 1
        prefix = text[line_start : match.start()].lstrip()
        if "//" in prefix or prefix.startswith(("/*", "*")):
            continue
        return match
    return None


def v3_dark_mode_enabled(text: str) -> bool:
    """True when the active ``darkMode`` value is class, media or selector."""
    setting = find_dark_mode_setting(text)
    return setting is not None and bool(_V3_DARK_MODE_ENABLED.match(setting.group(1)))


def detect_tailwind_config(root: Path, stylesheets: Sequence[SourceFile]) -> TailwindConfig:
    """Locate the Tailwind config or v4 entry stylesheet and its dark-mode state."""
    config_path = next(
        (root / name for name in TAILWIND_CONFIG_NAMES if (root / name).is_file()),
        None,
    )
    entry = next((sheet for sheet in stylesheets if _V4_IMPORT.search(sheet.content)), None)

    if config_path is None and entry is not None:
        return TailwindConfig(
            version="v4",
            stylesheet_path=entry.path,
            dark_mode_enabled=bool(_V4_DARK_VARIANT.search(entry.content)),
        )
    if config_path is not None:
        config_text = read_source(config_path) or ""
        return TailwindConfig(
            version="v3",
            config_path=config_path,
            stylesheet_path=entry.path if entry is not None else None,
            dark_mode_enabled=v3_dark_mode_enabled(config_text),
        )
    return TailwindConfig(version="unknown")


def refresh_config(scan: ScanResult) -> TailwindConfig:
    """Re-read the Tailwind setup from disk for an existing scan."""
    stylesheets: List[SourceFile] = []
    for sheet in scan.stylesheets:
        content = read_source(sheet.path)
        if content is not None:
            stylesheets.append(SourceFile(path=sheet.path, content=content))
    return detect_tailwind_config(scan.root, stylesheets)


def _load_component(path: Path) -> SourceFile | None:
    content = read_source(path)
    if content is None:
        return None
    classes = tuple(extract_class_strings(content, dialect_for(path)))
    return SourceFile(path=path, content=content, class_strings=classes)


def scan_project(root: Path | str) -> ScanResult:
    """Scan *root* and return an immutable snapshot of its sources."""
    root_path = Path(root).expanduser().resolve()
    if not root_path.is_dir():
        raise ProjectNotFoundError(root_path)

    component_paths = [
        path
        for path in iter_project_files(root_path, COMPONENT_EXTENSIONS)
        if not _is_project_config(path)
    ]
    files = tuple(
        item for item in (_load_component(path) for path in component_paths) if item
    )
    stylesheets = tuple(
        SourceFile(path=path, content=content)
        for path in iter_project_files(root_path, STYLESHEET_EXTENSIONS)
        for content in (read_source(path),)
        if content is not None
    )

    transformable = 0
    estimated = 0
    for item in files:
        changed = [
            value for value in item.class_strings if transform_classes(value).split() != value.split()
        ]
        if any(transformable_tokens(value) for value in item.class_strings):
            transformable += 1
        estimated += len(changed)

    result = ScanResult(
        root=root_path,
        framework=detect_framework(root_path, component_paths),
        files=files,
        stylesheets=stylesheets,
        config=detect_tailwind_config(root_path, stylesheets),
        total_files=len(files),
        transformable_files=transformable,
        estimated_changes=estimated,
    )
    logger.debug(
        "Scanned %s: %d files, %d transformable, framework=%s",
        root_path,
        result.total_files,
        result.transformable_files,
        result.framework,
    )
    return result


def validate_project(scan: ScanResult) -> Tuple[List[str], List[str]]:
    """Return ``(errors, warnings)`` describing whether *scan* can be converted."""
    errors: List[str] = []
    warnings: List[str] = []
    if scan.total_files == 0:
        errors.append("No component files found")
    if scan.config.version == "unknown":
        errors.append("No Tailwind config file or '@import \"tailwindcss\"' stylesheet found")
    if scan.alternate_mode_enabled:
        warnings.append("Dark mode is already enabled in the Tailwind setup")
    if scan.total_files and scan.transformable_files == 0:
        warnings.append("No class strings with dark-mode mappings were found")
    if scan.framework == "unknown":
        warnings.append("Framework not recognised; the generic class-attribute pass will be used")
    return errors, warnings


def dark_mode_status(scan: ScanResult) -> Dict[str, Any]:
    """Return a readiness summary for the ``status`` command."""
    errors, warnings = validate_project(scan)
    config = scan.config
    return {
        "root": str(scan.root),
        "framework": scan.framework,
        "tailwind_version": config.version,
        "config_path": str(config.config_path) if config.config_path else None,
        "stylesheet_path": str(config.stylesheet_path) if config.stylesheet_path else None,
        "dark_mode_enabled": config.dark_mode_enabled,
        "total_files": scan.total_files,
        "transformable_files": scan.transformable_files,
        "estimated_changes": scan.estimated_changes,
        "ready": not errors and not config.dark_mode_enabled,
        "errors": errors,
        "warnings": warnings,
    }
