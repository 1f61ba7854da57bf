from __future__ import annotations

from pathlib import Path

import pytest

from duskmode.errors import MissingConfigTargetError
from duskmode.io.models import TailwindConfig
from duskmode.transform.config import (
    V3_DARK_MODE_ENTRY,
    V4_DARK_VARIANT,
    enable_alternate_mode,
    patch_config_text,
    patch_stylesheet_text,
)


def test_patch_config_inserts_dark_mode() -> None:
    text = "module.exports = {\n  content: [],\n}\n"
    patched = patch_config_text(text)

    assert patched == "module.exports = {\n  darkMode: 'class',\n  content: [],\n}\n"
    assert patch_config_text(patched) is None


def test_patch_typed_config() -> None:
    text = "const config: Config = {\n  content: [],\n}\nexport default config\n"
    assert V3_DARK_MODE_ENTRY in patch_config_text(text)


def test_patch_config_overwrite_replaces_existing_value() -> None:
    text = "export default {\n  darkMode: 'media',\n  content: [],\n}\n"
    assert patch_config_text(text) is None
    assert patch_config_text(text, overwrite=True) == (
        "export default {\n  darkMode: 'class',\n  content: [],\n}\n"
    )


def test_patch_config_replaces_disabled_value() -> None:
    text = "module.exports = {\n  darkMode: false,\n  content: [],\n}\n"
    assert patch_config_text(text) == (
        "module.exports = {\n  darkMode: 'class',\n  content: [],\n}\n"
    )


def test_patch_config_ignores_commented_entry() -> None:
    text = "module.exports = {\n  // darkMode: 'class',\n  content: [],\n}\n"
    assert patch_config_text(text) == (
        "module.exports = {\n  darkMode: 'class',\n  // darkMode: 'class',\n  content: [],\n}\n"
    )


def test_patch_config_without_export_object() -> None:
    with pytest.raises(ValueError):
        patch_config_text("module.exports = require('./base')\n")


def test_patch_stylesheet() -> None:
    text = '@import "tailwindcss";\n\nbody { margin: 0; }\n'
    patched = patch_stylesheet_text(text)

    assert patched == f'@import "tailwindcss";\n\n{V4_DARK_VARIANT}\n\nbody {{ margin: 0; }}\n'
    assert patch_stylesheet_text(patched) is None
    assert patch_stylesheet_text(patched, overwrite=True) is None


def test_patch_stylesheet_overwrite_and_missing_import() -> None:
    existing = '@import "tailwindcss";\n@custom-variant dark (&:is(.dark *));\n'
    assert patch_stylesheet_text(existing) is None
    assert patch_stylesheet_text(existing, overwrite=True) == (
        f'@import "tailwindcss";\n{V4_DARK_VARIANT}\n'
    )
    assert patch_stylesheet_text("body {}\n") == f"{V4_DARK_VARIANT}\nbody {{}}\n"


def test_enable_alternate_mode_writes_once(tmp_path: Path) -> None:
    config_path = tmp_path / "tailwind.config.js"
    config_path.write_text("module.exports = {\n  content: [],\n}\n", encoding="utf-8")
    config = TailwindConfig(version="v3", config_path=config_path)

    assert enable_alternate_mode(config) is True
    assert V3_DARK_MODE_ENTRY in config_path.read_text(encoding="utf-8")
    assert enable_alternate_mode(config) is False


def test_enable_alternate_mode_prefers_v4_stylesheet(tmp_path: Path) -> None:
    sheet = tmp_path / "app.css"
    sheet.write_text('@import "tailwindcss";\n', encoding="utf-8")

    assert enable_alternate_mode(TailwindConfig(version="v4", stylesheet_path=sheet)) is True
    assert V4_DARK_VARIANT in sheet.read_text(encoding="utf-8")


def test_enable_alternate_mode_without_target(tmp_path: Path) -> None:
    with pytest.raises(MissingConfigTargetError):
        enable_alternate_mode(TailwindConfig(version="unknown"))

    config_path = tmp_path / "tailwind.config.js"
    config_path.write_text("module.exports = require('./base')\n", encoding="utf-8")
    with pytest.raises(MissingConfigTargetError) as exc:
        enable_alternate_mode(TailwindConfig(version="v3", config_path=config_path))
    assert "tailwind.config.js" in str(exc.value)
