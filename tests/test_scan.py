from __future__ import annotations

import json
from pathlib import Path

import pytest

from duskmode.errors import ProjectNotFoundError
from duskmode.scan.project import (
    dark_mode_status,
    detect_framework,
    iter_project_files,
    scan_project,
    v3_dark_mode_enabled,
    validate_project,
)


def _write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def _react_project(root: Path) -> Path:
    _write(root / "package.json", json.dumps({"dependencies": {"react": "^18.2.0"}}))
    _write(root / "tailwind.config.js", "module.exports = {\n  content: ['./src/**/*.jsx'],\n}\n")
    _write(root / "postcss.config.js", "module.exports = { plugins: {} }\n")
    _write(
        root / "src" / "App.jsx",
        'export default () => <main className="bg-white text-gray-900 p-4">Hi</main>;\n',
    )
    _write(root / "src" / "Plain.jsx", 'export const P = () => <p className="p-2">x</p>;\n')
    _write(root / "src" / "index.css", "@tailwind base;\n")
    _write(root / "node_modules" / "lib" / "index.js", '<div className="bg-white"/>')
    return root


def test_scan_react_project(tmp_path: Path) -> None:
    scan = scan_project(_react_project(tmp_path))

    assert scan.framework == "react"
    assert scan.config.version == "v3"
    assert scan.config.config_path == tmp_path.resolve() / "tailwind.config.js"
    assert scan.config.dark_mode_enabled is False
    assert [item.path.name for item in scan.files] == ["App.jsx", "Plain.jsx"]
    assert scan.total_files == 2
    assert scan.transformable_files == 1
    assert scan.estimated_changes == 1
    assert scan.files[0].class_strings == ("bg-white text-gray-900 p-4",)
    assert [sheet.path.name for sheet in scan.stylesheets] == ["index.css"]


def test_scan_v4_stylesheet_project(tmp_path: Path) -> None:
    _write(tmp_path / "app.css", '@import "tailwindcss";\n@custom-variant dark (&:where(.dark, .dark *));\n')
    _write(tmp_path / "index.html", '<body class="bg-white"></body>')

    scan = scan_project(tmp_path)

    assert scan.framework == "html"
    assert scan.config.version == "v4"
    assert scan.config.stylesheet_path.name == "app.css"
    assert scan.alternate_mode_enabled is True


def test_scan_missing_root(tmp_path: Path) -> None:
    with pytest.raises(ProjectNotFoundError) as exc:
        scan_project(tmp_path / "missing")
    assert "does not exist" in str(exc.value)


def test_iter_project_files_skips_ignored_dirs(tmp_path: Path) -> None:
    _write(tmp_path / "dist" / "a.js", "")
    _write(tmp_path / "b.js", "")
    assert [path.name for path in iter_project_files(tmp_path, (".js",))] == ["b.js"]


def test_detect_framework_from_files(tmp_path: Path) -> None:
    assert detect_framework(tmp_path, [tmp_path / "App.vue"]) == "vue"
    assert detect_framework(tmp_path, [tmp_path / "index.html"]) == "html"
    assert detect_framework(tmp_path, []) == "unknown"
    _write(tmp_path / "nuxt.config.ts", "export default {}")
    assert detect_framework(tmp_path, []) == "nuxt"


def test_validate_empty_project(tmp_path: Path) -> None:
    errors, warnings = validate_project(scan_project(tmp_path))
    assert "No component files found" in errors
    assert any("Tailwind" in message for message in errors)
    assert warnings


def test_dark_mode_status(tmp_path: Path) -> None:
    status = dark_mode_status(scan_project(_react_project(tmp_path)))

    assert status["ready"] is True
    assert status["tailwind_version"] == "v3"
    assert status["errors"] == []
    assert status["config_path"].endswith("tailwind.config.js")
    json.dumps(status)


@pytest.mark.parametrize(
    ("config", "expected"),
    [
        ("module.exports = {\n  darkMode: 'class',\n}\n", True),
        ("module.exports = {\n  darkMode: ['selector', '.dark'],\n}\n", True),
        ("module.exports = {\n  darkMode: false,\n}\n", False),
        ("module.exports = {\n  // darkMode: 'class',\n}\n", False),
        ("module.exports = {\n  /* darkMode: 'media' */\n}\n", False),
    ],
)
def test_v3_dark_mode_enabled_reads_active_value(config: str, expected: bool) -> None:
    assert v3_dark_mode_enabled(config) is expected
