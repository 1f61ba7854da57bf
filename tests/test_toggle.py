from __future__ import annotations

import json
from pathlib import Path

import pytest

from duskmode import cli
from duskmode.generate.toggle import (
    SCRIPT_FILENAME,
    generate_theme_toggle,
    render_toggle,
    suggest_component_placement,
)


def test_placement_prefers_existing_directory(tmp_path: Path) -> None:
    (tmp_path / "components").mkdir()

    suggested, alternatives = suggest_component_placement(tmp_path, "nextjs")

    assert suggested == tmp_path / "components"
    assert alternatives == (
        tmp_path / "src/components",
        tmp_path / "src",
        tmp_path / "app/components",
    )


def test_placement_defaults_to_first_candidate(tmp_path: Path) -> None:
    suggested, alternatives = suggest_component_placement(tmp_path, "vue")

    assert suggested == tmp_path / "src/components"
    assert alternatives == (tmp_path / "components", tmp_path / "src")


def test_unknown_framework_gets_vanilla_script(tmp_path: Path) -> None:
    suggested, _ = suggest_component_placement(tmp_path, "unknown")
    assert suggested == tmp_path / "js"

    toggle = generate_theme_toggle(tmp_path, "unknown")

    assert toggle.framework == "html"
    assert toggle.path == tmp_path / "js" / SCRIPT_FILENAME
    assert "classList.toggle('dark', next === 'dark')" in toggle.path.read_text(encoding="utf-8")


def test_react_toggle_uses_typescript_when_configured(tmp_path: Path) -> None:
    (tmp_path / "tsconfig.json").write_text("{}", encoding="utf-8")
    (tmp_path / "src").mkdir()

    toggle = generate_theme_toggle(tmp_path, "react")

    assert toggle.written is True
    assert toggle.path == tmp_path / "src" / "ThemeToggle.tsx"
    content = toggle.path.read_text(encoding="utf-8")
    assert "interface ThemeToggleProps" in content
    assert "useState<Theme>('light')" in content
    assert "localStorage.getItem('theme')" in content
    assert "(prefers-color-scheme: dark)" in content
    assert "__" not in content


def test_react_toggle_without_typescript() -> None:
    content = render_toggle("react", "DarkSwitch")

    assert "export function DarkSwitch({ className = '', size = 'md' }) {" in content
    assert "export default DarkSwitch;" in content
    assert "interface" not in content
    assert "dark:bg-gray-800" in content


def test_vue_toggle_is_single_file_component(tmp_path: Path) -> None:
    toggle = generate_theme_toggle(tmp_path, "nuxt", output_dir=tmp_path / "ui")

    assert toggle.path == tmp_path / "ui" / "ThemeToggle.vue"
    content = toggle.path.read_text(encoding="utf-8")
    assert content.startswith("<template>")
    assert "<script setup>" in content
    assert "w-10 h-10 text-base" in content


def test_existing_toggle_is_not_overwritten(tmp_path: Path) -> None:
    target = tmp_path / "js" / SCRIPT_FILENAME
    target.parent.mkdir()
    target.write_text("// mine", encoding="utf-8")

    toggle = generate_theme_toggle(tmp_path, "html")

    assert toggle.written is False
    assert target.read_text(encoding="utf-8") == "// mine"

    replaced = generate_theme_toggle(tmp_path, "html", overwrite=True)
    assert replaced.written is True
    assert target.read_text(encoding="utf-8") != "// mine"


def test_component_name_must_be_pascal_case(tmp_path: Path) -> None:
    with pytest.raises(ValueError) as exc:
        generate_theme_toggle(tmp_path, "react", component_name="theme-toggle")
    assert "PascalCase" in str(exc.value)


def test_add_dark_mode_with_toggle(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    root = tmp_path / "site"
    root.mkdir()
    (root / "index.html").write_text('<main class="bg-white"></main>\n', encoding="utf-8")
    (root / "tailwind.config.js").write_text("module.exports = {\n}\n", encoding="utf-8")

    assert cli.main(["add-dark-mode", str(root), "--toggle", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)

    script = root.resolve() / "js" / SCRIPT_FILENAME
    assert payload["toggle"]["path"] == str(script)
    assert payload["toggle"]["written"] is True
    assert payload["toggle"]["framework"] == "html"
    assert script.is_file()


def test_dry_run_toggle_writes_nothing(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    root = tmp_path / "site"
    root.mkdir()
    (root / "index.html").write_text('<main class="bg-white"></main>\n', encoding="utf-8")
    (root / "tailwind.config.js").write_text("module.exports = {\n}\n", encoding="utf-8")

    assert cli.main(["add-dark-mode", str(root), "--toggle", "--dry-run"]) == 0

    assert "[toggle] would write a theme toggle to" in capsys.readouterr().out
    assert not (root / "js").exists()
