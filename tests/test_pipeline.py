from __future__ import annotations

from pathlib import Path

import pytest

from duskmode.transform import files

from duskmode.scan.project import scan_project
from duskmode.transform.config import V3_DARK_MODE_ENTRY
from duskmode.transform.pipeline import ConflictDecision, add_dark_mode

PAGE = '<main class="bg-white text-gray-900"><p class="p-4">Hi</p></main>\n'


def _project(root: Path, config: str | None = "module.exports = {\n  content: [],\n}\n") -> Path:
    root.mkdir(parents=True, exist_ok=True)
    (root / "index.html").write_text(PAGE, encoding="utf-8")
    if config is not None:
        (root / "tailwind.config.js").write_text(config, encoding="utf-8")
    return root


def test_dry_run_writes_nothing(tmp_path: Path) -> None:
    root = _project(tmp_path / "site")
    run = add_dark_mode(scan_project(root), dry_run=True)

    assert run.dry_run is True
    assert run.config_status == "pending"
    assert run.written == ()
    assert run.summary.total_changes == 1
    assert (root / "index.html").read_text(encoding="utf-8") == PAGE
    assert V3_DARK_MODE_ENTRY not in (root / "tailwind.config.js").read_text(encoding="utf-8")


def test_apply_writes_files_and_patches_config(tmp_path: Path) -> None:
    root = _project(tmp_path / "site")
    backup_dir = tmp_path / "backup"
    seen = []

    run = add_dark_mode(scan_project(root), backup_dir=backup_dir, on_result=seen.append)

    assert run.config_status == "patched"
    assert run.written == (root.resolve() / "index.html",)
    assert len(seen) == 1
    assert "bg-white dark:bg-gray-900 text-gray-900 dark:text-gray-100" in (
        root / "index.html"
    ).read_text(encoding="utf-8")
    assert V3_DARK_MODE_ENTRY in (root / "tailwind.config.js").read_text(encoding="utf-8")
    assert (backup_dir / "index.html").read_text(encoding="utf-8") == PAGE
    assert (backup_dir / "tailwind.config.js").is_file()


def test_second_run_is_a_no_op(tmp_path: Path) -> None:
    root = _project(tmp_path / "site")
    add_dark_mode(scan_project(root))
    content = (root / "index.html").read_text(encoding="utf-8")

    run = add_dark_mode(scan_project(root))

    assert run.decision == ConflictDecision.CONTINUE.value
    assert run.config_status == "already-enabled"
    assert run.written == ()
    assert (root / "index.html").read_text(encoding="utf-8") == content


def test_cancel_decision_writes_nothing(tmp_path: Path) -> None:
    root = _project(tmp_path / "site", "module.exports = {\n  darkMode: 'class',\n}\n")
    conflicts = []

    def cancel(conflict):
        conflicts.append(conflict)
        return ConflictDecision.CANCEL

    run = add_dark_mode(scan_project(root), on_conflict=cancel)

    assert run.config_status == "cancelled"
    assert run.written == ()
    assert conflicts[0].detected_mid_run is False
    assert (root / "index.html").read_text(encoding="utf-8") == PAGE


def test_mid_run_enable_cancels_by_default(tmp_path: Path) -> None:
    root = _project(tmp_path / "site")
    scan = scan_project(root)
    (root / "tailwind.config.js").write_text(
        "module.exports = {\n  darkMode: 'class',\n}\n", encoding="utf-8"
    )

    run = add_dark_mode(scan)

    assert run.config_status == "cancelled"
    assert (root / "index.html").read_text(encoding="utf-8") == PAGE


def test_overwrite_decision_replaces_dark_mode_value(tmp_path: Path) -> None:
    root = _project(tmp_path / "site", "module.exports = {\n  darkMode: 'media',\n}\n")

    run = add_dark_mode(scan_project(root), on_conflict=lambda _conflict: ConflictDecision.OVERWRITE)

    assert run.decision == "overwrite"
    assert run.config_status == "patched"
    assert "darkMode: 'class'," in (root / "tailwind.config.js").read_text(encoding="utf-8")


def test_missing_config_target_is_reported(tmp_path: Path) -> None:
    root = _project(tmp_path / "site", config=None)

    run = add_dark_mode(scan_project(root))

    assert run.config_status == "missing-target"
    assert "No Tailwind config" in run.notes["config"]
    assert run.written == (root.resolve() / "index.html",)


def test_theme_is_applied(tmp_path: Path) -> None:
    root = _project(tmp_path / "site")
    add_dark_mode(scan_project(root), theme_id="vercel")
    assert "bg-white dark:bg-black" in (root / "index.html").read_text(encoding="utf-8")


def test_write_failure_is_recorded_and_run_continues(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    root = _project(tmp_path / "site")
    (root / "a.html").write_text('<p class="text-gray-900"></p>', encoding="utf-8")
    (root / "b.html").write_text('<p class="text-gray-900"></p>', encoding="utf-8")
    locked = root.resolve() / "a.html"
    original = files._write_text

    def deny(path: Path, content: str) -> None:
        if path == locked:
            raise PermissionError("read-only file")
        original(path, content)

    monkeypatch.setattr(files, "_write_text", deny)
    run = add_dark_mode(scan_project(root))

    assert run.write_errors == {locked: "read-only file"}
    assert locked not in run.written
    assert root.resolve() / "b.html" in run.written
    assert "dark:text-gray-100" in (root / "b.html").read_text(encoding="utf-8")
    assert run.config_status == "patched"
    assert V3_DARK_MODE_ENTRY in (root / "tailwind.config.js").read_text(encoding="utf-8")


def test_disabled_dark_mode_value_is_patched(tmp_path: Path) -> None:
    root = _project(tmp_path / "site", "module.exports = {\n  darkMode: false,\n}\n")
    scan = scan_project(root)

    run = add_dark_mode(scan)

    assert scan.config.dark_mode_enabled is False
    assert run.decision is None
    assert run.config_status == "patched"
    assert (root / "tailwind.config.js").read_text(encoding="utf-8") == (
        "module.exports = {\n  darkMode: 'class',\n}\n"
    )
