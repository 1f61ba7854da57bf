"""Dry-run then apply orchestration for adding dark mode to a project."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Callable

from ..errors import AlternateModeConflictError, MissingConfigTargetError
from ..io.models import DarkModeRun, ScanResult
from ..scan.project import refresh_config
from ..tokens.classes import ClassTransformer
from .config import enable_alternate_mode
from .files import (
    DEFAULT_WORKERS,
    ResultCallback,
    apply_transformations,
    create_backup,
    transform_project,
)

logger = logging.getLogger(__name__)


class ConflictDecision(str, Enum):
    CONTINUE = "continue"
    OVERWRITE = "overwrite"
    CANCEL = "cancel"


ConflictHandler = Callable[[AlternateModeConflictError], ConflictDecision]


def _default_decision(conflict: AlternateModeConflictError) -> ConflictDecision:
    if conflict.detected_mid_run:
        return ConflictDecision.CANCEL
    return ConflictDecision.CONTINUE


def add_dark_mode(
    scan: ScanResult,
    theme_id: str | None = None,
    dry_run: bool = False,
    backup_dir: Path | None = None,
    on_conflict: ConflictHandler | None = None,
    workers: int = DEFAULT_WORKERS,
    on_result: ResultCallback | None = None,
    transformer: ClassTransformer | None = None,
) -> DarkModeRun:
    """Transform every scanned file, then write results and patch the config.

    All transformations are computed before anything touches the disk. An
    already-enabled dark mode is passed to *on_conflict* for a decision.
    """
    summary = transform_project(
        scan.files,
        theme_id=theme_id,
        workers=workers,
        on_result=on_result,
        transformer=transformer,
    )

    current = refresh_config(scan)
    decision: ConflictDecision | None = None
    if current.dark_mode_enabled:
        conflict = AlternateModeConflictError(
            current.stylesheet_path if current.version == "v4" else current.config_path,
            detected_mid_run=not scan.config.dark_mode_enabled,
        )
        handler = on_conflict or _default_decision
        decision = ConflictDecision(handler(conflict))
        logger.info("%s; decision: %s", conflict, decision.value)
        if decision is ConflictDecision.CANCEL:
            return DarkModeRun(
                summary=summary,
                dry_run=dry_run,
                config_status="cancelled",
                decision=decision.value,
            )

    decision_value = decision.value if decision is not None else None
    if dry_run:
        return DarkModeRun(
            summary=summary,
            dry_run=True,
            config_status="already-enabled" if current.dark_mode_enabled else "pending",
            decision=decision_value,
        )

    changed = [result.path for result in summary.results if result.success and result.changes_count]
    if backup_dir is not None:
        targets = list(changed)
        for path in (current.config_path, current.stylesheet_path):
            if path is not None and path not in targets:
                targets.append(path)
        create_backup(targets, scan.root, backup_dir)

    written, write_errors = apply_transformations(summary.results)

    notes: dict[str, str] = {}
    if decision is ConflictDecision.CONTINUE:
        config_status = "already-enabled"
    else:
        try:
            patched = enable_alternate_mode(
                current, overwrite=decision is ConflictDecision.OVERWRITE
            )
        except MissingConfigTargetError as exc:
            config_status = "missing-target"
            notes["config"] = str(exc)
        except OSError as exc:
            logger.warning("Failed to patch the Tailwind setup: %s", exc)
            config_status = "write-failed"
            notes["config"] = str(exc) or exc.__class__.__name__
        else:
            config_status = "patched" if patched else "already-enabled"

    return DarkModeRun(
        summary=summary,
        dry_run=False,
        written=tuple(written),
        write_errors=write_errors,
        config_status=config_status,
        decision=decision_value,
        backup_dir=backup_dir,
        notes=notes,
    )
