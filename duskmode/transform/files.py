"""Per-file class rewriting, batch summaries and disk writes."""

from __future__ import annotations

import logging
import shutil
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Dict, Iterable, Sequence, Tuple

from tenacity import (  # type: ignore[import-untyped]
    Retrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from ..io.models import SourceFile, TransformationResult, TransformationSummary
from ..scan.markup import dialect_for, rewrite_class_strings
from ..tokens.classes import DEFAULT_TRANSFORMER, ClassTransformer

logger = logging.getLogger(__name__)

DEFAULT_WORKERS = 1

ResultCallback = Callable[[TransformationResult], None]

_write_retryer = Retrying(
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=0.1, min=0.1, max=1),
    retry=retry_if_exception_type((PermissionError, BlockingIOError)),
    before_sleep=before_sleep_log(logger, logging.DEBUG),
    reraise=True,
)


def transform_file(
    source: SourceFile,
    theme_id: str | None = None,
    transformer: ClassTransformer | None = None,
) -> TransformationResult:
    """Rewrite the class strings of *source*; failures become a failed result."""
    engine = transformer or DEFAULT_TRANSFORMER
    try:
        content, changed = rewrite_class_strings(
            source.content,
            dialect_for(source.path),
            lambda value: engine.transform(value, theme_id),
        )
    except Exception as exc:  # noqa: BLE001 - recorded as a per-file failure
        logger.warning("Failed to transform %s: %s", source.path, exc)
        return TransformationResult(
            path=source.path,
            success=False,
            original_content=source.content,
            transformed_content=source.content,
            error=str(exc) or exc.__class__.__name__,
        )
    return TransformationResult(
        path=source.path,
        success=True,
        original_content=source.content,
        transformed_content=content,
        changes_count=len(changed),
        transformed_classes=tuple(changed),
    )


def summarize(results: Sequence[TransformationResult]) -> TransformationSummary:
    successes = sum(1 for result in results if result.success)
    return TransformationSummary(
        total_files=len(results),
        success_count=successes,
        failure_count=len(results) - successes,
        total_changes=sum(result.changes_count for result in results if result.success),
        results=tuple(results),
    )


def transform_project(
    files: Iterable[SourceFile],
    theme_id: str | None = None,
    workers: int = DEFAULT_WORKERS,
    on_result: ResultCallback | None = None,
    transformer: ClassTransformer | None = None,
) -> TransformationSummary:
    """Transform every file, keeping input order in the summary.

    Nothing is written to disk. With ``workers > 1`` files are processed on a
    bounded thread pool; *on_result* is called as each result is collected.
    """
    sources = list(files)

    def _run(source: SourceFile) -> TransformationResult:
        return transform_file(source, theme_id, transformer)

    results: list[TransformationResult] = []
    if workers > 1 and len(sources) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            for result in pool.map(_run, sources):
                results.append(result)
                if on_result is not None:
                    on_result(result)
    else:
        for source in sources:
            result = _run(source)
            results.append(result)
            if on_result is not None:
                on_result(result)
    return summarize(results)


def _write_text(path: Path, content: str) -> None:
    with path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(content)


def apply_transformations(
    results: Iterable[TransformationResult],
) -> Tuple[list[Path], Dict[Path, str]]:
    """Write changed, successful results back to disk.

    Returns ``(written, failed)``. A file that still cannot be written after
    the retries is recorded in *failed* and the remaining files are written.
    """
    written: list[Path] = []
    failed: Dict[Path, str] = {}
    for result in results:
        if not result.success or result.changes_count <= 0:
            continue
        try:
            _write_retryer(_write_text, result.path, result.transformed_content)
        except OSError as exc:
            logger.warning("Failed to write %s: %s", result.path, exc)
            failed[result.path] = str(exc) or exc.__class__.__name__
            continue
        logger.debug("Wrote %d class changes to %s", result.changes_count, result.path)
        written.append(result.path)
    return written, failed


def create_backup(paths: Iterable[Path], root: Path, backup_dir: Path) -> Path:
    """Copy *paths* into *backup_dir*, preserving their layout relative to *root*."""
    backup_dir.mkdir(parents=True, exist_ok=True)
    for path in paths:
        relative = Path(path).resolve().relative_to(root.resolve())
        destination = backup_dir / relative
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(path, destination)
    return backup_dir


def restore_backup(backup_dir: Path, root: Path) -> list[Path]:
    """Copy every file in *backup_dir* back over *root* and return restored paths."""
    if not backup_dir.is_dir():
        raise FileNotFoundError(f"Backup directory does not exist: {backup_dir}")
    restored: list[Path] = []
    for source in sorted(backup_dir.rglob("*")):
        if not source.is_file():
            continue
        target = root / source.relative_to(backup_dir)
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(source, target)
        restored.append(target)
    return restored
