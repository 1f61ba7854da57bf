"""Command-line interface for the duskmode project."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, Iterable

from tqdm import tqdm

from .errors import DuskmodeError
from .features.brand import brand_aware_mappings, extract_brand_profile, profile_from_color
from .features.archetype import STRATEGIES
from .generate.toggle import generate_theme_toggle, suggest_component_placement
from .io.models import (
    BrandColorProfile,
    DarkModeRun,
    ScanResult,
    SmartRecommendation,
    ToggleComponent,
)
from .io.outputs import (
    dumps,
    render_palette_swatch,
    transformation_rows,
    write_json,
    write_transformation_table,
)
from .recommend.recommender import recommend_theme
from .scan.project import dark_mode_status, scan_project
from .themes.presets import find_preset, get_preset, theme_ids
from .themes.validator import (
    catalog_report_json,
    catalog_report_text,
    validate,
    validate_catalog,
)
from .tokens.classes import ClassTransformer, analyze_transformability
from .transform.files import DEFAULT_WORKERS, restore_backup
from .transform.pipeline import ConflictDecision, add_dark_mode

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_VALIDATION_FAILED = 2


def parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments for the dark-mode tooling."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging and per-file details.",
    )

    parser = argparse.ArgumentParser(
        description="Add Tailwind dark-mode variants to a front-end project."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    scan = subparsers.add_parser(
        "scan", parents=[common], help="Scan a project and report transformable classes."
    )
    scan.add_argument("path", nargs="?", default=".", help="Project root directory.")
    scan.add_argument("--json", action="store_true", help="Print the report as JSON.")

    status = subparsers.add_parser(
        "status", parents=[common], help="Show dark-mode readiness for a project."
    )
    status.add_argument("path", nargs="?", default=".", help="Project root directory.")
    status.add_argument("--json", action="store_true", help="Print the status as JSON.")

    add = subparsers.add_parser(
        "add-dark-mode", parents=[common], help="Rewrite class strings and enable dark mode."
    )
    add.add_argument("path", nargs="?", default=".", help="Project root directory.")
    add.add_argument(
        "--theme",
        default=None,
        help=f"Theme preset to apply ({', '.join(theme_ids())}).",
    )
    add.add_argument(
        "--dry-run",
        action="store_true",
        help="Compute and report changes without writing files.",
    )
    add.add_argument(
        "--backup",
        default=None,
        metavar="DIR",
        help="Copy files to DIR before writing changes.",
    )
    add.add_argument(
        "--on-conflict",
        choices=[decision.value for decision in ConflictDecision],
        default=None,
        help="What to do when dark mode is already enabled.",
    )
    add.add_argument(
        "--workers",
        type=int,
        default=DEFAULT_WORKERS,
        help="Number of worker threads used to transform files.",
    )
    add.add_argument(
        "--adaptive",
        action="store_true",
        help="Tint dark neutrals toward the detected brand colour.",
    )
    add.add_argument(
        "--brand-color",
        default=None,
        metavar="HEX",
        help="Use HEX as the brand colour for adaptive mappings.",
    )
    add.add_argument(
        "--report-dir",
        default=None,
        metavar="DIR",
        help="Write transformations.parquet and run.json to DIR.",
    )
    add.add_argument(
        "--toggle",
        action="store_true",
        help="Generate a theme toggle component that switches the .dark class.",
    )
    add.add_argument(
        "--toggle-dir",
        default=None,
        metavar="DIR",
        help="Directory for the toggle (default: a conventional one for the framework).",
    )
    add.add_argument("--json", action="store_true", help="Print the run summary as JSON.")

    brand = subparsers.add_parser(
        "analyze-brand",
        parents=[common],
        help="Detect brand colours, archetype and a recommended theme.",
    )
    brand.add_argument("path", nargs="?", default=".", help="Project root directory.")
    brand.add_argument("--json", action="store_true", help="Print the analysis as JSON.")
    brand.add_argument(
        "--swatch",
        default=None,
        metavar="PNG",
        help="Render the detected brand palette to PNG.",
    )

    validate_parser = subparsers.add_parser(
        "validate-themes", parents=[common], help="Score theme presets for quality."
    )
    validate_parser.add_argument(
        "--theme", default=None, help="Validate a single preset instead of the catalog."
    )
    validate_parser.add_argument("--json", action="store_true", help="Print JSON output.")

    restore = subparsers.add_parser(
        "restore", parents=[common], help="Restore files from a backup directory."
    )
    restore.add_argument("backup", help="Backup directory created by add-dark-mode.")
    restore.add_argument("path", nargs="?", default=".", help="Project root directory.")

    return parser.parse_args(list(argv) if argv is not None else None)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _scan_report(scan: ScanResult) -> Dict[str, Any]:
    analysis = analyze_transformability(
        value for item in scan.files for value in item.class_strings
    )
    report = dark_mode_status(scan)
    report["tokens"] = {
        "total": analysis.total,
        "transformable": analysis.transformable,
        "percentage": analysis.percentage,
        "already_dark": len(analysis.dark_tokens),
    }
    return report


def _cmd_scan(args: argparse.Namespace) -> int:
    scan = scan_project(args.path)
    report = _scan_report(scan)
    if args.json:
        print(json.dumps(report, indent=2))
        return EXIT_OK
    print(f"[scan] {report['root']} ({report['framework']}, tailwind {report['tailwind_version']})")
    print(
        f"[scan] {report['total_files']} files, {report['transformable_files']} transformable, "
        f"~{report['estimated_changes']} class strings to update"
    )
    tokens = report["tokens"]
    print(
        f"[scan] {tokens['transformable']}/{tokens['total']} tokens mapped "
        f"({tokens['percentage']:.1f}%), {tokens['already_dark']} already dark"
    )
    if args.verbose:
        for item in scan.files:
            print(f"  {item.path.relative_to(scan.root)}: {len(item.class_strings)} class strings")
    for message in report["errors"]:
        print(f"[error] {message}")
    for message in report["warnings"]:
        print(f"[warn] {message}")
    return EXIT_OK


def _cmd_status(args: argparse.Namespace) -> int:
    status = dark_mode_status(scan_project(args.path))
    if args.json:
        print(json.dumps(status, indent=2))
        return EXIT_OK
    enabled = "enabled" if status["dark_mode_enabled"] else "not enabled"
    print(f"[status] dark mode {enabled} ({status['tailwind_version']})")
    target = status["config_path"] or status["stylesheet_path"] or "none found"
    print(f"[status] config: {target}")
    print(
        f"[status] {status['transformable_files']}/{status['total_files']} files transformable, "
        f"ready={status['ready']}"
    )
    for message in status["errors"]:
        print(f"[error] {message}")
    for message in status["warnings"]:
        print(f"[warn] {message}")
    return EXIT_OK


def _brand_profile_for(args: argparse.Namespace, scan: ScanResult) -> BrandColorProfile:
    if args.brand_color:
        return profile_from_color(args.brand_color)
    return extract_brand_profile(scan.project_text())


def _run_payload(run: DarkModeRun, toggle: ToggleComponent | None = None) -> Dict[str, Any]:
    summary = run.summary
    payload: Dict[str, Any] = {
        "dry_run": run.dry_run,
        "total_files": summary.total_files,
        "successful": summary.success_count,
        "failed": summary.failure_count,
        "total_changes": summary.total_changes,
        "written": [str(path) for path in run.written],
        "write_failed": len(run.write_errors),
        "write_errors": {str(path): error for path, error in run.write_errors.items()},
        "config_status": run.config_status,
        "decision": run.decision,
        "backup_dir": str(run.backup_dir) if run.backup_dir else None,
        "notes": dict(run.notes),
        "files": transformation_rows(summary),
    }
    if toggle is not None:
        payload["toggle"] = {
            "path": str(toggle.path),
            "framework": toggle.framework,
            "written": toggle.written,
            "instructions": list(toggle.instructions),
        }
    return payload


def _print_run(run: DarkModeRun, root: Path, verbose: bool) -> None:
    summary = run.summary
    label = "dry-run" if run.dry_run else "transform"
    for result in summary.results:
        relative = result.path.relative_to(root) if result.path.is_relative_to(root) else result.path
        if not result.success:
            print(f"[warn] {relative}: {result.error}")
            continue
        if result.changes_count == 0:
            continue
        print(f"[{label}] {relative}: {result.changes_count} class strings")
        if verbose:
            for value in result.transformed_classes:
                print(f"    {value}")
    print(
        f"[{label}] {summary.success_count}/{summary.total_files} files ok, "
        f"{summary.failure_count} failed, {summary.total_changes} changes"
    )
    for path, error in run.write_errors.items():
        relative = path.relative_to(root) if path.is_relative_to(root) else path
        print(f"[warn] could not write {relative}: {error}")
    if not run.dry_run:
        print(f"[transform] {len(run.written)} files written, {len(run.write_errors)} write failures")
    if run.backup_dir is not None:
        print(f"[backup] {run.backup_dir}")
    messages = {
        "patched": "enabled class-based dark mode",
        "already-enabled": "dark mode already enabled; config left unchanged",
        "missing-target": "no Tailwind config or stylesheet to patch; add darkMode manually",
        "cancelled": "dark mode already enabled; run cancelled, nothing written",
        "pending": "dark mode will be enabled when changes are applied",
        "write-failed": "could not write the Tailwind setup; add darkMode manually",
    }
    print(f"[config] {messages.get(run.config_status, run.config_status)}")
    for key, note in run.notes.items():
        print(f"[{key}] {note}")


def _print_toggle(toggle: ToggleComponent, verbose: bool) -> None:
    if toggle.written:
        print(f"[toggle] wrote {toggle.framework} theme toggle to {toggle.path}")
    else:
        print(f"[toggle] {toggle.path} already exists; left unchanged")
    if verbose or toggle.written:
        for line in toggle.instructions:
            print(f"  {line}")


def _cmd_add_dark_mode(args: argparse.Namespace) -> int:
    scan = scan_project(args.path)
    if args.theme and find_preset(args.theme) is None:
        print(f"[warn] unknown theme '{args.theme}'; using the generic mapping")

    transformer = None
    if args.adaptive or args.brand_color:
        profile = _brand_profile_for(args, scan)
        mappings = brand_aware_mappings(profile)
        if mappings:
            transformer = ClassTransformer(extra=mappings)
            print(f"[brand] adaptive mappings from {profile.primary.value}")
        else:
            print("[brand] no brand colour detected; using the generic mapping")

    on_conflict: Callable[..., ConflictDecision] | None = None
    if args.on_conflict:
        chosen = ConflictDecision(args.on_conflict)
        on_conflict = lambda _conflict: chosen  # noqa: E731

    with tqdm(total=len(scan.files), desc="Transforming files", unit="file", leave=False) as bar:
        run = add_dark_mode(
            scan,
            theme_id=args.theme,
            dry_run=args.dry_run,
            backup_dir=Path(args.backup) if args.backup else None,
            on_conflict=on_conflict,
            workers=max(1, args.workers),
            on_result=lambda _result: bar.update(1),
            transformer=transformer,
        )

    toggle: ToggleComponent | None = None
    toggle_dir = Path(args.toggle_dir) if args.toggle_dir else None
    if args.toggle and run.config_status != "cancelled":
        if args.dry_run:
            target = toggle_dir or suggest_component_placement(scan.root, scan.framework)[0]
            if not args.json:
                print(f"[toggle] would write a theme toggle to {target}")
        else:
            toggle = generate_theme_toggle(scan.root, scan.framework, output_dir=toggle_dir)

    if args.report_dir:
        out_dir = Path(args.report_dir)
        table_path = write_transformation_table(run.summary, out_dir)
        write_json(out_dir / "run.json", _run_payload(run, toggle))
        if table_path is not None and not args.json:
            print(f"[report] wrote {table_path}")

    if args.json:
        print(json.dumps(_run_payload(run, toggle), indent=2))
    else:
        _print_run(run, scan.root, args.verbose)
        if toggle is not None:
            _print_toggle(toggle, args.verbose)
    return EXIT_FATAL if run.config_status == "cancelled" else EXIT_OK


def _print_recommendation(recommendation: SmartRecommendation, verbose: bool) -> None:
    profile = recommendation.brand_profile
    if profile.primary is None:
        print("[brand] no strong brand colours detected")
    else:
        print(
            f"[brand] primary {profile.primary.value} "
            f"({profile.primary.usage_count} uses, {profile.temperature}, "
            f"confidence {profile.confidence:.2f})"
        )
        for sample in profile.palette[1:]:
            print(f"  {sample.role}: {sample.value} ({sample.usage_count} uses)")
    archetype = recommendation.archetype
    print(f"[archetype] {archetype.archetype} (confidence {archetype.confidence:.2f})")
    if verbose:
        for name, score in archetype.scores.items():
            print(f"  {name}={score:.2f}")
        for key, value in STRATEGIES[archetype.archetype].items():
            print(f"  {key}: {value}")
    top = recommendation.recommended
    print(f"[theme] recommended {top.theme_id} (score {top.score:.3f})")
    for line in top.reasoning:
        print(f"  {line}")
    for alternative in recommendation.alternatives:
        print(f"  alternative: {alternative.theme_id} (score {alternative.score:.3f})")
    if verbose:
        for line in recommendation.reasoning:
            print(f"  {line}")


def _cmd_analyze_brand(args: argparse.Namespace) -> int:
    scan = scan_project(args.path)
    recommendation = recommend_theme(scan)
    if args.swatch:
        swatch = render_palette_swatch(recommendation.brand_profile, Path(args.swatch))
        if swatch is not None and not args.json:
            print(f"[brand] wrote palette swatch to {swatch}")
    if args.json:
        print(dumps(recommendation))
    else:
        _print_recommendation(recommendation, args.verbose)
    return EXIT_OK


def _cmd_validate_themes(args: argparse.Namespace) -> int:
    if args.theme:
        results = [validate(get_preset(args.theme))]
    else:
        results = validate_catalog()
    if args.json:
        print(catalog_report_json(results))
    else:
        print(catalog_report_text(results), end="")
    return EXIT_OK if all(result.passed for result in results) else EXIT_VALIDATION_FAILED


def _cmd_restore(args: argparse.Namespace) -> int:
    restored = restore_backup(Path(args.backup), Path(args.path))
    print(f"[restore] restored {len(restored)} files from {args.backup}")
    return EXIT_OK


_COMMANDS: Dict[str, Callable[[argparse.Namespace], int]] = {
    "scan": _cmd_scan,
    "status": _cmd_status,
    "add-dark-mode": _cmd_add_dark_mode,
    "analyze-brand": _cmd_analyze_brand,
    "validate-themes": _cmd_validate_themes,
    "restore": _cmd_restore,
}


def main(argv: Iterable[str] | None = None) -> int:
    """Entry point for the CLI."""
    args = parse_args(argv)
    _configure_logging(args.verbose)
    try:
        return _COMMANDS[args.command](args)
    except (DuskmodeError, OSError, ValueError) as exc:
        print(f"[error] {exc}")
        return EXIT_FATAL


if __name__ == "__main__":
    raise SystemExit(main())
