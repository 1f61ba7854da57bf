"""Output helpers for persisting scan, transform and brand results."""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Sequence

import pandas as pd
from PIL import Image, ImageDraw

from .models import BrandColorProfile, TransformationSummary

SWATCH_SIZE = (120, 80)
SWATCH_BORDER = (0xE5, 0xE5, 0xE5)


def dumps(value: Any) -> str:
    payload = asdict(value) if hasattr(value, "__dataclass_fields__") else value
    return json.dumps(payload, indent=2, default=str)


def write_json(path: Path, value: Any) -> Path:
    """Write *value* (dataclass or plain data) to *path* as JSON and return the path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dumps(value), encoding="utf-8")
    return path


def transformation_rows(summary: TransformationSummary) -> list[dict[str, Any]]:
    return [
        {
            "path": str(result.path),
            "success": result.success,
            "changes": result.changes_count,
            "classes": list(result.transformed_classes),
            "error": result.error,
        }
        for result in summary.results
    ]


def write_transformation_table(summary: TransformationSummary, out_dir: Path) -> Path | None:
    """Write per-file change counts to ``transformations.parquet``."""
    rows = transformation_rows(summary)
    if not rows:
        return None
    df = pd.DataFrame(rows)
    table_path = out_dir / "transformations.parquet"
    table_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_parquet(table_path, index=False, engine="pyarrow")
    return table_path


def render_palette_swatch(
    profile: BrandColorProfile, path: Path, size: Sequence[int] = SWATCH_SIZE
) -> Path | None:
    """Render the brand palette as side-by-side colour blocks into a PNG."""
    if not profile.palette:
        return None
    width, height = int(size[0]), int(size[1])
    image = Image.new("RGB", (width * len(profile.palette), height), (255, 255, 255))
    try:
        draw = ImageDraw.Draw(image)
        for index, sample in enumerate(profile.palette):
            left = index * width
            draw.rectangle(
                [left, 0, left + width - 1, height - 1],
                fill=sample.value,
                outline=SWATCH_BORDER,
            )
        path.parent.mkdir(parents=True, exist_ok=True)
        image.save(path, format="PNG")
    finally:
        image.close()
    return path
