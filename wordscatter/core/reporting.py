# wordscatter/core/reporting.py
"""
Create reports/<run_name>/ and write placements.json and run_metadata.json.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from wordscatter.core.config import REPORTS_DIR, LayoutConfig
from wordscatter.core.error_codes import user_message
from wordscatter.core.types import LayoutOutcome, Placement


def placement_to_dict(placement: Placement) -> dict:
    r = placement.rect
    return {
        "text": placement.text,
        "anchor": {"x": placement.anchor_x, "y": placement.anchor_y},
        "rotation_deg": placement.rotation_deg,
        "rect": {"x": r.x, "y": r.y, "width": r.width, "height": r.height},
    }


def outcome_to_dict(outcome: LayoutOutcome, config: LayoutConfig, issues: list[str] | None = None) -> dict:
    """Structure for placements.json."""
    return {
        "canvas": {"width": config.canvas_width, "height": config.canvas_height},
        "font": {"family": config.font_family, "size": config.font_size},
        "placements": [placement_to_dict(p) for p in outcome.placements],
        "summary": {
            "ok": outcome.ok,
            "placed": len(outcome.placements),
            "unplaced": outcome.unplaced,
            "attempts": outcome.attempts,
            "error": outcome.error_key,
            "message": user_message(outcome.error_key, fallback=""),
            "issues": list(issues or []),
        },
    }


def run_metadata_dict(
    run_name: str,
    input_path: str,
    n_tokens: int,
    seed: int | None,
    config: LayoutConfig,
) -> dict:
    """Timestamp and config snapshot for run_metadata.json."""
    return {
        "run_name": run_name,
        "timestamp_utc": datetime.now(timezone.utc).isoformat(),
        "input_path": input_path,
        "n_tokens": n_tokens,
        "seed": seed,
        "config": config.to_dict(),
    }


def ensure_report_dir(
    repo_root: Path,
    run_name: str,
    output_dir: str | None = None,
) -> Path:
    """Create output_dir/<run_name>/ under repo_root; return path. Default output_dir from config."""
    base = output_dir if output_dir is not None else REPORTS_DIR
    out = (repo_root / base).resolve() / run_name
    out.mkdir(parents=True, exist_ok=True)
    return out


def write_placements_json(
    report_dir: Path,
    outcome: LayoutOutcome,
    config: LayoutConfig,
    issues: list[str] | None = None,
) -> Path:
    """Write placements.json to report_dir. Returns path to file."""
    path = report_dir / "placements.json"
    data = outcome_to_dict(outcome, config, issues)
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    return path


def write_run_metadata_json(
    report_dir: Path,
    run_name: str,
    input_path: str,
    n_tokens: int,
    seed: int | None,
    config: LayoutConfig,
) -> Path:
    """Write run_metadata.json to report_dir."""
    path = report_dir / "run_metadata.json"
    data = run_metadata_dict(run_name, input_path, n_tokens, seed, config)
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    return path
