# wordscatter/core/batch.py
"""
Batch mode: lay out every .txt word list in a directory.
Output: reports/batch_<run_name>/index.csv and cases/<case_id>/ with
layout.svg, placements.json and run_metadata.json.
"""

from __future__ import annotations

import csv
import logging
import time
from pathlib import Path

from wordscatter.core.config import REPORTS_DIR, SEED, LayoutConfig
from wordscatter.core.error_codes import NO_TOKENS, RUN_FAILED
from wordscatter.core.io import read_tokens
from wordscatter.core.layout import layout
from wordscatter.core.render_svg import write_svg
from wordscatter.core.reporting import ensure_report_dir, write_placements_json, write_run_metadata_json
from wordscatter.core.validate import validate_outcome

logger = logging.getLogger(__name__)

INDEX_FIELDS = [
    "case_id", "source", "n_tokens", "placed", "unplaced", "attempts", "status", "issues", "duration_ms",
]


def _error_row(case_id: str, source: str, status: str, t0: float) -> dict:
    return {
        "case_id": case_id, "source": source, "n_tokens": 0, "placed": 0, "unplaced": "",
        "attempts": 0, "status": status, "issues": 0, "duration_ms": int((time.perf_counter() - t0) * 1000),
    }


def run_batch(
    run_name: str,
    batch_dir: Path,
    config: LayoutConfig | None = None,
    limit: int | None = None,
    repo_root: Path | None = None,
    seed: int | None = SEED,
) -> Path:
    """
    Lay out each *.txt in batch_dir (sorted by name). When seed is given,
    case i uses seed + i. Returns the batch report directory.
    """
    config = config or LayoutConfig()
    root = repo_root or Path.cwd().resolve()
    if not batch_dir.is_dir():
        raise ValueError(f"Batch directory not found: {batch_dir}")

    report_dir = ensure_report_dir(root, f"batch_{run_name}", output_dir=REPORTS_DIR)
    cases_dir = report_dir / "cases"
    cases_dir.mkdir(parents=True, exist_ok=True)

    word_files = sorted(batch_dir.glob("*.txt"))
    if limit is not None:
        word_files = word_files[:limit]

    rows: list[dict] = []
    for i, path in enumerate(word_files):
        case_id = f"case_{i:04d}_{path.stem}"
        source = str(path.relative_to(root)) if root in path.parents else str(path)
        t0 = time.perf_counter()
        try:
            tokens = read_tokens(path)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Skipping %s: %s", source, e)
            rows.append(_error_row(case_id, source, RUN_FAILED, t0))
            continue
        if not tokens:
            rows.append(_error_row(case_id, source, NO_TOKENS, t0))
            continue

        case_seed = seed + i if seed is not None else None
        outcome = layout(tokens, config, seed=case_seed)
        issues = validate_outcome(outcome, config, tokens)
        for issue in issues:
            logger.warning("%s: %s", case_id, issue)
        duration_ms = int((time.perf_counter() - t0) * 1000)

        case_dir = cases_dir / case_id
        case_dir.mkdir(parents=True, exist_ok=True)
        if outcome.ok:
            write_svg(outcome.placements, config, case_dir / "layout.svg")
        write_placements_json(case_dir, outcome, config, issues)
        write_run_metadata_json(case_dir, run_name, source, len(tokens), case_seed, config)
        rows.append({
            "case_id": case_id, "source": source, "n_tokens": len(tokens),
            "placed": len(outcome.placements), "unplaced": "|".join(outcome.unplaced),
            "attempts": outcome.attempts, "status": "ok" if outcome.ok else outcome.error_key,
            "issues": len(issues), "duration_ms": duration_ms,
        })
        logger.info("%s: %s (%d tokens)", case_id, rows[-1]["status"], len(tokens))

    index_path = report_dir / "index.csv"
    with open(index_path, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=INDEX_FIELDS)
        w.writeheader()
        w.writerows(rows)
    return report_dir
