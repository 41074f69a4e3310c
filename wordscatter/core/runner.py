# wordscatter/core/runner.py
"""
CLI entrypoint: read a word list, lay it out, write the SVG.
Optional PNG preview, JSON reports, or batch mode over a directory.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from wordscatter.core.config import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    DEFAULT_INPUT_PATH,
    DEFAULT_OUTPUT_PATH,
    FONT_SIZE,
    LOG_LEVEL,
    MAX_ATTEMPTS,
    MAX_RETRIES,
    SEED,
    LayoutConfig,
)
from wordscatter.core.error_codes import FOOTPRINT_TOO_LARGE, NO_TOKENS, LayoutInfeasible, user_message
from wordscatter.core.geometry import fits_canvas
from wordscatter.core.io import read_tokens
from wordscatter.core.layout import layout
from wordscatter.core.render_svg import write_svg
from wordscatter.core.reporting import ensure_report_dir, write_placements_json, write_run_metadata_json
from wordscatter.core.text_metrics import footprint_for
from wordscatter.core.validate import validate_outcome

logger = logging.getLogger("wordscatter")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Scatter words on a page without overlaps and write an SVG.")
    p.add_argument("input", nargs="?", default=DEFAULT_INPUT_PATH, help="Word list, one word per line")
    p.add_argument("output", nargs="?", default=DEFAULT_OUTPUT_PATH, help="SVG output path")
    p.add_argument("--seed", type=int, default=SEED, help="Random seed (default: fresh each run)")
    p.add_argument("--font-size", type=float, default=FONT_SIZE, dest="font_size", help="Font size (px)")
    p.add_argument("--canvas-width", type=float, default=CANVAS_WIDTH, dest="canvas_width", help="Canvas width (px)")
    p.add_argument("--canvas-height", type=float, default=CANVAS_HEIGHT, dest="canvas_height", help="Canvas height (px)")
    p.add_argument("--max-attempts", type=int, default=MAX_ATTEMPTS, dest="max_attempts", help="Positions tried per word")
    p.add_argument("--max-retries", type=int, default=MAX_RETRIES, dest="max_retries", help="Full layout retries")
    p.add_argument(
        "--footprint-mode", choices=("estimate", "measured"), default="estimate", dest="footprint_mode",
        help="Estimate word boxes from length, or measure them with Pillow",
    )
    p.add_argument("--preview", type=str, default=None, help="Also write a PNG preview to this path")
    p.add_argument("--debug-boxes", action="store_true", dest="debug_boxes", help="Draw word boxes in the preview")
    p.add_argument("--report-dir", type=str, default=None, dest="report_dir", help="Write JSON reports under this dir")
    p.add_argument("--run-name", type=str, default="run", dest="run_name", help="Reports subdir name")
    p.add_argument("--batch-dir", type=str, default=None, dest="batch_dir", help="Batch mode: directory of .txt lists")
    p.add_argument("--batch-limit", type=int, default=None, dest="batch_limit", help="Max lists in batch")
    p.add_argument("--repo-root", type=str, default=None, dest="repo_root", help="Base for relative paths (default: cwd)")
    return p.parse_args(argv)


def _config_from_args(args: argparse.Namespace) -> LayoutConfig:
    return LayoutConfig(
        canvas_width=args.canvas_width,
        canvas_height=args.canvas_height,
        font_size=args.font_size,
        max_attempts=args.max_attempts,
        max_retries=args.max_retries,
        footprint_mode=args.footprint_mode,
    )


def _resolve(repo_root: Path, path_arg: str) -> Path:
    p = Path(path_arg)
    if not p.is_absolute():
        p = repo_root / p
    return p.resolve()


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO), format="%(message)s")
    args = _parse_args(argv)
    repo_root = Path(args.repo_root).resolve() if args.repo_root else Path.cwd().resolve()
    try:
        config = _config_from_args(args)
    except ValueError as e:
        logger.error("%s", e)
        return 2

    if args.batch_dir:
        from wordscatter.core.batch import run_batch
        try:
            out = run_batch(
                run_name=args.run_name,
                batch_dir=_resolve(repo_root, args.batch_dir),
                config=config,
                limit=args.batch_limit,
                repo_root=repo_root,
                seed=args.seed,
            )
        except ValueError as e:
            logger.error("%s", e)
            return 2
        print(out / "index.csv")
        return 0

    input_path = _resolve(repo_root, args.input)
    logger.info("Reading words from: %s", input_path)
    try:
        tokens = read_tokens(input_path)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Cannot read word list %s: %s", input_path, e)
        return 1
    logger.info("Found %d words", len(tokens))
    if not tokens:
        logger.error(user_message(NO_TOKENS))
        return 1

    too_large = [t for t in tokens if not fits_canvas(footprint_for(t, config), config.canvas_width, config.canvas_height)]
    if too_large:
        logger.warning("%s (%s)", user_message(FOOTPRINT_TOO_LARGE), ", ".join(too_large))

    logger.info("Generating SVG...")
    outcome = layout(tokens, config, seed=args.seed)
    issues = validate_outcome(outcome, config, tokens)
    for issue in issues:
        logger.warning("Layout check: %s", issue)

    if args.report_dir:
        report_dir = ensure_report_dir(repo_root, args.run_name, output_dir=args.report_dir)
        for p in (
            write_placements_json(report_dir, outcome, config, issues),
            write_run_metadata_json(report_dir, args.run_name, str(input_path), len(tokens), args.seed, config),
        ):
            print(p)

    try:
        placements = outcome.raise_for_failure()
    except LayoutInfeasible as e:
        logger.error("Failed after %d attempts: %s", outcome.attempts, e)
        return 1
    logger.info("✓ Successfully placed all %d words!", len(tokens))

    output_path = write_svg(placements, config, _resolve(repo_root, args.output))
    print(output_path)
    if args.preview:
        from wordscatter.core.render import render_preview
        print(render_preview(placements, config, _resolve(repo_root, args.preview), debug_boxes=args.debug_boxes))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
