# tests/test_runner_cli.py
"""
CLI: writes the SVG on success, exit code 1 and no SVG when the layout is
infeasible, optional reports and preview.
"""

from __future__ import annotations

import json
import logging

from wordscatter.core.runner import main


def _words(tmp_path, lines: list[str]):
    path = tmp_path / "words.txt"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_cli_writes_svg(tmp_path, caplog) -> None:
    words = _words(tmp_path, ["cat", "dog", "", "\U0001F436"])
    out = tmp_path / "reading.svg"
    with caplog.at_level(logging.INFO):
        code = main([str(words), str(out), "--seed", "1"])
    assert code == 0
    svg = out.read_text(encoding="utf-8")
    assert svg.count("<text ") == 3
    assert "Found 3 words" in caplog.text
    assert "Successfully placed all 3 words" in caplog.text


def test_cli_infeasible_exit_code(tmp_path, caplog) -> None:
    words = _words(tmp_path, ["x" * 80])
    out = tmp_path / "reading.svg"
    code = main([str(words), str(out), "--seed", "0", "--max-retries", "2", "--max-attempts", "10"])
    assert code == 1
    assert not out.exists()
    assert "Failed after 2 attempts" in caplog.text


def test_cli_missing_input(tmp_path) -> None:
    assert main([str(tmp_path / "missing.txt"), str(tmp_path / "o.svg")]) == 1


def test_cli_empty_input(tmp_path) -> None:
    words = _words(tmp_path, ["", "  "])
    assert main([str(words), str(tmp_path / "o.svg")]) == 1


def test_cli_invalid_config(tmp_path) -> None:
    words = _words(tmp_path, ["a"])
    assert main([str(words), str(tmp_path / "o.svg"), "--font-size", "0"]) == 2


def test_cli_reports_and_preview(tmp_path) -> None:
    words = _words(tmp_path, ["sun", "moon", "star"])
    out = tmp_path / "out.svg"
    preview = tmp_path / "out.png"
    code = main([
        str(words), str(out),
        "--seed", "4",
        "--report-dir", str(tmp_path / "reports"),
        "--run-name", "demo",
        "--preview", str(preview),
        "--debug-boxes",
    ])
    assert code == 0
    assert preview.exists() and preview.stat().st_size > 0
    data = json.loads((tmp_path / "reports" / "demo" / "placements.json").read_text(encoding="utf-8"))
    assert data["summary"]["ok"] is True
    assert len(data["placements"]) == 3
    meta = json.loads((tmp_path / "reports" / "demo" / "run_metadata.json").read_text(encoding="utf-8"))
    assert meta["seed"] == 4
    assert meta["n_tokens"] == 3


def test_cli_relative_paths_use_repo_root(tmp_path) -> None:
    _words(tmp_path, ["a", "b"])
    code = main(["words.txt", "page.svg", "--seed", "2", "--repo-root", str(tmp_path)])
    assert code == 0
    assert (tmp_path / "page.svg").exists()


def test_cli_zero_retries_is_config_error(tmp_path, caplog) -> None:
    words = _words(tmp_path, ["a"])
    assert main([str(words), str(tmp_path / "o.svg"), "--max-retries", "0"]) == 2
    assert "max_retries must be >= 1" in caplog.text


def test_cli_negative_attempts_is_config_error(tmp_path) -> None:
    words = _words(tmp_path, ["a"])
    assert main([str(words), str(tmp_path / "o.svg"), "--max-attempts", "-1"]) == 2


def test_cli_undecodable_input(tmp_path, caplog) -> None:
    words = tmp_path / "words.txt"
    words.write_bytes(b"cat\n\xff\xfe\xfa\n")
    out = tmp_path / "o.svg"
    assert main([str(words), str(out)]) == 1
    assert not out.exists()
    assert "Cannot read word list" in caplog.text


def test_cli_directory_as_input(tmp_path) -> None:
    folder = tmp_path / "lists"
    folder.mkdir()
    assert main([str(folder), str(tmp_path / "o.svg")]) == 1


def test_cli_missing_batch_dir(tmp_path, caplog) -> None:
    code = main(["--batch-dir", str(tmp_path / "nope"), "--repo-root", str(tmp_path)])
    assert code == 2
    assert "Batch directory not found" in caplog.text


def test_cli_batch_dir(tmp_path, capsys) -> None:
    lists_dir = tmp_path / "lists"
    lists_dir.mkdir()
    (lists_dir / "a.txt").write_text("one\ntwo\n", encoding="utf-8")
    code = main(["--batch-dir", "lists", "--repo-root", str(tmp_path), "--seed", "0", "--run-name", "b"])
    assert code == 0
    assert (tmp_path / "reports" / "batch_b" / "index.csv").exists()
    assert "index.csv" in capsys.readouterr().out


def test_cli_report_records_layout_check(tmp_path) -> None:
    words = _words(tmp_path, ["red", "blue"])
    code = main([str(words), str(tmp_path / "o.svg"), "--seed", "8", "--report-dir", str(tmp_path / "r")])
    assert code == 0
    data = json.loads((tmp_path / "r" / "run" / "placements.json").read_text(encoding="utf-8"))
    assert data["summary"]["issues"] == []
