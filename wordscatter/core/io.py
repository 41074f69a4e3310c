# wordscatter/core/io.py
"""
Load word lists. One token per line; blank lines are skipped and surrounding
whitespace is trimmed.
"""

from __future__ import annotations

from pathlib import Path


def _resolve_path(path: str | Path, repo_root: Path | None) -> Path:
    """Resolve path; if relative, against repo_root (or cwd if repo_root is None)."""
    p = Path(path)
    if not p.is_absolute() and repo_root is not None:
        p = repo_root / p
    return p.resolve()


def parse_tokens(content: str) -> list[str]:
    """Split text into tokens, dropping blank lines."""
    return [line.strip() for line in content.splitlines() if line.strip()]


def read_tokens(path: str | Path, repo_root: Path | None = None) -> list[str]:
    """
    Read tokens from a UTF-8 text file.
    Raises FileNotFoundError if the file is missing.
    """
    resolved = _resolve_path(path, repo_root)
    if not resolved.exists():
        raise FileNotFoundError(f"Word list not found: {resolved}")
    # utf-8-sig drops a leading BOM from files saved by Windows editors.
    return parse_tokens(resolved.read_text(encoding="utf-8-sig"))
