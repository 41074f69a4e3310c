"""
Structured error codes for layout and run failures.
Use these keys in return values; map to user-facing messages at the CLI.
"""

from __future__ import annotations

# Known error keys
LAYOUT_INFEASIBLE = "layout_infeasible"
FOOTPRINT_TOO_LARGE = "footprint_too_large"
NO_TOKENS = "no_tokens"
RUN_FAILED = "run_failed"

# User-facing messages (short, actionable)
USER_MESSAGES: dict[str, str] = {
    LAYOUT_INFEASIBLE: "Could not place every word. Try reducing font size or increasing canvas size.",
    FOOTPRINT_TOO_LARGE: "A word is wider or taller than the canvas. Try reducing font size.",
    NO_TOKENS: "The word list is empty.",
    RUN_FAILED: "Run failed. Check the word list and settings.",
}


def user_message(error_key: str | None, fallback: str = "Something went wrong.") -> str:
    """Return a user-facing message for the given error key."""
    if not error_key:
        return fallback
    return USER_MESSAGES.get(error_key, fallback)


class LayoutInfeasible(RuntimeError):
    """Every retry left at least one token unplaced."""

    def __init__(self, unplaced: list[str], attempts: int | None = None) -> None:
        self.unplaced = list(unplaced)
        self.attempts = attempts
        self.error_key = LAYOUT_INFEASIBLE
        words = ", ".join(self.unplaced)
        super().__init__(
            f"Failed to place {len(self.unplaced)} word(s): {words}. "
            "Try reducing font size or increasing canvas size."
        )
