# wordscatter/core/types.py
"""
Dataclasses for footprints, rectangles, placements and layout results.
Coordinates are canvas units: origin top-left, x right, y down.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from wordscatter.core.error_codes import LAYOUT_INFEASIBLE, LayoutInfeasible


@dataclass(frozen=True)
class Footprint:
    """Estimated box a token occupies, padding included."""
    width: float
    height: float


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2.0, self.y + self.height / 2.0)


@dataclass(frozen=True)
class Placement:
    """A placed token: its box, the text anchor used for rendering and rotation."""
    text: str
    rect: Rect
    anchor_x: float
    anchor_y: float
    rotation_deg: float


@dataclass
class AttemptResult:
    """Outcome of one layout attempt (one shuffled pass over all tokens)."""
    placements: list[Placement] = field(default_factory=list)
    unplaced: list[str] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return not self.unplaced


@dataclass
class LayoutOutcome:
    """
    Result of the retry driver. On success placements covers every token;
    on failure unplaced lists the tokens left over by the last attempt.
    """
    ok: bool
    placements: list[Placement]
    unplaced: list[str]
    attempts: int
    error_key: str | None = None

    def raise_for_failure(self) -> list[Placement]:
        """Return placements, or raise LayoutInfeasible if the layout failed."""
        if not self.ok:
            raise LayoutInfeasible(self.unplaced, attempts=self.attempts)
        return self.placements

    @classmethod
    def success(cls, attempt: AttemptResult, attempts: int) -> LayoutOutcome:
        return cls(ok=True, placements=list(attempt.placements), unplaced=[], attempts=attempts)

    @classmethod
    def failure(cls, attempt: AttemptResult, attempts: int) -> LayoutOutcome:
        return cls(
            ok=False,
            placements=[],
            unplaced=list(attempt.unplaced),
            attempts=attempts,
            error_key=LAYOUT_INFEASIBLE,
        )
