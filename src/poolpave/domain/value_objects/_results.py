"""Solver result value objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ._geometry import Point
from ._tiles import CutStrategy, Tile


@dataclass(frozen=True)
class Statistics:
    """Counts and quantities derived from a tile set.

    Always recomputed from the current tiles; never stored on its own.

    Attributes:
        full_count: Tiles laid at nominal size.
        partial_count: Cut tiles.
        total_area_m2: Laid area in square metres.
        subtotal: Tiles counted towards the order.
        order_quantity: Subtotal plus wastage, rounded up.
        wastage_percent: Wastage applied to the subtotal.
    """

    full_count: int = 0
    partial_count: int = 0
    total_area_m2: float = 0.0
    subtotal: int = 0
    order_quantity: int = 0
    wastage_percent: float = 0.0

    @property
    def edge_count(self) -> int:
        """Alias of ``partial_count`` used in paving summaries."""
        return self.partial_count

    @property
    def total_count(self) -> int:
        return self.full_count + self.partial_count


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a boundary check. Failure is a value, not an exception."""

    valid: bool
    error: str | None = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(valid=True)

    @classmethod
    def fail(cls, error: str) -> "ValidationResult":
        return cls(valid=False, error=error)


class FillOutcome(str, Enum):
    """How a paving fill finished."""

    OK = "ok"
    INVALID = "invalid"
    EMPTY = "empty"


@dataclass(frozen=True)
class PavingResult:
    """Tiles and statistics from a paving fill."""

    tiles: tuple[Tile, ...]
    statistics: Statistics
    outcome: FillOutcome
    validation: ValidationResult

    @property
    def ok(self) -> bool:
        return self.outcome is FillOutcome.OK

    @property
    def is_empty(self) -> bool:
        return self.outcome is FillOutcome.EMPTY

    @property
    def message(self) -> str | None:
        if self.outcome is FillOutcome.INVALID:
            return self.validation.error
        if self.outcome is FillOutcome.EMPTY:
            return "No pavers fit inside the boundary"
        return None


@dataclass(frozen=True)
class CopingResult:
    """Coping band around a pool outline.

    Attributes:
        tiles: Coping tiles, edge by edge in outline order.
        statistics: Derived counts and area.
        strategies: Cut strategy applied to each edge of ``outline``.
        outline: Simplified outline the edges are indexed against.
    """

    tiles: tuple[Tile, ...]
    statistics: Statistics
    strategies: tuple[CutStrategy, ...] = ()
    outline: tuple[Point, ...] = ()


@dataclass(frozen=True)
class ExtensionResult:
    """Tiles added by a boundary auto-extension pass.

    ``skipped_reason`` is set when the pass was a deliberate no-op, for
    example ``"unedited"`` while the boundary still matches its default.
    """

    tiles: tuple[Tile, ...]
    statistics: Statistics
    skipped_reason: str | None = None

    @property
    def skipped(self) -> bool:
        return self.skipped_reason is not None
