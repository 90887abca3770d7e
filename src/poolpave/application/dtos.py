"""Data transfer objects for layout commands."""

from __future__ import annotations

from dataclasses import dataclass, field

from poolpave.domain.value_objects import Statistics, Tile


@dataclass
class LayoutOutput:
    """Output DTO for one layout run.

    Attributes:
        kind: Which solver produced the output ("coping", "paving", "extension").
        tiles: Tiles produced by the run.
        statistics: Derived counts and quantities.
        errors: Blocking problems; no tiles are produced when present.
        warnings: Non-blocking notes, such as an empty fill.
    """

    kind: str
    tiles: tuple[Tile, ...] = ()
    statistics: Statistics = field(default_factory=Statistics)
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the run finished without errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0
