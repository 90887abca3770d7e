"""Ghost-preview versus committed tile state.

A drag gesture recomputes tiles on every move; those tiles are shown as a
preview and only replace the committed set when the gesture ends.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable

from ..value_objects import Tile

__all__ = ["LayoutSession"]


@dataclass(frozen=True)
class LayoutSession:
    """Committed tiles plus an optional uncommitted preview."""

    committed: tuple[Tile, ...] = ()
    preview: tuple[Tile, ...] | None = None

    @property
    def has_preview(self) -> bool:
        return self.preview is not None

    @property
    def current(self) -> tuple[Tile, ...]:
        """Tiles to display: the preview while one exists."""
        return self.preview if self.preview is not None else self.committed

    def with_preview(self, tiles: tuple[Tile, ...] | list[Tile]) -> "LayoutSession":
        return replace(self, preview=tuple(tiles))

    def preview_with(self, solve: Callable[..., Any], *args: Any, **kwargs: Any) -> "LayoutSession":
        """Run a solver and show its tiles as the preview.

        ``solve`` is any solver entry point returning a result with ``tiles``.
        """
        result = solve(*args, **kwargs)
        return self.with_preview(result.tiles)

    def commit(self) -> "LayoutSession":
        if self.preview is None:
            return self
        return LayoutSession(committed=self.preview)

    def discard(self) -> "LayoutSession":
        return LayoutSession(committed=self.committed)
