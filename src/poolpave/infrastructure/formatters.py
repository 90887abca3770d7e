"""Output formatters for layout runs."""

from __future__ import annotations

from poolpave.application.dtos import LayoutOutput
from poolpave.domain.value_objects import Statistics, Tile


class MaterialsSummaryFormatter:
    """Formats statistics as a materials summary."""

    def format(self, statistics: Statistics, title: str = "MATERIALS SUMMARY") -> str:
        lines = [
            title,
            "=" * 50,
            f"{'Full tiles:':<30} {statistics.full_count:>10}",
            f"{'Cut tiles:':<30} {statistics.partial_count:>10}",
            f"{'Total laid:':<30} {statistics.total_count:>10}",
            f"{'Laid area:':<30} {statistics.total_area_m2:>10.2f} m²",
            "-" * 50,
            f"{'Subtotal:':<30} {statistics.subtotal:>10}",
            f"{'Wastage:':<30} {statistics.wastage_percent:>9g}%",
            f"{'ORDER QUANTITY:':<30} {statistics.order_quantity:>10}",
        ]
        return "\n".join(lines)


class TileListFormatter:
    """Formats tiles as a table, cut tiles flagged."""

    def __init__(self, limit: int | None = None) -> None:
        """Initialize formatter.

        Args:
            limit: Show at most this many tiles; None shows all.
        """
        self._limit = limit

    def format(self, tiles: tuple[Tile, ...] | list[Tile]) -> str:
        if not tiles:
            return "No tiles."

        lines = [
            "TILES",
            "=" * 78,
            f"{'Id':<22} {'X':>10} {'Y':>10} {'Width':>9} {'Height':>9} {'Angle':>7}  Cut",
            "-" * 78,
        ]
        shown = tiles if self._limit is None else tiles[: self._limit]
        for tile in shown:
            cut = f"{tile.cut_percentage}%" if tile.is_partial else ""
            lines.append(
                f"{tile.id:<22} {tile.x:>10.1f} {tile.y:>10.1f} {tile.width:>9.1f} "
                f"{tile.height:>9.1f} {tile.angle:>7.1f}  {cut}"
            )
        if len(shown) < len(tiles):
            lines.append(f"... {len(tiles) - len(shown)} more")
        return "\n".join(lines)


class LayoutReportFormatter:
    """Formats a LayoutOutput: errors and warnings, then the materials summary."""

    def __init__(self, show_tiles: bool = False) -> None:
        self._summary = MaterialsSummaryFormatter()
        self._tiles = TileListFormatter() if show_tiles else None

    def format(self, output: LayoutOutput) -> str:
        title = f"{output.kind.upper()} MATERIALS SUMMARY"
        if not output.is_valid:
            return "\n".join([title, "=" * 50, *(f"Error: {e}" for e in output.errors)])

        parts = [self._summary.format(output.statistics, title)]
        if output.warnings:
            parts.append("\n".join(f"Warning: {w}" for w in output.warnings))
        if self._tiles is not None:
            parts.append(self._tiles.format(output.tiles))
        return "\n\n".join(parts)
