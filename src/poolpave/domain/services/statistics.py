"""Derived tile statistics and order quantities."""

from __future__ import annotations

import math
from typing import Iterable

from ..value_objects import Statistics, Tile

__all__ = ["calculate_statistics", "order_quantity"]

MM2_PER_M2 = 1_000_000.0


def order_quantity(subtotal: int, wastage_percent: float = 0.0) -> int:
    """Tiles to order for ``subtotal`` laid tiles plus a wastage allowance.

    The product is rounded to six decimals before taking the ceiling so
    float noise (100 * 1.15 = 114.99999...) does not lose a tile.
    """
    if subtotal <= 0:
        return 0
    return math.ceil(round(subtotal * (1 + wastage_percent / 100.0), 6))


def calculate_statistics(
    tiles: Iterable[Tile],
    wastage_percent: float = 0.0,
    count_partial: bool = True,
) -> Statistics:
    """Summarise a tile set.

    Args:
        tiles: Tiles to count. Areas are taken in mm².
        wastage_percent: Extra stock percentage for the order quantity.
        count_partial: Include cut tiles in the order subtotal.

    Returns:
        Statistics for the tile set.
    """
    full = 0
    partial = 0
    area = 0.0
    for tile in tiles:
        if tile.is_partial:
            partial += 1
        else:
            full += 1
        area += tile.area

    subtotal = full + partial if count_partial else full
    return Statistics(
        full_count=full,
        partial_count=partial,
        total_area_m2=area / MM2_PER_M2,
        subtotal=subtotal,
        order_quantity=order_quantity(subtotal, wastage_percent),
        wastage_percent=wastage_percent,
    )
