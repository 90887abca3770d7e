"""Adapters from Pydantic configuration schemas to domain value objects.

Schemas describe what a user wrote in a configuration file; the domain
kernel works on frozen value objects. These functions are the only place
the two meet.
"""

from __future__ import annotations

from poolpave.application.config.schemas import (
    CopingConfigSchema,
    ExcludeZoneConfig,
    ExtensionConfigSchema,
    PavingConfigSchema,
    PointConfig,
)
from poolpave.domain.services import coping_exclude_zone, transform_outline
from poolpave.domain.value_objects import (
    CopingConfig,
    ExcludeZone,
    PavingConfig,
    Point,
    PoolShapeKind,
)

__all__ = [
    "config_to_coping",
    "config_to_exclude_zones",
    "config_to_extension",
    "config_to_outline",
    "config_to_paving",
    "config_to_points",
]


def config_to_points(points: list[PointConfig]) -> list[Point]:
    return [Point(p.x, p.y) for p in points]


def config_to_outline(coping: CopingConfigSchema) -> list[Point]:
    """Pool outline with its optional placement transform applied."""
    outline = config_to_points(coping.outline)
    if coping.transform is None:
        return outline
    t = coping.transform
    return transform_outline(
        outline,
        position=Point(t.position.x, t.position.y),
        rotation_deg=t.rotation,
        scale=t.scale,
    )


def config_to_coping(coping: CopingConfigSchema) -> tuple[list[Point], CopingConfig]:
    """Convert a coping section to an outline and a CopingConfig."""
    shape = coping.shape
    if coping.strategies and shape is None:
        shape = PoolShapeKind.CUSTOM
    config = CopingConfig(
        tile_width=coping.tile_width,
        tile_depth=coping.tile_depth,
        grout_width=coping.grout_width,
        strategies=tuple(coping.strategies) if coping.strategies else None,
        shape_kind=shape,
    )
    return config_to_outline(coping), config


def config_to_exclude_zones(zones: list[ExcludeZoneConfig]) -> list[ExcludeZone]:
    return [
        ExcludeZone(outline=tuple(config_to_points(z.outline)), zone_id=z.id or f"zone-{i}")
        for i, z in enumerate(zones)
    ]


def config_to_paving(
    paving: PavingConfigSchema, coping: CopingConfigSchema | None = None
) -> tuple[list[Point], PavingConfig, list[ExcludeZone]]:
    """Convert a paving section to a boundary, a PavingConfig and exclude zones.

    When ``exclude_coping`` is set, the pool plus its coping band from the
    coping section becomes an extra exclude zone.
    """
    config = PavingConfig(
        paver_width=paving.paver_width,
        paver_height=paving.paver_height,
        include_edge_pavers=paving.include_edge_pavers,
        wastage_percent=paving.wastage_percent,
        grout_width=paving.grout_width,
        origin=Point(paving.origin.x, paving.origin.y) if paving.origin else None,
        anchor=paving.anchor,
        count_edge_pavers=paving.count_edge_pavers,
    )
    zones = config_to_exclude_zones(paving.exclude_zones)
    if paving.exclude_coping and coping is not None:
        outline, coping_config = config_to_coping(coping)
        zones.append(coping_exclude_zone(outline, coping_config, rows=coping.rows))
    return config_to_points(paving.boundary), config, zones


def config_to_extension(
    extension: ExtensionConfigSchema,
) -> tuple[list[Point], list[Point] | None]:
    """Convert an extension section to (boundary, global_boundary)."""
    global_boundary = (
        config_to_points(extension.global_boundary)
        if extension.global_boundary is not None
        else None
    )
    return config_to_points(extension.boundary), global_boundary
