"""Application commands (use cases) for layout runs."""

from __future__ import annotations

import logging

from poolpave.application.config import (
    LayoutConfiguration,
    config_to_coping,
    config_to_extension,
    config_to_paving,
)
from poolpave.domain.services import (
    AutoExtensionService,
    CopingLayoutService,
    PavingFillService,
    coping_outer_boundary,
)

from .dtos import LayoutOutput

logger = logging.getLogger(__name__)

__all__ = ["LayoutCommand"]


class LayoutCommand:
    """Runs the solvers a layout configuration asks for.

    Each ``execute_*`` method reads one section of the configuration and
    returns a LayoutOutput; ``execute`` runs every section present.
    """

    def execute_coping(self, config: LayoutConfiguration) -> LayoutOutput:
        """Lay coping around the configured pool outline."""
        if config.coping is None:
            return LayoutOutput(kind="coping", errors=["No coping section in configuration"])

        outline, coping_config = config_to_coping(config.coping)
        result = CopingLayoutService(coping_config).solve(outline)
        output = LayoutOutput(
            kind="coping", tiles=result.tiles, statistics=result.statistics
        )
        if not result.tiles:
            output.warnings.append("Pool outline is degenerate; no coping laid")
        return output

    def execute_paving(self, config: LayoutConfiguration) -> LayoutOutput:
        """Fill the configured paving boundary."""
        if config.paving is None:
            return LayoutOutput(kind="paving", errors=["No paving section in configuration"])

        boundary, paving_config, zones = config_to_paving(config.paving, config.coping)
        result = PavingFillService(paving_config).fill(boundary, zones)
        output = LayoutOutput(
            kind="paving", tiles=result.tiles, statistics=result.statistics
        )
        if not result.validation.valid:
            output.errors.append(result.validation.error or "Invalid boundary")
        elif result.is_empty:
            output.warnings.append(result.message or "No pavers fit")
        return output

    def execute_extension(self, config: LayoutConfiguration) -> LayoutOutput:
        """Grow the configured coping toward the edited extension boundary."""
        if config.extension is None or config.coping is None:
            return LayoutOutput(
                kind="extension",
                errors=["Extension needs both coping and extension sections"],
            )

        outline, coping_config = config_to_coping(config.coping)
        base = CopingLayoutService(coping_config).solve(outline)
        # The base layout lays one row, so the unedited boundary is one row out
        default = coping_outer_boundary(outline, coping_config)
        boundary, global_boundary = config_to_extension(config.extension)

        result = AutoExtensionService(coping_config).extend(
            base.tiles,
            boundary,
            default_boundary=default,
            global_boundary=global_boundary,
            interior=outline,
        )
        output = LayoutOutput(
            kind="extension", tiles=result.tiles, statistics=result.statistics
        )
        if result.skipped_reason == "unedited":
            output.warnings.append("Boundary matches the default coping edge; nothing to extend")
        elif result.skipped_reason is not None:
            output.warnings.append(f"Extension skipped: {result.skipped_reason}")
        return output

    def execute(self, config: LayoutConfiguration) -> dict[str, LayoutOutput]:
        """Run every section present: coping, then paving, then extension."""
        outputs: dict[str, LayoutOutput] = {}
        if config.coping is not None:
            outputs["coping"] = self.execute_coping(config)
        if config.paving is not None:
            outputs["paving"] = self.execute_paving(config)
        if config.extension is not None:
            outputs["extension"] = self.execute_extension(config)
        logger.debug("Executed layout sections: %s", ", ".join(outputs))
        return outputs
