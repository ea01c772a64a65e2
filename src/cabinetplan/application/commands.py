"""Application commands (use cases) for wall layout and nesting."""

from __future__ import annotations

import logging

from cabinetplan.contracts.protocols import PartListGeneratorProtocol
from cabinetplan.domain.entities import Zone
from cabinetplan.domain.services import (
    AutoFillOptions,
    AutoFillService,
    CollisionResolver,
)
from cabinetplan.domain.value_objects import LayoutResult, PresetType, ProjectSettings
from cabinetplan.infrastructure.bin_packing import BinPackingService, Part, SheetSpec

from .dtos import PlanOutput

logger = logging.getLogger(__name__)


class LayoutZoneCommand:
    """Command to lay out one zone, with or without auto-fill."""

    def __init__(
        self,
        auto_fill_service: AutoFillService | None = None,
        collision_resolver: CollisionResolver | None = None,
    ) -> None:
        self.auto_fill_service = auto_fill_service or AutoFillService()
        self.collision_resolver = collision_resolver or CollisionResolver()

    def execute(
        self,
        zone: Zone,
        settings: ProjectSettings,
        options: AutoFillOptions,
        auto_fill: bool = True,
    ) -> LayoutResult:
        """Lay out ``zone``.

        Args:
            zone: Zone as supplied by the user.
            settings: Project settings, passed through to auto-fill.
            options: Auto-fill switches.
            auto_fill: Regenerate auto-filled cabinets. When False only
                collision resolution runs.

        Returns:
            LayoutResult from the engine that ran.
        """
        if auto_fill:
            return self.auto_fill_service.fill(zone, settings, options)
        return self.collision_resolver.resolve(zone)


class PlanZoneCommand:
    """Command to take a zone from layout to a cutting plan.

    Runs the layout engine, asks the injected part list generator for each
    cabinet's parts, and nests the result. Auto-filled filler panels are
    left out of the part list; they are scribed on site.
    """

    def __init__(
        self,
        part_list_generator: PartListGeneratorProtocol,
        layout_command: LayoutZoneCommand | None = None,
    ) -> None:
        self.part_list_generator = part_list_generator
        self.layout_command = layout_command or LayoutZoneCommand()

    def execute(
        self,
        zone: Zone,
        settings: ProjectSettings,
        options: AutoFillOptions | None = None,
        auto_fill: bool = True,
        sheet: SheetSpec | None = None,
    ) -> PlanOutput:
        """Execute the plan command.

        Args:
            zone: Zone as supplied by the user.
            settings: Project settings for the generator and default sheet.
            options: Auto-fill switches. Defaults to ``AutoFillOptions()``.
            auto_fill: Whether to regenerate auto-filled cabinets.
            sheet: Sheet override; defaults to the settings' sheet and kerf.

        Returns:
            PlanOutput with layout, parts and packing. Packing is skipped
            when the layout returned no zone.
        """
        layout = self.layout_command.execute(
            zone, settings, options or AutoFillOptions(), auto_fill
        )
        if layout.zone is None:
            return PlanOutput(layout=layout)

        parts: list[Part] = []
        for unit in layout.zone.cabinets:
            if unit.is_auto_filled and unit.preset is PresetType.FILLER:
                continue
            parts.extend(self.part_list_generator.generate(unit, settings))

        logger.info("Zone %s: %d part lines generated", layout.zone.id, len(parts))

        packing = BinPackingService(sheet or SheetSpec.from_settings(settings)).optimize(parts)
        return PlanOutput(layout=layout, parts=parts, packing=packing)
