"""Conversion from configuration schemas to domain values."""

from __future__ import annotations

from cabinetplan.application.config.schema import (
    AutoFillOptionsSchema,
    CuttingConfiguration,
    PlanConfiguration,
    ProjectSettingsSchema,
    SheetSchema,
    ZoneSchema,
)
from cabinetplan.domain.entities import CabinetUnit, Obstacle, Zone
from cabinetplan.domain.services.auto_fill import AutoFillOptions
from cabinetplan.domain.value_objects import ProjectSettings
from cabinetplan.infrastructure.bin_packing import Part, SheetSpec


def config_to_settings(settings: ProjectSettingsSchema) -> ProjectSettings:
    return ProjectSettings(**settings.model_dump())


def config_to_options(options: AutoFillOptionsSchema) -> AutoFillOptions:
    return AutoFillOptions(**options.model_dump())


def config_to_zone(zone: ZoneSchema) -> Zone:
    """Convert one zone schema, keeping obstacle and cabinet order."""
    return Zone(
        id=zone.id,
        total_length=zone.total_length,
        wall_height=zone.wall_height,
        obstacles=tuple(
            Obstacle(
                kind=o.kind,
                from_left=o.from_left,
                width=o.width,
                height=o.height,
                sill_height=o.sill_height,
                id=o.id,
            )
            for o in zone.obstacles
        ),
        cabinets=tuple(
            CabinetUnit(
                id=c.id,
                preset=c.preset,
                vertical_class=c.vertical_class,
                width=c.width,
                from_left=c.from_left,
                is_auto_filled=c.is_auto_filled,
                label=c.label,
            )
            for c in zone.cabinets
        ),
    )


def config_to_zones(config: PlanConfiguration) -> list[Zone]:
    return [config_to_zone(zone) for zone in config.zones]


def config_to_sheet_spec(sheet: SheetSchema, kerf: int | None = None) -> SheetSpec:
    """Build the nester's sheet spec, with an optional kerf override."""
    return SheetSpec(
        width=sheet.width,
        length=sheet.length,
        kerf=sheet.kerf if kerf is None else kerf,
    )


def config_to_parts(config: CuttingConfiguration) -> list[Part]:
    return [Part(**part.model_dump()) for part in config.parts]
