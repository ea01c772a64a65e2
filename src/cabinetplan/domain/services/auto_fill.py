"""Auto-fill: generate cabinets for the free space along a wall.

Manual cabinets are kept exactly as the user placed them. Every
auto-filled cabinet is discarded and regenerated on each call, so
repeated calls with the same input give the same output.

Placement order:
    1. Sink under the first high-sill window that can take one.
    2. Cooker about one work-triangle distance from the sink.
    3. Hood above the cooker.
    4. Standard-width sweep per vertical class (Base, Tall, Wall),
       with filler panels for leftover gaps.
    5. Sequential labels for everything still unlabelled.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

from cabinetplan.contracts.protocols import IdFactory

from ..entities import CabinetUnit, Zone
from ..geometry import Span, free_run, overlaps_any
from ..ids import SequentialIdFactory
from ..value_objects import (
    COOKER_PRESETS,
    LayoutResult,
    PresetType,
    ProjectSettings,
    VerticalClass,
)
from .labeling import assign_labels
from .validation import check_zone_geometry

logger = logging.getLogger(__name__)

__all__ = [
    "AutoFillOptions",
    "AutoFillService",
    "STANDARD_WIDTHS",
    "auto_fill",
]

SINK_WIDTH = 900
COOKER_WIDTH = 900
WORK_TRIANGLE_DISTANCE = 1800
SINK_GRID = 25
COOKER_PROBE_STEP = 50
STANDARD_WIDTHS: tuple[int, ...] = (900, 800, 600, 500, 450, 400, 300, 150)
MIN_FILLER_WIDTH = 20
CURSOR_NUDGE = 25


@dataclass(frozen=True)
class AutoFillOptions:
    """Switches for the auto-fill passes.

    Attributes:
        include_sink: Place a sink under a high-sill window.
        include_cooker: Place a cooker near the sink.
        include_tall: Sweep the tall class.
        include_wall_cabinets: Place the hood and sweep the wall class.
        prefer_drawers: Fill the base class with 3-drawer units instead of door units.
    """

    include_sink: bool = True
    include_cooker: bool = True
    include_tall: bool = False
    include_wall_cabinets: bool = True
    prefer_drawers: bool = False


def round_to_grid(numerator: int, denominator: int, grid: int) -> int:
    """Round ``numerator / denominator`` to the nearest multiple of ``grid``.

    Halves round up, matching the placement grid used by the wall editor.
    """
    step = denominator * grid
    return ((2 * numerator + step) // (2 * step)) * grid


def probe_positions(preferred: int, max_start: int, step: int) -> Iterator[int]:
    """Yield ``preferred``, then alternate right and left in ``step`` increments.

    Stops once both directions have left ``[0, max_start]``.
    """
    yield preferred
    offset = step
    while True:
        right = preferred + offset
        left = preferred - offset
        if right > max_start and left < 0:
            return
        if right <= max_start:
            yield right
        if left >= 0:
            yield left
        offset += step


class _FillRun:
    """Working state for one auto-fill call."""

    def __init__(
        self,
        zone: Zone,
        options: AutoFillOptions,
        id_factory: IdFactory,
    ) -> None:
        self.zone = zone
        self.options = options
        self.ids = id_factory
        self.manual = list(zone.manual_cabinets)
        self.placed: list[CabinetUnit] = []

    def blocked(self, vertical_class: VerticalClass) -> list[Span]:
        """Spans unavailable to a cabinet of ``vertical_class``."""
        spans = [o.span for o in self.zone.obstacles if o.blocks(vertical_class)]
        spans.extend(
            c.span
            for c in (*self.manual, *self.placed)
            if c.vertical_class.collides_with(vertical_class)
        )
        return spans

    def is_free(self, span: Span, vertical_class: VerticalClass) -> bool:
        return span.within(0, self.zone.total_length) and not overlaps_any(
            span, self.blocked(vertical_class)
        )

    def place(
        self, preset: PresetType, vertical_class: VerticalClass, from_left: int, width: int
    ) -> CabinetUnit:
        unit = CabinetUnit(
            id=self.ids(),
            preset=preset,
            vertical_class=vertical_class,
            width=width,
            from_left=from_left,
            is_auto_filled=True,
        )
        self.placed.append(unit)
        logger.debug("Placed %s (%s) at %d, width %d", preset.value, vertical_class.value, from_left, width)
        return unit

    def find(self, presets: frozenset[PresetType] | set[PresetType]) -> CabinetUnit | None:
        """First manual or placed cabinet with one of ``presets``."""
        for cabinet in (*self.manual, *self.placed):
            if cabinet.preset in presets:
                return cabinet
        return None

    def place_sink(self) -> None:
        if any(c.preset is PresetType.SINK_UNIT for c in self.manual):
            return
        for window in self.zone.obstacles:
            if not window.is_soft_window:
                continue
            left = round_to_grid(2 * window.from_left + window.width - SINK_WIDTH, 2, SINK_GRID)
            if self.is_free(Span(left, SINK_WIDTH), VerticalClass.BASE):
                self.place(PresetType.SINK_UNIT, VerticalClass.BASE, left, SINK_WIDTH)
                return
            logger.debug("Window at %d cannot take a sink at %d", window.from_left, left)

    def place_cooker(self) -> None:
        if any(c.preset in COOKER_PRESETS for c in self.manual):
            return
        total = self.zone.total_length
        sink = self.find({PresetType.SINK_UNIT})
        preferred = 0
        if sink is not None and sink.from_left + WORK_TRIANGLE_DISTANCE + COOKER_WIDTH <= total:
            preferred = sink.from_left + WORK_TRIANGLE_DISTANCE

        for position in probe_positions(preferred, total - COOKER_WIDTH, COOKER_PROBE_STEP):
            if self.is_free(Span(position, COOKER_WIDTH), VerticalClass.BASE):
                self.place(PresetType.COOKER_HOB, VerticalClass.BASE, position, COOKER_WIDTH)
                return
        logger.debug("No free %dmm spot for a cooker on zone %s", COOKER_WIDTH, self.zone.id)

    def place_hood(self) -> None:
        cooker = self.find(COOKER_PRESETS)
        if cooker is None:
            return
        if self.is_free(cooker.span, VerticalClass.WALL):
            self.place(PresetType.HOOD_UNIT, VerticalClass.WALL, cooker.from_left, cooker.width)

    def sweep(self, vertical_class: VerticalClass, preset: PresetType) -> None:
        """Fill one class left to right with standard widths and fillers."""
        total = self.zone.total_length
        cursor = 0
        while cursor < total:
            width = next(
                (w for w in STANDARD_WIDTHS if self.is_free(Span(cursor, w), vertical_class)),
                None,
            )
            if width is not None:
                self.place(preset, vertical_class, cursor, width)
                cursor += width
                continue

            gap = free_run(cursor, self.blocked(vertical_class), total)
            if gap >= MIN_FILLER_WIDTH:
                self.place(PresetType.FILLER, vertical_class, cursor, gap)
                cursor += gap
            else:
                cursor += CURSOR_NUDGE


class AutoFillService:
    """Generates cabinets for the free space along a wall.

    Attributes:
        id_factory: Source of ids for generated cabinets. When None, each
            call uses a fresh ``SequentialIdFactory`` keyed on the zone id.
    """

    def __init__(self, id_factory: IdFactory | None = None) -> None:
        self.id_factory = id_factory

    def fill(
        self,
        zone: Zone,
        settings: ProjectSettings | None = None,
        options: AutoFillOptions | None = None,
    ) -> LayoutResult:
        """Regenerate all auto-filled cabinets of ``zone``.

        Args:
            zone: Zone with manual cabinets and obstacles. Any previously
                auto-filled cabinets are discarded.
            settings: Project settings, carried for the part list generator.
            options: Which passes to run. Defaults to ``AutoFillOptions()``.

        Returns:
            LayoutResult with a new zone holding manual and generated cabinets
            sorted by position and labelled, or ``invalid_zone_geometry``
            errors when the input zone is malformed.
        """
        options = options or AutoFillOptions()
        geometry_issues = check_zone_geometry(zone)
        if geometry_issues:
            for issue in geometry_issues:
                logger.warning(issue.message)
            return LayoutResult(zone=None, issues=tuple(geometry_issues))

        run = _FillRun(
            zone,
            options,
            self.id_factory or SequentialIdFactory(f"{zone.id}-auto"),
        )

        if options.include_sink:
            run.place_sink()
        if options.include_cooker:
            run.place_cooker()
        if options.include_wall_cabinets:
            run.place_hood()

        base_preset = PresetType.BASE_DRAWER_3 if options.prefer_drawers else PresetType.BASE_DOOR
        run.sweep(VerticalClass.BASE, base_preset)
        if options.include_tall:
            run.sweep(VerticalClass.TALL, PresetType.TALL_UTILITY)
        if options.include_wall_cabinets:
            run.sweep(VerticalClass.WALL, PresetType.WALL_STD)

        ordered = sorted((*run.manual, *run.placed), key=lambda c: c.from_left)
        cabinets = assign_labels(ordered, run.manual)

        logger.info(
            "Auto-filled zone %s: %d manual, %d generated cabinets",
            zone.id,
            len(run.manual),
            len(run.placed),
        )
        return LayoutResult(zone=zone.with_cabinets(cabinets))


def auto_fill(
    zone: Zone,
    settings: ProjectSettings | None = None,
    options: AutoFillOptions | None = None,
) -> LayoutResult:
    """Regenerate auto-filled cabinets with default ids. See ``AutoFillService``."""
    return AutoFillService().fill(zone, settings, options)
