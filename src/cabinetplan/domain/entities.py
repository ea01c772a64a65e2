"""Domain entities: wall zones, obstacles and cabinet units.

Entities are frozen dataclasses. The layout engine never mutates a zone;
it returns a new one built with ``dataclasses.replace``.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .geometry import Span
from .value_objects import ObstacleKind, PresetType, VerticalClass

# Windows whose sill is lower than this reach down into the base band.
LOW_SILL_LIMIT = 300

# Windows whose sill is lower than this reach up into the wall-cabinet band.
WALL_BAND_SILL_LIMIT = 2100


@dataclass(frozen=True)
class Obstacle:
    """A fixed, immovable feature on a wall.

    Attributes:
        kind: Door, window, column or pipe.
        from_left: Offset of the left edge from the wall start in mm.
        width: Horizontal extent in mm.
        height: Optional vertical extent in mm.
        sill_height: Distance from floor to the bottom edge (windows only).
        id: Optional identifier used in issue reports.
    """

    kind: ObstacleKind
    from_left: int
    width: int
    height: int | None = None
    sill_height: int | None = None
    id: str | None = None

    @property
    def span(self) -> Span:
        return Span(self.from_left, self.width)

    @property
    def is_hard_block(self) -> bool:
        """Whether cabinets may never occupy this obstacle's span.

        Doors and columns always block. A window blocks when its sill is
        below 300mm; a window without a sill height is treated as floor level.
        """
        if self.kind in (ObstacleKind.DOOR, ObstacleKind.COLUMN):
            return True
        if self.kind is ObstacleKind.WINDOW:
            return (self.sill_height or 0) < LOW_SILL_LIMIT
        return False

    @property
    def is_soft_window(self) -> bool:
        """A window high enough to stand a sink unit under."""
        return self.kind is ObstacleKind.WINDOW and not self.is_hard_block

    def blocks(self, vertical_class: VerticalClass) -> bool:
        """Whether this obstacle forbids cabinets of ``vertical_class``."""
        if self.is_hard_block:
            return True
        if vertical_class is VerticalClass.BASE:
            return False
        return (
            self.kind is ObstacleKind.WINDOW
            and (self.sill_height or 0) < WALL_BAND_SILL_LIMIT
        )


@dataclass(frozen=True)
class CabinetUnit:
    """A placed or to-be-placed cabinet.

    Attributes:
        id: Unique identifier.
        preset: Cabinet template.
        vertical_class: Height band the unit occupies.
        width: Horizontal extent in mm.
        from_left: Offset of the left edge from the wall start in mm.
        is_auto_filled: True for engine-generated units.
        label: Optional sequential label such as ``B01``.
    """

    id: str
    preset: PresetType
    vertical_class: VerticalClass
    width: int
    from_left: int = 0
    is_auto_filled: bool = False
    label: str | None = None

    @property
    def span(self) -> Span:
        return Span(self.from_left, self.width)

    @property
    def right(self) -> int:
        return self.from_left + self.width

    def collides_with(self, other: CabinetUnit) -> bool:
        """Whether both units share height band and horizontal span."""
        return self.vertical_class.collides_with(
            other.vertical_class
        ) and self.span.overlaps(other.span)

    def moved_to(self, from_left: int) -> CabinetUnit:
        return replace(self, from_left=from_left)

    def with_label(self, label: str) -> CabinetUnit:
        return replace(self, label=label)


@dataclass(frozen=True)
class Zone:
    """One wall segment with its obstacles and cabinets.

    Geometry is not validated on construction: a zone may hold cabinets
    pushed past the wall end by collision resolution. Use
    ``cabinetplan.domain.services.validation`` to check a caller's zone.
    """

    id: str
    total_length: int
    wall_height: int = 2400
    obstacles: tuple[Obstacle, ...] = field(default_factory=tuple)
    cabinets: tuple[CabinetUnit, ...] = field(default_factory=tuple)

    def with_cabinets(self, cabinets: list[CabinetUnit] | tuple[CabinetUnit, ...]) -> Zone:
        return replace(self, cabinets=tuple(cabinets))

    @property
    def manual_cabinets(self) -> tuple[CabinetUnit, ...]:
        return tuple(c for c in self.cabinets if not c.is_auto_filled)

    @property
    def auto_filled_cabinets(self) -> tuple[CabinetUnit, ...]:
        return tuple(c for c in self.cabinets if c.is_auto_filled)

    @property
    def hard_blocks(self) -> tuple[Obstacle, ...]:
        return tuple(o for o in self.obstacles if o.is_hard_block)

    def cabinets_of(self, vertical_class: VerticalClass) -> tuple[CabinetUnit, ...]:
        return tuple(c for c in self.cabinets if c.vertical_class is vertical_class)
