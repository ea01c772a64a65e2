"""Value objects for the wall layout domain.

Tagged variants replace open string tags for obstacle kinds, vertical
classes and cabinet presets, so classification logic can branch on
enum members instead of comparing strings.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .entities import Zone


class ObstacleKind(str, Enum):
    """Fixed features on a wall.

    Attributes:
        DOOR: Door opening, always a hard block.
        WINDOW: Window opening, a hard block only when its sill is low.
        COLUMN: Structural column, always a hard block.
        PIPE: Service pipe, never blocks placement.
    """

    DOOR = "door"
    WINDOW = "window"
    COLUMN = "column"
    PIPE = "pipe"


class VerticalClass(str, Enum):
    """Height band occupied by a cabinet.

    Base units sit on the floor, wall units hang in the upper band and
    tall units span both.
    """

    BASE = "Base"
    WALL = "Wall"
    TALL = "Tall"

    @property
    def label_prefix(self) -> str:
        """Letter used for sequential labels (B01, W01, T01)."""
        return self.value[0]

    def collides_with(self, other: VerticalClass) -> bool:
        """Check whether two classes occupy overlapping height bands."""
        return self is other or VerticalClass.TALL in (self, other)


class PresetType(str, Enum):
    """Cabinet templates understood by the part list generator."""

    BASE_DOOR = "Base 2-Door"
    BASE_DRAWER_3 = "Base 3-Drawer"
    BASE_CORNER = "Base Corner"
    WALL_STD = "Wall Standard"
    TALL_OVEN = "Tall Oven/Micro"
    TALL_UTILITY = "Tall Utility"
    SINK_UNIT = "Sink Unit"
    HOOD_UNIT = "Cooker Hood"
    COOKER_HOB = "Cooker Hob"
    FILLER = "Filler Panel"
    OPEN_BOX = "Open Box"


# Presets that mark a cooking position on the base band
COOKER_PRESETS: frozenset[PresetType] = frozenset(
    {PresetType.COOKER_HOB, PresetType.BASE_DRAWER_3}
)


class IssueKind(str, Enum):
    """Kinds of problems reported by the layout engine and the nester."""

    INVALID_ZONE_GEOMETRY = "invalid_zone_geometry"
    UNRESOLVABLE_OVERLAP = "unresolvable_overlap"
    UNPLACEABLE_PART = "unplaceable_part"
    ITERATION_LIMIT_EXCEEDED = "iteration_limit_exceeded"


class IssueSeverity(str, Enum):
    """Whether an issue invalidates the result or only annotates it."""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class LayoutIssue:
    """A problem detected while laying out a zone or packing parts.

    Attributes:
        kind: What went wrong.
        message: Human-readable description.
        subject_id: Identifier of the offending zone, cabinet, part or material.
        severity: ERROR when the affected output is withheld, WARNING otherwise.
    """

    kind: IssueKind
    message: str
    subject_id: str | None = None
    severity: IssueSeverity = IssueSeverity.ERROR

    @property
    def is_error(self) -> bool:
        return self.severity is IssueSeverity.ERROR


@dataclass(frozen=True)
class LayoutResult:
    """Outcome of a layout engine call.

    Attributes:
        zone: The laid-out zone, or None when an error withheld it.
        issues: Errors and warnings found along the way.
    """

    zone: Zone | None
    issues: tuple[LayoutIssue, ...] = ()

    @property
    def succeeded(self) -> bool:
        return self.zone is not None and not any(i.is_error for i in self.issues)

    @property
    def errors(self) -> tuple[LayoutIssue, ...]:
        return tuple(i for i in self.issues if i.is_error)

    @property
    def warnings(self) -> tuple[LayoutIssue, ...]:
        return tuple(i for i in self.issues if not i.is_error)


@dataclass(frozen=True)
class ProjectSettings:
    """Project-wide construction settings in millimeters.

    The layout engine only passes these through; the part list generator
    and the nester read board and sheet dimensions from them.
    """

    base_height: int = 720
    wall_height: int = 720
    tall_height: int = 2100
    depth_base: int = 560
    depth_wall: int = 320
    depth_tall: int = 580
    thickness: int = 16
    counter_thickness: int = 40
    toe_kick_height: int = 150
    sheet_width: int = 1220
    sheet_length: int = 2440
    kerf: int = 4

    def __post_init__(self) -> None:
        if self.sheet_width <= 0 or self.sheet_length <= 0:
            raise ValueError("Sheet dimensions must be positive")
        if self.kerf < 0:
            raise ValueError("Kerf must be non-negative")
        if self.thickness <= 0:
            raise ValueError("Board thickness must be positive")

    def height_for(self, vertical_class: VerticalClass) -> int:
        """Carcass height for a vertical class."""
        return {
            VerticalClass.BASE: self.base_height,
            VerticalClass.WALL: self.wall_height,
            VerticalClass.TALL: self.tall_height,
        }[vertical_class]

    def depth_for(self, vertical_class: VerticalClass) -> int:
        """Carcass depth for a vertical class."""
        return {
            VerticalClass.BASE: self.depth_base,
            VerticalClass.WALL: self.depth_wall,
            VerticalClass.TALL: self.depth_tall,
        }[vertical_class]
