"""Domain layer: wall zones, cabinets and the layout engine."""

from .entities import CabinetUnit, Obstacle, Zone
from .geometry import Rect, Span
from .ids import SequentialIdFactory, UuidIdFactory
from .value_objects import (
    IssueKind,
    IssueSeverity,
    LayoutIssue,
    LayoutResult,
    ObstacleKind,
    PresetType,
    ProjectSettings,
    VerticalClass,
)

__all__ = [
    "CabinetUnit",
    "IssueKind",
    "IssueSeverity",
    "LayoutIssue",
    "LayoutResult",
    "Obstacle",
    "ObstacleKind",
    "PresetType",
    "ProjectSettings",
    "Rect",
    "SequentialIdFactory",
    "Span",
    "UuidIdFactory",
    "VerticalClass",
    "Zone",
]
