"""Application layer - use cases and orchestration."""

from .commands import LayoutZoneCommand, PlanZoneCommand
from .dtos import PlanOutput

__all__ = [
    "LayoutZoneCommand",
    "PlanOutput",
    "PlanZoneCommand",
]
