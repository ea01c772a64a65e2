"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from cabinetplan.domain.value_objects import LayoutIssue, LayoutResult
from cabinetplan.infrastructure.bin_packing import PackingResult, Part


@dataclass
class PlanOutput:
    """Output DTO for one zone taken from layout through nesting.

    Attributes:
        layout: Result of auto-fill or collision resolution.
        parts: Part list generated for the laid-out cabinets.
        packing: Nesting result, or None when the layout failed.
    """

    layout: LayoutResult
    parts: list[Part] = field(default_factory=list)
    packing: PackingResult | None = None

    @property
    def issues(self) -> list[LayoutIssue]:
        issues = list(self.layout.issues)
        if self.packing is not None:
            issues.extend(self.packing.issues)
        return issues

    @property
    def is_valid(self) -> bool:
        return not any(issue.is_error for issue in self.issues)
