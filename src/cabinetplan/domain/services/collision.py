"""Collision resolution for cabinets placed along a wall.

Cabinets are shoved rightward, left to right, until no two units that share
a height band overlap. Units in different bands (a base unit under a wall
unit) are left alone. The result is never clamped to the wall length: a
cabinet pushed past the wall end is reported so the user can fix the manual
placement that caused it.
"""

from __future__ import annotations

import logging

from ..entities import CabinetUnit, Zone
from ..value_objects import IssueKind, IssueSeverity, LayoutIssue, LayoutResult
from .validation import check_zone_geometry

logger = logging.getLogger(__name__)

__all__ = [
    "CollisionResolver",
    "push_apart",
    "resolve_collisions",
]


def push_apart(cabinets: list[CabinetUnit] | tuple[CabinetUnit, ...]) -> list[CabinetUnit]:
    """Shove cabinets right so vertically compatible units do not overlap.

    Cabinets are stably sorted by ``from_left``. Each cabinet moves to the
    furthest right edge among the already-processed cabinets it collides
    with vertically, if that edge lies to its right.

    Args:
        cabinets: Cabinets in any order.

    Returns:
        New list sorted by original ``from_left``, with updated offsets.
    """
    ordered = sorted(cabinets, key=lambda c: c.from_left)
    resolved: list[CabinetUnit] = []

    for cabinet in ordered:
        max_right = max(
            (
                placed.right
                for placed in resolved
                if placed.vertical_class.collides_with(cabinet.vertical_class)
            ),
            default=cabinet.from_left,
        )
        if max_right > cabinet.from_left:
            logger.debug(
                "Pushing cabinet %s from %d to %d",
                cabinet.id,
                cabinet.from_left,
                max_right,
            )
            cabinet = cabinet.moved_to(max_right)
        resolved.append(cabinet)

    return resolved


class CollisionResolver:
    """Resolves overlaps among a zone's cabinets.

    Example:
        ```python
        result = CollisionResolver().resolve(zone)
        if result.succeeded:
            zone = result.zone
        ```
    """

    def resolve(self, zone: Zone) -> LayoutResult:
        """Return a copy of ``zone`` with overlaps pushed apart.

        Args:
            zone: Zone whose cabinets may overlap.

        Returns:
            LayoutResult with the resolved zone. Cabinets ending past the
            wall are reported as ``unresolvable_overlap`` warnings; invalid
            input geometry yields ``invalid_zone_geometry`` errors and no zone.
        """
        geometry_issues = check_zone_geometry(zone, allow_overhang=True)
        if geometry_issues:
            return LayoutResult(zone=None, issues=tuple(geometry_issues))

        resolved = push_apart(zone.cabinets)
        issues = tuple(
            LayoutIssue(
                kind=IssueKind.UNRESOLVABLE_OVERLAP,
                message=(
                    f"Cabinet {cabinet.label or cabinet.id} ends at {cabinet.right}mm, "
                    f"past the {zone.total_length}mm wall"
                ),
                subject_id=cabinet.id,
                severity=IssueSeverity.WARNING,
            )
            for cabinet in resolved
            if cabinet.right > zone.total_length
        )
        for issue in issues:
            logger.warning(issue.message)

        return LayoutResult(zone=zone.with_cabinets(resolved), issues=issues)


def resolve_collisions(zone: Zone) -> LayoutResult:
    """Resolve overlaps among a zone's cabinets. See ``CollisionResolver``."""
    return CollisionResolver().resolve(zone)
