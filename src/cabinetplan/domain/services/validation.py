"""Zone geometry checks.

Engines reject invalid caller input instead of clamping it. Each problem
becomes an ``invalid_zone_geometry`` issue naming the offending element.
"""

from __future__ import annotations

from ..entities import Zone
from ..value_objects import IssueKind, LayoutIssue

__all__ = ["check_zone_geometry"]


def _invalid(message: str, subject_id: str | None) -> LayoutIssue:
    return LayoutIssue(
        kind=IssueKind.INVALID_ZONE_GEOMETRY,
        message=message,
        subject_id=subject_id,
    )


def check_zone_geometry(zone: Zone, *, allow_overhang: bool = False) -> list[LayoutIssue]:
    """Validate a zone's length, obstacles and cabinets.

    Args:
        zone: The zone to check.
        allow_overhang: Accept cabinets whose right edge passes the wall end.
            Collision resolution produces such cabinets and must accept them
            back as input; auto-fill does not.

    Returns:
        One issue per problem found. Empty when the zone is valid.
    """
    if zone.total_length <= 0:
        return [_invalid(f"Zone '{zone.id}' has non-positive length {zone.total_length}", zone.id)]

    issues: list[LayoutIssue] = []
    for index, obstacle in enumerate(zone.obstacles):
        subject = obstacle.id or f"{zone.id}:obstacle[{index}]"
        if obstacle.width <= 0:
            issues.append(_invalid(f"Obstacle {subject} has non-positive width", subject))
        elif not obstacle.span.within(0, zone.total_length):
            issues.append(
                _invalid(
                    f"Obstacle {subject} spans {obstacle.from_left}-{obstacle.span.end}, "
                    f"outside wall 0-{zone.total_length}",
                    subject,
                )
            )

    for cabinet in zone.cabinets:
        if cabinet.width <= 0:
            issues.append(_invalid(f"Cabinet {cabinet.id} has non-positive width", cabinet.id))
        elif cabinet.from_left < 0:
            issues.append(
                _invalid(f"Cabinet {cabinet.id} starts left of the wall at {cabinet.from_left}", cabinet.id)
            )
        elif not allow_overhang and cabinet.right > zone.total_length:
            issues.append(
                _invalid(
                    f"Cabinet {cabinet.id} ends at {cabinet.right}, past wall end {zone.total_length}",
                    cabinet.id,
                )
            )
    return issues
