"""Tests for collision resolution along a wall."""

from __future__ import annotations

import itertools

from cabinetplan.domain.entities import Obstacle, Zone
from cabinetplan.domain.services import CollisionResolver, push_apart, resolve_collisions
from cabinetplan.domain.value_objects import IssueKind, IssueSeverity, ObstacleKind, VerticalClass


def _offsets(zone: Zone) -> dict[str, int]:
    return {c.id: c.from_left for c in zone.cabinets}


class TestResolveCollisions:
    """Tests for pushing overlapping cabinets apart."""

    def test_two_overlapping_base_cabinets(self, make_cabinet) -> None:
        zone = Zone("Z", 3000, cabinets=(make_cabinet("a", 0), make_cabinet("b", 100)))
        result = resolve_collisions(zone)
        assert result.succeeded
        assert _offsets(result.zone) == {"a": 0, "b": 600}

    def test_chained_push(self, make_cabinet) -> None:
        zone = Zone(
            "Z",
            3000,
            cabinets=(make_cabinet("a", 0), make_cabinet("b", 200), make_cabinet("c", 400)),
        )
        result = resolve_collisions(zone)
        assert _offsets(result.zone) == {"a": 0, "b": 600, "c": 1200}

    def test_base_and_wall_share_span(self, make_cabinet) -> None:
        zone = Zone(
            "Z",
            3000,
            cabinets=(
                make_cabinet("base", 0),
                make_cabinet("wall", 0, vertical_class=VerticalClass.WALL),
            ),
        )
        result = resolve_collisions(zone)
        assert _offsets(result.zone) == {"base": 0, "wall": 0}
        assert result.issues == ()

    def test_tall_clears_base_and_wall(self, make_cabinet) -> None:
        zone = Zone(
            "Z",
            3000,
            cabinets=(
                make_cabinet("tall", 200, vertical_class=VerticalClass.TALL),
                make_cabinet("base", 100),
                make_cabinet("wall", 0, vertical_class=VerticalClass.WALL),
            ),
        )
        result = resolve_collisions(zone)
        # Base ignores the wall unit; tall clears both.
        assert _offsets(result.zone) == {"wall": 0, "base": 100, "tall": 700}

    def test_ties_keep_input_order(self, make_cabinet) -> None:
        zone = Zone("Z", 3000, cabinets=(make_cabinet("first", 0), make_cabinet("second", 0)))
        result = resolve_collisions(zone)
        assert [c.id for c in result.zone.cabinets] == ["first", "second"]
        assert _offsets(result.zone) == {"first": 0, "second": 600}

    def test_input_zone_unchanged(self, make_cabinet) -> None:
        zone = Zone("Z", 3000, cabinets=(make_cabinet("a", 0), make_cabinet("b", 100)))
        resolve_collisions(zone)
        assert _offsets(zone) == {"a": 0, "b": 100}

    def test_no_overlap_and_order_preserved(self, make_cabinet) -> None:
        cabinets = (
            make_cabinet("b1", 500, width=900),
            make_cabinet("w1", 0, width=800, vertical_class=VerticalClass.WALL),
            make_cabinet("b2", 450, width=450),
            make_cabinet("t1", 1000, width=600, vertical_class=VerticalClass.TALL),
            make_cabinet("w2", 700, width=600, vertical_class=VerticalClass.WALL),
            make_cabinet("b3", 0, width=300),
        )
        result = resolve_collisions(Zone("Z", 6000, cabinets=cabinets))
        resolved = result.zone.cabinets

        for a, b in itertools.combinations(resolved, 2):
            if a.vertical_class.collides_with(b.vertical_class):
                assert not a.span.overlaps(b.span), (a.id, b.id)

        input_order = [c.id for c in sorted(cabinets, key=lambda c: c.from_left)]
        output_order = [c.id for c in sorted(resolved, key=lambda c: c.from_left)]
        for vc in (VerticalClass.BASE, VerticalClass.WALL):
            group = {c.id for c in cabinets if c.vertical_class.collides_with(vc)}
            assert [i for i in input_order if i in group] == [i for i in output_order if i in group]


class TestOverhang:
    """Tests for cabinets pushed past the wall end."""

    def test_push_past_wall_end_is_warning(self, make_cabinet) -> None:
        zone = Zone("Z", 1000, cabinets=(make_cabinet("a", 0), make_cabinet("b", 100)))
        result = resolve_collisions(zone)

        assert result.zone is not None
        assert _offsets(result.zone) == {"a": 0, "b": 600}
        assert len(result.issues) == 1
        issue = result.issues[0]
        assert issue.kind is IssueKind.UNRESOLVABLE_OVERLAP
        assert issue.severity is IssueSeverity.WARNING
        assert issue.subject_id == "b"

    def test_overhanging_input_accepted(self, make_cabinet) -> None:
        zone = Zone("Z", 3000, cabinets=(make_cabinet("a", 2800),))
        result = CollisionResolver().resolve(zone)
        assert result.zone is not None
        assert [i.kind for i in result.issues] == [IssueKind.UNRESOLVABLE_OVERLAP]

    def test_resolving_output_again_is_stable(self, make_cabinet) -> None:
        zone = Zone("Z", 1000, cabinets=(make_cabinet("a", 0), make_cabinet("b", 100)))
        once = resolve_collisions(zone)
        twice = resolve_collisions(once.zone)
        assert twice.zone == once.zone


class TestInvalidGeometry:
    """Tests for rejected input zones."""

    def test_non_positive_length(self) -> None:
        result = resolve_collisions(Zone("Z", 0))
        assert result.zone is None
        assert result.errors[0].kind is IssueKind.INVALID_ZONE_GEOMETRY
        assert result.errors[0].subject_id == "Z"

    def test_obstacle_outside_wall(self) -> None:
        zone = Zone("Z", 3000, obstacles=(Obstacle(ObstacleKind.DOOR, 2900, 200, id="door-1"),))
        result = resolve_collisions(zone)
        assert result.zone is None
        assert result.errors[0].subject_id == "door-1"

    def test_negative_cabinet_offset(self, make_cabinet) -> None:
        result = resolve_collisions(Zone("Z", 3000, cabinets=(make_cabinet("a", -10),)))
        assert result.zone is None
        assert result.errors[0].subject_id == "a"


class TestPushApart:
    """Tests for the bare push routine."""

    def test_empty(self) -> None:
        assert push_apart([]) == []

    def test_gap_is_kept(self, make_cabinet) -> None:
        resolved = push_apart([make_cabinet("a", 0), make_cabinet("b", 1000)])
        assert [c.from_left for c in resolved] == [0, 1000]
