"""Tests for spans, rectangles and free-gap helpers."""

from __future__ import annotations

from cabinetplan.domain.geometry import Rect, Span, free_run, merge_spans, overlaps_any


class TestSpan:
    """Tests for half-open spans."""

    def test_end(self) -> None:
        assert Span(100, 600).end == 700

    def test_overlapping_spans(self) -> None:
        assert Span(0, 600).overlaps(Span(599, 10))
        assert Span(599, 10).overlaps(Span(0, 600))

    def test_touching_spans_do_not_overlap(self) -> None:
        assert not Span(0, 600).overlaps(Span(600, 600))

    def test_contains_is_half_open(self) -> None:
        span = Span(100, 50)
        assert span.contains(100)
        assert span.contains(149)
        assert not span.contains(150)

    def test_within(self) -> None:
        assert Span(0, 3000).within(0, 3000)
        assert not Span(2900, 200).within(0, 3000)
        assert not Span(-1, 10).within(0, 3000)


class TestSpanHelpers:
    """Tests for overlaps_any, merge_spans and free_run."""

    def test_overlaps_any(self) -> None:
        others = [Span(0, 100), Span(500, 100)]
        assert overlaps_any(Span(550, 10), others)
        assert not overlaps_any(Span(100, 400), others)

    def test_merge_spans_joins_overlapping_and_touching(self) -> None:
        merged = merge_spans([Span(500, 100), Span(0, 100), Span(100, 50), Span(520, 200)])
        assert merged == [Span(0, 150), Span(500, 220)]

    def test_merge_spans_drops_empty(self) -> None:
        assert merge_spans([Span(10, 0)]) == []

    def test_free_run_up_to_next_span(self) -> None:
        assert free_run(900, [Span(1000, 900)], 3000) == 100

    def test_free_run_up_to_limit(self) -> None:
        assert free_run(2950, [Span(0, 900)], 3000) == 50

    def test_free_run_inside_span_is_zero(self) -> None:
        assert free_run(1200, [Span(1000, 900)], 3000) == 0


class TestRect:
    """Tests for sheet rectangles."""

    def test_edges_and_area(self) -> None:
        rect = Rect(10, 20, 300, 400)
        assert rect.right == 310
        assert rect.bottom == 420
        assert rect.area == 120_000

    def test_overlap(self) -> None:
        assert Rect(0, 0, 100, 100).overlaps(Rect(50, 50, 100, 100))

    def test_adjacent_rects_do_not_overlap(self) -> None:
        assert not Rect(0, 0, 100, 100).overlaps(Rect(100, 0, 100, 100))
        assert not Rect(0, 0, 100, 100).overlaps(Rect(0, 100, 100, 100))

    def test_fits_inside(self) -> None:
        assert Rect(0, 0, 1220, 2440).fits_inside(1220, 2440)
        assert not Rect(4, 0, 1220, 10).fits_inside(1220, 2440)
