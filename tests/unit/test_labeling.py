"""Tests for sequential cabinet labels."""

from __future__ import annotations

from cabinetplan.domain.services import assign_labels, highest_label_number
from cabinetplan.domain.value_objects import VerticalClass


class TestHighestLabelNumber:
    """Tests for scanning existing labels."""

    def test_no_labels(self, make_cabinet) -> None:
        assert highest_label_number([make_cabinet("a", 0)], VerticalClass.BASE) == 0

    def test_only_matching_class_counts(self, make_cabinet) -> None:
        cabinets = [
            make_cabinet("a", 0, label="B03"),
            make_cabinet("b", 0, label="W09", vertical_class=VerticalClass.WALL),
        ]
        assert highest_label_number(cabinets, VerticalClass.BASE) == 3
        assert highest_label_number(cabinets, VerticalClass.WALL) == 9

    def test_free_text_labels_ignored(self, make_cabinet) -> None:
        assert highest_label_number([make_cabinet("a", 0, label="sink")], VerticalClass.BASE) == 0


class TestAssignLabels:
    """Tests for label assignment."""

    def test_per_class_numbering(self, make_cabinet) -> None:
        cabinets = [
            make_cabinet("a", 0),
            make_cabinet("b", 0, vertical_class=VerticalClass.WALL),
            make_cabinet("c", 600),
            make_cabinet("d", 1200, vertical_class=VerticalClass.TALL),
        ]
        labelled = assign_labels(cabinets, [])
        assert [c.label for c in labelled] == ["B01", "W01", "B02", "T01"]

    def test_existing_labels_kept(self, make_cabinet) -> None:
        manual = make_cabinet("m", 600, label="B05")
        cabinets = [make_cabinet("a", 0), manual, make_cabinet("c", 1200)]
        labelled = assign_labels(cabinets, [manual])
        assert [c.label for c in labelled] == ["B06", "B05", "B07"]

    def test_double_digit_padding(self, make_cabinet) -> None:
        cabinets = [make_cabinet(str(i), i * 100) for i in range(12)]
        assert assign_labels(cabinets, [])[-1].label == "B12"
