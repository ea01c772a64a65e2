"""Sequential cabinet labels (B01, W01, T01).

Labels already present are kept. Unlabelled cabinets are numbered in
left-to-right order per vertical class, continuing after the highest
number found among manually labelled cabinets of that class.
"""

from __future__ import annotations

import re
from typing import Iterable

from ..entities import CabinetUnit
from ..value_objects import VerticalClass

__all__ = ["assign_labels", "highest_label_number"]

_LABEL_PATTERN = re.compile(r"([A-Z])(\d+)")


def highest_label_number(
    cabinets: Iterable[CabinetUnit], vertical_class: VerticalClass
) -> int:
    """Highest numeric suffix among labelled cabinets of one class, or 0."""
    numbers = [0]
    for cabinet in cabinets:
        if cabinet.vertical_class is not vertical_class or not cabinet.label:
            continue
        match = _LABEL_PATTERN.search(cabinet.label)
        if match:
            numbers.append(int(match.group(2)))
    return max(numbers)


def assign_labels(
    cabinets: list[CabinetUnit], manual: Iterable[CabinetUnit]
) -> list[CabinetUnit]:
    """Label every cabinet that lacks one.

    Args:
        cabinets: Cabinets sorted left to right.
        manual: User-placed cabinets whose labels seed the numbering.

    Returns:
        New list in the same order, every cabinet labelled.
    """
    manual = list(manual)
    counters = {vc: highest_label_number(manual, vc) + 1 for vc in VerticalClass}

    labelled: list[CabinetUnit] = []
    for cabinet in cabinets:
        if not cabinet.label:
            vc = cabinet.vertical_class
            cabinet = cabinet.with_label(f"{vc.label_prefix}{counters[vc]:02d}")
            counters[vc] += 1
        labelled.append(cabinet)
    return labelled
