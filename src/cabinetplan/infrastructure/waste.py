"""Waste metrics for packed sheets.

Areas are integer products; the only rounding is the final percentage,
which rounds halves up.
"""

from __future__ import annotations

from typing import Sequence

__all__ = ["aggregate_waste", "round_half_up", "sheet_waste"]


def round_half_up(numerator: int, denominator: int) -> int:
    """Round a non-negative ratio of integers to the nearest integer."""
    if denominator <= 0:
        raise ValueError("Denominator must be positive")
    return (2 * numerator + denominator) // (2 * denominator)


def sheet_waste(sheet_area: int, used_area: int) -> int:
    """Percentage of ``sheet_area`` not covered by parts, 0-100.

    Args:
        sheet_area: Width times length of the stock sheet.
        used_area: Sum of placed part areas.

    Returns:
        ``round(100 * (sheet_area - used_area) / sheet_area)``.
    """
    if sheet_area <= 0:
        raise ValueError("Sheet area must be positive")
    if not 0 <= used_area <= sheet_area:
        raise ValueError(f"Used area {used_area} outside 0-{sheet_area}")
    return round_half_up(100 * (sheet_area - used_area), sheet_area)


def aggregate_waste(per_sheet: Sequence[int]) -> int:
    """Mean of per-sheet waste percentages, rounded. 0 when there are no sheets."""
    if not per_sheet:
        return 0
    return round_half_up(sum(per_sheet), len(per_sheet))
