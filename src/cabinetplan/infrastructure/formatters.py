"""Plain-text and JSON output for wall layouts and cutting plans."""

from __future__ import annotations

import json
from typing import Any

from cabinetplan.domain.entities import CabinetUnit, Zone
from cabinetplan.domain.value_objects import LayoutIssue, LayoutResult, VerticalClass

from .bin_packing import PackingResult, SheetLayout


class WallLayoutFormatter:
    """Renders a zone as one text row per vertical class.

    Each cabinet is drawn as ``[label]`` padded to its scaled width.
    Obstacles are drawn as ``#`` on a separate row.
    """

    def __init__(self, mm_per_char: int = 50) -> None:
        if mm_per_char <= 0:
            raise ValueError("mm_per_char must be positive")
        self.mm_per_char = mm_per_char

    def format(self, zone: Zone) -> str:
        chars = max(1, -(-zone.total_length // self.mm_per_char))
        lines = [f"Zone {zone.id}: {zone.total_length}mm"]
        for vertical_class in (VerticalClass.WALL, VerticalClass.TALL, VerticalClass.BASE):
            cabinets = zone.cabinets_of(vertical_class)
            if cabinets:
                lines.append(f"{vertical_class.value:<5}|{self._row(cabinets, chars)}|")
        if zone.obstacles:
            row = [" "] * chars
            for obstacle in zone.obstacles:
                for i in self._cells(obstacle.from_left, obstacle.width, chars):
                    row[i] = "#"
            lines.append(f"{'Obst':<5}|{''.join(row)}|")
        lines.append("")
        lines.extend(self._cabinet_list(zone))
        return "\n".join(lines)

    def _cells(self, start: int, width: int, chars: int) -> range:
        first = start // self.mm_per_char
        last = max(first + 1, -(-(start + width) // self.mm_per_char))
        return range(max(0, first), min(chars, last))

    def _row(self, cabinets: tuple[CabinetUnit, ...], chars: int) -> str:
        row = [" "] * chars
        for cabinet in cabinets:
            cells = self._cells(cabinet.from_left, cabinet.width, chars)
            if not cells:
                continue
            text = f"[{cabinet.label or ''}".ljust(len(cells) - 1, " ")[: len(cells) - 1] + "]"
            if len(cells) == 1:
                text = "|"
            for offset, i in enumerate(cells):
                row[i] = text[offset]
        return "".join(row)

    def _cabinet_list(self, zone: Zone) -> list[str]:
        lines = []
        for cabinet in zone.cabinets:
            origin = "auto" if cabinet.is_auto_filled else "manual"
            lines.append(
                f"  {cabinet.label or '-':<4} {cabinet.preset.value:<16} "
                f"{cabinet.from_left:>6} +{cabinet.width:<5} {origin}"
            )
        return lines


class CuttingPlanFormatter:
    """Summarises a packing result, one line per sheet."""

    def format(self, result: PackingResult) -> str:
        lines = [
            f"Sheets: {result.total_sheets}  Average waste: {result.total_waste_percentage}%",
        ]
        for material, count in result.sheets_by_material.items():
            lines.append(f"  {material}: {count} sheet(s)")
        lines.append("")
        for layout in result.layouts:
            lines.extend(self._format_sheet(layout))
        if result.offcuts:
            lines.append(f"Offcuts: {len(result.offcuts)}")
            for offcut in result.offcuts:
                lines.append(
                    f"  {offcut.sheet_id} {offcut.material}: "
                    f"{offcut.width}x{offcut.length} at ({offcut.x}, {offcut.y})"
                )
        return "\n".join(lines)

    def _format_sheet(self, layout: SheetLayout) -> list[str]:
        lines = [
            f"{layout.id} [{layout.material}] {layout.width}x{layout.length} "
            f"- {layout.piece_count} pieces, {layout.waste_percentage}% waste"
        ]
        for placement in layout.placements:
            turn = " (rotated)" if placement.rotated else ""
            lines.append(
                f"    {placement.label} {placement.width}x{placement.length} "
                f"at ({placement.x}, {placement.y}){turn}"
            )
        return lines


def format_issues(issues: tuple[LayoutIssue, ...] | list[LayoutIssue]) -> str:
    """One line per issue: ``error: <kind>: <message>``."""
    return "\n".join(
        f"{issue.severity.value}: {issue.kind.value}: {issue.message}" for issue in issues
    )


class JsonExporter:
    """Serialises layout and packing results to JSON."""

    def export_layout(self, results: list[LayoutResult]) -> str:
        return json.dumps({"zones": [self._layout_result(r) for r in results]}, indent=2)

    def export_packing(self, result: PackingResult) -> str:
        return json.dumps(self._packing_result(result), indent=2)

    def _issue(self, issue: LayoutIssue) -> dict[str, Any]:
        return {
            "kind": issue.kind.value,
            "severity": issue.severity.value,
            "message": issue.message,
            "subject_id": issue.subject_id,
        }

    def _layout_result(self, result: LayoutResult) -> dict[str, Any]:
        zone = result.zone
        return {
            "zone": None if zone is None else self._zone(zone),
            "issues": [self._issue(i) for i in result.issues],
        }

    def _zone(self, zone: Zone) -> dict[str, Any]:
        return {
            "id": zone.id,
            "total_length": zone.total_length,
            "wall_height": zone.wall_height,
            "cabinets": [
                {
                    "id": c.id,
                    "label": c.label,
                    "preset": c.preset.value,
                    "vertical_class": c.vertical_class.value,
                    "from_left": c.from_left,
                    "width": c.width,
                    "is_auto_filled": c.is_auto_filled,
                }
                for c in zone.cabinets
            ],
        }

    def _packing_result(self, result: PackingResult) -> dict[str, Any]:
        return {
            "total_sheets": result.total_sheets,
            "total_waste_percentage": result.total_waste_percentage,
            "sheets_by_material": dict(result.sheets_by_material),
            "sheets": [
                {
                    "id": layout.id,
                    "material": layout.material,
                    "width": layout.width,
                    "length": layout.length,
                    "waste_percentage": layout.waste_percentage,
                    "parts": [
                        {
                            "part_id": p.part.id,
                            "instance": p.instance,
                            "label": p.label,
                            "x": p.x,
                            "y": p.y,
                            "width": p.width,
                            "length": p.length,
                            "rotated": p.rotated,
                        }
                        for p in layout.placements
                    ],
                }
                for layout in result.layouts
            ],
            "offcuts": [
                {
                    "sheet_id": o.sheet_id,
                    "material": o.material,
                    "x": o.x,
                    "y": o.y,
                    "width": o.width,
                    "length": o.length,
                }
                for o in result.offcuts
            ],
            "issues": [self._issue(i) for i in result.issues],
        }
