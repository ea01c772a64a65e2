"""Infrastructure layer: cutting-stock nester, waste metrics and output formatting."""

from cabinetplan.infrastructure.bin_packing import (
    BinPackingService,
    GuillotineBinPacker,
    GuillotineTree,
    Offcut,
    PackingNode,
    PackingResult,
    Part,
    PlacedPart,
    SheetLayout,
    SheetSpec,
    pack,
)
from cabinetplan.infrastructure.formatters import (
    CuttingPlanFormatter,
    JsonExporter,
    WallLayoutFormatter,
    format_issues,
)
from cabinetplan.infrastructure.waste import aggregate_waste, sheet_waste

__all__ = [
    "BinPackingService",
    "CuttingPlanFormatter",
    "GuillotineBinPacker",
    "GuillotineTree",
    "JsonExporter",
    "Offcut",
    "PackingNode",
    "PackingResult",
    "Part",
    "PlacedPart",
    "SheetLayout",
    "SheetSpec",
    "WallLayoutFormatter",
    "aggregate_waste",
    "format_issues",
    "pack",
    "sheet_waste",
]
