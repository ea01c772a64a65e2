"""Guillotine bin packing of flat cabinet parts onto stock sheets.

Each sheet is modelled as a binary tree of free rectangles. Placing a part
in a free leaf splits the leftover space into a ``right`` strip beside the
part and a ``down`` strip below it, so every cut runs edge to edge and the
layout can be cut on a panel saw.

Parts are grouped by material and packed first-fit decreasing by area.
Parts that do not fit on the current sheet are deferred to the next one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from cabinetplan.contracts.protocols import IdFactory
from cabinetplan.domain.geometry import Rect
from cabinetplan.domain.ids import SequentialIdFactory
from cabinetplan.domain.value_objects import IssueKind, LayoutIssue, ProjectSettings

from .waste import aggregate_waste, sheet_waste

logger = logging.getLogger(__name__)

DEFAULT_MAX_ITERATIONS = 1000
DEFAULT_MIN_OFFCUT_SIZE = 300


@dataclass(frozen=True)
class SheetSpec:
    """Stock sheet dimensions and blade width.

    Standard sheet: 1220 x 2440mm with a 4mm kerf.

    Attributes:
        width: Sheet width in mm.
        length: Sheet length in mm.
        kerf: Material removed by the saw blade between neighbouring parts.
    """

    width: int = 1220
    length: int = 2440
    kerf: int = 4

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError("Sheet width must be positive")
        if self.length <= 0:
            raise ValueError("Sheet length must be positive")
        if self.kerf < 0:
            raise ValueError("Kerf must be non-negative")

    @classmethod
    def from_settings(cls, settings: ProjectSettings) -> SheetSpec:
        return cls(
            width=settings.sheet_width,
            length=settings.sheet_length,
            kerf=settings.kerf,
        )

    @property
    def area(self) -> int:
        return self.width * self.length


@dataclass(frozen=True)
class Part:
    """A flat rectangle to cut, as produced by the part list generator.

    Attributes:
        id: Identifier of the part line.
        name: Part name, e.g. "Side Panel".
        width: Width in mm.
        length: Length in mm.
        material: Material tag; parts are nested per material.
        quantity: Number of identical pieces. Expanded before packing.
        label: Cabinet label the part belongs to.
        is_hardware: Hardware lines carry a quantity but are never nested.
    """

    id: str
    name: str
    width: int
    length: int
    material: str
    quantity: int = 1
    label: str | None = None
    is_hardware: bool = False

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValueError("Quantity must be non-negative")
        if not self.is_hardware and (self.width <= 0 or self.length <= 0):
            raise ValueError(f"Part '{self.name}' dimensions must be positive")

    @property
    def area(self) -> int:
        return self.width * self.length

    def fits_on(self, sheet: SheetSpec) -> bool:
        """Whether the part fits the sheet in either orientation."""
        return (self.width <= sheet.width and self.length <= sheet.length) or (
            self.length <= sheet.width and self.width <= sheet.length
        )


@dataclass
class PackingNode:
    """A free rectangle in a sheet's guillotine tree.

    Once used, ``right`` and ``down`` hold the handles of the two child
    nodes covering the leftover space. Nodes are never re-linked.
    """

    x: int
    y: int
    width: int
    length: int
    used: bool = False
    right: int | None = None
    down: int | None = None

    def fits(self, width: int, length: int) -> bool:
        return width <= self.width and length <= self.length


class GuillotineTree:
    """Arena of ``PackingNode`` values addressed by integer handles.

    The root (handle 0) covers the whole sheet. Each split appends two
    nodes; existing nodes are only ever marked used.
    """

    ROOT = 0

    def __init__(self, width: int, length: int) -> None:
        self.nodes: list[PackingNode] = [PackingNode(0, 0, width, length)]

    def find(self, width: int, length: int) -> int | None:
        """Depth-first search for the first free leaf that fits.

        The ``right`` subtree of a used node is searched before its
        ``down`` subtree.
        """
        stack = [self.ROOT]
        while stack:
            handle = stack.pop()
            node = self.nodes[handle]
            if node.used:
                if node.down is not None:
                    stack.append(node.down)
                if node.right is not None:
                    stack.append(node.right)
            elif node.fits(width, length):
                return handle
        return None

    def split(self, handle: int, width: int, length: int, kerf: int) -> PackingNode:
        """Occupy the top-left ``width x length`` of a leaf and split the rest.

        Args:
            handle: Leaf returned by ``find``.
            width: Placed width (after any rotation).
            length: Placed length (after any rotation).
            kerf: Gap left to the right of and below the part.

        Returns:
            The node now holding the part.
        """
        node = self.nodes[handle]
        if node.used:
            raise ValueError(f"Node {handle} is already used")
        node.used = True
        node.down = self._append(
            PackingNode(node.x, node.y + length + kerf, node.width, node.length - length - kerf)
        )
        node.right = self._append(
            PackingNode(node.x + width + kerf, node.y, node.width - width - kerf, length)
        )
        return node

    def free_leaves(self) -> list[PackingNode]:
        """Unused nodes with positive area."""
        return [n for n in self.nodes if not n.used and n.width > 0 and n.length > 0]

    def _append(self, node: PackingNode) -> int:
        self.nodes.append(node)
        return len(self.nodes) - 1


@dataclass(frozen=True)
class PlacedPart:
    """One piece of a part placed on a sheet.

    Attributes:
        part: Source part line.
        instance: 1-based index within the part's quantity.
        x: Offset from the sheet's left edge.
        y: Offset from the sheet's top edge.
        width: Placed width (the part's length when rotated).
        length: Placed length (the part's width when rotated).
        rotated: True when turned 90 degrees.
    """

    part: Part
    instance: int
    x: int
    y: int
    width: int
    length: int
    rotated: bool = False

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError("Position coordinates must be non-negative")

    @property
    def label(self) -> str:
        return f"{self.part.name} ({self.part.label or ''})"

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.length)

    @property
    def area(self) -> int:
        return self.width * self.length


@dataclass(frozen=True)
class SheetLayout:
    """Parts placed on one physical stock sheet.

    Attributes:
        id: Sheet identifier.
        index: Zero-based position within its material group.
        material: Material tag shared by every placed part.
        width: Sheet width in mm.
        length: Sheet length in mm.
        placements: Placed parts in placement order.
    """

    id: str
    index: int
    material: str
    width: int
    length: int
    placements: tuple[PlacedPart, ...] = ()

    @property
    def area(self) -> int:
        return self.width * self.length

    @property
    def used_area(self) -> int:
        return sum(p.area for p in self.placements)

    @property
    def waste_percentage(self) -> int:
        """Percentage of the sheet not covered by parts."""
        return sheet_waste(self.area, self.used_area)

    @property
    def piece_count(self) -> int:
        return len(self.placements)


@dataclass(frozen=True)
class Offcut:
    """A reusable free rectangle left on a sheet after packing."""

    sheet_id: str
    material: str
    x: int
    y: int
    width: int
    length: int

    @property
    def area(self) -> int:
        return self.width * self.length


@dataclass(frozen=True)
class PackingResult:
    """Sheets, offcuts and issues from one nesting run.

    Attributes:
        layouts: Sheet layouts, grouped by material in input order.
        offcuts: Reusable leftovers.
        issues: Unplaceable parts and failed material groups.
        sheets_by_material: Sheet count per material tag.
    """

    layouts: tuple[SheetLayout, ...] = ()
    offcuts: tuple[Offcut, ...] = ()
    issues: tuple[LayoutIssue, ...] = ()
    sheets_by_material: dict[str, int] = field(default_factory=dict)

    @property
    def total_sheets(self) -> int:
        return len(self.layouts)

    @property
    def total_waste_percentage(self) -> int:
        """Mean of per-sheet waste, rounded."""
        return aggregate_waste([layout.waste_percentage for layout in self.layouts])

    @property
    def total_parts_placed(self) -> int:
        return sum(layout.piece_count for layout in self.layouts)

    @property
    def succeeded(self) -> bool:
        return not any(issue.is_error for issue in self.issues)

    @property
    def errors(self) -> tuple[LayoutIssue, ...]:
        return tuple(i for i in self.issues if i.is_error)


class GuillotineBinPacker:
    """Packs one material group onto sheets of a single size.

    Attributes:
        sheet: Sheet dimensions and kerf.
        max_iterations: Upper bound on sheets opened for one group.
        min_offcut_size: Smallest side for a leftover to count as an offcut.
    """

    def __init__(
        self,
        sheet: SheetSpec,
        *,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
        min_offcut_size: int = DEFAULT_MIN_OFFCUT_SIZE,
    ) -> None:
        if max_iterations <= 0:
            raise ValueError("max_iterations must be positive")
        if min_offcut_size < 0:
            raise ValueError("Minimum offcut size must be non-negative")
        self.sheet = sheet
        self.max_iterations = max_iterations
        self.min_offcut_size = min_offcut_size

    def pack(
        self,
        parts: Sequence[Part],
        material: str,
        id_factory: IdFactory | None = None,
    ) -> PackingResult:
        """Pack parts of one material onto as few sheets as the heuristic finds.

        Args:
            parts: Parts of ``material``; quantities are expanded here.
            material: Material tag written on every sheet.
            id_factory: Source of sheet ids. Defaults to sequential ids.

        Returns:
            PackingResult for this material group. Parts too large for the
            sheet are reported and skipped; hitting ``max_iterations``
            discards the group's sheets and reports the unplaced parts.
        """
        ids = id_factory or SequentialIdFactory("sheet")
        units = self._sort_by_area(self._expand(parts))

        issues: list[LayoutIssue] = []
        remaining: list[tuple[Part, int]] = []
        for part, instance in units:
            if part.fits_on(self.sheet):
                remaining.append((part, instance))
                continue
            issue = LayoutIssue(
                kind=IssueKind.UNPLACEABLE_PART,
                message=(
                    f"Part '{part.name}' ({part.width}x{part.length}) does not fit "
                    f"a {self.sheet.width}x{self.sheet.length} sheet in either orientation"
                ),
                subject_id=part.id,
            )
            logger.warning(issue.message)
            issues.append(issue)

        logger.debug("Packing %d pieces of %s", len(remaining), material)

        layouts: list[SheetLayout] = []
        offcuts: list[Offcut] = []
        iterations = 0
        while remaining and iterations < self.max_iterations:
            iterations += 1
            tree = GuillotineTree(self.sheet.width, self.sheet.length)
            placements: list[PlacedPart] = []
            deferred: list[tuple[Part, int]] = []

            for part, instance in remaining:
                placement = self._place(tree, part, instance)
                if placement is None:
                    deferred.append((part, instance))
                else:
                    placements.append(placement)

            if not placements:
                break

            layout = SheetLayout(
                id=ids(),
                index=len(layouts),
                material=material,
                width=self.sheet.width,
                length=self.sheet.length,
                placements=tuple(placements),
            )
            layouts.append(layout)
            offcuts.extend(self._extract_offcuts(tree, layout))
            remaining = deferred

            logger.debug(
                "Sheet %s: %d pieces, %d%% waste",
                layout.id,
                layout.piece_count,
                layout.waste_percentage,
            )

        if remaining:
            issue = LayoutIssue(
                kind=IssueKind.ITERATION_LIMIT_EXCEEDED,
                message=(
                    f"Material {material}: {len(remaining)} pieces still unplaced after "
                    f"{iterations} sheets: "
                    + ", ".join(sorted({part.id for part, _ in remaining}))
                ),
                subject_id=material,
            )
            logger.warning(issue.message)
            return PackingResult(issues=tuple(issues) + (issue,))

        return PackingResult(
            layouts=tuple(layouts),
            offcuts=tuple(offcuts),
            issues=tuple(issues),
            sheets_by_material={material: len(layouts)} if layouts else {},
        )

    def _expand(self, parts: Sequence[Part]) -> list[tuple[Part, int]]:
        """One entry per physical piece, numbered from 1 within each part."""
        return [
            (part, instance)
            for part in parts
            for instance in range(1, part.quantity + 1)
        ]

    def _sort_by_area(self, units: list[tuple[Part, int]]) -> list[tuple[Part, int]]:
        """Largest area first; ties keep input order."""
        return sorted(units, key=lambda unit: unit[0].area, reverse=True)

    def _place(self, tree: GuillotineTree, part: Part, instance: int) -> PlacedPart | None:
        width, length = part.width, part.length
        rotated = False
        handle = tree.find(width, length)
        if handle is None and width != length:
            handle = tree.find(length, width)
            if handle is not None:
                width, length = length, width
                rotated = True
        if handle is None:
            return None

        node = tree.split(handle, width, length, self.sheet.kerf)
        if rotated:
            logger.debug("Piece '%s' #%d placed rotated", part.name, instance)
        return PlacedPart(
            part=part,
            instance=instance,
            x=node.x,
            y=node.y,
            width=width,
            length=length,
            rotated=rotated,
        )

    def _extract_offcuts(self, tree: GuillotineTree, layout: SheetLayout) -> list[Offcut]:
        minimum = max(self.min_offcut_size, 1)
        return [
            Offcut(
                sheet_id=layout.id,
                material=layout.material,
                x=leaf.x,
                y=leaf.y,
                width=leaf.width,
                length=leaf.length,
            )
            for leaf in tree.free_leaves()
            if leaf.width >= minimum and leaf.length >= minimum
        ]


class BinPackingService:
    """Groups parts by material and packs each group.

    Hardware lines are dropped before packing. Material groups are packed
    in order of first appearance, and sheet ids run across all groups.

    Attributes:
        sheet: Sheet dimensions and kerf shared by every material.
        packer: Packer used for each group.
    """

    def __init__(
        self,
        sheet: SheetSpec,
        *,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
        min_offcut_size: int = DEFAULT_MIN_OFFCUT_SIZE,
        id_factory: IdFactory | None = None,
    ) -> None:
        self.sheet = sheet
        self.packer = GuillotineBinPacker(
            sheet,
            max_iterations=max_iterations,
            min_offcut_size=min_offcut_size,
        )
        self.id_factory = id_factory

    def optimize(self, parts: Sequence[Part]) -> PackingResult:
        """Pack every non-hardware part, grouped by material.

        Args:
            parts: Output of the part list generator.

        Returns:
            Combined PackingResult across material groups.
        """
        groups = self._group_by_material(parts)
        if not groups:
            return PackingResult()

        logger.info(
            "Optimizing %d part lines across %d material groups",
            sum(len(g) for g in groups.values()),
            len(groups),
        )

        ids = self.id_factory or SequentialIdFactory("sheet")
        layouts: list[SheetLayout] = []
        offcuts: list[Offcut] = []
        issues: list[LayoutIssue] = []
        sheets_by_material: dict[str, int] = {}

        for material, group in groups.items():
            result = self.packer.pack(group, material, ids)
            layouts.extend(result.layouts)
            offcuts.extend(result.offcuts)
            issues.extend(result.issues)
            sheets_by_material.update(result.sheets_by_material)

            logger.info("Material %s: %d sheets", material, result.total_sheets)

        return PackingResult(
            layouts=tuple(layouts),
            offcuts=tuple(offcuts),
            issues=tuple(issues),
            sheets_by_material=sheets_by_material,
        )

    def _group_by_material(self, parts: Sequence[Part]) -> dict[str, list[Part]]:
        groups: dict[str, list[Part]] = {}
        for part in parts:
            if part.is_hardware or part.quantity == 0:
                continue
            groups.setdefault(part.material, []).append(part)
        return groups


def pack(parts: Sequence[Part], sheet: SheetSpec) -> PackingResult:
    """Nest ``parts`` onto sheets of ``sheet``. See ``BinPackingService``."""
    return BinPackingService(sheet).optimize(parts)
