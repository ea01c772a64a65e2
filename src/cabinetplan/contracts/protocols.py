"""Protocols for collaborators the engines depend on but do not implement.

The part list generator and identifier source are injected, keeping the
layout engine and the nester deterministic and testable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from cabinetplan.domain.entities import CabinetUnit
    from cabinetplan.domain.value_objects import ProjectSettings
    from cabinetplan.infrastructure.bin_packing import Part


@runtime_checkable
class IdFactory(Protocol):
    """Supplies unique-enough string handles for generated values.

    Example:
        ```python
        ids = SequentialIdFactory("auto")
        ids()  # "auto-01"
        ```
    """

    def __call__(self) -> str:
        """Return a fresh identifier."""
        ...


@runtime_checkable
class PartListGeneratorProtocol(Protocol):
    """Turns one placed cabinet into the flat parts needed to build it.

    Implementations live outside this package. The nester consumes their
    output: rectangles with a material tag and a quantity, plus hardware
    entries flagged ``is_hardware`` which are never nested.
    """

    def generate(self, unit: CabinetUnit, settings: ProjectSettings) -> list[Part]:
        """Return the parts and hardware required by ``unit``.

        Args:
            unit: A cabinet with resolved position and label.
            settings: Board thicknesses and per-class depths.

        Returns:
            Parts with material tags and quantities.
        """
        ...
