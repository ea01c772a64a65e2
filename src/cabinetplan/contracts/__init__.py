"""Interfaces for collaborators outside the layout and nesting engines."""

from cabinetplan.contracts.protocols import IdFactory, PartListGeneratorProtocol

__all__ = [
    "IdFactory",
    "PartListGeneratorProtocol",
]
