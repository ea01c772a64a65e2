"""Identifier factories satisfying ``cabinetplan.contracts.IdFactory``."""

from __future__ import annotations

import uuid


class SequentialIdFactory:
    """Deterministic ids: ``<prefix>-01``, ``<prefix>-02``, ...

    Engines create a fresh instance per call when no factory is injected,
    so identical inputs always produce identical ids.
    """

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix
        self._next = 1

    def __call__(self) -> str:
        value = f"{self.prefix}-{self._next:02d}"
        self._next += 1
        return value


class UuidIdFactory:
    """Random nine-character ids for callers that persist generated values."""

    def __call__(self) -> str:
        return uuid.uuid4().hex[:9]
