"""Pytest configuration and shared fixtures for cabinetplan tests."""

from __future__ import annotations

import pytest

from cabinetplan.domain.entities import CabinetUnit
from cabinetplan.domain.services import AutoFillOptions
from cabinetplan.domain.value_objects import PresetType, ProjectSettings, VerticalClass
from cabinetplan.infrastructure.bin_packing import Part


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: tests that run the CLI end-to-end")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def settings() -> ProjectSettings:
    """Default project settings (1220 x 2440 sheet, 4mm kerf)."""
    return ProjectSettings()


@pytest.fixture
def base_only() -> AutoFillOptions:
    """Auto-fill options that only sweep the base band."""
    return AutoFillOptions(
        include_sink=False,
        include_cooker=False,
        include_tall=False,
        include_wall_cabinets=False,
    )


def _make_cabinet(
    id: str,
    from_left: int,
    width: int = 600,
    vertical_class: VerticalClass = VerticalClass.BASE,
    preset: PresetType = PresetType.BASE_DOOR,
    **kwargs,
) -> CabinetUnit:
    """Build a manual cabinet with sensible defaults."""
    return CabinetUnit(
        id=id,
        preset=preset,
        vertical_class=vertical_class,
        width=width,
        from_left=from_left,
        **kwargs,
    )


@pytest.fixture
def make_cabinet():
    """Factory for manual cabinets."""
    return _make_cabinet


class StubPartListGenerator:
    """Part list generator returning one carcass side pair and a hinge line.

    Records every cabinet it was asked about.
    """

    def __init__(self) -> None:
        self.calls: list[CabinetUnit] = []

    def generate(self, unit: CabinetUnit, settings: ProjectSettings) -> list[Part]:
        self.calls.append(unit)
        return [
            Part(
                id=f"{unit.id}-side",
                name="Side Panel",
                width=settings.depth_for(unit.vertical_class),
                length=settings.height_for(unit.vertical_class),
                material="MR 16mm",
                quantity=2,
                label=unit.label,
            ),
            Part(
                id=f"{unit.id}-hinge",
                name="Hinge",
                width=0,
                length=0,
                material="Hardware",
                quantity=2,
                label=unit.label,
                is_hardware=True,
            ),
        ]


@pytest.fixture
def part_list_generator() -> StubPartListGenerator:
    """Stub part list generator."""
    return StubPartListGenerator()
