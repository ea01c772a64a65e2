"""Tests for layout and cutting file loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from cabinetplan.application.config import (
    ConfigError,
    config_to_options,
    config_to_parts,
    config_to_settings,
    config_to_sheet_spec,
    config_to_zones,
    load_config,
    load_config_from_dict,
    load_cutting_config,
    load_cutting_config_from_dict,
)
from cabinetplan.application.config.loader import _format_json_path
from cabinetplan.domain.value_objects import ObstacleKind, PresetType, VerticalClass
from cabinetplan.infrastructure.bin_packing import SheetSpec

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


def _zone(**overrides) -> dict:
    zone = {"id": "Wall A", "total_length": 3000}
    zone.update(overrides)
    return zone


class TestFormatJsonPath:
    """Tests for pydantic location formatting."""

    def test_nested(self) -> None:
        assert _format_json_path(("zones", 0, "obstacles", 1, "width")) == "zones[0].obstacles[1].width"

    def test_leading_index(self) -> None:
        assert _format_json_path((0, "id")) == "[0].id"


class TestLoadConfigFromDict:
    """Tests for layout configuration validation."""

    def test_minimal(self) -> None:
        config = load_config_from_dict({"zones": [_zone()]})
        assert config.schema_version == "1.0"
        assert config.settings.kerf == 4
        assert config.options.include_sink is True
        assert config.options.include_tall is False

    def test_zones_required(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"zones": []})
        assert exc_info.value.error_type == "validation"

    def test_unknown_field_reports_path(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"zones": [_zone(colour="white")]})
        assert [d["path"] for d in exc_info.value.details] == ["zones[0].colour"]

    def test_invalid_enum(self) -> None:
        data = {"zones": [_zone(obstacles=[{"kind": "hatch", "from_left": 0, "width": 100}])]}
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(data)
        assert exc_info.value.details[0]["path"] == "zones[0].obstacles[0].kind"

    def test_sill_only_for_windows(self) -> None:
        data = {
            "zones": [
                _zone(obstacles=[{"kind": "door", "from_left": 0, "width": 900, "sill_height": 0}])
            ]
        }
        with pytest.raises(ConfigError, match="only valid for windows"):
            load_config_from_dict(data)

    def test_duplicate_cabinet_ids(self) -> None:
        cabinet = {"id": "c1", "preset": "Base 2-Door", "vertical_class": "Base", "width": 600}
        with pytest.raises(ConfigError, match="Duplicate cabinet id"):
            load_config_from_dict({"zones": [_zone(cabinets=[cabinet, cabinet])]})

    def test_unsupported_version(self) -> None:
        with pytest.raises(ConfigError, match="Unsupported schema version"):
            load_config_from_dict({"schema_version": "2.0", "zones": [_zone()]})

    def test_kerf_limit(self) -> None:
        with pytest.raises(ConfigError):
            load_config_from_dict({"settings": {"kerf": 25}, "zones": [_zone()]})


class TestLoadConfigFile:
    """Tests for reading layout files from disk."""

    def test_fixture(self) -> None:
        config = load_config(FIXTURES_PATH / "kitchen.json")
        assert config.zones[0].id == "Wall A"

    def test_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.json")
        assert exc_info.value.error_type == "file_not_found"
        assert exc_info.value.path == tmp_path / "missing.json"

    def test_invalid_json(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(FIXTURES_PATH / "invalid_json.json")
        error = exc_info.value
        assert error.error_type == "json_parse"
        assert error.details[0]["line"] >= 1

    def test_validation_error_keeps_path(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text('{"zones": [{"id": "Z", "total_length": -1}]}')
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.path == path
        assert exc_info.value.details[0]["path"] == "zones[0].total_length"


class TestCuttingConfig:
    """Tests for cutting files."""

    def test_fixture(self) -> None:
        config = load_cutting_config(FIXTURES_PATH / "parts.json")
        assert config.sheet.min_offcut_size == 300
        assert len(config.parts) == 4

    def test_defaults(self) -> None:
        config = load_cutting_config_from_dict({})
        assert (config.sheet.width, config.sheet.length, config.sheet.kerf) == (1220, 2440, 4)
        assert config.parts == []

    def test_panel_without_area_rejected(self) -> None:
        part = {"id": "p", "name": "Shelf", "width": 0, "length": 300, "material": "MR"}
        with pytest.raises(ConfigError, match="positive width and length"):
            load_cutting_config_from_dict({"parts": [part]})

    def test_hardware_without_area_allowed(self) -> None:
        part = {"id": "h", "name": "Hinge", "width": 0, "length": 0, "material": "HW", "is_hardware": True}
        config = load_cutting_config_from_dict({"parts": [part]})
        assert config.parts[0].is_hardware


class TestAdapters:
    """Tests for schema to domain conversion."""

    def test_zone_conversion(self) -> None:
        config = load_config(FIXTURES_PATH / "kitchen.json")
        (zone,) = config_to_zones(config)

        assert zone.total_length == 4000
        assert zone.obstacles[0].kind is ObstacleKind.WINDOW
        assert zone.obstacles[0].sill_height == 900
        cabinet = zone.cabinets[0]
        assert cabinet.preset is PresetType.TALL_OVEN
        assert cabinet.vertical_class is VerticalClass.TALL
        assert cabinet.label == "T01"
        assert not cabinet.is_auto_filled

    def test_settings_and_options(self) -> None:
        config = load_config_from_dict(
            {"settings": {"kerf": 3}, "options": {"prefer_drawers": True}, "zones": [_zone()]}
        )
        assert config_to_settings(config.settings).kerf == 3
        assert config_to_options(config.options).prefer_drawers is True

    def test_sheet_with_kerf_override(self) -> None:
        config = load_cutting_config_from_dict({"sheet": {"kerf": 3}})
        assert config_to_sheet_spec(config.sheet) == SheetSpec(1220, 2440, 3)
        assert config_to_sheet_spec(config.sheet, kerf=0) == SheetSpec(1220, 2440, 0)

    def test_parts(self) -> None:
        parts = config_to_parts(load_cutting_config(FIXTURES_PATH / "parts.json"))
        assert [p.id for p in parts] == ["p1", "p2", "p3", "h1"]
        assert parts[0].quantity == 4
        assert parts[3].is_hardware
