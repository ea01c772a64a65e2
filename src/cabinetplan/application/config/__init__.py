"""Configuration schema and loading system for layout and cutting files.

Public API:
    - PlanConfiguration: Root model of a layout file
    - CuttingConfiguration: Root model of a cutting file
    - load_config / load_config_from_dict: Load a layout file
    - load_cutting_config / load_cutting_config_from_dict: Load a cutting file
    - ConfigError: Exception for configuration errors
    - config_to_*: Convert schemas into domain values

Example:
    >>> from pathlib import Path
    >>> from cabinetplan.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("kitchen.json"))
    ...     print(f"{len(config.zones)} zone(s)")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from cabinetplan.application.config.adapter import (
    config_to_options,
    config_to_parts,
    config_to_settings,
    config_to_sheet_spec,
    config_to_zone,
    config_to_zones,
)
from cabinetplan.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
    load_cutting_config,
    load_cutting_config_from_dict,
)
from cabinetplan.application.config.schema import (
    SUPPORTED_VERSIONS,
    AutoFillOptionsSchema,
    CabinetSchema,
    CuttingConfiguration,
    ObstacleSchema,
    PartSchema,
    PlanConfiguration,
    ProjectSettingsSchema,
    SheetSchema,
    ZoneSchema,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "AutoFillOptionsSchema",
    "CabinetSchema",
    "ConfigError",
    "CuttingConfiguration",
    "ObstacleSchema",
    "PartSchema",
    "PlanConfiguration",
    "ProjectSettingsSchema",
    "SheetSchema",
    "ZoneSchema",
    "config_to_options",
    "config_to_parts",
    "config_to_settings",
    "config_to_sheet_spec",
    "config_to_zone",
    "config_to_zones",
    "load_config",
    "load_config_from_dict",
    "load_cutting_config",
    "load_cutting_config_from_dict",
]
