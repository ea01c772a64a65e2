"""Pydantic models for layout and cutting configuration files.

Two file kinds are supported:
    - Layout files (``PlanConfiguration``): project settings, auto-fill
      options and one or more wall zones.
    - Cutting files (``CuttingConfiguration``): a sheet specification and a
      flat part list, as produced by a part list generator.

All dimensions are integer millimeters.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from cabinetplan.domain.value_objects import ObstacleKind, PresetType, VerticalClass

# Supported schema versions for configuration files
# Version 1.0: Zones, obstacles, cabinets, auto-fill options and cutting files
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class ProjectSettingsSchema(BaseModel):
    """Construction settings shared by every zone."""

    model_config = ConfigDict(extra="forbid")

    base_height: int = Field(default=720, gt=0, description="Base carcass height")
    wall_height: int = Field(default=720, gt=0, description="Wall carcass height")
    tall_height: int = Field(default=2100, gt=0, description="Tall carcass height")
    depth_base: int = Field(default=560, gt=0, description="Base carcass depth")
    depth_wall: int = Field(default=320, gt=0, description="Wall carcass depth")
    depth_tall: int = Field(default=580, gt=0, description="Tall carcass depth")
    thickness: int = Field(default=16, gt=0, description="Board thickness")
    counter_thickness: int = Field(default=40, ge=0, description="Worktop thickness")
    toe_kick_height: int = Field(default=150, ge=0, description="Plinth height")
    sheet_width: int = Field(default=1220, gt=0, description="Stock sheet width")
    sheet_length: int = Field(default=2440, gt=0, description="Stock sheet length")
    kerf: int = Field(default=4, ge=0, le=20, description="Saw blade width")


class AutoFillOptionsSchema(BaseModel):
    """Auto-fill switches."""

    model_config = ConfigDict(extra="forbid")

    include_sink: bool = True
    include_cooker: bool = True
    include_tall: bool = False
    include_wall_cabinets: bool = True
    prefer_drawers: bool = False


class ObstacleSchema(BaseModel):
    """A door, window, column or pipe on a wall."""

    model_config = ConfigDict(extra="forbid")

    id: str | None = Field(default=None, description="Optional obstacle identifier")
    kind: ObstacleKind = Field(description="Obstacle kind")
    from_left: int = Field(ge=0, description="Offset from the wall start")
    width: int = Field(gt=0, description="Horizontal extent")
    height: int | None = Field(default=None, gt=0, description="Vertical extent")
    sill_height: int | None = Field(
        default=None, ge=0, description="Floor to window bottom (windows only)"
    )

    @model_validator(mode="after")
    def sill_only_for_windows(self) -> "ObstacleSchema":
        if self.sill_height is not None and self.kind is not ObstacleKind.WINDOW:
            raise ValueError("sill_height is only valid for windows")
        return self


class CabinetSchema(BaseModel):
    """A cabinet already placed on a wall."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(min_length=1, description="Cabinet identifier")
    preset: PresetType = Field(description="Cabinet template")
    vertical_class: VerticalClass = Field(description="Base, Wall or Tall")
    width: int = Field(gt=0, description="Horizontal extent")
    from_left: int = Field(default=0, ge=0, description="Offset from the wall start")
    is_auto_filled: bool = Field(default=False)
    label: str | None = Field(default=None, max_length=8)


class ZoneSchema(BaseModel):
    """One wall segment."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(min_length=1, description="Zone identifier, e.g. 'Wall A'")
    total_length: int = Field(gt=0, description="Wall length")
    wall_height: int = Field(default=2400, gt=0, description="Wall height")
    obstacles: list[ObstacleSchema] = Field(default_factory=list)
    cabinets: list[CabinetSchema] = Field(default_factory=list)

    @field_validator("cabinets")
    @classmethod
    def unique_cabinet_ids(cls, cabinets: list[CabinetSchema]) -> list[CabinetSchema]:
        seen: set[str] = set()
        for cabinet in cabinets:
            if cabinet.id in seen:
                raise ValueError(f"Duplicate cabinet id '{cabinet.id}'")
            seen.add(cabinet.id)
        return cabinets


class PlanConfiguration(BaseModel):
    """Root model of a layout file."""

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0", description="Configuration schema version")
    settings: ProjectSettingsSchema = Field(default_factory=ProjectSettingsSchema)
    options: AutoFillOptionsSchema = Field(default_factory=AutoFillOptionsSchema)
    zones: list[ZoneSchema] = Field(min_length=1)

    @field_validator("schema_version")
    @classmethod
    def supported_version(cls, value: str) -> str:
        if value not in SUPPORTED_VERSIONS:
            raise ValueError(
                f"Unsupported schema version '{value}'; supported: "
                + ", ".join(sorted(SUPPORTED_VERSIONS))
            )
        return value


class SheetSchema(BaseModel):
    """Stock sheet for nesting."""

    model_config = ConfigDict(extra="forbid")

    width: int = Field(default=1220, gt=0)
    length: int = Field(default=2440, gt=0)
    kerf: int = Field(default=4, ge=0, le=20)
    min_offcut_size: int = Field(default=300, ge=0)


class PartSchema(BaseModel):
    """One line of a part list."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    width: int = Field(ge=0)
    length: int = Field(ge=0)
    material: str = Field(min_length=1)
    quantity: int = Field(default=1, ge=0)
    label: str | None = None
    is_hardware: bool = False

    @model_validator(mode="after")
    def panels_have_area(self) -> "PartSchema":
        if not self.is_hardware and (self.width == 0 or self.length == 0):
            raise ValueError("Non-hardware parts need a positive width and length")
        return self


class CuttingConfiguration(BaseModel):
    """Root model of a cutting file."""

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0")
    sheet: SheetSchema = Field(default_factory=SheetSchema)
    parts: list[PartSchema] = Field(default_factory=list)

    @field_validator("schema_version")
    @classmethod
    def supported_version(cls, value: str) -> str:
        if value not in SUPPORTED_VERSIONS:
            raise ValueError(f"Unsupported schema version '{value}'")
        return value
