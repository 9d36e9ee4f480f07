"""Pydantic models for quotation configuration files.

A quotation file describes the rooms of a quotation, the units drawn in
each room, the production sizing settings, and any operator overrides
saved for the session.

Example:
    {
        "schema_version": "1.0",
        "rooms": [
            {
                "name": "Master Bedroom",
                "units": [
                    {"id": "w1", "width_mm": 2700, "height_mm": 2400,
                     "shutter_count": 3}
                ]
            }
        ],
        "overrides": {"0:w1": {"overall_width_mm": 3000}}
    }
"""

import re

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from wardrobes.domain.value_objects import DEFAULT_GAP_MM, GAP_OPTIONS

# Supported schema versions for configuration files
# Version 1.0: Rooms, units, production settings and overrides
# Version 1.1: Added resolved span lists and deleted panels
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1"})

_GROUP_KEY = re.compile(r"^\d+:.+$")


class BoxConfig(BaseModel):
    """On-screen rectangle of a unit or loft, in canvas pixels."""

    model_config = ConfigDict(extra="forbid")

    x: float = 0.0
    y: float = 0.0
    width: float = Field(gt=0, description="Box width in pixels")
    height: float = Field(gt=0, description="Box height in pixels")


class UnitConfig(BaseModel):
    """Configuration for a single drawn unit.

    Column widths come from ``column_widths_mm`` when given, otherwise
    from ``shutter_divider_xs`` scaled through ``box``, otherwise from an
    even split of ``width_mm``. Rows and loft columns resolve the same way.

    Attributes:
        id: Unit identifier, unique within its room
        unit_type: Catalogue type such as "wardrobe" or "tv_unit"
        width_mm: Shutter area width. 0 marks a unit still being drawn
        height_mm: Shutter area height. 0 marks a unit still being drawn
        shutter_count: Number of shutter columns
        section_count: Number of shutter rows
        loft_enabled: Whether the unit has a loft row
        loft_only: The unit is only a loft; sized by loft_width_mm and
            loft_height_mm, with no shutters
        loft_shutter_count: Number of loft columns
        loft_height_mm: Loft height
        loft_width_mm: Loft width, 0 to match the unit width
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(min_length=1)
    unit_type: str = "wardrobe"
    width_mm: float = Field(ge=0, description="Unit width in mm")
    height_mm: float = Field(ge=0, description="Unit height in mm")
    shutter_count: int = Field(default=1, ge=1, le=20)
    section_count: int = Field(default=1, ge=1, le=10)
    loft_enabled: bool = False
    loft_only: bool = False
    loft_shutter_count: int = Field(default=1, ge=1, le=20)
    loft_height_mm: float = Field(default=0.0, ge=0)
    loft_width_mm: float = Field(default=0.0, ge=0)
    box: BoxConfig | None = None
    loft_box: BoxConfig | None = None
    shutter_divider_xs: list[float] = Field(default_factory=list)
    horizontal_divider_ys: list[float] = Field(default_factory=list)
    loft_divider_xs: list[float] = Field(default_factory=list)
    column_widths_mm: list[float] | None = None
    row_heights_mm: list[float] | None = None
    loft_widths_mm: list[float] | None = None

    @model_validator(mode="after")
    def validate_spans(self) -> "UnitConfig":
        """Ensure resolved span lists match the grid they describe."""
        checks = (
            ("column_widths_mm", self.column_widths_mm, self.shutter_count),
            ("row_heights_mm", self.row_heights_mm, self.section_count),
            ("loft_widths_mm", self.loft_widths_mm, self.loft_shutter_count),
        )
        for name, spans, count in checks:
            if spans is None:
                continue
            if len(spans) != count:
                raise ValueError(f"{name} has {len(spans)} entries, expected {count}")
            if any(span <= 0 for span in spans):
                raise ValueError(f"{name} entries must be positive")
        return self


class RoomConfig(BaseModel):
    """Configuration for a room and its drawn units."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1)
    units: list[UnitConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_unique_unit_ids(self) -> "RoomConfig":
        seen: set[str] = set()
        for unit in self.units:
            if unit.id in seen:
                raise ValueError(f"Duplicate unit id '{unit.id}' in room '{self.name}'")
            seen.add(unit.id)
        return self


class ProductionSettingsConfig(BaseModel):
    """Production sizing settings.

    Attributes:
        width_reduction_mm: Millimetres trimmed from each panel width
        height_reduction_mm: Millimetres trimmed from each panel height
        rounding_mm: Rounding increment, 0 for whole millimetres
        include_loft: Whether loft panels are produced
        gap_mm: Default gap between panels, one of the offered options
        shutter_laminate_code: Laminate printed on every shutter in the cut list
        loft_laminate_code: Laminate printed on every loft panel in the cut list
    """

    model_config = ConfigDict(extra="forbid")

    width_reduction_mm: float = Field(default=0.0, ge=0)
    height_reduction_mm: float = Field(default=0.0, ge=0)
    rounding_mm: float = Field(default=1.0, ge=0)
    include_loft: bool = True
    gap_mm: float = DEFAULT_GAP_MM
    shutter_laminate_code: str = ""
    loft_laminate_code: str = ""

    @field_validator("gap_mm")
    @classmethod
    def validate_gap(cls, v: float) -> float:
        if v not in GAP_OPTIONS:
            options = ", ".join(str(option) for option in GAP_OPTIONS)
            raise ValueError(f"gap_mm must be one of: {options}")
        return v


class PanelOverrideConfig(BaseModel):
    """Operator-entered size for one panel."""

    model_config = ConfigDict(extra="forbid")

    width_mm: float | None = Field(default=None, gt=0)
    height_mm: float | None = Field(default=None, gt=0)


class UnitOverridesConfig(BaseModel):
    """Operator overrides for one unit, keyed by panel id."""

    model_config = ConfigDict(extra="forbid")

    overall_width_mm: float | None = Field(default=None, gt=0)
    overall_height_mm: float | None = Field(default=None, gt=0)
    gap_mm: float | None = Field(default=None, ge=0)
    panels: dict[str, PanelOverrideConfig] = Field(default_factory=dict)


class QuotationConfiguration(BaseModel):
    """Root configuration model for a quotation file."""

    model_config = ConfigDict(extra="forbid")

    schema_version: str = "1.0"
    project_name: str | None = None
    rooms: list[RoomConfig] = Field(default_factory=list)
    settings: ProductionSettingsConfig = Field(default_factory=ProductionSettingsConfig)
    overrides: dict[str, UnitOverridesConfig] = Field(default_factory=dict)
    deleted_panels: list[str] = Field(default_factory=list)

    @field_validator("schema_version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(f"Unsupported schema version '{v}'. Supported: {supported}")
        return v

    @field_validator("overrides")
    @classmethod
    def validate_override_keys(
        cls, v: dict[str, UnitOverridesConfig]
    ) -> dict[str, UnitOverridesConfig]:
        for key in v:
            if not _GROUP_KEY.match(key):
                raise ValueError(
                    f"Override key '{key}' must look like '<room_index>:<unit_id>'"
                )
        return v
