"""Value objects for the production panel domain."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping

# Default gap between adjacent shutters, in millimetres
DEFAULT_GAP_MM: float = 2.0

# Gap values offered to the operator
GAP_OPTIONS: tuple[int, ...] = (0, 1, 2, 3, 4, 5, 6, 8, 10)


class PanelType(str, Enum):
    """Kinds of physical panel produced for a unit.

    Attributes:
        SHUTTER: A door panel in the main shutter grid.
        LOFT: A door panel in the loft row above the shutters.
    """

    SHUTTER = "SHUTTER"
    LOFT = "LOFT"


@dataclass(frozen=True)
class Box:
    """On-screen rectangle of a drawn unit, in canvas pixels."""

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("Box dimensions must be non-negative")


@dataclass(frozen=True)
class ProductionSettings:
    """Production sizing policy applied while panels are extracted.

    Attributes:
        width_reduction_mm: Millimetres trimmed from every panel width.
        height_reduction_mm: Millimetres trimmed from every panel height.
        rounding_mm: Rounding increment for panel sizes. Values <= 0
            round to the nearest whole millimetre.
        include_loft: Whether loft panels are emitted at all.
        gap_mm: Gap between panels, used only for presentation spacing.
        shutter_laminate_code: Laminate applied to every shutter panel.
        loft_laminate_code: Laminate applied to every loft panel.
    """

    width_reduction_mm: float = 0.0
    height_reduction_mm: float = 0.0
    rounding_mm: float = 1.0
    include_loft: bool = True
    gap_mm: float = DEFAULT_GAP_MM
    shutter_laminate_code: str = ""
    loft_laminate_code: str = ""

    def __post_init__(self) -> None:
        if self.width_reduction_mm < 0 or self.height_reduction_mm < 0:
            raise ValueError("Reductions cannot be negative")
        if self.gap_mm < 0:
            raise ValueError("Gap cannot be negative")

    def laminate_code(self, panel_type: PanelType) -> str:
        """Laminate code for panels of the given type."""
        if panel_type is PanelType.LOFT:
            return self.loft_laminate_code
        return self.shutter_laminate_code


@dataclass(frozen=True)
class PanelItem:
    """One physical piece of material in the cut list.

    Loft panels carry ``row == 0``; shutters use 1-based rows and columns.
    ``laminate_code`` is empty when no laminate was chosen.
    """

    id: str
    room_index: int
    room_name: str
    unit_id: str
    unit_index: int
    unit_label: str
    unit_type: str
    panel_type: PanelType
    row: int
    col: int
    width_mm: float
    height_mm: float
    laminate_code: str = ""

    @property
    def group_key(self) -> str:
        """Key of the layout group this panel belongs to."""
        return f"{self.room_index}:{self.unit_id}"

    @property
    def qualified_id(self) -> str:
        """Panel id prefixed with the room index, unique across the quotation."""
        return f"{self.room_index}:{self.id}"

    @property
    def area_mm2(self) -> float:
        return self.width_mm * self.height_mm


@dataclass(frozen=True)
class PanelOverride:
    """Operator-entered size for a single panel. ``None`` keeps the derived value."""

    width_mm: float | None = None
    height_mm: float | None = None


@dataclass(frozen=True)
class UnitOverrides:
    """Sparse operator edits for one layout group.

    Instances are treated as immutable; edit helpers return new ones.

    Attributes:
        overall_width_mm: Requested overall width of the shutter grid.
        overall_height_mm: Requested overall height including the loft.
        gap_mm: Gap chosen for this unit, if changed from the default.
        panels: Per-panel overrides keyed by panel id.
    """

    overall_width_mm: float | None = None
    overall_height_mm: float | None = None
    gap_mm: float | None = None
    panels: Mapping[str, PanelOverride] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        """True when no edit has been recorded for the unit."""
        return (
            self.overall_width_mm is None
            and self.overall_height_mm is None
            and self.gap_mm is None
            and not self.panels
        )
