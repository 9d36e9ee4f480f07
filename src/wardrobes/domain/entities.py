"""Domain entities for wardrobe production layouts."""

from dataclasses import dataclass, field

from .value_objects import Box


@dataclass
class DrawnUnit:
    """A rectangular furniture unit drawn over a room photo.

    Owned by the canvas editor; the production engine only reads it.

    Attributes:
        id: Stable identifier, unique within a room.
        unit_type: Catalogue type such as "wardrobe" or "tv_unit".
        width_mm: Real-world width of the shutter area.
        height_mm: Real-world height of the shutter area.
        shutter_count: Number of shutter columns.
        section_count: Number of shutter rows.
        loft_enabled: Whether a loft row sits above the shutters.
        loft_only: The unit is a loft with no shutter area below it.
        loft_shutter_count: Number of loft columns.
        loft_height_mm: Loft height. 0 falls back to the loft box height.
        loft_width_mm: Loft width. 0 means the loft spans the unit width.
        box: On-screen rectangle of the shutter area.
        loft_box: On-screen rectangle of the loft area.
        shutter_divider_xs: Column divider x positions in canvas pixels.
        horizontal_divider_ys: Row divider y positions in canvas pixels.
        loft_divider_xs: Loft divider x positions in canvas pixels.
        column_widths_mm: Already-resolved column widths, if known.
        row_heights_mm: Already-resolved row heights, if known.
        loft_widths_mm: Already-resolved loft column widths, if known.
    """

    id: str
    width_mm: float
    height_mm: float
    unit_type: str = "wardrobe"
    shutter_count: int = 1
    section_count: int = 1
    loft_enabled: bool = False
    loft_only: bool = False
    loft_shutter_count: int = 1
    loft_height_mm: float = 0.0
    loft_width_mm: float = 0.0
    box: Box | None = None
    loft_box: Box | None = None
    shutter_divider_xs: tuple[float, ...] = ()
    horizontal_divider_ys: tuple[float, ...] = ()
    loft_divider_xs: tuple[float, ...] = ()
    column_widths_mm: tuple[float, ...] | None = None
    row_heights_mm: tuple[float, ...] | None = None
    loft_widths_mm: tuple[float, ...] | None = None

    def __post_init__(self) -> None:
        if self.shutter_count < 1:
            raise ValueError("Unit must have at least 1 shutter column")
        if self.section_count < 1:
            raise ValueError("Unit must have at least 1 row")
        if self.loft_shutter_count < 1:
            raise ValueError("Loft must have at least 1 column")
        if self.loft_height_mm < 0 or self.loft_width_mm < 0:
            raise ValueError("Loft dimensions cannot be negative")

    @property
    def has_loft(self) -> bool:
        return self.loft_enabled or self.loft_only

    @property
    def is_drawn(self) -> bool:
        """True once the unit has a non-zero real-world size.

        Loft-only units are sized by their loft, so the shutter area may
        stay at 0 but the loft needs a width and a height.
        """
        if self.loft_only:
            loft_width_mm = self.loft_width_mm or self.width_mm
            return loft_width_mm > 0 and self.loft_height_mm > 0
        return self.width_mm > 0 and self.height_mm > 0


@dataclass
class Room:
    """A room of the quotation and the units drawn in it."""

    name: str
    units: list[DrawnUnit] = field(default_factory=list)


@dataclass
class GroupShutter:
    """A labelled shutter inside a layout group."""

    row: int
    col: int
    width_mm: float
    height_mm: float
    label: str
    id: str


@dataclass
class GroupLoftPanel:
    """A labelled loft panel inside a layout group."""

    col: int
    width_mm: float
    height_mm: float
    label: str
    id: str


@dataclass
class LayoutGroup:
    """All panels of one physical unit, arranged as a grid.

    ``col_widths_mm[c - 1]`` is always the widest shutter in column ``c``
    and ``row_heights_mm[r - 1]`` the tallest shutter in row ``r``.
    ``total_height_mm`` covers the shutter rows only; the loft is tracked
    in ``loft_height_mm``.

    Attributes:
        key: ``"<room_index>:<unit_id>"``, stable across re-derivation.
        room_index: Position of the owning room in the quotation.
        room_name: Display name of the owning room.
        room_code: Short room code, e.g. "MB".
        unit_label: Display label, e.g. "Wardrobe 1".
        unit_code: Short unit type code, e.g. "W".
        unit_number: 1-based number of the unit within its room code.
        unit_id: Identifier of the drawn unit.
        unit_index: Position of the unit within its room.
        col_widths_mm: Width of each shutter column.
        row_heights_mm: Height of each shutter row.
        total_width_mm: Overall width of the shutter grid.
        total_height_mm: Overall height of the shutter grid.
        shutters: Shutter panels in extraction order.
        loft_panels: Loft panels in column order.
        loft_height_mm: Height of the loft row, 0 without a loft.
    """

    key: str
    room_index: int
    room_name: str
    room_code: str
    unit_label: str
    unit_code: str
    unit_number: int
    unit_id: str
    unit_index: int
    col_widths_mm: list[float] = field(default_factory=list)
    row_heights_mm: list[float] = field(default_factory=list)
    total_width_mm: float = 0.0
    total_height_mm: float = 0.0
    shutters: list[GroupShutter] = field(default_factory=list)
    loft_panels: list[GroupLoftPanel] = field(default_factory=list)
    loft_height_mm: float = 0.0

    @property
    def is_loft_only(self) -> bool:
        return not self.shutters and bool(self.loft_panels)

    @property
    def overall_height_mm(self) -> float:
        """Shutter height plus the loft row."""
        return self.total_height_mm + self.loft_height_mm

    @property
    def prefix(self) -> str:
        """Label prefix shared by every panel of the unit, e.g. "MB1"."""
        return f"{self.room_code}{self.unit_number}"

    def find_shutter(self, panel_id: str) -> GroupShutter | None:
        for shutter in self.shutters:
            if shutter.id == panel_id:
                return shutter
        return None

    def find_loft_panel(self, panel_id: str) -> GroupLoftPanel | None:
        for panel in self.loft_panels:
            if panel.id == panel_id:
                return panel
        return None
