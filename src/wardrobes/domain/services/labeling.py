"""Room, unit and panel codes used on the shop floor.

The lookup tables are fixed at import time and read-only. ``ROOM_CODES``
is matched in declaration order, so earlier keys win substring matches
("master bedroom" resolves through "master bedroom" before "bedroom").
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from ..value_objects import PanelType

__all__ = [
    "ROOM_CODES",
    "UNIT_CODES",
    "UNIT_TYPE_LABELS",
    "panel_label",
    "room_code",
    "unit_code",
    "unit_label",
]

ROOM_CODES: Mapping[str, str] = MappingProxyType(
    {
        "master bedroom": "MB",
        "master": "MB",
        "bedroom": "B",
        "kids bedroom": "KB",
        "kids": "KB",
        "guest bedroom": "GB",
        "guest": "GB",
        "living": "LR",
        "living room": "LR",
        "kitchen": "K",
        "dining": "DN",
        "dining room": "DN",
        "study": "ST",
        "study room": "ST",
        "pooja": "PJ",
        "pooja room": "PJ",
        "utility": "UT",
        "balcony": "BL",
        "other": "OT",
        "quotation": "Q",
    }
)

UNIT_CODES: Mapping[str, str] = MappingProxyType(
    {
        "wardrobe": "W",
        "kitchen": "K",
        "tv_unit": "TV",
        "dresser": "D",
        "other": "U",
    }
)

UNIT_TYPE_LABELS: Mapping[str, str] = MappingProxyType(
    {
        "wardrobe": "Wardrobe",
        "kitchen": "Kitchen",
        "tv_unit": "TV Unit",
        "dresser": "Dresser",
        "study_table": "Study Table",
        "shoe_rack": "Shoe Rack",
        "book_shelf": "Book Shelf",
        "crockery_unit": "Crockery Unit",
        "pooja_unit": "Pooja Unit",
        "vanity": "Vanity",
        "bar_unit": "Bar Unit",
        "display_unit": "Display Unit",
        "other": "Other",
    }
)

_PANEL_LETTERS = {PanelType.SHUTTER: "S", PanelType.LOFT: "L"}


def room_code(room_name: str) -> str:
    """Get the short code for a room name.

    Examples:
        >>> room_code("Master Bedroom")
        'MB'
        >>> room_code("Master Bedroom 2")
        'MB'
        >>> room_code("Terrace")
        'TE'
    """
    lower = room_name.lower().strip()
    if lower in ROOM_CODES:
        return ROOM_CODES[lower]
    for key, code in ROOM_CODES.items():
        if key in lower:
            return code
    return room_name[:2].upper()


def unit_code(unit_type: str) -> str:
    """Get the short code for a unit type, "U" when unknown."""
    return UNIT_CODES.get(unit_type, "U")


def unit_label(unit_type: str, unit_index: int) -> str:
    """Display label for the ``unit_index``-th (0-based) unit of a room."""
    return f"{UNIT_TYPE_LABELS.get(unit_type, unit_type)} {unit_index + 1}"


def panel_label(
    room: str, unit_number: int, panel_type: PanelType, sequence: int
) -> str:
    """Label for the ``sequence``-th panel of a kind within a unit, e.g. "MB1-S3"."""
    return f"{room}{unit_number}-{_PANEL_LETTERS[panel_type]}{sequence}"
