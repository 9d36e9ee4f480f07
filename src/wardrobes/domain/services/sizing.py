"""Millimetre sizing helpers shared by extraction and override handling.

All rounding here is half-up (``2.5 -> 3``), matching what operators see
in the quotation editor, rather than Python's round-half-to-even.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Sequence

__all__ = [
    "apply_production_sizing",
    "build_edges",
    "format_mm",
    "resolve_spans",
    "round_half_up",
    "round_to_step",
]

logger = logging.getLogger(__name__)

_TRAILING_ZEROS = re.compile(r"\.0+$")


def round_half_up(value: float) -> int:
    """Round to the nearest whole number, ties going up."""
    return math.floor(value + 0.5)


def round_to_step(value_mm: float, step_mm: float) -> float:
    """Round a size to the nearest multiple of ``step_mm``.

    Non-finite sizes collapse to 0. A step of 0 or less rounds to the
    nearest whole millimetre.
    """
    if not math.isfinite(value_mm):
        return 0
    if not step_mm or step_mm <= 0:
        return round_half_up(value_mm)
    return round_half_up(value_mm / step_mm) * step_mm


def apply_production_sizing(
    value_mm: float, reduction_mm: float, rounding_mm: float
) -> float:
    """Apply the production reduction and rounding policy to one size.

    The reduced size never drops below 1mm before rounding.

    Examples:
        >>> apply_production_sizing(1005, 3, 10)
        1000
        >>> apply_production_sizing(5, 10, 1)
        1
    """
    if not math.isfinite(value_mm):
        return 0
    reduced = max(1.0, value_mm - max(0.0, reduction_mm or 0.0))
    return round_to_step(reduced, rounding_mm)


def format_mm(value_mm: float, rounding_mm: float) -> str:
    """Format a size with as many decimals as the rounding step needs.

    Examples:
        >>> format_mm(1000, 1)
        '1000'
        >>> format_mm(100.5, 0.5)
        '100.5'
    """
    step = max(0.0, rounding_mm or 0.0)
    decimals = 0
    if 0 < step < 1:
        # Fixed-point so tiny steps such as 1e-05 keep their decimals
        fraction = f"{step:.10f}".rstrip("0").partition(".")[2]
        decimals = min(3, len(fraction) or 1)
    if decimals > 0:
        text = f"{value_mm:.{decimals}f}"
    else:
        text = str(round_half_up(value_mm))
    return _TRAILING_ZEROS.sub("", text)


def build_edges(
    start: float, size: float, dividers: Sequence[float], count: int
) -> list[float]:
    """Build the edge coordinates of a row of cells.

    Explicit divider positions win; otherwise the span is split evenly
    into ``count`` cells (at least one).

    Args:
        start: Coordinate of the leading edge.
        size: Length of the whole span.
        dividers: Interior divider coordinates, in any order.
        count: Number of cells when no dividers are given.

    Returns:
        Sorted edge coordinates including both outer edges.
    """
    edges = [start]
    safe_count = max(1, count or 1)
    if dividers:
        edges.extend(sorted(dividers))
    elif safe_count > 1:
        edges.extend(start + (size / safe_count) * i for i in range(1, safe_count))
    edges.append(start + size)
    return edges


def resolve_spans(
    total_mm: float,
    count: int,
    spans_mm: Sequence[float] | None = None,
    dividers: Sequence[float] = (),
    start_px: float = 0.0,
    size_px: float = 0.0,
) -> list[float]:
    """Resolve the millimetre size of each cell along one axis.

    Resolution order is already-resolved spans, then canvas divider
    positions scaled by the unit's mm-per-pixel ratio, then an even split.
    Spans or dividers that disagree with ``count`` are ignored so the
    resulting grid always has ``count`` cells.

    Args:
        total_mm: Real-world length of the axis.
        count: Number of cells along the axis.
        spans_mm: Already-resolved cell sizes, if the editor supplied them.
        dividers: Divider positions in canvas pixels.
        start_px: Canvas coordinate of the leading edge.
        size_px: Canvas length of the axis.

    Returns:
        One size per cell, in millimetres, before production sizing.
    """
    safe_count = max(1, count)
    if spans_mm is not None:
        if len(spans_mm) == safe_count:
            return [float(span) for span in spans_mm]
        logger.debug(
            f"Ignoring {len(spans_mm)} resolved spans for {safe_count} cells"
        )
    if dividers and size_px > 0:
        if len(dividers) == safe_count - 1:
            mm_per_px = total_mm / size_px
            edges = build_edges(start_px, size_px, dividers, safe_count)
            return [
                (right - left) * mm_per_px for left, right in zip(edges, edges[1:])
            ]
        logger.debug(
            f"Ignoring {len(dividers)} dividers for {safe_count} cells"
        )
    return [total_mm / safe_count] * safe_count
