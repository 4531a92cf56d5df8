"""Conversion between availability slot lists and the weekly grid."""

import logging
from types import MappingProxyType

import numpy as np

from mealgrid.models import (
    AvailabilityGrid,
    AvailabilityMark,
    AvailabilitySlot,
    TimeSlot,
    Weekday,
)

logger = logging.getLogger(__name__)

# Display order: Monday first, regardless of locale
WEEKDAYS: tuple[tuple[Weekday, str], ...] = (
    ("MON", "月"),
    ("TUE", "火"),
    ("WED", "水"),
    ("THU", "木"),
    ("FRI", "金"),
    ("SAT", "土"),
    ("SUN", "日"),
)

TIMESLOTS: tuple[tuple[TimeSlot, str], ...] = (
    ("DAY", "昼"),
    ("NIGHT", "夜"),
)

WEEKDAY_VALUES: tuple[Weekday, ...] = tuple(value for value, _ in WEEKDAYS)
TIMESLOT_VALUES: tuple[TimeSlot, ...] = tuple(value for value, _ in TIMESLOTS)

DEFAULT_STATUS = "UNAVAILABLE"

_NEXT_STATUS: MappingProxyType[str, str] = MappingProxyType(
    {
        "UNAVAILABLE": "AVAILABLE",
        "AVAILABLE": "MEET_ONLY",
        "MEET_ONLY": "UNAVAILABLE",
    }
)

_STATUS_MARKS: MappingProxyType[str, AvailabilityMark] = MappingProxyType(
    {
        "AVAILABLE": "CIRCLE",
        "MEET_ONLY": "TRIANGLE",
    }
)


def create_default_grid() -> AvailabilityGrid:
    """Return a grid with every weekday/time slot cell set to UNAVAILABLE."""
    return {
        weekday: {time_slot: DEFAULT_STATUS for time_slot in TIMESLOT_VALUES}
        for weekday in WEEKDAY_VALUES
    }


def slots_to_grid(slots: list[AvailabilitySlot] | None) -> AvailabilityGrid:
    """
    Build a full grid from an API slot list.

    Cells missing from the list stay UNAVAILABLE. Slots for unknown weekdays
    are skipped. Slots for a known weekday but an unknown time slot are
    skipped as well rather than added as an extra cell, so the result always
    holds exactly the 7 x 2 canonical cells. When a cell appears more than
    once, the last slot wins.
    """
    grid = create_default_grid()
    if not slots:
        return grid

    for slot in slots:
        row = grid.get(slot.weekday)
        if row is None or slot.time_slot not in row:
            logger.debug("Skipping slot with unknown key %s/%s", slot.weekday, slot.time_slot)
            continue
        row[slot.time_slot] = slot.status

    return grid


def _cell_status(grid: AvailabilityGrid | None, weekday: str, time_slot: str) -> str:
    row = (grid or {}).get(weekday) or {}
    status = row.get(time_slot)
    return DEFAULT_STATUS if status is None else status


def grid_to_slots(grid: AvailabilityGrid | None) -> list[AvailabilitySlot]:
    """
    Flatten a grid into the 14 slots expected by the full-grid PUT.

    Order is weekday (MON..SUN) then time slot (DAY, NIGHT). Missing cells
    are sent as UNAVAILABLE.
    """
    return [
        AvailabilitySlot(
            weekday=weekday,
            time_slot=time_slot,
            status=_cell_status(grid, weekday, time_slot),
        )
        for weekday in WEEKDAY_VALUES
        for time_slot in TIMESLOT_VALUES
    ]


def grid_to_payload(grid: AvailabilityGrid | None) -> list[AvailabilitySlot]:
    """Return only the AVAILABLE cells; everything else is implicitly UNAVAILABLE."""
    return [
        AvailabilitySlot(weekday=weekday, time_slot=time_slot, status="AVAILABLE")
        for weekday in WEEKDAY_VALUES
        for time_slot in TIMESLOT_VALUES
        if _cell_status(grid, weekday, time_slot) == "AVAILABLE"
    ]


def cycle_status(status: str) -> str:
    """Next status when a cell is tapped: UNAVAILABLE -> AVAILABLE -> MEET_ONLY -> UNAVAILABLE."""
    return _NEXT_STATUS.get(status, DEFAULT_STATUS)


def toggle_cell(grid: AvailabilityGrid | None, weekday: str, time_slot: str) -> AvailabilityGrid:
    """Return a copy of ``grid`` with one cell cycled to its next status."""
    next_grid = {day: dict(row or {}) for day, row in (grid or {}).items()}
    row = next_grid.setdefault(weekday, {})
    row[time_slot] = cycle_status(_cell_status(grid, weekday, time_slot))
    return next_grid


def availability_status_to_mark(status: str) -> AvailabilityMark:
    return _STATUS_MARKS.get(status, "CROSS")


def grid_to_matrix(grid: AvailabilityGrid | None) -> np.ndarray:
    """
    Return a (7, 2) boolean array, True where the cell is AVAILABLE.

    Rows follow WEEKDAYS and columns follow TIMESLOTS.
    """
    matrix = np.zeros((len(WEEKDAY_VALUES), len(TIMESLOT_VALUES)), dtype=bool)
    for w_idx, weekday in enumerate(WEEKDAY_VALUES):
        for t_idx, time_slot in enumerate(TIMESLOT_VALUES):
            matrix[w_idx, t_idx] = _cell_status(grid, weekday, time_slot) == "AVAILABLE"
    return matrix
