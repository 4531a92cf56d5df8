"""Pair schedule cells for the rolling 7-day window."""

from types import MappingProxyType
from typing import Literal

import numpy as np

from mealgrid.days import WINDOW_DAYS
from mealgrid.grid import TIMESLOT_VALUES
from mealgrid.models import Next7Day, PairAvailabilitySlot, PairCell, PairCellKind

PAIR_CELL_DESCRIPTIONS: MappingProxyType[str, str] = MappingProxyType(
    {
        "GO": "あなたも相手も参加できる枠です",
        "PARTNER_ONLY": "相手だけ参加できる枠です（あなたは×）",
        "NONE": "どちらも参加できない枠です",
    }
)


def _slot_key(weekday: str, time_slot: str) -> str:
    return f"{weekday}|{time_slot}"


def build_pair_cells_for_next_7_days(
    days: list[Next7Day],
    slots: list[PairAvailabilitySlot] | None,
) -> list[PairCell]:
    """
    Build one cell per (day, time slot) in the window.

    Facts are looked up by weekday rather than date: availability is a
    weekly pattern, so a Tuesday fact applies to every Tuesday in the
    window. When the same weekday/time slot appears more than once, the
    first one wins. Cells with no fact are unavailable for both users.
    """
    lookup: dict[str, PairAvailabilitySlot] = {}
    for slot in slots or []:
        key = _slot_key(slot.weekday, slot.time_slot)
        if key not in lookup:
            lookup[key] = slot

    cells: list[PairCell] = []
    for day_index, day in enumerate(days):
        for time_slot in TIMESLOT_VALUES:
            fact = lookup.get(_slot_key(day.weekday, time_slot))
            cells.append(
                PairCell(
                    day_index=day_index,
                    time_slot=time_slot,
                    self_available=bool(fact.self_available) if fact else False,
                    partner_available=bool(fact.partner_available) if fact else False,
                )
            )
    return cells


def classify_pair_cell(self_available: bool, partner_available: bool) -> PairCellKind:
    if self_available and partner_available:
        return "GO"
    if partner_available:
        return "PARTNER_ONLY"
    # Self-only cells are shown the same as empty ones
    return "NONE"


def pair_cell_description(kind: str) -> str:
    return PAIR_CELL_DESCRIPTIONS.get(kind, PAIR_CELL_DESCRIPTIONS["NONE"])


def pair_cells_to_matrix(
    cells: list[PairCell],
    field: Literal["self_available", "partner_available", "joint"] = "joint",
) -> np.ndarray:
    """
    Return a (7, 2) boolean array indexed by day index and time slot.

    ``field`` selects the user's availability, the partner's, or
    ``joint`` for cells where both are available. Cells outside the
    window are ignored.
    """
    self_matrix = np.zeros((WINDOW_DAYS, len(TIMESLOT_VALUES)), dtype=bool)
    partner_matrix = np.zeros_like(self_matrix)
    for cell in cells:
        if not 0 <= cell.day_index < WINDOW_DAYS or cell.time_slot not in TIMESLOT_VALUES:
            continue
        t_idx = TIMESLOT_VALUES.index(cell.time_slot)
        self_matrix[cell.day_index, t_idx] = cell.self_available
        partner_matrix[cell.day_index, t_idx] = cell.partner_available

    if field == "self_available":
        return self_matrix
    if field == "partner_available":
        return partner_matrix
    return np.logical_and(self_matrix, partner_matrix)


def count_joint_slots(cells: list[PairCell]) -> int:
    """Number of cells where both users are available."""
    return int(pair_cells_to_matrix(cells, "joint").sum())
