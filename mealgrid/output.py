"""Output formatting for mealgrid."""

import json

import yaml

from mealgrid.days import get_time_slot_label, get_weekday_label
from mealgrid.grid import (
    TIMESLOT_VALUES,
    WEEKDAY_VALUES,
    availability_status_to_mark,
    grid_to_matrix,
)
from mealgrid.models import AvailabilityGrid, AvailabilitySlot, Next7Day, PairCell
from mealgrid.overlap import classify_pair_cell, count_joint_slots, pair_cell_description
from mealgrid.parser import slot_to_dict
from mealgrid.timeband import default_meeting_time, meeting_time_options, time_slot_to_time_band

MARK_SYMBOLS = {
    "CIRCLE": "◯",
    "TRIANGLE": "△",
    "CROSS": "×",
}

PAIR_CELL_SYMBOLS = {
    "GO": "GO",
    "PARTNER_ONLY": "go",
    "NONE": "×",
}

CELL_WIDTH = 4


def _row(label: str, cells: list[str]) -> str:
    return label.ljust(CELL_WIDTH) + "".join(cell.center(CELL_WIDTH) for cell in cells)


def format_grid(grid: AvailabilityGrid) -> str:
    """Format a weekly grid as a table with weekdays across and time slots down."""
    lines: list[str] = ["=== Weekly Availability ==="]
    lines.append(_row("", [get_weekday_label(w) for w in WEEKDAY_VALUES]))

    for time_slot in TIMESLOT_VALUES:
        marks: list[str] = []
        for weekday in WEEKDAY_VALUES:
            status = (grid.get(weekday) or {}).get(time_slot, "UNAVAILABLE")
            marks.append(MARK_SYMBOLS[availability_status_to_mark(status)])
        lines.append(_row(get_time_slot_label(time_slot), marks))

    available = int(grid_to_matrix(grid).sum())
    lines.append("")
    lines.append(f"Available slots: {available}/{len(WEEKDAY_VALUES) * len(TIMESLOT_VALUES)}")
    return "\n".join(lines)


def format_pair_cells(days: list[Next7Day], cells: list[PairCell]) -> str:
    """Format the pair schedule for the 7-day window."""
    cell_by_key = {(c.day_index, c.time_slot): c for c in cells}

    lines: list[str] = ["=== Pair Schedule ==="]
    lines.append(_row("", [d.day_label for d in days]))
    lines.append(_row("", [d.weekday_label for d in days]))

    for time_slot in TIMESLOT_VALUES:
        symbols: list[str] = []
        for day_index in range(len(days)):
            cell = cell_by_key.get((day_index, time_slot))
            kind = classify_pair_cell(
                cell.self_available if cell else False,
                cell.partner_available if cell else False,
            )
            symbols.append(PAIR_CELL_SYMBOLS[kind])
        lines.append(_row(get_time_slot_label(time_slot), symbols))

    lines.append("")
    lines.append(f"  GO  {pair_cell_description('GO')}")
    lines.append(f"  go  {pair_cell_description('PARTNER_ONLY')}")
    lines.append(f"Joint slots: {count_joint_slots(cells)}")

    for cell in cells:
        if cell.day_index >= len(days):
            continue
        if classify_pair_cell(cell.self_available, cell.partner_available) != "GO":
            continue
        day = days[cell.day_index]
        band = time_slot_to_time_band(cell.time_slot)
        lines.append(f"  {day.date.isoformat()} ({day.weekday_label}) {band} {default_meeting_time(band)}")
    return "\n".join(lines)


def format_time_band(time_slot: str) -> str:
    """Describe the group-meal band for an availability time slot."""
    band = time_slot_to_time_band(time_slot)
    lines = [
        f"{time_slot} ({get_time_slot_label(time_slot)}) -> {band}",
        f"Default meeting time: {default_meeting_time(band)}",
        f"Meeting times: {', '.join(meeting_time_options(band))}",
    ]
    return "\n".join(lines)


def format_payload(slots: list[AvailabilitySlot], fmt: str = "json") -> str:
    """Format slots as the request body sent to the API."""
    data = [slot_to_dict(slot) for slot in slots]
    if fmt == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
    return json.dumps(data, indent=2, ensure_ascii=False)
