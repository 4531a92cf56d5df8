"""YAML parsing and writing for mealgrid."""

import logging
from pathlib import Path
from typing import Any

import yaml

from mealgrid.grid import DEFAULT_STATUS, create_default_grid, grid_to_slots
from mealgrid.models import AvailabilitySlot, PairAvailabilitySlot

logger = logging.getLogger(__name__)

# Keys used on the wire by the backend API
WEEKDAY_KEY = "weekday"
TIMESLOT_KEY = "timeSlot"
STATUS_KEY = "status"
SELF_AVAILABLE_KEY = "selfAvailable"
PARTNER_AVAILABLE_KEY = "partnerAvailable"


def _load_entries(path: Path) -> list[Any]:
    """
    Load the list of slot entries from a YAML (or JSON) document.

    The document may be a bare list or a mapping with a ``slots`` key, which
    is how the pair-availability endpoint wraps its response.
    """
    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return []
    if isinstance(data, dict):
        return data.get("slots") or []
    if isinstance(data, list):
        return data
    raise ValueError(f"Expected a list of slots or a mapping with 'slots' in {path}")


_FLAG_STRINGS = {
    "true": True,
    "false": False,
}


def _parse_flag(entry: dict[str, Any], key: str) -> bool:
    """Read a boolean field; missing or unrecognised values read as False."""
    value = entry.get(key)
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in _FLAG_STRINGS:
        return _FLAG_STRINGS[value.strip().lower()]
    logger.warning("Treating unrecognised %s value %r as false", key, value)
    return False


def _has_slot_key(entry: Any) -> bool:
    if not isinstance(entry, dict) or WEEKDAY_KEY not in entry or TIMESLOT_KEY not in entry:
        logger.warning("Skipping malformed slot entry: %r", entry)
        return False
    return True


def parse_availability_slots(entries: list[Any]) -> list[AvailabilitySlot]:
    """Convert API-shaped dicts into AvailabilitySlots, skipping malformed entries."""
    slots: list[AvailabilitySlot] = []
    for entry in entries:
        if not _has_slot_key(entry):
            continue
        slots.append(
            AvailabilitySlot(
                weekday=str(entry[WEEKDAY_KEY]).upper(),
                time_slot=str(entry[TIMESLOT_KEY]).upper(),
                status=str(entry.get(STATUS_KEY) or DEFAULT_STATUS).upper(),
            )
        )
    return slots


def parse_pair_availability_slots(entries: list[Any]) -> list[PairAvailabilitySlot]:
    """Convert API-shaped dicts into PairAvailabilitySlots, skipping malformed entries."""
    slots: list[PairAvailabilitySlot] = []
    for entry in entries:
        if not _has_slot_key(entry):
            continue
        slots.append(
            PairAvailabilitySlot(
                weekday=str(entry[WEEKDAY_KEY]).upper(),
                time_slot=str(entry[TIMESLOT_KEY]).upper(),
                self_available=_parse_flag(entry, SELF_AVAILABLE_KEY),
                partner_available=_parse_flag(entry, PARTNER_AVAILABLE_KEY),
            )
        )
    return slots


def parse_availability_yaml(path: Path) -> list[AvailabilitySlot]:
    """Parse a weekly availability file."""
    return parse_availability_slots(_load_entries(path))


def parse_pair_availability_yaml(path: Path) -> list[PairAvailabilitySlot]:
    """Parse a pair-availability file."""
    return parse_pair_availability_slots(_load_entries(path))


def slot_to_dict(slot: AvailabilitySlot) -> dict[str, str]:
    return {
        WEEKDAY_KEY: slot.weekday,
        TIMESLOT_KEY: slot.time_slot,
        STATUS_KEY: slot.status,
    }


def pair_slot_to_dict(slot: PairAvailabilitySlot) -> dict[str, str | bool]:
    return {
        WEEKDAY_KEY: slot.weekday,
        TIMESLOT_KEY: slot.time_slot,
        SELF_AVAILABLE_KEY: slot.self_available,
        PARTNER_AVAILABLE_KEY: slot.partner_available,
    }


def create_availability_template(output_path: Path):
    """Create a weekly availability file with every slot UNAVAILABLE."""
    template = [slot_to_dict(slot) for slot in grid_to_slots(create_default_grid())]

    header = """\
# Weekly availability for mealgrid
# One entry per weekday and time slot.
#
# weekday:  MON TUE WED THU FRI SAT SUN
# timeSlot: DAY NIGHT
# status:   AVAILABLE UNAVAILABLE
#
# Missing entries are treated as UNAVAILABLE.

"""

    with output_path.open("w", encoding="utf-8") as f:
        f.write(header)
        yaml.dump(template, f, default_flow_style=False, sort_keys=False)
