"""Mapping between availability time slots and group-meal time bands."""

from types import MappingProxyType

from mealgrid.models import TimeBand, TimeSlot

DEFAULT_MEETING_TIME: MappingProxyType[str, str] = MappingProxyType(
    {
        "LUNCH": "12:00",
        "DINNER": "19:00",
    }
)

# Inclusive bounds of the meeting times offered for each band
MEETING_TIME_RANGES: MappingProxyType[str, tuple[str, str]] = MappingProxyType(
    {
        "LUNCH": ("10:00", "15:00"),
        "DINNER": ("18:00", "23:00"),
    }
)

_BAND_TO_SLOT: MappingProxyType[str, TimeSlot] = MappingProxyType(
    {
        "LUNCH": "DAY",
        "DINNER": "NIGHT",
    }
)


def time_slot_to_time_band(time_slot: str) -> TimeBand:
    """DAY is lunch; any other slot is treated as dinner."""
    return "LUNCH" if time_slot == "DAY" else "DINNER"


def time_band_to_time_slot(time_band: str) -> TimeSlot | None:
    return _BAND_TO_SLOT.get(time_band)


def _parse_hhmm(value: str) -> int:
    hours, minutes = value.split(":")
    return int(hours) * 60 + int(minutes)


def generate_time_options(start: str, end: str, step_minutes: int = 30) -> list[str]:
    """
    Return "HH:MM" options from ``start`` to ``end`` inclusive.

    >>> generate_time_options("10:00", "11:00")
    ['10:00', '10:30', '11:00']
    """
    if step_minutes <= 0:
        raise ValueError(f"step_minutes must be positive, got {step_minutes}")

    options: list[str] = []
    current = _parse_hhmm(start)
    last = _parse_hhmm(end)
    while current <= last:
        options.append(f"{current // 60:02d}:{current % 60:02d}")
        current += step_minutes
    return options


MEETING_TIME_OPTIONS: MappingProxyType[str, tuple[str, ...]] = MappingProxyType(
    {
        band: tuple(generate_time_options(start, end))
        for band, (start, end) in MEETING_TIME_RANGES.items()
    }
)


def meeting_time_options(time_band: str) -> list[str]:
    """Meeting times for a band; unknown bands get the lunch options."""
    return list(MEETING_TIME_OPTIONS.get(time_band, MEETING_TIME_OPTIONS["LUNCH"]))


def default_meeting_time(time_band: str) -> str:
    return DEFAULT_MEETING_TIME.get(time_band, DEFAULT_MEETING_TIME["LUNCH"])
