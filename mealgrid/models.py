"""Data models for mealgrid."""

from dataclasses import dataclass
from datetime import date
from typing import Literal

Weekday = Literal["MON", "TUE", "WED", "THU", "FRI", "SAT", "SUN"]
TimeSlot = Literal["DAY", "NIGHT"]
# MEET_ONLY is only produced by cycle_status; the grid never defaults to it
AvailabilityStatus = Literal["AVAILABLE", "UNAVAILABLE", "MEET_ONLY"]
AvailabilityMark = Literal["CIRCLE", "TRIANGLE", "CROSS"]
PairCellKind = Literal["GO", "PARTNER_ONLY", "NONE"]

# Group meals name the meal period separately from the availability grid
TimeBand = Literal["LUNCH", "DINNER"]

# weekday -> time slot -> status
AvailabilityGrid = dict[str, dict[str, str]]


@dataclass
class AvailabilitySlot:
    """One cell of a user's weekly availability, as exchanged with the API."""

    weekday: str
    time_slot: str
    status: str = "UNAVAILABLE"


@dataclass
class PairAvailabilitySlot:
    """Server-computed availability of the user and a partner for one cell."""

    weekday: str
    time_slot: str
    self_available: bool = False
    partner_available: bool = False


@dataclass
class Next7Day:
    """A calendar day in the rolling 7-day window."""

    date: date
    day_label: str  # day of month, unpadded
    weekday_label: str
    weekday: Weekday


@dataclass
class PairCell:
    """A rendering-ready cell of the pair schedule."""

    day_index: int  # 0 = today
    time_slot: TimeSlot
    self_available: bool = False
    partner_available: bool = False
