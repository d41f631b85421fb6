"""Yearly curriculum focus schedule.

Each schedule entry covers an inclusive month/day range and names the focus
shown to players along with related terms. December is week based: days
1-7, 8-14, 15-21 and 22-31 are weeks 1 to 4.
"""

from datetime import date
from typing import Optional

from .models import CurriculumFocus

_BUILD_OUT_TERMS = ["Build-Out", "Possession", "Distribution", "Goalkeeper Play"]
_FINAL_THIRD_TERMS = ["Final Third", "Finishing", "Crossing", "Attacking"]
_MIDDLE_THIRD_TERMS = ["Middle Third", "Turning", "Passing", "Transition"]
_WIDE_PLAY_TERMS = ["Wide Play", "Wing Play", "Crossing", "Width"]

CURRICULUM_SCHEDULE = [
    {"start": (1, 1), "end": (2, 14), "focus": "BUILD-OUT", "related_terms": _BUILD_OUT_TERMS},
    {"start": (2, 15), "end": (3, 31), "focus": "FINAL THIRD", "related_terms": _FINAL_THIRD_TERMS},
    {"start": (4, 1), "end": (5, 15), "focus": "MIDDLE THIRD", "related_terms": _MIDDLE_THIRD_TERMS},
    {"start": (5, 16), "end": (6, 30), "focus": "WIDE PLAY", "related_terms": _WIDE_PLAY_TERMS},
    {
        "start": (7, 1),
        "end": (8, 15),
        "focus": "11V11 FORMATIONS",
        "related_terms": ["11v11 Formations", "Tactics", "Shape", "System"],
    },
    {
        "start": (8, 16),
        "end": (9, 30),
        "focus": "SET PIECES",
        "related_terms": ["Set Pieces", "Corners", "Free Kicks", "Restarts"],
    },
    {"start": (10, 1), "end": (10, 15), "focus": "BUILD-OUT", "related_terms": _BUILD_OUT_TERMS},
    {"start": (10, 16), "end": (10, 31), "focus": "FINAL THIRD", "related_terms": _FINAL_THIRD_TERMS},
    {"start": (11, 1), "end": (11, 15), "focus": "MIDDLE THIRD", "related_terms": _MIDDLE_THIRD_TERMS},
    {"start": (11, 16), "end": (11, 30), "focus": "WIDE PLAY", "related_terms": _WIDE_PLAY_TERMS},
]

DECEMBER_WEEKS = {
    1: {"focus": "BUILD-OUT", "related_terms": _BUILD_OUT_TERMS},
    2: {"focus": "FINAL THIRD", "related_terms": _FINAL_THIRD_TERMS},
    3: {"focus": "MIDDLE THIRD", "related_terms": _MIDDLE_THIRD_TERMS},
    4: {"focus": "WIDE PLAY", "related_terms": _WIDE_PLAY_TERMS},
}

FOCUS_PERIODS = {
    "BUILD-OUT": "build-out",
    "FINAL THIRD": "final-third",
    "MIDDLE THIRD": "middle-third",
    "WIDE PLAY": "wide-play",
}

DEFAULT_FOCUS = "BUILD-OUT"


def get_december_week(day: int) -> int:
    if day <= 7:
        return 1
    if day <= 14:
        return 2
    if day <= 21:
        return 3
    return 4


def is_date_in_range(when: date, start: tuple[int, int], end: tuple[int, int]) -> bool:
    """Check whether ``when`` falls in an inclusive (month, day) range.

    A range whose end comes before its start wraps around the new year.
    """
    current = (when.month, when.day)
    if end < start:
        return current >= start or current <= end
    return start <= current <= end


def _focus(label: str, related_terms: list[str]) -> CurriculumFocus:
    return CurriculumFocus(
        focus=label,
        related_terms=list(related_terms),
        period=FOCUS_PERIODS.get(label),
    )


def get_current_focus(today: Optional[date] = None) -> CurriculumFocus:
    """Get the curriculum focus for a date (today by default)."""
    today = today or date.today()

    if today.month == 12:
        week = DECEMBER_WEEKS[get_december_week(today.day)]
        return _focus(week["focus"], week["related_terms"])

    for entry in CURRICULUM_SCHEDULE:
        if is_date_in_range(today, entry["start"], entry["end"]):
            return _focus(entry["focus"], entry["related_terms"])

    return _focus(DEFAULT_FOCUS, _BUILD_OUT_TERMS)
