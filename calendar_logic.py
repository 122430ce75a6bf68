"""Pure calendar calculations: no UI dependencies."""

import calendar
from dataclasses import dataclass
from datetime import date, timedelta

from errors import DateRangeError

# Sunday-first header row for the month grid
WEEKDAY_ABBR = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

# (sign, start_month, start_day, end_month, end_day), both ends inclusive.
# Capricorn wraps the year end and is matched on either side of it.
ZODIAC_SIGNS: list[tuple[str, int, int, int, int]] = [
    ("Capricorn", 12, 22, 1, 19),
    ("Aquarius", 1, 20, 2, 18),
    ("Pisces", 2, 19, 3, 20),
    ("Aries", 3, 21, 4, 19),
    ("Taurus", 4, 20, 5, 20),
    ("Gemini", 5, 21, 6, 20),
    ("Cancer", 6, 21, 7, 22),
    ("Leo", 7, 23, 8, 22),
    ("Virgo", 8, 23, 9, 22),
    ("Libra", 9, 23, 10, 22),
    ("Scorpio", 10, 23, 11, 21),
    ("Sagittarius", 11, 22, 12, 21),
]


@dataclass(frozen=True)
class GridCell:
    """One day-square of the month grid."""

    date: date
    in_current_month: bool


@dataclass(frozen=True)
class DayFacts:
    date: date
    day_of_year: int
    iso_week: int
    zodiac_sign: str


def _shift(d: date, days: int) -> date:
    try:
        return d + timedelta(days=days)
    except OverflowError as exc:
        raise DateRangeError(f"{d.isoformat()} shifted by {days} days") from exc


# ------------------------------------------------------------------
# Date navigator
# ------------------------------------------------------------------
def first_of_month(d: date) -> date:
    """Return the first day of *d*'s month."""
    return d.replace(day=1)


def next_month_anchor(anchor: date) -> date:
    """Return day 1 of the month after *anchor*.

    32 days past any day 1 always lands in the following month, so the
    month field is never incremented by hand.
    """
    return first_of_month(_shift(first_of_month(anchor), 32))


def previous_month_anchor(anchor: date) -> date:
    """Return day 1 of the month before *anchor*."""
    return first_of_month(_shift(first_of_month(anchor), -1))


def last_of_month(anchor: date) -> date:
    """Return the last day of *anchor*'s month."""
    return _shift(next_month_anchor(anchor), -1)


# ------------------------------------------------------------------
# Grid builder
# ------------------------------------------------------------------
def build_grid(anchor: date) -> list[GridCell]:
    """Return the Sunday-first cells covering *anchor*'s month in whole weeks.

    Leading and trailing days come from the neighbouring months and are
    flagged with ``in_current_month=False``. The length is always a
    multiple of 7.
    """
    first = first_of_month(anchor)
    last = last_of_month(first)
    # date.weekday() is Monday=0; shift so Sunday=0
    lead = (first.weekday() + 1) % 7
    day = _shift(first, -lead)

    cells: list[GridCell] = []
    while day <= last or len(cells) % 7:
        cells.append(GridCell(day, day.month == first.month))
        day = _shift(day, 1)
    return cells


def grid_weeks(cells: list[GridCell]) -> list[list[GridCell]]:
    """Split a flat grid into rows of 7."""
    return [cells[i:i + 7] for i in range(0, len(cells), 7)]


def month_label(anchor: date) -> str:
    return f"{calendar.month_name[anchor.month]} {anchor.year}"


# ------------------------------------------------------------------
# Day facts
# ------------------------------------------------------------------
def day_of_year(d: date) -> int:
    """Return the 1-based day-of-year for the given date."""
    return d.timetuple().tm_yday


def iso_week_number(d: date) -> int:
    """Return the ISO-8601 week number (1–53).

    Days at the edges of the year may belong to a week of the
    neighbouring ISO year, e.g. 2024-12-30 is week 1.
    """
    return d.isocalendar()[1]


def zodiac_sign(d: date) -> str:
    """Return the western zodiac sign for the date's (month, day)."""
    md = (d.month, d.day)
    for sign, sm, sd, em, ed in ZODIAC_SIGNS:
        start, end = (sm, sd), (em, ed)
        if start <= end:
            if start <= md <= end:
                return sign
        elif md >= start or md <= end:
            return sign
    # Unreachable: the table covers every (month, day)
    raise AssertionError(f"no zodiac sign for {d.isoformat()}")


def compute_facts(d: date) -> DayFacts:
    return DayFacts(
        date=d,
        day_of_year=day_of_year(d),
        iso_week=iso_week_number(d),
        zodiac_sign=zodiac_sign(d),
    )


def format_detail_date(d: date) -> str:
    """Heading for the detail view, e.g. ``February 29, 2024``."""
    return f"{calendar.month_name[d.month]} {d.day:02d}, {d.year}"
