"""Application state and the (state, event) -> state reducer."""

from dataclasses import dataclass, replace
from datetime import date
from typing import Callable, Union

import structlog

from calendar_logic import first_of_month, next_month_anchor, previous_month_anchor

log = structlog.get_logger("month_calendar.state")

Clock = Callable[[], date]


@dataclass(frozen=True)
class PreviousMonth:
    pass


@dataclass(frozen=True)
class NextMonth:
    pass


@dataclass(frozen=True)
class DateSelected:
    date: date


@dataclass(frozen=True)
class BackToCalendar:
    pass


Event = Union[PreviousMonth, NextMonth, DateSelected, BackToCalendar]


@dataclass(frozen=True)
class ApplicationState:
    """Displayed month plus the optional selected day.

    ``month_anchor`` is always day 1 of the displayed month. The selected
    date may lie in any month.
    """

    month_anchor: date
    selected_date: date | None = None

    def __post_init__(self) -> None:
        if self.month_anchor.day != 1:
            raise ValueError(f"month anchor must be day 1, got {self.month_anchor}")

    @property
    def view(self) -> str:
        return "grid" if self.selected_date is None else "detail"


def initial_state(clock: Clock = date.today) -> ApplicationState:
    """Grid view of the current month, nothing selected."""
    today = clock()
    log.debug("initial_state", today=today.isoformat())
    return ApplicationState(month_anchor=first_of_month(today))


def apply_event(state: ApplicationState, event: Event) -> ApplicationState:
    """Return the state that follows *event*. Never mutates *state*."""
    if isinstance(event, PreviousMonth):
        new = replace(state, month_anchor=previous_month_anchor(state.month_anchor))
    elif isinstance(event, NextMonth):
        new = replace(state, month_anchor=next_month_anchor(state.month_anchor))
    elif isinstance(event, DateSelected):
        new = replace(state, selected_date=event.date)
    elif isinstance(event, BackToCalendar):
        new = replace(state, selected_date=None)
    else:
        raise TypeError(f"unknown event: {event!r}")

    log.debug(
        "apply_event",
        event_type=type(event).__name__,
        month=new.month_anchor.isoformat(),
        view=new.view,
    )
    return new
