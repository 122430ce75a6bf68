"""Entry point: configure logging, load settings, run the tkinter main loop."""

import structlog

from calendar_window import CalendarWindow
from log_config import configure_logging
from settings import load_settings

log = structlog.get_logger("month_calendar.main")


def main() -> None:
    # Defaults first so settings-file warnings already reach stderr
    configure_logging()
    settings = load_settings()
    configure_logging(verbose=settings["verbose"], log_json=settings["log_json"])
    log.debug("starting", settings=settings)

    cal_win = CalendarWindow(settings)
    cal_win.root.mainloop()

    if cal_win.fatal_error is not None:
        raise cal_win.fatal_error


if __name__ == "__main__":
    main()
