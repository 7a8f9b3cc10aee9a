"""Colombian local time and its Spanish-language formatting."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

GMT_OFFSET_SEC = -18000
DAY_LIGHT_OFFSET_SEC = 0

COLOMBIA = timezone(timedelta(seconds=GMT_OFFSET_SEC + DAY_LIGHT_OFFSET_SEC))

_WEEKDAYS = ("lunes", "martes", "miércoles", "jueves", "viernes", "sábado", "domingo")
_WEEKDAYS_SHORT = ("Lun.", "Mar.", "Mierco.", "Jue.", "Vie.", "Sab.", "Dom.")
_MONTHS = (
    "enero",
    "febrero",
    "marzo",
    "abril",
    "mayo",
    "junio",
    "julio",
    "agosto",
    "septiembre",
    "octubre",
    "noviembre",
    "diciembre",
)


def colombia_now(now: datetime | None = None) -> datetime:
    """Return ``now`` (default: the current time) in Colombian time.

    A naive ``now`` is taken to be in UTC.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(COLOMBIA)


def format_clock(moment: datetime) -> str:
    """Hours, minutes and seconds, e.g. ``15:02:30``."""
    return moment.strftime("%H:%M:%S")


def format_time(moment: datetime) -> str:
    """Full Spanish date and time: weekday, month day year clock."""
    weekday = _WEEKDAYS[moment.weekday()]
    month = _MONTHS[moment.month - 1]
    return f"{weekday}, {month} {moment.day:02d} {moment.year} {format_clock(moment)}"


def format_date(moment: datetime) -> str:
    """Short Spanish date for the clock screen, e.g. ``Mierco. 26 Julio``."""
    weekday = _WEEKDAYS_SHORT[moment.weekday()]
    month = _MONTHS[moment.month - 1].capitalize()
    return f"{weekday} {moment.day} {month}"