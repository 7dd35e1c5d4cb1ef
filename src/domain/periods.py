"""Civil-day period windows in a fixed UTC offset.

A civil day starts at ``day_start_hour`` local time rather than midnight, so a
match played at 02:00 still belongs to the previous day. All local fields are
read off a naive datetime obtained by shifting the UTC instant by the fixed
offset; the host timezone is never consulted.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta

from domain.common import TimeWindow
from domain.protocol import PeriodTag

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


@dataclass(frozen=True)
class ClockParameters:
    utc_offset_hours: int = 3
    day_start_hour: int = 6

    @property
    def offset(self) -> timedelta:
        return timedelta(hours=self.utc_offset_hours)


def _as_utc_naive(now: datetime) -> datetime:
    if now.tzinfo is None:
        return now
    return now.astimezone(UTC).replace(tzinfo=None)


def to_local(moment: datetime, clock: ClockParameters) -> datetime:
    """Shift a UTC instant into naive fixed-offset local time."""
    return _as_utc_naive(moment) + clock.offset


def local_from_epoch(timestamp: int, clock: ClockParameters) -> datetime:
    utc_moment = datetime.fromtimestamp(timestamp, UTC).replace(tzinfo=None)
    return utc_moment + clock.offset


def _local_to_epoch(local_moment: datetime, clock: ClockParameters) -> int:
    utc_moment = (local_moment - clock.offset).replace(tzinfo=UTC)
    return int(utc_moment.timestamp())


def civil_date(now: datetime, clock: ClockParameters) -> date:
    """Calendar date of the civil day containing ``now``."""
    local_now = to_local(now, clock)
    if local_now.hour < clock.day_start_hour:
        return local_now.date() - timedelta(days=1)
    return local_now.date()


def _period_start_date(period: PeriodTag, today: date) -> date:
    if period == PeriodTag.TODAY:
        return today
    if period == PeriodTag.YESTERDAY:
        return today - timedelta(days=1)
    if period == PeriodTag.WEEK:
        return today - timedelta(days=today.weekday())
    if period == PeriodTag.MONTH:
        return today.replace(day=1)
    raise ValueError(f"Unsupported period: {period!r}")


def resolve_window(
    period: PeriodTag | str,
    now: datetime,
    clock: ClockParameters | None = None,
) -> TimeWindow:
    """Resolve a period tag into a concrete window for the instant ``now``."""
    clock = clock or ClockParameters()
    period = PeriodTag(period)
    today = civil_date(now, clock)
    day_start = time(hour=clock.day_start_hour)

    start_date = _period_start_date(period, today)
    start = _local_to_epoch(datetime.combine(start_date, day_start), clock)
    if period != PeriodTag.YESTERDAY:
        return TimeWindow(start=start)

    end = _local_to_epoch(datetime.combine(today, day_start), clock)
    return TimeWindow(start=start, end=end)


def _format_date(value: date) -> str:
    return value.strftime("%d.%m.%Y")


def describe_period(
    period: PeriodTag | str,
    now: datetime,
    clock: ClockParameters | None = None,
) -> str:
    """Human label for the civil dates a period covers."""
    clock = clock or ClockParameters()
    period = PeriodTag(period)
    today = civil_date(now, clock)

    if period == PeriodTag.TODAY:
        return _format_date(today)
    if period == PeriodTag.YESTERDAY:
        return _format_date(today - timedelta(days=1))
    if period == PeriodTag.WEEK:
        monday = _period_start_date(period, today)
        return f"{_format_date(monday)} - {_format_date(today)} (Week)"
    return f"{MONTH_NAMES[today.month - 1]} {today.year} (1-{today.day})"


__all__ = [
    "ClockParameters",
    "civil_date",
    "describe_period",
    "local_from_epoch",
    "resolve_window",
    "to_local",
]
