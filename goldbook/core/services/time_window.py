"""
Reporting time windows.

Every report (summaries, the unified log, totals) filters records with
the same predicate so that all screens agree on what "this week" means.
"""

import calendar
from collections.abc import Callable, Iterable
from datetime import date, datetime, time, timedelta
from enum import Enum
from typing import TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class TimeRange(str, Enum):
    """Named reporting windows."""

    TODAY = "today"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    CUSTOM = "custom"
    ALL = "all"


class TimeWindow(BaseModel):
    """
    A resolved, inclusive [start, end] interval.

    A missing bound is open. An empty window matches nothing; it is what
    a custom range resolves to while either of its dates is missing.
    """

    model_config = ConfigDict(frozen=True)

    start: datetime | None = None
    end: datetime | None = None
    empty: bool = False

    def contains(self, moment: datetime) -> bool:
        if self.empty:
            return False
        if self.start is not None and moment < self.start:
            return False
        if self.end is not None and moment > self.end:
            return False
        return True


def _start_of_day(day: date) -> datetime:
    return datetime.combine(day, time.min)


def _shift_months(day: date, months: int) -> date:
    """Move a date by whole months, clamping to the last day of the target month."""
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def resolve_window(
    time_range: TimeRange,
    now: datetime | None = None,
    start_date: date | None = None,
    end_date: date | None = None,
) -> TimeWindow:
    """
    Resolve a named range relative to now.

    week/month/year start at midnight of now minus the period and have
    no upper bound. custom covers start_date 00:00 through end_date
    23:59:59.999999 inclusive.
    """
    now = now or datetime.now()
    today = now.date()

    if time_range == TimeRange.TODAY:
        return TimeWindow(start=_start_of_day(today), end=datetime.combine(today, time.max))
    if time_range == TimeRange.WEEK:
        return TimeWindow(start=_start_of_day(today - timedelta(days=7)))
    if time_range == TimeRange.MONTH:
        return TimeWindow(start=_start_of_day(_shift_months(today, -1)))
    if time_range == TimeRange.YEAR:
        return TimeWindow(start=_start_of_day(_shift_months(today, -12)))
    if time_range == TimeRange.CUSTOM:
        if start_date is None or end_date is None:
            return TimeWindow(empty=True)
        return TimeWindow(
            start=_start_of_day(start_date),
            end=datetime.combine(end_date, time.max),
        )
    return TimeWindow()


def in_window(moment: datetime, window: TimeWindow) -> bool:
    """Shared inclusion predicate for all reports."""
    return window.contains(moment)


def filter_by_window(
    records: Iterable[T],
    window: TimeWindow,
    key: Callable[[T], datetime] = lambda record: record.date,  # type: ignore[attr-defined]
) -> list[T]:
    """Keep the records whose date falls inside the window, preserving order."""
    return [record for record in records if window.contains(key(record))]
