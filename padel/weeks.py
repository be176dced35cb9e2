"""Week numbering and availability cycling.

Week 1 is played on the configured start date; every following week is
seven days later.
"""

from datetime import date, timedelta
from typing import Optional

from .models import AvailabilityStatus


def get_week_date(week: int, start_date: date) -> date:
    """Return the match date of a week."""
    return start_date + timedelta(days=7 * (week - 1))


def format_week_date(week: int, start_date: date) -> str:
    """Short display form of a week's date, e.g. '21 May'."""
    week_date = get_week_date(week, start_date)
    return f'{week_date.day} {week_date.strftime("%b")}'


def get_current_week(start_date: date, total_weeks: int, today: Optional[date] = None) -> int:
    """
    Find the week to plan next.

    The current week is the first week whose match date is today or later.
    Before the season starts this is week 1; after the last match it stays on
    the final week.
    """
    if today is None:
        today = date.today()

    if today <= start_date:
        return 1

    days_since_start = (today - start_date).days
    week = days_since_start // 7 + 1
    if days_since_start % 7:
        week += 1

    return min(week, total_weeks)


def next_status(status: AvailabilityStatus) -> AvailabilityStatus:
    """Cycle unavailable -> tentative -> available -> unavailable."""
    return AvailabilityStatus((int(status) + 1) % len(AvailabilityStatus))
