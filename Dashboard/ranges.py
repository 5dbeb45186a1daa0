# Dashboard/ranges.py
import calendar
from collections import namedtuple
from datetime import datetime, time, timedelta

from django.utils import timezone

# kind is the breakdown key: "day", "week" or "month"
Range = namedtuple("Range", ["label", "kind", "start", "end"])

DAY_NAMES = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]


def start_of_day(day):
    return timezone.make_aware(datetime.combine(day, time.min))


def days_since_sunday(day):
    return (day.weekday() + 1) % 7


def last_7_days_ranges(now):
    today = now.date()
    ranges = []

    for i in range(6, -1, -1):
        day = today - timedelta(days=i)
        if i == 0:
            label = "Today"
        elif i == 1:
            label = "Yesterday"
        else:
            label = day.strftime("%a, %b %d")
        ranges.append(Range(label, "day", start_of_day(day), start_of_day(day + timedelta(days=1))))

    return ranges


def current_week_ranges(now):
    today = now.date()
    week_start = today - timedelta(days=days_since_sunday(today))

    return [
        Range(
            DAY_NAMES[i],
            "day",
            start_of_day(week_start + timedelta(days=i)),
            start_of_day(week_start + timedelta(days=i + 1)),
        )
        for i in range(days_since_sunday(today) + 1)
    ]


def last_5_weeks_ranges(now):
    today = now.date()
    this_week = today - timedelta(days=days_since_sunday(today))
    ranges = []

    for i in range(4, -1, -1):
        week_start = this_week - timedelta(weeks=i)
        week_end = start_of_day(week_start + timedelta(days=7))
        if i == 0:
            label = "This Week"
            week_end = min(week_end, now)
        else:
            label = f"{i} Week{'s' if i > 1 else ''} Ago"
        ranges.append(Range(label, "week", start_of_day(week_start), week_end))

    return ranges


def month_weeks_ranges(now):
    today = now.date()
    first_day = today.replace(day=1)
    last_day = today.replace(day=calendar.monthrange(today.year, today.month)[1])

    ranges = []
    week_start = first_day
    counter = 1

    while week_start <= last_day and week_start <= today:
        week_end = min(week_start + timedelta(days=6), last_day, today)
        ranges.append(Range(
            f"Week {counter}",
            "week",
            start_of_day(week_start),
            start_of_day(week_end + timedelta(days=1)),
        ))
        week_start += timedelta(days=7)
        counter += 1

    return ranges


def year_months_ranges(now):
    ranges = []

    for month in range(1, now.month + 1):
        first = now.date().replace(month=month, day=1)
        if month == 12:
            next_first = first.replace(year=first.year + 1, month=1)
        else:
            next_first = first.replace(month=month + 1)
        ranges.append(Range(
            calendar.month_name[month],
            "month",
            start_of_day(first),
            start_of_day(next_first),
        ))

    return ranges
