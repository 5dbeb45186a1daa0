# Turf/utils.py
from datetime import date, datetime, timedelta

from django.utils import timezone

from .exceptions import MalformedInterval, OutOfHours


def to_minutes(value):
    """Minutes since midnight for a time or an aware datetime (local)."""
    if isinstance(value, datetime):
        value = timezone.localtime(value) if timezone.is_aware(value) else value
    return value.hour * 60 + value.minute


def ensure_interval(booking_date, start_time, end_time):
    """
    Structural checks on a proposed booking: end after start and both
    ends on the booking's calendar day (local time).
    """
    if end_time <= start_time:
        raise MalformedInterval("end_time must be after start_time")

    start_day = timezone.localtime(start_time).date()
    end_day = timezone.localtime(end_time).date()

    if start_day != booking_date or end_day != booking_date:
        raise MalformedInterval(
            "start_time and end_time must fall on the booking date"
        )


def validate_operating_hours(turf, start_time, end_time):
    start_minutes = to_minutes(start_time)
    end_minutes = to_minutes(end_time)

    if start_minutes < to_minutes(turf.opening_time) or end_minutes > to_minutes(turf.closing_time):
        raise OutOfHours(
            f"Turf is open from {turf.opening_time:%H:%M} to {turf.closing_time:%H:%M}"
        )


def generate_hour_slots(open_time, close_time):
    slots = []

    base_date = date(2000, 1, 1)
    current = datetime.combine(base_date, open_time)
    end = datetime.combine(base_date, close_time)

    while current < end:
        slots.append(current.time())
        current += timedelta(hours=1)

    return slots


def local_datetime(booking_date, at):
    """Aware datetime for a wall-clock time on a given day."""
    return timezone.make_aware(datetime.combine(booking_date, at))
