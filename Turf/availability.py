# Turf/availability.py
from datetime import timedelta

from django.utils import timezone

from .constants import BookingStatus
from .models import Booking
from .utils import generate_hour_slots, local_datetime


def overlaps(a_start, a_end, b_start, b_end):
    # Half-open intervals: touching ends do not overlap
    return a_start < b_end and a_end > b_start


def occupying_bookings(turf_id, booking_date):
    return Booking.objects.filter(
        turf_id=turf_id,
        date=booking_date,
        status__in=BookingStatus.OCCUPYING,
    )


def has_overlap(turf_id, booking_date, start_time, end_time, exclude_id=None):
    """
    True when a pending/confirmed/active booking on the same turf and day
    intersects [start_time, end_time).

    Callers that insert afterwards must hold the turf row lock so the
    check and the insert are atomic.
    """
    conflicts = occupying_bookings(turf_id, booking_date).filter(
        start_time__lt=end_time,
        end_time__gt=start_time,
    )

    if exclude_id is not None:
        conflicts = conflicts.exclude(id=exclude_id)

    return conflicts.exists()


def build_availability(turf, booking_date):
    bookings = list(
        occupying_bookings(turf.id, booking_date).order_by("start_time")
    )

    booked = [
        {
            "booking_id": b.id,
            "from_time": timezone.localtime(b.start_time).strftime("%H:%M"),
            "to_time": timezone.localtime(b.end_time).strftime("%H:%M"),
            "status": b.display_status,
        }
        for b in bookings
    ]

    closing = local_datetime(booking_date, turf.closing_time)
    slots = []
    for slot_time in generate_hour_slots(turf.opening_time, turf.closing_time):
        start = local_datetime(booking_date, slot_time)
        end = min(start + timedelta(hours=1), closing)
        taken = any(overlaps(start, end, b.start_time, b.end_time) for b in bookings)
        slots.append({
            "time_label": slot_time.strftime("%I:%M %p"),
            "is_available": not taken,
        })

    return {
        "turf_id": turf.id,
        "date": booking_date.isoformat(),
        "operating_hours": {
            "open": turf.opening_time.strftime("%H:%M"),
            "close": turf.closing_time.strftime("%H:%M"),
        },
        "booked_slots": booked,
        "slots": slots,
    }
