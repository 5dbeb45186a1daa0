# pricing/constants.py
from decimal import Decimal


class DayType:
    WEEKDAY = "weekday"
    WEEKEND = "weekend"

    CHOICES = (
        (WEEKDAY, "Weekday"),
        (WEEKEND, "Weekend"),
    )

    VALUES = (WEEKDAY, WEEKEND)


class TimeSlot:
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"

    CHOICES = (
        (MORNING, "Morning"),
        (AFTERNOON, "Afternoon"),
        (EVENING, "Evening"),
    )

    VALUES = (MORNING, AFTERNOON, EVENING)


WEEKEND_DAYS = {5, 6}  # Saturday, Sunday

# [6, 12) morning, [12, 18) afternoon, everything else evening
MORNING_START_HOUR = 6
AFTERNOON_START_HOUR = 12
EVENING_START_HOUR = 18

DEFAULT_PRICES = {
    DayType.WEEKDAY: {
        TimeSlot.MORNING: Decimal("500.00"),
        TimeSlot.AFTERNOON: Decimal("700.00"),
        TimeSlot.EVENING: Decimal("1000.00"),
    },
    DayType.WEEKEND: {
        TimeSlot.MORNING: Decimal("700.00"),
        TimeSlot.AFTERNOON: Decimal("1000.00"),
        TimeSlot.EVENING: Decimal("1500.00"),
    },
}
