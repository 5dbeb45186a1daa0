# Turf/constants.py
class TurfStatus:
    ACTIVE = "active"
    INACTIVE = "inactive"
    MAINTENANCE = "maintenance"

    CHOICES = (
        (ACTIVE, "Active"),
        (INACTIVE, "Inactive"),
        (MAINTENANCE, "Maintenance"),
    )


class BookingStatus:
    PENDING = "pending"
    CONFIRMED = "confirmed"
    ACTIVE = "active"
    CANCELLED = "cancelled"
    COMPLETED = "completed"

    CHOICES = (
        (PENDING, "Pending"),
        (CONFIRMED, "Confirmed"),
        (ACTIVE, "Active"),
        (CANCELLED, "Cancelled"),
        (COMPLETED, "Completed"),
    )

    # Statuses that hold a slot and block overlapping bookings
    OCCUPYING = (PENDING, CONFIRMED, ACTIVE)

    TERMINAL = (CANCELLED, COMPLETED)

    # Allowed stored transitions; ACTIVE is legacy and never set here
    TRANSITIONS = {
        PENDING: (CONFIRMED, CANCELLED),
        CONFIRMED: (CANCELLED, COMPLETED),
        ACTIVE: (CANCELLED, COMPLETED),
        CANCELLED: (),
        COMPLETED: (),
    }

    @classmethod
    def can_transition(cls, current, target):
        return target in cls.TRANSITIONS.get(current, ())
