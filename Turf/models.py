from datetime import time

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models
from django.utils import timezone

from .constants import BookingStatus, TurfStatus


# =========================
# TURF (BUSINESS ASSET)
# =========================

class Turf(models.Model):
    """
    Bookable venue owned by a single admin.
    Pricing, settings and bookings hang off it and go with it on delete.
    """

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="turfs"
    )

    name = models.CharField(max_length=100)
    description = models.TextField(blank=True)
    image = models.ImageField(upload_to="turf_images/", blank=True, null=True)

    address = models.CharField(max_length=255)
    city = models.CharField(max_length=100, blank=True)
    state = models.CharField(max_length=100, blank=True)
    phone = models.CharField(max_length=20, blank=True)

    amenities = models.JSONField(default=list, blank=True)

    status = models.CharField(
        max_length=20,
        choices=TurfStatus.CHOICES,
        default=TurfStatus.ACTIVE
    )

    # Local wall-clock hours; closing past midnight is not supported
    opening_time = models.TimeField(default=time(6, 0))
    closing_time = models.TimeField(default=time(23, 0))

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        indexes = [
            models.Index(fields=["status"], name="turf_status_idx"),
            models.Index(fields=["owner"], name="turf_owner_idx"),
        ]

    def clean(self):
        if self.opening_time >= self.closing_time:
            raise ValidationError("opening_time must be before closing_time")

    @property
    def is_bookable(self):
        return self.status == TurfStatus.ACTIVE

    def __str__(self):
        return self.name


# =========================
# BOOKING MODEL
# =========================

class Booking(models.Model):
    """
    A reservation of [start_time, end_time) on one turf and one day.
    Price and creator name are snapshotted at creation.
    """

    turf = models.ForeignKey(
        Turf,
        on_delete=models.CASCADE,
        related_name="bookings"
    )

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="bookings"
    )

    date = models.DateField()

    # Absolute timestamps; both must fall on `date` in local time
    start_time = models.DateTimeField()
    end_time = models.DateTimeField()

    price = models.DecimalField(max_digits=10, decimal_places=2)

    status = models.CharField(
        max_length=20,
        choices=BookingStatus.CHOICES,
        default=BookingStatus.PENDING
    )

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="created_bookings"
    )
    created_by_name = models.CharField(max_length=255, blank=True)

    cancelled_at = models.DateTimeField(null=True, blank=True)
    cancellation_reason = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["turf", "date"], name="booking_turf_date_idx"),
            models.Index(fields=["status", "date"], name="booking_status_date_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(end_time__gt=models.F("start_time")),
                name="booking_end_after_start",
            ),
        ]

    @property
    def duration_hours(self):
        return (self.end_time - self.start_time).total_seconds() / 3600

    @property
    def display_status(self):
        # "active" is derived: a confirmed booking currently in progress
        if self.status == BookingStatus.CONFIRMED:
            now = timezone.now()
            if self.start_time <= now < self.end_time:
                return BookingStatus.ACTIVE
        return self.status

    def __str__(self):
        return f"{self.turf} | {self.date} | {self.start_time:%H:%M}-{self.end_time:%H:%M}"
