# pricing/models.py
from django.core.validators import MinValueValidator
from django.db import models

from Turf.models import Turf
from .constants import DayType, TimeSlot


class Pricing(models.Model):
    """Hourly rate for one (day type, time slot) cell of a turf's price grid."""

    turf = models.ForeignKey(
        Turf,
        on_delete=models.CASCADE,
        related_name="pricing"
    )

    day_type = models.CharField(max_length=10, choices=DayType.CHOICES)
    time_slot = models.CharField(max_length=10, choices=TimeSlot.CHOICES)

    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(0)]
    )

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["day_type", "time_slot"]
        constraints = [
            models.UniqueConstraint(
                fields=["turf", "day_type", "time_slot"],
                name="unique_turf_day_type_time_slot",
            ),
            models.CheckConstraint(
                condition=models.Q(price__gte=0),
                name="pricing_price_non_negative",
            ),
        ]

    def __str__(self):
        return f"{self.turf} | {self.day_type} {self.time_slot} | {self.price}"
