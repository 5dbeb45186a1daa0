# turf_settings/models.py
from django.db import models

from Turf.models import Turf


class Setting(models.Model):
    """Per-turf key/value configuration. Value is an opaque string."""

    turf = models.ForeignKey(
        Turf,
        on_delete=models.CASCADE,
        related_name="settings"
    )

    key = models.CharField(max_length=100)
    value = models.TextField(blank=True)
    description = models.TextField(blank=True)

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["key"]
        constraints = [
            models.UniqueConstraint(
                fields=["turf", "key"],
                name="unique_turf_setting_key",
            ),
        ]

    def __str__(self):
        return f"{self.turf} | {self.key}={self.value}"
