import datetime

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Turf",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100)),
                ("description", models.TextField(blank=True)),
                ("image", models.ImageField(blank=True, null=True, upload_to="turf_images/")),
                ("address", models.CharField(max_length=255)),
                ("city", models.CharField(blank=True, max_length=100)),
                ("state", models.CharField(blank=True, max_length=100)),
                ("phone", models.CharField(blank=True, max_length=20)),
                ("amenities", models.JSONField(blank=True, default=list)),
                ("status", models.CharField(choices=[("active", "Active"), ("inactive", "Inactive"), ("maintenance", "Maintenance")], default="active", max_length=20)),
                ("opening_time", models.TimeField(default=datetime.time(6, 0))),
                ("closing_time", models.TimeField(default=datetime.time(23, 0))),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("owner", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="turfs", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "indexes": [
                    models.Index(fields=["status"], name="turf_status_idx"),
                    models.Index(fields=["owner"], name="turf_owner_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Booking",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("date", models.DateField()),
                ("start_time", models.DateTimeField()),
                ("end_time", models.DateTimeField()),
                ("price", models.DecimalField(decimal_places=2, max_digits=10)),
                ("status", models.CharField(choices=[("pending", "Pending"), ("confirmed", "Confirmed"), ("active", "Active"), ("cancelled", "Cancelled"), ("completed", "Completed")], default="pending", max_length=20)),
                ("created_by_name", models.CharField(blank=True, max_length=255)),
                ("cancelled_at", models.DateTimeField(blank=True, null=True)),
                ("cancellation_reason", models.TextField(blank=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("created_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="created_bookings", to=settings.AUTH_USER_MODEL)),
                ("turf", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="bookings", to="Turf.turf")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="bookings", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["turf", "date"], name="booking_turf_date_idx"),
                    models.Index(fields=["status", "date"], name="booking_status_date_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(condition=models.Q(("end_time__gt", models.F("start_time"))), name="booking_end_after_start"),
                ],
            },
        ),
    ]
