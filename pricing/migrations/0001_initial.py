import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("Turf", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Pricing",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("day_type", models.CharField(choices=[("weekday", "Weekday"), ("weekend", "Weekend")], max_length=10)),
                ("time_slot", models.CharField(choices=[("morning", "Morning"), ("afternoon", "Afternoon"), ("evening", "Evening")], max_length=10)),
                ("price", models.DecimalField(decimal_places=2, max_digits=10, validators=[django.core.validators.MinValueValidator(0)])),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("turf", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="pricing", to="Turf.turf")),
            ],
            options={
                "ordering": ["day_type", "time_slot"],
                "constraints": [
                    models.UniqueConstraint(fields=("turf", "day_type", "time_slot"), name="unique_turf_day_type_time_slot"),
                    models.CheckConstraint(condition=models.Q(("price__gte", 0)), name="pricing_price_non_negative"),
                ],
            },
        ),
    ]
