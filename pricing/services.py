# pricing/services.py
import logging
from datetime import timedelta
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from django.conf import settings
from django.core.cache import cache as default_cache
from django.db import transaction
from django.utils import timezone

from Turf.exceptions import InvalidPricing, PricingNotConfigured
from Turf.selectors import get_owned_turf
from .constants import (
    AFTERNOON_START_HOUR,
    DEFAULT_PRICES,
    EVENING_START_HOUR,
    MORNING_START_HOUR,
    WEEKEND_DAYS,
    DayType,
    TimeSlot,
)
from .models import Pricing

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")
# Pricing.price is DecimalField(max_digits=10, decimal_places=2)
MAX_PRICE = Decimal(10) ** 8
MS_PER_HOUR = Decimal(3_600_000)


def day_type_for(booking_date):
    return DayType.WEEKEND if booking_date.weekday() in WEEKEND_DAYS else DayType.WEEKDAY


def time_slot_for(start_time):
    hour = timezone.localtime(start_time).hour if timezone.is_aware(start_time) else start_time.hour

    if MORNING_START_HOUR <= hour < AFTERNOON_START_HOUR:
        return TimeSlot.MORNING
    if AFTERNOON_START_HOUR <= hour < EVENING_START_HOUR:
        return TimeSlot.AFTERNOON
    return TimeSlot.EVENING


def duration_hours(start_time, end_time):
    duration_ms = (end_time - start_time) // timedelta(milliseconds=1)
    return Decimal(duration_ms) / MS_PER_HOUR


class PricingResolver:
    """
    Resolves hourly rates per (turf, day type, time slot).

    Rates are cached per cell for a bounded window; a price update drops
    the turf's cells once its transaction has committed.
    """

    def __init__(self, cache=None, ttl=None):
        self.cache = cache if cache is not None else default_cache
        self.ttl = ttl if ttl is not None else settings.TURFBOOK["PRICING_CACHE_TTL"]

    @staticmethod
    def cache_key(turf_id, day_type, time_slot):
        return f"pricing:{turf_id}:{day_type}:{time_slot}"

    def turf_cache_keys(self, turf_id):
        return [
            self.cache_key(turf_id, day_type, time_slot)
            for day_type in DayType.VALUES
            for time_slot in TimeSlot.VALUES
        ]

    # -------------------------------
    # READS
    # -------------------------------
    def price_per_hour(self, turf_id, booking_date, start_time):
        day_type = day_type_for(booking_date)
        time_slot = time_slot_for(start_time)
        key = self.cache_key(turf_id, day_type, time_slot)

        price = self.cache.get(key)
        if price is None:
            price = (
                Pricing.objects
                .filter(turf_id=turf_id, day_type=day_type, time_slot=time_slot)
                .values_list("price", flat=True)
                .first()
            )
            if price is None:
                raise PricingNotConfigured(
                    f"Price not found for {day_type} {time_slot}"
                )
            self.cache.set(key, price, self.ttl)

        return Decimal(price)

    def calculate_price(self, turf_id, start_time, end_time, booking_date):
        per_hour = self.price_per_hour(turf_id, booking_date, start_time)
        total = per_hour * duration_hours(start_time, end_time)
        return total.quantize(CENTS, rounding=ROUND_HALF_UP)

    def get_all_pricing(self, turf_id):
        formatted = {day_type: {} for day_type in DayType.VALUES}
        for row in Pricing.objects.filter(turf_id=turf_id):
            formatted[row.day_type][row.time_slot] = row.price
        return formatted

    # -------------------------------
    # WRITES
    # -------------------------------
    def create_default_pricing(self, turf):
        with transaction.atomic():
            for day_type, slots in DEFAULT_PRICES.items():
                for time_slot, price in slots.items():
                    Pricing.objects.get_or_create(
                        turf=turf,
                        day_type=day_type,
                        time_slot=time_slot,
                        defaults={"price": price},
                    )
            transaction.on_commit(lambda: self.invalidate(turf.id))

        return self.get_all_pricing(turf.id)

    def update_pricing(self, turf_id, admin_id, updates):
        """
        Upserts {day_type: {time_slot: price}} for a turf, all or nothing.
        """
        cells = self._parse_updates(updates)

        with transaction.atomic():
            turf = get_owned_turf(turf_id, admin_id, for_update=True)

            for day_type, time_slot, price in cells:
                Pricing.objects.update_or_create(
                    turf=turf,
                    day_type=day_type,
                    time_slot=time_slot,
                    defaults={"price": price},
                )

            transaction.on_commit(lambda: self.invalidate(turf.id))

        logger.info("Pricing updated for turf %s (%d cells)", turf.id, len(cells))
        return self.get_all_pricing(turf.id)

    def invalidate(self, turf_id):
        self.cache.delete_many(self.turf_cache_keys(turf_id))
        logger.info("Pricing cache invalidated for turf %s", turf_id)

    @staticmethod
    def _parse_updates(updates):
        if not isinstance(updates, dict) or not updates:
            raise InvalidPricing("Pricing update must be a non-empty mapping")

        cells = []
        for day_type, slots in updates.items():
            if day_type not in DayType.VALUES:
                raise InvalidPricing(f"Unknown day type: {day_type}")
            if not isinstance(slots, dict):
                raise InvalidPricing(f"Prices for {day_type} must be a mapping")

            for time_slot, raw_price in slots.items():
                if time_slot not in TimeSlot.VALUES:
                    raise InvalidPricing(f"Unknown time slot: {time_slot}")
                try:
                    price = Decimal(str(raw_price)).quantize(CENTS)
                except (InvalidOperation, ValueError):
                    raise InvalidPricing(f"Invalid price for {day_type} {time_slot}")
                if not price.is_finite():
                    raise InvalidPricing(f"Invalid price for {day_type} {time_slot}")
                if price >= MAX_PRICE:
                    raise InvalidPricing(f"Price must be below {MAX_PRICE:,}")
                if price < 0:
                    raise InvalidPricing("Price cannot be negative")
                cells.append((day_type, time_slot, price))

        if not cells:
            raise InvalidPricing("No prices supplied")
        return cells


pricing_resolver = PricingResolver()
