import logging
import threading
from concurrent.futures import Future
from datetime import timedelta

from django.conf import settings
from django.core.cache import cache as default_cache
from django.db import DatabaseError
from django.db.models import Avg, Count, Q, Sum
from django.db.models.functions import ExtractHour
from django.utils import timezone

from reviews.models import Review
from Turf.constants import BookingStatus
from Turf.models import Booking
from .ranges import (
    current_week_ranges,
    last_5_weeks_ranges,
    last_7_days_ranges,
    month_weeks_ranges,
    year_months_ranges,
)

logger = logging.getLogger(__name__)

EMPTY_EARNINGS = {"breakdown": [], "total_earnings": 0.0}


def _money(value):
    return round(float(value or 0), 2)


class AdminStatsService:
    """
    All dashboard-related queries live here.
    Views should NOT touch the database directly.

    Payloads are memoized per admin for a TTL. Concurrent requests for the
    same admin while a computation runs wait on that computation instead
    of starting their own. A result whose admin was invalidated while it
    was being computed is returned but not memoized.
    """

    def __init__(self, cache=None, ttl=None):
        self.cache = cache if cache is not None else default_cache
        self.ttl = ttl if ttl is not None else settings.TURFBOOK["STATS_CACHE_TTL"]
        self._inflight = {}
        self._generations = {}
        self._lock = threading.Lock()

    @staticmethod
    def cache_key(admin_id):
        # Scoped per admin so one owner never sees another's numbers
        return f"dashboard:advanced_admin_stats:{admin_id}"

    def get_admin_stats(self, admin_id, use_cache=True):
        key = self.cache_key(admin_id)

        if use_cache:
            cached = self.cache.get(key)
            if cached is not None:
                return cached

        with self._lock:
            future = self._inflight.get(key)
            leader = future is None
            if leader:
                future = Future()
                self._inflight[key] = future
                generation = self._generations.get(key, 0)

        if not leader:
            return future.result()

        try:
            result = self.compute_stats(admin_id)
        except Exception as exc:
            future.set_exception(exc)
            raise
        else:
            with self._lock:
                # an invalidate during the computation makes this result stale
                fresh = self._generations.get(key, 0) == generation
            if fresh:
                self.cache.set(key, result, self.ttl)
            else:
                logger.info("Discarding stale stats for %s", key)
            future.set_result(result)
            return result
        finally:
            with self._lock:
                self._inflight.pop(key, None)

    def invalidate(self, admin_id):
        key = self.cache_key(admin_id)
        with self._lock:
            self._generations[key] = self._generations.get(key, 0) + 1
        self.cache.delete(key)

    # -------------------------------
    # COMPUTATION
    # -------------------------------
    def compute_stats(self, admin_id, now=None):
        now = timezone.localtime(now or timezone.now())

        def earnings(ranges):
            return lambda: self.get_batch_earnings(admin_id, ranges)

        year = self._section("this_year", earnings(year_months_ranges(now)), EMPTY_EARNINGS)

        return {
            "overview": self._section("overview", lambda: self.get_overview(admin_id, now), {}),
            "last_7_days": self._section("last_7_days", earnings(last_7_days_ranges(now)), EMPTY_EARNINGS),
            "current_week": self._section("current_week", earnings(current_week_ranges(now)), EMPTY_EARNINGS),
            "last_5_weeks": self._section("last_5_weeks", earnings(last_5_weeks_ranges(now)), EMPTY_EARNINGS),
            "this_month": self._section("this_month", earnings(month_weeks_ranges(now)), EMPTY_EARNINGS),
            "this_year": year,
            "insights": self._section("insights", lambda: self.get_insights(admin_id), {}),
        }

    @staticmethod
    def _section(name, compute, fallback):
        # One failing section degrades to its fallback; the rest still render
        try:
            return compute()
        except DatabaseError:
            logger.exception("Stats section %s failed", name)
            return fallback

    @staticmethod
    def _bookings(admin_id):
        return Booking.objects.filter(turf__owner_id=admin_id).order_by()

    def get_overview(self, admin_id, now):
        bookings = self._bookings(admin_id)
        thirty_days_ago = now - timedelta(days=30)

        status_counts = dict(
            bookings.values("status")
            .annotate(count=Count("id"))
            .values_list("status", "count")
        )

        users = bookings.aggregate(
            total=Count("user", distinct=True),
            recent=Count(
                "user",
                distinct=True,
                filter=Q(created_at__gte=thirty_days_ago),
            ),
        )

        reviews = Review.objects.filter(
            booking__turf__owner_id=admin_id
        ).aggregate(total=Count("id"), avg_rating=Avg("rating"))

        by_status = {
            status: status_counts.get(status, 0)
            for status, _ in BookingStatus.CHOICES
        }

        return {
            "total_bookings": sum(by_status.values()),
            "upcoming_bookings": bookings.filter(
                status__in=BookingStatus.OCCUPYING,
                start_time__gt=now,
            ).count(),
            "recent_bookings": bookings.filter(created_at__gte=thirty_days_ago).count(),
            "total_users": users["total"] or 0,
            "recent_users": users["recent"] or 0,
            "total_reviews": reviews["total"] or 0,
            "average_rating": round(float(reviews["avg_rating"] or 0), 2),
            "bookings_by_status": by_status,
        }

    def get_batch_earnings(self, admin_id, ranges):
        """
        Sums non-cancelled booking prices per (label, start, end) bucket,
        bucketed by creation time, in a single query.
        """
        if not ranges:
            return dict(EMPTY_EARNINGS)

        sums = {
            f"earnings{idx}": Sum(
                "price",
                filter=Q(created_at__gte=r.start, created_at__lt=r.end),
            )
            for idx, r in enumerate(ranges)
        }

        result = (
            self._bookings(admin_id)
            .exclude(status=BookingStatus.CANCELLED)
            .aggregate(**sums)
        )

        breakdown = [
            {r.kind: r.label, "earnings": _money(result[f"earnings{idx}"])}
            for idx, r in enumerate(ranges)
        ]

        return {
            "breakdown": breakdown,
            "total_earnings": _money(sum(item["earnings"] for item in breakdown)),
        }

    def get_insights(self, admin_id):
        bookings = self._bookings(admin_id)

        durations = [
            (end - start).total_seconds() / 3600
            for start, end in bookings.values_list("start_time", "end_time")
        ]
        avg_duration = round(sum(durations) / len(durations), 2) if durations else 0

        peak_hours = (
            bookings.annotate(hour=ExtractHour("start_time"))
            .values("hour")
            .annotate(count=Count("id"))
            .order_by("-count", "hour")[:5]
        )

        top_users = (
            bookings.exclude(status=BookingStatus.CANCELLED)
            .values("user_id", "user__email")
            .annotate(booking_count=Count("id"), total_spent=Sum("price"))
            .order_by("-total_spent")[:5]
        )

        return {
            "average_booking_duration": avg_duration,
            "peak_booking_hours": [
                {"hour": row["hour"], "count": row["count"]}
                for row in peak_hours
                if row["hour"] is not None
            ],
            "top_users": [
                {
                    "user_id": row["user_id"],
                    "email": row["user__email"],
                    "booking_count": row["booking_count"],
                    "total_spent": _money(row["total_spent"]),
                }
                for row in top_users
            ],
        }


stats_service = AdminStatsService()
