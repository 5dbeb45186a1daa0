from datetime import time, timedelta

import pytest
from django.core.cache import cache
from django.utils import timezone
from rest_framework.test import APIClient

from Accounts.models import User
from Turf.booking_service import BookingService
from Turf.constants import BookingStatus
from Turf.models import Booking, Turf
from Turf.utils import local_datetime
from pricing.services import PricingResolver
from turf_settings.services import SettingService


def upcoming(weekday, min_days=1):
    """
    Next date falling on `weekday` (Mon=0) at least `min_days` from today.
    With min_days=1 the result is always 1..7 days ahead.
    """
    day = timezone.localdate() + timedelta(days=min_days)
    while day.weekday() != weekday:
        day += timedelta(days=1)
    return day


def at(day, hour, minute=0):
    return local_datetime(day, time(hour, minute))


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def admin_user(db):
    return User.objects.create_admin(
        email="owner@turf.test",
        password="owner-pass-123",
        full_name="Olivia Owner",
    )


@pytest.fixture
def other_admin(db):
    return User.objects.create_admin(
        email="rival@turf.test",
        password="rival-pass-123",
        full_name="Rita Rival",
    )


@pytest.fixture
def user(db):
    return User.objects.create_user(
        email="player@turf.test",
        password="player-pass-123",
        full_name="Pat Player",
    )


@pytest.fixture
def other_user(db):
    return User.objects.create_user(
        email="second@turf.test",
        password="second-pass-123",
        full_name="Sam Second",
    )


@pytest.fixture
def resolver():
    return PricingResolver(ttl=300)


@pytest.fixture
def service(resolver):
    return BookingService(pricing=resolver)


@pytest.fixture
def turf(admin_user, resolver):
    """Active turf open 06:00-23:00 with the default price grid and settings."""
    turf = Turf.objects.create(
        owner=admin_user,
        name="Green Arena",
        address="12 Stadium Road",
        city="Chennai",
        opening_time=time(6, 0),
        closing_time=time(23, 0),
    )
    resolver.create_default_pricing(turf)
    SettingService.create_defaults(turf)
    return turf


@pytest.fixture
def make_booking(turf, user, admin_user):
    """Inserts a booking row directly, bypassing the policy checks."""
    def _make(start, end, status=BookingStatus.PENDING, **extra):
        fields = {
            "turf": turf,
            "user": user,
            "date": timezone.localtime(start).date(),
            "start_time": start,
            "end_time": end,
            "price": "500.00",
            "status": status,
            "created_by": user,
            "created_by_name": user.full_name,
        }
        fields.update(extra)
        return Booking.objects.create(**fields)

    return _make


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def user_client(user):
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def admin_client(admin_user):
    client = APIClient()
    client.force_authenticate(user=admin_user)
    return client
