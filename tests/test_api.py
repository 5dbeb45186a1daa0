import io
from datetime import timedelta

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from django.utils import timezone
from PIL import Image
from rest_framework_simplejwt.tokens import AccessToken

from Turf.constants import BookingStatus, TurfStatus
from Turf.models import Booking
from .conftest import at, upcoming

SATURDAY = 5
THURSDAY = 3


def booking_payload(turf, day, start_hour, end_hour, **extra):
    payload = {
        "turf_id": turf.id,
        "date": day.isoformat(),
        "start_time": at(day, start_hour).isoformat(),
        "end_time": at(day, end_hour).isoformat(),
    }
    payload.update(extra)
    return payload


@pytest.mark.django_db
class TestAuthApi:

    def test_register_creates_plain_user(self, api_client):
        response = api_client.post(
            "/api/auth/register/",
            {
                "full_name": "New Player",
                "email": "new@turf.test",
                "password": "long-enough-pw",
                "role": "admin",
            },
            format="json",
        )

        assert response.status_code == 201
        assert response.data["data"]["role"] == "user"

    def test_login_token_carries_role(self, api_client, admin_user):
        response = api_client.post(
            "/api/auth/login/",
            {"email": "owner@turf.test", "password": "owner-pass-123"},
            format="json",
        )

        assert response.status_code == 200
        assert AccessToken(response.data["access"])["role"] == "admin"
        assert response.data["user"]["full_name"] == "Olivia Owner"
        assert response.data["turfs"] == []

    def test_jwt_authenticates_requests(self, api_client, user):
        login = api_client.post(
            "/api/auth/login/",
            {"email": "player@turf.test", "password": "player-pass-123"},
            format="json",
        )
        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {login.data['access']}")

        response = api_client.get("/api/auth/profile/")

        assert response.status_code == 200
        assert response.data["data"]["email"] == "player@turf.test"

    def test_bad_credentials(self, api_client, user):
        response = api_client.post(
            "/api/auth/login/",
            {"email": "player@turf.test", "password": "wrong"},
            format="json",
        )

        assert response.status_code == 401
        assert response.data["status"] == "failed"

    def test_profile_update(self, user_client):
        response = user_client.patch(
            "/api/auth/profile/", {"phone_number": "9876543210"}, format="json"
        )

        assert response.status_code == 200
        assert response.data["data"]["phone_number"] == "9876543210"


@pytest.mark.django_db
class TestTurfApi:

    def test_public_listing(self, api_client, turf):
        response = api_client.get("/api/turfs/")

        assert response.status_code == 200
        assert response.data["count"] == 1
        assert response.data["data"][0]["owner_name"] == "Olivia Owner"

    def test_admin_creates_turf(self, admin_client):
        response = admin_client.post(
            "/api/turfs/",
            {"name": "Roof Top", "address": "9 Tower", "amenities": ["Lockers"]},
            format="json",
        )

        assert response.status_code == 201
        turf_id = response.data["data"]["id"]

        pricing = admin_client.get(f"/api/turfs/{turf_id}/pricing/").json()["data"]
        assert pricing["weekend"]["evening"] == 1500.0

    def test_users_cannot_create_turfs(self, user_client):
        response = user_client.post(
            "/api/turfs/", {"name": "Nope", "address": "Nowhere"}, format="json"
        )

        assert response.status_code == 403
        assert response.data["status"] == "failed"

    def test_patch_ignores_unlisted_fields(self, admin_client, turf, other_admin):
        response = admin_client.patch(
            f"/api/turfs/{turf.id}/",
            {"description": "Fresh turf", "owner": other_admin.id, "status": "inactive"},
            format="json",
        )

        assert response.status_code == 200
        turf.refresh_from_db()
        assert turf.description == "Fresh turf"
        assert turf.owner_id != other_admin.id
        assert turf.status == TurfStatus.ACTIVE

    def test_patch_by_other_admin(self, turf, other_admin, api_client):
        api_client.force_authenticate(user=other_admin)
        response = api_client.patch(f"/api/turfs/{turf.id}/", {"name": "Stolen"}, format="json")

        assert response.status_code == 403
        assert response.data["error_code"] == "not_turf_owner"

    def test_status_and_soft_delete(self, admin_client, turf):
        response = admin_client.patch(
            f"/api/turfs/{turf.id}/status/", {"status": "maintenance"}, format="json"
        )
        assert response.data["data"]["status"] == "maintenance"

        admin_client.delete(f"/api/turfs/{turf.id}/")
        turf.refresh_from_db()
        assert turf.status == TurfStatus.INACTIVE

    def test_hard_delete(self, admin_client, turf):
        response = admin_client.delete(f"/api/turfs/{turf.id}/?hard=true")

        assert response.status_code == 200
        assert admin_client.get("/api/turfs/mine/").data["count"] == 0

    def test_missing_turf(self, api_client):
        response = api_client.get("/api/turfs/4040/")

        assert response.status_code == 404
        assert response.data["error_code"] == "turf_not_found"

    def test_image_upload(self, admin_client, turf, settings, tmp_path):
        settings.MEDIA_ROOT = tmp_path
        buffer = io.BytesIO()
        Image.new("RGB", (4, 4), color="green").save(buffer, format="PNG")
        upload = SimpleUploadedFile("pitch.png", buffer.getvalue(), content_type="image/png")

        response = admin_client.patch(
            f"/api/turfs/{turf.id}/image/", {"image": upload}, format="multipart"
        )

        assert response.status_code == 200
        assert response.data["image_url"].endswith(".png")

    def test_availability(self, api_client, turf, make_booking):
        day = upcoming(THURSDAY)
        make_booking(at(day, 10), at(day, 11))

        response = api_client.get(f"/api/turfs/{turf.id}/availability/?date={day.isoformat()}")

        assert response.status_code == 200
        data = response.data["data"]
        assert data["booked_slots"][0]["from_time"] == "10:00"
        assert len(data["slots"]) == 17

    def test_availability_rejects_past_dates(self, api_client, turf):
        yesterday = timezone.localdate() - timedelta(days=1)
        response = api_client.get(f"/api/turfs/{turf.id}/availability/?date={yesterday}")

        assert response.status_code == 400


@pytest.mark.django_db
class TestBookingApi:

    def test_user_books_and_owner_confirms(self, user_client, admin_client, turf, other_user, api_client):
        saturday = upcoming(SATURDAY)

        created = user_client.post("/api/bookings/", booking_payload(turf, saturday, 10, 11), format="json")
        assert created.status_code == 201
        assert created.data["data"]["status"] == "pending"
        assert created.data["data"]["price"] == "700.00"

        booking_id = created.data["data"]["id"]
        confirmed = admin_client.patch(f"/api/bookings/admin/{booking_id}/confirm/")
        assert confirmed.data["data"]["status"] == "confirmed"

        api_client.force_authenticate(user=other_user)
        clash = api_client.post("/api/bookings/", booking_payload(turf, saturday, 10, 11), format="json")
        assert clash.status_code == 409
        assert clash.data["error_code"] == "slot_already_booked"

    def test_booking_requires_auth(self, api_client, turf):
        response = api_client.post(
            "/api/bookings/", booking_payload(turf, upcoming(THURSDAY), 9, 10), format="json"
        )
        assert response.status_code == 401

    def test_end_before_start_is_rejected(self, user_client, turf):
        day = upcoming(THURSDAY)
        response = user_client.post(
            "/api/bookings/",
            booking_payload(turf, day, 11, 10),
            format="json",
        )
        assert response.status_code == 400

    def test_admin_books_for_user(self, admin_client, turf, user):
        response = admin_client.post(
            "/api/bookings/admin/create-for-user/",
            booking_payload(turf, upcoming(THURSDAY), 18, 20, user_id=user.id),
            format="json",
        )

        assert response.status_code == 201
        assert response.data["data"]["status"] == "confirmed"
        assert response.data["data"]["price"] == "2000.00"
        assert response.data["data"]["created_by_name"] == "Olivia Owner"

    def test_listing_is_scoped(self, user_client, admin_client, make_booking, other_user):
        start = timezone.now() + timedelta(days=2)
        make_booking(start, start + timedelta(hours=1))
        make_booking(start + timedelta(hours=2), start + timedelta(hours=3), user=other_user)

        assert user_client.get("/api/bookings/").data["count"] == 1
        assert admin_client.get("/api/bookings/").data["count"] == 2
        assert admin_client.get("/api/bookings/?status=cancelled").data["count"] == 0

    def test_cancel_with_reason(self, user_client, make_booking):
        start = timezone.now() + timedelta(days=3)
        booking = make_booking(start, start + timedelta(hours=1))

        response = user_client.delete(
            f"/api/bookings/{booking.id}/", {"reason": "Team dropped out"}, format="json"
        )

        assert response.status_code == 200
        booking.refresh_from_db()
        assert booking.status == BookingStatus.CANCELLED
        assert booking.cancellation_reason == "Team dropped out"

    def test_late_cancel_is_bad_request(self, user_client, make_booking):
        start = timezone.now() + timedelta(hours=5)
        booking = make_booking(start, start + timedelta(hours=1))

        response = user_client.delete(f"/api/bookings/{booking.id}/")

        assert response.status_code == 400
        assert response.data["error_code"] == "cancellation_window_closed"

    def test_complete_pending_is_conflict(self, admin_client, make_booking):
        start = timezone.now() + timedelta(days=1)
        booking = make_booking(start, start + timedelta(hours=1))

        response = admin_client.patch(f"/api/bookings/admin/{booking.id}/complete/")

        assert response.status_code == 409
        assert Booking.objects.get(id=booking.id).status == BookingStatus.PENDING

    def test_disabled_turf_returns_503(self, user_client, admin_client, turf):
        admin_client.put(
            f"/api/turfs/{turf.id}/settings/disable-bookings/",
            {"disabled": True, "reason": "Monsoon"},
            format="json",
        )

        response = user_client.post(
            "/api/bookings/", booking_payload(turf, upcoming(THURSDAY), 9, 10), format="json"
        )

        assert response.status_code == 503
        assert "Monsoon" in response.data["message"]


@pytest.mark.django_db
class TestPricingAndSettingsApi:

    def test_update_pricing(self, admin_client, turf):
        response = admin_client.put(
            f"/api/turfs/{turf.id}/pricing/",
            {"pricing": {"weekday": {"morning": 550}}},
            format="json",
        )

        assert response.status_code == 200
        assert response.json()["data"]["weekday"]["morning"] == 550.0

    @pytest.mark.parametrize(
        "cells",
        [
            {"midnight": 550},
            {"morning": "NaN"},
            {"morning": "123456789012"},
        ],
    )
    def test_invalid_pricing(self, admin_client, turf, cells):
        response = admin_client.put(
            f"/api/turfs/{turf.id}/pricing/",
            {"pricing": {"weekday": cells}},
            format="json",
        )

        assert response.status_code == 400
        assert response.data["error_code"] == "invalid_pricing"

    def test_reseed_defaults(self, admin_client, turf):
        response = admin_client.post(f"/api/turfs/{turf.id}/pricing/defaults/")
        assert response.status_code == 201

    def test_settings_roundtrip(self, admin_client, user_client, turf):
        response = admin_client.put(
            f"/api/turfs/{turf.id}/settings/",
            {"settings": [{"key": "max_booking_hours", "value": 5}]},
            format="json",
        )
        assert response.data["data"]["max_booking_hours"] == "5"

        single = user_client.get(f"/api/turfs/{turf.id}/settings/max_booking_hours/")
        assert single.data["data"]["value"] == "5"

        missing = user_client.get(f"/api/turfs/{turf.id}/settings/nope/")
        assert missing.status_code == 404


@pytest.mark.django_db
class TestReviewAndStatsApi:

    def test_review_flow(self, user_client, api_client, turf, make_booking):
        start = timezone.now() - timedelta(days=1)
        booking = make_booking(start, start + timedelta(hours=1), status=BookingStatus.COMPLETED)

        first = user_client.post(
            "/api/reviews/", {"booking_id": booking.id, "rating": 4, "comment": "Nice"}, format="json"
        )
        second = user_client.post(
            "/api/reviews/", {"booking_id": booking.id, "rating": 5}, format="json"
        )

        assert first.status_code == 201
        assert second.status_code == 409
        assert second.data["error_code"] == "already_reviewed"

        summary = api_client.get(f"/api/reviews/summary/?turf_id={turf.id}").data["data"]
        assert summary["average_rating"] == 4.0
        assert summary["rating_distribution"][1] == {"rating": 4, "count": 1}

        assert api_client.get(f"/api/reviews/booking/{booking.id}/").data["data"]["rating"] == 4
        assert user_client.get("/api/reviews/mine/").data["count"] == 1

    def test_out_of_range_rating(self, user_client, make_booking):
        start = timezone.now() - timedelta(days=1)
        booking = make_booking(start, start + timedelta(hours=1), status=BookingStatus.COMPLETED)

        response = user_client.post(
            "/api/reviews/", {"booking_id": booking.id, "rating": 9}, format="json"
        )

        assert response.status_code == 400
        assert response.data["error_code"] == "invalid_rating"

    def test_stats_for_owner_only(self, admin_client, user_client, turf):
        response = admin_client.get("/api/admin/stats/?fresh=true")

        assert response.status_code == 200
        assert set(response.data["data"]) == {
            "overview",
            "last_7_days",
            "current_week",
            "last_5_weeks",
            "this_month",
            "this_year",
            "insights",
        }
        assert user_client.get("/api/admin/stats/").status_code == 403
