from datetime import timedelta

import pytest
from django.test import Client
from django.utils import timezone

from Accounts.models import User


@pytest.fixture
def staff_client(db):
    superuser = User.objects.create_superuser(
        email="ops@turf.test",
        password="ops-pass-123",
        full_name="Ops Desk",
    )
    client = Client()
    client.force_login(superuser)
    return client


@pytest.mark.django_db
@pytest.mark.parametrize(
    "path",
    [
        "/admin/Accounts/user/",
        "/admin/Turf/turf/",
        "/admin/Turf/booking/",
        "/admin/pricing/pricing/",
        "/admin/turf_settings/setting/",
        "/admin/reviews/review/",
    ],
)
def test_changelists_render(staff_client, turf, make_booking, path):
    start = timezone.now() + timedelta(days=1)
    make_booking(start, start + timedelta(hours=1))

    assert staff_client.get(path).status_code == 200


@pytest.mark.django_db
def test_owner_change_page_lists_turfs(staff_client, turf, admin_user):
    response = staff_client.get(f"/admin/Accounts/user/{admin_user.id}/change/")

    assert response.status_code == 200
    assert b"Green Arena" in response.content


@pytest.mark.django_db
def test_promote_action(staff_client, user):
    staff_client.post(
        "/admin/Accounts/user/",
        {"action": "promote_to_turf_admin", "_selected_action": [user.id]},
    )

    user.refresh_from_db()
    assert user.role == User.ROLE_ADMIN
