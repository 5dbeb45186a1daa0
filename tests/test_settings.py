import pytest

from Turf.exceptions import InvalidSetting, NotTurfOwner, SettingNotFound
from turf_settings.constants import SettingKey
from turf_settings.models import Setting
from turf_settings.services import SettingService, parse_bool


def test_parse_bool():
    assert parse_bool("true")
    assert parse_bool(" TRUE ")
    assert not parse_bool("false")
    assert not parse_bool("yes")


@pytest.mark.django_db
class TestSettingService:

    def test_defaults_are_seeded(self, turf):
        assert SettingService.get_all(turf.id) == {
            "advance_booking_days": "7",
            "booking_disabled": "false",
            "cancellation_deadline_hours": "24",
            "disabled_reason": "",
            "max_booking_hours": "3",
        }

    def test_seeding_is_idempotent(self, turf):
        SettingService.create_defaults(turf)
        assert Setting.objects.filter(turf=turf).count() == 5

    def test_get_one(self, turf):
        setting = SettingService.get_one(turf.id, SettingKey.MAX_BOOKING_HOURS)
        assert setting.value == "3"
        assert setting.description

    def test_get_one_missing(self, turf):
        with pytest.raises(SettingNotFound):
            SettingService.get_one(turf.id, "no_such_key")

    def test_booking_enabled_by_default(self, turf):
        assert SettingService.is_booking_disabled(turf.id) == {"disabled": False, "reason": ""}

    def test_disable_and_enable(self, turf, admin_user):
        result = SettingService.update_booking_status(turf.id, admin_user.id, True, "Tournament")

        assert result == {"booking_disabled": True, "disabled_reason": "Tournament"}
        assert SettingService.is_booking_disabled(turf.id) == {
            "disabled": True,
            "reason": "Tournament",
        }

        SettingService.update_booking_status(turf.id, admin_user.id, False)
        assert SettingService.is_booking_disabled(turf.id) == {"disabled": False, "reason": ""}

    def test_missing_rows_read_as_enabled(self, turf):
        Setting.objects.filter(turf=turf).delete()
        assert SettingService.is_booking_disabled(turf.id) == {"disabled": False, "reason": ""}

    def test_get_number_falls_back_to_default(self, turf):
        assert SettingService.get_number(turf.id, SettingKey.MAX_BOOKING_HOURS, 9) == 3.0
        assert SettingService.get_number(turf.id, SettingKey.MIN_BOOKING_HOURS, 1) == 1

    def test_get_number_rejects_garbage(self, turf):
        Setting.objects.filter(turf=turf, key=SettingKey.MAX_BOOKING_HOURS).update(value="lots")

        with pytest.raises(InvalidSetting):
            SettingService.get_number(turf.id, SettingKey.MAX_BOOKING_HOURS, 3)

    def test_bulk_update_upserts(self, turf, admin_user):
        data = SettingService.bulk_update(
            turf.id,
            admin_user.id,
            [
                {"key": "max_booking_hours", "value": 4},
                {"key": "booking_disabled", "value": True},
                {"key": "welcome_note", "value": "Bring studs", "description": "Shown on booking"},
            ],
        )

        assert data["max_booking_hours"] == "4"
        assert data["booking_disabled"] == "true"
        assert data["welcome_note"] == "Bring studs"
        assert SettingService.get_one(turf.id, "welcome_note").description == "Shown on booking"

    @pytest.mark.parametrize(
        "items",
        [
            [],
            [{"key": "", "value": "1"}],
            [{"key": "max_booking_hours"}],
            [{"key": "max_booking_hours", "value": "many"}],
            [{"key": "max_booking_hours", "value": -1}],
            [{"key": "max_booking_hours", "value": "inf"}],
            [{"key": "booking_disabled", "value": "maybe"}],
        ],
    )
    def test_bulk_update_rejects_bad_items(self, turf, admin_user, items):
        with pytest.raises(InvalidSetting):
            SettingService.bulk_update(turf.id, admin_user.id, items)

    def test_bulk_update_is_all_or_nothing(self, turf, admin_user):
        with pytest.raises(InvalidSetting):
            SettingService.bulk_update(
                turf.id,
                admin_user.id,
                [
                    {"key": "max_booking_hours", "value": 5},
                    {"key": "advance_booking_days", "value": "soon"},
                ],
            )

        assert SettingService.get_all(turf.id)["max_booking_hours"] == "3"

    def test_only_owner_writes(self, turf, other_admin):
        with pytest.raises(NotTurfOwner):
            SettingService.update_booking_status(turf.id, other_admin.id, True)
        with pytest.raises(NotTurfOwner):
            SettingService.bulk_update(turf.id, other_admin.id, [{"key": "x", "value": "1"}])
