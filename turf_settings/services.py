# turf_settings/services.py
import logging
import math

from django.db import transaction

from Turf.exceptions import InvalidSetting, SettingNotFound
from Turf.selectors import get_owned_turf
from .constants import BOOLEAN_KEYS, DEFAULT_SETTINGS, NUMERIC_KEYS, SettingKey
from .models import Setting

logger = logging.getLogger(__name__)


def parse_bool(value):
    return str(value).strip().lower() == "true"


class SettingService:
    """
    Per-turf configuration consumed by the booking engine.
    Views should NOT touch Setting rows directly.
    """

    @staticmethod
    def create_defaults(turf):
        with transaction.atomic():
            for key, (value, description) in DEFAULT_SETTINGS.items():
                Setting.objects.get_or_create(
                    turf=turf,
                    key=key,
                    defaults={"value": value, "description": description},
                )
        return SettingService.get_all(turf.id)

    @staticmethod
    def get_all(turf_id):
        return dict(
            Setting.objects
            .filter(turf_id=turf_id)
            .values_list("key", "value")
        )

    @staticmethod
    def get_one(turf_id, key):
        setting = Setting.objects.filter(turf_id=turf_id, key=key).first()
        if setting is None:
            raise SettingNotFound(f"Setting '{key}' not found")
        return setting

    @staticmethod
    def is_booking_disabled(turf_id):
        values = dict(
            Setting.objects
            .filter(
                turf_id=turf_id,
                key__in=[SettingKey.BOOKING_DISABLED, SettingKey.DISABLED_REASON],
            )
            .values_list("key", "value")
        )
        return {
            "disabled": parse_bool(values.get(SettingKey.BOOKING_DISABLED, "false")),
            "reason": values.get(SettingKey.DISABLED_REASON) or "",
        }

    @staticmethod
    def get_number(turf_id, key, default):
        """Numeric setting for a turf, or `default` when the row is absent."""
        value = (
            Setting.objects
            .filter(turf_id=turf_id, key=key)
            .values_list("value", flat=True)
            .first()
        )
        if value is None or value == "":
            return default
        try:
            return float(value)
        except ValueError:
            raise InvalidSetting(f"Setting '{key}' is not numeric: {value!r}")

    # -------------------------------
    # WRITES (OWNER ONLY)
    # -------------------------------
    @staticmethod
    def update_booking_status(turf_id, admin_id, disabled, reason=None):
        reason = reason or ""

        with transaction.atomic():
            turf = get_owned_turf(turf_id, admin_id, for_update=True)
            SettingService._upsert(turf, SettingKey.BOOKING_DISABLED, "true" if disabled else "false")
            SettingService._upsert(turf, SettingKey.DISABLED_REASON, reason)

        logger.info(
            "Bookings %s for turf %s", "disabled" if disabled else "enabled", turf.id
        )
        return {"booking_disabled": bool(disabled), "disabled_reason": reason}

    @staticmethod
    def bulk_update(turf_id, admin_id, items):
        cleaned = [SettingService._clean_item(item) for item in items or []]
        if not cleaned:
            raise InvalidSetting("No settings supplied")

        with transaction.atomic():
            turf = get_owned_turf(turf_id, admin_id, for_update=True)
            for key, value, description in cleaned:
                SettingService._upsert(turf, key, value, description)

        logger.info("Updated %d settings for turf %s", len(cleaned), turf.id)
        return SettingService.get_all(turf.id)

    @staticmethod
    def _upsert(turf, key, value, description=None):
        defaults = {"value": value}
        if description is not None:
            defaults["description"] = description
        Setting.objects.update_or_create(turf=turf, key=key, defaults=defaults)

    @staticmethod
    def _clean_item(item):
        key = str(item.get("key") or "").strip()
        if not key:
            raise InvalidSetting("Setting key is required")
        if "value" not in item or item["value"] is None:
            raise InvalidSetting(f"Setting '{key}' needs a value")

        value = item["value"]
        if isinstance(value, bool):
            value = "true" if value else "false"
        value = str(value)

        if key in BOOLEAN_KEYS and value.lower() not in ("true", "false"):
            raise InvalidSetting(f"Setting '{key}' must be true or false")

        if key in NUMERIC_KEYS:
            try:
                number = float(value)
            except ValueError:
                raise InvalidSetting(f"Setting '{key}' must be numeric")
            if not math.isfinite(number) or number < 0:
                raise InvalidSetting(f"Setting '{key}' must be a non-negative number")

        return key, value, item.get("description")
