# turf_settings/constants.py
class SettingKey:
    BOOKING_DISABLED = "booking_disabled"
    DISABLED_REASON = "disabled_reason"
    MAX_BOOKING_HOURS = "max_booking_hours"
    MIN_BOOKING_HOURS = "min_booking_hours"
    ADVANCE_BOOKING_DAYS = "advance_booking_days"
    CANCELLATION_DEADLINE_HOURS = "cancellation_deadline_hours"


# Values are stored as strings; readers interpret them per key
DEFAULT_SETTINGS = {
    SettingKey.BOOKING_DISABLED: ("false", "Block new user bookings"),
    SettingKey.DISABLED_REASON: ("", "Shown to users while bookings are disabled"),
    SettingKey.MAX_BOOKING_HOURS: ("3", "Longest booking a user may make"),
    SettingKey.ADVANCE_BOOKING_DAYS: ("7", "How many days ahead users may book"),
    SettingKey.CANCELLATION_DEADLINE_HOURS: ("24", "Minimum notice for user cancellations"),
}

NUMERIC_KEYS = {
    SettingKey.MAX_BOOKING_HOURS,
    SettingKey.MIN_BOOKING_HOURS,
    SettingKey.ADVANCE_BOOKING_DAYS,
    SettingKey.CANCELLATION_DEADLINE_HOURS,
}

BOOLEAN_KEYS = {SettingKey.BOOKING_DISABLED}
