import logging

from django.core.exceptions import PermissionDenied
from django.db import IntegrityError
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


# =========================================================
# BASE KINDS
# default_code is the stable machine-readable kind
# =========================================================
class NotFoundError(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Resource not found"
    default_code = "not_found"


class ForbiddenError(APIException):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "You are not allowed to do this"
    default_code = "forbidden"


class ConflictError(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Request conflicts with current state"
    default_code = "conflict"


class BadRequestError(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid request"
    default_code = "bad_request"


class UnavailableError(APIException):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = "Temporarily unavailable"
    default_code = "unavailable"


class InternalError(APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal server error"
    default_code = "internal_error"


# -------------------------------
# NOT FOUND
# -------------------------------
class TurfNotFound(NotFoundError):
    default_detail = "Turf not found"
    default_code = "turf_not_found"


class BookingNotFound(NotFoundError):
    default_detail = "Booking not found"
    default_code = "booking_not_found"


class SettingNotFound(NotFoundError):
    default_detail = "Setting not found"
    default_code = "setting_not_found"


class UserNotFound(NotFoundError):
    default_detail = "User not found"
    default_code = "user_not_found"


class PricingNotConfigured(NotFoundError):
    default_detail = "No price configured for this slot"
    default_code = "pricing_not_configured"


# -------------------------------
# FORBIDDEN
# -------------------------------
class NotTurfOwner(ForbiddenError):
    default_detail = "You do not own this turf"
    default_code = "not_turf_owner"


class NotBookingOwner(ForbiddenError):
    default_detail = "You can only access your own bookings"
    default_code = "not_booking_owner"


# -------------------------------
# CONFLICT
# -------------------------------
class SlotAlreadyBooked(ConflictError):
    default_detail = "This slot is already booked"
    default_code = "slot_already_booked"


class AlreadyCancelled(ConflictError):
    default_detail = "Booking is already cancelled"
    default_code = "already_cancelled"


class AlreadyReviewed(ConflictError):
    default_detail = "You have already reviewed this booking"
    default_code = "already_reviewed"


class InvalidTransition(ConflictError):
    default_detail = "Booking cannot move to that status"
    default_code = "invalid_transition"


# -------------------------------
# BAD REQUEST
# -------------------------------
class MalformedInterval(BadRequestError):
    default_detail = "Invalid booking interval"
    default_code = "malformed_interval"


class BookingTooShort(BadRequestError):
    default_detail = "Booking is shorter than the minimum duration"
    default_code = "booking_too_short"


class BookingTooLong(BadRequestError):
    default_detail = "Booking is longer than the maximum duration"
    default_code = "booking_too_long"


class OutOfHours(BadRequestError):
    default_detail = "Booking is outside operating hours"
    default_code = "out_of_hours"


class OutsideBookingWindow(BadRequestError):
    default_detail = "Booking date is outside the allowed booking window"
    default_code = "outside_booking_window"


class TurfNotBookable(BadRequestError):
    default_detail = "Turf is not accepting bookings"
    default_code = "turf_not_bookable"


class CancellationWindowClosed(BadRequestError):
    default_detail = "Booking can no longer be cancelled"
    default_code = "cancellation_window_closed"


class InvalidRating(BadRequestError):
    default_detail = "Rating must be an integer between 1 and 5"
    default_code = "invalid_rating"


class NotYetCompleted(BadRequestError):
    default_detail = "Cannot review a booking that has not been completed yet"
    default_code = "not_yet_completed"


class InvalidReviewState(BadRequestError):
    default_detail = "Only active or completed bookings can be reviewed"
    default_code = "invalid_review_state"


class InvalidPricing(BadRequestError):
    default_detail = "Invalid pricing update"
    default_code = "invalid_pricing"


class InvalidSetting(BadRequestError):
    default_detail = "Invalid setting"
    default_code = "invalid_setting"


# -------------------------------
# UNAVAILABLE
# -------------------------------
class BookingsDisabled(UnavailableError):
    default_detail = "Bookings are currently disabled"
    default_code = "bookings_disabled"


# =========================================================
# DRF EXCEPTION HANDLER
# =========================================================
# unique_violation, check_violation (PostgreSQL SQLSTATE)
CONFLICT_SQLSTATES = {"23505", "23514"}
CONFLICT_MARKERS = (
    "unique constraint",
    "check constraint",
    "duplicate key",
    "duplicate entry",
)


def is_constraint_conflict(exc):
    """True for unique or check constraint hits, False for NOT NULL, FK and the rest."""
    cause = exc.__cause__
    # psycopg2 exposes pgcode, psycopg 3 sqlstate
    sqlstate = getattr(cause, "pgcode", None) or getattr(cause, "sqlstate", None)
    if sqlstate in CONFLICT_SQLSTATES:
        return True
    message = str(exc).lower()
    return any(marker in message for marker in CONFLICT_MARKERS)


def _failed(error_code, message, status_code):
    return Response(
        {"status": "failed", "error_code": error_code, "message": message},
        status=status_code,
    )


def api_exception_handler(exc, context):
    """
    Renders every error as {status, error_code, message}.

    Unknown failures are logged with their traceback and surfaced as a
    generic internal error.
    """
    if isinstance(exc, IntegrityError) and is_constraint_conflict(exc):
        logger.warning("Constraint violation in %s: %s", _view_name(context), exc)
        return _failed(
            ConflictError.default_code,
            str(ConflictError.default_detail),
            status.HTTP_409_CONFLICT,
        )

    if isinstance(exc, Http404):
        exc = NotFoundError()
    elif isinstance(exc, PermissionDenied):
        exc = ForbiddenError()

    response = exception_handler(exc, context)

    if response is None:
        logger.exception("Unhandled error in %s", _view_name(context), exc_info=exc)
        return _failed(
            InternalError.default_code,
            str(InternalError.default_detail),
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, APIException):
        codes = exc.get_codes()
        error_code = codes if isinstance(codes, str) else exc.default_code
        logger.info("%s rejected: %s", _view_name(context), error_code)
        message = str(exc.detail) if isinstance(exc.detail, str) else response.data
        response.data = {
            "status": "failed",
            "error_code": error_code,
            "message": message,
        }

    return response


def _view_name(context):
    view = context.get("view") if context else None
    return view.__class__.__name__ if view else "unknown view"
