# Turf/booking_service.py
import logging
from decimal import Decimal

from django.conf import settings
from django.db import transaction
from django.utils import timezone

from Accounts.services import get_actor, is_admin_role
from pricing.services import duration_hours, pricing_resolver
from turf_settings.constants import SettingKey
from turf_settings.services import SettingService
from .availability import has_overlap
from .constants import BookingStatus
from .exceptions import (
    AlreadyCancelled,
    BookingNotFound,
    BookingsDisabled,
    BookingTooLong,
    BookingTooShort,
    CancellationWindowClosed,
    InvalidTransition,
    NotBookingOwner,
    NotTurfOwner,
    OutsideBookingWindow,
    SlotAlreadyBooked,
    TurfNotBookable,
    TurfNotFound,
)
from .models import Booking, Turf
from .utils import ensure_interval, validate_operating_hours

logger = logging.getLogger(__name__)


class BookingService:
    """
    Booking lifecycle: create, cancel, confirm, complete, read.

    Creation locks the turf row for the whole check-then-insert so two
    requests for the same turf cannot both pass the overlap check.
    """

    def __init__(self, pricing=None):
        self.pricing = pricing or pricing_resolver

    # -------------------------------------------------------------------
    # CREATE
    # -------------------------------------------------------------------
    def create_booking(self, turf_id, user_id, booking_date, start_time, end_time,
                       creator_id, creator_role):
        ensure_interval(booking_date, start_time, end_time)

        creator = get_actor(creator_id)
        get_actor(user_id)

        with transaction.atomic():
            turf = Turf.objects.select_for_update().filter(id=turf_id).first()
            if turf is None:
                raise TurfNotFound()

            # Owner privileges apply only on the admin's own turfs
            as_owner = is_admin_role(creator_role) and turf.owner_id == creator_id
            if not as_owner and user_id != creator_id:
                raise NotBookingOwner("Only the turf owner can book for someone else")

            if not as_owner:
                if not turf.is_bookable:
                    raise TurfNotBookable(f"Turf is {turf.status}")

                state = SettingService.is_booking_disabled(turf.id)
                if state["disabled"]:
                    raise BookingsDisabled(
                        f"Bookings are currently disabled: {state['reason']}"
                    )

            self._check_duration(turf, start_time, end_time, as_owner)
            if not as_owner:
                self._check_booking_window(turf, booking_date, start_time)

            validate_operating_hours(turf, start_time, end_time)

            if has_overlap(turf.id, booking_date, start_time, end_time):
                raise SlotAlreadyBooked("Time slot already booked")

            price = self.pricing.calculate_price(
                turf.id, start_time, end_time, booking_date
            )

            booking = Booking.objects.create(
                turf=turf,
                user_id=user_id,
                date=booking_date,
                start_time=start_time,
                end_time=end_time,
                price=price,
                status=BookingStatus.CONFIRMED if as_owner else BookingStatus.PENDING,
                created_by=creator,
                created_by_name=creator.display_name,
            )

        logger.info(
            "Booking %s created on turf %s by %s (%s)",
            booking.id, turf.id, creator.id, booking.status,
        )
        return booking

    def _check_duration(self, turf, start_time, end_time, as_owner):
        hours = duration_hours(start_time, end_time)

        min_hours = SettingService.get_number(
            turf.id,
            SettingKey.MIN_BOOKING_HOURS,
            settings.TURFBOOK["MIN_BOOKING_HOURS"],
        )
        if hours < Decimal(str(min_hours)):
            raise BookingTooShort(
                f"Minimum booking duration is {min_hours:g} hour(s)"
            )

        if as_owner:
            return

        max_hours = SettingService.get_number(turf.id, SettingKey.MAX_BOOKING_HOURS, None)
        if max_hours is not None and hours > Decimal(str(max_hours)):
            raise BookingTooLong(
                f"Maximum booking duration is {max_hours:g} hour(s)"
            )

    def _check_booking_window(self, turf, booking_date, start_time):
        if start_time <= timezone.now():
            raise OutsideBookingWindow("Cannot book a slot in the past")

        advance_days = SettingService.get_number(turf.id, SettingKey.ADVANCE_BOOKING_DAYS, None)
        if advance_days is None:
            return

        days_ahead = (booking_date - timezone.localdate()).days
        if days_ahead > advance_days:
            raise OutsideBookingWindow(
                f"Bookings allowed only up to {advance_days:g} days in advance"
            )

    # -------------------------------------------------------------------
    # TRANSITIONS
    # -------------------------------------------------------------------
    def cancel_booking(self, booking_id, actor_id, actor_role, reason=None):
        as_admin = is_admin_role(actor_role)

        with transaction.atomic():
            booking = self._locked(booking_id)
            self._authorize(booking, actor_id, as_admin)

            if booking.status == BookingStatus.CANCELLED:
                raise AlreadyCancelled()
            if not BookingStatus.can_transition(booking.status, BookingStatus.CANCELLED):
                raise InvalidTransition(f"Cannot cancel a {booking.status} booking")

            if not as_admin:
                threshold = SettingService.get_number(
                    booking.turf_id,
                    SettingKey.CANCELLATION_DEADLINE_HOURS,
                    settings.TURFBOOK["CANCEL_HOURS_THRESHOLD"],
                )
                hours_left = (booking.start_time - timezone.now()).total_seconds() / 3600
                if hours_left < threshold:
                    raise CancellationWindowClosed(
                        f"Cannot cancel booking within {threshold:g} hours"
                    )

            booking.status = BookingStatus.CANCELLED
            booking.cancelled_at = timezone.now()
            booking.cancellation_reason = reason or ""
            booking.save(update_fields=[
                "status", "cancelled_at", "cancellation_reason", "updated_at",
            ])

        logger.info("Booking %s cancelled by %s", booking.id, actor_id)
        return booking

    def confirm_booking(self, booking_id, admin_id):
        return self._transition(
            booking_id,
            admin_id,
            target=BookingStatus.CONFIRMED,
            allowed_from=(BookingStatus.PENDING,),
        )

    def complete_booking(self, booking_id, admin_id):
        return self._transition(
            booking_id,
            admin_id,
            target=BookingStatus.COMPLETED,
            allowed_from=(BookingStatus.CONFIRMED, BookingStatus.ACTIVE),
        )

    def _transition(self, booking_id, admin_id, target, allowed_from):
        with transaction.atomic():
            booking = self._locked(booking_id)
            self._authorize(booking, admin_id, as_admin=True)

            if booking.status not in allowed_from:
                raise InvalidTransition(
                    f"Cannot move a {booking.status} booking to {target}"
                )

            booking.status = target
            booking.save(update_fields=["status", "updated_at"])

        logger.info("Booking %s -> %s by %s", booking.id, target, admin_id)
        return booking

    # -------------------------------------------------------------------
    # READS
    # -------------------------------------------------------------------
    def get_booking(self, booking_id, actor_id, actor_role):
        booking = (
            Booking.objects
            .select_related("turf", "user")
            .filter(id=booking_id)
            .first()
        )
        if booking is None:
            raise BookingNotFound()

        self._authorize(booking, actor_id, is_admin_role(actor_role))
        return booking

    def list_for_user(self, user_id, status=None, turf_id=None):
        qs = Booking.objects.select_related("turf").filter(user_id=user_id)
        if status:
            qs = qs.filter(status=status)
        if turf_id:
            qs = qs.filter(turf_id=turf_id)
        return qs.order_by("-created_at")

    def list_for_admin(self, admin_id, status=None, turf_id=None, booking_date=None):
        qs = (
            Booking.objects
            .select_related("turf", "user")
            .filter(turf__owner_id=admin_id)
        )
        if status:
            qs = qs.filter(status=status)
        if turf_id:
            qs = qs.filter(turf_id=turf_id)
        if booking_date:
            qs = qs.filter(date=booking_date)
        return qs.order_by("-created_at")

    # -------------------------------------------------------------------
    # HELPERS
    # -------------------------------------------------------------------
    @staticmethod
    def _locked(booking_id):
        booking = Booking.objects.select_for_update().filter(id=booking_id).first()
        if booking is None:
            raise BookingNotFound()
        return booking

    @staticmethod
    def _authorize(booking, actor_id, as_admin):
        if as_admin:
            if booking.turf.owner_id != actor_id:
                raise NotTurfOwner()
        elif booking.user_id != actor_id:
            raise NotBookingOwner()


booking_service = BookingService()
