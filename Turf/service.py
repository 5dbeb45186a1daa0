import logging

from django.core.exceptions import ValidationError
from django.db import transaction

from pricing.services import pricing_resolver
from turf_settings.services import SettingService
from .constants import TurfStatus
from .exceptions import BadRequestError, TurfNotFound
from .models import Turf
from .selectors import get_owned_turf

logger = logging.getLogger(__name__)

# Only these can change after creation; id, owner and timestamps never do
UPDATABLE_FIELDS = (
    "name",
    "description",
    "address",
    "city",
    "state",
    "phone",
    "amenities",
    "opening_time",
    "closing_time",
)


class TurfService:

    @staticmethod
    def list_turfs(status=None, city=None, state=None):
        qs = Turf.objects.select_related("owner")
        qs = qs.filter(status=status or TurfStatus.ACTIVE)
        if city:
            qs = qs.filter(city__iexact=city)
        if state:
            qs = qs.filter(state__iexact=state)
        return qs.order_by("name")

    @staticmethod
    def get_visible_turf(turf_id, viewer_id=None):
        """Active turfs for everyone; inactive ones only for their owner."""
        turf = Turf.objects.select_related("owner").filter(id=turf_id).first()
        if turf is None:
            raise TurfNotFound()
        if turf.status != TurfStatus.ACTIVE and turf.owner_id != viewer_id:
            raise TurfNotFound()
        return turf

    @staticmethod
    def list_owned(owner_id):
        return Turf.objects.filter(owner_id=owner_id).order_by("-created_at")

    @staticmethod
    def create_turf(owner, **fields):
        unknown = set(fields) - set(UPDATABLE_FIELDS)
        if unknown:
            raise BadRequestError(f"Unknown turf fields: {', '.join(sorted(unknown))}")

        turf = Turf(owner=owner, status=TurfStatus.ACTIVE, **fields)
        _validate(turf)

        # Turf, default price grid and default settings land together
        with transaction.atomic():
            turf.save()
            pricing_resolver.create_default_pricing(turf)
            SettingService.create_defaults(turf)

        logger.info("Turf %s created by owner %s", turf.id, owner.id)
        return turf

    @staticmethod
    def update_turf(turf_id, owner_id, **fields):
        changes = {k: v for k, v in fields.items() if v is not None}
        unknown = set(changes) - set(UPDATABLE_FIELDS)
        if unknown:
            raise BadRequestError(f"Fields cannot be updated: {', '.join(sorted(unknown))}")

        with transaction.atomic():
            turf = get_owned_turf(turf_id, owner_id, for_update=True)
            for field, value in changes.items():
                setattr(turf, field, value)
            _validate(turf)
            turf.save()

        return turf

    @staticmethod
    def set_status(turf_id, owner_id, status):
        if status not in dict(TurfStatus.CHOICES):
            raise BadRequestError(f"Invalid turf status: {status}")

        with transaction.atomic():
            turf = get_owned_turf(turf_id, owner_id, for_update=True)
            turf.status = status
            turf.save(update_fields=["status", "updated_at"])

        logger.info("Turf %s status -> %s", turf.id, status)
        return turf

    @staticmethod
    def soft_delete(turf_id, owner_id):
        return TurfService.set_status(turf_id, owner_id, TurfStatus.INACTIVE)

    @staticmethod
    def hard_delete(turf_id, owner_id):
        # Cascades to bookings, reviews, pricing and settings
        with transaction.atomic():
            turf = get_owned_turf(turf_id, owner_id, for_update=True)
            turf_pk = turf.id
            turf.delete()

        pricing_resolver.invalidate(turf_pk)
        logger.info("Turf %s permanently deleted", turf_pk)

    @staticmethod
    def set_image(turf_id, owner_id, image):
        turf = get_owned_turf(turf_id, owner_id)
        turf.image = image
        turf.save(update_fields=["image", "updated_at"])
        return turf


def _validate(turf):
    try:
        turf.full_clean(exclude=["owner", "image"])
    except ValidationError as exc:
        raise BadRequestError("; ".join(exc.messages))
