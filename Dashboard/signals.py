# Dashboard/signals.py
from django.db import transaction
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from Turf.models import Booking, Turf
from .services import stats_service


@receiver(post_save, sender=Booking)
@receiver(post_delete, sender=Booking)
def drop_owner_stats(sender, instance, **kwargs):
    owner_id = (
        Turf.objects
        .filter(id=instance.turf_id)
        .values_list("owner_id", flat=True)
        .first()
    )
    if owner_id is not None:
        transaction.on_commit(lambda: stats_service.invalidate(owner_id))
