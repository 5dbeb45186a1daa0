# Turf/selectors.py
from .exceptions import NotTurfOwner, TurfNotFound
from .models import Turf


def get_turf(turf_id):
    turf = Turf.objects.filter(id=turf_id).first()
    if turf is None:
        raise TurfNotFound()
    return turf


def get_owned_turf(turf_id, admin_id, for_update=False):
    """Turf lookup that also checks the caller owns it."""
    qs = Turf.objects.all()
    if for_update:
        qs = qs.select_for_update()

    turf = qs.filter(id=turf_id).first()
    if turf is None:
        raise TurfNotFound()
    if turf.owner_id != admin_id:
        raise NotTurfOwner()
    return turf
