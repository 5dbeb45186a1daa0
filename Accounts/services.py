# Accounts/services.py
from Turf.exceptions import UserNotFound
from .models import User


def get_actor(actor_id):
    """Identity lookup used for authorization and creator snapshots."""
    actor = User.objects.filter(id=actor_id, is_active=True).first()
    if actor is None:
        raise UserNotFound()
    return actor


def is_admin_role(role):
    return role == User.ROLE_ADMIN
