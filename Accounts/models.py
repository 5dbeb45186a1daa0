# Accounts/models.py

from django.db import models
from django.contrib.auth.models import (
    AbstractBaseUser,
    PermissionsMixin,
    BaseUserManager,
)


# ----------------------------------
# CUSTOM USER MANAGER
# ----------------------------------
# Email-based accounts; role decides booking privileges.
class UserManager(BaseUserManager):

    def create_user(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError("Email is required")

        email = self.normalize_email(email)
        extra_fields.setdefault("role", User.ROLE_USER)

        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_admin(self, email, password=None, **extra_fields):
        # Turf owners; not Django staff unless asked for
        extra_fields["role"] = User.ROLE_ADMIN
        return self.create_user(email, password, **extra_fields)

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("role", User.ROLE_ADMIN)

        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True")
        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True")

        return self.create_user(email, password, **extra_fields)


# ----------------------------------
# CUSTOM USER MODEL
# ----------------------------------
class User(AbstractBaseUser, PermissionsMixin):

    ROLE_USER = "user"
    ROLE_ADMIN = "admin"

    # "admin" is a turf owner, not a platform operator
    ROLE_CHOICES = (
        (ROLE_USER, "User"),
        (ROLE_ADMIN, "Admin"),
    )

    email = models.EmailField(unique=True)

    # Snapshotted onto bookings as the creator's display name
    full_name = models.CharField(max_length=255)

    phone_number = models.CharField(max_length=20, blank=True)

    role = models.CharField(
        max_length=20,
        choices=ROLE_CHOICES,
        default=ROLE_USER,
    )

    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)

    objects = UserManager()

    created_at = models.DateTimeField(auto_now_add=True)

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = ["full_name"]

    @property
    def is_turf_admin(self):
        return self.role == self.ROLE_ADMIN

    @property
    def display_name(self):
        return self.full_name or self.email

    def __str__(self):
        return self.email
