from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import Q
import uuid

from apps.common.models import validate_choice_fields


class UserType(models.TextChoices):
    TRAVELER = 'traveler', 'Traveler'
    SERVICE_PROVIDER = 'service_provider', 'Service Provider'


class UserManager(BaseUserManager):
    """Custom user manager for email-based authentication."""

    def normalize_email(self, email):
        return (email or '').strip().lower()

    def get_by_natural_key(self, email):
        return self.get(email=self.normalize_email(email))

    def create_user(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError('Email is required')
        if not password and not extra_fields.get('google_id'):
            raise ValueError('Password is required unless the account is linked to Google')

        email = self.normalize_email(email)
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('is_verified', True)

        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True')

        return self.create_user(email, password, **extra_fields)


class User(AbstractBaseUser, PermissionsMixin):
    """Marketplace account: either a traveler or a service provider."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(unique=True, max_length=255, db_index=True)
    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    phone = models.CharField(max_length=30, blank=True)
    country = models.CharField(max_length=100, blank=True)
    avatar_url = models.URLField(max_length=500, blank=True)

    user_type = models.CharField(
        max_length=20,
        choices=UserType.choices,
        default=UserType.TRAVELER,
    )

    # External identity (Google). Unique only when present.
    google_id = models.CharField(max_length=255, null=True, blank=True)

    is_verified = models.BooleanField(default=False)
    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    last_login = models.DateTimeField(null=True, blank=True)

    objects = UserManager()

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['first_name', 'last_name']

    class Meta:
        db_table = 'users'
        indexes = [
            models.Index(fields=['user_type']),
            models.Index(fields=['created_at']),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=['google_id'],
                condition=Q(google_id__isnull=False),
                name='users_unique_google_id',
            ),
        ]

    def __str__(self):
        return self.email

    @classmethod
    def from_db(cls, db, field_names, values):
        instance = super().from_db(db, field_names, values)
        instance._stored_user_type = instance.__dict__.get('user_type')
        return instance

    def save(self, *args, **kwargs):
        self.email = (self.email or '').strip().lower()
        if not self.google_id:
            self.google_id = None

        stored = getattr(self, '_stored_user_type', None)
        if stored is not None and stored != self.user_type:
            raise ValidationError({'user_type': ['User type cannot be changed after registration.']})

        validate_choice_fields(self)
        super().save(*args, **kwargs)
        self._stored_user_type = self.user_type

    @property
    def is_traveler(self):
        return self.user_type == UserType.TRAVELER

    @property
    def is_service_provider(self):
        return self.user_type == UserType.SERVICE_PROVIDER

    def get_full_name(self):
        return f"{self.first_name} {self.last_name}".strip()

    def get_display_name(self):
        """Short public form, e.g. ``Amina K.``"""
        initial = f" {self.last_name[0]}." if self.last_name else ''
        return f"{self.first_name}{initial}" if self.first_name else self.email.split('@')[0]
