from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password

from .models import User, UserType


class UserSerializer(serializers.ModelSerializer):
    """User profile as returned by auth endpoints."""

    provider_id = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            'id',
            'email',
            'first_name',
            'last_name',
            'phone',
            'country',
            'avatar_url',
            'user_type',
            'is_verified',
            'provider_id',
            'created_at',
            'last_login',
        ]
        read_only_fields = fields

    def get_provider_id(self, obj):
        profile = getattr(obj, 'provider_profile', None) if obj.is_service_provider else None
        return str(profile.id) if profile else None


class ProviderRegistrationSerializer(serializers.Serializer):
    """Optional business details sent with a provider registration."""

    business_type = serializers.CharField(max_length=100, required=False, allow_blank=True)
    description = serializers.CharField(required=False, allow_blank=True)
    location = serializers.CharField(max_length=200, required=False, allow_blank=True)
    country = serializers.CharField(max_length=100, required=False, allow_blank=True)
    region = serializers.CharField(max_length=100, required=False, allow_blank=True)
    district = serializers.CharField(max_length=100, required=False, allow_blank=True)
    area = serializers.CharField(max_length=100, required=False, allow_blank=True)
    license_number = serializers.CharField(max_length=100, required=False, allow_blank=True)


class UserRegistrationSerializer(serializers.Serializer):
    """Serializer for user registration."""

    email = serializers.EmailField()
    password = serializers.CharField(
        write_only=True,
        required=False,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    password_confirm = serializers.CharField(
        write_only=True,
        required=False,
        style={'input_type': 'password'}
    )
    first_name = serializers.CharField(max_length=100)
    last_name = serializers.CharField(max_length=100)
    user_type = serializers.ChoiceField(choices=UserType.choices, default=UserType.TRAVELER)
    phone = serializers.CharField(max_length=30, required=False, allow_blank=True)
    country = serializers.CharField(max_length=100, required=False, allow_blank=True)
    google_id = serializers.CharField(max_length=255, required=False, allow_blank=True)
    business_name = serializers.CharField(max_length=200, required=False, allow_blank=True)
    provider_details = ProviderRegistrationSerializer(required=False)

    def validate(self, attrs):
        """Validate password confirmation."""
        password = attrs.get('password')
        if not password and not attrs.get('google_id'):
            raise serializers.ValidationError({'password': 'Password is required'})
        if password and 'password_confirm' in attrs and attrs['password_confirm'] != password:
            raise serializers.ValidationError({
                'password_confirm': 'Passwords do not match'
            })
        attrs.pop('password_confirm', None)
        return attrs


class UserLoginSerializer(serializers.Serializer):
    """Serializer for user login."""

    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )


class ProfileUpdateSerializer(serializers.Serializer):
    first_name = serializers.CharField(max_length=100, required=False)
    last_name = serializers.CharField(max_length=100, required=False)
    phone = serializers.CharField(max_length=30, required=False, allow_blank=True)
    country = serializers.CharField(max_length=100, required=False, allow_blank=True)
    avatar_url = serializers.URLField(max_length=500, required=False, allow_blank=True)
