# Accounts/serializers.py
from django.contrib.auth import get_user_model
from rest_framework import serializers
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer

User = get_user_model()


class RegisterSerializer(serializers.ModelSerializer):
    """Self sign-up always yields a plain user; owners are provisioned separately."""
    password = serializers.CharField(write_only=True, min_length=8)

    class Meta:
        model = User
        fields = (
            "full_name",
            "email",
            "password",
            "phone_number",
        )

    def create(self, validated_data):
        password = validated_data.pop("password")
        return User.objects.create_user(password=password, **validated_data)


class ProfileSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = (
            "id",
            "email",
            "full_name",
            "phone_number",
            "role",
            "is_active",
            "created_at",
        )
        read_only_fields = fields


class ProfileUpdateSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ["full_name", "phone_number"]

    def validate_phone_number(self, value):
        if value and len(value) < 10:
            raise serializers.ValidationError("Invalid phone number")
        return value


class LoginSerializer(TokenObtainPairSerializer):

    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)
        token["role"] = user.role
        token["email"] = user.email
        return token

    def validate(self, attrs):
        data = super().validate(attrs)

        data["user"] = {
            "id": self.user.id,
            "role": self.user.role,
            "full_name": self.user.full_name,
            "email": self.user.email,
            "phone_number": self.user.phone_number,
        }

        # Owners land on their turf list; players do not need it
        if self.user.is_turf_admin:
            data["turfs"] = list(
                self.user.turfs.order_by("name").values("id", "name", "status")
            )
        return data
