import bleach
from rest_framework import serializers

from core.models import Role


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField()

    def validate_username(self, v):
        v = (v or '').strip()
        if not v:
            raise serializers.ValidationError('Username is required')
        return v

    def validate_password(self, v):
        if not v:
            raise serializers.ValidationError('Password is required')
        return v


class RegisterSerializer(serializers.Serializer):
    username = serializers.CharField(min_length=3, max_length=50)
    password = serializers.CharField(min_length=6, write_only=True)
    role = serializers.ChoiceField(choices=Role.choices, required=False)

    def validate_username(self, v):
        v = bleach.clean((v or '').strip(), strip=True)
        if len(v) < 3:
            raise serializers.ValidationError('Username must be between 3 and 50 characters')
        return v


class UserSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    username = serializers.CharField()
    role = serializers.CharField()
