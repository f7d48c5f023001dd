from rest_framework import serializers

from account.models import Company, User
from core.utils.constants import UserType

MIN_NAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 6


class CompanySerializer(serializers.ModelSerializer):
    class Meta:
        model = Company
        fields = ("id", "name")


class UserSerializer(serializers.ModelSerializer):
    company = CompanySerializer(read_only=True)

    class Meta:
        model = User
        fields = (
            "id",
            "name",
            "email",
            "type",
            "company",
            "created_at",
            "updated_at",
        )
        read_only_fields = fields


class EmployeeSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ("id", "name", "email", "is_active", "created_at")
        read_only_fields = fields


class _BaseSignupSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=150, min_length=MIN_NAME_LENGTH)
    email = serializers.EmailField(max_length=254)
    password = serializers.CharField(
        write_only=True,
        min_length=MIN_PASSWORD_LENGTH,
        trim_whitespace=False,
    )

    def validate_name(self, value: str) -> str:
        value = value.strip()
        if len(value) < MIN_NAME_LENGTH:
            raise serializers.ValidationError(
                f"Name must be at least {MIN_NAME_LENGTH} characters."
            )
        return value

    def validate_email(self, value: str) -> str:
        return User.objects.normalize_login_email(value)


class RegisterSerializer(_BaseSignupSerializer):
    type = serializers.ChoiceField(choices=UserType.choices)
    company_name = serializers.CharField(
        max_length=150,
        required=False,
        allow_blank=True,
        allow_null=True,
    )


class EmployeeCreateSerializer(_BaseSignupSerializer):
    pass
