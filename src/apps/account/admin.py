from django.contrib import admin

from account.models import Company, User
from core.admin import BaseModelAdmin, SoftDeleteModelAdmin


@admin.register(User)
class UserAdmin(SoftDeleteModelAdmin):
    list_display = ("id", "email", "name", "type", "company", "is_active")
    search_fields = ("email", "name")
    list_filter = ("type", "is_active")
    ordering = ("-created_at",)
    exclude = ("last_login", "deleted_at", "password")
    list_display_links = ("id", "email")


@admin.register(Company)
class CompanyAdmin(BaseModelAdmin):
    list_display = ("id", "name", "created_at")
    search_fields = ("name",)
