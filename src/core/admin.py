from unfold.admin import ModelAdmin


class BaseModelAdmin(ModelAdmin):
    readonly_fields = ("created_at", "updated_at")


class SoftDeleteModelAdmin(BaseModelAdmin):
    exclude = ("deleted_at",)

    def get_exclude(self, request, obj=None):
        """
        Keep deleted_at hidden even if subclasses override exclude.
        """
        exclude = tuple(super().get_exclude(request, obj) or ())
        if "deleted_at" not in exclude:
            exclude += ("deleted_at",)
        return exclude

    def get_queryset(self, request):
        return self.model.all_objects.filter(deleted_at__isnull=True)
