from django.contrib import admin

from users.models import User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    """Admin interface for User model."""

    list_display = ["name", "username", "created", "modified"]
    list_filter = ["created", "modified"]
    search_fields = ["name", "username"]
    readonly_fields = ["created", "modified"]
    ordering = ["id"]

    fieldsets = (
        (None, {"fields": ("name", "username")}),
        (
            "Audit",
            {
                "fields": ("created", "modified"),
                "classes": ("collapse",),
            },
        ),
    )
