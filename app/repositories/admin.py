from django.contrib import admin
from .models import Report


@admin.register(Report)
class ReportAdmin(admin.ModelAdmin):
    list_display = ("repo_full_name", "repo_id", "reporter", "valid", "created_at")

    list_filter = ("valid", "created_at")

    search_fields = ("repo_full_name", "repo_id", "reporter__username", "reason")

    readonly_fields = ("created_at", "updated_at")

    actions = ["mark_resolved", "reopen"]

    fieldsets = (
        ("Repository", {"fields": ("repo_id", "repo_full_name")}),
        ("Report", {"fields": ("reason", "reporter", "valid")}),
        (
            "Timestamps",
            {
                "fields": ("created_at", "updated_at"),
                "classes": ("collapse",),
            },
        ),
    )

    @admin.action(description="Mark as resolved")
    def mark_resolved(self, request, queryset):
        updated = queryset.update(valid=True)
        self.message_user(request, f"{updated} report(s) resolved.")

    @admin.action(description="Reopen")
    def reopen(self, request, queryset):
        updated = queryset.update(valid=False)
        self.message_user(request, f"{updated} report(s) reopened.")
