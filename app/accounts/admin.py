from django.contrib import admin
from .models import Account


@admin.register(Account)
class AccountAdmin(admin.ModelAdmin):
    list_display = ("user", "provider", "provider_account_id", "has_token", "created_at")

    list_filter = ("provider",)

    search_fields = ("user__username", "provider_account_id")

    readonly_fields = ("created_at",)

    exclude = ("access_token", "refresh_token")

    @admin.display(boolean=True, description="Token")
    def has_token(self, obj):
        return obj.has_token
