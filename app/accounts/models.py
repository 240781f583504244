"""
Linked OAuth accounts of site users.
"""

from django.conf import settings
from django.db import models


class Account(models.Model):
    """
    A provider account linked to a Django user by the sign-in flow.

    The stored ``access_token`` lets GitHub API calls run under the visitor's
    own rate limit instead of the site-wide token.
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="accounts",
    )
    type = models.CharField(max_length=50, default="oauth")
    provider = models.CharField(max_length=50, default="github")
    provider_account_id = models.CharField(max_length=255)
    access_token = models.TextField(blank=True, null=True)
    refresh_token = models.TextField(blank=True, null=True)
    token_type = models.CharField(max_length=50, blank=True)
    scope = models.CharField(max_length=255, blank=True)
    expires_at = models.IntegerField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["provider", "provider_account_id"],
                name="unique_provider_account",
            )
        ]

    @property
    def has_token(self):
        return bool(self.access_token)

    def __str__(self):
        return f"{self.provider}:{self.provider_account_id} ({self.user})"
