from django.conf import settings
from django.db import models


class Report(models.Model):
    """
    A moderation report against a GitHub repository.

    ``valid=False`` marks a report that is still being enforced: the
    repository stays hidden from listings until a moderator resolves the
    report by setting ``valid=True``.
    """

    repo_id = models.BigIntegerField(
        db_index=True,
        help_text="GitHub repository id",
    )
    repo_full_name = models.CharField(max_length=255, blank=True)
    reason = models.TextField(blank=True)
    valid = models.BooleanField(default=False)
    reporter = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="reports",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    @property
    def is_active(self):
        return not self.valid

    def __str__(self):
        return f"Report on {self.repo_full_name or self.repo_id}"
