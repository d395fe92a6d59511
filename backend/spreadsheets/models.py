"""Models for uploaded spreadsheets."""
from __future__ import annotations

from django.conf import settings
from django.db import models


class IngestedFile(models.Model):
    """
    One row per successfully processed upload.

    The summary and chart series are stored as JSON exactly as they were
    returned to the client, so the frontends can re-render an old upload
    without parsing the file again.
    """

    title = models.CharField(max_length=255)
    summary = models.JSONField(help_text="totalRows / numericColumns / columnNames for the first sheet.")
    graph_data = models.JSONField(null=True, blank=True)
    url = models.CharField(max_length=500, help_text="Public URL of the stored upload.")
    storage_name = models.CharField(
        max_length=500,
        help_text="Name of the blob in the default storage, used for cleanup.",
    )
    size = models.PositiveBigIntegerField(default=0)
    uploaded_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="ingested_files",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["created_at", "id"]
        constraints = [
            # The upload history is just the titles of these rows, so the
            # database is what keeps titles unique per user.
            models.UniqueConstraint(fields=["uploaded_by", "title"], name="unique_title_per_user"),
        ]

    def __str__(self) -> str:  # type: ignore[override]
        return f"{self.title} ({self.uploaded_by_id}) on {self.created_at:%Y-%m-%d %H:%M}"
