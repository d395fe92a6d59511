"""Serializers used by the API views."""
from rest_framework import serializers

from .models import IngestedFile


class SpreadsheetUploadSerializer(serializers.Serializer):
    """
    Multipart body of an upload.

    Field names follow the web client (camelCase), the view maps them onto
    the service arguments. Title checks beyond "present" live in the service
    so the same rules apply to any caller.
    """

    file = serializers.FileField()
    title = serializers.CharField(max_length=255, trim_whitespace=False)
    fileSize = serializers.IntegerField(required=False, min_value=0)
    xAxis = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    yAxis = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)


class IngestedFileSerializer(serializers.ModelSerializer):
    """Compact representation used by the history endpoint."""

    graphData = serializers.JSONField(source="graph_data", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = IngestedFile
        fields = ["id", "title", "url", "size", "summary", "graphData", "createdAt"]
