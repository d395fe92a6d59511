"""
API views for the `spreadsheets` app.

The idea is:
- accept an Excel/CSV upload from the frontends,
- hand it to the ingestion service (parse, summarise, store),
- return the summary and chart series as JSON so the frontends stay thin.

All the real work lives in `services.py`; the views only validate the
request shape and map our exceptions onto status codes.
"""
from __future__ import annotations

import logging

from django.conf import settings
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.authentication import BasicAuthentication, SessionAuthentication
from rest_framework.permissions import IsAdminUser, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from .exceptions import ParseError, ProcessingError, ValidationError
from .models import IngestedFile
from .serializers import IngestedFileSerializer, SpreadsheetUploadSerializer
from .services import delete_ingested_file, ingest_spreadsheet, upload_history

logger = logging.getLogger(__name__)


class SpreadsheetUploadView(APIView):
    """Upload endpoint: "take this spreadsheet, give me stats and a chart back"."""

    authentication_classes = [BasicAuthentication, SessionAuthentication]
    permission_classes = [IsAuthenticated]

    def post(self, request, *args, **kwargs):
        serializer = SpreadsheetUploadSerializer(data=request.data)
        if not serializer.is_valid():
            # Send back all serializer errors, the web client shows them inline.
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        data = serializer.validated_data
        try:
            result = ingest_spreadsheet(
                user=request.user,
                upload=data["file"],
                title=data["title"],
                size=data.get("fileSize"),
                x_axis=data.get("xAxis") or None,
                y_axis=data.get("yAxis") or None,
            )
        except (ValidationError, ParseError) as exc:
            logger.warning("Rejected upload from user %s: %s", request.user.pk, exc.message)
            return Response({"success": False, "error": exc.message}, status=status.HTTP_400_BAD_REQUEST)
        except ProcessingError as exc:
            # The service already logged the traceback.
            body = {"success": False, "error": "File processing failed"}
            if settings.DEBUG:
                body["details"] = str(exc.__cause__ or exc)
            return Response(body, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response(
            {
                "success": True,
                "message": "File processed successfully",
                "data": result.as_payload(),
            },
            status=status.HTTP_201_CREATED,
        )


class UploadHistoryView(APIView):
    """The current user's uploads, oldest first, for the profile page."""

    authentication_classes = [BasicAuthentication, SessionAuthentication]
    permission_classes = [IsAuthenticated]

    def get(self, request, *args, **kwargs):
        records = IngestedFile.objects.filter(uploaded_by=request.user)
        return Response(
            {
                "history": upload_history(request.user),
                "files": IngestedFileSerializer(records, many=True).data,
            },
            status=status.HTTP_200_OK,
        )


class IngestedFileDetailView(APIView):
    """Users can only delete their own uploads; anything else is a 404."""

    authentication_classes = [BasicAuthentication, SessionAuthentication]
    permission_classes = [IsAuthenticated]

    def delete(self, request, pk, *args, **kwargs):
        record = get_object_or_404(IngestedFile, pk=pk, uploaded_by=request.user)
        delete_ingested_file(record)
        return Response({"success": True, "message": "File deleted"}, status=status.HTTP_200_OK)


class AdminIngestedFileDeleteView(APIView):
    """Staff-only delete used by the admin dashboard."""

    authentication_classes = [BasicAuthentication, SessionAuthentication]
    permission_classes = [IsAdminUser]

    def delete(self, request, pk, *args, **kwargs):
        record = get_object_or_404(IngestedFile, pk=pk)
        delete_ingested_file(record)
        return Response({"success": True, "message": "File deleted"}, status=status.HTTP_200_OK)
