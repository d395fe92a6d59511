"""
Ingestion pipeline: validate → parse → summarise → store blob → save record.

The views stay thin and only translate the exceptions raised here into HTTP
responses. Nothing in here knows about requests or serializers.
"""
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from pathlib import PurePath

from django.conf import settings
from django.core.files.base import ContentFile
from django.core.files.storage import default_storage
from django.db import IntegrityError, transaction

from .charts import build_chart_series
from .exceptions import DuplicateTitle, ProcessingError, ValidationError
from .models import IngestedFile
from .parsers import detect_format, parse_spreadsheet
from .summary import build_summary

logger = logging.getLogger(__name__)

DEFAULT_MAX_UPLOAD_SIZE = 10 * 1024 * 1024  # 10MB
DEFAULT_UPLOAD_DIR = "uploads"


@dataclass
class IngestionResult:
    record: IngestedFile
    download_url: str
    summary: dict
    graph_data: dict | None
    metadata: dict

    def as_payload(self) -> dict:
        """Shape returned to the clients under ``data``."""
        return {
            "id": self.record.pk,
            "downloadUrl": self.download_url,
            "summary": self.summary,
            "graphData": self.graph_data,
            "metadata": self.metadata,
        }


def ingest_spreadsheet(
    user,
    upload,
    title: str | None,
    size: int | None = None,
    x_axis: str | None = None,
    y_axis: str | None = None,
) -> IngestionResult:
    """
    Run the whole pipeline for a single uploaded file.

    ``upload`` is a Django ``UploadedFile``. Either a record is created and
    its blob is stored, or neither is left behind. Blobs that cannot be
    removed after a failed save are logged as orphaned.
    """
    if upload is None:
        raise ValidationError("Please upload a file")
    if not title or not title.strip():
        raise ValidationError("Please provide a title for the upload")

    file_format = detect_format(upload.name, upload.content_type)

    max_size = getattr(settings, "SPREADSHEETS_MAX_UPLOAD_SIZE", DEFAULT_MAX_UPLOAD_SIZE)
    if upload.size > max_size:
        raise ValidationError(f"File is too large; the limit is {max_size // (1024 * 1024)} MB")

    # Fast path for the common case; the unique constraint below is what
    # actually guarantees uniqueness when two requests race.
    if IngestedFile.objects.filter(uploaded_by=user, title=title).exists():
        raise DuplicateTitle(f"You already have an upload called '{title}'")

    logger.info("Ingesting '%s' for user %s (%s, %d bytes)", title, user.pk, file_format, upload.size)

    upload.seek(0)
    blob = upload.read()
    parsed = parse_spreadsheet(blob, file_format)

    try:
        summary = build_summary(parsed.headers, parsed.rows)
        graph_data = build_chart_series(parsed.headers, parsed.rows, x_axis=x_axis, y_axis=y_axis)
    except ValidationError:
        raise
    except Exception as exc:  # noqa: BLE001
        logger.exception("Summarising '%s' failed", title)
        raise ProcessingError("Failed to summarise the uploaded file") from exc

    storage_name, download_url = _store_blob(blob, upload.name)

    try:
        with transaction.atomic():
            record = IngestedFile.objects.create(
                title=title,
                summary=summary,
                graph_data=graph_data,
                url=download_url,
                storage_name=storage_name,
                size=size if size is not None else upload.size,
                uploaded_by=user,
            )
    except IntegrityError as exc:
        _discard_blob(storage_name)
        raise DuplicateTitle(f"You already have an upload called '{title}'") from exc
    except Exception as exc:  # noqa: BLE001
        logger.exception("Saving the record for '%s' failed", title)
        _discard_blob(storage_name)
        raise ProcessingError("Failed to save the uploaded file") from exc

    logger.info("Ingested '%s' as #%s: %d rows, %d columns", title, record.pk, parsed.row_count, len(parsed.headers))

    return IngestionResult(
        record=record,
        download_url=download_url,
        summary=summary,
        graph_data=graph_data,
        metadata={
            "headers": parsed.headers,
            "rowCount": parsed.row_count,
            "sheetNames": parsed.sheet_names,
        },
    )


def delete_ingested_file(record: IngestedFile) -> None:
    """Delete the record first, then (best effort) the blob behind it."""
    storage_name = record.storage_name
    record_id, title = record.pk, record.title
    record.delete()
    logger.info("Deleted upload #%s ('%s')", record_id, title)

    if storage_name:
        _discard_blob(storage_name)


def upload_history(user) -> list[str]:
    """Titles the user has uploaded, oldest first."""
    return list(
        IngestedFile.objects.filter(uploaded_by=user)
        .order_by("created_at", "id")
        .values_list("title", flat=True)
    )


def _store_blob(blob: bytes, original_name: str) -> tuple[str, str]:
    upload_dir = getattr(settings, "SPREADSHEETS_UPLOAD_DIR", DEFAULT_UPLOAD_DIR)
    # Random name so two users uploading "data.xlsx" never clash.
    name = f"{upload_dir}/{uuid.uuid4()}{PurePath(original_name).suffix.lower()}"

    stored_name = None
    try:
        stored_name = default_storage.save(name, ContentFile(blob))
        return stored_name, default_storage.url(stored_name)
    except Exception as exc:  # noqa: BLE001
        logger.exception("Storing upload blob %s failed", name)
        if stored_name:
            _discard_blob(stored_name)
        raise ProcessingError("Failed to store the uploaded file") from exc


def _discard_blob(storage_name: str) -> bool:
    try:
        default_storage.delete(storage_name)
    except Exception:  # noqa: BLE001
        logger.error("Orphaned upload blob %s could not be removed; needs manual cleanup", storage_name, exc_info=True)
        return False
    return True
