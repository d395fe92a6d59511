"""
URL patterns for the `spreadsheets` app.

Everything is mounted under /api/ by the project urls.
"""
from django.urls import path

from .views import (
    AdminIngestedFileDeleteView,
    IngestedFileDetailView,
    SpreadsheetUploadView,
    UploadHistoryView,
)

urlpatterns = [
    path("files/upload/", SpreadsheetUploadView.as_view(), name="upload-spreadsheet"),
    path("files/history/", UploadHistoryView.as_view(), name="upload-history"),
    path("files/<int:pk>/", IngestedFileDetailView.as_view(), name="ingested-file-detail"),
    path("admin/files/<int:pk>/", AdminIngestedFileDeleteView.as_view(), name="admin-ingested-file-delete"),
]
