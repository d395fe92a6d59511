"""
Spreadsheet ingestion app.

This app contains:
- the parse / summarise / chart pipeline for uploaded Excel and CSV files,
- the model that stores each processed upload,
- API views for uploading, listing and deleting uploads.
"""
