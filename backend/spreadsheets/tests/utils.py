"""Small builders for in-memory spreadsheet uploads."""
from io import BytesIO

from django.core.files.uploadedfile import SimpleUploadedFile
from openpyxl import Workbook

XLSX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

SALES_CSV = b"Month,Sales\nJan,100\nFeb,bad\nMar,300\n"


def make_xlsx(rows, extra_sheets=()):
    """Build an .xlsx with ``rows`` on the first sheet and empty extra sheets."""
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = "Data"
    for row in rows:
        sheet.append(row)
    for name in extra_sheets:
        workbook.create_sheet(title=name)

    buffer = BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


def csv_upload(content=SALES_CSV, name="sales.csv"):
    return SimpleUploadedFile(name, content, content_type="text/csv")


def xlsx_upload(rows, name="sales.xlsx"):
    return SimpleUploadedFile(name, make_xlsx(rows), content_type=XLSX_CONTENT_TYPE)
