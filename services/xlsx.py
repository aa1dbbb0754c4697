from io import BytesIO

from openpyxl import Workbook as XlsxWorkbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

XLSX_MIMETYPE = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'


def workbook_to_xlsx(workbook):
    """Serialize a report ``Workbook`` to .xlsx bytes, one worksheet per sheet."""
    book = XlsxWorkbook()
    book.remove(book.active)

    for sheet in workbook.sheets:
        # Excel caps sheet titles at 31 characters.
        ws = book.create_sheet(title=sheet.name[:31])
        ws.append(sheet.columns)
        for cell in ws[1]:
            cell.font = Font(bold=True)
        for row in sheet.rows:
            ws.append(list(row))

        for idx, column in enumerate(sheet.columns, start=1):
            width = max([len(str(column))] + [len(str(r[idx - 1])) for r in sheet.rows if len(r) >= idx])
            ws.column_dimensions[get_column_letter(idx)].width = min(width + 2, 60)

    out = BytesIO()
    book.save(out)
    return out.getvalue()
