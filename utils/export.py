"""
utils/export.py — Excel export of garden layouts using openpyxl.

Generates .xlsx files with one sheet per garden and a styled header row.
Columns: Row, Column, Plant, Info ID, Family. One data row per cell,
row-major, empty cells included.
"""

import re
from io import BytesIO
from openpyxl.styles import Font, PatternFill, Alignment, Border, Side

from models import EMPTY


HEADER_FONT = Font(name='Calibri', bold=True, color='FFFFFF', size=11)
HEADER_FILL = PatternFill(start_color='2E7D32', end_color='2E7D32', fill_type='solid')
HEADER_ALIGNMENT = Alignment(horizontal='center', vertical='center', wrap_text=True)
HEADER_BORDER = Border(
    bottom=Side(style='thin', color='1B5E20'),
    right=Side(style='thin', color='E2E8F0'),
)
CELL_BORDER = Border(
    bottom=Side(style='thin', color='E2E8F0'),
    right=Side(style='thin', color='E2E8F0'),
)
EMPTY_FONT = Font(color='9E9E9E', italic=True)

COLUMNS = ['Row', 'Column', 'Plant', 'Info ID', 'Family']

# Excel forbids these in sheet titles and caps them at 31 characters
_INVALID_TITLE_CHARS = re.compile(r'[\[\]:*?/\\]')


def sheet_title(name, index):
    """Safe, unique worksheet title for a garden."""
    cleaned = _INVALID_TITLE_CHARS.sub(' ', name or '').strip()
    prefix = f"{index + 1}. "
    return (prefix + cleaned)[:31] if cleaned else f"Garden {index + 1}"


def _build_sheet(ws, garden, info_index):
    """Populate a worksheet with one row per garden cell."""
    for col_idx, col_name in enumerate(COLUMNS, 1):
        cell = ws.cell(row=1, column=col_idx, value=col_name)
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.alignment = HEADER_ALIGNMENT
        cell.border = HEADER_BORDER

    for index, plant in enumerate(garden.cells):
        row_idx = index + 2
        grid_row, grid_col = garden.row_col(index)

        ws.cell(row=row_idx, column=1, value=grid_row + 1).border = CELL_BORDER
        ws.cell(row=row_idx, column=2, value=grid_col + 1).border = CELL_BORDER

        if plant is EMPTY:
            name_cell = ws.cell(row=row_idx, column=3, value='(empty)')
            name_cell.font = EMPTY_FONT
            name_cell.border = CELL_BORDER
            ws.cell(row=row_idx, column=4, value='').border = CELL_BORDER
            ws.cell(row=row_idx, column=5, value='').border = CELL_BORDER
            continue

        record = info_index.lookup(plant.info_id)
        ws.cell(row=row_idx, column=3, value=plant.name).border = CELL_BORDER
        ws.cell(row=row_idx, column=4, value=plant.info_id).border = CELL_BORDER
        ws.cell(row=row_idx, column=5, value=record.family if record else '').border = CELL_BORDER

    ws.column_dimensions['A'].width = 8
    ws.column_dimensions['B'].width = 10
    ws.column_dimensions['C'].width = 20
    ws.column_dimensions['D'].width = 16
    ws.column_dimensions['E'].width = 20

    # Freeze header row
    ws.freeze_panes = 'A2'


def _save(wb):
    buffer = BytesIO()
    wb.save(buffer)
    buffer.seek(0)
    return buffer


def generate_excel(planner, garden_index):
    """Generate an Excel workbook for one garden.

    Returns:
        (BytesIO buffer, filename). Raises IndexError for an unknown garden.
    """
    import openpyxl

    garden = planner.gardens.get(garden_index)

    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = sheet_title(garden.name, garden_index)
    _build_sheet(ws, garden, planner.info_index)

    filename = f"garden_{garden_index + 1}.xlsx"
    return _save(wb), filename


def generate_excel_all(planner):
    """Generate an Excel workbook with one sheet per garden.

    Returns:
        (BytesIO buffer, filename) on success, (None, None) when there are no gardens.
    """
    import openpyxl

    if len(planner.gardens) == 0:
        return None, None

    wb = openpyxl.Workbook()
    # Remove default sheet
    wb.remove(wb.active)

    for index, garden in enumerate(planner.gardens):
        ws = wb.create_sheet(title=sheet_title(garden.name, index))
        _build_sheet(ws, garden, planner.info_index)

    return _save(wb), "gardens_all.xlsx"
