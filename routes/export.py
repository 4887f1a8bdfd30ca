"""
routes/export.py — Excel export routes.

Provides:
- GET /export/excel/<garden_index> — Download Excel for one garden
- GET /export/excel-all — Download Excel for all gardens
"""

from flask import Blueprint, send_file

from routes.main import get_planner, error_response
from utils.export import generate_excel, generate_excel_all

export_bp = Blueprint('export', __name__, url_prefix='/export')

XLSX_MIMETYPE = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'


@export_bp.route('/excel/<int:garden_index>')
def export_excel(garden_index):
    """Export a single garden layout as Excel."""
    try:
        buffer, filename = generate_excel(get_planner(), garden_index)
    except IndexError as e:
        return error_response(str(e), 404)

    return send_file(
        buffer,
        as_attachment=True,
        download_name=filename,
        mimetype=XLSX_MIMETYPE
    )


@export_bp.route('/excel-all')
def export_excel_all():
    """Export all gardens as a multi-sheet Excel workbook."""
    buffer, filename = generate_excel_all(get_planner())
    if not buffer:
        return error_response('No gardens to export', 404)

    return send_file(
        buffer,
        as_attachment=True,
        download_name=filename,
        mimetype=XLSX_MIMETYPE
    )
