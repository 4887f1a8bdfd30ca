"""
routes/gardens.py — Garden and editing routes (JSON API).

Provides:
- POST /gardens/add — Create a garden (name, rows, columns)
- POST /gardens/<garden_index>/rename — Rename a garden
- POST /gardens/<garden_index>/cells/<cell_index>/tap — Tap a cell
- POST /gardens/<garden_index>/delete-selected — Delete the selected plant
- POST /editing/toggle — Toggle editing mode
- POST /editing/pending — Choose a catalog plant to place
- POST /editing/pending/cancel — Drop the pending plant

Every successful response carries the updated planner state.
"""

from flask import Blueprint, request

from garden_collection import MIN_DIMENSION, MAX_DIMENSION, DEFAULT_ROWS, DEFAULT_COLUMNS
from routes.main import get_planner, error_response, state_response

gardens_bp = Blueprint('gardens', __name__)


def _request_data():
    """Form fields or JSON body as a dict; None for a non-object JSON body."""
    if request.is_json:
        data = request.get_json(silent=True)
        if data is None:
            return {}
        return data if isinstance(data, dict) else None
    return request.form


def _parse_dimension(value, default):
    """A whole number from JSON or a digit string from a form, else None."""
    if value is None or value == '':
        return default
    # bool is an int subclass
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)
    return None


def _text_field(data, key):
    """String value of a field, '' when absent, None when not a string."""
    value = data.get(key)
    if value is None:
        return ''
    return value if isinstance(value, str) else None


# ========================================
# Gardens
# ========================================

@gardens_bp.route('/gardens/add', methods=['POST'])
def add_garden():
    """Create a new all-empty garden."""
    data = _request_data()
    if data is None:
        return error_response('Request body must be an object', 400)
    name = _text_field(data, 'name')
    if name is None:
        return error_response('Name must be a string', 400)
    name = name.strip()
    rows = _parse_dimension(data.get('rows'), DEFAULT_ROWS)
    columns = _parse_dimension(data.get('columns'), DEFAULT_COLUMNS)

    if rows is None or columns is None:
        return error_response('Rows and columns must be whole numbers', 400)
    if not (MIN_DIMENSION <= rows <= MAX_DIMENSION and MIN_DIMENSION <= columns <= MAX_DIMENSION):
        return error_response(
            f'Rows and columns must be between {MIN_DIMENSION} and {MAX_DIMENSION}', 400
        )

    garden_index = get_planner().create_garden(name, rows, columns)
    return state_response(garden_index=garden_index), 201


@gardens_bp.route('/gardens/<int:garden_index>/rename', methods=['POST'])
def rename_garden(garden_index):
    """Rename a garden. Empty names are kept as typed."""
    data = _request_data()
    if data is None:
        return error_response('Request body must be an object', 400)
    if data.get('name') is None:
        return error_response('Missing name', 400)
    name = _text_field(data, 'name')
    if name is None:
        return error_response('Name must be a string', 400)

    try:
        get_planner().rename_garden(garden_index, name)
    except IndexError as e:
        return error_response(str(e), 404)
    return state_response()


@gardens_bp.route('/gardens/<int:garden_index>/cells/<int:cell_index>/tap', methods=['POST'])
def tap_cell(garden_index, cell_index):
    """Forward a tap on one cell to the editing session."""
    try:
        action = get_planner().tap_cell(garden_index, cell_index)
    except IndexError as e:
        return error_response(str(e), 404)
    return state_response(action=action)


@gardens_bp.route('/gardens/<int:garden_index>/delete-selected', methods=['POST'])
def delete_selected(garden_index):
    """Delete the plant currently selected for moving."""
    try:
        removed = get_planner().delete_selected(garden_index)
    except IndexError as e:
        return error_response(str(e), 404)
    except RuntimeError as e:
        return error_response(str(e), 409)
    return state_response(removed=removed.to_dict())


# ========================================
# Editing Session
# ========================================

@gardens_bp.route('/editing/toggle', methods=['POST'])
def toggle_editing():
    """Enter or leave editing mode."""
    is_editing = get_planner().toggle_editing()
    return state_response(is_editing=is_editing)


@gardens_bp.route('/editing/pending', methods=['POST'])
def choose_pending():
    """Choose a catalog plant to place on the next empty cell tapped."""
    data = _request_data()
    if data is None:
        return error_response('Request body must be an object', 400)
    name = _text_field(data, 'name')
    if name is None:
        return error_response('Name must be a string', 400)
    name = name.strip()
    if not name:
        return error_response('Missing plant name', 400)

    try:
        plant = get_planner().choose_pending(name)
    except ValueError as e:
        return error_response(str(e), 400)
    return state_response(pending_plant=plant.to_dict())


@gardens_bp.route('/editing/pending/cancel', methods=['POST'])
def cancel_pending():
    """Drop the pending plant without leaving editing mode."""
    get_planner().cancel_pending()
    return state_response()
