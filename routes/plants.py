"""
routes/plants.py — Plant catalog and reference information routes.

Provides:
- GET /plants/catalog — Catalog names, filtered by ?q=
- GET /plants/info/<info_id> — Reference record for a species
- GET /plants/card/<garden_index>/<cell_index> — Info card for a placed plant
- GET /plants/health — Reference index status
"""

from flask import Blueprint, request, jsonify

from models import EMPTY
from plant_info import build_info_card
from routes.main import get_planner, error_response

plants_bp = Blueprint('plants', __name__, url_prefix='/plants')


@plants_bp.route('/catalog')
def catalog():
    """Filtered catalog names (JSON API)."""
    query = request.args.get('q', '')
    return jsonify({'success': True, 'plants': get_planner().list_catalog(query)})


@plants_bp.route('/info/<info_id>')
def info(info_id):
    """Reference record for an id; 404 carries the fallback card."""
    record = get_planner().lookup_info(info_id)
    if record is None:
        card = build_info_card(info_id, info_id, None)
        return jsonify({'success': False, 'error': card['message'], 'card': card}), 404
    return jsonify({'success': True, 'info': record.to_dict()})


@plants_bp.route('/card/<int:garden_index>/<int:cell_index>')
def card(garden_index, cell_index):
    """Info card for the plant in a cell."""
    planner = get_planner()
    try:
        plant = planner.gardens.get(garden_index).cell(cell_index)
    except IndexError as e:
        return error_response(str(e), 404)

    if plant is EMPTY:
        return error_response('Cell is empty', 404)
    return jsonify({'success': True, 'plant': plant.to_dict(), 'card': planner.info_card(plant)})


@plants_bp.route('/health')
def health():
    """Reference index status (JSON API)."""
    count = len(get_planner().info_index)
    return jsonify({
        'success': count > 0,
        'message': f"Plant info OK ({count} records)" if count else "Plant info unavailable",
        'count': count,
    })
