"""
app.py — Flask entry point for the garden planner.

Initializes the Flask app, loads the plant reference dataset into a
GardenPlanner held in app.extensions, and registers all route blueprints.

Run: python app.py → localhost:5000
"""

import os
from flask import Flask, jsonify
from flask_wtf.csrf import CSRFProtect
from werkzeug.exceptions import HTTPException

from planner import GardenPlanner
from plant_info import PlantInfoIndex, get_plant_info_path
from routes.main import main_bp
from routes.gardens import gardens_bp
from routes.plants import plants_bp
from routes.export import export_bp


def create_app(test_config=None):
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.secret_key = 'garden-planner-local-app-secret-key'
    app.config['WTF_CSRF_CHECK_DEFAULT'] = True
    app.config['PLANT_INFO_PATH'] = get_plant_info_path()

    if test_config:
        app.config.update(test_config)

    CSRFProtect(app)

    # Missing reference data only degrades info cards
    info_index = PlantInfoIndex.from_csv(app.config['PLANT_INFO_PATH'])
    if len(info_index) == 0:
        app.logger.warning("Plant info index is empty; info cards will show no details")
    app.extensions['garden_planner'] = GardenPlanner(info_index)

    # Register blueprints
    app.register_blueprint(main_bp)
    app.register_blueprint(gardens_bp)
    app.register_blueprint(plants_bp)
    app.register_blueprint(export_bp)

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        """Unexpected errors use the same JSON envelope as the routes."""
        if isinstance(e, HTTPException):
            return e
        app.logger.exception("Unhandled error: %s", e)
        return jsonify({'success': False, 'error': str(e)}), 500

    return app


if __name__ == '__main__':
    app = create_app()
    # Debug mode: enabled by default for development (auto-reload on file changes)
    # Set FLASK_DEBUG=0 to disable
    debug = os.environ.get('FLASK_DEBUG', '1') != '0'
    app.run(host='localhost', port=5000, debug=debug)
