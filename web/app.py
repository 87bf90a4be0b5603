#!/usr/bin/env python3
"""
Stream Package Planner - Web API

Flask app serving team lists, package rankings and match schedules as JSON
for the comparison frontend.
"""

import sys
from pathlib import Path

# Project root for config.* and planner.* imports when run as a script
base_dir = Path(__file__).parent.parent
sys.path.insert(0, str(base_dir))

from flask import Flask, jsonify

from config.logging_config import get_logger
from web.blueprints import api_bp

log = get_logger(__name__)


def create_app():
    app = Flask(__name__)
    app.json.ensure_ascii = False
    app.register_blueprint(api_bp)

    # ============================================
    # Error Handlers
    # ============================================

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({'error': 'Not found'}), 404

    @app.errorhandler(500)
    def server_error(e):
        log.error(f"Unhandled error: {e}")
        return jsonify({'error': 'Internal server error'}), 500

    return app


app = create_app()

# ============================================
# Main
# ============================================

if __name__ == '__main__':
    print("Stream Package Planner API")
    print("=" * 40)
    print("Running on http://0.0.0.0:5000")
    print("Press Ctrl+C to stop")
    print()
    app.run(host='0.0.0.0', port=5000, debug=False)
