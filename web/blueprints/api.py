"""
API Blueprint - JSON endpoints for team selection and package comparison
"""

from flask import Blueprint, request, jsonify

from config import planner_config as cfg
from config.logging_config import get_logger
from planner.loader import DatasetLoadError
from web.services import comparison

log = get_logger(__name__)

api_bp = Blueprint('api', __name__)


class BadRequest(Exception):
    pass


def _selected_teams(data):
    """Validate the "teams" field: a list of names or {"name": ...} objects."""
    teams = data.get('teams', [])
    if not isinstance(teams, list):
        raise BadRequest('"teams" must be a list')
    for team in teams:
        if isinstance(team, dict):
            if not isinstance(team.get('name'), str):
                raise BadRequest('Each team object needs a "name" string')
        elif not isinstance(team, str):
            raise BadRequest('Teams must be names or objects with a name')
    return teams


def _json_body():
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise BadRequest('Request body must be a JSON object')
    return data


@api_bp.errorhandler(BadRequest)
def bad_request(e):
    return jsonify({'error': str(e)}), 400


@api_bp.errorhandler(DatasetLoadError)
def dataset_unavailable(e):
    log.error(f"Dataset load failed: {e}")
    return jsonify({'error': 'Datasets unavailable', 'source': e.source}), 503


@api_bp.route('/api/health')
def api_health():
    return jsonify({'status': 'ok'})


@api_bp.route('/api/teams')
def api_teams():
    """All selectable teams"""
    return jsonify({'teams': comparison.get_team_list()})


@api_bp.route('/api/rankings', methods=['POST'])
def api_rankings():
    """Rank packages and combinations for the posted teams"""
    data = _json_body()
    teams = _selected_teams(data)

    max_size = data.get('max_combination_size')
    if max_size is not None:
        if isinstance(max_size, bool) or not isinstance(max_size, int):
            raise BadRequest('"max_combination_size" must be an integer')
        if not 0 <= max_size <= cfg.MAX_COMBINATION_SIZE:
            raise BadRequest(f'"max_combination_size" must be between 0 and {cfg.MAX_COMBINATION_SIZE}')

    return jsonify(comparison.build_rankings(teams, max_combination_size=max_size))


@api_bp.route('/api/schedule', methods=['POST'])
def api_schedule():
    """Match schedule with package availability for the posted teams"""
    data = _json_body()
    return jsonify(comparison.build_schedule(_selected_teams(data)))
