from flask import Blueprint, current_app, jsonify, request
from werkzeug.exceptions import HTTPException
from game_manager.services.games import ValidationError

main = Blueprint('main', __name__)

ENDPOINTS = [
    'GET /api/games - Get all games',
    'GET /api/games/:id - Get game by ID',
    'POST /api/games - Create new game',
    'PUT /api/games/:id - Update game',
    'DELETE /api/games/:id - Delete game',
    'PATCH /api/games/:id/favorite - Toggle favorite status',
]


def _is_api_path(path):
    return path == '/api' or path.startswith('/api/')


@main.route('/')
def index():
    return jsonify({
        'message': 'Game Manager API is running!',
        'version': current_app.config.get('API_VERSION', '1.0.0'),
        'endpoints': ENDPOINTS,
    })


@main.app_errorhandler(ValidationError)
def handle_validation_error(err):
    fields = ','.join(d['field'] for d in err.details)
    current_app.logger.info(f"[validation] {request.method} {request.path} rejected fields={fields}")
    return jsonify(err.to_dict()), 400


# Unknown methods on known paths are reported like unknown paths
@main.app_errorhandler(404)
@main.app_errorhandler(405)
def handle_not_found(_err):
    if _is_api_path(request.path):
        return jsonify({'message': 'API endpoint not found. Available endpoints: /games, /games/:id'}), 404
    return jsonify({'message': 'Route not found. Please use /api endpoints'}), 404


@main.app_errorhandler(Exception)
def handle_unexpected_error(err):
    if isinstance(err, HTTPException):
        return jsonify({'message': err.description}), err.code
    current_app.logger.exception(f"[error] {request.method} {request.path} failed: {err}")
    return jsonify({
        'message': 'Internal server error',
        'error': str(err),
    }), 500
