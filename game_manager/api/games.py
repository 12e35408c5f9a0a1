from flask import Blueprint, jsonify, request, current_app
from game_manager.services.games import ensure_valid_game_data


games = Blueprint('games', __name__)


def _store():
    return current_app.extensions['game_repository']


def _not_found(game_id):
    return jsonify({
        'message': f'404 Not Found : No such game found with id {game_id}'
    }), 404


# strict_slashes=False: /api/games and /api/games/ are the same route
@games.route('/', methods=['GET'], strict_slashes=False)
def list_games():
    return jsonify([game.to_dict() for game in _store().list_games()])


@games.route('/<string:game_id>/', methods=['GET'], strict_slashes=False)
def get_game(game_id):
    game = _store().get_game(game_id)
    if game is None:
        return _not_found(game_id)
    return jsonify(game.to_dict())


@games.route('/', methods=['POST'], strict_slashes=False)
def create_game():
    data = ensure_valid_game_data(request.get_json(silent=True))
    new_game = _store().create_game(data)
    current_app.logger.info(f"[create] game={new_game.id} title={new_game.title!r}")
    return jsonify(new_game.to_dict()), 201


@games.route('/<string:game_id>/', methods=['PUT'], strict_slashes=False)
def update_game(game_id):
    # Payload is checked before the id, so a bad body on a missing game is a 400
    data = ensure_valid_game_data(request.get_json(silent=True))
    game = _store().update_game(game_id, data)
    if game is None:
        return _not_found(game_id)
    current_app.logger.info(f"[update] game={game.id}")
    return jsonify(game.to_dict())


@games.route('/<string:game_id>/', methods=['DELETE'], strict_slashes=False)
def delete_game(game_id):
    if not _store().delete_game(game_id):
        return _not_found(game_id)
    current_app.logger.info(f"[delete] game={game_id}")
    return jsonify({'message': 'Game deleted successfully'})


@games.route('/<string:game_id>/favorite/', methods=['PATCH'], strict_slashes=False)
def toggle_favorite(game_id):
    game = _store().toggle_favorite(game_id)
    if game is None:
        return _not_found(game_id)
    current_app.logger.info(f"[favorite] game={game.id} is_favorite={game.is_favorite}")
    return jsonify(game.to_dict())
