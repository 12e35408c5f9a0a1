from flask import Flask
from flask_cors import CORS
from config import Config
from game_manager.services.games import InMemoryGameRepository

# Process-wide game store, reseeded every time an app is created
games_store = InMemoryGameRepository()


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))
    # Keep game fields in declaration order in responses
    flask_app.json.sort_keys = False

    games_store.init_app(flask_app)
    # Origins come from CORS_ORIGINS in the config
    CORS(flask_app)

    # Import and register blueprints here
    from game_manager.main import main
    flask_app.register_blueprint(main)

    from game_manager.api.games import games
    flask_app.register_blueprint(games, url_prefix='/api/games')

    flask_app.logger.debug(f"[init] {games_store.count()} games loaded")
    return flask_app
