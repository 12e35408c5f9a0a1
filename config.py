import os


def _env_flag(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    # Listening address for run.py
    HOST = os.environ.get('HOST', '127.0.0.1')
    PORT = int(os.environ.get('PORT', '3000'))
    DEBUG = _env_flag('FLASK_DEBUG', False)
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
    # Picked up by flask-cors; any origin by default
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')
    # Load the two example games at start-up
    SEED_GAMES = _env_flag('SEED_GAMES', True)
    API_VERSION = '1.0.0'
