"""Game domain services: payload validation and the game store.

Routes import from here so that transport concerns stay separate from the
rules about what a valid game is and how records are kept.
"""

from .repository import GameRepository, InMemoryGameRepository
from .validation import ValidationError, ensure_valid_game_data, validate_game_data

__all__ = [
    'GameRepository',
    'InMemoryGameRepository',
    'ValidationError',
    'ensure_valid_game_data',
    'validate_game_data',
]
