from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional

from game_manager.models import Game, SEED_GAMES


class GameRepository(ABC):
    """Storage boundary for game records.

    Routes only talk to this interface, so a database-backed store can
    replace the in-memory one without touching the HTTP layer.
    """

    @abstractmethod
    def list_games(self) -> List[Game]:
        ...

    @abstractmethod
    def get_game(self, game_id: str) -> Optional[Game]:
        ...

    @abstractmethod
    def create_game(self, data: Dict[str, Any]) -> Game:
        ...

    @abstractmethod
    def update_game(self, game_id: str, data: Dict[str, Any]) -> Optional[Game]:
        ...

    @abstractmethod
    def delete_game(self, game_id: str) -> bool:
        ...

    @abstractmethod
    def toggle_favorite(self, game_id: str) -> Optional[Game]:
        ...


class InMemoryGameRepository(GameRepository):
    """Keeps games in a list, in insertion order, for the life of the process.

    Ids come from a counter that only ever moves forward, so an id freed by a
    delete is never handed out again. Callers are expected to pass payloads
    that already went through ``validate_game_data``.
    """

    def __init__(self, seed: Iterable[Dict[str, Any]] = ()) -> None:
        self._games: List[Game] = []
        self._next_id = 1
        self.reset(seed)

    def init_app(self, app) -> None:
        seed = SEED_GAMES if app.config.get('SEED_GAMES', True) else ()
        self.reset(seed)
        app.extensions['game_repository'] = self

    def reset(self, seed: Iterable[Dict[str, Any]] = ()) -> None:
        self._games = [Game.from_dict(record) for record in seed]
        numeric_ids = [int(g.id) for g in self._games if g.id.isdigit()]
        self._next_id = max(numeric_ids, default=0) + 1

    def count(self) -> int:
        return len(self._games)

    def _index_of(self, game_id: str) -> int:
        for idx, game in enumerate(self._games):
            if game.id == game_id:
                return idx
        return -1

    def list_games(self) -> List[Game]:
        return list(self._games)

    def get_game(self, game_id: str) -> Optional[Game]:
        idx = self._index_of(game_id)
        return self._games[idx] if idx != -1 else None

    def create_game(self, data: Dict[str, Any]) -> Game:
        game = Game(
            id=str(self._next_id),
            title=data['title'],
            description=data['description'],
            genre=data['genre'],
            platform=data['platform'],
            rating=data['rating'],
            release_date=data['releaseDate'],
            image_url=data['imageUrl'],
            is_favorite=False,
        )
        self._games.append(game)
        self._next_id += 1
        return game

    def update_game(self, game_id: str, data: Dict[str, Any]) -> Optional[Game]:
        game = self.get_game(game_id)
        if game is None:
            return None
        game.apply(data)
        return game

    def delete_game(self, game_id: str) -> bool:
        idx = self._index_of(game_id)
        if idx == -1:
            return False
        del self._games[idx]
        return True

    def toggle_favorite(self, game_id: str) -> Optional[Game]:
        game = self.get_game(game_id)
        if game is None:
            return None
        game.is_favorite = not game.is_favorite
        return game
