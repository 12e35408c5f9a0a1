from game_manager.models import SEED_GAMES
from game_manager.services.games import InMemoryGameRepository


def test_seeded_store_starts_counter_after_seed(valid_game):
    repo = InMemoryGameRepository(SEED_GAMES)
    assert repo.count() == 2
    assert repo.create_game(valid_game).id == '3'


def test_empty_store_starts_at_one(valid_game):
    repo = InMemoryGameRepository()
    game = repo.create_game(valid_game)
    assert game.id == '1'
    assert game.is_favorite is False
    assert repo.list_games() == [game]


def test_lookup_is_exact_string_match():
    repo = InMemoryGameRepository(SEED_GAMES)
    assert repo.get_game('1').title.startswith('The Legend of Zelda')
    assert repo.get_game('01') is None
    assert repo.get_game(' 1') is None


def test_update_keeps_id_and_favorite(valid_game):
    repo = InMemoryGameRepository(SEED_GAMES)
    game = repo.update_game('1', dict(valid_game, isFavorite=False))
    assert game.id == '1'
    assert game.is_favorite is True
    assert game.title == valid_game['title']
    assert game.release_date == valid_game['releaseDate']


def test_missing_ids_return_not_found_signals(valid_game):
    repo = InMemoryGameRepository(SEED_GAMES)
    assert repo.update_game('9', valid_game) is None
    assert repo.toggle_favorite('9') is None
    assert repo.delete_game('9') is False
    assert [g.id for g in repo.list_games()] == ['1', '2']


def test_delete_keeps_remaining_order(valid_game):
    repo = InMemoryGameRepository(SEED_GAMES)
    repo.create_game(valid_game)
    assert repo.delete_game('2') is True
    assert [g.id for g in repo.list_games()] == ['1', '3']
    assert repo.create_game(valid_game).id == '4'


def test_list_returns_a_copy():
    repo = InMemoryGameRepository(SEED_GAMES)
    repo.list_games().clear()
    assert repo.count() == 2


def test_reset_restores_seed(valid_game):
    repo = InMemoryGameRepository(SEED_GAMES)
    repo.create_game(valid_game)
    repo.toggle_favorite('1')
    repo.reset(SEED_GAMES)
    assert repo.count() == 2
    assert repo.get_game('1').is_favorite is True
    assert repo.create_game(valid_game).id == '3'


def test_init_app_without_seed(flask_app):
    class Unseeded:
        SEED_GAMES = False

    repo = InMemoryGameRepository(SEED_GAMES)
    flask_app.config.from_object(Unseeded)
    repo.init_app(flask_app)
    assert repo.count() == 0
    assert flask_app.extensions['game_repository'] is repo
