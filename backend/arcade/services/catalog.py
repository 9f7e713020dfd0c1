import logging

from arcade.errors import NotFound
from arcade.models import Game
from .validation import check_key, patch_fields, require, to_number

logger = logging.getLogger(__name__)

NOT_FOUND = 'Could not find a game with the specified ID!'


def _token_cost(value):
    return to_number(value, 'tokenCost', minimum=0, exclusive=True)


class GameCatalog:
    def __init__(self, store, fanout):
        self.store = store
        self.fanout = fanout

    def create(self, data):
        require(data, ('name', 'tokenCost'), 'Both a name and token cost are required to create a game!')
        game = self.store.insert(Game, {
            'name': data['name'],
            'token_cost': _token_cost(data['tokenCost']),
        })
        logger.info(f"[game-create] game={game.id} name={game.name}")
        self.fanout.broadcast_games()
        return game

    def get(self, key):
        check_key(key)
        game = self.store.get(Game, key)
        if game is None:
            raise NotFound(NOT_FOUND)
        return game

    def list(self):
        return self.store.all(Game)

    def update(self, key, data):
        check_key(key)
        fields = patch_fields(Game, data, {'tokenCost': _token_cost})
        if not fields:
            game = self.get(key)
        else:
            game = self.store.update(Game, key, fields)
            if game is None:
                raise NotFound(NOT_FOUND)
        self.fanout.broadcast_games()
        return game

    def delete(self, key):
        check_key(key)
        self.store.delete(Game, key)
        self.fanout.broadcast_games()
        return f'Deleted game {key}.'
