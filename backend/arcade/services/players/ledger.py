import logging

from arcade.errors import NotFound, ProtectedFieldError
from arcade.models import Player, is_valid_key
from arcade.services.validation import check_key, is_present, patch_fields, require, to_number
from .stats import fold_game_result

logger = logging.getLogger(__name__)

NOT_FOUND = 'Could not find a player with the specified ID!'


def _count(field):
    return lambda value: to_number(value, field, minimum=0, integer=True)


COERCERS = {'playerId': str, 'tokens': _count('tokens'), 'tickets': _count('tickets')}


class PlayerLedger:
    def __init__(self, store, fanout, optimistic_locking=True):
        self.store = store
        self.fanout = fanout
        self.optimistic_locking = optimistic_locking

    def create(self, data):
        require(data, ('firstName', 'lastName', 'screenName'),
                'A first name, last name, and screen name are required to create a player!')
        fields = {
            'first_name': data['firstName'],
            'last_name': data['lastName'],
            'screen_name': data['screenName'],
            'tickets': 0,
            'game_stats': [],
        }
        if is_present(data.get('playerId')):
            fields['player_id'] = COERCERS['playerId'](data['playerId'])
        if is_present(data.get('tokens')):
            fields['tokens'] = COERCERS['tokens'](data['tokens'])
        player = self.store.insert(Player, fields)
        logger.info(f"[player-create] player={player.id} screen_name={player.screen_name}")
        return player

    def get(self, key):
        check_key(key)
        player = self.store.get(Player, key)
        if player is None:
            raise NotFound(NOT_FOUND)
        return player

    def find(self, reference):
        """Resolve a caller-supplied playerId, falling back to the store key."""
        player = self.store.find_one(Player, player_id=str(reference))
        if player is None and is_valid_key(reference):
            player = self.store.get(Player, reference)
        return player

    def list(self):
        return self.store.all(Player)

    def update(self, key, data):
        check_key(key)
        if 'gameStats' in data:
            raise ProtectedFieldError('Cannot update game stats through this request!')
        fields = patch_fields(Player, data, COERCERS)
        if not fields:
            return self.get(key)
        player = self.store.update(Player, key, fields)
        if player is None:
            raise NotFound(NOT_FOUND)
        return player

    def publish_stats(self, key, data):
        check_key(key)
        require(data, ('gameId', 'ticketsEarned', 'highScore'),
                'Game ID, tickets earned, and high score are required to publish stats!')
        game_id = check_key(data['gameId'], 'The specified game ID is invalid!')
        earned = to_number(data['ticketsEarned'], 'ticketsEarned', minimum=0, integer=True)
        high_score = to_number(data['highScore'], 'highScore')

        player = self.get(key)
        tickets, game_stats = fold_game_result(player.tickets, player.game_stats, game_id, earned, high_score)
        expected = player.version if self.optimistic_locking else None
        updated = self.store.update(Player, key, {'tickets': tickets, 'game_stats': game_stats},
                                    expected_version=expected)
        if updated is None:
            raise NotFound(NOT_FOUND)
        logger.info(f"[publish-stats] player={key} game={game_id} earned={earned} tickets={tickets}")
        self.fanout.broadcast_stats()
        return updated

    def delete(self, key):
        check_key(key)
        self.store.delete(Player, key)
        return f'Deleted player {key}.'
