from unittest import mock

import pytest

from arcade.errors import InvalidId, ProtectedFieldError, StoreError
from arcade.models import generate_key
from arcade.services.catalog import GameCatalog
from arcade.services.fanout import FanOut
from arcade.services.players import PlayerLedger
from arcade.services.prizes import PrizeVault

BAD_IDS = ['', 'abc', '123', 'Z' * 32, generate_key().upper(), generate_key() + '0']


@pytest.fixture()
def spy_store():
    return mock.Mock()


@pytest.fixture()
def ledger(spy_store):
    return PlayerLedger(spy_store, mock.Mock())


@pytest.mark.parametrize('bad_id', BAD_IDS)
def test_invalid_ids_never_reach_the_store(spy_store, ledger, bad_id):
    fanout = mock.Mock()
    games = GameCatalog(spy_store, fanout)
    prizes = PrizeVault(spy_store, ledger)
    calls = [
        lambda: games.get(bad_id),
        lambda: games.update(bad_id, {'name': 'x'}),
        lambda: games.delete(bad_id),
        lambda: ledger.get(bad_id),
        lambda: ledger.update(bad_id, {'firstName': 'x'}),
        lambda: ledger.delete(bad_id),
        lambda: ledger.publish_stats(bad_id, {'gameId': generate_key(), 'ticketsEarned': 1, 'highScore': 1}),
        lambda: prizes.get(bad_id),
        lambda: prizes.update(bad_id, {'name': 'x'}),
        lambda: prizes.delete(bad_id),
        lambda: prizes.redeem(bad_id, {'playerId': 'CARD-1'}),
    ]
    for call in calls:
        with pytest.raises(InvalidId):
            call()
    assert spy_store.method_calls == []
    assert fanout.method_calls == []


def test_protected_field_rejected_before_store(spy_store, ledger):
    with pytest.raises(ProtectedFieldError) as info:
        ledger.update(generate_key(), {'gameStats': []})
    assert info.value.status_code == 400
    assert spy_store.method_calls == []


def test_broadcast_failures_are_swallowed(caplog):
    store = mock.Mock()
    store.all.side_effect = StoreError()
    notifier = mock.Mock()
    fanout = FanOut(store, notifier)
    fanout.broadcast_games()
    fanout.broadcast_stats()
    fanout.replay()
    notifier.publish.assert_not_called()
    assert 'games broadcast failed' in caplog.text
    assert 'stats broadcast failed' in caplog.text


def test_notifier_failures_are_swallowed():
    store = mock.Mock()
    store.all.return_value = [mock.Mock(to_dict=lambda: {'id': 'g'})]
    notifier = mock.Mock()
    notifier.publish.side_effect = RuntimeError('socket gone')
    FanOut(store, notifier).broadcast_games()
    notifier.publish.assert_called_once_with('games', {'games': [{'id': 'g'}]})


def test_empty_snapshots_are_not_pushed():
    store = mock.Mock()
    store.all.return_value = []
    notifier = mock.Mock()
    FanOut(store, notifier).replay()
    notifier.publish.assert_not_called()


def test_stats_snapshot_skips_players_without_stats():
    played = mock.Mock(screen_name='ace', game_stats=[
        {'gameId': 'g1', 'highScore': 10}, {'gameId': 'g2', 'highScore': 40},
    ])
    idle = mock.Mock(screen_name='idle', game_stats=[])
    store = mock.Mock()
    store.all.return_value = [played, idle]
    notifier = mock.Mock()
    FanOut(store, notifier).broadcast_stats()
    notifier.publish.assert_called_once_with('stats', {'stats': [{
        'screenName': 'ace',
        'gameStats': [{'gameId': 'g2', 'highScore': 40}, {'gameId': 'g1', 'highScore': 10}],
    }]})
