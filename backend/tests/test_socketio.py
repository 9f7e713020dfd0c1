from arcade import socketio
from arcade.models import generate_key
from arcade.services import SocketIONotifier


def events(test_client, name):
    return [pkt['args'][0] for pkt in test_client.get_received('/ws') if pkt['name'] == name]


def test_connect_with_empty_store_receives_nothing(connect_ws):
    sio_client = connect_ws()
    assert sio_client.is_connected('/ws')
    assert sio_client.get_received('/ws') == []


def test_connect_replays_games_and_stats(client, connect_ws, make_game, make_player):
    game = make_game('Pinball', 2)
    ace = make_player('ace')
    client.post(f"/players/{ace['id']}/publishstats",
                json={'gameId': game['id'], 'ticketsEarned': 3, 'highScore': 42})

    sio_client = connect_ws()
    received = sio_client.get_received('/ws')
    by_name = {pkt['name']: pkt['args'][0] for pkt in received}
    assert by_name['games'] == {'games': [game]}
    assert by_name['stats'] == {'stats': [{
        'screenName': 'ace',
        'gameStats': [{'gameId': game['id'], 'ticketsEarned': 3, 'gamesPlayed': 1, 'highScore': 42}],
    }]}


def test_replay_only_goes_to_new_subscriber(connect_ws, make_game):
    make_game()
    first = connect_ws()
    first.get_received('/ws')
    connect_ws()
    assert first.get_received('/ws') == []


def test_resync_replays_on_demand(connect_ws, make_game):
    sio_client = connect_ws()
    sio_client.get_received('/ws')
    game = make_game()
    sio_client.emit('resync', namespace='/ws')
    assert events(sio_client, 'games') == [{'games': [game]}]


def test_mutations_push_to_all_subscribers(client, services, connect_ws):
    services.fanout.notifier = SocketIONotifier(socketio, '/ws')
    first, second = connect_ws(), connect_ws()

    game = client.post('/games/create', json={'name': 'Galaga', 'tokenCost': 1}).get_json()
    assert events(first, 'games') == [{'games': [game]}]
    assert events(second, 'games') == [{'games': [game]}]

    ace = client.post('/players/create',
                      json={'firstName': 'A', 'lastName': 'B', 'screenName': 'ace'}).get_json()
    client.post(f"/players/{ace['id']}/publishstats",
                json={'gameId': generate_key(), 'ticketsEarned': 1, 'highScore': 7})
    assert len(events(first, 'stats')) == 1
    assert len(events(second, 'stats')) == 1
