"""Realtime fan-out of game and leaderboard snapshots.

Snapshots are always rebuilt from the store and pushed whole; nothing is
diffed or cached between calls. Failures are logged and never reach the
request that triggered the broadcast.
"""
import logging
from typing import Any, Dict, List, Optional, Protocol

from arcade.models import Game, Player

logger = logging.getLogger(__name__)

GAMES_EVENT = 'games'
STATS_EVENT = 'stats'


class Notifier(Protocol):
    def publish(self, event: str, payload: Dict[str, Any]) -> None:
        ...


class SocketIONotifier:
    """Publishes to every client on a Socket.IO namespace, or to one sid."""

    def __init__(self, socketio, namespace: str = '/ws', to: Optional[str] = None):
        self.socketio = socketio
        self.namespace = namespace
        self.to = to

    def publish(self, event, payload):
        self.socketio.emit(event, payload, namespace=self.namespace, to=self.to)


def leaderboard_entry(player: Player) -> Dict[str, Any]:
    stats = sorted(player.game_stats or [], key=lambda s: s['highScore'], reverse=True)
    return {'screenName': player.screen_name, 'gameStats': stats}


class FanOut:
    def __init__(self, store, notifier: Notifier):
        self.store = store
        self.notifier = notifier

    def broadcast_games(self, notifier: Optional[Notifier] = None) -> None:
        target = notifier or self.notifier
        try:
            games = self.store.all(Game)
            if games:
                target.publish(GAMES_EVENT, {'games': [g.to_dict() for g in games]})
        except Exception:
            logger.exception('[fanout] games broadcast failed')

    def broadcast_stats(self, notifier: Optional[Notifier] = None) -> None:
        target = notifier or self.notifier
        try:
            stats: List[Dict[str, Any]] = [
                leaderboard_entry(p) for p in self.store.all(Player) if p.game_stats
            ]
            if stats:
                target.publish(STATS_EVENT, {'stats': stats})
        except Exception:
            logger.exception('[fanout] stats broadcast failed')

    def replay(self, notifier: Optional[Notifier] = None) -> None:
        """Initial sync for a newly connected subscriber."""
        self.broadcast_games(notifier)
        self.broadcast_stats(notifier)
