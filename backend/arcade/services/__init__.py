"""Arcade domain services: game catalog, player ledger, prize vault, fan-out.

These are imported by the HTTP blueprints and socket handlers, keeping
transport concerns separated from the ticket economy itself.
"""
from flask import current_app

from .catalog import GameCatalog
from .fanout import FanOut, Notifier, SocketIONotifier
from .players import PlayerLedger
from .prizes import PrizeVault


class ArcadeServices:
    def __init__(self, store, notifier: Notifier, optimistic_locking=True, compensation=False):
        self.store = store
        self.fanout = FanOut(store, notifier)
        self.games = GameCatalog(store, self.fanout)
        self.players = PlayerLedger(store, self.fanout, optimistic_locking)
        self.prizes = PrizeVault(store, self.players, optimistic_locking, compensation)


def get_services() -> ArcadeServices:
    return current_app.extensions['arcade']


__all__ = [
    'ArcadeServices', 'FanOut', 'GameCatalog', 'Notifier', 'PlayerLedger',
    'PrizeVault', 'SocketIONotifier', 'get_services',
]
