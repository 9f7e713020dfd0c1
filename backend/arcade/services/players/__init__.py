"""Player ledger: player records, ticket balances and per-game stats.

``stats`` holds the pure merge of a gameplay result into a player's stats so
it can be exercised without a store; ``ledger`` wraps it with the
load / merge / write cycle.
"""
from .ledger import PlayerLedger
from .stats import fold_game_result

__all__ = ['PlayerLedger', 'fold_game_result']
