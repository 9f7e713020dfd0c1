"""Prize redemption as a two-step saga.

``prepare`` reads the prize and the player and applies the business rules
without writing anything. ``commit`` then debits the player and decrements
the prize as two separate single-record writes, player first.

Failure policy:

- player write fails: nothing changed, the error propagates as is
  (``Conflict`` for a stale version, ``NotFound`` if the player vanished)
- prize sold out since ``prepare``: the player is refunded and the caller
  gets ``Forbidden`` (out of stock)
- prize write fails in the store: the player stays debited and the caller
  gets a ``PartialRedemptionError``; with compensation enabled the player
  is refunded first, but the error is still reported

With optimistic locking on, the player write is checked against its
version and the prize write is a conditional decrement that only applies
while stock remains, so unrelated prize edits never block it. With it off
both writes are unconditional, so two redemptions prepared from the same
reads can both commit.
"""
import logging
from typing import NamedTuple, Optional

from arcade.errors import (
    ArcadeError, Forbidden, NotFound, PartialRedemptionError, StaleRecordError, ValidationError,
)
from arcade.models import Player, Prize
from arcade.services.validation import check_key, is_present

logger = logging.getLogger(__name__)

PRIZE_NOT_FOUND = 'Could not find a prize with the specified ID!'
PLAYER_NOT_FOUND = 'Could not find a player with the specified ID!'


class RedemptionPlan(NamedTuple):
    prize_id: str
    player_key: str
    prize_name: str
    ticket_cost: int
    tickets_after: int
    quantity_after: int
    player_version: Optional[int]


class PrizeRedemption:
    def __init__(self, store, players, optimistic_locking=True, compensation=False):
        self.store = store
        self.players = players
        self.optimistic_locking = optimistic_locking
        self.compensation = compensation

    def __call__(self, prize_id, player_ref) -> Prize:
        return self.commit(self.prepare(prize_id, player_ref))

    def prepare(self, prize_id, player_ref) -> RedemptionPlan:
        check_key(prize_id)
        if not is_present(player_ref):
            raise ValidationError('A player ID is required to redeem a prize!')

        prize = self.store.get(Prize, prize_id)
        if prize is None:
            raise NotFound(PRIZE_NOT_FOUND)
        if prize.available_quantity <= 0:
            raise Forbidden(f'Tried to redeem prize {prize.name} which is out of stock!')

        player = self.players.find(player_ref)
        if player is None:
            raise NotFound(PLAYER_NOT_FOUND)
        remaining = player.tickets - prize.ticket_cost
        if remaining < 0:
            raise Forbidden(f'Player {player.screen_name} does not have enough tickets '
                            f'to redeem prize {prize.name}!')

        return RedemptionPlan(
            prize_id=prize.id,
            player_key=player.id,
            prize_name=prize.name,
            ticket_cost=prize.ticket_cost,
            tickets_after=remaining,
            quantity_after=prize.available_quantity - 1,
            player_version=player.version,
        )

    def commit(self, plan: RedemptionPlan) -> Prize:
        player = self.store.update(Player, plan.player_key, {'tickets': plan.tickets_after},
                                   expected_version=self._expect(plan.player_version))
        if player is None:
            raise NotFound(PLAYER_NOT_FOUND)

        try:
            prize = self._decrement_stock(plan)
            if prize is None:
                raise NotFound(PRIZE_NOT_FOUND)
        except StaleRecordError as exc:
            logger.info(f"[redeem-sold-out] prize={plan.prize_id} player={plan.player_key} lost the last unit")
            if not self._refund(plan):
                raise PartialRedemptionError() from exc
            raise Forbidden(f'Tried to redeem prize {plan.prize_name} which is out of stock!') from exc
        except ArcadeError as exc:
            logger.error(f"[redeem-partial] player={plan.player_key} debited {plan.ticket_cost} "
                         f"but prize={plan.prize_id} was not decremented: {exc.message}")
            if self.compensation:
                self._refund(plan)
            raise PartialRedemptionError() from exc

        logger.info(f"[redeem] prize={plan.prize_id} player={plan.player_key} "
                    f"tickets={plan.tickets_after} remaining_stock={prize.available_quantity}")
        return prize

    def _expect(self, version):
        return version if self.optimistic_locking else None

    def _decrement_stock(self, plan: RedemptionPlan):
        if not self.optimistic_locking:
            return self.store.update(Prize, plan.prize_id, {'available_quantity': plan.quantity_after})
        return self.store.update(Prize, plan.prize_id,
                                 {'available_quantity': Prize.available_quantity - 1},
                                 where=(Prize.available_quantity > 0,))

    def _refund(self, plan: RedemptionPlan) -> bool:
        try:
            self.store.update(Player, plan.player_key, {'tickets': Player.tickets + plan.ticket_cost})
        except ArcadeError:
            logger.exception(f"[redeem-refund] player={plan.player_key} refund failed")
            return False
        logger.info(f"[redeem-refund] player={plan.player_key} refunded {plan.ticket_cost}")
        return True
