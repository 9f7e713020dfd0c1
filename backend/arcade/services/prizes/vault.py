import logging

from arcade.errors import NotFound
from arcade.models import Prize
from arcade.services.validation import check_key, is_present, patch_fields, require, to_number
from .redemption import PRIZE_NOT_FOUND, PrizeRedemption

logger = logging.getLogger(__name__)


def _ticket_cost(value):
    return to_number(value, 'ticketCost', minimum=0, integer=True)


def _quantity(value):
    return to_number(value, 'availableQuantity', minimum=0, integer=True)


COERCERS = {'ticketCost': _ticket_cost, 'availableQuantity': _quantity}


class PrizeVault:
    def __init__(self, store, players, optimistic_locking=True, compensation=False):
        self.store = store
        self.redemption = PrizeRedemption(store, players, optimistic_locking, compensation)

    def create(self, data):
        require(data, ('name', 'ticketCost', 'availableQuantity'),
                'A name, ticket cost, and quantity are required to create a prize!')
        fields = {
            'name': data['name'],
            'ticket_cost': _ticket_cost(data['ticketCost']),
            'available_quantity': _quantity(data['availableQuantity']),
        }
        for optional in ('description', 'image'):
            if is_present(data.get(optional)):
                fields[optional] = data[optional]
        prize = self.store.insert(Prize, fields)
        logger.info(f"[prize-create] prize={prize.id} name={prize.name} stock={prize.available_quantity}")
        return prize

    def get(self, key):
        check_key(key)
        prize = self.store.get(Prize, key)
        if prize is None:
            raise NotFound(PRIZE_NOT_FOUND)
        return prize

    def list(self):
        return self.store.all(Prize)

    def update(self, key, data):
        # A missing prize is NotFound, same as game and player updates
        check_key(key)
        fields = patch_fields(Prize, data, COERCERS)
        if not fields:
            return self.get(key)
        prize = self.store.update(Prize, key, fields)
        if prize is None:
            raise NotFound(PRIZE_NOT_FOUND)
        return prize

    def redeem(self, key, data):
        return self.redemption(key, data.get('playerId'))

    def delete(self, key):
        check_key(key)
        self.store.delete(Prize, key)
        return f'Deleted prize {key}.'
