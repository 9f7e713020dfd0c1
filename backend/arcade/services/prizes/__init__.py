from .redemption import PrizeRedemption, RedemptionPlan
from .vault import PrizeVault

__all__ = ['PrizeRedemption', 'PrizeVault', 'RedemptionPlan']
