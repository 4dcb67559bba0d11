"""
Pluggable pricing and bonus rules.

Both are plain functions handed to ``analyze_sales_data``; any callable with
the same signature can replace them.
"""

from decimal import Decimal
from typing import Callable, Optional

from app.models import LineItem, Product, SellerStats

# (item, product) -> line revenue net of discount
RevenueStrategy = Callable[[LineItem, Optional[Product]], Decimal]

# (zero-based rank index, seller count, stats) -> bonus RATE, not amount
BonusStrategy = Callable[[int, int, SellerStats], Decimal]

_HUNDRED = Decimal("100")

FIRST_PLACE_RATE = Decimal("0.15")
RUNNER_UP_RATE = Decimal("0.10")
LAST_PLACE_RATE = Decimal("0.00")
DEFAULT_RATE = Decimal("0.05")


def calculate_simple_revenue(item: LineItem, product: Optional[Product] = None) -> Decimal:
    """Revenue for one line: sale_price × quantity × (1 - discount / 100).

    The discount is not clamped, so a discount above 100 yields negative revenue.
    """
    return item.sale_price * item.quantity * (1 - item.discount / _HUNDRED)


def calculate_bonus_by_profit(index: int, total: int, seller: SellerStats) -> Decimal:
    """Bonus rate for the seller at ``index`` in the profit-descending ranking.

    Branches are checked top-down, so a lone seller (first and last at once)
    gets the first-place rate and index 1 of 2 gets the runner-up rate.
    """
    if index == 0:
        return FIRST_PLACE_RATE
    elif index in (1, 2):
        return RUNNER_UP_RATE
    elif index == total - 1:
        return LAST_PLACE_RATE
    else:
        return DEFAULT_RATE
