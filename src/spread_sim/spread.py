"""Round-trip spread between a buy venue and a sell venue.

The buy price is quoted base->quote (quote received per base). Its reciprocal
is the amount of base obtained per unit of quote, and the sell price is
compared against that reciprocal. The comparison is only dimensionally sound
when the sell price is quoted in the reverse direction (base received per
quote); any other pairing is still computed but marked ``units_consistent``
False.
"""

import logging
from decimal import Decimal
from typing import Optional

from .models import SpreadResult, UnitPrice

logger = logging.getLogger(__name__)

HUNDRED = Decimal(100)


def _pct_over(sell_value: Decimal, inverse_buy: Decimal) -> Decimal:
    return ((sell_value - inverse_buy) / inverse_buy) * HUNDRED


def spread_pct(buy_value: Decimal, sell_value: Decimal) -> Decimal:
    if buy_value <= 0:
        raise ValueError("buy price must be strictly positive")
    return _pct_over(sell_value, Decimal(1) / buy_value)


def evaluate(buy: Optional[UnitPrice], sell: Optional[UnitPrice], label: str = "") -> Optional[SpreadResult]:
    if buy is None or sell is None:
        return None
    if buy.value <= 0:
        return None

    label = label or f"{buy.venue} -> {sell.venue}"
    units_consistent = sell.is_reverse_of(buy)
    if not units_consistent:
        logger.warning(
            "unit mismatch for %s: buy is %s per %s, sell is %s per %s",
            label,
            buy.quote,
            buy.base,
            sell.quote,
            sell.base,
        )

    inverse_buy = Decimal(1) / buy.value
    pct = _pct_over(sell.value, inverse_buy)
    return SpreadResult(
        label=label,
        buy_venue=buy.venue,
        sell_venue=sell.venue,
        buy_price=buy,
        sell_price=sell,
        inverse_buy=inverse_buy,
        spread_pct=pct,
        profitable=pct > 0,
        units_consistent=units_consistent,
    )
