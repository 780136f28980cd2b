from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List, Optional


@dataclass(frozen=True)
class UnitPrice:
    """``value`` units of ``quote`` received per 1 unit of ``base`` on ``venue``."""

    value: Decimal
    base: str
    quote: str
    venue: str

    def is_reverse_of(self, other: "UnitPrice") -> bool:
        return self.base == other.quote and self.quote == other.base


@dataclass(frozen=True)
class PoolPriceSnapshot:
    base_to_quote: Optional[UnitPrice] = None
    quote_to_base: Optional[UnitPrice] = None
    pool_key: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.base_to_quote is None and self.quote_to_base is None


@dataclass(frozen=True)
class SpreadResult:
    label: str
    buy_venue: str
    sell_venue: str
    buy_price: UnitPrice
    sell_price: UnitPrice
    inverse_buy: Decimal
    spread_pct: Decimal
    profitable: bool
    units_consistent: bool


@dataclass(frozen=True)
class RoundTrip:
    label: str
    buy: Optional[UnitPrice]
    sell: Optional[UnitPrice]
    result: Optional[SpreadResult]

    @property
    def missing(self) -> List[str]:
        return [side for side, price in (("buy", self.buy), ("sell", self.sell)) if price is None]


@dataclass(frozen=True)
class SimulationReport:
    pair: str
    quote_base_to_quote: Optional[UnitPrice]
    quote_quote_to_base: Optional[UnitPrice]
    pool: PoolPriceSnapshot
    round_trips: List[RoundTrip] = field(default_factory=list)

    @property
    def spreads(self) -> Dict[str, Optional[SpreadResult]]:
        return {trip.label: trip.result for trip in self.round_trips}

    @property
    def computed(self) -> Dict[str, SpreadResult]:
        return {label: result for label, result in self.spreads.items() if result is not None}
