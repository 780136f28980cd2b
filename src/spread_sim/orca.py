import logging
from typing import Any, Dict, Optional, Tuple

from .models import PoolPriceSnapshot, UnitPrice
from .normalizer import to_decimal_price

logger = logging.getLogger(__name__)


class OrcaClient:
    def __init__(self, endpoint: str, venue: str = "orca") -> None:
        self.endpoint = endpoint.rstrip("/")
        self.venue = venue

    @staticmethod
    def pair_keys(base: str, quote: str) -> Tuple[str, str]:
        return f"{base}/{quote}", f"{quote}/{base}"

    def find_pool(self, pools: Dict[str, Any], base: str, quote: str) -> Tuple[Optional[str], Optional[Dict[str, Any]]]:
        for key in self.pair_keys(base, quote):
            pool = pools.get(key)
            if pool:
                if not isinstance(pool, dict):
                    raise ValueError(f"Orca pool entry {key} is not an object")
                return key, pool
        return None, None

    @staticmethod
    def _token_price(pool: Dict[str, Any], token_key: str, fallback_key: str) -> Any:
        token = pool.get(token_key)
        if isinstance(token, dict) and token.get("price"):
            return token["price"]
        return pool.get(fallback_key)

    def _unit_price(self, raw: Any, base: str, quote: str) -> Optional[UnitPrice]:
        value = to_decimal_price(raw)
        if value is None:
            return None
        return UnitPrice(value=value, base=base, quote=quote, venue=self.venue)

    def parse_snapshot(self, pools: Dict[str, Any], base: str, quote: str) -> PoolPriceSnapshot:
        if not isinstance(pools, dict):
            raise ValueError("Orca pool listing is not an object")

        key, pool = self.find_pool(pools, base, quote)
        if pool is None:
            logger.warning("could not find %s/%s pool in %s listing", base, quote, self.venue)
            return PoolPriceSnapshot()

        # token A prices base->quote under either key order
        token_a = self._token_price(pool, "tokenA", "inputTokenPrice")
        token_b = self._token_price(pool, "tokenB", "outputTokenPrice")
        return PoolPriceSnapshot(
            base_to_quote=self._unit_price(token_a, base, quote),
            quote_to_base=self._unit_price(token_b, quote, base),
            pool_key=key,
        )
