import asyncio
import logging
from typing import Optional

from requests import RequestException

from .config import AssetRef, SimulatorConfig
from .http_client import HttpClient
from .jupiter import JupiterClient
from .models import PoolPriceSnapshot, RoundTrip, SimulationReport, UnitPrice
from .normalizer import normalize_quote
from .orca import OrcaClient
from .spread import evaluate

logger = logging.getLogger(__name__)


class SpreadSimulator:
    """Fetches both venues for one pair and evaluates the two round trips.

    Nothing is ever executed; every run is a single read-only batch.
    """

    def __init__(self, config: SimulatorConfig) -> None:
        self.config = config
        self.pair = config.pair
        providers = config.providers
        self.http = HttpClient(timeout=providers.request_timeout, user_agent="spread-sim/1.0")
        self.jupiter = JupiterClient(providers.quote_provider_endpoint)
        self.orca = OrcaClient(providers.pool_provider_endpoint, venue=providers.pool_venue)
        self.quote_venue = providers.quote_venue
        self.pool_venue = providers.pool_venue

    async def fetch_swap_quote(self, input_asset: AssetRef, output_asset: AssetRef, amount: int) -> Optional[int]:
        params = self.jupiter.quote_params(
            in_mint=input_asset.mint,
            out_mint=output_asset.mint,
            amount=amount,
            slippage_pct=self.pair.max_slippage_pct,
        )
        try:
            response = await asyncio.to_thread(self.http.get_json, self.jupiter.endpoint, params)
            return self.jupiter.parse_out_amount(response)
        except (RequestException, ValueError) as exc:
            logger.warning(
                "%s quote %s -> %s failed: %s", self.quote_venue, input_asset.symbol, output_asset.symbol, exc
            )
            return None

    async def fetch_pool_snapshot(self) -> PoolPriceSnapshot:
        try:
            pools = await asyncio.to_thread(self.http.get_json, self.orca.endpoint)
            return self.orca.parse_snapshot(pools, self.pair.base.symbol, self.pair.quote.symbol)
        except (RequestException, ValueError) as exc:
            logger.warning("%s pool lookup for %s failed: %s", self.pool_venue, self.pair.symbol, exc)
            return PoolPriceSnapshot()

    async def run(self) -> SimulationReport:
        base, quote = self.pair.base, self.pair.quote
        reverse_amount = self.pair.reverse_request_amount
        logger.info("simulating %s round trips between %s and %s", self.pair.symbol, self.quote_venue, self.pool_venue)

        try:
            raw_forward, raw_reverse, pool = await asyncio.gather(
                self.fetch_swap_quote(base, quote, self.pair.request_amount),
                self.fetch_swap_quote(quote, base, reverse_amount),
                self.fetch_pool_snapshot(),
            )
        finally:
            self.http.close()

        forward = normalize_quote(raw_forward, base, quote, self.pair.request_amount, self.quote_venue)
        reverse = normalize_quote(raw_reverse, quote, base, reverse_amount, self.quote_venue)

        round_trips = [
            self._round_trip(f"{self.quote_venue} -> {self.pool_venue}", forward, pool.quote_to_base),
            self._round_trip(f"{self.pool_venue} -> {self.quote_venue}", pool.base_to_quote, reverse),
        ]
        return SimulationReport(
            pair=self.pair.symbol,
            quote_base_to_quote=forward,
            quote_quote_to_base=reverse,
            pool=pool,
            round_trips=round_trips,
        )

    @staticmethod
    def _round_trip(label: str, buy: Optional[UnitPrice], sell: Optional[UnitPrice]) -> RoundTrip:
        result = evaluate(buy, sell, label=label)
        if result is None:
            logger.info("%s: spread not computable", label)
        else:
            logger.info("%s: spread %.2f%% profitable=%s", label, result.spread_pct, result.profitable)
        return RoundTrip(label=label, buy=buy, sell=sell, result=result)

    def run_sync(self) -> SimulationReport:
        return asyncio.run(self.run())
