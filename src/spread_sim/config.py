from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

DEFAULT_QUOTE_ENDPOINT = "https://quote-api.jup.ag/v6/quote"
DEFAULT_POOL_ENDPOINT = "https://api.orca.so/allPools"


@dataclass(frozen=True)
class AssetRef:
    symbol: str
    mint: str
    decimals: int

    def __post_init__(self) -> None:
        if isinstance(self.decimals, bool) or not isinstance(self.decimals, int) or self.decimals < 0:
            raise ValueError(f"decimals for {self.symbol} must be a non-negative int")

    @property
    def one_unit(self) -> int:
        return 10 ** self.decimals


@dataclass(frozen=True)
class PairConfig:
    base: AssetRef
    quote: AssetRef
    request_amount: int
    max_slippage_pct: Decimal = Decimal("0.5")
    quote_request_amount: Optional[int] = None

    def __post_init__(self) -> None:
        if self.request_amount <= 0:
            raise ValueError("request_amount must be positive")
        if self.quote_request_amount is not None and self.quote_request_amount <= 0:
            raise ValueError("quote_request_amount must be positive")
        if not self.max_slippage_pct.is_finite() or not 0 <= self.max_slippage_pct <= 100:
            raise ValueError("max_slippage_pct must be a number between 0 and 100")

    @property
    def symbol(self) -> str:
        return f"{self.base.symbol}/{self.quote.symbol}"

    @property
    def reverse_request_amount(self) -> int:
        if self.quote_request_amount is not None:
            return self.quote_request_amount
        return self.quote.one_unit


@dataclass(frozen=True)
class ProviderConfig:
    quote_provider_endpoint: str = DEFAULT_QUOTE_ENDPOINT
    pool_provider_endpoint: str = DEFAULT_POOL_ENDPOINT
    quote_venue: str = "jupiter"
    pool_venue: str = "orca"
    request_timeout: float = 10.0


@dataclass(frozen=True)
class SimulatorConfig:
    pair: PairConfig
    providers: ProviderConfig = field(default_factory=ProviderConfig)


def _require(section: Dict[str, Any], key: str, where: str) -> Any:
    if key not in section or section[key] is None:
        raise ValueError(f"missing required config key: {where}{key}")
    return section[key]


def _int(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"config key {name} must be an integer")
    return value


def _asset(raw: Any, name: str) -> AssetRef:
    if not isinstance(raw, dict):
        raise ValueError(f"config key {name} must be a mapping")
    return AssetRef(
        symbol=str(_require(raw, "symbol", f"{name}.")),
        mint=str(_require(raw, "mint", f"{name}.")),
        decimals=_int(_require(raw, "decimals", f"{name}."), f"{name}.decimals"),
    )


def _decimal(value: Any, name: str) -> Decimal:
    try:
        return Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"config key {name} is not a number") from None


def parse_config(raw: Dict[str, Any]) -> SimulatorConfig:
    if not isinstance(raw, dict):
        raise ValueError("config document must be a mapping")

    quote_request_amount = raw.get("quote_request_amount")
    pair = PairConfig(
        base=_asset(_require(raw, "base_asset", ""), "base_asset"),
        quote=_asset(_require(raw, "quote_asset", ""), "quote_asset"),
        request_amount=_int(_require(raw, "request_amount", ""), "request_amount"),
        max_slippage_pct=_decimal(raw.get("max_slippage_pct", "0.5"), "max_slippage_pct"),
        quote_request_amount=_int(quote_request_amount, "quote_request_amount") if quote_request_amount is not None else None,
    )
    providers = ProviderConfig(
        quote_provider_endpoint=raw.get("quote_provider_endpoint", DEFAULT_QUOTE_ENDPOINT),
        pool_provider_endpoint=raw.get("pool_provider_endpoint", DEFAULT_POOL_ENDPOINT),
        quote_venue=raw.get("quote_venue", "jupiter"),
        pool_venue=raw.get("pool_venue", "orca"),
        request_timeout=float(raw.get("request_timeout", 10.0)),
    )
    return SimulatorConfig(pair=pair, providers=providers)


def load_config(config_path: Path) -> SimulatorConfig:
    with config_path.open("r", encoding="utf-8") as fh:
        return parse_config(yaml.safe_load(fh))
