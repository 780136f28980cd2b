from .config import AssetRef, PairConfig, ProviderConfig, SimulatorConfig, load_config
from .models import PoolPriceSnapshot, RoundTrip, SimulationReport, SpreadResult, UnitPrice
from .normalizer import normalize, normalize_quote
from .simulator import SpreadSimulator
from .spread import evaluate, spread_pct

__all__ = [
    "AssetRef",
    "PairConfig",
    "ProviderConfig",
    "SimulatorConfig",
    "load_config",
    "PoolPriceSnapshot",
    "RoundTrip",
    "SimulationReport",
    "SpreadResult",
    "UnitPrice",
    "normalize",
    "normalize_quote",
    "SpreadSimulator",
    "evaluate",
    "spread_pct",
]
