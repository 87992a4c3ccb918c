"""Balancer pool data adapter - normalization and pair data extraction."""

from pooldata.balancer import normalize_pool, parse_pool_pair_data
from pooldata.config import DEFAULT_NORMALIZATION_CONFIG, NormalizationConfig

__version__ = "0.1.0"
__all__ = [
    "normalize_pool",
    "parse_pool_pair_data",
    "NormalizationConfig",
    "DEFAULT_NORMALIZATION_CONFIG",
    "__version__",
]
