"""Balancer pool normalization and pair data extraction.

This package converts raw subgraph pool records into canonical fixed-point
pools, and extracts the per-pair inputs Balancer swap math consumes.

Pool types supported:
- Weighted (and Investment / LiquidityBootstrapping / Managed)
- Stable
- MetaStable
- Phantom / composable stable
- Linear
"""

# Errors
from pooldata.errors import (
    DivisionByZero,
    ErrorKind,
    InvalidAddress,
    InvalidDecimals,
    InvalidPoolRecord,
    PoolDataError,
    TokenNotFound,
    WrongPoolType,
)

# Normalization
from .normalize import classify_pool_type, normalize_pool

# Pair data
from .pair_data import (
    BPT_INDEX_NOT_FOUND,
    LinearPoolPairData,
    MetaStablePoolPairData,
    PhantomStablePoolPairData,
    PoolPairData,
    StablePoolPairData,
    WeightedPoolPairData,
    get_bpt_index,
    get_token_index,
    parse_linear_pair_data,
    parse_meta_stable_pair_data,
    parse_phantom_stable_pair_data,
    parse_pool_pair_data,
    parse_stable_pair_data,
    parse_weighted_pair_data,
)

# Pool dataclasses
from .pools import (
    LinearPool,
    MetaStablePool,
    PhantomStablePool,
    Pool,
    PoolKind,
    StablePool,
    Token,
    WeightedPool,
)

# Results
from .result import PairDataResult, PoolResult, try_normalize_pool, try_parse_pool_pair_data

# Scaling helpers
from .scaling import get_rate_adjusted_scaling_factor, get_token_scaling_factor

__all__ = [
    # Pool dataclasses
    "Token",
    "Pool",
    "PoolKind",
    "WeightedPool",
    "StablePool",
    "MetaStablePool",
    "PhantomStablePool",
    "LinearPool",
    # Normalization
    "normalize_pool",
    "classify_pool_type",
    # Pair data bundles
    "WeightedPoolPairData",
    "StablePoolPairData",
    "MetaStablePoolPairData",
    "PhantomStablePoolPairData",
    "LinearPoolPairData",
    "PoolPairData",
    # Pair data extractors
    "parse_weighted_pair_data",
    "parse_stable_pair_data",
    "parse_meta_stable_pair_data",
    "parse_phantom_stable_pair_data",
    "parse_linear_pair_data",
    "parse_pool_pair_data",
    "get_token_index",
    "get_bpt_index",
    "BPT_INDEX_NOT_FOUND",
    # Results
    "PoolResult",
    "PairDataResult",
    "try_normalize_pool",
    "try_parse_pool_pair_data",
    # Scaling helpers
    "get_token_scaling_factor",
    "get_rate_adjusted_scaling_factor",
    # Errors
    "ErrorKind",
    "PoolDataError",
    "InvalidAddress",
    "TokenNotFound",
    "WrongPoolType",
    "DivisionByZero",
    "InvalidDecimals",
    "InvalidPoolRecord",
]
