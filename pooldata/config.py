"""Normalization configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace

# Precision of fees, weights, price rates, total weight and linear targets
FIXED_POINT_DECIMALS = 18

# Precision of the stable amplification parameter
AMP_DECIMALS = 3

# Scaling factors are 10^(36 - decimals), so no token may exceed 18 decimals
MAX_TOKEN_DECIMALS = 18

WEIGHTED_POOL_TYPES = frozenset({"Weighted", "Investment", "LiquidityBootstrapping", "Managed"})
STABLE_POOL_TYPES = frozenset({"Stable"})
META_STABLE_POOL_TYPES = frozenset({"MetaStable"})
PHANTOM_STABLE_POOL_TYPES = frozenset({"StablePhantom", "ComposableStable"})


@dataclass(frozen=True)
class NormalizationConfig:
    """Centralized configuration for pool normalization.

    Attributes:
        max_token_decimals: Tokens above this precision are rejected. May be
            lowered, never raised above MAX_TOKEN_DECIMALS (default: 18)
        default_price_rate: Price rate used when a token reports none
        weighted_pool_types: poolType tags normalized to WeightedPool
        stable_pool_types: poolType tags normalized to StablePool
        meta_stable_pool_types: poolType tags normalized to MetaStablePool
        phantom_stable_pool_types: poolType tags normalized to PhantomStablePool
        linear_pool_suffix: poolType tags ending with this become LinearPool
    """

    max_token_decimals: int = MAX_TOKEN_DECIMALS
    default_price_rate: str = "1"

    weighted_pool_types: frozenset[str] = field(default=WEIGHTED_POOL_TYPES)
    stable_pool_types: frozenset[str] = field(default=STABLE_POOL_TYPES)
    meta_stable_pool_types: frozenset[str] = field(default=META_STABLE_POOL_TYPES)
    phantom_stable_pool_types: frozenset[str] = field(default=PHANTOM_STABLE_POOL_TYPES)
    linear_pool_suffix: str = "Linear"

    def __post_init__(self) -> None:
        """Validate max_token_decimals is within what scaling supports."""
        if not 0 <= self.max_token_decimals <= MAX_TOKEN_DECIMALS:
            raise ValueError(
                f"max_token_decimals must be in [0, {MAX_TOKEN_DECIMALS}], "
                f"got {self.max_token_decimals}"
            )

    @classmethod
    def from_env(cls, base: NormalizationConfig | None = None) -> NormalizationConfig:
        """Build a config with overrides from environment variables.

        Configuration via environment variables:
        - POOLDATA_MAX_TOKEN_DECIMALS: Highest accepted token precision (default: 18)
        """
        config = base or cls()
        max_token_decimals = os.environ.get("POOLDATA_MAX_TOKEN_DECIMALS")
        if not max_token_decimals:
            return replace(config)
        return replace(config, max_token_decimals=int(max_token_decimals))


# Default configuration instance
DEFAULT_NORMALIZATION_CONFIG = NormalizationConfig()
