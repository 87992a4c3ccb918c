"""Pytest configuration and fixtures."""

from typing import Any

import pytest

from pooldata.balancer import (
    LinearPool,
    MetaStablePool,
    PhantomStablePool,
    StablePool,
    WeightedPool,
    normalize_pool,
)
from tests.helpers import (
    DAI,
    LINEAR_POOL_ADDR,
    LINEAR_POOL_ID,
    PHANTOM_POOL_ADDR,
    PHANTOM_POOL_ID,
    USDC,
    USDT,
    WETH,
    WRAPPED_USDC,
    make_raw_pool,
    make_raw_token,
)

# =============================================================================
# Raw subgraph records
# =============================================================================


@pytest.fixture
def raw_weighted_pool() -> dict[str, Any]:
    """50/50 WETH/USDC weighted pool: 100 WETH, 200 USDC, 0.3% fee."""
    return make_raw_pool(
        tokens=[
            make_raw_token(WETH, "100", decimals=18, weight="0.5"),
            make_raw_token(USDC, "200", decimals=6, weight="0.5"),
        ],
        pool_type="Weighted",
        totalWeight="1",
    )


@pytest.fixture
def raw_stable_pool() -> dict[str, Any]:
    """DAI/USDC/USDT stable pool with A=500."""
    return make_raw_pool(
        tokens=[
            make_raw_token(DAI, "1000000.5", decimals=18),
            make_raw_token(USDC, "1000000.25", decimals=6),
            make_raw_token(USDT, "999000", decimals=6),
        ],
        pool_type="Stable",
        swap_fee="0.0004",
        amp="500",
    )


@pytest.fixture
def raw_meta_stable_pool() -> dict[str, Any]:
    """Rate-bearing WETH/DAI meta-stable pool (rates 1.05 and 1)."""
    return make_raw_pool(
        tokens=[
            make_raw_token(WETH, "500", decimals=18, price_rate="1.05"),
            make_raw_token(DAI, "520", decimals=18, price_rate="1"),
        ],
        pool_type="MetaStable",
        swap_fee="0.0004",
        amp="50",
    )


@pytest.fixture
def raw_phantom_stable_pool() -> dict[str, Any]:
    """Composable stable pool whose own BPT sits at tokensList position 2."""
    return make_raw_pool(
        tokens=[
            make_raw_token(DAI, "1000", decimals=18, price_rate="1"),
            make_raw_token(USDC, "1000", decimals=6, price_rate="1"),
            make_raw_token(PHANTOM_POOL_ADDR, "5192296858534827.628530496329", price_rate="1"),
        ],
        pool_type="ComposableStable",
        address=PHANTOM_POOL_ADDR,
        pool_id=PHANTOM_POOL_ID,
        swap_fee="0.0001",
        amp="1500",
    )


@pytest.fixture
def raw_linear_pool() -> dict[str, Any]:
    """Aave linear pool: USDC main token, wrapped USDC, BPT last."""
    return make_raw_pool(
        tokens=[
            make_raw_token(USDC, "2500000", decimals=6, price_rate="1"),
            make_raw_token(WRAPPED_USDC, "1000000", decimals=6, price_rate="1.081"),
            make_raw_token(LINEAR_POOL_ADDR, "5192296858534827.628530496329", price_rate="1"),
        ],
        pool_type="AaveLinear",
        address=LINEAR_POOL_ADDR,
        pool_id=LINEAR_POOL_ID,
        swap_fee="0.0002",
        mainIndex=0,
        wrappedIndex=1,
        lowerTarget="2000000",
        upperTarget="3000000",
    )


# =============================================================================
# Normalized pools
# =============================================================================


@pytest.fixture
def weighted_pool(raw_weighted_pool: dict[str, Any]) -> WeightedPool:
    pool = normalize_pool(raw_weighted_pool)
    assert isinstance(pool, WeightedPool)
    return pool


@pytest.fixture
def stable_pool(raw_stable_pool: dict[str, Any]) -> StablePool:
    pool = normalize_pool(raw_stable_pool)
    assert isinstance(pool, StablePool)
    return pool


@pytest.fixture
def meta_stable_pool(raw_meta_stable_pool: dict[str, Any]) -> MetaStablePool:
    pool = normalize_pool(raw_meta_stable_pool)
    assert isinstance(pool, MetaStablePool)
    return pool


@pytest.fixture
def phantom_stable_pool(raw_phantom_stable_pool: dict[str, Any]) -> PhantomStablePool:
    pool = normalize_pool(raw_phantom_stable_pool)
    assert isinstance(pool, PhantomStablePool)
    return pool


@pytest.fixture
def linear_pool(raw_linear_pool: dict[str, Any]) -> LinearPool:
    pool = normalize_pool(raw_linear_pool)
    assert isinstance(pool, LinearPool)
    return pool
