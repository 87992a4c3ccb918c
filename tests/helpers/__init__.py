"""Test helpers module for shared test utilities.

- constants: Token and pool addresses
- factories: Raw subgraph record factory functions
"""

from tests.helpers.constants import (
    DAI,
    DAI_CHECKSUM,
    LINEAR_POOL_ADDR,
    LINEAR_POOL_ID,
    PHANTOM_POOL_ADDR,
    PHANTOM_POOL_ID,
    POOL_ADDR,
    POOL_ID,
    UNKNOWN_TOKEN,
    USDC,
    USDC_CHECKSUM,
    USDT,
    WETH,
    WETH_BAD_CHECKSUM,
    WETH_CHECKSUM,
    WRAPPED_USDC,
)
from tests.helpers.factories import make_raw_pool, make_raw_token

__all__ = [
    # Tokens
    "WETH",
    "USDC",
    "DAI",
    "USDT",
    "WETH_CHECKSUM",
    "USDC_CHECKSUM",
    "DAI_CHECKSUM",
    "WETH_BAD_CHECKSUM",
    "WRAPPED_USDC",
    "UNKNOWN_TOKEN",
    # Pools
    "POOL_ADDR",
    "POOL_ID",
    "PHANTOM_POOL_ADDR",
    "PHANTOM_POOL_ID",
    "LINEAR_POOL_ADDR",
    "LINEAR_POOL_ID",
    # Factories
    "make_raw_token",
    "make_raw_pool",
]
