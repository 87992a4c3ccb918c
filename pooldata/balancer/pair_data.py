"""Pair data extraction for Balancer swap math.

Each extractor takes a canonical pool and a token pair and returns the exact
bundle of fields its pool variant's swap formulas consume. Weighted math only
needs the two traded tokens; the stable family computes its invariant over
every balance, so those bundles carry the full balance and scaling vectors in
pool order.

Fields the subgraph did not supply (None on the pool) are passed to the swap
math as 0.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from pooldata.errors import TokenNotFound, WrongPoolType
from pooldata.models.types import is_same_address

from .pools import LinearPool, Pool, PoolKind, StablePool, Token, WeightedPool
from .scaling import get_rate_adjusted_scaling_factor, get_token_scaling_factor

logger = structlog.get_logger()

# bpt_index when the pool's own BPT is not in tokens_list
BPT_INDEX_NOT_FOUND = -1


# =============================================================================
# Pair data bundles
# =============================================================================


@dataclass(frozen=True)
class WeightedPoolPairData:
    """Inputs for weighted pool swap math.

    Balances are in native token decimals; multiply by the scaling factor
    to reach 36-decimal precision.
    """

    balance_in: int
    balance_out: int
    weight_in: int
    weight_out: int
    fee: int
    scaling_factor_token_in: int
    scaling_factor_token_out: int


@dataclass(frozen=True)
class StablePoolPairData:
    """Inputs for stable pool swap math.

    Attributes:
        amp: Amplification parameter scaled by 10^3
        balances: Every token balance, in pool order
        token_index_in: Position of token in within balances
        token_index_out: Position of token out within balances
        fee: Swap fee scaled to 18 decimals
        scaling_factors: One per token, in pool order
    """

    amp: int
    balances: tuple[int, ...]
    token_index_in: int
    token_index_out: int
    fee: int
    scaling_factors: tuple[int, ...]


@dataclass(frozen=True)
class MetaStablePoolPairData(StablePoolPairData):
    """Stable pair data whose scaling factors include token price rates."""


@dataclass(frozen=True)
class PhantomStablePoolPairData(MetaStablePoolPairData):
    """Meta-stable pair data plus the pool's BPT position.

    Attributes:
        tokens: The pool's full tokens_list
        bpt_index: Position of the pool address in tokens, -1 if absent
    """

    tokens: tuple[str, ...]
    bpt_index: int


@dataclass(frozen=True)
class LinearPoolPairData:
    """Inputs for linear pool swap math."""

    tokens: tuple[str, ...]
    balances: tuple[int, ...]
    token_index_in: int
    token_index_out: int
    wrapped_index: int
    main_index: int
    bpt_index: int
    fee: int
    scaling_factors: tuple[int, ...]
    lower_target: int
    upper_target: int


PoolPairData = (
    WeightedPoolPairData
    | StablePoolPairData
    | MetaStablePoolPairData
    | PhantomStablePoolPairData
    | LinearPoolPairData
)


# =============================================================================
# Lookup helpers
# =============================================================================


def get_token_index(pool: Pool, token: str, side: str) -> int:
    """Position of token within pool.tokens.

    Args:
        pool: Canonical pool
        token: Token address (case-insensitive)
        side: "in" or "out", reported if the token is missing

    Raises:
        TokenNotFound: If the token is not in the pool
        InvalidAddress: If token is not a valid address
    """
    for index, pool_token in enumerate(pool.tokens):
        if is_same_address(pool_token.address, token):
            return index
    logger.debug("pair_token_not_found", pool_id=pool.id, token=token, side=side)
    raise TokenNotFound(side, token)


def get_bpt_index(pool: Pool) -> int:
    """Position of the pool's own address within tokens_list, or -1."""
    for index, address in enumerate(pool.tokens_list):
        if is_same_address(address, pool.address):
            return index
    return BPT_INDEX_NOT_FOUND


def _pair_indices(pool: Pool, token_in: str, token_out: str) -> tuple[int, int]:
    return get_token_index(pool, token_in, "in"), get_token_index(pool, token_out, "out")


def _rate_adjusted_scaling_factors(tokens: tuple[Token, ...]) -> tuple[int, ...]:
    return tuple(get_rate_adjusted_scaling_factor(t.decimals, t.price_rate) for t in tokens)


def _wrong_pool_type(pool: Pool, variant: str) -> WrongPoolType:
    logger.debug(
        "pair_wrong_pool_type", pool_id=pool.id, pool_type=pool.pool_type, variant=variant
    )
    return WrongPoolType(f"Pool {pool.id} ({pool.pool_type}) does not support {variant} pair data")


# =============================================================================
# Extractors
# =============================================================================


def parse_weighted_pair_data(pool: Pool, token_in: str, token_out: str) -> WeightedPoolPairData:
    """Extract weighted pool pair data.

    Raises:
        WrongPoolType: If the pool is not weighted or has no total weight
        TokenNotFound: If either token is not in the pool
    """
    if not isinstance(pool, WeightedPool) or not pool.total_weight:
        logger.debug("pair_missing_total_weight", pool_id=pool.id, pool_type=pool.pool_type)
        raise WrongPoolType(f"Pool {pool.id} does not contain totalWeight")

    index_in, index_out = _pair_indices(pool, token_in, token_out)
    t_in = pool.tokens[index_in]
    t_out = pool.tokens[index_out]

    return WeightedPoolPairData(
        balance_in=t_in.balance,
        balance_out=t_out.balance,
        weight_in=t_in.weight,
        weight_out=t_out.weight,
        fee=pool.swap_fee,
        scaling_factor_token_in=get_token_scaling_factor(t_in.decimals),
        scaling_factor_token_out=get_token_scaling_factor(t_out.decimals),
    )


def parse_stable_pair_data(pool: Pool, token_in: str, token_out: str) -> StablePoolPairData:
    """Extract stable pool pair data, scaling by token decimals only.

    Raises:
        WrongPoolType: If the pool is not a stable-family pool
        TokenNotFound: If either token is not in the pool
    """
    if not isinstance(pool, StablePool):
        raise _wrong_pool_type(pool, "stable")
    index_in, index_out = _pair_indices(pool, token_in, token_out)

    return StablePoolPairData(
        amp=pool.amp or 0,
        balances=tuple(t.balance for t in pool.tokens),
        token_index_in=index_in,
        token_index_out=index_out,
        fee=pool.swap_fee,
        scaling_factors=tuple(get_token_scaling_factor(t.decimals) for t in pool.tokens),
    )


def parse_meta_stable_pair_data(
    pool: Pool, token_in: str, token_out: str
) -> MetaStablePoolPairData:
    """Extract meta-stable pool pair data, with rate-adjusted scaling factors.

    Raises:
        WrongPoolType: If the pool is not a stable-family pool
        TokenNotFound: If either token is not in the pool
    """
    if not isinstance(pool, StablePool):
        raise _wrong_pool_type(pool, "meta-stable")
    index_in, index_out = _pair_indices(pool, token_in, token_out)

    return MetaStablePoolPairData(
        amp=pool.amp or 0,
        balances=tuple(t.balance for t in pool.tokens),
        token_index_in=index_in,
        token_index_out=index_out,
        fee=pool.swap_fee,
        scaling_factors=_rate_adjusted_scaling_factors(pool.tokens),
    )


def parse_phantom_stable_pair_data(
    pool: Pool, token_in: str, token_out: str
) -> PhantomStablePoolPairData:
    """Extract phantom / composable stable pool pair data.

    The pool's BPT is one of its tokens; bpt_index tells the swap math which
    balance to exclude from the invariant.

    Raises:
        WrongPoolType: If the pool is not a stable-family pool
        TokenNotFound: If either token is not in the pool
    """
    if not isinstance(pool, StablePool):
        raise _wrong_pool_type(pool, "phantom stable")
    index_in, index_out = _pair_indices(pool, token_in, token_out)

    return PhantomStablePoolPairData(
        tokens=pool.tokens_list,
        amp=pool.amp or 0,
        balances=tuple(t.balance for t in pool.tokens),
        token_index_in=index_in,
        token_index_out=index_out,
        bpt_index=get_bpt_index(pool),
        fee=pool.swap_fee,
        scaling_factors=_rate_adjusted_scaling_factors(pool.tokens),
    )


def parse_linear_pair_data(pool: Pool, token_in: str, token_out: str) -> LinearPoolPairData:
    """Extract linear pool pair data.

    Raises:
        WrongPoolType: If the pool is not a linear pool
        TokenNotFound: If either token is not in the pool
    """
    if not isinstance(pool, LinearPool):
        raise _wrong_pool_type(pool, "linear")
    index_in, index_out = _pair_indices(pool, token_in, token_out)

    return LinearPoolPairData(
        tokens=pool.tokens_list,
        balances=tuple(t.balance for t in pool.tokens),
        token_index_in=index_in,
        token_index_out=index_out,
        wrapped_index=pool.wrapped_index or 0,
        main_index=pool.main_index or 0,
        bpt_index=get_bpt_index(pool),
        fee=pool.swap_fee,
        scaling_factors=_rate_adjusted_scaling_factors(pool.tokens),
        lower_target=pool.lower_target or 0,
        upper_target=pool.upper_target or 0,
    )


def parse_pool_pair_data(pool: Pool, token_in: str, token_out: str) -> PoolPairData:
    """Extract pair data with the extractor matching the pool's kind.

    Raises:
        WrongPoolType: If no extractor supports the pool's kind
        TokenNotFound: If either token is not in the pool
    """
    if pool.kind == PoolKind.WEIGHTED:
        return parse_weighted_pair_data(pool, token_in, token_out)
    if pool.kind == PoolKind.STABLE:
        return parse_stable_pair_data(pool, token_in, token_out)
    if pool.kind == PoolKind.META_STABLE:
        return parse_meta_stable_pair_data(pool, token_in, token_out)
    if pool.kind == PoolKind.PHANTOM_STABLE:
        return parse_phantom_stable_pair_data(pool, token_in, token_out)
    if pool.kind == PoolKind.LINEAR:
        return parse_linear_pair_data(pool, token_in, token_out)

    logger.debug("pair_unsupported_pool_type", pool_id=pool.id, pool_type=pool.pool_type)
    raise WrongPoolType(f"Pool {pool.id} has unsupported pool type {pool.pool_type!r}")
