"""Canonical Balancer pool dataclasses.

One frozen dataclass per pool kind. Each variant carries only the fields its
swap math needs; a field the subgraph did not supply is None, which is kept
distinct from a supplied zero.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class PoolKind(str, Enum):
    """Pool variant, selecting which pair-data extractor applies."""

    WEIGHTED = "weighted"
    STABLE = "stable"
    META_STABLE = "metaStable"
    PHANTOM_STABLE = "phantomStable"
    LINEAR = "linear"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class Token:
    """A pool constituent in fixed-point form.

    Attributes:
        address: Token address, as reported by the subgraph
        balance: Balance in the token's native decimals (NOT scaled to 18)
        decimals: Token precision, 0-18
        price_rate: Exchange rate scaled to 18 decimals (10^18 when absent)
        weight: Normalized weight scaled to 18 decimals; weights of a weighted
            pool sum to ~10^18. 0 when the subgraph reports no weight.
    """

    address: str
    balance: int
    decimals: int
    price_rate: int
    weight: int


@dataclass(frozen=True)
class Pool:
    """Fields shared by every Balancer pool.

    A bare Pool is produced for pool types no extractor supports; it is still
    usable for route construction through tokens_list.

    Attributes:
        id: Subgraph pool id
        address: Pool contract address, also its BPT address
        pool_type: Raw poolType tag from the subgraph
        swap_fee: Swap fee scaled to 18 decimals (0.003 -> 3 * 10^15)
        swap_enabled: Whether swaps are currently enabled
        tokens: Constituents in pool order; every index refers to this order
        tokens_list: All token addresses, possibly including the pool's BPT
    """

    kind: ClassVar[PoolKind] = PoolKind.UNSUPPORTED

    id: str
    address: str
    pool_type: str
    swap_fee: int
    swap_enabled: bool
    tokens: tuple[Token, ...]
    tokens_list: tuple[str, ...]


@dataclass(frozen=True)
class WeightedPool(Pool):
    """Weighted (and investment / liquidity bootstrapping) pool.

    Attributes:
        total_weight: Sum of raw token weights scaled to 18 decimals, or None
    """

    kind: ClassVar[PoolKind] = PoolKind.WEIGHTED

    total_weight: int | None = None


@dataclass(frozen=True)
class StablePool(Pool):
    """Stable pool (StableSwap / Curve-style).

    Attributes:
        amp: Amplification parameter scaled by 10^3 (A=5000 -> 5_000_000),
            or None when the subgraph did not supply it
    """

    kind: ClassVar[PoolKind] = PoolKind.STABLE

    amp: int | None = None


@dataclass(frozen=True)
class MetaStablePool(StablePool):
    """Stable pool whose tokens carry external price rates."""

    kind: ClassVar[PoolKind] = PoolKind.META_STABLE


@dataclass(frozen=True)
class PhantomStablePool(StablePool):
    """Phantom / composable stable pool; its BPT is part of tokens_list."""

    kind: ClassVar[PoolKind] = PoolKind.PHANTOM_STABLE


@dataclass(frozen=True)
class LinearPool(Pool):
    """Linear pool between a main token and its wrapped (yield-bearing) token.

    Attributes:
        main_index: Position of the main token in tokens
        wrapped_index: Position of the wrapped token in tokens
        lower_target: Lower bound of the no-fee region, scaled to 18 decimals
        upper_target: Upper bound of the no-fee region, scaled to 18 decimals
    """

    kind: ClassVar[PoolKind] = PoolKind.LINEAR

    main_index: int | None = None
    wrapped_index: int | None = None
    lower_target: int | None = None
    upper_target: int | None = None
