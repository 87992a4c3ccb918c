"""Explicit success/error results for normalization and extraction.

Routers treat an unusable pool or pair as ordinary control flow: skip it and
move on. These wrappers turn PoolDataError into a returned error kind.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pooldata.config import DEFAULT_NORMALIZATION_CONFIG, NormalizationConfig
from pooldata.errors import ErrorKind, PoolDataError
from pooldata.models.source import SubgraphPool

from .normalize import normalize_pool
from .pair_data import PoolPairData, parse_pool_pair_data
from .pools import Pool


@dataclass(frozen=True)
class PoolResult:
    """Result of normalizing a raw pool record.

    Examples:
        result = try_normalize_pool(raw)
        if result.is_valid:
            pool = result.pool
        else:
            logger.debug("skip_pool", error=result.error)
    """

    pool: Pool | None
    error: ErrorKind | None = None
    error_detail: str | None = None

    @property
    def is_valid(self) -> bool:
        """True if normalization succeeded."""
        return self.error is None

    @property
    def is_error(self) -> bool:
        """True if normalization failed."""
        return self.error is not None

    @classmethod
    def ok(cls, pool: Pool) -> PoolResult:
        """Create a successful result."""
        return cls(pool=pool)

    @classmethod
    def with_error(cls, error: ErrorKind, detail: str | None = None) -> PoolResult:
        """Create an error result."""
        return cls(pool=None, error=error, error_detail=detail)


@dataclass(frozen=True)
class PairDataResult:
    """Result of extracting pair data from a canonical pool."""

    pair_data: PoolPairData | None
    error: ErrorKind | None = None
    error_detail: str | None = None

    @property
    def is_valid(self) -> bool:
        """True if extraction succeeded."""
        return self.error is None

    @property
    def is_error(self) -> bool:
        """True if extraction failed."""
        return self.error is not None

    @classmethod
    def ok(cls, pair_data: PoolPairData) -> PairDataResult:
        """Create a successful result."""
        return cls(pair_data=pair_data)

    @classmethod
    def with_error(cls, error: ErrorKind, detail: str | None = None) -> PairDataResult:
        """Create an error result."""
        return cls(pair_data=None, error=error, error_detail=detail)


def try_normalize_pool(
    raw: SubgraphPool | Mapping[str, Any],
    config: NormalizationConfig = DEFAULT_NORMALIZATION_CONFIG,
) -> PoolResult:
    """normalize_pool, returning failures as a PoolResult instead of raising."""
    try:
        return PoolResult.ok(normalize_pool(raw, config))
    except PoolDataError as err:
        return PoolResult.with_error(err.kind, str(err))


def try_parse_pool_pair_data(pool: Pool, token_in: str, token_out: str) -> PairDataResult:
    """parse_pool_pair_data, returning failures as a PairDataResult instead of raising."""
    try:
        return PairDataResult.ok(parse_pool_pair_data(pool, token_in, token_out))
    except PoolDataError as err:
        return PairDataResult.with_error(err.kind, str(err))
