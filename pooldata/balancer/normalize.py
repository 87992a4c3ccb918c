"""Balancer pool normalization.

Converts raw subgraph pool records (decimal strings, optional per-variant
fields) into canonical pools with every numeric field as a fixed-point int.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog
from pydantic import ValidationError

from pooldata.config import (
    AMP_DECIMALS,
    DEFAULT_NORMALIZATION_CONFIG,
    FIXED_POINT_DECIMALS,
    NormalizationConfig,
)
from pooldata.errors import DivisionByZero, InvalidDecimals, InvalidPoolRecord
from pooldata.math.fixed_point import Bfp, FixedPointParseError, parse_fixed
from pooldata.models.source import SubgraphPool, SubgraphToken

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

logger = structlog.get_logger()


def classify_pool_type(
    pool_type: str, config: NormalizationConfig = DEFAULT_NORMALIZATION_CONFIG
) -> PoolKind:
    """Map a subgraph poolType tag to the pool variant it normalizes to."""
    if pool_type in config.weighted_pool_types:
        return PoolKind.WEIGHTED
    if pool_type in config.stable_pool_types:
        return PoolKind.STABLE
    if pool_type in config.meta_stable_pool_types:
        return PoolKind.META_STABLE
    if pool_type in config.phantom_stable_pool_types:
        return PoolKind.PHANTOM_STABLE
    if pool_type.endswith(config.linear_pool_suffix):
        return PoolKind.LINEAR
    return PoolKind.UNSUPPORTED


def _validate_record(raw: SubgraphPool | Mapping[str, Any]) -> SubgraphPool:
    """Validate a raw mapping into a SubgraphPool."""
    if isinstance(raw, SubgraphPool):
        return raw
    try:
        return SubgraphPool.model_validate(raw)
    except ValidationError as err:
        logger.debug(
            "pool_invalid_record",
            pool_id=raw.get("id") if isinstance(raw, Mapping) else None,
            error_count=err.error_count(),
        )
        raise InvalidPoolRecord(f"Invalid pool record: {err}") from err


def _parse_fixed_field(value: str, decimals: int, pool_id: str, field_name: str) -> int:
    """Parse a decimal-string field, reporting which field failed."""
    try:
        return parse_fixed(value, decimals)
    except FixedPointParseError as err:
        logger.debug(
            "pool_invalid_fixed_point",
            pool_id=pool_id,
            field=field_name,
            raw_value=value,
            decimals=decimals,
        )
        raise InvalidPoolRecord(f"Pool {pool_id}: invalid {field_name}: {err}") from err


def _parse_optional_fixed_field(
    value: str | None, decimals: int, pool_id: str, field_name: str
) -> int | None:
    """Parse an optional decimal-string field; absent stays None."""
    if value is None:
        return None
    return _parse_fixed_field(value, decimals, pool_id, field_name)


def _normalize_token(
    token: SubgraphToken,
    total_weight: int | None,
    pool_id: str,
    config: NormalizationConfig,
) -> Token:
    """Convert one subgraph token to fixed-point form.

    Raises:
        InvalidDecimals: If the token declares more than max_token_decimals
        DivisionByZero: If the token has a weight but the pool's total weight
            is absent or zero
    """
    if token.decimals > config.max_token_decimals:
        logger.debug(
            "pool_token_invalid_decimals",
            pool_id=pool_id,
            token=token.address,
            decimals=token.decimals,
        )
        raise InvalidDecimals(
            f"Pool {pool_id}: token {token.address} has {token.decimals} decimals, "
            f"max is {config.max_token_decimals}"
        )

    fixed = FIXED_POINT_DECIMALS
    balance = _parse_fixed_field(token.balance, token.decimals, pool_id, "balance")
    price_rate = _parse_fixed_field(
        token.price_rate or config.default_price_rate, fixed, pool_id, "priceRate"
    )

    weight = 0
    if token.weight is not None:
        raw_weight = Bfp.from_wei(_parse_fixed_field(token.weight, fixed, pool_id, "weight"))
        try:
            weight = raw_weight.div_down(Bfp.from_wei(total_weight or 0)).value
        except ZeroDivisionError as err:
            logger.debug(
                "pool_zero_total_weight",
                pool_id=pool_id,
                token=token.address,
                total_weight=total_weight,
            )
            raise DivisionByZero(
                f"Pool {pool_id}: token {token.address} has a weight but total weight is zero"
            ) from err

    return Token(
        address=token.address,
        balance=balance,
        decimals=token.decimals,
        price_rate=price_rate,
        weight=weight,
    )


def _check_index(index: int | None, token_count: int, pool_id: str, field_name: str) -> None:
    """Reject a linear pool index that points outside the token list."""
    if index is not None and index >= token_count:
        logger.debug(
            "pool_index_out_of_range",
            pool_id=pool_id,
            field=field_name,
            index=index,
            token_count=token_count,
        )
        raise InvalidPoolRecord(
            f"Pool {pool_id}: {field_name} {index} out of range for {token_count} tokens"
        )


def normalize_pool(
    raw: SubgraphPool | Mapping[str, Any],
    config: NormalizationConfig = DEFAULT_NORMALIZATION_CONFIG,
) -> Pool:
    """Normalize a raw subgraph pool record into a canonical pool.

    Numeric fields are parsed at their fixed-point precision: 18 decimals for
    swap fee, weights, price rates, total weight and linear targets, 3 for
    amp, and the token's own decimals for balances. Token weights are divided
    by the total weight so a weighted pool's weights sum to ~10^18.

    Construction is all-or-nothing: either a fully populated pool is returned
    or an error is raised.

    Args:
        raw: SubgraphPool, or a mapping in the subgraph's camelCase schema
        config: Normalization settings (precisions, pool type tags)

    Returns:
        The Pool subclass selected by the record's poolType. Variant fields
        the record did not supply are None.

    Raises:
        InvalidPoolRecord: If the record fails validation or a decimal string
            has more fractional digits than its precision allows
        InvalidDecimals: If a token declares more than max_token_decimals
        DivisionByZero: If a token weight is present but total weight is zero
    """
    record = _validate_record(raw)
    kind = classify_pool_type(record.pool_type, config)
    fixed = FIXED_POINT_DECIMALS

    total_weight = _parse_optional_fixed_field(record.total_weight, fixed, record.id, "totalWeight")
    tokens = tuple(_normalize_token(t, total_weight, record.id, config) for t in record.tokens)

    common: dict[str, Any] = {
        "id": record.id,
        "address": record.address,
        "pool_type": record.pool_type,
        "swap_fee": _parse_fixed_field(record.swap_fee, fixed, record.id, "swapFee"),
        "swap_enabled": record.swap_enabled,
        "tokens": tokens,
        "tokens_list": tuple(record.tokens_list),
    }

    pool: Pool
    if kind == PoolKind.WEIGHTED:
        pool = WeightedPool(**common, total_weight=total_weight)
    elif kind in (PoolKind.STABLE, PoolKind.META_STABLE, PoolKind.PHANTOM_STABLE):
        amp = _parse_optional_fixed_field(record.amp, AMP_DECIMALS, record.id, "amp")
        stable_cls: type[StablePool] = {
            PoolKind.STABLE: StablePool,
            PoolKind.META_STABLE: MetaStablePool,
            PoolKind.PHANTOM_STABLE: PhantomStablePool,
        }[kind]
        pool = stable_cls(**common, amp=amp)
    elif kind == PoolKind.LINEAR:
        _check_index(record.main_index, len(tokens), record.id, "mainIndex")
        _check_index(record.wrapped_index, len(tokens), record.id, "wrappedIndex")
        pool = LinearPool(
            **common,
            main_index=record.main_index,
            wrapped_index=record.wrapped_index,
            lower_target=_parse_optional_fixed_field(
                record.lower_target, fixed, record.id, "lowerTarget"
            ),
            upper_target=_parse_optional_fixed_field(
                record.upper_target, fixed, record.id, "upperTarget"
            ),
        )
    else:
        logger.debug("pool_type_unsupported", pool_id=record.id, pool_type=record.pool_type)
        pool = Pool(**common)

    logger.debug(
        "pool_normalized",
        pool_id=pool.id,
        pool_type=pool.pool_type,
        kind=pool.kind.value,
        token_count=len(tokens),
    )
    return pool
