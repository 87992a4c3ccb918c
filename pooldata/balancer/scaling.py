"""Balancer scaling factor helpers.

Swap math runs at 36-decimal extended precision: a balance stored at the
token's native decimals is multiplied by its scaling factor before use.
"""

from pooldata.config import MAX_TOKEN_DECIMALS
from pooldata.errors import InvalidDecimals
from pooldata.math.fixed_point import Bfp


def get_token_scaling_factor(decimals: int) -> int:
    """Scaling factor for a token with the given precision.

    Args:
        decimals: Token decimals, in [0, 18]

    Returns:
        10^(36 - decimals), i.e. 10^18 for 18-decimal tokens, 10^30 for USDC

    Raises:
        InvalidDecimals: If decimals is outside [0, 18]
    """
    if not 0 <= decimals <= MAX_TOKEN_DECIMALS:
        raise InvalidDecimals(
            f"Token decimals must be in [0, {MAX_TOKEN_DECIMALS}], got {decimals}"
        )
    return 10**18 * 10 ** (MAX_TOKEN_DECIMALS - decimals)


def get_rate_adjusted_scaling_factor(decimals: int, price_rate: int) -> int:
    """Scaling factor with the token's price rate applied, rounded down.

    Used by meta-stable, phantom stable and linear pools, where balances of
    rate-bearing tokens are priced in terms of their underlying.

    Args:
        decimals: Token decimals, in [0, 18]
        price_rate: Price rate scaled to 18 decimals

    Returns:
        scaling_factor * price_rate // 10^18
    """
    scaling_factor = Bfp.from_wei(get_token_scaling_factor(decimals))
    return scaling_factor.mul_down(Bfp.from_wei(price_rate)).value
