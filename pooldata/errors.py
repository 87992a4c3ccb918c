"""Pool data error classes.

Every failure of normalization or pair-data extraction is a PoolDataError.
Each subclass carries the ErrorKind reported by the non-raising ``try_*``
entry points.
"""

from enum import Enum
from typing import ClassVar


class ErrorKind(Enum):
    """Reasons a pool or pair is unusable."""

    INVALID_ADDRESS = "invalid_address"
    TOKEN_NOT_FOUND = "token_not_found"
    WRONG_POOL_TYPE = "wrong_pool_type"
    DIVISION_BY_ZERO = "division_by_zero"
    INVALID_DECIMALS = "invalid_decimals"
    INVALID_POOL_RECORD = "invalid_pool_record"


class PoolDataError(Exception):
    """Base error for pool normalization and pair-data extraction."""

    kind: ClassVar[ErrorKind]


class InvalidAddress(PoolDataError, ValueError):
    """Identifier is not a valid address, or fails its EIP-55 checksum."""

    kind = ErrorKind.INVALID_ADDRESS


class TokenNotFound(PoolDataError):
    """Requested token is not part of the pool.

    Attributes:
        side: Which side of the pair was missing ("in" or "out")
        token: The requested token identifier
    """

    kind = ErrorKind.TOKEN_NOT_FOUND

    def __init__(self, side: str, token: str) -> None:
        super().__init__(f"Token {side.capitalize()} {token} doesn't exist in pool")
        self.side = side
        self.token = token


class WrongPoolType(PoolDataError):
    """Pool lacks the fields required by the requested pair-data variant."""

    kind = ErrorKind.WRONG_POOL_TYPE


class DivisionByZero(PoolDataError, ZeroDivisionError):
    """Token weights cannot be normalized against a zero total weight."""

    kind = ErrorKind.DIVISION_BY_ZERO


class InvalidDecimals(PoolDataError, ValueError):
    """Token decimals outside [0, 18]."""

    kind = ErrorKind.INVALID_DECIMALS


class InvalidPoolRecord(PoolDataError, ValueError):
    """Raw pool record fails schema validation or fixed-point parsing."""

    kind = ErrorKind.INVALID_POOL_RECORD
