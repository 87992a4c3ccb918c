"""Shared type definitions for pool data models.

Address handling lives here: format validation, EIP-55 checksumming and the
case-insensitive equality used for every token lookup.
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Annotated, Any

from pydantic import BeforeValidator, Field
from web3 import Web3

from pooldata.errors import InvalidAddress
from pooldata.math.fixed_point import UINT256_MAX

MAX_INTEGER_DIGITS = len(str(UINT256_MAX))


def validate_decimal_string(value: Any) -> str:
    """Validate that a value is a finite decimal number.

    Subgraph numeric fields arrive as decimal strings; ints and Decimals are
    accepted and converted to their string form.

    Args:
        value: Value to validate

    Returns:
        The value as a decimal string

    Raises:
        ValueError: If value is not a finite, non-negative decimal number
            below 10^78
    """
    # bool is an int subclass, reject it explicitly
    if isinstance(value, bool) or not isinstance(value, str | int | Decimal):
        raise ValueError(f"Decimal string must be str or int, got {type(value).__name__}")

    text = str(value).strip()
    try:
        parsed = Decimal(text)
    except InvalidOperation as err:
        raise ValueError(f"Not a decimal number: '{value}'") from err

    if not parsed.is_finite():
        raise ValueError(f"Decimal must be finite: '{value}'")

    # Check non-negative
    if parsed < 0:
        raise ValueError(f"Decimal cannot be negative: '{value}'")

    # No uint256 amount has more than 78 integer digits
    if parsed and parsed.adjusted() >= MAX_INTEGER_DIGITS:
        raise ValueError(f"Decimal out of range: '{value}'")

    return text


def validate_optional_decimal_string(value: Any) -> str | None:
    """Validate an optional decimal string; None and "" mean absent."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return validate_decimal_string(value)


_ADDRESS_RE = re.compile(r"0x[a-fA-F0-9]{40}")

# Ethereum address (40 hex chars after 0x prefix)
Address = Annotated[str, Field(pattern=r"^0x[a-fA-F0-9]{40}$")]

# Decimal number as string (validated)
DecimalString = Annotated[
    str,
    BeforeValidator(validate_decimal_string),
    Field(description="Decimal number as string, e.g. '0.003'"),
]

# Optional decimal string; missing, null and empty values become None
OptionalDecimalString = Annotated[str | None, BeforeValidator(validate_optional_decimal_string)]


def is_valid_address(address: str) -> bool:
    """Check if a string is a valid Ethereum address.

    Args:
        address: String to validate

    Returns:
        True if valid Ethereum address format
    """
    if not isinstance(address, str):
        return False
    return _ADDRESS_RE.fullmatch(address) is not None


def to_checksum_address(address: str) -> str:
    """Convert an address to its EIP-55 checksum form.

    All-lowercase and all-uppercase inputs are accepted as-is. A mixed-case
    input must already carry a valid checksum.

    Args:
        address: Address string with 0x prefix

    Returns:
        EIP-55 checksummed address

    Raises:
        InvalidAddress: If the format is wrong or a mixed-case checksum fails
    """
    if not is_valid_address(address):
        raise InvalidAddress(f"Invalid address: {address!r} (must be 0x + 40 hex chars)")

    body = address[2:]
    if body != body.lower() and body != body.upper() and not Web3.is_checksum_address(address):
        raise InvalidAddress(f"Bad address checksum: {address}")

    return Web3.to_checksum_address(address)


def is_same_address(address1: str, address2: str) -> bool:
    """Compare two addresses by their canonical checksum form.

    Raises:
        InvalidAddress: If either address is not a valid identifier
    """
    return to_checksum_address(address1) == to_checksum_address(address2)
