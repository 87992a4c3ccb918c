"""Pydantic models and shared types for raw pool data."""

from pooldata.models.source import SubgraphPool, SubgraphToken
from pooldata.models.types import (
    Address,
    DecimalString,
    OptionalDecimalString,
    is_same_address,
    is_valid_address,
    to_checksum_address,
)

__all__ = [
    # Types
    "Address",
    "DecimalString",
    "OptionalDecimalString",
    # Address helpers
    "is_valid_address",
    "is_same_address",
    "to_checksum_address",
    # Subgraph models
    "SubgraphPool",
    "SubgraphToken",
]
