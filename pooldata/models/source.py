"""Pydantic models for raw pool records from the indexing subgraph.

Field names follow the subgraph's camelCase schema through aliases. Numeric
fields stay decimal strings here; conversion to fixed-point integers happens
in pooldata.balancer.normalize.
"""

from pydantic import BaseModel, Field

from pooldata.models.types import Address, DecimalString, OptionalDecimalString


class SubgraphToken(BaseModel):
    """One pool constituent as reported by the subgraph."""

    address: Address
    balance: DecimalString = Field(description="Balance in whole token units, e.g. '100.5'.")
    # Tokens above 18 decimals are representable here but rejected at normalization
    decimals: int = Field(ge=0, le=77)
    price_rate: OptionalDecimalString = Field(
        default=None,
        alias="priceRate",
        description="Exchange rate for rate-adjusted assets. Absent means 1.0.",
    )
    weight: OptionalDecimalString = Field(
        default=None,
        description="Raw (unnormalized) token weight. Weighted pools only.",
    )

    model_config = {"extra": "allow", "populate_by_name": True}


class SubgraphPool(BaseModel):
    """A liquidity pool record as fetched from the subgraph.

    Variant-specific fields are optional and may be missing, null or empty.
    """

    id: str
    address: Address
    pool_type: str = Field(alias="poolType")
    swap_fee: DecimalString = Field(alias="swapFee")
    swap_enabled: bool = Field(default=True, alias="swapEnabled")
    tokens: list[SubgraphToken]
    tokens_list: list[Address] = Field(alias="tokensList")

    # Weighted pool fields
    total_weight: OptionalDecimalString = Field(default=None, alias="totalWeight")

    # Stable pool fields
    amp: OptionalDecimalString = None

    # Linear pool fields
    main_index: int | None = Field(default=None, ge=0, alias="mainIndex")
    wrapped_index: int | None = Field(default=None, ge=0, alias="wrappedIndex")
    lower_target: OptionalDecimalString = Field(default=None, alias="lowerTarget")
    upper_target: OptionalDecimalString = Field(default=None, alias="upperTarget")

    model_config = {"extra": "allow", "populate_by_name": True}
