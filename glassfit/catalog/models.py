"""
==============================================================================
Catalog Models Module
==============================================================================

Pydantic models for catalog products and the records returned by the
matching engine.

Field names are snake_case in Python and camelCase on the wire
(``boxCode``, ``matchedMobiles``, ``mobileCount``), matching the JSON
catalog files.

==============================================================================
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CatalogModel(BaseModel):
    """Base model using camelCase aliases for JSON input and output."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def to_dict(self) -> dict:
        """Serialize with wire (camelCase) keys."""
        return self.model_dump(by_alias=True)


class Product(CatalogModel):
    """
    Protective-glass product and the mobile models it fits.

    Attributes:
        box_code: Product identifier (e.g. "UNIPRO H01"), compared
            case-insensitively
        title: Human-readable product title
        category: Optional product category
        mobiles: Ordered model names the product supports
    """

    model_config = ConfigDict(extra="allow")

    box_code: str = Field(..., description="Product box code")
    title: str = Field(..., description="Product title")
    category: Optional[str] = Field(default=None, description="Product category")
    mobiles: List[str] = Field(..., description="Supported mobile model names")

    @classmethod
    def from_record(cls, record) -> "Product":
        """
        Wrap a raw catalog record without validating it.

        Missing fields stay missing and surface as AttributeError when the
        engine reads them.
        """
        if isinstance(record, cls):
            return record
        return cls.model_construct(**dict(record))


class ProductMatch(CatalogModel):
    """Product resolved for a mobile model."""

    box_code: str
    title: str
    category: str


class ProductHit(CatalogModel):
    """Product found by keyword search, with the mobiles that matched."""

    box_code: str
    title: str
    matched_mobiles: List[str] = Field(default_factory=list)


class SearchResult(CatalogModel):
    """Combined keyword search result."""

    mobiles: List[str] = Field(default_factory=list)
    products: List[ProductHit] = Field(default_factory=list)


class ProductSummary(CatalogModel):
    """Catalog listing entry."""

    box_code: str
    title: str
    mobile_count: int = Field(ge=0)
