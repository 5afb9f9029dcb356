"""Published catalog documents as the checkout reads them.

A catalog product is the customer-facing snapshot of a product: its
variants with per-currency pricing and stock flags, and its media. Variants
may carry nested ``options`` (option-of-option configurations).
"""

from pydantic import BaseModel, Field


class VariantPrice(BaseModel):
    price: float = Field(ge=0)
    compare_at_price: float | None = Field(default=None, ge=0)


class CatalogVariant(BaseModel):
    variant_id: str
    title: str | None = None
    pricing: dict[str, VariantPrice] = Field(default_factory=dict)  # keyed by currency code
    quantity: int | None = None
    is_backorder: bool | None = None
    is_low_quantity: bool | None = None
    is_sold_out: bool | None = None
    options: list["CatalogVariant"] = Field(default_factory=list)


class MediaItem(BaseModel):
    variant_id: str | None = None
    urls: dict[str, str] = Field(default_factory=dict)  # size name -> URL


class CatalogProduct(BaseModel):
    product_id: str
    title: str | None = None
    is_visible: bool = True
    is_deleted: bool = False
    variants: list[CatalogVariant] = Field(default_factory=list)
    media: list[MediaItem] = Field(default_factory=list)
