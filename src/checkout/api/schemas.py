"""Pydantic request/response schemas for the Checkout API.

These are external contracts (anti-corruption layer) — separate from
internal protean commands. Cart, item, group, payment and product ids in
these schemas are opaque.
"""

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Shared sub-models
# ---------------------------------------------------------------------------
class AddressSchema(BaseModel):
    full_name: str | None = None
    street: str
    city: str
    state: str | None = None
    postal_code: str
    country: str
    phone: str | None = None


class MoneySchema(BaseModel):
    amount: float = Field(ge=0)
    currency_code: str = Field(min_length=3, max_length=3)


class ProductConfigurationSchema(BaseModel):
    product_id: str
    product_variant_id: str


# ---------------------------------------------------------------------------
# Cart Request Schemas
# ---------------------------------------------------------------------------
class CreateCartRequest(BaseModel):
    customer_id: str | None = None
    currency_code: str = "USD"

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "customer_id": "cust-001",
                    "currency_code": "USD",
                }
            ]
        }
    }


class AddCartItemRequest(BaseModel):
    product_configuration: ProductConfigurationSchema
    quantity: int = Field(ge=1, default=1)
    price: MoneySchema


class AddFulfillmentGroupRequest(BaseModel):
    shipping_address: AddressSchema


class SelectShipmentMethodRequest(BaseModel):
    method_id: str | None = None
    carrier: str | None = None
    name: str
    label: str | None = None
    group: str | None = None
    rate: float | None = Field(default=None, ge=0)
    handling: float | None = Field(default=None, ge=0)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "method_id": "ground",
                    "carrier": "Flat Rate",
                    "name": "Ground",
                    "label": "Ground (3-5 days)",
                    "group": "Ground",
                    "rate": 5.0,
                    "handling": 1.0,
                }
            ]
        }
    }


class AddCartPaymentRequest(BaseModel):
    billing_address: AddressSchema


class SetCartAdjustmentsRequest(BaseModel):
    tax: float | None = Field(default=None, ge=0)
    discount: float | None = Field(default=None, ge=0)


# ---------------------------------------------------------------------------
# Catalog Request Schemas
# ---------------------------------------------------------------------------
class PublishCatalogProductRequest(BaseModel):
    """Internal ids; publishing is an administrative operation."""

    product_id: str
    title: str | None = None
    is_visible: bool = True
    variants: list[dict] = Field(default_factory=list)
    media: list[dict] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class CartIdResponse(BaseModel):
    cart_id: str


class CartItemIdResponse(BaseModel):
    item_id: str


class FulfillmentGroupIdResponse(BaseModel):
    group_id: str


class PaymentIdResponse(BaseModel):
    payment_id: str


class StatusResponse(BaseModel):
    status: str = "ok"
