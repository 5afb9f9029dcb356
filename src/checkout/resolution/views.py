"""Resolved checkout views returned to clients.

These are response contracts, separate from the stored protean documents.
Optional totals are ``None`` when they have not been computed yet, which is
different from a computed zero.
"""

from pydantic import BaseModel, Field

SHIPPING = "shipping"


class MoneyView(BaseModel):
    amount: float = Field(ge=0)
    currency_code: str

    @classmethod
    def of(cls, amount, currency_code):
        return cls(amount=amount, currency_code=currency_code)

    @classmethod
    def from_money(cls, money):
        return cls(amount=money.amount, currency_code=money.currency_code)


class AddressView(BaseModel):
    full_name: str | None = None
    street: str
    city: str
    state: str | None = None
    postal_code: str
    country: str
    phone: str | None = None

    @classmethod
    def from_address(cls, address):
        if address is None:
            return None
        return cls(
            full_name=address.full_name,
            street=address.street,
            city=address.city,
            state=address.state,
            postal_code=address.postal_code,
            country=address.country,
            phone=address.phone,
        )


# ---------------------------------------------------------------------------
# Items
# ---------------------------------------------------------------------------
class ProductConfiguration(BaseModel):
    product_id: str
    product_variant_id: str


class ResolvedCartItem(BaseModel):
    """A cart item joined with its catalog variant.

    ``compare_at_price`` is ``None`` when the variant has no compare-at price
    for the cart currency.
    """

    # Copied from the cart item
    id: str
    product_id: str
    variant_id: str
    quantity: int
    price_when_added: MoneyView

    # Resolved from the catalog
    price: MoneyView
    compare_at_price: MoneyView | None = None
    current_quantity: int | None = None
    is_backorder: bool = False
    is_low_quantity: bool = False
    is_sold_out: bool = False
    image_urls: dict[str, str] | None = None
    product_configuration: ProductConfiguration


# ---------------------------------------------------------------------------
# Fulfillment
# ---------------------------------------------------------------------------
class FulfillmentMethodView(BaseModel):
    carrier: str | None = None
    display_name: str
    group: str | None = None
    name: str
    fulfillment_types: list[str] = Field(default_factory=lambda: [SHIPPING])


class SelectedFulfillmentOption(BaseModel):
    id: str | None = None
    fulfillment_method: FulfillmentMethodView
    handling_price: MoneyView
    price: MoneyView


class FulfillmentData(BaseModel):
    shipping_address: AddressView | None = None


class FulfillmentOption(BaseModel):
    id: str
    fulfillment_type: str = SHIPPING
    data: FulfillmentData
    items: list[ResolvedCartItem]
    selected_fulfillment_option: SelectedFulfillmentOption | None = None


# ---------------------------------------------------------------------------
# Payments and totals
# ---------------------------------------------------------------------------
class PaymentData(BaseModel):
    billing_address: AddressView | None = None


class ResolvedPayment(BaseModel):
    id: str
    amount: MoneyView
    data: PaymentData


class CheckoutTotals(BaseModel):
    item_total: MoneyView
    fulfillment_total: MoneyView | None = None
    tax_total: MoneyView | None = None
    discount_total: MoneyView
    total: MoneyView


class CheckoutSummary(BaseModel):
    items: list[ResolvedCartItem]
    fulfillment_groups: list[FulfillmentOption]
    payments: list[ResolvedPayment]
    totals: CheckoutTotals
