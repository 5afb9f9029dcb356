"""Cart aggregate — the raw cart document that checkout resolution reads.

A cart holds line items with the price captured when each item was added,
the fulfillment groups (shipping destinations) with an optional chosen
shipment method, the payments, and the tax ratio and discount computed by
other services.

Known limitation: a cart ships to a single destination. Fulfillment groups
do not record which items they contain; every group is treated as holding
the whole item list when the checkout is resolved.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, ValueObject

from checkout.domain import checkout
from checkout.shared.money import Money, ensure_supported_currency


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@checkout.value_object(part_of="Cart")
class Address:
    """A shipping or billing address as entered during checkout."""

    full_name = String(max_length=255)
    street = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    state = String(max_length=100)
    postal_code = String(required=True, max_length=20)
    country = String(required=True, max_length=100)
    phone = String(max_length=30)


@checkout.value_object(part_of="Cart")
class ShipmentMethod:
    """The shipping method selected for a fulfillment group.

    ``rate`` and ``handling`` are expressed in the cart's currency.
    """

    method_id = Identifier()
    carrier = String(max_length=100)
    name = String(required=True, max_length=100)
    label = String(max_length=255)
    group = String(max_length=100)
    rate = Float(min_value=0.0)
    handling = Float(min_value=0.0)


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@checkout.entity(part_of="Cart")
class CartItem:
    product_id = Identifier(required=True)
    variant_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    price_when_added = ValueObject(Money, required=True)
    added_at = DateTime()


@checkout.entity(part_of="Cart")
class FulfillmentGroup:
    """A shipping destination. Always holds every item in the cart."""

    address = ValueObject(Address)
    shipment_method = ValueObject(ShipmentMethod)


@checkout.entity(part_of="Cart")
class CartPayment:
    address = ValueObject(Address)


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@checkout.aggregate
class Cart:
    customer_id = Identifier()
    currency_code = String(required=True, max_length=3, default="USD")
    items = HasMany(CartItem)
    fulfillment_groups = HasMany(FulfillmentGroup)
    payments = HasMany(CartPayment)
    tax = Float(min_value=0.0)  # Effective tax ratio; None until a tax service has run
    discount = Float(min_value=0.0)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def currency_must_be_supported(self):
        ensure_supported_currency(self.currency_code)

    @classmethod
    def create(cls, currency_code="USD", customer_id=None):
        ensure_supported_currency(currency_code)
        now = datetime.now(UTC)
        return cls(
            customer_id=customer_id,
            currency_code=currency_code,
            created_at=now,
            updated_at=now,
        )

    # -------------------------------------------------------------------
    # Items
    # -------------------------------------------------------------------
    def add_item(self, product_id, variant_id, quantity, price_when_added):
        """Add a line item, or increase the quantity of the same product variant.

        The price captured on first add is kept when the quantity grows.
        """
        existing = next(
            (i for i in self.items if str(i.product_id) == str(product_id) and str(i.variant_id) == str(variant_id)),
            None,
        )

        now = datetime.now(UTC)
        if existing:
            existing.quantity += quantity
            item_id = str(existing.id)
        else:
            item = CartItem(
                product_id=product_id,
                variant_id=variant_id,
                quantity=quantity,
                price_when_added=price_when_added,
                added_at=now,
            )
            self.add_items(item)
            item_id = str(item.id)

        self.updated_at = now
        return item_id

    # -------------------------------------------------------------------
    # Fulfillment
    # -------------------------------------------------------------------
    def add_fulfillment_group(self, address):
        group = FulfillmentGroup(address=address)
        self.add_fulfillment_groups(group)
        self.updated_at = datetime.now(UTC)
        return str(group.id)

    def select_shipment_method(self, group_id, shipment_method):
        group = next((g for g in self.fulfillment_groups if str(g.id) == str(group_id)), None)
        if group is None:
            raise ValidationError({"group_id": ["Fulfillment group not found in cart"]})

        group.shipment_method = shipment_method
        self.updated_at = datetime.now(UTC)

    # -------------------------------------------------------------------
    # Payments and adjustments
    # -------------------------------------------------------------------
    def add_payment(self, address):
        payment = CartPayment(address=address)
        self.add_payments(payment)
        self.updated_at = datetime.now(UTC)
        return str(payment.id)

    def set_adjustments(self, tax=None, discount=None):
        """Record the tax ratio and discount amount calculated for this cart."""
        if tax is not None and tax < 0:
            raise ValidationError({"tax": ["Tax ratio cannot be negative"]})
        if discount is not None and discount < 0:
            raise ValidationError({"discount": ["Discount cannot be negative"]})

        self.tax = tax
        self.discount = discount
        self.updated_at = datetime.now(UTC)
