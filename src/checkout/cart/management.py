"""Cart document management — commands and handlers.

These commands keep the stored cart document up to date. Checkout
resolution only ever reads the result.
"""

import json

from protean import handle
from protean.fields import Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from checkout.cart.cart import Address, Cart, ShipmentMethod
from checkout.domain import checkout
from checkout.shared.money import Money


@checkout.command(part_of="Cart")
class CreateCart:
    customer_id = Identifier()  # Optional for guest carts
    currency_code = String(max_length=3, default="USD")


@checkout.command(part_of="Cart")
class AddCartItem:
    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)
    variant_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    price_amount = Float(required=True, min_value=0.0)
    currency_code = String(required=True, max_length=3)


@checkout.command(part_of="Cart")
class AddFulfillmentGroup:
    cart_id = Identifier(required=True)
    shipping_address = Text(required=True)  # JSON: Address fields


@checkout.command(part_of="Cart")
class SelectShipmentMethod:
    cart_id = Identifier(required=True)
    group_id = Identifier(required=True)
    method_id = Identifier()
    carrier = String(max_length=100)
    name = String(required=True, max_length=100)
    label = String(max_length=255)
    group = String(max_length=100)
    rate = Float(min_value=0.0)
    handling = Float(min_value=0.0)


@checkout.command(part_of="Cart")
class AddCartPayment:
    cart_id = Identifier(required=True)
    billing_address = Text(required=True)  # JSON: Address fields


@checkout.command(part_of="Cart")
class SetCartAdjustments:
    """Record the tax ratio and discount amount calculated for a cart."""

    cart_id = Identifier(required=True)
    tax = Float(min_value=0.0)
    discount = Float(min_value=0.0)


def _address_from(payload):
    data = json.loads(payload) if isinstance(payload, str) else payload
    return Address(**data)


@checkout.command_handler(part_of=Cart)
class ManageCartHandler:
    @handle(CreateCart)
    def create_cart(self, command):
        cart = Cart.create(
            currency_code=command.currency_code or "USD",
            customer_id=command.customer_id,
        )
        current_domain.repository_for(Cart).add(cart)
        return str(cart.id)

    @handle(AddCartItem)
    def add_cart_item(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.get(command.cart_id)
        item_id = cart.add_item(
            product_id=command.product_id,
            variant_id=command.variant_id,
            quantity=command.quantity,
            price_when_added=Money(amount=command.price_amount, currency_code=command.currency_code),
        )
        repo.add(cart)
        return item_id

    @handle(AddFulfillmentGroup)
    def add_fulfillment_group(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.get(command.cart_id)
        group_id = cart.add_fulfillment_group(_address_from(command.shipping_address))
        repo.add(cart)
        return group_id

    @handle(SelectShipmentMethod)
    def select_shipment_method(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.get(command.cart_id)
        cart.select_shipment_method(
            command.group_id,
            ShipmentMethod(
                method_id=command.method_id,
                carrier=command.carrier,
                name=command.name,
                label=command.label,
                group=command.group,
                rate=command.rate,
                handling=command.handling,
            ),
        )
        repo.add(cart)

    @handle(AddCartPayment)
    def add_cart_payment(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.get(command.cart_id)
        payment_id = cart.add_payment(_address_from(command.billing_address))
        repo.add(cart)
        return payment_id

    @handle(SetCartAdjustments)
    def set_cart_adjustments(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.get(command.cart_id)
        cart.set_adjustments(tax=command.tax, discount=command.discount)
        repo.add(cart)
