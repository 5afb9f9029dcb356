"""Shared BDD fixtures and step definitions for checkout resolution."""

import pytest
from checkout.cart.cart import Address, Cart, ShipmentMethod
from checkout.catalog.documents import CatalogProduct, CatalogVariant, VariantPrice
from checkout.shared.money import Money
from pytest_bdd import given, parsers


class StaticCatalogLookup:
    def __init__(self, products):
        self.products = products

    def find_visible_products(self, product_ids):
        return [p for p in self.products.values() if p.product_id in product_ids]


def _address():
    return Address(street="123 Main St", city="Springfield", state="IL", postal_code="62701", country="US")


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def catalog():
    """Catalog products keyed by product id."""
    return {}


@pytest.fixture()
def catalog_lookup(catalog):
    return StaticCatalogLookup(catalog)


@pytest.fixture()
def outcome():
    """Container for the resolved summary or the captured error."""
    return {"summary": None, "exc": None}


# ---------------------------------------------------------------------------
# Given steps — Catalog
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a catalog product "{product_id}" with variant "{variant_id}" priced at {price:f} {currency}'))
def catalog_product(catalog, product_id, variant_id, price, currency):
    catalog[product_id] = CatalogProduct(
        product_id=product_id,
        variants=[CatalogVariant(variant_id=variant_id, pricing={currency: VariantPrice(price=price)})],
    )


@given(parsers.cfparse('the catalog price of "{product_id}" variant "{variant_id}" changes to {price:f} {currency}'))
def catalog_price_changes(catalog, product_id, variant_id, price, currency):
    catalog[product_id] = CatalogProduct(
        product_id=product_id,
        variants=[CatalogVariant(variant_id=variant_id, pricing={currency: VariantPrice(price=price)})],
    )


# ---------------------------------------------------------------------------
# Given steps — Cart
# ---------------------------------------------------------------------------
@given(
    parsers.cfparse('a {currency} cart with {quantity:d} of "{product_id}" variant "{variant_id}" added at {amount:f}'),
    target_fixture="cart",
)
def cart_with_item(currency, quantity, product_id, variant_id, amount):
    cart = Cart.create(currency_code=currency)
    cart.add_item(product_id, variant_id, quantity, Money(amount=amount, currency_code=currency))
    return cart


@given(parsers.cfparse('the cart also holds {quantity:d} of "{product_id}" variant "{variant_id}" added at {amount:f}'))
def cart_also_holds(cart, quantity, product_id, variant_id, amount):
    cart.add_item(product_id, variant_id, quantity, Money(amount=amount, currency_code=cart.currency_code))


@given(parsers.cfparse("the cart ships with rate {rate:f} and handling {handling:f}"))
def cart_ships_with_method(cart, rate, handling):
    group_id = cart.add_fulfillment_group(_address())
    cart.select_shipment_method(group_id, ShipmentMethod(name="Ground", rate=rate, handling=handling))


@given("the cart ships to an address without a method")
def cart_ships_without_method(cart):
    cart.add_fulfillment_group(_address())


@given(parsers.cfparse("the cart has a tax ratio of {ratio:f}"))
def cart_tax_ratio(cart, ratio):
    cart.set_adjustments(tax=ratio, discount=cart.discount)


@given(parsers.cfparse("the cart has a discount of {discount:f}"))
def cart_discount(cart, discount):
    cart.set_adjustments(tax=cart.tax, discount=discount)


@given(parsers.cfparse("the cart has {count:d} payments"))
def cart_payments(cart, count):
    for _ in range(count):
        cart.add_payment(_address())
