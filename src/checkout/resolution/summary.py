"""Checkout totals and assembly of the final checkout summary.

``fulfillment_total`` and ``tax_total`` are ``None`` until they can be
computed. ``None`` is treated as zero only inside the grand total; the
summary keeps it as ``None`` so clients can tell "not yet computed" apart
from "computed as zero".
"""

from checkout.resolution.fulfillment import resolve_fulfillment_group
from checkout.resolution.payments import resolve_payment
from checkout.resolution.views import CheckoutSummary, CheckoutTotals, MoneyView


def zero_if_none(amount):
    return 0 if amount is None else amount


def compute_item_total(resolved_items):
    # Items are charged at the price captured when added, not the current catalog price.
    return sum(item.quantity * item.price_when_added.amount for item in resolved_items)


def compute_fulfillment_total(fulfillment_groups):
    """Sum rate and handling over groups with a selected method; None if no group has one."""
    methods = [group.shipment_method for group in fulfillment_groups if group.shipment_method is not None]
    if not methods:
        return None
    shipping_total = sum(zero_if_none(method.rate) for method in methods)
    handling_total = sum(zero_if_none(method.handling) for method in methods)
    return shipping_total + handling_total


def compute_tax_total(item_total, tax_ratio):
    if isinstance(tax_ratio, bool) or not isinstance(tax_ratio, int | float):
        return None
    return item_total * tax_ratio


def compute_grand_total(item_total, fulfillment_total, tax_total, discount_total):
    return max(0, item_total + zero_if_none(fulfillment_total) + zero_if_none(tax_total) - discount_total)


def compute_totals(cart, resolved_items):
    """Return (item, fulfillment, tax, discount, grand) totals as plain numbers."""
    item_total = compute_item_total(resolved_items)
    fulfillment_total = compute_fulfillment_total(list(cart.fulfillment_groups or []))
    tax_total = compute_tax_total(item_total, cart.tax)
    discount_total = cart.discount or 0
    total = compute_grand_total(item_total, fulfillment_total, tax_total, discount_total)
    return item_total, fulfillment_total, tax_total, discount_total, total


def compute_checkout(cart, resolved_items) -> CheckoutSummary:
    item_total, fulfillment_total, tax_total, discount_total, total = compute_totals(cart, resolved_items)
    currency_code = cart.currency_code

    totals = CheckoutTotals(
        item_total=MoneyView.of(item_total, currency_code),
        fulfillment_total=MoneyView.of(fulfillment_total, currency_code) if fulfillment_total is not None else None,
        tax_total=MoneyView.of(tax_total, currency_code) if tax_total is not None else None,
        discount_total=MoneyView.of(discount_total, currency_code),
        total=MoneyView.of(total, currency_code),
    )

    return CheckoutSummary(
        items=list(resolved_items),
        fulfillment_groups=[
            resolve_fulfillment_group(group, cart, resolved_items) for group in cart.fulfillment_groups or []
        ],
        payments=[resolve_payment(payment, cart, total) for payment in cart.payments or []],
        totals=totals,
    )
