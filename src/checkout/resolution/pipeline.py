"""Checkout resolution entry point."""

import structlog

from checkout.resolution.items import resolve_items
from checkout.resolution.summary import compute_checkout
from checkout.resolution.views import CheckoutSummary

logger = structlog.get_logger(__name__)


def distinct_product_ids(cart_items) -> list[str]:
    return list(dict.fromkeys(str(item.product_id) for item in cart_items))


def build_checkout(cart, catalog_lookup) -> CheckoutSummary:
    """Resolve a cart document into its client-facing checkout view.

    The catalog is fetched once for all distinct products in the cart. Any
    item that cannot be resolved fails the whole build; no partial summary
    is returned.
    """
    cart_items = list(cart.items or [])
    product_ids = distinct_product_ids(cart_items)
    catalog_products = catalog_lookup.find_visible_products(product_ids) if product_ids else []

    resolved_items = resolve_items(catalog_products, cart_items)
    summary = compute_checkout(cart, resolved_items)

    logger.debug(
        "Resolved checkout",
        cart_id=str(cart.id),
        item_count=len(resolved_items),
        total=summary.totals.total.amount,
        currency_code=cart.currency_code,
    )
    return summary
