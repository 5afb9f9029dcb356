"""Item resolution — join raw cart items with their catalog products."""

import structlog

from checkout.catalog.variants import find_variant
from checkout.resolution.views import MoneyView, ProductConfiguration, ResolvedCartItem
from checkout.shared.errors import CatalogProductNotFound, MissingVariantPrice, VariantNotFound

logger = structlog.get_logger(__name__)


def _select_media(catalog_product, variant_id):
    """Media for the variant, else the product's first media item, else None."""
    if not catalog_product.media:
        return None
    return next(
        (media for media in catalog_product.media if media.variant_id == str(variant_id)),
        catalog_product.media[0],
    )


def resolve_item(catalog_products_by_id, cart_item) -> ResolvedCartItem:
    product_id = str(cart_item.product_id)
    variant_id = str(cart_item.variant_id)
    currency_code = cart_item.price_when_added.currency_code

    catalog_product = catalog_products_by_id.get(product_id)
    if catalog_product is None:
        raise CatalogProductNotFound(product_id)

    variant = find_variant(catalog_product, variant_id)
    if variant is None:
        raise VariantNotFound(product_id, variant_id)

    variant_price = variant.pricing.get(currency_code)
    if variant_price is None:
        raise MissingVariantPrice(product_id, variant_id, currency_code)

    media = _select_media(catalog_product, variant_id)
    compare_at_price = None
    if variant_price.compare_at_price is not None:
        compare_at_price = MoneyView.of(variant_price.compare_at_price, currency_code)

    return ResolvedCartItem(
        id=str(cart_item.id),
        product_id=product_id,
        variant_id=variant_id,
        quantity=cart_item.quantity,
        price_when_added=MoneyView.from_money(cart_item.price_when_added),
        price=MoneyView.of(variant_price.price, currency_code),
        compare_at_price=compare_at_price,
        current_quantity=variant.quantity,
        is_backorder=bool(variant.is_backorder),
        is_low_quantity=bool(variant.is_low_quantity),
        is_sold_out=bool(variant.is_sold_out),
        image_urls=media.urls if media is not None else None,
        product_configuration=ProductConfiguration(product_id=product_id, product_variant_id=variant_id),
    )


def resolve_items(catalog_products, cart_items) -> list[ResolvedCartItem]:
    """Resolve every cart item, in order, against an already-fetched set of catalog products.

    The first item that cannot be resolved aborts the whole batch.
    """
    catalog_products_by_id = {}
    for catalog_product in catalog_products:
        catalog_products_by_id.setdefault(catalog_product.product_id, catalog_product)

    try:
        return [resolve_item(catalog_products_by_id, cart_item) for cart_item in cart_items]
    except (CatalogProductNotFound, VariantNotFound, MissingVariantPrice) as exc:
        logger.warning(
            "Cart item could not be resolved against the catalog",
            error_type=type(exc).__name__,
            product_id=exc.product_id,
            messages=exc.messages,
        )
        raise
