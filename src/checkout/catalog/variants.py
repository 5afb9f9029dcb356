"""Variant search within a catalog product."""

from checkout.catalog.documents import CatalogProduct, CatalogVariant


def find_variant(catalog_product: CatalogProduct, variant_id) -> CatalogVariant | None:
    """Depth-first search through the product's variants and their nested options."""
    stack = list(reversed(catalog_product.variants))
    while stack:
        variant = stack.pop()
        if variant.variant_id == str(variant_id):
            return variant
        stack.extend(reversed(variant.options))
    return None
