"""Tests for depth-first variant search."""

from checkout.catalog.documents import CatalogProduct, CatalogVariant
from checkout.catalog.variants import find_variant


def _product():
    return CatalogProduct(
        product_id="prod-001",
        variants=[
            CatalogVariant(
                variant_id="var-red",
                options=[
                    CatalogVariant(variant_id="var-red-s"),
                    CatalogVariant(
                        variant_id="var-red-m",
                        options=[CatalogVariant(variant_id="var-red-m-gift")],
                    ),
                ],
            ),
            CatalogVariant(variant_id="var-blue"),
        ],
    )


def test_finds_top_level_variant():
    assert find_variant(_product(), "var-blue").variant_id == "var-blue"


def test_finds_nested_option():
    assert find_variant(_product(), "var-red-s").variant_id == "var-red-s"


def test_finds_option_of_option():
    assert find_variant(_product(), "var-red-m-gift").variant_id == "var-red-m-gift"


def test_missing_variant_returns_none():
    assert find_variant(_product(), "var-green") is None


def test_product_without_variants():
    assert find_variant(CatalogProduct(product_id="prod-002"), "var-red") is None


def test_searches_depth_first():
    product = CatalogProduct(
        product_id="prod-003",
        variants=[
            CatalogVariant(variant_id="parent-a", title="a", options=[CatalogVariant(variant_id="dup", title="nested")]),
            CatalogVariant(variant_id="dup", title="top-level"),
        ],
    )
    assert find_variant(product, "dup").title == "nested"
