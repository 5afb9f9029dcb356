"""Catalog lookup — the batched catalog fetch that precedes item resolution."""

from typing import Protocol

from protean.utils.globals import current_domain

from checkout.catalog.catalog_item import CatalogItem
from checkout.catalog.documents import CatalogProduct


class CatalogLookup(Protocol):
    def find_visible_products(self, product_ids: list[str]) -> list[CatalogProduct]:
        """Return the visible, non-deleted products whose id is in ``product_ids``.

        Missing ids are simply absent from the result.
        """
        ...


class RepositoryCatalogLookup:
    """Reads CatalogItem documents from the active domain's repository."""

    def find_visible_products(self, product_ids: list[str]) -> list[CatalogProduct]:
        if not product_ids:
            return []

        records = (
            current_domain.repository_for(CatalogItem)
            ._dao.query.filter(product_id__in=list(product_ids), is_visible=True, is_deleted=False)
            .limit(len(product_ids))
            .all()
            .items
        )
        return [record.to_document() for record in records]
