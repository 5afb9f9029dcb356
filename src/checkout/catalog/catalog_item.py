"""CatalogItem aggregate — the stored copy of a published catalog product.

Variants and media are kept as JSON text, the same shape as
``CatalogProduct`` expects, and are parsed on the way out.
"""

import json

from protean.fields import Boolean, DateTime, Identifier, String, Text

from checkout.catalog.documents import CatalogProduct
from checkout.domain import checkout


@checkout.aggregate
class CatalogItem:
    product_id = Identifier(identifier=True, required=True)
    title = String(max_length=255)
    is_visible = Boolean(default=True)
    is_deleted = Boolean(default=False)
    variants = Text()  # JSON: list of CatalogVariant
    media = Text()  # JSON: list of MediaItem
    published_at = DateTime()

    def to_document(self) -> CatalogProduct:
        return CatalogProduct.model_validate(
            {
                "product_id": str(self.product_id),
                "title": self.title,
                "is_visible": bool(self.is_visible),
                "is_deleted": bool(self.is_deleted),
                "variants": json.loads(self.variants) if self.variants else [],
                "media": json.loads(self.media) if self.media else [],
            }
        )
