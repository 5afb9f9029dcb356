"""Catalog publishing — commands and handler that maintain CatalogItem documents."""

import json
from datetime import UTC, datetime

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Boolean, Identifier, String, Text
from protean.utils.globals import current_domain
from pydantic import ValidationError as DocumentValidationError

from checkout.catalog.catalog_item import CatalogItem
from checkout.catalog.documents import CatalogProduct
from checkout.domain import checkout

logger = structlog.get_logger(__name__)


@checkout.command(part_of="CatalogItem")
class PublishCatalogProduct:
    """Create or replace the published snapshot of a product."""

    product_id = Identifier(required=True)
    title = String(max_length=255)
    is_visible = Boolean(default=True)
    variants = Text()  # JSON: list of CatalogVariant
    media = Text()  # JSON: list of MediaItem


@checkout.command(part_of="CatalogItem")
class UnpublishCatalogProduct:
    product_id = Identifier(required=True)


def _validated_document(command) -> CatalogProduct:
    try:
        return CatalogProduct.model_validate(
            {
                "product_id": str(command.product_id),
                "title": command.title,
                "is_visible": command.is_visible if command.is_visible is not None else True,
                "variants": json.loads(command.variants) if command.variants else [],
                "media": json.loads(command.media) if command.media else [],
            }
        )
    except json.JSONDecodeError:
        raise ValidationError({"catalog_product": ["Variants and media must be valid JSON"]}) from None
    except DocumentValidationError as exc:
        messages = [f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()]
        raise ValidationError({"catalog_product": messages}) from None


@checkout.command_handler(part_of=CatalogItem)
class PublishCatalogHandler:
    @handle(PublishCatalogProduct)
    def publish(self, command):
        document = _validated_document(command)
        repo = current_domain.repository_for(CatalogItem)

        try:
            item = repo.get(document.product_id)
        except ObjectNotFoundError:
            item = CatalogItem(product_id=document.product_id)

        item.title = document.title
        item.is_visible = document.is_visible
        item.is_deleted = False
        item.variants = json.dumps([variant.model_dump() for variant in document.variants])
        item.media = json.dumps([media.model_dump() for media in document.media])
        item.published_at = datetime.now(UTC)
        repo.add(item)

        logger.info(
            "Published catalog product",
            product_id=document.product_id,
            variant_count=len(document.variants),
        )
        return document.product_id

    @handle(UnpublishCatalogProduct)
    def unpublish(self, command):
        repo = current_domain.repository_for(CatalogItem)
        item = repo.get(command.product_id)
        item.is_visible = False
        repo.add(item)
        logger.info("Unpublished catalog product", product_id=str(command.product_id))
