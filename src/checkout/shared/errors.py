"""Errors raised while resolving a cart against the catalog.

Every error carries the identifiers of the offending line item so the caller
can report a specific failure instead of a generic checkout error. They
extend protean's exceptions, which the FastAPI integration maps to 404/400.
"""

from protean.exceptions import ObjectNotFoundError, ValidationError


class CatalogProductNotFound(ObjectNotFoundError):
    """The cart references a product that is missing from the visible catalog."""

    def __init__(self, product_id):
        self.product_id = product_id
        self.messages = {"product_id": [f"CatalogProduct with product ID {product_id} not found"]}
        super().__init__(self.messages)


class InvalidCartItem(ValidationError):
    """A cart item cannot be resolved against its catalog product."""

    def __init__(self, messages, product_id, variant_id):
        self.product_id = product_id
        self.variant_id = variant_id
        super().__init__(messages)


class VariantNotFound(InvalidCartItem):
    def __init__(self, product_id, variant_id):
        super().__init__(
            {"variant_id": [f"Product with ID {product_id} has no variant with ID {variant_id}"]},
            product_id=product_id,
            variant_id=variant_id,
        )


class MissingVariantPrice(InvalidCartItem):
    def __init__(self, product_id, variant_id, currency_code):
        self.currency_code = currency_code
        super().__init__(
            {
                "currency_code": [
                    f"Variant {variant_id} of product {product_id} does not have a price for {currency_code}"
                ]
            },
            product_id=product_id,
            variant_id=variant_id,
        )


class InvalidOpaqueId(ValidationError):
    """An externally supplied identifier is malformed or belongs to another namespace."""

    def __init__(self, namespace, opaque_id):
        self.namespace = namespace
        self.opaque_id = opaque_id
        super().__init__({"id": [f"Invalid {namespace} ID: {opaque_id}"]})
