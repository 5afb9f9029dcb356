"""Opaque identifiers exposed by the HTTP layer.

An opaque id is the base64 encoding of ``"<namespace>:<internal id>"``. It
hides the internal id and the kind of document it points at. The resolution
core never sees opaque ids; routes decode them on the way in and encode them
on the way out.
"""

import base64
import binascii
from enum import Enum

from checkout.shared.errors import InvalidOpaqueId


class Namespace(Enum):
    CART = "storefront/cart"
    CART_ITEM = "storefront/cartItem"
    PRODUCT = "storefront/product"
    FULFILLMENT_GROUP = "storefront/fulfillmentGroup"
    PAYMENT = "storefront/payment"


def encode_opaque_id(namespace: Namespace, internal_id) -> str | None:
    if internal_id is None:
        return None
    raw = f"{namespace.value}:{internal_id}".encode()
    return base64.urlsafe_b64encode(raw).decode("ascii")


def decode_opaque_id(namespace: Namespace, opaque_id: str) -> str:
    """Return the internal id, or raise InvalidOpaqueId for malformed or foreign ids."""
    try:
        decoded = base64.urlsafe_b64decode(opaque_id.encode("ascii")).decode("utf-8")
    except (binascii.Error, UnicodeError, ValueError, AttributeError):
        raise InvalidOpaqueId(namespace.value, opaque_id) from None

    prefix, _, internal_id = decoded.partition(":")
    if prefix != namespace.value or not internal_id:
        raise InvalidOpaqueId(namespace.value, opaque_id)
    return internal_id


def decode_product_configuration(product_id: str, product_variant_id: str) -> tuple[str, str]:
    """Decode the product and variant ids a client sends when adding a cart item."""
    return (
        decode_opaque_id(Namespace.PRODUCT, product_id),
        decode_opaque_id(Namespace.PRODUCT, product_variant_id),
    )
