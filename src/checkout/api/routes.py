"""FastAPI routes for the Checkout domain — carts, checkout resolution and catalog publishing."""

import json

from fastapi import APIRouter
from protean.utils.globals import current_domain

from checkout.api.schemas import (
    AddCartItemRequest,
    AddCartPaymentRequest,
    AddFulfillmentGroupRequest,
    CartIdResponse,
    CartItemIdResponse,
    CreateCartRequest,
    FulfillmentGroupIdResponse,
    PaymentIdResponse,
    PublishCatalogProductRequest,
    SelectShipmentMethodRequest,
    SetCartAdjustmentsRequest,
    StatusResponse,
)
from checkout.cart.cart import Cart
from checkout.cart.management import (
    AddCartItem,
    AddCartPayment,
    AddFulfillmentGroup,
    CreateCart,
    SelectShipmentMethod,
    SetCartAdjustments,
)
from checkout.catalog.lookup import RepositoryCatalogLookup
from checkout.catalog.publishing import PublishCatalogProduct, UnpublishCatalogProduct
from checkout.resolution.pipeline import build_checkout
from checkout.resolution.views import CheckoutSummary, ProductConfiguration
from checkout.shared.opaque_id import Namespace, decode_opaque_id, decode_product_configuration, encode_opaque_id
from checkout.utils.logging import bind_checkout_context, clear_checkout_context


def _encode_item(item):
    product_id = encode_opaque_id(Namespace.PRODUCT, item.product_id)
    variant_id = encode_opaque_id(Namespace.PRODUCT, item.variant_id)
    return item.model_copy(
        update={
            "id": encode_opaque_id(Namespace.CART_ITEM, item.id),
            "product_id": product_id,
            "variant_id": variant_id,
            "product_configuration": ProductConfiguration(product_id=product_id, product_variant_id=variant_id),
        }
    )


def _with_opaque_ids(summary: CheckoutSummary) -> CheckoutSummary:
    items = [_encode_item(item) for item in summary.items]
    return summary.model_copy(
        update={
            "items": items,
            "fulfillment_groups": [
                group.model_copy(update={"id": encode_opaque_id(Namespace.FULFILLMENT_GROUP, group.id), "items": items})
                for group in summary.fulfillment_groups
            ],
            "payments": [
                payment.model_copy(update={"id": encode_opaque_id(Namespace.PAYMENT, payment.id)})
                for payment in summary.payments
            ],
        }
    )


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/carts", tags=["carts"])


@cart_router.post("", status_code=201, response_model=CartIdResponse)
async def create_cart(body: CreateCartRequest) -> CartIdResponse:
    command = CreateCart(
        customer_id=body.customer_id,
        currency_code=body.currency_code,
    )
    cart_id = current_domain.process(command, asynchronous=False)
    return CartIdResponse(cart_id=encode_opaque_id(Namespace.CART, cart_id))


@cart_router.post("/{cart_id}/items", status_code=201, response_model=CartItemIdResponse)
async def add_cart_item(cart_id: str, body: AddCartItemRequest) -> CartItemIdResponse:
    product_id, variant_id = decode_product_configuration(
        body.product_configuration.product_id,
        body.product_configuration.product_variant_id,
    )
    command = AddCartItem(
        cart_id=decode_opaque_id(Namespace.CART, cart_id),
        product_id=product_id,
        variant_id=variant_id,
        quantity=body.quantity,
        price_amount=body.price.amount,
        currency_code=body.price.currency_code,
    )
    item_id = current_domain.process(command, asynchronous=False)
    return CartItemIdResponse(item_id=encode_opaque_id(Namespace.CART_ITEM, item_id))


@cart_router.post("/{cart_id}/fulfillment-groups", status_code=201, response_model=FulfillmentGroupIdResponse)
async def add_fulfillment_group(cart_id: str, body: AddFulfillmentGroupRequest) -> FulfillmentGroupIdResponse:
    command = AddFulfillmentGroup(
        cart_id=decode_opaque_id(Namespace.CART, cart_id),
        shipping_address=json.dumps(body.shipping_address.model_dump()),
    )
    group_id = current_domain.process(command, asynchronous=False)
    return FulfillmentGroupIdResponse(group_id=encode_opaque_id(Namespace.FULFILLMENT_GROUP, group_id))


@cart_router.put("/{cart_id}/fulfillment-groups/{group_id}/shipment-method", response_model=StatusResponse)
async def select_shipment_method(cart_id: str, group_id: str, body: SelectShipmentMethodRequest) -> StatusResponse:
    command = SelectShipmentMethod(
        cart_id=decode_opaque_id(Namespace.CART, cart_id),
        group_id=decode_opaque_id(Namespace.FULFILLMENT_GROUP, group_id),
        method_id=body.method_id,
        carrier=body.carrier,
        name=body.name,
        label=body.label,
        group=body.group,
        rate=body.rate,
        handling=body.handling,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@cart_router.post("/{cart_id}/payments", status_code=201, response_model=PaymentIdResponse)
async def add_cart_payment(cart_id: str, body: AddCartPaymentRequest) -> PaymentIdResponse:
    command = AddCartPayment(
        cart_id=decode_opaque_id(Namespace.CART, cart_id),
        billing_address=json.dumps(body.billing_address.model_dump()),
    )
    payment_id = current_domain.process(command, asynchronous=False)
    return PaymentIdResponse(payment_id=encode_opaque_id(Namespace.PAYMENT, payment_id))


@cart_router.put("/{cart_id}/adjustments", response_model=StatusResponse)
async def set_cart_adjustments(cart_id: str, body: SetCartAdjustmentsRequest) -> StatusResponse:
    command = SetCartAdjustments(
        cart_id=decode_opaque_id(Namespace.CART, cart_id),
        tax=body.tax,
        discount=body.discount,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@cart_router.get("/{cart_id}/checkout", response_model=CheckoutSummary)
async def get_checkout(cart_id: str) -> CheckoutSummary:
    """Resolve the cart against the published catalog and compute its totals."""
    internal_id = decode_opaque_id(Namespace.CART, cart_id)
    bind_checkout_context(cart_id=internal_id)
    try:
        cart = current_domain.repository_for(Cart).get(internal_id)
        summary = build_checkout(cart, RepositoryCatalogLookup())
    finally:
        clear_checkout_context()
    return _with_opaque_ids(summary)


# ---------------------------------------------------------------------------
# Catalog Router
# ---------------------------------------------------------------------------
catalog_router = APIRouter(prefix="/catalog/products", tags=["catalog"])


@catalog_router.post("", status_code=201, response_model=StatusResponse)
async def publish_catalog_product(body: PublishCatalogProductRequest) -> StatusResponse:
    command = PublishCatalogProduct(
        product_id=body.product_id,
        title=body.title,
        is_visible=body.is_visible,
        variants=json.dumps(body.variants),
        media=json.dumps(body.media),
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@catalog_router.delete("/{product_id}", response_model=StatusResponse)
async def unpublish_catalog_product(product_id: str) -> StatusResponse:
    current_domain.process(UnpublishCatalogProduct(product_id=product_id), asynchronous=False)
    return StatusResponse()
