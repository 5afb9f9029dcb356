"""Fulfillment group resolution."""

from checkout.resolution.views import (
    SHIPPING,
    AddressView,
    FulfillmentData,
    FulfillmentMethodView,
    FulfillmentOption,
    MoneyView,
    SelectedFulfillmentOption,
)


def _selected_option(shipment_method, currency_code):
    # Rates are charged in the cart's currency, whatever the method was quoted in.
    return SelectedFulfillmentOption(
        id=str(shipment_method.method_id) if shipment_method.method_id else None,
        fulfillment_method=FulfillmentMethodView(
            carrier=shipment_method.carrier or None,
            display_name=shipment_method.label or shipment_method.name,
            group=shipment_method.group or None,
            name=shipment_method.name,
            fulfillment_types=[SHIPPING],
        ),
        handling_price=MoneyView.of(shipment_method.handling or 0.0, currency_code),
        price=MoneyView.of(shipment_method.rate or 0.0, currency_code),
    )


def resolve_fulfillment_group(group, cart, resolved_items) -> FulfillmentOption:
    """Describe a fulfillment group and its selected shipping option, if any.

    A cart ships to a single destination, so every group lists all items.
    """
    selected = None
    if group.shipment_method is not None:
        selected = _selected_option(group.shipment_method, cart.currency_code)

    return FulfillmentOption(
        id=str(group.id),
        fulfillment_type=SHIPPING,
        data=FulfillmentData(shipping_address=AddressView.from_address(group.address)),
        items=list(resolved_items),
        selected_fulfillment_option=selected,
    )
