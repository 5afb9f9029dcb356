"""Payment resolution."""

from checkout.resolution.views import AddressView, MoneyView, PaymentData, ResolvedPayment


def resolve_payment(payment, cart, grand_total) -> ResolvedPayment:
    """Stamp a payment with the full cart total; amounts are never split across payments."""
    return ResolvedPayment(
        id=str(payment.id),
        amount=MoneyView.of(grand_total, cart.currency_code),
        data=PaymentData(billing_address=AddressView.from_address(payment.address)),
    )
