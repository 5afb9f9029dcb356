"""Money value object for amounts stored on cart documents."""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Float, String

from checkout.domain import checkout

VALID_CURRENCIES = frozenset(
    {
        "USD",
        "EUR",
        "GBP",
        "JPY",
        "CAD",
        "AUD",
        "CHF",
        "CNY",
        "INR",
        "MXN",
        "BRL",
        "KRW",
        "SGD",
        "HKD",
        "NOK",
        "SEK",
        "DKK",
        "NZD",
        "ZAR",
        "TWD",
    }
)


def ensure_supported_currency(currency_code, field="currency_code"):
    if currency_code not in VALID_CURRENCIES:
        raise ValidationError({field: [f"Unsupported currency: {currency_code}"]})


@checkout.value_object
class Money:
    """An amount paired with the ISO 4217 code of its currency."""

    amount: Float(required=True, min_value=0.0)
    currency_code: String(required=True, max_length=3)

    @invariant.post
    def currency_must_be_valid_iso_4217(self):
        ensure_supported_currency(self.currency_code)
