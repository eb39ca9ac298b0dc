"""
Domain model for the card payment example.

`PaymentRecord` is the single data holder the calling code hands to the
**target** interface (`CardPaymentPort`). It uses Pydantic v2 so field types
are checked at construction, but no business rules are enforced: any card
number, expiry, CVV or amount is accepted as-is.

The model is frozen, so a record cannot be mutated after it is built.
"""

from pydantic import BaseModel, ConfigDict


class PaymentRecord(BaseModel):
    """Card details plus the amount to charge.

    Built once by the entry point and read once by the adapter.
    """

    model_config = ConfigDict(frozen=True)

    card_number: str  # Full card number, e.g. "1234567891011112"
    expiry: str       # "MM/YY", not validated
    cvv: str          # Not validated
    amount: float     # No currency unit; zero and negative values are accepted
