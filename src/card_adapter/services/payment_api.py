"""
Token-based payment API (the adaptee).

Part of the **service layer**. In a real system this would call a payment
provider's tokenisation and charge endpoints. Here it derives the token
locally and announces each step on the console.

This class is deliberately incompatible with `CardPaymentPort`: it never sees
a `PaymentRecord`, only loose strings and a token. `PaymentAdapter` bridges
the gap.
"""

import logging

from card_adapter.domain.tokens import derive_token

logger = logging.getLogger(__name__)


class PaymentAPI:
    """Creates tokens and charges them.

    Always succeeds in this demo. `charge` does not look at the amount or
    the token, so zero and negative amounts are reported as successful too.
    """

    def create_token(self, card_number: str, expiry: str, cvv: str) -> str:
        print("Generating Token....")
        token = derive_token(card_number, expiry, cvv)
        logger.debug("Token derived")
        return token

    def charge(self, token: str, amount: float) -> None:
        logger.info("Charging %s", amount)
        print(f"Charging ${amount} using token {token}")
        print("Payment Successful")
        logger.info("Charge successful")
