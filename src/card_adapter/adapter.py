"""
PaymentAdapter: the bridge between the card-based and token-based contracts.

The **Adapter pattern** lets calling code keep using the interface it already
depends on (`CardPaymentPort.process_payment(record)`) while the work is done
by a service with an incompatible interface (`TokenService`).

    caller --process_payment(record)--> PaymentAdapter
        PaymentAdapter --create_token(card_number, expiry, cvv)--> TokenService
        PaymentAdapter --charge(token, amount)--------------------> TokenService

The adapter holds no state beyond the reference to its adaptee, set once at
construction. It does not translate errors: whatever the adaptee raises
reaches the caller unchanged.
"""

import logging

from card_adapter.domain.models import PaymentRecord
from card_adapter.ports import TokenService

logger = logging.getLogger(__name__)


class PaymentAdapter:
    """Implements `CardPaymentPort` on top of a `TokenService`.

    The same injected service is used both to create the token and to charge
    it. The adapter does not own the service; it only keeps a reference.
    """

    def __init__(self, token_service: TokenService) -> None:
        self._token_service = token_service

    @property
    def token_service(self) -> TokenService:
        return self._token_service

    def process_payment(self, record: PaymentRecord) -> None:
        logger.info("Processing payment of %s", record.amount)
        # Step 1: swap the raw card details for a token
        token = self._token_service.create_token(record.card_number, record.expiry, record.cvv)
        # Step 2: charge the token
        self._token_service.charge(token, record.amount)
        logger.info("Payment processed")
