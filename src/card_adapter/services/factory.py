"""
Simple factory for service singletons.

The **Factory pattern** centralises construction and wiring. The entry point
asks `ServiceFactory.get_card_payment_port()` for something that speaks the
target interface, and never has to know that a `PaymentAPI` sits behind a
`PaymentAdapter`.

The adaptee is always built first and then handed to the adapter, so there is
exactly one `PaymentAPI` instance behind the cached adapter.
"""

from card_adapter.adapter import PaymentAdapter
from card_adapter.services.payment_api import PaymentAPI


class ServiceFactory:
    """Lazily creates and caches service instances (class-level singletons)."""

    _token_service: PaymentAPI | None = None
    _card_payment_port: PaymentAdapter | None = None

    @classmethod
    def get_token_service(cls) -> PaymentAPI:
        if cls._token_service is None:
            cls._token_service = PaymentAPI()
        return cls._token_service

    @classmethod
    def get_card_payment_port(cls) -> PaymentAdapter:
        if cls._card_payment_port is None:
            cls._card_payment_port = PaymentAdapter(cls.get_token_service())
        return cls._card_payment_port

    @classmethod
    def reset(cls) -> None:
        """Drop cached instances so the next call builds fresh ones."""
        cls._token_service = None
        cls._card_payment_port = None
