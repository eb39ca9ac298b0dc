"""
Capability contracts (the two sides of the Adapter pattern).

- `CardPaymentPort` is the **target**: the interface the calling code depends
  on. It takes a whole `PaymentRecord` in a single call.
- `TokenService` is the **adaptee** capability: an existing service that only
  understands tokens, and needs two calls (create a token, then charge it).

Both are Protocols, so any class with matching methods satisfies them
(structural subtyping, no explicit inheritance needed). They are
`runtime_checkable` so wiring code and tests can check conformance with
`isinstance`.
"""

from typing import Protocol, runtime_checkable

from card_adapter.domain.models import PaymentRecord


@runtime_checkable
class TokenService(Protocol):
    """Token-based payment capability (adaptee)."""

    def create_token(self, card_number: str, expiry: str, cvv: str) -> str: ...

    def charge(self, token: str, amount: float) -> None: ...


@runtime_checkable
class CardPaymentPort(Protocol):
    """Card-based payment capability (target)."""

    def process_payment(self, record: PaymentRecord) -> None: ...
