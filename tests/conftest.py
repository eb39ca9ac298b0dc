import pytest

from card_adapter.domain.models import PaymentRecord
from card_adapter.services.factory import ServiceFactory


class RecordingTokenService:
    """
    Always succeeds, and remembers how it was invoked (like a mock)
    """

    def __init__(self, token="tok_fake"):
        self.token = token
        self.calls = []

    def create_token(self, card_number, expiry, cvv):
        self.calls.append(("create_token", card_number, expiry, cvv))
        return self.token

    def charge(self, token, amount):
        self.calls.append(("charge", token, amount))


@pytest.fixture(autouse=True)
def reset_factory():
    ServiceFactory.reset()
    yield
    ServiceFactory.reset()


@pytest.fixture
def demo_record():
    return PaymentRecord(card_number="1234567891011112", expiry="02/26", cvv="123", amount=1533.50)


@pytest.fixture
def recording_service():
    return RecordingTokenService()
