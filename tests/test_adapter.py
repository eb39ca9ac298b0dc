import pytest

from card_adapter.adapter import PaymentAdapter
from card_adapter.domain.errors import CardNumberTooShortError
from card_adapter.domain.models import PaymentRecord
from card_adapter.ports import CardPaymentPort
from card_adapter.services.payment_api import PaymentAPI


def test_it_should_satisfy_the_card_payment_port_protocol(recording_service):
    assert isinstance(PaymentAdapter(recording_service), CardPaymentPort)


def test_it_should_keep_the_injected_service(recording_service):
    assert PaymentAdapter(recording_service).token_service is recording_service


def test_it_should_create_a_token_then_charge_it(recording_service, demo_record):
    assert PaymentAdapter(recording_service).process_payment(demo_record) is None
    assert recording_service.calls == [
        ("create_token", "1234567891011112", "02/26", "123"),
        ("charge", "tok_fake", 1533.5),
    ]


def test_it_should_call_each_step_once_per_payment(recording_service, demo_record):
    adapter = PaymentAdapter(recording_service)
    adapter.process_payment(demo_record)
    adapter.process_payment(demo_record)
    assert [call[0] for call in recording_service.calls] == ["create_token", "charge", "create_token", "charge"]


def test_it_should_produce_the_expected_console_output(capsys, demo_record):
    PaymentAdapter(PaymentAPI()).process_payment(demo_record)
    assert capsys.readouterr().out == (
        "Generating Token....\n"
        "Charging $1533.5 using token tok_111202/26123\n"
        "Payment Successful\n"
    )


def test_repeated_payments_should_produce_identical_output(capsys, demo_record):
    adapter = PaymentAdapter(PaymentAPI())
    adapter.process_payment(demo_record)
    first = capsys.readouterr().out
    adapter.process_payment(demo_record)
    assert capsys.readouterr().out == first


def test_it_should_propagate_adaptee_errors_without_charging(capsys):
    record = PaymentRecord(card_number="123", expiry="02/26", cvv="123", amount=10)
    with pytest.raises(CardNumberTooShortError):
        PaymentAdapter(PaymentAPI()).process_payment(record)
    assert "Charging" not in capsys.readouterr().out
