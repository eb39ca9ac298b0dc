"""
Entry point: processes one card payment through the adapter.

Builds a `PaymentRecord`, gets a `CardPaymentPort` from the factory and calls
`process_payment` once. The console then shows exactly three lines:

    Generating Token....
    Charging $1533.5 using token tok_111202/26123
    Payment Successful

Usage:
    # Run the demo payment:
    python -m card_adapter.app

    # Override any of the card details:
    python -m card_adapter.app --card-number 4000056655665556 --amount 20

    # Show log output on stderr:
    python -m card_adapter.app -v
"""

import argparse
import logging

from card_adapter.domain.models import PaymentRecord
from card_adapter.ports import CardPaymentPort
from card_adapter.services.factory import ServiceFactory

DEFAULT_CARD_NUMBER = "1234567891011112"
DEFAULT_EXPIRY = "02/26"  # MM/YY
DEFAULT_CVV = "123"
DEFAULT_AMOUNT = 1533.50

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def run(record: PaymentRecord, port: CardPaymentPort | None = None) -> None:
    if port is None:
        port = ServiceFactory.get_card_payment_port()
    port.process_payment(record)


def _log_level(verbosity: int) -> int:
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Pay by card through a token-based payment API")
    parser.add_argument("--card-number", default=DEFAULT_CARD_NUMBER, help="Card number")
    parser.add_argument("--expiry", default=DEFAULT_EXPIRY, help="Expiry date, MM/YY")
    parser.add_argument("--cvv", default=DEFAULT_CVV, help="Card verification value")
    parser.add_argument("--amount", type=float, default=DEFAULT_AMOUNT, help="Amount to charge")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=_log_level(args.verbose), format=LOG_FORMAT)

    record = PaymentRecord(
        card_number=args.card_number,
        expiry=args.expiry,
        cvv=args.cvv,
        amount=args.amount,
    )
    logger.info("Starting card payment")
    run(record)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
