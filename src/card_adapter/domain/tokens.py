"""
Token derivation.

A **token** is an opaque string standing in for raw card data. Here it is
synthesised by plain concatenation:

    "tok_" + <last 4 characters of the card number> + <expiry> + <cvv>

Derivation is a pure function of its three inputs, so the same card details
always produce the same token.
"""

from card_adapter.domain.errors import CardNumberTooShortError

TOKEN_PREFIX = "tok_"
CARD_SUFFIX_LENGTH = 4


def derive_token(card_number: str, expiry: str, cvv: str) -> str:
    """Build the token for a card.

    Examples:
        - ("1234567891011112", "02/26", "123") -> "tok_111202/26123"
        - ("4242", "", "")                      -> "tok_4242"

    Raises:
        CardNumberTooShortError: if `card_number` is shorter than 4 characters.
    """
    if len(card_number) < CARD_SUFFIX_LENGTH:
        raise CardNumberTooShortError(len(card_number), CARD_SUFFIX_LENGTH)
    return TOKEN_PREFIX + card_number[-CARD_SUFFIX_LENGTH:] + expiry + cvv
