"""Domain errors."""


class CardNumberTooShortError(IndexError):
    """Raised when a card number has too few characters to derive a token.

    Subclasses IndexError: taking the last digits of a short card number is
    an out-of-bounds access.
    """

    def __init__(self, length: int, required: int) -> None:
        self.length = length
        self.required = required
        super().__init__(f"Card number has {length} characters, at least {required} required")
