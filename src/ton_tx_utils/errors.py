"""
Exceptions raised by the transaction field decoders.

All decode errors derive from TxDecodeError, which is itself a ValueError,
so callers can catch either the specific failure or the whole family.
"""


class TxDecodeError(ValueError):
    """Base class for transaction field decoding failures."""


class AmountUnavailableError(TxDecodeError):
    """The incoming message carries no (or a zero) coin value."""

    def __init__(self, message: str = "Can't get currency from transaction"):
        super().__init__(message)


class UnknownCurrencyError(TxDecodeError):
    """A currency unit other than 'ton' or 'nano' was requested."""

    def __init__(self, currency: object):
        self.currency = currency
        super().__init__(f"unknown currency {currency}")


class NotACommentError(TxDecodeError):
    """The message body starts with a non-zero operation code."""

    def __init__(self, op_code: int):
        self.op_code = op_code
        super().__init__(f"op != 0, can't get tx message (op=0x{op_code:08x})")


class SenderUnavailableError(TxDecodeError):
    """A raw sender string was requested but the message has no source."""

    def __init__(self, message: str = "Transaction has no sender address"):
        super().__init__(message)
