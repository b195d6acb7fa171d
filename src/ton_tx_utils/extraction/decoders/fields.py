"""
Field accessors for TON transactions: direction, sender and value.

Every function takes a single transaction, either a pytoniq-core Transaction
or a TransactionRecord, and returns a plain value. They never mutate the
transaction, keep no state between calls and do not log.

Usage:
    from ton_tx_utils.extraction.decoders.fields import (
        get_tx_sender,
        get_tx_value_amount,
        is_internal,
    )

    if is_internal(tx):
        sender = get_tx_sender(tx, as_hex=True)   # "0:83df...e2a1"
        amount = get_tx_value_amount(tx)          # "1.25"
"""

from enum import Enum
from typing import Any

from pytoniq_core import Address

from ...errors import (
    AmountUnavailableError,
    SenderUnavailableError,
    UnknownCurrencyError,
)
from ..core.models import (
    InternalMessageInfo,
    MessageDirection,
    TransactionRecord,
    as_record,
)

NANO_DECIMALS = 9
NANO_PER_TON = 10**NANO_DECIMALS


class Currency(str, Enum):
    """Units a value amount can be reported in."""

    TON = "ton"
    NANO = "nano"


# ============================================================
# Direction
# ============================================================


def get_tx_direction(tx: TransactionRecord | Any) -> MessageDirection | None:
    """
    Classify the transaction's inbound message.

    Returns:
        The message direction, or None when the transaction has no inbound
        message
    """
    in_message = as_record(tx).in_message
    if in_message is None:
        return None
    return in_message.direction


def is_internal(tx: TransactionRecord | Any) -> bool:
    """Return True if the inbound message was sent by another contract."""
    return get_tx_direction(tx) is MessageDirection.INTERNAL


def is_external_in(tx: TransactionRecord | Any) -> bool:
    """Return True if the inbound message came from outside the chain."""
    return get_tx_direction(tx) is MessageDirection.EXTERNAL_IN


def is_external_out(tx: TransactionRecord | Any) -> bool:
    """Return True if the inbound message is an external outbound message."""
    return get_tx_direction(tx) is MessageDirection.EXTERNAL_OUT


# ============================================================
# Sender
# ============================================================


def get_tx_sender(
    tx: TransactionRecord | Any, as_hex: bool = False
) -> Address | str | None:
    """
    Retrieve the sender address of a transaction.

    Only internal messages carry a source address. External messages and
    transactions without an inbound message have no sender.

    Args:
        tx: Transaction to read
        as_hex: Return the raw "<workchain>:<hex>" string instead of the
            Address object

    Returns:
        Address, raw address string, or None when there is no sender and
        as_hex is False

    Raises:
        SenderUnavailableError: If as_hex is True and there is no sender
    """
    in_message = as_record(tx).in_message
    src = None

    if in_message is not None:
        match in_message.direction:
            case MessageDirection.INTERNAL:
                src = in_message.info.src
            case MessageDirection.EXTERNAL_IN | MessageDirection.EXTERNAL_OUT:
                src = None

    if src is None:
        if as_hex:
            raise SenderUnavailableError()
        return None

    if as_hex:
        return src.to_str(is_user_friendly=False)
    return src


# ============================================================
# Value
# ============================================================


def from_nano(value: int) -> str:
    """
    Convert nanotons to a decimal TON string without floating point.

    Trailing fractional zeros are dropped, and a whole amount has no
    decimal point.

    Examples:
        >>> from_nano(50000000)
        '0.05'
        >>> from_nano(1_000_000_000)
        '1'
        >>> from_nano(1_234_500_000)
        '1.2345'
    """
    sign = "-" if value < 0 else ""
    whole, frac = divmod(abs(value), NANO_PER_TON)
    frac_str = f"{frac:0{NANO_DECIMALS}d}".rstrip("0")
    if frac_str:
        return f"{sign}{whole}.{frac_str}"
    return f"{sign}{whole}"


def get_tx_value_amount(
    tx: TransactionRecord | Any,
    currency: Currency | str = Currency.TON,
    return_bigint: bool = False,
) -> str | int:
    """
    Retrieve the value carried by the inbound message.

    Args:
        tx: Transaction to read
        currency: "ton" for a decimal TON string, "nano" for nanotons
        return_bigint: With currency="nano", return the int itself instead
            of its decimal string. Ignored for "ton".

    Returns:
        Decimal TON string, nanoton string, or nanoton int

    Raises:
        AmountUnavailableError: If there is no coin value. A zero value is
            treated as unavailable too.
        UnknownCurrencyError: If currency is not "ton" or "nano"
    """
    in_message = as_record(tx).in_message
    coins = 0
    if in_message is not None and isinstance(in_message.info, InternalMessageInfo):
        coins = in_message.info.coins

    if not coins:
        raise AmountUnavailableError()

    try:
        unit = Currency(currency)
    except ValueError:
        raise UnknownCurrencyError(currency) from None

    match unit:
        case Currency.TON:
            return from_nano(coins)
        case Currency.NANO:
            return coins if return_bigint else str(coins)
