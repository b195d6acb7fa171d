"""
Typed view of the parts of a TON transaction the decoders read.

pytoniq-core exposes transactions as TL-B objects whose fields may be missing
at every level (no inbound message, external messages without a source or
value). This module mirrors only the relevant sub-structure with explicit
optional fields and a closed set of message variants, so each decoder can
branch over them instead of chaining attribute lookups.

Usage:
    from ton_tx_utils.extraction.core.models import TransactionRecord

    record = TransactionRecord.from_tlb(tx)  # pytoniq_core Transaction
    if record.in_message is not None:
        print(record.in_message.direction)
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pytoniq_core import Address, Cell, Slice, begin_cell
from pytoniq_core.tlb.transaction import (
    ExternalMsgInfo,
    ExternalOutMsgInfo,
    InternalMsgInfo,
)

logger = logging.getLogger(__name__)


class MessageDirection(Enum):
    """Classification tag of an incoming message."""

    INTERNAL = "internal"
    EXTERNAL_IN = "external-in"
    EXTERNAL_OUT = "external-out"


@dataclass(frozen=True)
class InternalMessageInfo:
    """Info block of a message sent by another contract."""

    src: Address
    coins: int = 0

    @property
    def direction(self) -> MessageDirection:
        return MessageDirection.INTERNAL


@dataclass(frozen=True)
class ExternalInMessageInfo:
    """Info block of an inbound message from outside the chain."""

    @property
    def direction(self) -> MessageDirection:
        return MessageDirection.EXTERNAL_IN


@dataclass(frozen=True)
class ExternalOutMessageInfo:
    """Info block of an outbound log message."""

    @property
    def direction(self) -> MessageDirection:
        return MessageDirection.EXTERNAL_OUT


MessageInfo = InternalMessageInfo | ExternalInMessageInfo | ExternalOutMessageInfo


@dataclass(frozen=True)
class IncomingMessage:
    """The message that caused a transaction to execute."""

    info: MessageInfo
    body: Cell

    @property
    def direction(self) -> MessageDirection:
        return self.info.direction


@dataclass(frozen=True)
class TransactionRecord:
    """
    Read-only projection of a transaction.

    Attributes:
        in_message: Inbound message, or None for transactions without one
            (e.g. tick-tock transactions)
        lt: Logical time of the transaction, if known
        hash: Hex-encoded transaction cell hash, if known
    """

    in_message: IncomingMessage | None = None
    lt: int | None = None
    hash: str | None = None

    @classmethod
    def from_tlb(cls, tx: Any, tx_hash: str | None = None) -> "TransactionRecord":
        """
        Build a record from a pytoniq-core Transaction.

        Args:
            tx: pytoniq_core.tlb.transaction.Transaction (as returned by
                LiteClient.get_transactions or Transaction.deserialize)
            tx_hash: Optional hex hash of the transaction cell

        Returns:
            TransactionRecord

        Raises:
            TypeError: If the inbound message has an unrecognized info block
        """
        in_msg = getattr(tx, "in_msg", None)
        lt = getattr(tx, "lt", None)

        if in_msg is None:
            logger.debug(f"Transaction lt={lt} has no inbound message")
            return cls(in_message=None, lt=lt, hash=tx_hash)

        body = in_msg.body
        if body is None:
            body = begin_cell().end_cell()

        return cls(
            in_message=IncomingMessage(info=_convert_info(in_msg.info), body=body),
            lt=lt,
            hash=tx_hash,
        )


def _convert_info(info: Any) -> MessageInfo:
    """Map a pytoniq-core CommonMsgInfo onto one of the message variants."""
    if isinstance(info, InternalMsgInfo):
        value = info.value
        coins = value.grams if value is not None else 0
        return InternalMessageInfo(src=info.src, coins=coins or 0)
    if isinstance(info, ExternalMsgInfo):
        return ExternalInMessageInfo()
    if isinstance(info, ExternalOutMsgInfo):
        return ExternalOutMessageInfo()
    raise TypeError(f"Unsupported message info type: {type(info).__name__}")


def as_record(tx: "TransactionRecord | Any") -> TransactionRecord:
    """Return tx unchanged if it is already a record, else convert it."""
    if isinstance(tx, TransactionRecord):
        return tx
    return TransactionRecord.from_tlb(tx)


def open_body_view(body: Cell) -> Slice:
    """
    Open a fresh read cursor positioned at the start of a message body.

    Every call returns a new Slice with its own position, so consuming it
    never affects another read of the same body.
    """
    return body.begin_parse()
