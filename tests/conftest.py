"""
Shared fixtures for building TON transactions in tests.
"""

import base64

import pytest
from pytoniq_core import Address, Cell

from ton_tx_utils.extraction.core.models import (
    ExternalInMessageInfo,
    ExternalOutMessageInfo,
    IncomingMessage,
    InternalMessageInfo,
    TransactionRecord,
)

from builders import (
    SENDER_RAW,
    make_body,
    make_external_in_message,
    make_internal_message,
    make_transaction_cell,
)


@pytest.fixture
def sender_address() -> Address:
    """Return a basechain address used as the sender."""
    return Address(SENDER_RAW)


@pytest.fixture
def make_internal_tx(sender_address):
    """Factory for transactions with an internal inbound message."""

    def _make(coins: int = 50_000_000, body: Cell | None = None) -> TransactionRecord:
        return TransactionRecord(
            in_message=IncomingMessage(
                info=InternalMessageInfo(src=sender_address, coins=coins),
                body=body if body is not None else make_body(),
            ),
            lt=47110000001,
            hash="ab" * 32,
        )

    return _make


@pytest.fixture
def external_in_tx() -> TransactionRecord:
    """Transaction triggered by an external inbound message."""
    return TransactionRecord(
        in_message=IncomingMessage(info=ExternalInMessageInfo(), body=make_body()),
        lt=47110000002,
    )


@pytest.fixture
def external_out_tx() -> TransactionRecord:
    """Transaction whose inbound message is an external outbound message."""
    return TransactionRecord(
        in_message=IncomingMessage(info=ExternalOutMessageInfo(), body=make_body()),
        lt=47110000003,
    )


@pytest.fixture
def no_message_tx() -> TransactionRecord:
    """Transaction without an inbound message (e.g. tick-tock)."""
    return TransactionRecord(in_message=None, lt=47110000004)


@pytest.fixture
def comment_tx_cell() -> Cell:
    """Serialized transaction: 0.05 TON internal transfer with comment "Hello"."""
    return make_transaction_cell(
        make_internal_message(50_000_000, make_body(b"Hello", op=0))
    )


@pytest.fixture
def jetton_tx_cell() -> Cell:
    """Serialized transaction whose inbound body is a jetton transfer (op 0x0f8a7ea5)."""
    body = make_body(b"\x00" * 8, op=0x0F8A7EA5)
    return make_transaction_cell(make_internal_message(100_000_000, body))


@pytest.fixture
def external_tx_cell() -> Cell:
    """Serialized wallet transaction triggered by a signed external message."""
    return make_transaction_cell(
        make_external_in_message(make_body(b"\xaa" * 64, op=0x12345678))
    )


@pytest.fixture
def transaction_bocs(comment_tx_cell, jetton_tx_cell) -> dict[str, str]:
    """The same transactions in the encodings TON APIs return."""
    return {
        "comment_hex": comment_tx_cell.to_boc().hex(),
        "comment_base64": base64.b64encode(comment_tx_cell.to_boc()).decode(),
        "jetton_hex": jetton_tx_cell.to_boc().hex(),
        "jetton_base64": base64.b64encode(jetton_tx_cell.to_boc()).decode(),
    }
