"""
Normalization of serialized TON data.

Transactions and message bodies arrive from APIs and files as BOC ("bag of
cells") payloads in several encodings: hex with or without a 0x prefix,
base64 (toncenter and tonapi use this) or raw bytes. This module
turns any of them into bytes, then into pytoniq-core cells, so the decoders
never deal with encoding variations.

Usage:
    from ton_tx_utils.extraction.core.normalization import (
        normalize_boc_field,
        load_body_cell,
        load_transaction,
    )

    body = load_body_cell("b5ee9c72...")
    record = load_transaction("te6cckEC...")
"""

import base64
import binascii
import logging
import string

from pytoniq_core import Cell
from pytoniq_core.tlb.transaction import Transaction

from .models import TransactionRecord

logger = logging.getLogger(__name__)

_HEX_DIGITS = frozenset(string.hexdigits)


def normalize_boc_field(value: str | bytes | None) -> bytes:
    """
    Normalize a serialized BOC field to bytes, handling various input formats.

    It handles:
    - Hex strings with 0x prefix: "0xb5ee9c72..."
    - Hex strings without prefix: "b5ee9c72..."
    - Base64 strings (standard or URL-safe alphabet): "te6cckEB..."
    - Raw bytes objects
    - bytes subclasses, returned as plain bytes
    - Empty values: "0x", "", None

    Args:
        value: Serialized data in any supported format

    Returns:
        Raw bytes

    Raises:
        ValueError: If the input cannot be parsed

    Examples:
        >>> normalize_boc_field("0x1234")
        b'\\x12\\x34'
        >>> normalize_boc_field("EjQ=")
        b'\\x12\\x34'
    """
    if value is None or value == "" or value == "0x":
        return b""

    # bytes subclasses are copied into plain bytes
    if isinstance(value, bytes):
        return bytes(value)

    if isinstance(value, str):
        text = value.strip()

        if text.startswith("0x"):
            try:
                return bytes.fromhex(text[2:])
            except ValueError as e:
                raise ValueError(f"Invalid hex string: {value}") from e

        if len(text) % 2 == 0 and set(text) <= _HEX_DIGITS:
            return bytes.fromhex(text)

        try:
            if "-" in text or "_" in text:
                return base64.urlsafe_b64decode(text)
            return base64.b64decode(text, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ValueError(
                f"Invalid BOC string (neither hex nor base64): {value}"
            ) from e

    raise ValueError(f"Unsupported BOC field type: {type(value)}")


def load_body_cell(value: str | bytes | Cell) -> Cell:
    """
    Parse a serialized message body into a Cell.

    Args:
        value: A Cell (returned unchanged) or a BOC in any format accepted by
            normalize_boc_field()

    Returns:
        Root cell of the BOC

    Raises:
        ValueError: If the input is empty or not a valid BOC
    """
    if isinstance(value, Cell):
        return value

    data = normalize_boc_field(value)
    if not data:
        raise ValueError("Cannot load a cell from an empty BOC")

    try:
        return Cell.one_from_boc(data)
    except Exception as e:
        raise ValueError(f"Invalid BOC: {e}") from e


def load_transaction(value: str | bytes) -> TransactionRecord:
    """
    Deserialize a BOC-encoded transaction.

    Args:
        value: Transaction BOC in any format accepted by normalize_boc_field()

    Returns:
        TransactionRecord carrying the transaction's hash and logical time

    Raises:
        ValueError: If the BOC cannot be parsed as a transaction
    """
    cell = load_body_cell(value)

    try:
        tx = Transaction.deserialize(cell.begin_parse())
    except Exception as e:
        raise ValueError(f"BOC is not a valid transaction: {e}") from e

    tx_hash = cell.hash.hex()
    logger.debug(f"Loaded transaction {tx_hash[:16]}...")

    return TransactionRecord.from_tlb(tx, tx_hash=tx_hash)
