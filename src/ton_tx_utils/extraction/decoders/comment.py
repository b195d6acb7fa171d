"""
Decode text comments attached to TON transfers.

A plain-text comment is an inbound message body laid out as:

    uint32 op_code = 0 | UTF-8 bytes ...

Comments longer than one cell continue in a chain of child references
("snake" format), each child holding the next chunk of bytes in its data
bits. Wallets often pad the text with NUL bytes, which are stripped.

Usage:
    from ton_tx_utils.extraction.decoders.comment import get_tx_comment

    try:
        text = get_tx_comment(tx)
    except NotACommentError:
        text = None  # body carries some other operation
"""

from typing import Any

from pytoniq_core import Slice

from ...errors import NotACommentError
from ..core.models import TransactionRecord, as_record, open_body_view

TEXT_COMMENT_OP = 0
OP_CODE_BITS = 32


def read_tail_bytes(cursor: Slice) -> bytes:
    """
    Read every remaining whole byte from a cursor, following snake references.

    Bits that do not fill a whole byte at the end of a cell are skipped. The
    first child reference of each cell is treated as the continuation.
    Slice.load_snake_bytes() is not used because it raises AssertionError
    on unaligned cells and on cells with more than one reference.

    Args:
        cursor: Slice to consume. It is advanced to the end.

    Returns:
        Concatenated bytes of the cell chain
    """
    chunks = []
    while True:
        size = cursor.remaining_bits // 8
        if size:
            chunks.append(cursor.load_bytes(size))
        if cursor.remaining_refs == 0:
            break
        cursor = cursor.load_ref().begin_parse()
    return b"".join(chunks)


def get_tx_comment(tx: TransactionRecord | Any) -> str:
    """
    Extract the text comment from a transaction's inbound message.

    Args:
        tx: pytoniq-core Transaction or TransactionRecord

    Returns:
        The comment with leading and trailing NUL characters removed, or an
        empty string when there is no inbound message or its body is shorter
        than an operation code

    Raises:
        NotACommentError: If the body starts with a non-zero operation code

    Notes:
        - Reads through its own cursor, so repeated calls on the same
          transaction see the same content
        - Invalid UTF-8 sequences are replaced with U+FFFD instead of raising
    """
    in_message = as_record(tx).in_message
    if in_message is None:
        return ""

    cursor = open_body_view(in_message.body)
    if cursor.remaining_bits < OP_CODE_BITS:
        return ""

    op_code = cursor.load_uint(OP_CODE_BITS)
    if op_code != TEXT_COMMENT_OP:
        raise NotACommentError(op_code)

    text = read_tail_bytes(cursor).decode("utf-8", errors="replace")
    return text.strip("\x00")
