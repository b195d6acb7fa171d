"""
Flatten transactions into JSON-serializable field summaries.

This is the layer that decides how decoder failures are presented: a missing
amount or a non-comment body are normal for many transactions, so they become
None in the summary instead of aborting the whole batch.

Usage:
    from ton_tx_utils.extraction.summary import decode_transaction_fields

    summary = decode_transaction_fields(record)
    # {"hash": "...", "lt": 4711, "direction": "internal", "sender": "0:...",
    #  "amount_nano": 50000000, "amount_ton": "0.05", "comment": "Hello"}
"""

import logging
from typing import Any

from ..errors import AmountUnavailableError, NotACommentError
from .core.models import TransactionRecord, as_record
from .decoders import (
    Currency,
    get_tx_comment,
    get_tx_direction,
    get_tx_sender,
    get_tx_value_amount,
)

logger = logging.getLogger(__name__)


def decode_transaction_fields(tx: TransactionRecord | Any) -> dict[str, Any]:
    """
    Decode every supported field of a single transaction.

    Args:
        tx: pytoniq-core Transaction or TransactionRecord

    Returns:
        Dictionary with structure:
        {
            "hash": str | None,
            "lt": int | None,
            "direction": "internal" | "external-in" | "external-out" | None,
            "sender": raw address string or None,
            "amount_nano": int or None (None also for zero-value messages),
            "amount_ton": decimal string or None,
            "comment": str, or None if the body carries another operation
        }
    """
    record = as_record(tx)
    tx_label = record.hash[:16] if record.hash else f"lt={record.lt}"

    direction = get_tx_direction(record)
    sender = get_tx_sender(record)

    try:
        amount_nano = get_tx_value_amount(
            record, currency=Currency.NANO, return_bigint=True
        )
    except AmountUnavailableError:
        logger.debug(f"Transaction {tx_label} carries no value")
        amount_nano = None

    try:
        comment = get_tx_comment(record)
    except NotACommentError as e:
        logger.debug(f"Transaction {tx_label} has no text comment: {e}")
        comment = None

    return {
        "hash": record.hash,
        "lt": record.lt,
        "direction": direction.value if direction is not None else None,
        "sender": (
            sender.to_str(is_user_friendly=False) if sender is not None else None
        ),
        "amount_nano": amount_nano,
        "amount_ton": get_tx_value_amount(record) if amount_nano else None,
        "comment": comment,
    }


def decode_transactions_batch(
    transactions: list[TransactionRecord | Any],
) -> list[dict[str, Any]]:
    """
    Decode field summaries for multiple transactions.

    Args:
        transactions: Transactions in any form accepted by
            decode_transaction_fields()

    Returns:
        List of summaries in input order
    """
    summaries = [decode_transaction_fields(tx) for tx in transactions]

    with_comment = sum(1 for s in summaries if s["comment"])
    logger.info(
        f"Decoded {len(summaries)} transactions ({with_comment} with comments)"
    )

    return summaries
