"""
Transaction field decoders.

Exports the accessor functions for direction, sender, value and comment.
"""

from .comment import get_tx_comment
from .fields import (
    Currency,
    from_nano,
    get_tx_direction,
    get_tx_sender,
    get_tx_value_amount,
    is_external_in,
    is_external_out,
    is_internal,
)

__all__ = [
    "Currency",
    "from_nano",
    "get_tx_comment",
    "get_tx_direction",
    "get_tx_sender",
    "get_tx_value_amount",
    "is_external_in",
    "is_external_out",
    "is_internal",
]
