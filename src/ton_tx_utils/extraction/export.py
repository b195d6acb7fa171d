"""
Export decoded transaction summaries to CSV or JSON.

Usage:
    from ton_tx_utils.extraction.export import export_to_csv

    export_to_csv(summaries, "data/processed/transfers.csv")
"""

import json
import logging
from pathlib import Path
from typing import Any

import pandas as pd

logger = logging.getLogger(__name__)

CSV_COLUMNS = [
    "hash",
    "lt",
    "direction",
    "sender",
    "amount_nano",
    "amount_ton",
    "comment",
]


def export_to_csv(summaries: list[dict[str, Any]], output_path: str | Path) -> None:
    """
    Export transaction summaries to a CSV file.

    Args:
        summaries: Dictionaries produced by decode_transaction_fields()
        output_path: Path to output CSV file (parent directories are created)

    Raises:
        ValueError: If summaries is empty
        IOError: If file cannot be written

    Notes:
        - Columns follow CSV_COLUMNS; missing fields are left empty
        - amount_nano is written as an integer column, never as a float
        - Overwrites existing file at output_path
    """
    if not summaries:
        raise ValueError("Cannot export empty transaction list")

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    df = pd.DataFrame(summaries, columns=CSV_COLUMNS)
    # Rebuilt from the source ints: a float64 column with NaN would round
    # amounts above 2**53
    for column in ("lt", "amount_nano"):
        df[column] = pd.array([s.get(column) for s in summaries], dtype="Int64")

    df.to_csv(output_path, index=False)

    logger.info(f"Exported {len(df)} transactions to {output_path}")


def export_to_json(summaries: list[dict[str, Any]], output_path: str | Path) -> None:
    """
    Export transaction summaries to a JSON array file.

    Args:
        summaries: Dictionaries produced by decode_transaction_fields()
        output_path: Path to output JSON file (parent directories are created)

    Raises:
        ValueError: If summaries is empty
        IOError: If file cannot be written
    """
    if not summaries:
        raise ValueError("Cannot export empty transaction list")

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(summaries, f, indent=2, ensure_ascii=False)

    logger.info(f"Exported {len(summaries)} transactions to {output_path}")
