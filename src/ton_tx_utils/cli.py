"""
Command-line tool for decoding serialized TON transactions.

Usage:
    ton-tx-decode \\
        --input data/raw/transactions.txt \\
        --output data/processed/decoded.csv

The input file holds one transaction BOC per line, hex or base64 encoded.
Settings are read from configs/decoder_config.yaml by default. The command
works offline, so only the logging and export sections apply to it.
"""

import logging
import sys
from pathlib import Path

import click
import yaml

from .config import DecoderConfig
from .extraction.core.models import TransactionRecord
from .extraction.core.normalization import load_transaction
from .extraction.core.utils import setup_logging
from .extraction.export import export_to_csv, export_to_json
from .extraction.summary import decode_transactions_batch

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("configs") / "decoder_config.yaml"


def load_config(config_path: Path | None = None) -> DecoderConfig:
    """Load decoder configuration, falling back to defaults if absent."""
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH
        if not config_path.exists():
            logger.warning(f"Config file not found at {config_path}, using defaults")
            return DecoderConfig()

    try:
        return DecoderConfig.from_yaml(config_path)
    except (ValueError, yaml.YAMLError) as e:
        logger.error(f"Invalid config file {config_path}: {e}")
        sys.exit(1)


def load_boc_lines(file_path: Path) -> list[str]:
    """
    Load serialized transactions from a text file.

    Args:
        file_path: File with one BOC per line. Blank lines and lines starting
            with '#' are skipped.

    Returns:
        List of BOC strings
    """
    bocs = []
    with open(file_path, "r") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            bocs.append(line)

    logger.info(f"Loaded {len(bocs)} BOCs from {file_path}")
    return bocs


def load_transactions(bocs: list[str]) -> list[TransactionRecord]:
    """Deserialize BOCs, skipping (and logging) the ones that fail to parse."""
    records = []
    for line_num, boc in enumerate(bocs, 1):
        try:
            records.append(load_transaction(boc))
        except ValueError as e:
            logger.warning(f"Entry {line_num}: skipping invalid transaction: {e}")
    return records


def resolve_output_format(output: Path, default: str) -> str:
    """Pick the export format from the output file extension."""
    suffix = output.suffix.lower().lstrip(".")
    if suffix in ("csv", "json"):
        return suffix
    return default


@click.command()
@click.option(
    "--input",
    type=click.Path(exists=True, path_type=Path),
    required=True,
    help="Text file with one transaction BOC (hex or base64) per line",
)
@click.option(
    "--output",
    type=click.Path(path_type=Path),
    required=True,
    help="Output file for decoded fields (.csv or .json)",
)
@click.option(
    "--config",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to decoder config YAML file (default: configs/decoder_config.yaml)",
)
@click.option(
    "--log-level",
    type=click.Choice(
        ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False
    ),
    default=None,
    help="Logging level (overrides config file if provided)",
)
def main(
    input: Path, output: Path, config: Path | None, log_level: str | None
) -> None:
    """
    Decode TON transactions into direction, sender, amount and comment.
    """
    cfg = load_config(config)

    setup_logging(level=log_level or cfg.logging.level, log_format=cfg.logging.format)

    logger.info("Starting transaction decoding")
    logger.info(f"Input file: {input}")
    logger.info(f"Output file: {output}")

    try:
        records = load_transactions(load_boc_lines(input))
        if not records:
            logger.error("No valid transactions found in input")
            sys.exit(1)

        summaries = decode_transactions_batch(records)

        if resolve_output_format(output, cfg.export.format) == "json":
            export_to_json(summaries, output)
        else:
            export_to_csv(summaries, output)

        logger.info("Decoding completed successfully")

    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
