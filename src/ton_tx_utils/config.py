"""
Configuration management for the decoding tools.

Loads retry, logging and export settings from a YAML file and validates them.

Usage:
    from ton_tx_utils.config import DecoderConfig

    config = DecoderConfig.from_yaml("configs/decoder_config.yaml")
    txs = await config.retry.run(lambda: client.get_transactions(addr, 16))
"""

import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Awaitable, Callable, TypeVar

import yaml

from .extraction.core.retry import DEFAULT_DELAY_MS, DEFAULT_MAX_ATTEMPTS, with_retry
from .extraction.core.utils import DEFAULT_LOG_FORMAT

logger = logging.getLogger(__name__)

T = TypeVar("T")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
EXPORT_FORMATS = ["csv", "json"]


@dataclass
class RetryConfig:
    """Retry policy for upstream RPC calls."""

    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    delay_ms: float = DEFAULT_DELAY_MS

    def __post_init__(self):
        """Validate retry values."""
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {self.max_attempts}")
        if self.delay_ms < 0:
            raise ValueError(f"delay_ms must be >= 0, got {self.delay_ms}")

    async def run(self, operation: Callable[[], T | Awaitable[T]]) -> T:
        """Run an operation through with_retry() using this policy."""
        return await with_retry(operation, self.max_attempts, self.delay_ms)


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT

    def __post_init__(self):
        if self.level.upper() not in LOG_LEVELS:
            raise ValueError(f"level must be one of {LOG_LEVELS}, got {self.level}")


@dataclass
class ExportConfig:
    """Default export settings."""

    format: str = "csv"

    def __post_init__(self):
        if self.format not in EXPORT_FORMATS:
            raise ValueError(
                f"format must be one of {EXPORT_FORMATS}, got {self.format}"
            )


@dataclass
class DecoderConfig:
    """Complete tool configuration."""

    retry: RetryConfig = field(default_factory=RetryConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    export: ExportConfig = field(default_factory=ExportConfig)

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> "DecoderConfig":
        """
        Load configuration from YAML file.

        Args:
            yaml_path: Path to YAML configuration file

        Returns:
            DecoderConfig instance with loaded values

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            ValueError: If YAML structure is invalid
            yaml.YAMLError: If YAML parsing fails
        """
        yaml_path = Path(yaml_path)

        if not yaml_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {yaml_path}")

        logger.info(f"Loading decoder configuration from {yaml_path}")

        with open(yaml_path, "r") as f:
            config_dict = yaml.safe_load(f)

        if not config_dict:
            raise ValueError(f"Empty or invalid YAML file: {yaml_path}")

        try:
            config = cls.from_dict(config_dict)
        except TypeError as e:
            raise ValueError(
                f"Invalid configuration structure in {yaml_path}: {e}"
            ) from e

        logger.debug(
            f"Retry: {config.retry.max_attempts} attempts, "
            f"{config.retry.delay_ms}ms delay"
        )
        return config

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "DecoderConfig":
        """
        Create configuration from dictionary.

        Args:
            config_dict: Dictionary with configuration values

        Returns:
            DecoderConfig instance
        """
        return cls(
            retry=RetryConfig(**(config_dict.get("retry") or {})),
            logging=LoggingConfig(**(config_dict.get("logging") or {})),
            export=ExportConfig(**(config_dict.get("export") or {})),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return asdict(self)
