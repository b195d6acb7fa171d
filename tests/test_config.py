"""
Tests for decoder configuration loading and validation.
"""

import asyncio
from pathlib import Path
from unittest.mock import Mock

import pytest
import yaml

from ton_tx_utils.config import DecoderConfig, ExportConfig, LoggingConfig, RetryConfig

PROJECT_CONFIG = Path(__file__).parent.parent / "configs" / "decoder_config.yaml"


class TestDefaults:
    """Test default configuration values."""

    def test_retry_defaults(self):
        """Test retry defaults match with_retry's defaults."""
        config = DecoderConfig()
        assert config.retry.max_attempts == 3
        assert config.retry.delay_ms == 1000

    def test_logging_and_export_defaults(self):
        """Test logging and export defaults."""
        config = DecoderConfig()
        assert config.logging.level == "INFO"
        assert config.export.format == "csv"


class TestValidation:
    """Test __post_init__ validation."""

    def test_invalid_attempts(self):
        with pytest.raises(ValueError, match="max_attempts"):
            RetryConfig(max_attempts=0)

    def test_invalid_delay(self):
        with pytest.raises(ValueError, match="delay_ms"):
            RetryConfig(delay_ms=-5)

    def test_invalid_log_level(self):
        with pytest.raises(ValueError, match="level"):
            LoggingConfig(level="LOUD")

    def test_invalid_export_format(self):
        with pytest.raises(ValueError, match="format"):
            ExportConfig(format="xml")


class TestFromYaml:
    """Test loading configuration files."""

    def test_project_config_loads(self):
        """Test the shipped config file is valid."""
        config = DecoderConfig.from_yaml(PROJECT_CONFIG)
        assert config.retry.max_attempts == 3
        assert config.export.format == "csv"

    def test_partial_file(self, tmp_path):
        """Test missing sections fall back to defaults."""
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({"retry": {"max_attempts": 5, "delay_ms": 250}}))

        config = DecoderConfig.from_yaml(path)

        assert config.retry == RetryConfig(max_attempts=5, delay_ms=250)
        assert config.logging == LoggingConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            DecoderConfig.from_yaml(tmp_path / "absent.yaml")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        with pytest.raises(ValueError, match="Empty or invalid"):
            DecoderConfig.from_yaml(path)

    def test_unknown_key(self, tmp_path):
        """Test unexpected keys are reported as a structure error."""
        path = tmp_path / "bad.yaml"
        path.write_text(yaml.dump({"retry": {"backoff": 2}}))
        with pytest.raises(ValueError, match="Invalid configuration structure"):
            DecoderConfig.from_yaml(path)

    def test_to_dict_round_trip(self):
        """Test to_dict output can rebuild the same config."""
        config = DecoderConfig(retry=RetryConfig(max_attempts=7, delay_ms=10))
        assert DecoderConfig.from_dict(config.to_dict()) == config


class TestRetryConfigRun:
    """Test running operations through a retry policy."""

    def test_run_uses_policy(self):
        """Test the configured attempt count is applied."""
        operation = Mock(side_effect=[RuntimeError("x"), RuntimeError("y"), "ok"])
        policy = RetryConfig(max_attempts=3, delay_ms=0)

        assert asyncio.run(policy.run(operation)) == "ok"
        assert operation.call_count == 3

    def test_run_exhausted(self):
        """Test the last error propagates when the policy is exhausted."""
        operation = Mock(side_effect=RuntimeError("down"))
        policy = RetryConfig(max_attempts=2, delay_ms=0)

        with pytest.raises(RuntimeError, match="down"):
            asyncio.run(policy.run(operation))
        assert operation.call_count == 2
