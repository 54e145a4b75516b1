"""Tests for config and logging."""

import json
import logging
from pathlib import Path

import pytest

from ledger_core.config import KafkaConfig, LedgerConfig, OutputConfig
from ledger_core.exceptions import ConfigurationError
from ledger_core.logging import JsonFormatter, get_logger, setup_logging

ENV_VARS = [
    "KAFKA_BOOTSTRAP_SERVERS",
    "KAFKA_ACKS",
    "OUTPUT_DIR",
    "PRETTY_JSON",
    "TOPIC_PREFIX",
    "PUBLISH_EVENTS",
    "SEED",
    "LOG_LEVEL",
    "LOG_FORMAT",
]


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every variable read by LedgerConfig.from_env."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestKafkaConfig:
    """Tests for KafkaConfig."""

    def test_default_values(self) -> None:
        config = KafkaConfig()

        assert config.bootstrap_servers == "localhost:9092"
        assert config.acks == "all"
        assert config.retries == 3

    def test_to_dict(self) -> None:
        result = KafkaConfig(bootstrap_servers="kafka:9092", compression="gzip").to_dict()

        assert result["bootstrap.servers"] == "kafka:9092"
        assert result["acks"] == "all"
        assert result["batch.size"] == 16384
        assert result["linger.ms"] == 5
        assert result["compression.type"] == "gzip"


class TestOutputConfig:
    """Tests for OutputConfig."""

    def test_default_values(self) -> None:
        config = OutputConfig()

        assert config.json_output_dir == Path("output")
        assert config.pretty_json is False


class TestLedgerConfig:
    """Tests for LedgerConfig."""

    def test_default_values(self) -> None:
        config = LedgerConfig()

        assert config.topic_prefix == "dev.ledger"
        assert config.publish_events is False
        assert config.seed is None
        assert config.log_level == "INFO"
        assert config.log_format == "standard"

    def test_topics(self) -> None:
        config = LedgerConfig(topic_prefix="prod.bank")

        assert config.accounts_topic == "prod.bank.accounts"
        assert config.operations_topic == "prod.bank.operations"

    def test_validate_rejects_unknown_level(self) -> None:
        with pytest.raises(ConfigurationError, match="log level"):
            LedgerConfig(log_level="LOUD").validate()

    def test_validate_rejects_unknown_format(self) -> None:
        with pytest.raises(ConfigurationError, match="log format"):
            LedgerConfig(log_format="xml").validate()

    def test_validate_accepts_lowercase_level(self) -> None:
        LedgerConfig(log_level="debug").validate()

    def test_from_env_defaults(self, clean_env: pytest.MonkeyPatch) -> None:
        config = LedgerConfig.from_env()

        assert config.kafka.bootstrap_servers == "localhost:9092"
        assert config.output.json_output_dir == Path("output")
        assert config.publish_events is False
        assert config.seed is None

    def test_from_env_custom(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("KAFKA_BOOTSTRAP_SERVERS", "kafka-cluster:9092")
        clean_env.setenv("KAFKA_ACKS", "1")
        clean_env.setenv("OUTPUT_DIR", "/data/output")
        clean_env.setenv("PRETTY_JSON", "true")
        clean_env.setenv("TOPIC_PREFIX", "prod.ledger")
        clean_env.setenv("PUBLISH_EVENTS", "TRUE")
        clean_env.setenv("SEED", "12345")
        clean_env.setenv("LOG_LEVEL", "DEBUG")
        clean_env.setenv("LOG_FORMAT", "json")

        config = LedgerConfig.from_env()

        assert config.kafka.bootstrap_servers == "kafka-cluster:9092"
        assert config.kafka.acks == "1"
        assert config.output.json_output_dir == Path("/data/output")
        assert config.output.pretty_json is True
        assert config.topic_prefix == "prod.ledger"
        assert config.publish_events is True
        assert config.seed == 12345
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"

    def test_from_env_bad_seed(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("SEED", "abc")

        with pytest.raises(ConfigurationError, match="SEED"):
            LedgerConfig.from_env()

    def test_from_env_bad_format(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("LOG_FORMAT", "yaml")

        with pytest.raises(ConfigurationError):
            LedgerConfig.from_env()


class TestSetupLogging:
    """Tests for setup_logging."""

    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_standard_format(self) -> None:
        setup_logging(level="DEBUG")

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert not isinstance(root.handlers[0].formatter, JsonFormatter)
        assert logging.getLogger("ledger_core").level == logging.DEBUG

    def test_json_format(self) -> None:
        setup_logging(level="INFO", format_type="json")

        assert isinstance(logging.getLogger().handlers[0].formatter, JsonFormatter)

    def test_invalid_level_falls_back_to_info(self) -> None:
        setup_logging(level="NOPE")

        assert logging.getLogger().level == logging.INFO

    def test_quiets_external_libraries(self) -> None:
        setup_logging(level="DEBUG")

        assert logging.getLogger("confluent_kafka").level == logging.WARNING
        assert logging.getLogger("faker").level == logging.WARNING


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def _record(self, msg: str = "hello %s", args: tuple = ("world",), exc_info=None) -> logging.LogRecord:
        return logging.LogRecord(
            name="ledger_core.test",
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg=msg,
            args=args,
            exc_info=exc_info,
        )

    def test_basic_fields(self) -> None:
        data = json.loads(JsonFormatter().format(self._record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "ledger_core.test"
        assert data["message"] == "hello world"
        assert "timestamp" in data

    def test_exception_included(self) -> None:
        try:
            raise ValueError("boom")
        except ValueError:
            import sys

            record = self._record(exc_info=sys.exc_info())

        data = json.loads(JsonFormatter().format(record))

        assert "ValueError: boom" in data["exception"]


def test_get_logger() -> None:
    assert get_logger("ledger_core.x") is logging.getLogger("ledger_core.x")
