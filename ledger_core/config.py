"""Configuration management for ledger-core."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ledger_core.exceptions import ConfigurationError
from ledger_core.logging import LOG_FORMATS

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class KafkaConfig:
    """Kafka producer configuration for the operation event stream."""

    bootstrap_servers: str = "localhost:9092"
    acks: str = "all"
    batch_size: int = 16384
    linger_ms: int = 5
    compression: str = "snappy"
    retries: int = 3

    def to_dict(self) -> dict[str, Any]:
        """Convert to confluent-kafka config dict."""
        return {
            "bootstrap.servers": self.bootstrap_servers,
            "acks": self.acks,
            "batch.size": self.batch_size,
            "linger.ms": self.linger_ms,
            "compression.type": self.compression,
            "retries": self.retries,
        }


@dataclass
class OutputConfig:
    """Statement export configuration."""

    json_output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class LedgerConfig:
    """Main configuration for ledger-core."""

    kafka: KafkaConfig = field(default_factory=KafkaConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    topic_prefix: str = "dev.ledger"
    publish_events: bool = False
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    @property
    def accounts_topic(self) -> str:
        """Topic receiving account lifecycle events."""
        return f"{self.topic_prefix}.accounts"

    @property
    def operations_topic(self) -> str:
        """Topic receiving credit/debit events."""
        return f"{self.topic_prefix}.operations"

    def validate(self) -> None:
        """Reject unknown log levels and formats."""
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level: {self.log_level}")
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(f"Unknown log format: {self.log_format}")

    @classmethod
    def from_env(cls) -> "LedgerConfig":
        """Create config from environment variables."""
        import os

        kafka = KafkaConfig(
            bootstrap_servers=os.getenv("KAFKA_BOOTSTRAP_SERVERS", "localhost:9092"),
            acks=os.getenv("KAFKA_ACKS", "all"),
        )

        output = OutputConfig(
            json_output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        seed = os.getenv("SEED")
        try:
            parsed_seed = int(seed) if seed else None
        except ValueError as e:
            raise ConfigurationError(f"SEED must be an integer, got {seed!r}") from e

        config = cls(
            kafka=kafka,
            output=output,
            topic_prefix=os.getenv("TOPIC_PREFIX", "dev.ledger"),
            publish_events=os.getenv("PUBLISH_EVENTS", "false").lower() == "true",
            seed=parsed_seed,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )
        config.validate()
        return config
