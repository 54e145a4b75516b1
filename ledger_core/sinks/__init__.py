"""Output sinks for exporting statements and publishing ledger events."""

from ledger_core.sinks.console import ConsoleSink
from ledger_core.sinks.json_file import JsonFileSink
from ledger_core.sinks.kafka import KafkaSink

__all__ = ["ConsoleSink", "JsonFileSink", "KafkaSink"]
