#!/usr/bin/env python3
"""Simulate customer activity against an in-memory ledger.

Registers synthetic customers, applies random deposits and withdrawals,
then exports account snapshots and statements through a sink:
- console: print to stdout
- json: write accounts.json (snapshots with statements) under --output-dir
- kafka: publish every ledger event and the final snapshots to Kafka
"""

import argparse
import logging
import sys
import time
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ledger_core.config import LedgerConfig
from ledger_core.exceptions import InsufficientFundsError
from ledger_core.generators import ActivityGenerator, CustomerGenerator
from ledger_core.logging import setup_logging
from ledger_core.models import OperationType
from ledger_core.service import BankingService
from ledger_core.sinks import ConsoleSink, JsonFileSink, KafkaSink

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description="Simulate ledger activity")
    parser.add_argument("--customers", type=int, default=10, help="Customers to register")
    parser.add_argument("--operations", type=int, default=100, help="Random operations to apply")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--sink",
        choices=["console", "json", "kafka"],
        default="console",
        help="Where to export results",
    )
    parser.add_argument("--output-dir", type=Path, default=None, help="Directory for --sink json")
    return parser.parse_args(argv)


def build_sink(args: argparse.Namespace, config: LedgerConfig):
    """Create the export sink selected on the command line."""
    if args.sink == "json":
        return JsonFileSink(args.output_dir or config.output.json_output_dir, pretty=config.output.pretty_json)
    if args.sink == "kafka":
        return KafkaSink(config.kafka)
    return ConsoleSink(pretty=False, max_records=20)


def main(argv: list[str] | None = None) -> int:
    """Run the simulation."""
    args = parse_args(argv)
    config = LedgerConfig.from_env()
    setup_logging(config.log_level, config.log_format)

    seed = args.seed if args.seed is not None else config.seed
    sink = build_sink(args, config)
    # Events are streamed live only to Kafka; other sinks get the final export.
    service = BankingService(
        event_sink=sink if args.sink == "kafka" else None,
        topic_prefix=config.topic_prefix,
    )

    t0 = time.perf_counter()
    customer_gen = CustomerGenerator(seed=seed)
    for profile in customer_gen.generate_batch(args.customers):
        service.create_account(profile.cpf, profile.name)
    logger.info("Registered %d customers in %.2fs", args.customers, time.perf_counter() - t0)

    external_ids = [account.external_id for account in service.registry]
    if external_ids:
        rejected = 0
        t0 = time.perf_counter()
        activity_gen = ActivityGenerator(seed=seed)
        for planned in activity_gen.generate_batch(external_ids, args.operations):
            account = service.resolve_account(planned.external_id)
            if planned.operation_type == OperationType.CREDIT:
                service.deposit(account, planned.amount, planned.description)
                continue
            try:
                service.withdraw(account, planned.amount)
            except InsufficientFundsError:
                rejected += 1
        logger.info(
            "Applied %d operations (%d withdrawals rejected) in %.2fs",
            args.operations - rejected,
            rejected,
            time.perf_counter() - t0,
        )
    elif args.operations:
        logger.warning("No accounts registered, skipping %d operations", args.operations)

    snapshots = [service.get_account_info(account) for account in service.registry]
    sink.write_batch(config.accounts_topic if args.sink == "kafka" else "accounts", snapshots)
    sink.close()

    logger.info("Summary: %s", service.registry.summary())
    return 0


if __name__ == "__main__":
    sys.exit(main())
