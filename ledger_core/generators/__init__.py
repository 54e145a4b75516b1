"""Synthetic data generators and identifier pools."""

from ledger_core.generators.activity import ActivityGenerator, PlannedOperation
from ledger_core.generators.customer import CustomerGenerator
from ledger_core.generators.pool import UUIDPool, format_cpf, generate_cpf, is_valid_cpf

__all__ = [
    "ActivityGenerator",
    "CustomerGenerator",
    "PlannedOperation",
    "UUIDPool",
    "format_cpf",
    "generate_cpf",
    "is_valid_cpf",
]
