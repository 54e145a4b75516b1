"""Enumeration types for ledger entities."""

from enum import Enum


class OperationType(str, Enum):
    CREDIT = "CREDIT"
    DEBIT = "DEBIT"
