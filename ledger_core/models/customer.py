"""Customer registration data."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CustomerProfile:
    """Data needed to open an account: CPF and display name."""

    cpf: str
    name: str
