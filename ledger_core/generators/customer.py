"""Customer generator for account registration."""

from __future__ import annotations

from typing import Iterator

from ledger_core.generators.base import BaseGenerator
from ledger_core.generators.pool import format_cpf, generate_cpf
from ledger_core.models import CustomerProfile


class CustomerGenerator(BaseGenerator):
    """Generate synthetic customers with unique CPFs."""

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "pt_BR",
        formatted_cpf: bool = True,
    ) -> None:
        super().__init__(seed, locale)
        self.formatted_cpf = formatted_cpf
        self._issued: set[str] = set()

    def generate(self) -> CustomerProfile:
        """Generate a single customer.

        Returns
        -------
        CustomerProfile
            CPF never issued before by this generator, plus a Faker name.
        """
        cpf = generate_cpf(self.rng)
        while cpf in self._issued:
            cpf = generate_cpf(self.rng)
        self._issued.add(cpf)

        return CustomerProfile(
            cpf=format_cpf(cpf) if self.formatted_cpf else cpf,
            name=self.fake.name(),
        )

    def generate_batch(self, count: int) -> Iterator[CustomerProfile]:
        """Generate multiple customers.

        Parameters
        ----------
        count : int
            Number of customers to generate.

        Yields
        ------
        CustomerProfile
            Generated customers.
        """
        for _ in range(count):
            yield self.generate()
