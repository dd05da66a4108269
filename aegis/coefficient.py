"""Multiplicative coefficients applied to resource production and consumption."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(order=True)
class Coefficient:
    """A value that scales the rate at which a resource is produced or consumed.

    A resource produced at 1.0 per second with a coefficient of 2.0 is
    produced at 2.0 per second. The default coefficient is 1.0.
    """

    value: float = 1.0

    def add(self, value: float) -> None:
        """Increase the coefficient by ``value``."""
        self.value += value

    def sub(self, value: float) -> None:
        """Decrease the coefficient by ``value``, never going below 0.0."""
        if self.value < value:
            self.value = 0.0
        else:
            self.value -= value

    def mul(self, value: float) -> None:
        """Multiply the coefficient by ``value``."""
        self.value *= value

    def div(self, value: float) -> None:
        """Divide the coefficient by ``value``; dividing by 0.0 leaves it unchanged."""
        if value != 0.0:
            self.value /= value