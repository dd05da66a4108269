"""Stockpiles of the resources a nation accumulates and spends."""

from __future__ import annotations

from dataclasses import dataclass, field

_EXPERT_MAX_LEVEL = 255


def _unsigned(name: str, amount: int) -> int:
    if amount < 0:
        raise ValueError(f"{name} cannot be negative, got {amount}")
    return amount


@dataclass
class Food:
    """An amount of food, from 0 upwards."""

    amount: int = 0

    def __post_init__(self) -> None:
        _unsigned("food", self.amount)

    def add(self, amount: int) -> None:
        """Add ``amount`` of food."""
        self.amount += _unsigned("amount", amount)

    def remove(self, amount: int) -> bool:
        """Take ``amount`` of food; return False and change nothing if there is not enough."""
        _unsigned("amount", amount)
        if self.amount < amount:
            return False
        self.amount -= amount
        return True

    def __str__(self) -> str:
        return f"Food({self.amount})"


@dataclass
class Money:
    """An amount of money, which may be negative."""

    amount: int = 0

    def add(self, amount: int) -> None:
        """Add ``amount`` of money."""
        self.amount += amount

    def remove(self, amount: int) -> bool:
        """Take ``amount`` of money; return False and change nothing if there is not enough."""
        if self.amount < amount:
            return False
        self.amount -= amount
        return True

    def is_negative(self) -> bool:
        """Return True when the balance is below zero."""
        return self.amount < 0

    def __str__(self) -> str:
        return f"Money({self.amount})"


@dataclass
class WorkForce:
    """An amount of work force, from 0 upwards."""

    amount: int = 0

    def __post_init__(self) -> None:
        _unsigned("work force", self.amount)

    def add(self, amount: int) -> None:
        """Add ``amount`` of work force."""
        self.amount += _unsigned("amount", amount)

    def remove(self, amount: int) -> bool:
        """Take ``amount`` of work force; return False and change nothing if there is not enough."""
        _unsigned("amount", amount)
        if self.amount < amount:
            return False
        self.amount -= amount
        return True

    def __str__(self) -> str:
        return f"WorkForce({self.amount})"


def _take(holder: object, attr: str, amount: int) -> bool:
    _unsigned("amount", amount)
    current = getattr(holder, attr)
    if current < amount:
        return False
    setattr(holder, attr, current - amount)
    return True


@dataclass
class Ores:
    """Stocks of uranium and rare metals, each from 0 upwards."""

    uranium: int = 0
    rate_metals: int = 0

    def __post_init__(self) -> None:
        _unsigned("uranium", self.uranium)
        _unsigned("rate_metals", self.rate_metals)

    def add_uranium(self, amount: int) -> None:
        """Add ``amount`` of uranium."""
        self.uranium += _unsigned("amount", amount)

    def add_rate_metals(self, amount: int) -> None:
        """Add ``amount`` of rare metals."""
        self.rate_metals += _unsigned("amount", amount)

    def remove_uranium(self, amount: int) -> bool:
        """Take ``amount`` of uranium; return False if there is not enough."""
        return _take(self, "uranium", amount)

    def remove_rate_metals(self, amount: int) -> bool:
        """Take ``amount`` of rare metals; return False if there is not enough."""
        return _take(self, "rate_metals", amount)

    def __str__(self) -> str:
        return f"Ores({self.uranium} {self.rate_metals})"


@dataclass
class RefinedProduct:
    """Stocks of alloys, chips and components, each from 0 upwards."""

    alloys: int = 0
    chips: int = 0
    components: int = 0

    def __post_init__(self) -> None:
        _unsigned("alloys", self.alloys)
        _unsigned("chips", self.chips)
        _unsigned("components", self.components)

    def add_alloys(self, amount: int) -> None:
        """Add ``amount`` of alloys."""
        self.alloys += _unsigned("amount", amount)

    def add_chips(self, amount: int) -> None:
        """Add ``amount`` of chips."""
        self.chips += _unsigned("amount", amount)

    def add_components(self, amount: int) -> None:
        """Add ``amount`` of components."""
        self.components += _unsigned("amount", amount)

    def remove_alloys(self, amount: int) -> bool:
        """Take ``amount`` of alloys; return False if there is not enough."""
        return _take(self, "alloys", amount)

    def remove_chips(self, amount: int) -> bool:
        """Take ``amount`` of chips; return False if there is not enough."""
        return _take(self, "chips", amount)

    def remove_components(self, amount: int) -> bool:
        """Take ``amount`` of components; return False if there is not enough."""
        return _take(self, "components", amount)

    def __str__(self) -> str:
        return f"RefinedProduct({self.alloys} {self.chips} {self.components})"


@dataclass(frozen=True)
class Expert:
    """A scientific expert with a level from 0 to 255."""

    level: int

    def __post_init__(self) -> None:
        if not 0 <= self.level <= _EXPERT_MAX_LEVEL:
            raise ValueError(
                f"expert level must be between 0 and {_EXPERT_MAX_LEVEL}, got {self.level}"
            )

    def __str__(self) -> str:
        return str(self.level)


@dataclass
class ScientificResearch:
    """The experts working on research; their levels add up to the research amount."""

    experts: list[Expert] = field(default_factory=list)

    def add_expert(self, expert: Expert) -> None:
        """Add an expert to the research staff."""
        self.experts.append(expert)

    def amount(self) -> int:
        """Return the sum of the experts' levels."""
        return sum(expert.level for expert in self.experts)

    def __len__(self) -> int:
        return len(self.experts)

    def __str__(self) -> str:
        listed = "".join(f"{expert} " for expert in self.experts)
        return f"ScientificResearch({listed})"