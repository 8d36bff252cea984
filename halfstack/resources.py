"""City-wide stock of resources and money."""

from __future__ import annotations

from typing import ClassVar


class InsufficientResourcesError(Exception):
    """Raised when the city lacks the resources for a deduction."""


class InsufficientBudgetError(Exception):
    """Raised when the city lacks the money for a deduction."""


class ResourceManager:
    """Holds the city's water, energy, building materials and budget.

    One shared instance is reached through :meth:`instance`.
    """

    _instance: ClassVar[ResourceManager | None] = None

    def __init__(self) -> None:
        self.water = 20
        self.energy = 20
        self.budget = 10400.0
        self.wood = 400
        self.steel = 400
        self.materials = 200

    @classmethod
    def instance(cls) -> ResourceManager:
        """Return the shared manager, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the shared manager so the next call starts afresh."""
        cls._instance = None

    def decrease_resources(
        self, water: int, energy: int, wood: int, steel: int, materials: int
    ) -> None:
        """Take the given amounts, all or nothing.

        Raises InsufficientResourcesError, leaving every level untouched,
        if any level would drop below zero.
        """
        if (
            self.water - water < 0
            or self.energy - energy < 0
            or self.wood - wood < 0
            or self.steel - steel < 0
            or self.materials - materials < 0
        ):
            raise InsufficientResourcesError("Not enough resources")
        self.water -= water
        self.energy -= energy
        self.wood -= wood
        self.steel -= steel
        self.materials -= materials

    def decrease_budget(self, money: int) -> None:
        """Spend money; raises InsufficientBudgetError if it would go negative."""
        if self.budget - money < 0:
            raise InsufficientBudgetError("Not enough budget")
        self.budget -= money

    def increase_resources(
        self, water: int, energy: int, wood: int, steel: int, materials: int
    ) -> None:
        """Add the given amounts to each level."""
        self.water += water
        self.energy += energy
        self.wood += wood
        self.steel += steel
        self.materials += materials

    def increase_budget(self, money: float) -> None:
        """Add money to the budget."""
        self.budget += money