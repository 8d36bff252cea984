"""The department that runs the city's utility services."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Protocol

from halfstack.resources import InsufficientBudgetError, ResourceManager
from halfstack.satisfaction import Satisfaction

PLANT_RESOURCE_COST = (0, 0, 50, 50, 30)
PLANT_BUDGET_COST = 200


class Plant(Protocol):
    """What the department needs from a utility plant."""

    kind: str

    def generate(self) -> None: ...


class Citizen(Protocol):
    """What the department needs from a citizen."""

    satisfaction: Satisfaction


class UtilityCommand(ABC):
    """A utility service run through a utilities department.

    Without a department of its own, the command uses the shared one.
    """

    def __init__(self, department: UtilitiesDepartment | None = None) -> None:
        self.department = department

    def _target(self) -> UtilitiesDepartment:
        if self.department is None:
            self.department = UtilitiesDepartment.instance()
        return self.department

    @abstractmethod
    def execute(self) -> None:
        """Run the service."""

    @property
    @abstractmethod
    def status(self) -> bool:
        """Whether the service is active."""


class SupplyWater(UtilityCommand):
    """Supplies water to the city."""

    def __init__(
        self, department: UtilitiesDepartment | None = None, water: int = 0
    ) -> None:
        super().__init__(department)
        self.water = water

    def execute(self) -> None:
        """Have the department supply water."""
        self._target().supply_water()

    @property
    def status(self) -> bool:
        """True while the water level is above zero."""
        return self.water > 0


class SupplyPower(UtilityCommand):
    """Supplies power to the city."""

    def __init__(
        self, department: UtilitiesDepartment | None = None, energy: int = 0
    ) -> None:
        super().__init__(department)
        self.energy = energy

    def execute(self) -> None:
        """Have the department supply energy."""
        self._target().supply_energy()

    @property
    def status(self) -> bool:
        """True while the energy level is above zero."""
        return self.energy > 0


class ManageWaste(UtilityCommand):
    """Manages the city's waste."""

    def __init__(
        self, department: UtilitiesDepartment | None = None, open: bool = False
    ) -> None:
        super().__init__(department)
        self.open = open

    def execute(self) -> None:
        """Have the department manage waste."""
        self._target().manage_waste()

    @property
    def status(self) -> bool:
        """The open flag."""
        return self.open


class ManageSewage(UtilityCommand):
    """Manages the city's sewage."""

    def __init__(
        self, department: UtilitiesDepartment | None = None, open: bool = False
    ) -> None:
        super().__init__(department)
        self.open = open

    def execute(self) -> None:
        """Have the department manage sewage."""
        self._target().manage_sewage()

    @property
    def status(self) -> bool:
        """The open flag."""
        return self.open


class UtilitiesDepartment:
    """Owns the city's plants and runs its utility services.

    One shared instance is reached through :meth:`instance`. The
    citizens served by waste management are kept in :attr:`citizens`.
    """

    _instance: ClassVar[UtilitiesDepartment | None] = None

    def __init__(self) -> None:
        self.commands: tuple[UtilityCommand, ...] = (
            SupplyWater(self),
            SupplyPower(self),
            ManageWaste(self),
            ManageSewage(self),
        )
        self._plants: list[Plant] = []
        self.citizens: list[Citizen] = []
        self.sewage_cycles = 0

    @classmethod
    def instance(cls) -> UtilitiesDepartment:
        """Return the shared department, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the shared department so the next call starts afresh."""
        cls._instance = None

    @property
    def plants(self) -> tuple[Plant, ...]:
        """The plants owned by the department."""
        return tuple(self._plants)

    def perform_routine(self) -> None:
        """Run every utility service in turn."""
        for command in self.commands:
            command.execute()

    def _generate(self, kind: str) -> None:
        for plant in self._plants:
            if plant.kind == kind:
                plant.generate()

    def supply_water(self) -> None:
        """Have every water plant generate."""
        self._generate("Water")
        print("The utilities department is supplying water.")

    def supply_energy(self) -> None:
        """Have every power plant generate."""
        self._generate("Power")
        print("The utilities department is supplying power.")

    def manage_waste(self) -> None:
        """Collect waste, raising every citizen's satisfaction one level."""
        for citizen in self.citizens:
            citizen.satisfaction = citizen.satisfaction.raised()
        print("The utilities department is managing waste.")

    def manage_sewage(self) -> None:
        """Run one sewage cycle, counted in :attr:`sewage_cycles`."""
        self.sewage_cycles += 1
        print("The utilities department is managing sewage.")

    def add_plant(self, plant: Plant) -> None:
        """Build a plant, paying its cost in resources and money.

        Raises InsufficientResourcesError or InsufficientBudgetError if the
        city cannot pay; a failed payment leaves the city's stock unchanged.
        """
        manager = ResourceManager.instance()
        manager.decrease_resources(*PLANT_RESOURCE_COST)
        try:
            manager.decrease_budget(PLANT_BUDGET_COST)
        except InsufficientBudgetError:
            manager.increase_resources(*PLANT_RESOURCE_COST)
            raise
        self._plants.append(plant)
        print("Plant successfully built.")

    def _count(self, kind: str) -> int:
        return sum(1 for plant in self._plants if plant.kind == kind)

    def total_water_plants(self) -> int:
        """Number of water plants."""
        return self._count("Water")

    def total_power_plants(self) -> int:
        """Number of power plants."""
        return self._count("Power")