"""The department that builds and runs the city's transport."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from halfstack.resources import InsufficientBudgetError, ResourceManager
from halfstack.transport_commands import CloseBusiness, OpenBusiness, TransportCommand
from halfstack.transportation import Transportation

MAX_AIRPORTS = 8

# kind -> ((water, energy, wood, steel, materials), budget)
_BUILD_COSTS: dict[str, tuple[tuple[int, int, int, int, int], int]] = {
    "Airport": ((10, 50, 500, 500, 500), 500),
    "Road": ((10, 10, 100, 100, 100), 100),
    "Railway": ((10, 20, 200, 200, 200), 200),
}


class TransportError(Exception):
    """Raised when a transport cannot be added."""


@dataclass
class _Entry:
    transport: Transportation
    open_command: TransportCommand
    close_command: TransportCommand


class TransportDepartment:
    """Keeps the city's transports and opens or closes them together.

    One shared instance is reached through :meth:`instance`.
    """

    _instance: ClassVar[TransportDepartment | None] = None

    def __init__(self) -> None:
        self._entries: list[_Entry] = []

    @classmethod
    def instance(cls) -> TransportDepartment:
        """Return the shared department, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the shared department so the next call starts afresh."""
        cls._instance = None

    @property
    def transports(self) -> tuple[Transportation, ...]:
        """The transports currently run by the department."""
        return tuple(entry.transport for entry in self._entries)

    def _contains(self, transport: Transportation) -> bool:
        return any(entry.transport is transport for entry in self._entries)

    def add_transport(self, transport: Transportation) -> None:
        """Build a transport, paying its cost in resources and money.

        Raises TransportError if the airport limit is reached or the
        transport is already present, InsufficientResourcesError or
        InsufficientBudgetError if the city cannot pay; a failed payment
        leaves the city's stock unchanged.
        """
        if transport.kind == "Airport" and self.total_airports() >= MAX_AIRPORTS:
            raise TransportError("Cannot add more airports to city")
        if self._contains(transport):
            raise TransportError("Transport already exists")

        cost = _BUILD_COSTS.get(transport.kind)
        if cost is not None:
            resources, money = cost
            manager = ResourceManager.instance()
            manager.decrease_resources(*resources)
            try:
                manager.decrease_budget(money)
            except InsufficientBudgetError:
                manager.increase_resources(*resources)
                raise

        self._entries.append(_Entry(transport, OpenBusiness(), CloseBusiness()))
        print(f"{transport.kind} successfully built.")

    def remove_transport(self, transport: Transportation) -> None:
        """Remove a transport; nothing happens if it is not present."""
        for position, entry in enumerate(self._entries):
            if entry.transport is transport:
                del self._entries[position]
                return

    def open_transport(self) -> None:
        """Run every transport's open command."""
        for entry in self._entries:
            entry.open_command.execute(entry.transport)

    def close_transport(self) -> None:
        """Run every transport's close command."""
        for entry in self._entries:
            entry.close_command.execute(entry.transport)

    def _count(self, kind: str) -> int:
        return sum(1 for entry in self._entries if entry.transport.kind == kind)

    def total_airports(self) -> int:
        """Number of airports in the city."""
        return self._count("Airport")

    def total_roads(self) -> int:
        """Number of roads in the city."""
        return self._count("Road")

    def total_railways(self) -> int:
        """Number of railways in the city."""
        return self._count("Railway")