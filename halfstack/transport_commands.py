"""Commands that open or close a transport."""

from __future__ import annotations

from abc import ABC, abstractmethod

from halfstack.transportation import Transportation


class TransportCommand(ABC):
    """An action applied to a transport."""

    @abstractmethod
    def execute(self, transport: Transportation) -> None:
        """Apply the command to the given transport."""

    @property
    @abstractmethod
    def status(self) -> bool:
        """The command's operational state."""


class OpenBusiness(TransportCommand):
    """Opens a transport for business."""

    def __init__(self, open: bool = False) -> None:
        self.open = open

    def execute(self, transport: Transportation) -> None:
        """Open the transport."""
        transport.open()

    @property
    def status(self) -> bool:
        """The command's open flag."""
        return self.open


class CloseBusiness(TransportCommand):
    """Closes a transport for business."""

    def __init__(self, close: bool = False) -> None:
        self.close = close

    def execute(self, transport: Transportation) -> None:
        """Close the transport."""
        transport.close()

    @property
    def status(self) -> bool:
        """The command's close flag."""
        return self.close