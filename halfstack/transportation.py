"""Modes of transport available in the city."""

from __future__ import annotations


class Transportation:
    """A transport mode that citizens can use while it is open."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        self._open = False

    @property
    def is_open(self) -> bool:
        """Whether the transport is currently open."""
        return self._open

    def open(self) -> None:
        """Open the transport to citizens."""
        self._open = True

    def close(self) -> None:
        """Close the transport to citizens."""
        self._open = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind!r}, is_open={self.is_open})"


class Airport(Transportation):
    """An airport."""

    def __init__(self) -> None:
        super().__init__("Airport")


class Road(Transportation):
    """A road."""

    def __init__(self) -> None:
        super().__init__("Road")


class Railway(Transportation):
    """A railway."""

    def __init__(self) -> None:
        super().__init__("Railway")


class Pathway:
    """A path that can be cleared for access or blocked off."""

    def __init__(self) -> None:
        self._clear = False

    @property
    def is_clear(self) -> bool:
        """Whether the path is cleared."""
        return self._clear

    def clear(self) -> None:
        """Clear the path so it can be used."""
        self._clear = True

    def block(self) -> None:
        """Block the path from use."""
        self._clear = False


class Trail(Transportation):
    """A transport mode backed by a pathway that is cleared or blocked."""

    def __init__(self) -> None:
        super().__init__("Trail")
        self._pathway = Pathway()

    @property
    def is_open(self) -> bool:
        """Whether the underlying pathway is cleared."""
        return self._pathway.is_clear

    def open(self) -> None:
        """Open the trail by clearing its pathway."""
        self._pathway.clear()

    def close(self) -> None:
        """Close the trail by blocking its pathway."""
        self._pathway.block()