"""Citizen satisfaction levels."""

from __future__ import annotations

from enum import Enum


class Satisfaction(Enum):
    """How content a citizen is, from lowest to highest."""

    UNSATISFIED = "Unsatisfied"
    NEUTRAL = "Neutral"
    SATISFIED = "Satisfied"

    @property
    def status(self) -> str:
        """The level's display name."""
        return self.value

    def raised(self) -> Satisfaction:
        """The next level up; the highest level stays where it is."""
        order = list(Satisfaction)
        position = order.index(self)
        return order[min(position + 1, len(order) - 1)]

    def lowered(self) -> Satisfaction:
        """The next level down; the lowest level stays where it is."""
        order = list(Satisfaction)
        position = order.index(self)
        return order[max(position - 1, 0)]