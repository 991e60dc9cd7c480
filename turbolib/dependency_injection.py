"""Dependency injection: a car is given its energy source from outside."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class EnergySource(ABC):
    """Something a car can draw energy from; starts with capacity 100."""

    def __init__(self) -> None:
        self._capacity = 100

    @property
    def capacity(self) -> int:
        """Remaining capacity."""
        return self._capacity

    @abstractmethod
    def get(self) -> None:
        """Draw energy from the source."""


class EnergySourceBattery(EnergySource):
    """A rechargeable battery."""

    def get(self) -> None:
        print("Recharging battery", flush=True)
        self._capacity -= 1


class EnergySourcePetrol(EnergySource):
    """A petrol pump."""

    def get(self) -> None:
        print("Getting petrol", flush=True)
        self._capacity -= 1


class Car:
    """A car that uses whichever energy source it was given."""

    def __init__(self, service: Optional[EnergySource]) -> None:
        if service is None:
            raise ValueError("service must not be null")
        self._energy_source = service

    def get_energy(self) -> None:
        """Pull in and draw energy from the injected source."""
        print("Car is pulling in to service station!", flush=True)
        self._energy_source.get()