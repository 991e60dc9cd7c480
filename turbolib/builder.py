"""Builder pattern: a builder assembles a car product step by step."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import astuple, dataclass
from typing import Optional


@dataclass
class CarProduct:
    """A car; empty strings mark parts not yet fitted."""

    chassis: str = ""
    drivetrain: str = ""
    engine: str = ""
    wheels: str = ""
    seats: str = ""
    dashboard: str = ""
    wiring: str = ""

    def count_parts(self) -> int:
        """Number of parts fitted."""
        return sum(1 for part in astuple(self) if part)


class CarBuilder(ABC):
    """The steps for building the parts of a car."""

    @abstractmethod
    def set_chassis(self) -> None: ...

    @abstractmethod
    def set_drivetrain(self) -> None: ...

    @abstractmethod
    def set_engine(self) -> None: ...

    @abstractmethod
    def set_wheels(self) -> None: ...

    @abstractmethod
    def set_seats(self) -> None: ...

    @abstractmethod
    def set_dashboard(self) -> None: ...

    @abstractmethod
    def set_wiring(self) -> None: ...


class SportsCarBuilder(CarBuilder):
    """Builds sports cars; every step works on the same product until it is taken."""

    def __init__(self) -> None:
        self._product = CarProduct()

    def reset(self) -> None:
        """Start a fresh product."""
        self._product = CarProduct()

    def set_chassis(self) -> None:
        self._product.chassis = "Carbon Fibre Chassis"

    def set_drivetrain(self) -> None:
        self._product.drivetrain = "7-Speed Drivetrain"

    def set_engine(self) -> None:
        self._product.engine = "V8 Engine"

    def set_wheels(self) -> None:
        self._product.wheels = "18-inch Diamond-cut Alloy Wheels"

    def set_seats(self) -> None:
        self._product.seats = "Recaro Seats"

    def set_dashboard(self) -> None:
        self._product.dashboard = "Suede Dashboard"

    def set_wiring(self) -> None:
        self._product.wiring = "Wiring & Electronics"

    def get_product(self) -> CarProduct:
        """Return the product built so far and start a new one."""
        result = self._product
        self.reset()
        return result


class Pipeline:
    """Runs a builder's steps in the order a given product needs."""

    def __init__(self, builder: Optional[CarBuilder]) -> None:
        if builder is None:
            raise ValueError("builder must not be null")
        self._builder = builder

    def build_rolling_chassis_product(self) -> None:
        """Chassis, seats and wheels."""
        self._builder.set_chassis()
        self._builder.set_seats()
        self._builder.set_wheels()

    def build_full_featured_product(self) -> None:
        """Every part."""
        self._builder.set_chassis()
        self._builder.set_drivetrain()
        self._builder.set_engine()
        self._builder.set_wheels()
        self._builder.set_seats()
        self._builder.set_dashboard()
        self._builder.set_wiring()