#!/usr/bin/env python3
"""
queue_engine/vehicle.py
=======================
Immutable vehicle records handed to the :class:`~queue_engine.engine.QueueEngine`.

A :class:`Vehicle` is built by the caller and validated by the engine on
admission; construction itself never rejects attribute values so that
the engine can report them as ``INVALID`` instead of raising.

Priority numbering
------------------
``0`` private (lowest), ``1`` emergency (highest), ``2`` public
transport.  The numbers are kept as-is on the record; the scheduling
*precedence* used for sorting is exposed through :attr:`Priority.rank`.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, IntEnum
from typing import Any, List, Optional


class Priority(IntEnum):
    """Scheduling class of a vehicle."""
    PRIVATE = 0
    EMERGENCY = 1
    PUBLIC = 2

    @property
    def rank(self) -> int:
        """Precedence order: 0 is served first (emergency), 2 last (private)."""
        return _PRECEDENCE[self]


_PRECEDENCE = {
    Priority.EMERGENCY: 0,
    Priority.PUBLIC: 1,
    Priority.PRIVATE: 2,
}


class Mode(Enum):
    """Transport mode.  Emergency vehicles carry their subtype as the mode."""
    PRIVATE = "Private"
    BUS = "Bus"
    TRAM = "Tram"
    AMBULANCE = "Ambulance"
    FIRE_TRUCK = "Fire Truck"
    POLICE = "Police"

    @property
    def category(self) -> str:
        """Report class: ``Private``, ``Public`` or ``Emergency``."""
        if self is Mode.PRIVATE:
            return "Private"
        if self in (Mode.BUS, Mode.TRAM):
            return "Public"
        return "Emergency"

    @property
    def priority(self) -> "Priority":
        """The only priority a vehicle of this mode may carry."""
        return _CATEGORY_PRIORITY[self.category]

    def __str__(self) -> str:
        return self.value


EMERGENCY_MODES = (Mode.AMBULANCE, Mode.FIRE_TRUCK, Mode.POLICE)

_CATEGORY_PRIORITY = {
    "Private": Priority.PRIVATE,
    "Public": Priority.PUBLIC,
    "Emergency": Priority.EMERGENCY,
}


@dataclass(frozen=True)
class VehicleSummary:
    """Copy of the fields a report or a caller needs once a vehicle is gone."""
    id: int
    mode: Mode
    vehicle_type: str
    route: str
    priority: int
    passengers: int
    arrival: Any = None

    @property
    def category(self) -> str:
        return self.mode.category


@dataclass(frozen=True)
class Vehicle:
    """One unit of traffic waiting at the intersection.

    Attributes
    ----------
    id : int
        Caller-assigned identifier, positive and unique while queued.
    mode : Mode
        Transport mode (emergency subtypes included).
    vehicle_type : str
        Free-form label such as ``Car`` or ``Tram``.
    arrival : Any
        Totally ordered stamp.  ``None`` until the engine stamps it.
    priority : int
        ``0`` private, ``1`` emergency, ``2`` public transport.
    passengers : int
        Non-negative passenger count.
    route : str
        Route label, empty for private vehicles.
    """

    id: int
    mode: Mode
    vehicle_type: str
    arrival: Any = None
    priority: int = Priority.PRIVATE
    passengers: int = 0
    route: str = ""

    # ── Factories ─────────────────────────────────────────────────────────

    @classmethod
    def private(cls, vehicle_id: int, vehicle_type: str = "Car",
                arrival: Any = None) -> "Vehicle":
        return cls(
            id=vehicle_id,
            mode=Mode.PRIVATE,
            vehicle_type=vehicle_type,
            arrival=arrival,
            priority=Priority.PRIVATE,
        )

    @classmethod
    def public(cls, vehicle_id: int, route: str, passengers: int = 0,
               arrival: Any = None) -> "Vehicle":
        """Bus or tram, picked from the route prefix (``Bus-101``, ``Tram-A1``)."""
        mode = Mode.TRAM if route.startswith("Tram") else Mode.BUS
        return cls(
            id=vehicle_id,
            mode=mode,
            vehicle_type=mode.value,
            arrival=arrival,
            priority=Priority.PUBLIC,
            passengers=passengers,
            route=route,
        )

    @classmethod
    def emergency(cls, vehicle_id: int, mode: Mode = Mode.AMBULANCE,
                  route: str = "", passengers: int = 0,
                  arrival: Any = None) -> "Vehicle":
        return cls(
            id=vehicle_id,
            mode=mode,
            vehicle_type=mode.value,
            arrival=arrival,
            priority=Priority.EMERGENCY,
            passengers=passengers,
            route=route,
        )

    # ── Derived ───────────────────────────────────────────────────────────

    @property
    def is_emergency(self) -> bool:
        return self.priority == Priority.EMERGENCY

    @property
    def category(self) -> str:
        return self.mode.category

    @property
    def rank(self) -> int:
        """Precedence rank; only meaningful for a validated vehicle."""
        return Priority(self.priority).rank

    def stamped(self, arrival: Any) -> "Vehicle":
        """Return a copy carrying *arrival*; the original is left untouched."""
        return replace(self, arrival=arrival)

    def validation_errors(self) -> List[str]:
        """Return every attribute problem; an empty list means admissible."""
        errors = []
        if isinstance(self.id, bool) or not isinstance(self.id, int) or self.id <= 0:
            errors.append(f"id must be a positive integer, got {self.id!r}")
        if not isinstance(self.mode, Mode):
            errors.append(f"unknown mode {self.mode!r}")
        if (isinstance(self.priority, bool) or not isinstance(self.priority, int)
                or self.priority not in tuple(Priority)):
            errors.append(f"priority must be 0, 1 or 2, got {self.priority!r}")
        elif isinstance(self.mode, Mode) and self.priority != self.mode.priority:
            errors.append(
                f"priority {int(self.priority)} does not match mode {self.mode} "
                f"(expects {int(self.mode.priority)})"
            )
        if not isinstance(self.passengers, int) or self.passengers < 0:
            errors.append(f"passenger count must be >= 0, got {self.passengers!r}")
        return errors

    def summary(self) -> VehicleSummary:
        return VehicleSummary(
            id=self.id,
            mode=self.mode,
            vehicle_type=self.vehicle_type,
            route=self.route,
            priority=int(self.priority),
            passengers=self.passengers,
            arrival=self.arrival,
        )

    def describe(self, arrival_label: Optional[str] = None) -> str:
        """Multi-line listing used by the menu's view and search screens."""
        lines = [
            f"Vehicle ID: {self.id}",
            f"Type: {self.vehicle_type}",
            f"Category: {self.category}",
            f"Arrival: {arrival_label if arrival_label is not None else self.arrival}",
            f"Priority: {int(self.priority)}",
            f"Passengers: {self.passengers}",
            f"Route: {self.route or '-'}",
        ]
        return "\n".join(lines)
