"""
Random demo vehicles for the menu:
    - identifier allocation (the engine never allocates ids)
    - private / public / emergency attribute picking
"""

import logging
import random
from typing import Any, Optional

import config
from queue_engine.vehicle import EMERGENCY_MODES, Mode, Vehicle

log = logging.getLogger(__name__)


class IdSequence:
    """
    Hands out vehicle identifiers 1, 2, 3, …

    Identifiers are never recycled, even after a vehicle is processed.
    """

    def __init__(self, start: int = 1):
        self._next = start

    def __call__(self) -> int:
        vehicle_id = self._next
        self._next += 1
        return vehicle_id


class VehicleGenerator:
    """
    Builds demonstration vehicles with randomised attributes.

    Attributes:
        ids (IdSequence): Identifier source.
        rng (random.Random): Seeded generator, for reproducible sessions.
    """

    def __init__(self, seed: Optional[int] = None, ids: Optional[IdSequence] = None):
        """
        Args:
            seed (int or None): Seed for the internal random generator.
            ids (IdSequence or None): Identifier source; a fresh one if omitted.
        """
        self.rng = random.Random(seed)
        self.ids = ids or IdSequence()

    def private(self, arrival: Any = None) -> Vehicle:
        """Car, truck or motorcycle with no route and no passenger count."""
        vehicle_type = self.rng.choice(config.PRIVATE_TYPES)
        return Vehicle.private(self.ids(), vehicle_type, arrival=arrival)

    def public(self, arrival: Any = None) -> Vehicle:
        """Bus or tram on a random route with 10-59 passengers."""
        route = self.rng.choice(config.PUBLIC_ROUTES)
        passengers = self.rng.randint(config.PUBLIC_PASSENGERS_MIN,
                                      config.PUBLIC_PASSENGERS_MAX)
        return Vehicle.public(self.ids(), route, passengers, arrival=arrival)

    def emergency(self, mode: Optional[Mode] = None, arrival: Any = None) -> Vehicle:
        """Ambulance, fire truck or police car on a dispatch route."""
        if mode is None:
            mode = self.rng.choice(EMERGENCY_MODES)
        route = self.rng.choice(config.EMERGENCY_ROUTES)
        crew = self.rng.randint(config.EMERGENCY_CREW_MIN, config.EMERGENCY_CREW_MAX)
        vehicle = Vehicle.emergency(self.ids(), mode, route, crew, arrival=arrival)
        log.debug("generated emergency vehicle id=%d mode=%s", vehicle.id, mode)
        return vehicle
