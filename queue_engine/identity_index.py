"""
IdentityIndex: identifier-keyed lookup over the vehicles currently queued.
"""

from typing import Dict, Iterator, Optional

from .vehicle import Vehicle


class IdentityIndex:
    """
    Maps vehicle ids to vehicle records with average O(1) insert, lookup
    and erase.  Holds non-owning references; the admission queue owns
    the records.
    """

    def __init__(self):
        self._by_id: Dict[int, Vehicle] = {}

    def insert(self, vehicle: Vehicle) -> None:
        """
        Register a vehicle under its id.

        Raises:
            KeyError: If the id is already present.
        """
        if vehicle.id in self._by_id:
            raise KeyError(vehicle.id)
        self._by_id[vehicle.id] = vehicle

    def get(self, vehicle_id: int) -> Optional[Vehicle]:
        return self._by_id.get(vehicle_id)

    def pop(self, vehicle_id: int) -> Optional[Vehicle]:
        """Remove and return the entry for *vehicle_id*, or None on a miss."""
        return self._by_id.pop(vehicle_id, None)

    def clear(self) -> None:
        self._by_id.clear()

    def ids(self) -> Iterator[int]:
        return iter(self._by_id)

    def __contains__(self, vehicle_id: object) -> bool:
        return vehicle_id in self._by_id

    def __len__(self) -> int:
        return len(self._by_id)
