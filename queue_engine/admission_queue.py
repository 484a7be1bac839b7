"""
AdmissionQueue: insertion-ordered sequence of the vehicles awaiting processing.

Backed by :class:`collections.OrderedDict`, which is a doubly-linked list
plus an id-to-node map.  That gives:

    - push_tail      O(1)
    - pop_head       O(1)
    - erase(id)      O(1)
    - linear scan    O(n)

Iterators are invalidated by any mutation.
"""

from collections import OrderedDict
from typing import Callable, Iterator, Optional

from .vehicle import Vehicle


class AdmissionQueue:
    """
    FIFO of vehicle records, owner of every record it holds.

    Attributes:
        capacity (int): Maximum number of queued vehicles.
    """

    def __init__(self, capacity: int):
        self.capacity = capacity
        self._nodes: "OrderedDict[int, Vehicle]" = OrderedDict()
        self._version = 0

    def push_tail(self, vehicle: Vehicle) -> None:
        """
        Append a vehicle at the tail.

        Raises:
            OverflowError: If the queue is already at capacity.
            KeyError: If a vehicle with the same id is queued.
        """
        if len(self._nodes) >= self.capacity:
            raise OverflowError(f"admission queue full ({self.capacity})")
        if vehicle.id in self._nodes:
            raise KeyError(vehicle.id)
        self._nodes[vehicle.id] = vehicle
        self._version += 1

    def pop_head(self) -> Optional[Vehicle]:
        """Remove and return the head, or None when empty."""
        if not self._nodes:
            return None
        _, vehicle = self._nodes.popitem(last=False)
        self._version += 1
        return vehicle

    def erase(self, vehicle_id: int) -> Optional[Vehicle]:
        """Unlink the vehicle with *vehicle_id* wherever it sits."""
        vehicle = self._nodes.pop(vehicle_id, None)
        if vehicle is not None:
            self._version += 1
        return vehicle

    def first_matching(self, predicate: Callable[[Vehicle], bool]) -> Optional[Vehicle]:
        """Scan head to tail and return the first vehicle satisfying *predicate*."""
        for vehicle in self._nodes.values():
            if predicate(vehicle):
                return vehicle
        return None

    def clear(self) -> int:
        """Drop every record; returns how many were released."""
        released = len(self._nodes)
        self._nodes.clear()
        self._version += 1
        return released

    def ids(self) -> Iterator[int]:
        return iter(list(self._nodes))

    @property
    def is_full(self) -> bool:
        return len(self._nodes) >= self.capacity

    def __iter__(self) -> Iterator[Vehicle]:
        return self._walk(self._version)

    def _walk(self, version: int) -> Iterator[Vehicle]:
        """Generator bound to the queue version current when iteration began."""
        if self._version != version:
            raise RuntimeError("admission queue mutated during iteration")
        for vehicle in self._nodes.values():
            yield vehicle
            if self._version != version:
                raise RuntimeError("admission queue mutated during iteration")

    def __contains__(self, vehicle_id: object) -> bool:
        return vehicle_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)
