"""
SnapshotView: sortable mirror of the admission queue's membership.

Sorting reorders only the snapshot; the admission queue and therefore the
processing order are never touched.
"""

from enum import Enum
from typing import Callable, Dict, Iterator, List, Tuple

from .vehicle import Vehicle


class SortKey(Enum):
    """Orderings offered by :meth:`SnapshotView.sort`."""
    BY_ARRIVAL = "by-arrival"
    BY_PRIORITY = "by-priority"


def _arrival_key(vehicle: Vehicle) -> Tuple:
    return (vehicle.arrival,)


def _priority_key(vehicle: Vehicle) -> Tuple:
    return (vehicle.rank, vehicle.arrival)


_SORT_KEYS: Dict[SortKey, Callable[[Vehicle], Tuple]] = {
    SortKey.BY_ARRIVAL: _arrival_key,
    SortKey.BY_PRIORITY: _priority_key,
}


class SnapshotView:
    """
    List of the queued vehicles in an order chosen by the last sort.

    New members are appended at the end, so between sorts the snapshot
    follows admission order.
    """

    def __init__(self):
        self._items: List[Vehicle] = []
        self.last_key = None

    def append(self, vehicle: Vehicle) -> None:
        self._items.append(vehicle)

    def discard(self, vehicle_id: int) -> bool:
        """Remove the member with *vehicle_id*; returns False if absent."""
        for i, vehicle in enumerate(self._items):
            if vehicle.id == vehicle_id:
                del self._items[i]
                return True
        return False

    def sort(self, key: SortKey) -> List[Vehicle]:
        """
        Stable in-place sort by *key*; returns a copy of the new order.

        Raises:
            ValueError: If *key* is not a :class:`SortKey`.
        """
        try:
            key_fn = _SORT_KEYS[SortKey(key)]
        except ValueError:
            raise ValueError(f"unknown sort key {key!r}") from None
        self._items.sort(key=key_fn)
        self.last_key = SortKey(key)
        return list(self._items)

    def clear(self) -> None:
        self._items.clear()
        self.last_key = None

    def ids(self) -> List[int]:
        return [vehicle.id for vehicle in self._items]

    def __iter__(self) -> Iterator[Vehicle]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)
