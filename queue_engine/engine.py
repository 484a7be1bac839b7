#!/usr/bin/env python3
"""
queue_engine/engine.py
======================
The vehicle queue engine.

:class:`QueueEngine` composes an :class:`~queue_engine.admission_queue.AdmissionQueue`,
an :class:`~queue_engine.identity_index.IdentityIndex` and a
:class:`~queue_engine.snapshot.SnapshotView`, and keeps the three in
agreement across every admission, preemption and removal.  Each
successful mutation is recorded in the :class:`~queue_engine.event_log.EventLog`.

Selection rule
--------------
``process_next`` scans the admission queue from head to tail and takes the
first emergency (priority ``1``) vehicle it meets; with none queued it
takes the head.  Sorting only reorders the snapshot, never the queue.

Failure model
-------------
Capacity, duplicate, miss and invalid-attribute failures come back as
:class:`Outcome` values.  A disagreement between the internal containers
raises :class:`InternalInconsistencyError`, which is not meant to be
caught.
"""

from __future__ import annotations

import itertools
import logging
from enum import Enum
from typing import Any, Callable, Iterator, List, Optional

from queue_engine.admission_queue import AdmissionQueue
from queue_engine.event_log import Action, EventLog
from queue_engine.identity_index import IdentityIndex
from queue_engine.snapshot import SnapshotView, SortKey
from queue_engine.vehicle import Vehicle, VehicleSummary

log = logging.getLogger("engine")


class Outcome(Enum):
    """Discriminated result of a mutating engine call."""
    OK = "ok"
    FULL = "full"                # capacity exceeded
    DUPLICATE = "duplicate"      # identifier already queued
    INVALID = "invalid"          # bad priority, mode, id or passenger count
    REMOVED = "removed"
    NOT_FOUND = "not-found"

    def __bool__(self) -> bool:
        return self in (Outcome.OK, Outcome.REMOVED)


class InternalInconsistencyError(RuntimeError):
    """The queue, the identity index and the snapshot no longer agree."""


def _is_emergency(vehicle: Vehicle) -> bool:
    return vehicle.is_emergency


class QueueEngine:
    """Bounded vehicle queue with emergency preemption.

    Parameters
    ----------
    capacity : int
        Maximum number of queued vehicles; fixed for the engine's lifetime.
    clock : callable or None
        Zero-argument callable returning the current stamp.  Read once per
        event so the log stays chronological; also stamps vehicles
        admitted without an arrival.  Defaults to an integer counter
        starting at 1.

    Raises
    ------
    ValueError
        If *capacity* is not a positive integer.
    """

    def __init__(self, capacity: int,
                 clock: Optional[Callable[[], Any]] = None) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise ValueError(f"capacity must be a positive integer, got {capacity!r}")

        self._clock = clock or itertools.count(1).__next__
        self._queue = AdmissionQueue(capacity)
        self._index = IdentityIndex()
        self._snapshot = SnapshotView()
        self.events = EventLog()

        log.info("QueueEngine created capacity=%d", capacity)

    # ── Accessors ─────────────────────────────────────────────────────────────

    @property
    def capacity(self) -> int:
        return self._queue.capacity

    def size(self) -> int:
        return len(self._queue)

    def is_full(self) -> bool:
        return self._queue.is_full

    def is_empty(self) -> bool:
        return len(self._queue) == 0

    def __len__(self) -> int:
        return len(self._queue)

    def __contains__(self, vehicle_id: object) -> bool:
        return vehicle_id in self._index

    # ── Mutations ─────────────────────────────────────────────────────────────

    def admit(self, vehicle: Vehicle) -> Outcome:
        """Queue *vehicle* at the tail.

        Checks run in order: attribute validation, capacity, duplicate id.
        The ADMIT event carries the clock tick; a vehicle without an arrival
        stamp receives that same tick as its arrival.  On rejection the
        engine keeps no reference to *vehicle*.

        Returns
        -------
        Outcome
            ``OK``, ``INVALID``, ``FULL`` or ``DUPLICATE``.
        """
        errors = vehicle.validation_errors()
        if errors:
            log.warning("admit rejected id=%r: %s", vehicle.id, "; ".join(errors))
            return Outcome.INVALID
        if self._queue.is_full:
            log.warning("admit rejected id=%d: queue full (%d)", vehicle.id, self.capacity)
            return Outcome.FULL
        if vehicle.id in self._index:
            log.warning("admit rejected id=%d: duplicate identifier", vehicle.id)
            return Outcome.DUPLICATE

        tick = self._clock()
        if vehicle.arrival is None:
            vehicle = vehicle.stamped(tick)

        self._queue.push_tail(vehicle)
        self._index.insert(vehicle)
        self._snapshot.append(vehicle)
        self._check_sizes("admit")

        log.debug("admitted id=%d priority=%d size=%d/%d",
                  vehicle.id, vehicle.priority, len(self._queue), self.capacity)
        self.events.append(tick, Action.ADMIT, vehicle.summary())
        return Outcome.OK

    def process_next(self) -> Optional[VehicleSummary]:
        """Release the next vehicle per the selection rule.

        Returns the released vehicle's summary, or ``None`` (and logs
        nothing) when the queue is empty.
        """
        vehicle = self._queue.first_matching(_is_emergency)
        if vehicle is not None:
            self._queue.erase(vehicle.id)
            log.debug("emergency preemption id=%d", vehicle.id)
        else:
            vehicle = self._queue.pop_head()
            if vehicle is None:
                return None

        self._detach(vehicle, "process")
        summary = vehicle.summary()
        self.events.append(self._clock(), Action.PROCESS, summary)
        return summary

    def process_emergencies(self) -> List[VehicleSummary]:
        """Release every queued emergency vehicle, earliest admitted first."""
        released = []
        while self._queue.first_matching(_is_emergency) is not None:
            released.append(self.process_next())
        log.debug("processed %d emergency vehicle(s)", len(released))
        return released

    def remove(self, vehicle_id: int) -> Outcome:
        """Excise the vehicle with *vehicle_id* from wherever it is queued.

        Returns
        -------
        Outcome
            ``REMOVED`` or ``NOT_FOUND``.
        """
        if self._index.get(vehicle_id) is None:
            log.info("remove miss id=%r", vehicle_id)
            return Outcome.NOT_FOUND

        vehicle = self._queue.erase(vehicle_id)
        if vehicle is None:
            self._fail(f"id {vehicle_id} indexed but not queued")

        self._detach(vehicle, "remove")
        self.events.append(self._clock(), Action.REMOVE, vehicle.summary())
        return Outcome.REMOVED

    def close(self) -> int:
        """Release every still-queued record without logging events.

        Returns the number of records released.
        """
        released = self._queue.clear()
        self._index.clear()
        self._snapshot.clear()
        log.info("QueueEngine closed, released %d queued vehicle(s)", released)
        return released

    def __enter__(self) -> "QueueEngine":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ── Queries ───────────────────────────────────────────────────────────────

    def lookup(self, vehicle_id: int) -> Optional[Vehicle]:
        """Return the queued vehicle with *vehicle_id*, or None."""
        return self._index.get(vehicle_id)

    def iterate_queue(self) -> Iterator[Vehicle]:
        """Lazy FIFO iteration; raises RuntimeError if the engine mutates meanwhile."""
        return iter(self._queue)

    def emergencies(self) -> List[Vehicle]:
        """Queued emergency vehicles in admission order."""
        return [v for v in self._queue if v.is_emergency]

    def snapshot(self) -> List[Vehicle]:
        """Current snapshot order (admission order until the first sort)."""
        return list(self._snapshot)

    def snapshot_sorted(self, key: SortKey) -> List[Vehicle]:
        """Sort the snapshot view by *key* and return the new order."""
        ordered = self._snapshot.sort(key)
        log.debug("snapshot sorted %s: %s", SortKey(key).value, [v.id for v in ordered])
        return ordered

    # ── Integrity ─────────────────────────────────────────────────────────────

    def verify_integrity(self) -> None:
        """Full cross-container check; raises InternalInconsistencyError."""
        queued = list(self._queue.ids())
        if len(queued) > self.capacity:
            self._fail(f"size {len(queued)} exceeds capacity {self.capacity}")
        if len(set(queued)) != len(queued):
            self._fail("duplicate identifier in admission queue")
        if set(queued) != set(self._index.ids()):
            self._fail("identity index and admission queue disagree")
        if sorted(queued) != sorted(self._snapshot.ids()):
            self._fail("snapshot membership and admission queue disagree")
        for vehicle_id in queued:
            if self._index.get(vehicle_id) is not self._snapshot_member(vehicle_id):
                self._fail(f"id {vehicle_id}: index and snapshot hold different records")

    def _snapshot_member(self, vehicle_id: int) -> Optional[Vehicle]:
        return next((v for v in self._snapshot if v.id == vehicle_id), None)

    def _detach(self, vehicle: Vehicle, op: str) -> None:
        """Drop a vehicle already unlinked from the queue from index and snapshot."""
        if self._index.pop(vehicle.id) is not vehicle:
            self._fail(f"{op}: index entry for id {vehicle.id} is not the queued record")
        if not self._snapshot.discard(vehicle.id):
            self._fail(f"{op}: id {vehicle.id} missing from snapshot")
        self._check_sizes(op)

    def _check_sizes(self, op: str) -> None:
        n = len(self._queue)
        if n != len(self._index) or n != len(self._snapshot):
            self._fail(
                f"{op}: sizes diverged queue={n} index={len(self._index)} "
                f"snapshot={len(self._snapshot)}"
            )

    def _fail(self, message: str) -> None:
        log.critical("internal inconsistency: %s", message)
        raise InternalInconsistencyError(message)
