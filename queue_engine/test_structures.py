#!/usr/bin/env python3
"""
Unit tests for the engine's building blocks: vehicle records, identity
index, admission queue, snapshot view and event log.
"""

from __future__ import annotations

import dataclasses
import unittest

from queue_engine.admission_queue import AdmissionQueue
from queue_engine.event_log import Action, EventLog
from queue_engine.identity_index import IdentityIndex
from queue_engine.snapshot import SnapshotView, SortKey
from queue_engine.vehicle import Mode, Priority, Vehicle


class VehicleTests(unittest.TestCase):
    def test_factories_set_priority_and_mode(self) -> None:
        car = Vehicle.private(1, "Motorcycle")
        tram = Vehicle.public(2, "Tram-A1", 40)
        bus = Vehicle.public(3, "Bus-202", 12)
        police = Vehicle.emergency(4, Mode.POLICE, "Dispatch-East", 2)

        self.assertEqual((car.mode, car.priority, car.route), (Mode.PRIVATE, 0, ""))
        self.assertEqual((tram.mode, tram.priority), (Mode.TRAM, 2))
        self.assertEqual(bus.mode, Mode.BUS)
        self.assertEqual((police.mode, police.priority), (Mode.POLICE, 1))
        self.assertTrue(police.is_emergency)
        self.assertEqual(
            [v.category for v in (car, tram, police)],
            ["Private", "Public", "Emergency"],
        )

    def test_precedence_rank(self) -> None:
        ranks = [Priority(p).rank for p in (1, 2, 0)]
        self.assertEqual(ranks, [0, 1, 2])

    def test_record_is_immutable(self) -> None:
        v = Vehicle.private(1)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            v.id = 2

    def test_stamped_returns_copy(self) -> None:
        v = Vehicle.private(1)
        stamped = v.stamped(17)
        self.assertIsNone(v.arrival)
        self.assertEqual(stamped.arrival, 17)
        self.assertEqual(stamped.id, 1)

    def test_validation_errors(self) -> None:
        self.assertEqual(Vehicle.public(1, "Bus-101", 5).validation_errors(), [])
        errors = Vehicle(id=-1, mode=Mode.BUS, vehicle_type="Bus",
                         priority=5, passengers=-2).validation_errors()
        self.assertEqual(len(errors), 3)

    def test_priority_must_agree_with_mode(self) -> None:
        for mode in Mode:
            self.assertEqual(
                Vehicle(id=1, mode=mode, vehicle_type="x", priority=mode.priority)
                .validation_errors(), [])
        mismatched = Vehicle(id=1, mode=Mode.FIRE_TRUCK, vehicle_type="Fire Truck",
                             priority=Priority.PUBLIC)
        errors = mismatched.validation_errors()
        self.assertEqual(len(errors), 1)
        self.assertIn("does not match mode Fire Truck", errors[0])

    def test_bool_priority_rejected(self) -> None:
        for flag in (True, False):
            errors = Vehicle(id=1, mode=Mode.PRIVATE, vehicle_type="Car",
                             priority=flag).validation_errors()
            self.assertEqual(len(errors), 1)
            self.assertIn("priority must be 0, 1 or 2", errors[0])

    def test_describe_lists_fields(self) -> None:
        text = Vehicle.public(9, "Bus-101", 33, arrival=4).describe()
        self.assertIn("Vehicle ID: 9", text)
        self.assertIn("Category: Public", text)
        self.assertIn("Passengers: 33", text)
        self.assertIn("Route: Bus-101", text)
        self.assertIn("Route: -", Vehicle.private(1).describe())


class IdentityIndexTests(unittest.TestCase):
    def test_insert_get_pop(self) -> None:
        index = IdentityIndex()
        v = Vehicle.private(3)
        index.insert(v)
        self.assertIs(index.get(3), v)
        self.assertIn(3, index)
        self.assertIs(index.pop(3), v)
        self.assertIsNone(index.pop(3))
        self.assertEqual(len(index), 0)

    def test_duplicate_insert_raises(self) -> None:
        index = IdentityIndex()
        index.insert(Vehicle.private(3))
        with self.assertRaises(KeyError):
            index.insert(Vehicle.private(3))


class AdmissionQueueTests(unittest.TestCase):
    def test_fifo_and_interior_erase(self) -> None:
        queue = AdmissionQueue(4)
        for vid in (1, 2, 3, 4):
            queue.push_tail(Vehicle.private(vid))

        self.assertTrue(queue.is_full)
        self.assertEqual(queue.erase(3).id, 3)
        self.assertIsNone(queue.erase(3))
        self.assertEqual(queue.pop_head().id, 1)
        self.assertEqual([v.id for v in queue], [2, 4])

    def test_pop_head_on_empty(self) -> None:
        self.assertIsNone(AdmissionQueue(1).pop_head())

    def test_overflow_and_duplicate(self) -> None:
        queue = AdmissionQueue(1)
        queue.push_tail(Vehicle.private(1))
        with self.assertRaises(OverflowError):
            queue.push_tail(Vehicle.private(2))

        queue = AdmissionQueue(2)
        queue.push_tail(Vehicle.private(1))
        with self.assertRaises(KeyError):
            queue.push_tail(Vehicle.private(1))

    def test_first_matching_scans_from_head(self) -> None:
        queue = AdmissionQueue(4)
        queue.push_tail(Vehicle.private(1))
        queue.push_tail(Vehicle.emergency(2))
        queue.push_tail(Vehicle.emergency(3))
        self.assertEqual(queue.first_matching(lambda v: v.is_emergency).id, 2)
        self.assertIsNone(queue.first_matching(lambda v: v.passengers > 100))

    def test_iteration_invalidated(self) -> None:
        queue = AdmissionQueue(3)
        queue.push_tail(Vehicle.private(1))
        queue.push_tail(Vehicle.private(2))
        it = iter(queue)
        next(it)
        queue.pop_head()
        with self.assertRaises(RuntimeError):
            next(it)

    def test_unstarted_iteration_invalidated(self) -> None:
        queue = AdmissionQueue(3)
        queue.push_tail(Vehicle.private(1))
        it = iter(queue)
        queue.push_tail(Vehicle.private(2))
        with self.assertRaises(RuntimeError):
            next(it)

        it = iter(queue)
        queue.erase(2)
        with self.assertRaises(RuntimeError):
            list(it)


class SnapshotViewTests(unittest.TestCase):
    def test_sort_is_stable(self) -> None:
        view = SnapshotView()
        view.append(Vehicle.private(1, arrival=2))
        view.append(Vehicle.private(2, arrival=1))
        view.append(Vehicle.private(3, arrival=2))

        ordered = view.sort(SortKey.BY_ARRIVAL)
        self.assertEqual([v.id for v in ordered], [2, 1, 3])
        self.assertIs(view.last_key, SortKey.BY_ARRIVAL)

    def test_discard(self) -> None:
        view = SnapshotView()
        view.append(Vehicle.private(1, arrival=1))
        self.assertTrue(view.discard(1))
        self.assertFalse(view.discard(1))
        self.assertEqual(view.ids(), [])

    def test_unknown_key(self) -> None:
        with self.assertRaises(ValueError):
            SnapshotView().sort("sideways")


class EventLogTests(unittest.TestCase):
    def test_append_filter_and_render(self) -> None:
        events = EventLog()
        bus = Vehicle.public(1, "Bus-101", 20, arrival=1).summary()
        car = Vehicle.private(2, arrival=2).summary()
        events.append(1, Action.ADMIT, bus)
        events.append(2, Action.ADMIT, car)
        events.append(3, Action.PROCESS, bus)

        self.assertEqual(len(events), 3)
        self.assertEqual([e.vehicle.id for e in events.filter(Action.ADMIT)], [1, 2])
        self.assertEqual(events[2].as_line(), "Time 3: PROCESS Bus - Bus-101")
        self.assertEqual(events[1].as_line(), "Time 2: ADMIT Private -")


if __name__ == "__main__":
    unittest.main()
