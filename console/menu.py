#!/usr/bin/env python3
"""
console/menu.py
===============
Text menu driving a :class:`~queue_engine.engine.QueueEngine`.

The driver reads choices through an injectable ``read`` callable and
writes through ``write`` so the whole loop can run under test without a
terminal.  Recoverable engine outcomes become one-line messages and the
loop continues; :class:`~queue_engine.engine.InternalInconsistencyError`
is deliberately left to propagate.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, Iterable, Optional

import config
from console.generator import VehicleGenerator
from console.reporter import Reporter
from queue_engine.engine import Outcome, QueueEngine
from queue_engine.snapshot import SortKey
from queue_engine.vehicle import Vehicle

log = logging.getLogger("menu")


class MenuChoice(Enum):
    ADD_PRIVATE = "1"
    ADD_PUBLIC = "2"
    ADD_EMERGENCY = "3"
    PROCESS_NEXT = "4"
    PROCESS_EMERGENCIES = "5"
    VIEW_QUEUE = "6"
    SEARCH = "7"
    SORT_BY_TIME = "8"
    SORT_BY_PRIORITY = "9"
    VIEW_SNAPSHOT = "10"
    REMOVE = "11"
    GENERATE_REPORT = "12"
    EXIT = "0"


_LABELS: Dict[MenuChoice, str] = {
    MenuChoice.ADD_PRIVATE: "Add Private Vehicle",
    MenuChoice.ADD_PUBLIC: "Add Public Transport",
    MenuChoice.ADD_EMERGENCY: "Add Emergency Vehicle",
    MenuChoice.PROCESS_NEXT: "Process Next Vehicle",
    MenuChoice.PROCESS_EMERGENCIES: "Process All Emergency Vehicles",
    MenuChoice.VIEW_QUEUE: "View Queue",
    MenuChoice.SEARCH: "Search Vehicle",
    MenuChoice.SORT_BY_TIME: "Sort Snapshot by Arrival Time",
    MenuChoice.SORT_BY_PRIORITY: "Sort Snapshot by Priority",
    MenuChoice.VIEW_SNAPSHOT: "View Snapshot",
    MenuChoice.REMOVE: "Remove Vehicle",
    MenuChoice.GENERATE_REPORT: "Generate Report",
    MenuChoice.EXIT: "Exit",
}

_OUTCOME_MESSAGES: Dict[Outcome, str] = {
    Outcome.FULL: "Queue is full! Vehicle rejected.",
    Outcome.DUPLICATE: "A vehicle with this ID is already queued.",
    Outcome.INVALID: "Vehicle has invalid attributes and was rejected.",
    Outcome.NOT_FOUND: "Vehicle not found!",
}


def prompt_capacity(read: Callable[[str], str], write: Callable[[str], None]) -> int:
    """Ask until the user enters a positive integer capacity."""
    while True:
        raw = read("Enter traffic queue capacity: ").strip()
        try:
            capacity = int(raw)
        except ValueError:
            write(f"'{raw}' is not a number.")
            continue
        if capacity > 0:
            return capacity
        write("Capacity must be positive.")


class MenuDriver:
    """Interactive loop around one engine.

    Parameters
    ----------
    engine : QueueEngine
        The engine to drive.
    generator : VehicleGenerator
        Source of demo vehicles and their identifiers.
    clock : callable
        The same clock the engine was built with; must offer ``peek()``.
    reporter : Reporter or None
        Report serialiser; a tick-unit reporter if omitted.
    report_path : str
        Destination of generated reports.
    read, write : callable
        Line input / output, ``input`` and ``print`` by default.
    format_stamp : callable
        Renders an arrival stamp for display.
    """

    def __init__(
        self,
        engine: QueueEngine,
        generator: VehicleGenerator,
        clock,
        reporter: Optional[Reporter] = None,
        report_path: str = config.REPORT_PATH,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
        format_stamp: Callable[[object], str] = str,
    ) -> None:
        self.engine = engine
        self.generator = generator
        self.clock = clock
        self.reporter = reporter or Reporter()
        self.report_path = report_path
        self.read = read
        self.write = write
        self.format_stamp = format_stamp
        self.started_at = clock.peek()

        self._handlers: Dict[MenuChoice, Callable[[], None]] = {
            MenuChoice.ADD_PRIVATE: lambda: self._admit(self.generator.private()),
            MenuChoice.ADD_PUBLIC: lambda: self._admit(self.generator.public()),
            MenuChoice.ADD_EMERGENCY: lambda: self._admit(self.generator.emergency()),
            MenuChoice.PROCESS_NEXT: self._process_next,
            MenuChoice.PROCESS_EMERGENCIES: self._process_emergencies,
            MenuChoice.VIEW_QUEUE: self._view_queue,
            MenuChoice.SEARCH: self._search,
            MenuChoice.SORT_BY_TIME: lambda: self._sort(SortKey.BY_ARRIVAL),
            MenuChoice.SORT_BY_PRIORITY: lambda: self._sort(SortKey.BY_PRIORITY),
            MenuChoice.VIEW_SNAPSHOT: self._view_snapshot,
            MenuChoice.REMOVE: self._remove,
            MenuChoice.GENERATE_REPORT: self._generate_report,
        }

    # ── Loop ──────────────────────────────────────────────────────────────────

    def run(self) -> None:
        """Show the menu until the user exits or input ends."""
        log.info("menu session started")
        while True:
            self._show_menu()
            try:
                raw = self.read("Choice: ").strip()
            except EOFError:
                self.write("")
                break
            if not self.handle(raw):
                break
        self._generate_report()
        log.info("menu session ended")

    def handle(self, raw: str) -> bool:
        """Dispatch one choice; returns False when the user chose exit."""
        try:
            choice = MenuChoice(raw)
        except ValueError:
            self.write("Invalid choice!")
            return True
        if choice is MenuChoice.EXIT:
            return False
        self._handlers[choice]()
        return True

    def _show_menu(self) -> None:
        self.write("\n==== Traffic Control Center ====")
        self.write(
            f"Queue: {self.engine.size()}/{self.engine.capacity}"
            f"  Emergency waiting: {len(self.engine.emergencies())}"
        )
        for choice in MenuChoice:
            self.write(f"{choice.value}. {_LABELS[choice]}")

    # ── Handlers ──────────────────────────────────────────────────────────────

    def _admit(self, vehicle: Vehicle) -> None:
        outcome = self.engine.admit(vehicle)
        if outcome is Outcome.OK:
            label = vehicle.route or vehicle.vehicle_type
            self.write(f"Vehicle {vehicle.id} ({vehicle.mode} {label}) added to queue.")
        else:
            self.write(_OUTCOME_MESSAGES[outcome])

    def _process_next(self) -> None:
        summary = self.engine.process_next()
        if summary is None:
            self.write("Queue is empty, nothing to process.")
            return
        self.write(f"Processed vehicle {summary.id}: {summary.mode} {summary.route}".rstrip())

    def _process_emergencies(self) -> None:
        released = self.engine.process_emergencies()
        if not released:
            self.write("No emergency vehicles waiting.")
            return
        for summary in released:
            self.write(f"Processed emergency vehicle {summary.id}: {summary.mode} {summary.route}".rstrip())

    def _view_queue(self) -> None:
        self._list(self.engine.iterate_queue(), "Queue is empty.")

    def _view_snapshot(self) -> None:
        self._list(self.engine.snapshot(), "Snapshot is empty.")

    def _list(self, vehicles: Iterable[Vehicle], empty_message: str) -> None:
        shown = 0
        for vehicle in vehicles:
            self.write(vehicle.describe(self.format_stamp(vehicle.arrival)))
            self.write("-" * 30)
            shown += 1
        if not shown:
            self.write(empty_message)

    def _search(self) -> None:
        vehicle_id = self._read_id("Enter vehicle ID to search: ")
        if vehicle_id is None:
            return
        vehicle = self.engine.lookup(vehicle_id)
        if vehicle is None:
            self.write(_OUTCOME_MESSAGES[Outcome.NOT_FOUND])
        else:
            self.write(vehicle.describe(self.format_stamp(vehicle.arrival)))

    def _remove(self) -> None:
        vehicle_id = self._read_id("Enter vehicle ID to remove: ")
        if vehicle_id is None:
            return
        outcome = self.engine.remove(vehicle_id)
        if outcome is Outcome.REMOVED:
            self.write(f"Vehicle {vehicle_id} removed from queue.")
        else:
            self.write(_OUTCOME_MESSAGES[outcome])

    def _sort(self, key: SortKey) -> None:
        ordered = self.engine.snapshot_sorted(key)
        what = "arrival time" if key is SortKey.BY_ARRIVAL else "priority"
        self.write(f"Snapshot sorted by {what}: {[v.id for v in ordered]}")

    def _generate_report(self) -> None:
        try:
            path = self.reporter.write(
                self.report_path,
                self.engine.events,
                started_at=self.started_at,
                finished_at=self.clock.peek(),
            )
        except OSError:
            log.exception("could not write report to %s", self.report_path)
            self.write(f"Could not write report to {self.report_path}.")
            return
        self.write(f"Report generated: {path}")

    def _read_id(self, prompt: str) -> Optional[int]:
        raw = self.read(prompt).strip()
        try:
            return int(raw)
        except ValueError:
            self.write(f"'{raw}' is not a valid vehicle ID.")
            return None
