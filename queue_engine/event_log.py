"""
EventLog: append-only record of what the engine did during a session.

Entries are produced as side effects of admit / process / remove and are
the only source the reporter reads from; the live queue has already lost
processed vehicles.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, List

from .vehicle import VehicleSummary

log = logging.getLogger(__name__)


class Action(Enum):
    ADMIT = "ADMIT"
    PROCESS = "PROCESS"
    REMOVE = "REMOVE"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class LogEntry:
    """
    One event.

    Attributes:
        tick (Any): Clock stamp at which the event happened.
        action (Action): What happened.
        vehicle (VehicleSummary): The vehicle it happened to.
    """
    tick: Any
    action: Action
    vehicle: VehicleSummary

    def as_line(self) -> str:
        """Render as ``Time <t>: <ACTION> <mode> - <route>``."""
        return f"Time {self.tick}: {self.action} {self.vehicle.mode} - {self.vehicle.route}".rstrip()


class EventLog:
    """Unbounded, append-only sequence of :class:`LogEntry`."""

    def __init__(self):
        self._entries: List[LogEntry] = []

    def append(self, tick: Any, action: Action, vehicle: VehicleSummary) -> LogEntry:
        entry = LogEntry(tick=tick, action=action, vehicle=vehicle)
        self._entries.append(entry)
        log.info("%s tick=%s id=%s mode=%s route=%s",
                 action, tick, vehicle.id, vehicle.mode, vehicle.route or "-")
        return entry

    def filter(self, action: Action) -> List[LogEntry]:
        return [e for e in self._entries if e.action is action]

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> LogEntry:
        return self._entries[index]
