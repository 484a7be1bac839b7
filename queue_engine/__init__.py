"""
queue_engine — Vehicle queue core
=================================

Bounded FIFO admission with emergency preemption, O(1) lookup by id and
sortable snapshot views, all kept mutually consistent.

Modules
-------
vehicle
    :class:`Vehicle` record, :class:`Mode` and :class:`Priority` enums.
identity_index
    :class:`IdentityIndex` id → vehicle map.
admission_queue
    :class:`AdmissionQueue` insertion-ordered linked sequence.
snapshot
    :class:`SnapshotView` and :class:`SortKey`.
event_log
    :class:`EventLog` append-only ADMIT / PROCESS / REMOVE record.
engine
    :class:`QueueEngine` composing all of the above.
"""

from .vehicle import EMERGENCY_MODES, Mode, Priority, Vehicle, VehicleSummary
from .identity_index import IdentityIndex
from .admission_queue import AdmissionQueue
from .snapshot import SnapshotView, SortKey
from .event_log import Action, EventLog, LogEntry
from .engine import InternalInconsistencyError, Outcome, QueueEngine

__all__ = [
    "EMERGENCY_MODES",
    "Mode",
    "Priority",
    "Vehicle",
    "VehicleSummary",
    "IdentityIndex",
    "AdmissionQueue",
    "SnapshotView",
    "SortKey",
    "Action",
    "EventLog",
    "LogEntry",
    "InternalInconsistencyError",
    "Outcome",
    "QueueEngine",
]
