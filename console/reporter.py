"""
console/reporter.py
===================
Turn an :class:`~queue_engine.event_log.EventLog` into a text report.

The report has a header (duration, total processed, counts by class,
total passengers of processed vehicles) followed by one chronological
line per event::

    Time 4: PROCESS Ambulance - Dispatch-North

Everything is derived from the event log; the live queue has already
lost the vehicles that were processed.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional

import pandas as pd

from queue_engine.event_log import Action, LogEntry

log = logging.getLogger("reporter")

_COLUMNS = ["tick", "action", "id", "mode", "category", "passengers", "route"]
_CATEGORIES = ["Emergency", "Public", "Private"]


def events_frame(entries: Iterable[LogEntry]) -> pd.DataFrame:
    """One row per log entry, in log order."""
    rows = [
        {
            "tick": e.tick,
            "action": e.action.value,
            "id": e.vehicle.id,
            "mode": str(e.vehicle.mode),
            "category": e.vehicle.category,
            "passengers": e.vehicle.passengers,
            "route": e.vehicle.route,
        }
        for e in entries
    ]
    return pd.DataFrame(rows, columns=_COLUMNS)


class Reporter:
    """Summarise and serialise a session's event log.

    Parameters
    ----------
    time_unit : str
        Label printed after the duration (``ticks`` or ``seconds``).
    """

    def __init__(self, time_unit: str = "ticks") -> None:
        self.time_unit = time_unit

    def summarize(
        self,
        entries: Iterable[LogEntry],
        started_at: Optional[Any] = None,
        finished_at: Optional[Any] = None,
    ) -> Dict[str, Any]:
        """Header figures as a plain dict.

        When *started_at* / *finished_at* are omitted the first / last
        event tick is used instead; an empty log has duration ``0``.
        """
        df = events_frame(entries)
        processed = df[df["action"] == Action.PROCESS.value]

        counts = processed.groupby("category").size().reindex(_CATEGORIES, fill_value=0)

        if started_at is None:
            started_at = df["tick"].iloc[0] if len(df) else 0
        if finished_at is None:
            finished_at = df["tick"].iloc[-1] if len(df) else started_at

        duration = finished_at - started_at
        if hasattr(duration, "item"):
            duration = duration.item()  # numpy scalar from the frame

        return {
            "duration": duration,
            "total_events": int(len(df)),
            "total_admitted": int((df["action"] == Action.ADMIT.value).sum()),
            "total_processed": int(len(processed)),
            "total_removed": int((df["action"] == Action.REMOVE.value).sum()),
            "counts_by_class": {cat: int(counts[cat]) for cat in _CATEGORIES},
            "total_passengers": int(processed["passengers"].sum()),
        }

    def render(
        self,
        entries: Iterable[LogEntry],
        started_at: Optional[Any] = None,
        finished_at: Optional[Any] = None,
    ) -> str:
        entries = list(entries)
        s = self.summarize(entries, started_at, finished_at)

        out = []
        out.append("=" * 50)
        out.append("         TRAFFIC CONTROL CENTER REPORT")
        out.append("=" * 50)
        out.append(f"Duration: {s['duration']} {self.time_unit}")
        out.append(f"Total vehicles admitted: {s['total_admitted']}")
        out.append(f"Total vehicles processed: {s['total_processed']}")
        out.append(f"Total vehicles removed: {s['total_removed']}")
        for cat in _CATEGORIES:
            out.append(f"  {cat}: {s['counts_by_class'][cat]}")
        out.append(f"Total passengers: {s['total_passengers']}")
        out.append("")
        out.append("--- Event log ---")
        out.extend(e.as_line() for e in entries)
        return "\n".join(out) + "\n"

    def write(
        self,
        path: str,
        entries: Iterable[LogEntry],
        started_at: Optional[Any] = None,
        finished_at: Optional[Any] = None,
    ) -> str:
        """Write the report to *path* and return the path.

        Raises
        ------
        OSError
            If the file cannot be written.
        """
        text = self.render(entries, started_at, finished_at)
        with open(path, "w", encoding="utf-8") as fh:
            fh.write(text)
        log.info("report written to %s", path)
        return path
