#!/usr/bin/env python3
"""
config.py
=========
Application-wide configuration constants.

Values can be overridden on the command line (see :mod:`main`).
This module is a thin, import-safe leaf — it never imports from
other project packages.
"""

# ── Engine defaults ──────────────────────────────────────────────────────────
DEFAULT_CAPACITY: int = 10
DEFAULT_CLOCK: str = "tick"          # "tick" | "wall"

# ── Random vehicle generator ─────────────────────────────────────────────────
DEFAULT_SEED = None
PRIVATE_TYPES = ("Car", "Truck", "Motorcycle")
PUBLIC_ROUTES = ("Bus-101", "Bus-202", "Tram-A1", "Tram-B2")
PUBLIC_PASSENGERS_MIN: int = 10
PUBLIC_PASSENGERS_MAX: int = 59
EMERGENCY_ROUTES = ("Dispatch-North", "Dispatch-South", "Dispatch-East", "Dispatch-West")
EMERGENCY_CREW_MIN: int = 1
EMERGENCY_CREW_MAX: int = 4

# ── Report ───────────────────────────────────────────────────────────────────
REPORT_PATH: str = "traffic_report.txt"

# ── Logging ──────────────────────────────────────────────────────────────────
LOG_FILE: str = "traffic_queue.log"
LOG_MAX_BYTES: int = 1_000_000
LOG_BACKUP_COUNT: int = 2
ENGINE_DEBUG_LOG_FILE: str = "engine_debug.log"
ENGINE_DEBUG_LOG_MAX_BYTES: int = 5_000_000
