"""
console — Interactive front end around the queue engine
=======================================================

Modules
-------
clock
    :class:`TickClock` and :class:`WallClock` stamp sources.
generator
    :class:`IdSequence` and :class:`VehicleGenerator` demo vehicles.
reporter
    :class:`Reporter` text report built from the event log.
menu
    :class:`MenuDriver` text menu and :func:`prompt_capacity`.
"""

from .clock import TickClock, WallClock
from .generator import IdSequence, VehicleGenerator
from .reporter import Reporter, events_frame
from .menu import MenuChoice, MenuDriver, prompt_capacity

__all__ = [
    "TickClock",
    "WallClock",
    "IdSequence",
    "VehicleGenerator",
    "Reporter",
    "events_frame",
    "MenuChoice",
    "MenuDriver",
    "prompt_capacity",
]
