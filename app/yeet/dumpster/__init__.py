"""Dumpster engine, collision handling, models and batch operator."""

from yeet.dumpster.collision import is_occupied, resolve_filename
from yeet.dumpster.engine import Dumpster
from yeet.dumpster.models import DumpsterActionResult, DumpsterEntry, Verb
from yeet.dumpster.operator import DumpsterOperator

__all__ = [
    "Dumpster",
    "DumpsterActionResult",
    "DumpsterEntry",
    "DumpsterOperator",
    "Verb",
    "is_occupied",
    "resolve_filename",
]
