"""Trace logging helpers for the parser."""

from shunt.trace.event import ParseEventKind, new_event
from shunt.trace.logger import TraceLogger

__all__ = ["ParseEventKind", "TraceLogger", "new_event"]
