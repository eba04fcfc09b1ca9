"""Presentation CLI exports."""
from .timeline_command import TimelineCommand, build_use_case

__all__ = [
    "TimelineCommand",
    "build_use_case",
]
