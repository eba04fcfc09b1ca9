"""Presentation layer - command line interface."""
from .cli import TimelineCommand

__all__ = ["TimelineCommand"]
