"""Telemetry for command runs."""

from .logger import RunLogger

__all__ = ["RunLogger"]
