"""Telemetry and observability helpers.

This package emits deterministic stage events for voice resolution runs.
"""

from .logger import RunLogger

__all__ = ["RunLogger"]
