"""Observability helpers for chatstream."""

from .logging import StreamLogger

__all__ = ["StreamLogger"]
