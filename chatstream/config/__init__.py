"""Configuration for chatstream."""

from .constants import DONE_SENTINEL
from .settings import load_capture_defaults

__all__ = ["DONE_SENTINEL", "load_capture_defaults"]
