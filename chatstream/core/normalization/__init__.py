"""Normalization of provider payloads into chatstream models."""

from .usage import normalize_usage

__all__ = ["normalize_usage"]
