"""Shared helpers for chatstream tests."""
