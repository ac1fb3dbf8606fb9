"""Core provider-agnostic logic."""
