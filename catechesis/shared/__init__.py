"""Shared: logging setup and small cross-layer utilities."""
