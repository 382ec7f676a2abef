"""Catechesis records API: parish-scoped access control, enrollment eligibility and attendance reconciliation."""

__version__ = "1.0.0"
