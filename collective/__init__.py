"""Async client wrappers for Collective governance contracts."""

__version__ = "0.1.0"
