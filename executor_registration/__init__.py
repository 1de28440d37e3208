"""Executor registration tooling for the automation API."""

__version__ = "1.0.0"
