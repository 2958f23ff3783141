"""Mindbridge staff tooling: admin System Settings and counselor Sessions."""

__version__ = "0.1.0"
