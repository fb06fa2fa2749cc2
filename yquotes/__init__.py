"""Prometheus exporter for session-aware Yahoo Finance quotes."""

__version__ = "0.1.0"
