"""Observability helpers for the asset server.

Request IDs + structlog contextvars for access logs, and Prometheus text
rendering of the process snapshot served at /metrics.
"""

from __future__ import annotations
