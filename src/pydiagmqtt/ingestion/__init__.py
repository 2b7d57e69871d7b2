"""Ingestion layer.

Adapters that turn raw telemetry API payloads into typed diagnostics,
plus the parsing and unit helpers they share.
"""

__all__: list[str] = []
