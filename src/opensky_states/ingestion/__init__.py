"""Ingestion layer.

This package contains the helpers that turn raw OpenSky JSON values into
the typed values carried by the domain models.
"""

__all__: list[str] = []
