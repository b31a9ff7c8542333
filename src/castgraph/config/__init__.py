"""
Configuration layer for castgraph.

Configuration is explicit (passed, never global) and immutable once built.
The application layer maps environment settings onto these contracts.
"""

from castgraph.config.settings import (
    IngestConfig,
    DiversityConfig,
    ExportConfig,
    CastGraphConfig,
)

__all__ = [
    "IngestConfig",
    "DiversityConfig",
    "ExportConfig",
    "CastGraphConfig",
]
