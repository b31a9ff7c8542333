from __future__ import annotations

from dataclasses import dataclass, field

# ---------------------------------------------------------------------
# Cast file ingestion
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class IngestConfig:
    """
    Describes how cast records are laid out and which classification
    value marks a subgroup member.
    """

    subgroup_label: str = "Female"
    collection_column: int = 0
    participant_column: int = 1
    subgroup_column: int = 5
    delimiter: str = ","


# ---------------------------------------------------------------------
# Diversity test
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class DiversityConfig:
    """
    Default pass threshold, as a ratio in [0, 1], used when a caller
    does not supply one.
    """

    threshold: float = 0.5


# ---------------------------------------------------------------------
# Graph export
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class ExportConfig:
    tgf_path: str = "data/processed/castgraph.tgf"
    enabled: bool = True


# ---------------------------------------------------------------------
# Root configuration object
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class CastGraphConfig:
    """
    Root configuration object for castgraph.

    Constructed once by the application layer and passed explicitly
    to the loader, the service and the runner.
    """

    ingest: IngestConfig = field(default_factory=IngestConfig)
    diversity: DiversityConfig = field(default_factory=DiversityConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
