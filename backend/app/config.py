from dataclasses import dataclass
from dynaconf import Dynaconf
from backend.app.constants import DEFAULTS

from castgraph.config.settings import (
    IngestConfig,
    DiversityConfig,
    ExportConfig,
    CastGraphConfig,
)

settings = Dynaconf(
    envvar_prefix="CASTGRAPH",
    load_dotenv=True,
    settings_files=[],
)
for _key, _value in DEFAULTS.items():
    if settings.get(_key) is None:
        settings.set(_key, _value)


def _parse_csv(value):
    if value is None:
        return None
    if isinstance(value, list):
        return value
    if isinstance(value, str):
        return [v.strip() for v in value.split(",") if v.strip()]
    return None


def _parse_pairs(value):
    pairs = []
    for item in _parse_csv(value) or []:
        if isinstance(item, (list, tuple)) and len(item) == 2:
            pairs.append((str(item[0]), str(item[1])))
            continue
        source, sep, target = str(item).partition("|")
        if sep and source.strip() and target.strip():
            pairs.append((source.strip(), target.strip()))
    return pairs


@dataclass(frozen=True)
class AppConfig:
    # ---------------- App ----------------
    app_name: str = settings.get("APP_NAME", "castgraph-backend")
    api_prefix: str = settings.get("API_PREFIX", "")

    # ---------------- Data Paths ----------------
    cast_file: str = settings.get("CAST_FILE", "data/raw/nextBechdel_castGender.txt")

    # ---------------- Runner ----------------
    separation_pairs: tuple = tuple(_parse_pairs(settings.get("SEPARATION_PAIRS", [])))

    # ---------------- Castgraph Policy ----------------
    castgraph: CastGraphConfig = CastGraphConfig(
        ingest=IngestConfig(
            subgroup_label=settings.get("SUBGROUP_LABEL", "Female"),
            collection_column=int(settings.get("COLLECTION_COLUMN", 0)),
            participant_column=int(settings.get("PARTICIPANT_COLUMN", 1)),
            subgroup_column=int(settings.get("SUBGROUP_COLUMN", 5)),
            delimiter=settings.get("DELIMITER", ","),
        ),
        diversity=DiversityConfig(
            threshold=float(settings.get("DIVERSITY_THRESHOLD", 0.5)),
        ),
        export=ExportConfig(
            tgf_path=settings.get("TGF_PATH", "data/processed/castgraph.tgf"),
            enabled=bool(settings.get("EXPORT_ENABLED", True)),
        ),
    )
