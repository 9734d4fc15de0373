import json
import logging
from pathlib import Path
from typing import IO, Optional, Tuple

import pandas as pd

from .records import (
    MappingConfig,
    apply_mapping,
    ensure_canonical_columns,
    needs_mapping,
    suggest_mapping,
)

logger = logging.getLogger(__name__)


def read_csv(source: str | Path | IO[str] | IO[bytes]) -> pd.DataFrame:
    # Keep literal strings such as "NA" or "null"; blank cells arrive as "" and are cleaned during normalization.
    return pd.read_csv(source, keep_default_na=False)


def read_json_records(source: str | Path | IO[str] | IO[bytes]) -> pd.DataFrame:
    """Read a JSON list of record objects, as returned by the submissions endpoint."""

    if isinstance(source, (str, Path)):
        raw = json.loads(Path(source).read_text(encoding="utf-8"))
    else:
        raw = json.load(source)

    if not isinstance(raw, list) or not all(isinstance(item, dict) for item in raw):
        raise ValueError("Submissions JSON must be a list of objects")
    return pd.DataFrame(raw)


def read_source(source: str | Path | IO[str] | IO[bytes], suffix: Optional[str] = None) -> pd.DataFrame:
    if suffix is None:
        name = source if isinstance(source, (str, Path)) else getattr(source, "name", "")
        suffix = Path(str(name)).suffix
    suffix = suffix.lower()

    if suffix == ".csv":
        return read_csv(source)
    if suffix == ".json":
        return read_json_records(source)
    raise ValueError(f"Unsupported submissions file type: '{suffix or 'unknown'}'")


def normalize_dataframe(
    df: pd.DataFrame,
    mapping: Optional[MappingConfig] = None,
    infer_mapping: bool = True,
) -> Tuple[pd.DataFrame, Optional[MappingConfig], Optional[dict]]:
    suggested = None

    if mapping is None and (len(df.columns) == 0 or not needs_mapping(df)):
        return ensure_canonical_columns(df), None, suggested

    if mapping is None:
        if not infer_mapping:
            raise ValueError("Mapping required to normalize this dataset")
        suggested = suggest_mapping(df)
        mapping = MappingConfig.from_dict(suggested)

    normalized = apply_mapping(df, mapping)
    return normalized, mapping, suggested


def load_submissions(
    source: str | Path | IO[str] | IO[bytes],
    mapping: Optional[MappingConfig] = None,
    infer_mapping: bool = True,
    suffix: Optional[str] = None,
) -> Tuple[pd.DataFrame, Optional[MappingConfig], Optional[dict]]:
    raw_df = read_source(source, suffix=suffix)
    normalized, mapping_used, suggested = normalize_dataframe(raw_df, mapping=mapping, infer_mapping=infer_mapping)
    logger.info("Loaded %d submissions (%d columns in source)", len(normalized), len(raw_df.columns))
    return normalized, mapping_used, suggested


def export_dataframe(df: pd.DataFrame, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False)
    return path
