"""Load governance records from files.

Supported formats:
- YAML (``.yaml``/``.yml``) and JSON (``.json``): a single record (mapping)
  or a list of records.
- CSV (``.csv``): one record per row, header row holding field names.

Loaded values are normalised to what the host workflow would send: YAML dates
become ``YYYY-MM-DD`` strings and blank CSV cells become ``None``. Nothing else
is coerced; type problems are left for the validators to report.
"""

from __future__ import annotations

import json
import logging
import math
from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd
import yaml

from contract_governance.core.enums import RecordType
from contract_governance.core.schemas import get_text_fields

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".yaml", ".yml", ".json", ".csv")


def _normalize_value(value: Any) -> Any:
    if isinstance(value, float) and math.isnan(value):
        return None
    if isinstance(value, date) and not isinstance(value, datetime):
        return value.isoformat()
    return value


def normalize_record(record: Any) -> Any:
    """Normalise the values of one record; non-mappings pass through unchanged."""
    if not isinstance(record, dict):
        return record
    return {str(key): _normalize_value(value) for key, value in record.items()}


def _read_csv(path: Path, record_type: Optional[RecordType]) -> List[Dict[str, Any]]:
    dtype = None
    if record_type is not None:
        dtype = {field: str for field in get_text_fields(record_type)}
    try:
        df = pd.read_csv(path, encoding="utf-8-sig", dtype=dtype)
    except pd.errors.EmptyDataError:
        return []
    except (OSError, pd.errors.ParserError) as e:
        raise ValueError(f"Failed to read CSV file {path}: {e}") from e
    return df.to_dict(orient="records")


def _read_document(path: Path, suffix: str) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            if suffix == ".json":
                return json.load(f)
            return yaml.safe_load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Failed to read JSON file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to read YAML file {path}: {e}") from e


def load_records(path: Path, record_type: Optional[RecordType] = None) -> List[Any]:
    """Load records from a YAML, JSON or CSV file.

    Args:
        path: Record file to read.
        record_type: Type of the records. For CSV files, keeps the type's text
            fields as strings so identifiers such as ``"001"`` are not parsed
            as numbers.

    Returns:
        List of records (normally mappings) in file order.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the format is unsupported, the file cannot be parsed,
            or the document is neither a record nor a list of records.

    Examples:
        >>> records = load_records(Path("budget.yaml"), RecordType.BUDGET)
        >>> records[0]["period"]
        'Q1'
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Record file not found: {path}")

    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ValueError(
            f"Unsupported record file format: {path.name}. "
            f"Supported: {', '.join(SUPPORTED_SUFFIXES)}"
        )

    if suffix == ".csv":
        raw: Any = _read_csv(path, record_type)
    else:
        raw = _read_document(path, suffix)

    if raw is None:
        raw = []
    elif isinstance(raw, dict):
        raw = [raw]
    elif not isinstance(raw, list):
        raise ValueError(
            f"Expected a record or a list of records in {path}, got {type(raw).__name__}"
        )

    records = [normalize_record(r) for r in raw]
    logger.debug("Loaded %d records from %s", len(records), path)
    return records


__all__ = ["load_records", "normalize_record", "SUPPORTED_SUFFIXES"]
