from __future__ import annotations
from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from decimal import Decimal
import json
import numpy as np
import pandas as pd
import uuid

_JSON_SCALARS = (int, float, bool, str, type(None))


def _clean_scalar(v):
    try:
        if pd.isna(v):
            return None
    except (TypeError, ValueError):
        pass

    if isinstance(v, np.integer):
        return int(v)
    if isinstance(v, np.floating):
        if np.isnan(v) or np.isinf(v):
            return None
        return float(v)
    if isinstance(v, np.bool_):
        return bool(v)
    if isinstance(v, Decimal):
        return float(v)

    if isinstance(v, pd.Timestamp):
        return v.to_pydatetime().isoformat()
    if isinstance(v, (datetime, date)):
        return v.isoformat()
    if isinstance(v, uuid.UUID):
        return str(v)

    if isinstance(v, _JSON_SCALARS):
        return v
    return str(v)


def clean_jsonable(obj):
    """Recursively convert ``obj`` to JSON-safe primitives for Supabase rows."""
    if is_dataclass(obj) and not isinstance(obj, type):
        return clean_jsonable(asdict(obj))
    if isinstance(obj, pd.DataFrame):
        return [clean_jsonable(r) for r in obj.to_dict(orient="records")]
    if isinstance(obj, pd.Series):
        return {str(k): clean_jsonable(v) for k, v in obj.to_dict().items()}
    if isinstance(obj, dict):
        return {str(k): clean_jsonable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple, set, frozenset)):
        items = sorted(obj, key=str) if isinstance(obj, (set, frozenset)) else obj
        return [clean_jsonable(v) for v in items]
    return _clean_scalar(obj)


def assert_jsonable(obj):
    try:
        json.dumps(obj, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise RuntimeError(f"Payload not JSON-serializable: {e}\nFirst part: {str(obj)[:500]}") from e
