"""Age-group category rules: map a birth year to a named cohort."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional

from dateutil import parser

UNCATEGORIZED = "Uncategorized"

__all__ = [
    "UNCATEGORIZED",
    "birth_year",
    "category_for_dob",
    "clean_rule",
    "known_categories",
]


def birth_year(dob: Any) -> Optional[int]:
    if not dob:
        return None
    if isinstance(dob, (date, datetime)):
        return dob.year
    try:
        return parser.isoparse(str(dob)).year
    except (TypeError, ValueError, OverflowError):
        return None


def category_for_dob(dob: Any, rules: Optional[Iterable[Mapping[str, Any]]]) -> str:
    """Return the first rule whose ``start_year..end_year`` holds the birth year."""
    if not dob or not rules:
        return UNCATEGORIZED
    year = birth_year(dob)
    if year is None:
        return UNCATEGORIZED
    for rule in rules:
        if rule["start_year"] <= year <= rule["end_year"]:
            return rule["name"]
    return UNCATEGORIZED


def clean_rule(rule: Mapping[str, Any]) -> Dict[str, Any]:
    name = str(rule.get("name") or "")
    if not name.strip():
        raise ValueError("category rule requires a name")
    try:
        start = int(rule["start_year"])
        end = int(rule["end_year"])
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError(f"category rule '{name}' needs integer start_year/end_year") from exc
    if start > end:
        raise ValueError(f"category rule '{name}': start_year {start} is after end_year {end}")
    return {"name": name, "start_year": start, "end_year": end}


def known_categories(
    teams: Iterable[Mapping[str, Any]], rules: Iterable[Mapping[str, Any]]
) -> List[str]:
    """Sorted union of team categories and rule names."""
    names = {t.get("category") for t in teams} | {r.get("name") for r in rules}
    return sorted(n for n in names if n)
