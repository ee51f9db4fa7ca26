"""Filtered and sorted display list derived from the cached projects.

All functions here are pure: they never mutate their input and return a new
list, so they can be recomputed whenever the search term, status filter, sort
key or cached records change.
"""
import unicodedata
from datetime import datetime, timezone
from typing import Iterable, List, Sequence

STATUS_ALL = "all"
STATUS_FILTERS = (STATUS_ALL, "active", "completed", "on-hold")

SORT_DATE_DESC = "date-desc"
SORT_DATE_ASC = "date-asc"
SORT_NAME_ASC = "name-asc"
SORT_NAME_DESC = "name-desc"
SORT_KEYS = (SORT_DATE_DESC, SORT_DATE_ASC, SORT_NAME_ASC, SORT_NAME_DESC)


def created_timestamp(record) -> float:
    """Seconds since the epoch of record.created_at; 0.0 when missing or invalid"""
    value = getattr(record, "created_at", None)
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return 0.0
    if not isinstance(value, datetime):
        return 0.0
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.timestamp()


def collation_key(text: str) -> tuple:
    """
    Sort key approximating locale-aware collation.

    Accents and case are ignored for the primary comparison ("Été" sorts with
    "ete"); the case-folded and raw strings break ties so distinct names never
    compare equal.
    """
    text = text or ""
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()
    return (base, text.casefold(), text)


def matches_search(record, search_term: str) -> bool:
    if not search_term:
        return True
    needle = search_term.casefold()
    name = (record.name or "").casefold()
    description = (record.description or "").casefold()
    return needle in name or needle in description


def filter_projects(records: Iterable, search_term: str = "", status_filter: str = STATUS_ALL) -> List:
    if status_filter not in STATUS_FILTERS:
        raise ValueError(f"Unknown status filter: {status_filter!r}")

    return [
        record
        for record in records
        if matches_search(record, search_term)
        and (status_filter == STATUS_ALL or record.status == status_filter)
    ]


def sort_projects(records: Sequence, sort_by: str = SORT_DATE_DESC) -> List:
    if sort_by == SORT_DATE_DESC:
        return sorted(records, key=created_timestamp, reverse=True)
    if sort_by == SORT_DATE_ASC:
        return sorted(records, key=created_timestamp)
    if sort_by == SORT_NAME_ASC:
        return sorted(records, key=lambda record: collation_key(record.name))
    if sort_by == SORT_NAME_DESC:
        return sorted(records, key=lambda record: collation_key(record.name), reverse=True)
    raise ValueError(f"Unknown sort key: {sort_by!r}")


def project_view(
    records: Iterable,
    search_term: str = "",
    status_filter: str = STATUS_ALL,
    sort_by: str = SORT_DATE_DESC,
) -> List:
    """Filter then sort"""
    return sort_projects(filter_projects(records, search_term, status_filter), sort_by)
