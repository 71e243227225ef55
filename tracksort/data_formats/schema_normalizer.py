"""
Schema normalization for seed records.

Seed files are hand-written or exported from other tools, so field names
vary in case and sometimes in spelling. The standard schema uses the
lowercase names 'title', 'artist', 'album', 'year' and 'length'.
"""

from __future__ import annotations

from typing import Any

# Alternative spellings accepted for standard fields
FIELD_ALIASES: dict[str, str] = {
    "duration": "length",
}


def normalize_record(record: dict[str, Any]) -> dict[str, Any]:
    """Normalize a seed record to the standard schema.

    Keys are lowercased and aliases are renamed. When both a field and its
    alias are present, the standard name wins. Unknown fields are kept.

    Examples:
        >>> normalize_record({"Title": "Go", "Duration": "3m38s"})
        {'title': 'Go', 'length': '3m38s'}
    """
    normalized: dict[str, Any] = {}
    aliased: dict[str, Any] = {}

    for key, value in record.items():
        name = str(key).strip().lower()
        if name in FIELD_ALIASES:
            aliased.setdefault(FIELD_ALIASES[name], value)
        else:
            normalized[name] = value

    for name, value in aliased.items():
        normalized.setdefault(name, value)

    return normalized
