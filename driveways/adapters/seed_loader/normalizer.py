"""Permit field normalization — column names, whitespace, casing."""

from __future__ import annotations

import re


def normalize_column_name(name: str) -> str:
    """Normalize a column name to snake_case.

    - Removes BOM characters (\\ufeff)
    - Replaces runs of spaces / non-breaking spaces with one underscore
    - Lowercases and drops anything that isn't alphanumeric or underscore
    """
    name = name.replace("\ufeff", "").strip()
    name = re.sub(r"[\s\u00a0]+", "_", name)
    name = name.lower()
    return re.sub(r"[^\w]", "", name)


def clean_string(value: object) -> str | None:
    """Strip whitespace and return None for empty values."""
    if value is None:
        return None
    value = str(value).strip()
    return value if value else None


def normalize_address_text(value: object) -> str | None:
    """Upper-case and collapse internal whitespace, matching stored text."""
    value = clean_string(value)
    if value is None:
        return None
    return re.sub(r"\s+", " ", value).upper()
