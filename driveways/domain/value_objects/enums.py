"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class SearchDimension(str, Enum):
    """Record field a search query is matched against."""

    ADDRESS = "address"
    STREET_NAME = "street_name"


class SearchState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    SEARCHING = "searching"
    ERROR = "error"
