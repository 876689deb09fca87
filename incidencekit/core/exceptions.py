# incidencekit/core/exceptions.py
from __future__ import annotations


class IncidenceError(Exception):
    """Base error for all incidencekit exceptions."""


# ---- Input validation errors ----
class InvalidCountsError(IncidenceError, TypeError):
    """Raised when a counts matrix is not a rectangular array of non-negative integers."""


class InvalidDatesError(IncidenceError, ValueError):
    """Raised when bin boundaries / event dates cannot be used."""


# ---- Interval errors ----
class InvalidIntervalError(IncidenceError, ValueError):
    """Raised when an explicit interval is not a positive integer or 'week'."""


class AmbiguousIntervalError(IncidenceError, ValueError):
    """Raised when the interval cannot be inferred (fewer than two dates)."""


# ---- Group errors ----
class MissingGroupLabelsError(IncidenceError, ValueError):
    """Raised when a multi-column matrix has missing or duplicated column labels."""


class InvalidGrouping(IncidenceError, ValueError):
    """Raised when a Groups label set is empty, duplicated or not made of strings."""


# ---- Construction errors ----
class InvalidIncidence(IncidenceError):
    """Raised when an Incidence is constructed with inconsistent fields."""
