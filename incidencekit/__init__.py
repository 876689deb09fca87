"""incidencekit: rebuild incidence objects from aggregated counts and export them as tables."""

from .core import (
    AmbiguousIntervalError,
    Groups,
    Incidence,
    IncidenceError,
    InvalidCountsError,
    InvalidDatesError,
    InvalidGrouping,
    InvalidIncidence,
    InvalidIntervalError,
    MissingGroupLabelsError,
    NoGroups,
    build_incidence,
)
from .convert import as_incidence, to_frame

__version__ = "0.1.0"

__all__ = [
    "Incidence",
    "NoGroups",
    "Groups",
    "build_incidence",
    "as_incidence",
    "to_frame",
    "IncidenceError",
    "InvalidCountsError",
    "InvalidDatesError",
    "InvalidIntervalError",
    "AmbiguousIntervalError",
    "MissingGroupLabelsError",
    "InvalidGrouping",
    "InvalidIncidence",
]
