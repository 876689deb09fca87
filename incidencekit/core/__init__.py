# incidencekit/core/__init__.py
"""
Core domain objects for incidencekit.

This module defines the incidence data model:
- Incidence: counts per time bin (and per group)
- NoGroups / Groups: the optional group dimension
- build_incidence: bins individual event dates into an Incidence

The core layer knows nothing about counts matrices or tables.
"""

from .builder import build_incidence
from .dates import check_dates, check_interval, isoweek_labels
from .grouping import Groups, Grouping, NoGroups
from .incidence import Incidence
from .exceptions import (
    IncidenceError,
    InvalidCountsError,
    InvalidDatesError,
    InvalidIntervalError,
    AmbiguousIntervalError,
    MissingGroupLabelsError,
    InvalidGrouping,
    InvalidIncidence,
)


__all__ = [
    # domain objects
    "Incidence",
    "Grouping",
    "NoGroups",
    "Groups",

    # construction
    "build_incidence",
    "check_dates",
    "check_interval",
    "isoweek_labels",

    # exceptions
    "IncidenceError",
    "InvalidCountsError",
    "InvalidDatesError",
    "InvalidIntervalError",
    "AmbiguousIntervalError",
    "MissingGroupLabelsError",
    "InvalidGrouping",
    "InvalidIncidence",
]
