# incidencekit/core/dates.py
"""
Date handling shared by the builder and the conversion layer.

Two modes are supported:
- calendar: values are stored as ``datetime64[D]``
- ordinal: values are stored as ``int64`` (plain bin indices)

Arithmetic is always done on ``int64`` day numbers (see :func:`to_days`),
then mapped back with :func:`from_days`.
"""
from __future__ import annotations

import datetime as _dt
import numbers
from typing import Any

import numpy as np
import pandas as pd

from .exceptions import InvalidDatesError, InvalidIntervalError

WEEK_LENGTH = 7
WEEK_UNITS = frozenset({"week", "weeks"})


def check_interval(interval: Any) -> int:
    """
    Validate an explicit interval and return it as a positive int.

    Accepts ints, numpy integers, integral floats and the weekly unit
    ("week" / "weeks", case-insensitive), which maps to 7.
    """
    if isinstance(interval, str):
        if interval.strip().lower() in WEEK_UNITS:
            return WEEK_LENGTH
        raise InvalidIntervalError(
            f"`interval` must be a positive integer or 'week', got {interval!r}"
        )
    if isinstance(interval, (bool, np.bool_)) or not isinstance(interval, numbers.Real):
        raise InvalidIntervalError(
            f"`interval` must be a positive integer or 'week', got {interval!r}"
        )
    if not np.isfinite(interval) or interval != int(interval):
        raise InvalidIntervalError(f"`interval` must be a whole number, got {interval!r}")
    if interval < 1:
        raise InvalidIntervalError(f"`interval` must be positive, got {interval!r}")
    return int(interval)


def check_dates(dates: Any, *, name: str = "dates") -> np.ndarray:
    """
    Normalize ``dates`` to a 1D ``datetime64[D]`` or ``int64`` array.

    Accepted inputs: datetime64 arrays, ``datetime.date`` / ``pandas.Timestamp``
    sequences, ISO date strings (calendar mode) and integer or integral float
    sequences (ordinal mode). Missing values are rejected.
    """
    if isinstance(dates, (pd.Series, pd.Index)):
        arr = dates.to_numpy()
    else:
        arr = np.asarray(dates)

    if arr.ndim == 0:
        arr = arr.reshape(1)
    if arr.ndim != 1:
        raise InvalidDatesError(f"`{name}` must be 1D, got shape {arr.shape}")

    kind = arr.dtype.kind
    if kind == "M":
        out = arr.astype("datetime64[D]")
        if np.isnat(out).any():
            raise InvalidDatesError(f"`{name}` must not contain missing values.")
        return out

    if kind in "iu":
        return arr.astype(np.int64)

    if kind == "f":
        if not np.isfinite(arr).all():
            raise InvalidDatesError(f"`{name}` must not contain missing or non-finite values.")
        if not np.all(arr == np.floor(arr)):
            raise InvalidDatesError(f"`{name}` must be whole numbers in ordinal mode.")
        return arr.astype(np.int64)

    if kind in "OUS":
        return _parse_calendar_or_ordinal(arr, name)

    raise InvalidDatesError(f"`{name}` has unsupported dtype {arr.dtype}.")


def _parse_calendar_or_ordinal(arr: np.ndarray, name: str) -> np.ndarray:
    values = arr.tolist()
    if any(v is None or (isinstance(v, float) and np.isnan(v)) or v is pd.NaT for v in values):
        raise InvalidDatesError(f"`{name}` must not contain missing values.")

    # bool is a Number; never a valid date
    if any(isinstance(v, bool) for v in values):
        raise InvalidDatesError(f"`{name}` must not contain booleans.")

    numeric = [isinstance(v, numbers.Number) for v in values]
    if all(numeric):
        return check_dates(np.asarray(values, dtype=float), name=name)
    if any(numeric):
        raise InvalidDatesError(f"`{name}` mixes numbers and calendar dates.")

    for v in values:
        if not isinstance(v, (str, _dt.date, np.datetime64)):
            raise InvalidDatesError(f"`{name}` contains unsupported value {v!r}.")

    try:
        parsed = pd.to_datetime(values)
    except (TypeError, ValueError) as e:
        raise InvalidDatesError(f"`{name}` could not be parsed as dates: {e}") from e

    if parsed.tz is not None:
        parsed = parsed.tz_localize(None)
    return parsed.to_numpy(dtype="datetime64[ns]").astype("datetime64[D]")


def check_date_scalar(value: Any, *, calendar: bool, name: str) -> np.ndarray:
    """Normalize a single bound (``first_date`` / ``last_date``) in the given mode."""
    out = check_dates([value], name=name)
    if is_calendar(out) != calendar:
        mode = "calendar" if calendar else "ordinal"
        raise InvalidDatesError(f"`{name}` must be a {mode} value like the dates.")
    return out[0]


def check_boundaries(boundaries: Any, n_rows: int) -> np.ndarray:
    """Validate bin boundaries: one per counts row, strictly increasing."""
    out = check_dates(boundaries, name="dates")
    if out.size != n_rows:
        raise InvalidDatesError(
            f"`dates` must have one entry per counts row, got {out.size} vs {n_rows}"
        )
    if out.size > 1 and np.any(np.diff(to_days(out)) <= 0):
        raise InvalidDatesError("`dates` must be strictly increasing.")
    return out


def is_calendar(values: np.ndarray) -> bool:
    return np.asarray(values).dtype.kind == "M"


def to_days(values: np.ndarray) -> np.ndarray:
    values = np.asarray(values)
    if is_calendar(values):
        return values.astype("datetime64[D]").astype(np.int64)
    return values.astype(np.int64)


def from_days(days: np.ndarray, *, calendar: bool) -> np.ndarray:
    days = np.asarray(days, dtype=np.int64)
    if calendar:
        return days.astype("datetime64[D]")
    return days


def monday_floor(days: np.ndarray | int) -> np.ndarray | int:
    # day 0 (1970-01-01) is a Thursday, i.e. weekday 3 with Monday = 0
    return days - (days + 3) % WEEK_LENGTH


def isoweek_labels(days: np.ndarray) -> tuple[str, ...]:
    """ISO-week labels ("2024-W01") for calendar day numbers."""
    if len(days) == 0:
        return ()
    idx = pd.DatetimeIndex(np.asarray(days, dtype=np.int64).astype("datetime64[D]").astype("datetime64[ns]"))
    iso = idx.isocalendar()
    return tuple(f"{int(y)}-W{int(w):02d}" for y, w in zip(iso["year"], iso["week"]))
