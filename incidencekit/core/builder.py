# incidencekit/core/builder.py
"""
Canonical incidence builder: bins individual event dates into an Incidence.

This is the only place where counts are computed from events. The conversion
layer (``incidencekit.convert``) feeds it synthetic events.
"""
from __future__ import annotations

from typing import Any, Sequence

import numpy as np
import pandas as pd

from ..utils.logging import get_logger
from .dates import (
    WEEK_LENGTH,
    check_date_scalar,
    check_dates,
    check_interval,
    from_days,
    is_calendar,
    isoweek_labels,
    monday_floor,
    to_days,
)
from .exceptions import InvalidDatesError, InvalidGrouping
from .grouping import Groups, NoGroups
from .incidence import Incidence

logger = get_logger(__name__)


def build_incidence(
    dates: Any,
    interval: int | str = 1,
    groups: Sequence[Any] | pd.Categorical | None = None,
    *,
    standard: bool = True,
    first_date: Any = None,
    last_date: Any = None,
) -> Incidence:
    """
    Compute incidence from individual event dates.

    Parameters
    ----------
    dates:
        One date per event (calendar or ordinal).
    interval:
        Bin width; a positive integer or ``"week"``.
    groups:
        Optional group label per event. A ``pandas.Categorical`` keeps its
        categories (and their order), including categories with no event.
        Other sequences use first-appearance order.
    standard:
        Calendar mode only: for weekly multiples, start bins on ISO-week
        Mondays and attach ISO-week labels.
    first_date, last_date:
        Bounds of the binned range. Events outside are dropped.
    """
    step = check_interval(interval)
    values = check_dates(dates)
    calendar = is_calendar(values)
    days = to_days(values)

    # np.asarray([]) is float64, i.e. ordinal; follow the bound's mode instead
    if days.size == 0 and first_date is not None:
        calendar = is_calendar(check_dates([first_date], name="first_date"))

    if first_date is not None:
        first = int(to_days(check_date_scalar(first_date, calendar=calendar, name="first_date")))
    elif days.size:
        first = int(days.min())
    else:
        raise InvalidDatesError("At least one date or `first_date` is required.")

    use_isoweeks = calendar and standard and step % WEEK_LENGTH == 0
    if use_isoweeks:
        first = int(monday_floor(first))

    if last_date is not None:
        last = int(to_days(check_date_scalar(last_date, calendar=calendar, name="last_date")))
    elif days.size:
        last = int(days.max())
    else:
        last = first
    if last < first:
        raise InvalidDatesError("`last_date` must not be before `first_date`.")

    labels, codes = _encode_groups(groups, days.size)

    keep = (days >= first) & (days <= last)
    n_dropped = int(days.size - keep.sum())
    if n_dropped:
        logger.warning(
            "%d event(s) outside [%s, %s] dropped",
            n_dropped,
            from_days(np.array([first]), calendar=calendar)[0],
            from_days(np.array([last]), calendar=calendar)[0],
        )
        days = days[keep]
        if codes is not None:
            codes = codes[keep]

    n_bins = (last - first) // step + 1
    n_cols = 1 if labels is None else len(labels)
    bins = (days - first) // step
    flat = bins * n_cols + (0 if codes is None else codes)
    counts = np.bincount(flat, minlength=n_bins * n_cols).reshape(n_bins, n_cols)

    bin_days = first + np.arange(n_bins, dtype=np.int64) * step
    logger.debug(
        "built incidence: %d bin(s), interval=%d, %d group(s), %d event(s)",
        n_bins, step, n_cols, int(counts.sum()),
    )

    return Incidence(
        dates=from_days(bin_days, calendar=calendar),
        counts=counts,
        interval=step,
        grouping=NoGroups() if labels is None else Groups(labels=labels),
        isoweeks=isoweek_labels(bin_days) if use_isoweeks else None,
    )


def _encode_groups(groups: Any, n_events: int) -> tuple[tuple[str, ...] | None, np.ndarray | None]:
    """Return (labels, per-event integer codes) or (None, None)."""
    if groups is None:
        return None, None

    if isinstance(groups, pd.Categorical):
        cat = groups
    else:
        raw = pd.Series(np.asarray(groups, dtype=object).ravel())
        if raw.isna().any():
            raise InvalidGrouping("`groups` must not contain missing values.")
        raw = raw.astype(str)
        cat = pd.Categorical(raw, categories=pd.unique(raw))

    if len(cat) != n_events:
        raise InvalidGrouping(
            f"`groups` must have one entry per date, got {len(cat)} vs {n_events}"
        )
    if (cat.codes < 0).any():
        raise InvalidGrouping("`groups` must not contain missing values.")

    labels = tuple(str(c) for c in cat.categories)
    if not labels:
        # no events and no declared categories
        return None, None
    return labels, cat.codes.astype(np.int64)
