# incidencekit/core/incidence.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from .dates import is_calendar, to_days
from .exceptions import InvalidIncidence
from .grouping import Groups, Grouping, NoGroups

if TYPE_CHECKING:
    import pandas as pd


@dataclass(frozen=True, slots=True, eq=False)
class Incidence:
    """
    Immutable incidence object: event counts per time bin, optionally per group.

    - dates: lower (inclusive) boundary of each bin, ``datetime64[D]`` or ``int64``
    - counts: 2D ``int64`` array, rows = bins, columns = groups
    - interval: bin width (days in calendar mode)
    - grouping: NoGroups (one column) or Groups (one label per column)
    - isoweeks: ISO-week label per bin, only for weekly calendar incidence
    """

    dates: np.ndarray = field(repr=False)
    counts: np.ndarray = field(repr=False)
    interval: int = 1
    grouping: Grouping = field(default_factory=NoGroups)
    isoweeks: tuple[str, ...] | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        d = np.asarray(self.dates)
        c = np.asarray(self.counts)

        if d.ndim != 1:
            raise InvalidIncidence(f"`dates` must be 1D, got shape {d.shape}")
        if d.dtype.kind not in "Miu":
            raise InvalidIncidence(f"`dates` must be datetime64 or integer, got {d.dtype}")
        if c.ndim == 1:
            c = c.reshape(-1, 1)
        if c.ndim != 2:
            raise InvalidIncidence(f"`counts` must be 2D, got shape {c.shape}")
        if c.shape[0] != d.size:
            raise InvalidIncidence(
                f"`counts` must have one row per date, got {c.shape[0]} vs {d.size}"
            )
        if c.size and (c.dtype.kind not in "iu" or np.any(c < 0)):
            raise InvalidIncidence("`counts` must contain non-negative integers.")

        if isinstance(self.interval, bool) or not isinstance(self.interval, (int, np.integer)):
            raise InvalidIncidence("`interval` must be an integer.")
        if self.interval < 1:
            raise InvalidIncidence("`interval` must be positive.")

        if not isinstance(self.grouping, (NoGroups, Groups)):
            raise InvalidIncidence("`grouping` must be NoGroups or Groups.")
        if c.shape[1] != self.grouping.n:
            raise InvalidIncidence(
                f"`counts` has {c.shape[1]} columns but grouping has {self.grouping.n}"
            )

        isoweeks = self.isoweeks
        if isoweeks is not None:
            isoweeks = tuple(isoweeks)
            if len(isoweeks) != d.size:
                raise InvalidIncidence("`isoweeks` must have one label per date.")
            if not is_calendar(d):
                raise InvalidIncidence("`isoweeks` requires calendar dates.")

        d = d.astype("datetime64[D]") if is_calendar(d) else d.astype(np.int64)
        c = c.astype(np.int64)
        d.flags.writeable = False
        c.flags.writeable = False

        object.__setattr__(self, "dates", d)
        object.__setattr__(self, "counts", c)
        object.__setattr__(self, "interval", int(self.interval))
        object.__setattr__(self, "isoweeks", isoweeks)

    @property
    def n(self) -> int:
        return int(self.counts.sum())

    @property
    def n_bins(self) -> int:
        return int(self.dates.size)

    @property
    def n_groups(self) -> int:
        return self.grouping.n

    @property
    def group_names(self) -> tuple[str, ...] | None:
        return self.grouping.labels

    @property
    def is_calendar(self) -> bool:
        return is_calendar(self.dates)

    @property
    def timespan(self) -> int:
        """Number of days (or units) covered from the first bin to the end of the last."""
        if self.n_bins == 0:
            return 0
        days = to_days(self.dates)
        return int(days[-1] - days[0] + self.interval)

    def equals(self, other: object) -> bool:
        if not isinstance(other, Incidence):
            return False
        return (
            self.interval == other.interval
            and self.grouping == other.grouping
            and self.isoweeks == other.isoweeks
            and self.dates.dtype == other.dates.dtype
            and np.array_equal(self.dates, other.dates)
            and np.array_equal(self.counts, other.counts)
        )

    def to_frame(self, *, long: bool = False) -> "pd.DataFrame":
        from ..convert.table import to_frame

        return to_frame(self, long=long)
