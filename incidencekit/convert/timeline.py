# incidencekit/convert/timeline.py
from __future__ import annotations

from typing import NamedTuple

import numpy as np
import pandas as pd

from ..core.grouping import Grouping
from .flatten import FlatCells, flatten_counts
from .groups import expand_groups
from .matrix import CountsMatrix


class SyntheticTimeline(NamedTuple):
    """One (date, group) pair per synthetic event; groups is None without groups."""

    dates: np.ndarray
    groups: pd.Categorical | None
    grouping: Grouping

    @property
    def n(self) -> int:
        return int(self.dates.size)


def expand_timeline(boundaries: np.ndarray, cells: FlatCells) -> np.ndarray:
    """
    Repeat each cell's bin boundary ``count`` times, in cell order.

    All events of a bin land on its boundary; no finer timing is made up.
    Cells with a zero count contribute nothing.
    """
    boundaries = np.asarray(boundaries)
    return np.repeat(boundaries[cells.rows], cells.counts)


def synthesize(matrix: CountsMatrix, boundaries: np.ndarray) -> SyntheticTimeline:
    cells = flatten_counts(matrix.values)
    dates = expand_timeline(boundaries, cells)
    groups, grouping = expand_groups(matrix, cells)
    return SyntheticTimeline(dates=dates, groups=groups, grouping=grouping)
