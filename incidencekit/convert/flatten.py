# incidencekit/convert/flatten.py
"""
Column-major flattening of a counts matrix.

Every consumer of a flattened matrix (dates, group labels) must go through
``flatten_counts`` so that position ``i`` always refers to the same cell.
"""
from __future__ import annotations

from typing import Iterator, NamedTuple

import numpy as np


class FlatCells(NamedTuple):
    """One entry per (row, col) cell, columns outer and rows inner."""

    rows: np.ndarray
    cols: np.ndarray
    counts: np.ndarray

    @property
    def total(self) -> int:
        return int(self.counts.sum())

    def cells(self) -> Iterator[tuple[int, int, int]]:
        for r, c, n in zip(self.rows, self.cols, self.counts):
            yield int(r), int(c), int(n)


def flatten_counts(values: np.ndarray) -> FlatCells:
    values = np.asarray(values)
    n_rows, n_cols = values.shape
    return FlatCells(
        rows=np.tile(np.arange(n_rows, dtype=np.int64), n_cols),
        cols=np.repeat(np.arange(n_cols, dtype=np.int64), n_rows),
        counts=values.ravel(order="F").astype(np.int64),
    )
