# incidencekit/convert/matrix.py
"""
Normalization of every supported input kind into one CountsMatrix.

Supported kinds:
- numpy arrays / nested sequences (2D, or 1D for a single column)
- pandas.DataFrame (labels from ``.columns``)
- pandas.Series (single column)
- Incidence (counts, dates, interval and ISO-week mode are reused)
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, NamedTuple, Sequence

import numpy as np
import pandas as pd

from ..core.exceptions import InvalidCountsError, MissingGroupLabelsError
from ..core.incidence import Incidence


@dataclass(frozen=True, slots=True)
class CountsMatrix:
    """2D non-negative integer counts (rows = bins, columns = groups) + optional column labels."""

    values: np.ndarray = field(repr=False)
    columns: tuple[Any, ...] | None = None

    def __post_init__(self) -> None:
        values = _check_counts(self.values)
        columns = self.columns
        if columns is not None:
            columns = tuple(columns)
            if len(columns) != values.shape[1]:
                raise MissingGroupLabelsError(
                    f"Got {len(columns)} column labels for {values.shape[1]} columns."
                )
        values.flags.writeable = False
        object.__setattr__(self, "values", values)
        object.__setattr__(self, "columns", columns)

    @property
    def n_rows(self) -> int:
        return int(self.values.shape[0])

    @property
    def n_cols(self) -> int:
        return int(self.values.shape[1])


class ConversionInput(NamedTuple):
    matrix: CountsMatrix
    dates: Any
    interval: Any
    isoweeks: bool


def as_counts_matrix(x: Any, *, columns: Sequence[Any] | None = None) -> CountsMatrix:
    """Coerce a DataFrame, Series, array or nested sequence to a CountsMatrix."""
    if isinstance(x, CountsMatrix):
        return x if columns is None else CountsMatrix(values=x.values, columns=columns)

    if isinstance(x, pd.DataFrame):
        labels = None if _is_default_index(x.columns) else tuple(x.columns)
        values = x.to_numpy()
    elif isinstance(x, pd.Series):
        labels = None
        values = x.to_numpy().reshape(-1, 1)
    else:
        labels = None
        values = x

    return CountsMatrix(values=values, columns=labels if columns is None else columns)


def normalize_input(
    x: Any,
    *,
    dates: Any = None,
    interval: Any = None,
    isoweeks: bool | None = None,
    columns: Sequence[Any] | None = None,
) -> ConversionInput:
    """Single entry point turning any supported input into a ConversionInput."""
    if isinstance(x, Incidence):
        return ConversionInput(
            matrix=CountsMatrix(
                values=x.counts,
                columns=x.group_names if columns is None else columns,
            ),
            dates=x.dates if dates is None else dates,
            interval=x.interval if interval is None else interval,
            isoweeks=(x.isoweeks is not None) if isoweeks is None else bool(isoweeks),
        )

    return ConversionInput(
        matrix=as_counts_matrix(x, columns=columns),
        dates=dates,
        interval=interval,
        isoweeks=True if isoweeks is None else bool(isoweeks),
    )


def _is_default_index(index: pd.Index) -> bool:
    # DataFrame(ndarray) gets a RangeIndex 0..n-1: no user-given labels
    return isinstance(index, pd.RangeIndex) and index.start == 0 and index.step == 1


def _check_counts(raw: Any) -> np.ndarray:
    try:
        arr = np.asarray(raw)
    except (TypeError, ValueError) as e:
        raise InvalidCountsError(f"counts must be a rectangular numeric array: {e}") from e

    if arr.dtype.kind == "O":
        try:
            arr = arr.astype(float)
        except (TypeError, ValueError) as e:
            raise InvalidCountsError(f"counts must be numeric: {e}") from e
    if arr.dtype.kind not in "iuf":
        raise InvalidCountsError(f"counts must be numeric, got dtype {arr.dtype}")

    if arr.ndim == 0:
        arr = arr.reshape(1, 1)
    elif arr.ndim == 1:
        arr = arr.reshape(-1, 1)
    elif arr.ndim != 2:
        raise InvalidCountsError(f"counts must be 1D or 2D, got shape {arr.shape}")

    if arr.shape[0] == 0 or arr.shape[1] == 0:
        raise InvalidCountsError(f"counts must have at least one row and one column, got {arr.shape}")

    if arr.dtype.kind == "f":
        if not np.isfinite(arr).all():
            raise InvalidCountsError("counts must not contain missing or non-finite values.")
        if not np.all(arr == np.floor(arr)):
            raise InvalidCountsError("counts must be whole numbers.")
    if np.any(arr < 0):
        raise InvalidCountsError("counts must be non-negative.")

    return arr.astype(np.int64)
