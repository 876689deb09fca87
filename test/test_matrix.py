# test/test_matrix.py
import numpy as np
import pandas as pd
import pytest

from incidencekit.convert.matrix import CountsMatrix, as_counts_matrix, normalize_input
from incidencekit.core import (
    Groups,
    Incidence,
    InvalidCountsError,
    MissingGroupLabelsError,
)


def test_dataframe_columns_become_labels():
    m = as_counts_matrix(pd.DataFrame({"f": [2, 1], "m": [0, 3]}))
    assert m.columns == ("f", "m")
    assert m.values.tolist() == [[2, 0], [1, 3]]
    assert m.n_rows == 2 and m.n_cols == 2


def test_dataframe_default_range_index_is_unlabeled():
    m = as_counts_matrix(pd.DataFrame(np.array([[1, 2], [3, 4]])))
    assert m.columns is None


def test_series_and_vectors_become_one_column():
    assert as_counts_matrix(pd.Series([1, 2, 3])).values.shape == (3, 1)
    assert as_counts_matrix([1, 2, 3]).values.shape == (3, 1)
    assert as_counts_matrix(4).values.tolist() == [[4]]


def test_explicit_columns_for_arrays():
    m = as_counts_matrix(np.array([[1, 2]]), columns=["a", "b"])
    assert m.columns == ("a", "b")
    with pytest.raises(MissingGroupLabelsError):
        as_counts_matrix(np.array([[1, 2]]), columns=["a"])


def test_integral_floats_accepted():
    m = as_counts_matrix(np.array([[1.0, 2.0]]))
    assert m.values.dtype == np.int64
    assert m.values.tolist() == [[1, 2]]


@pytest.mark.parametrize(
    "bad",
    [
        [[1, -1]],
        [[1.5, 2.0]],
        [[np.nan, 1.0]],
        [["a", "b"]],
        [[1, 2], [3]],
        np.zeros((2, 2, 2)),
        np.zeros((0, 2)),
        [[True, False]],
        pd.DataFrame({"a": [1, None]}, dtype="object"),
    ],
)
def test_invalid_counts_rejected(bad):
    with pytest.raises(InvalidCountsError):
        as_counts_matrix(bad)


def test_input_is_not_mutated_or_aliased():
    arr = np.array([[1, 2], [3, 4]])
    m = CountsMatrix(values=arr, columns=("a", "b"))
    arr[0, 0] = 100
    assert m.values[0, 0] == 1
    assert arr.flags.writeable


def test_normalize_input_from_incidence_reuses_fields():
    d = np.array(["2024-01-01", "2024-01-08"], dtype="datetime64[D]")
    inc = Incidence(
        dates=d,
        counts=np.array([[1, 0], [2, 5]]),
        interval=7,
        grouping=Groups(labels=("x", "y")),
        isoweeks=("2024-W01", "2024-W02"),
    )
    src = normalize_input(inc)

    assert src.matrix.columns == ("x", "y")
    assert np.array_equal(src.dates, d)
    assert src.interval == 7
    assert src.isoweeks is True

    assert normalize_input(inc, isoweeks=False).isoweeks is False


def test_normalize_input_defaults_isoweeks_for_matrices():
    assert normalize_input([[1]]).isoweeks is True
    assert normalize_input([[1]], isoweeks=False).isoweeks is False
