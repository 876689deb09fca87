# test/test_timeline.py
import numpy as np
import pandas as pd
import pytest

from incidencekit.convert import (
    as_counts_matrix,
    expand_groups,
    expand_timeline,
    flatten_counts,
    resolve_grouping,
    synthesize,
)
from incidencekit.core import Groups, NoGroups, MissingGroupLabelsError


def test_flatten_is_column_major():
    cells = flatten_counts(np.array([[2, 1], [0, 3]]))
    assert cells.rows.tolist() == [0, 1, 0, 1]
    assert cells.cols.tolist() == [0, 0, 1, 1]
    assert cells.counts.tolist() == [2, 0, 1, 3]
    assert cells.total == 6
    assert list(cells.cells()) == [(0, 0, 2), (1, 0, 0), (0, 1, 1), (1, 1, 3)]


def test_expand_timeline_repeats_boundaries():
    cells = flatten_counts(np.array([[2], [0], [1]]))
    out = expand_timeline(np.array([10, 20, 30]), cells)
    assert out.tolist() == [10, 10, 30]


def test_expand_timeline_keeps_calendar_dtype():
    d = np.array(["2024-01-01", "2024-01-02"], dtype="datetime64[D]")
    out = expand_timeline(d, flatten_counts(np.array([[1], [2]])))
    assert out.dtype == d.dtype
    assert out.size == 3


def test_expand_timeline_all_zero_is_empty():
    out = expand_timeline(np.array([1, 2]), flatten_counts(np.zeros((2, 2), dtype=int)))
    assert out.size == 0


def test_resolve_grouping():
    assert resolve_grouping(as_counts_matrix([[1], [2]])) == NoGroups()
    assert resolve_grouping(as_counts_matrix(pd.DataFrame({"only": [1]}))) == NoGroups()
    assert resolve_grouping(as_counts_matrix(pd.DataFrame({"a": [1], "b": [2]}))) == Groups(("a", "b"))


@pytest.mark.parametrize(
    "columns",
    [None, ["a", "a"], ["a", ""], ["a", None]],
)
def test_resolve_grouping_rejects_missing_or_duplicate_labels(columns):
    m = as_counts_matrix(np.array([[1, 2]]), columns=columns)
    with pytest.raises(MissingGroupLabelsError):
        resolve_grouping(m)


def test_expand_groups_repeats_labels_by_column_total():
    m = as_counts_matrix(pd.DataFrame({"f": [2, 1], "m": [0, 3]}))
    groups, grouping = expand_groups(m, flatten_counts(m.values))

    assert grouping == Groups(("f", "m"))
    assert list(groups) == ["f", "f", "f", "m", "m", "m"]
    assert list(groups.categories) == ["f", "m"]


def test_expand_groups_keeps_empty_columns_as_categories():
    m = as_counts_matrix(pd.DataFrame({"b": [0, 0], "a": [1, 1]}))
    groups, _ = expand_groups(m, flatten_counts(m.values))
    assert list(groups) == ["a", "a"]
    assert list(groups.categories) == ["b", "a"]


def test_synthesize_example_two_groups():
    m = as_counts_matrix(pd.DataFrame({"f": [2, 1], "m": [0, 3]}))
    tl = synthesize(m, np.array([1, 4]))

    pairs = list(zip(tl.dates.tolist(), list(tl.groups)))
    assert pairs == [(1, "f"), (1, "f"), (4, "f"), (4, "m"), (4, "m"), (4, "m")]
    assert tl.n == 6


def test_dates_and_groups_come_from_the_same_cell():
    rng = np.random.default_rng(0)
    values = rng.integers(0, 5, size=(6, 3))
    labels = ["a", "b", "c"]
    boundaries = np.arange(6) * 10

    tl = synthesize(as_counts_matrix(values, columns=labels), boundaries)
    dates = tl.dates
    groups = np.asarray(tl.groups, dtype=object)

    assert dates.size == groups.size == values.sum()
    for r in range(6):
        for c, label in enumerate(labels):
            n = np.sum((dates == boundaries[r]) & (groups == label))
            assert n == values[r, c]


def test_synthesize_without_groups():
    tl = synthesize(as_counts_matrix([3, 1]), np.array([5, 6]))
    assert tl.groups is None
    assert tl.grouping == NoGroups()
    assert tl.dates.tolist() == [5, 5, 5, 6]
