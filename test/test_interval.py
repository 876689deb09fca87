# test/test_interval.py
import numpy as np
import pytest

from incidencekit.convert.interval import default_boundaries, resolve_interval
from incidencekit.core import AmbiguousIntervalError, InvalidIntervalError


def test_explicit_interval_wins_over_dates():
    assert resolve_interval(2, np.array([1, 4])) == 2
    assert resolve_interval("week", np.array([1])) == 7


def test_explicit_interval_validated():
    with pytest.raises(InvalidIntervalError):
        resolve_interval(-3, np.array([1, 4]))
    with pytest.raises(InvalidIntervalError):
        resolve_interval(2.5, np.array([1, 4]))


def test_inferred_from_first_two_ordinal_dates():
    assert resolve_interval(None, np.array([1, 4, 7])) == 3


def test_inferred_from_first_two_calendar_dates():
    d = np.array(["2024-01-01", "2024-01-08"], dtype="datetime64[D]")
    assert resolve_interval(None, d) == 7


def test_inference_trusts_first_gap_only():
    # later gaps are not checked
    assert resolve_interval(None, np.array([1, 2, 10])) == 1


def test_single_date_without_interval_is_ambiguous():
    with pytest.raises(AmbiguousIntervalError, match="only one date"):
        resolve_interval(None, np.array([5]))


def test_default_boundaries():
    assert default_boundaries(3).tolist() == [1, 2, 3]
    assert default_boundaries(3, 2).tolist() == [1, 3, 5]
    assert default_boundaries(2, "week").tolist() == [1, 8]
    with pytest.raises(InvalidIntervalError):
        default_boundaries(2, 0)
