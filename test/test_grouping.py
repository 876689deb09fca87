# test/test_grouping.py
import pytest

from incidencekit.core import Groups, NoGroups, InvalidGrouping
from incidencekit.core.grouping import grouping_from_labels


def test_nogroups_has_no_labels_and_one_column():
    g = NoGroups()
    assert g.labels is None
    assert g.n == 1
    assert g == NoGroups()


def test_groups_keeps_declared_order():
    g = Groups(labels=["m", "f"])
    assert g.labels == ("m", "f")
    assert list(g) == ["m", "f"]
    assert len(g) == 2


def test_groups_rejects_empty():
    with pytest.raises(InvalidGrouping):
        Groups(labels=())


def test_groups_rejects_duplicates():
    with pytest.raises(InvalidGrouping):
        Groups(labels=("a", "a"))


def test_groups_rejects_blank_or_non_string_labels():
    with pytest.raises(InvalidGrouping):
        Groups(labels=("a", "  "))
    with pytest.raises(InvalidGrouping):
        Groups(labels=("a", 1))  # type: ignore[arg-type]


def test_grouping_from_labels():
    assert grouping_from_labels(None) == NoGroups()
    assert grouping_from_labels(["x", "y"]) == Groups(labels=("x", "y"))
