# incidencekit/convert/groups.py
from __future__ import annotations

import numpy as np
import pandas as pd

from ..core.exceptions import MissingGroupLabelsError
from ..core.grouping import Groups, Grouping, NoGroups
from .flatten import FlatCells
from .matrix import CountsMatrix


def resolve_grouping(matrix: CountsMatrix) -> Grouping:
    """
    Derive the group set from the matrix columns.

    A single column means no groups, whatever its label. Several columns
    need labels that are present, non-empty and unique.
    """
    if matrix.n_cols == 1:
        return NoGroups()

    if matrix.columns is None:
        raise MissingGroupLabelsError("Columns should be named to label groups.")

    labels = []
    for col in matrix.columns:
        if col is None or (isinstance(col, float) and np.isnan(col)):
            raise MissingGroupLabelsError("Columns should be named to label groups.")
        label = str(col)
        if not label.strip():
            raise MissingGroupLabelsError("Columns should be named to label groups.")
        labels.append(label)

    if len(set(labels)) != len(labels):
        raise MissingGroupLabelsError(f"Column labels must be unique, got {labels!r}.")
    return Groups(labels=tuple(labels))


def expand_groups(matrix: CountsMatrix, cells: FlatCells) -> tuple[pd.Categorical | None, Grouping]:
    """
    One group label per synthetic event, aligned with ``cells``.

    Each column label is repeated as many times as the column's total count.
    The result is a Categorical whose categories are the labels in column
    order, so a column with no event still yields a group.
    """
    grouping = resolve_grouping(matrix)
    if isinstance(grouping, NoGroups):
        return None, grouping

    labels = np.asarray(grouping.labels, dtype=object)
    per_event = np.repeat(labels[cells.cols], cells.counts)
    return pd.Categorical(per_event, categories=list(grouping.labels)), grouping
