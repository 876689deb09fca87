# incidencekit/convert/table.py
from __future__ import annotations

import numpy as np
import pandas as pd

from ..core.grouping import NoGroups
from ..core.incidence import Incidence


def to_frame(incidence: Incidence, *, long: bool = False) -> pd.DataFrame:
    """
    Tabular view of an Incidence.

    Wide (default): one row per bin with ``dates``, ``isoweeks`` (weekly
    calendar incidence only) and one column per group, or a single
    ``counts`` column without groups.

    Long: one row per (bin, group), all bins of the first group first, with
    ``dates``, ``isoweeks``, ``counts`` and a categorical ``groups`` column
    keeping the declared group order. Without groups this is the wide table.
    """
    if not isinstance(incidence, Incidence):
        raise TypeError(f"to_frame() expects an Incidence, got {type(incidence).__name__}")

    grouping = incidence.grouping
    head = _head_columns(incidence)

    if isinstance(grouping, NoGroups):
        return pd.DataFrame({**head, "counts": incidence.counts[:, 0].copy()})

    if not long:
        body = pd.DataFrame(incidence.counts.copy(), columns=list(grouping.labels))
        # concat rather than a dict: a group may be named "dates"
        return pd.concat([pd.DataFrame(head), body], axis=1)

    n_groups = grouping.n
    out = {name: np.tile(col, n_groups) for name, col in head.items()}
    out["counts"] = incidence.counts.ravel(order="F")
    out["groups"] = pd.Categorical(
        np.repeat(np.asarray(grouping.labels, dtype=object), incidence.n_bins),
        categories=list(grouping.labels),
    )
    return pd.DataFrame(out)


def _head_columns(incidence: Incidence) -> dict[str, np.ndarray]:
    if incidence.is_calendar:
        dates = incidence.dates.astype("datetime64[ns]")
    else:
        dates = incidence.dates.copy()

    head = {"dates": dates}
    if incidence.isoweeks is not None:
        head["isoweeks"] = np.asarray(incidence.isoweeks, dtype=object)
    return head
