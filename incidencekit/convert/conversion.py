# incidencekit/convert/conversion.py
from __future__ import annotations

from typing import Any, Sequence

from ..core.builder import build_incidence
from ..core.dates import check_boundaries, is_calendar
from ..core.incidence import Incidence
from ..utils.logging import get_logger
from .groups import resolve_grouping
from .interval import default_boundaries, resolve_interval
from .matrix import normalize_input
from .timeline import synthesize

logger = get_logger(__name__)


def as_incidence(
    x: Any,
    dates: Any = None,
    interval: int | str | None = None,
    isoweeks: bool | None = None,
    *,
    columns: Sequence[Any] | None = None,
) -> Incidence:
    """
    Convert pre-aggregated counts (or an existing Incidence) to an Incidence.

    Only use this when the original event dates are not available. ``x``
    gives counts with time bins in rows and groups in columns; a single
    column means no groups. The counts are expanded into one synthetic event
    per count, dated at its bin boundary, and re-binned by
    :func:`~incidencekit.core.builder.build_incidence`.

    Parameters
    ----------
    x:
        Counts matrix, DataFrame, Series, 1D vector, or an Incidence.
    dates:
        Lower (inclusive) boundary of each bin. Defaults to 1, 2, 3, ...
        (spaced by ``interval`` when given).
    interval:
        Bin width; a positive integer or ``"week"``. Inferred from the first
        two dates when omitted; required when there is a single date.
    isoweeks:
        Calendar dates only: use ISO weeks for weekly bins. Defaults to True
        (to the source's own setting for an Incidence input).
    columns:
        Group labels for inputs without column labels (numpy arrays).

    Raises
    ------
    InvalidCountsError, InvalidDatesError, InvalidIntervalError,
    AmbiguousIntervalError, MissingGroupLabelsError
    """
    source = normalize_input(x, dates=dates, interval=interval, isoweeks=isoweeks, columns=columns)
    matrix = source.matrix

    if source.dates is None:
        boundaries = default_boundaries(matrix.n_rows, source.interval)
    else:
        boundaries = check_boundaries(source.dates, matrix.n_rows)

    step = resolve_interval(source.interval, boundaries)
    resolve_grouping(matrix)

    timeline = synthesize(matrix, boundaries)
    logger.debug(
        "synthesized %d event(s) over %d bin(s) x %d column(s)",
        timeline.n, matrix.n_rows, matrix.n_cols,
    )

    # isoweeks has no meaning for ordinal dates
    standard = source.isoweeks if is_calendar(boundaries) else False

    return build_incidence(
        timeline.dates,
        interval=step,
        groups=timeline.groups,
        standard=standard,
        first_date=boundaries[0],
        last_date=boundaries[-1],
    )
