# incidencekit/convert/interval.py
from __future__ import annotations

from typing import Any

import numpy as np

from ..core.dates import check_interval, to_days
from ..core.exceptions import AmbiguousIntervalError
from ..utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_START = 1


def resolve_interval(interval: Any, boundaries: np.ndarray) -> int:
    """
    Return the bin width to rebuild an incidence with.

    An explicit ``interval`` is validated and used as-is. Otherwise it is
    inferred from the gap between the first two boundaries; later gaps are
    assumed equal and are not checked.
    """
    if interval is not None:
        return check_interval(interval)

    boundaries = np.asarray(boundaries)
    if boundaries.size < 2:
        raise AmbiguousIntervalError("Interval needs to be specified if there is only one date.")

    first, second = to_days(boundaries[:2])
    step = int(second - first)
    logger.debug("interval inferred from the first two dates: %d", step)
    return check_interval(step)


def default_boundaries(n_rows: int, interval: Any = None) -> np.ndarray:
    """Ordinal boundaries 1, 1 + step, 1 + 2 * step, ... (step defaults to 1)."""
    step = 1 if interval is None else check_interval(interval)
    return DEFAULT_START + np.arange(n_rows, dtype=np.int64) * step
