"""
Conversion layer: counts matrix <-> Incidence <-> table.

- as_incidence: rebuild an Incidence from pre-aggregated counts
- to_frame: wide / long pandas view of an Incidence

Internals (shared by as_incidence):
- resolve_interval / default_boundaries: bin width and default dates
- flatten_counts: column-major cell order used by both expanders
- expand_timeline / expand_groups: one synthetic event per count
"""

from .conversion import as_incidence
from .flatten import FlatCells, flatten_counts
from .groups import expand_groups, resolve_grouping
from .interval import default_boundaries, resolve_interval
from .matrix import CountsMatrix, as_counts_matrix, normalize_input
from .table import to_frame
from .timeline import SyntheticTimeline, expand_timeline, synthesize


__all__ = [
    # entry points
    "as_incidence",
    "to_frame",

    # input normalization
    "CountsMatrix",
    "as_counts_matrix",
    "normalize_input",

    # reconstruction steps
    "resolve_interval",
    "default_boundaries",
    "FlatCells",
    "flatten_counts",
    "resolve_grouping",
    "expand_groups",
    "SyntheticTimeline",
    "expand_timeline",
    "synthesize",
]
