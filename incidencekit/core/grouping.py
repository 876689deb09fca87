# incidencekit/core/grouping.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

from .exceptions import InvalidGrouping


@dataclass(frozen=True, slots=True)
class NoGroups:
    """Single implicit group: the counts matrix has exactly one column."""

    @property
    def labels(self) -> None:
        return None

    @property
    def n(self) -> int:
        return 1


@dataclass(frozen=True, slots=True)
class Groups:
    """
    Ordered set of group labels, one per counts column.

    The order is the declared one and is kept everywhere (columns of the
    counts matrix, wide table columns, categories of the long table).
    """
    labels: tuple[str, ...]

    def __post_init__(self) -> None:
        labels = tuple(self.labels)
        if not labels:
            raise InvalidGrouping("Groups.labels must not be empty.")
        for label in labels:
            if not isinstance(label, str) or not label.strip():
                raise InvalidGrouping("Groups.labels must be non-empty strings.")
        if len(set(labels)) != len(labels):
            raise InvalidGrouping(f"Groups.labels must be unique, got {labels!r}.")
        object.__setattr__(self, "labels", labels)

    @property
    def n(self) -> int:
        return len(self.labels)

    def __iter__(self):
        return iter(self.labels)

    def __len__(self) -> int:
        return len(self.labels)


Grouping = Union[NoGroups, Groups]


def grouping_from_labels(labels: Iterable[str] | None) -> Grouping:
    """Build a Grouping: ``None`` means no groups."""
    if labels is None:
        return NoGroups()
    return Groups(labels=tuple(labels))
