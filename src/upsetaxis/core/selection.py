"""
upsetaxis/core/selection
~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from .collapse import DEFAULT_SEP, make_key, normalize_label_set, split_key
from .records import CategoryRecord, label_totals
from ..util.warnings import warn

ORDER_BY = ("frequency", "degree", "none")


@dataclass(frozen=True)
class SelectionConfig:
    """
    Data class for intersection selection and ordering options.

    `sets` fixes the label universe (order preserved); `n_sets` caps it to the most
    frequent labels; `intersections` lists label sets to show in the given order;
    `n_intersections` keeps the first K columns after ordering.
    """

    order_by: str = "frequency"
    sets: Optional[Tuple[str, ...]] = None
    n_intersections: Optional[int] = None
    n_sets: Optional[int] = None
    intersections: Optional[Tuple[Union[str, Tuple[str, ...]], ...]] = None
    reverse: bool = False

    def __post_init__(self) -> None:
        if self.order_by not in ORDER_BY:
            raise ValueError(f"order_by must be one of {ORDER_BY}, got {self.order_by!r}")
        for name in ("n_intersections", "n_sets"):
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an int or None")
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")
        # Normalize list inputs so the config stays hashable and immutable
        if self.sets is not None:
            if isinstance(self.sets, str):
                raise TypeError("sets must be a sequence of labels, not a string")
            object.__setattr__(self, "sets", tuple(dict.fromkeys(str(s) for s in self.sets)))
        if self.intersections is not None:
            object.__setattr__(
                self,
                "intersections",
                tuple(i if isinstance(i, str) else tuple(i) for i in self.intersections),
            )


@dataclass(frozen=True)
class Selection:
    """
    Data class for the ordered records chosen for display and the fixed label order, if any.
    """

    records: Tuple[CategoryRecord, ...]
    label_order: Optional[Tuple[str, ...]] = None

    def __len__(self) -> int:
        return len(self.records)

    @property
    def keys(self) -> Tuple[str, ...]:
        return tuple(r.key for r in self.records)


def _candidate_labels(records: Sequence[CategoryRecord], config: SelectionConfig) -> List[str]:
    """
    Resolves the label universe allowed by `sets` and `n_sets`.

    Args:
        records (Sequence[CategoryRecord]): All aggregated records.
        config (SelectionConfig): Selection options.

    Returns:
        List[str]: Allowed labels; explicit order when `sets` is given, else by frequency.
    """
    # Totals span every record, not only the ones that end up selected
    totals = label_totals(records)
    if config.sets is not None:
        candidates = list(config.sets)
    else:
        candidates = list(totals.index)

    if config.n_sets is not None and config.n_sets < len(candidates):
        ranked = sorted(candidates, key=lambda label: (-float(totals.get(label, 0.0)), label))
        keep = set(ranked[: config.n_sets])
        candidates = [label for label in candidates if label in keep]
    return candidates


def _sort_records(records: Iterable[CategoryRecord], order_by: str) -> List[CategoryRecord]:
    if order_by == "frequency":
        return sorted(records, key=lambda r: (-r.frequency, r.key))
    if order_by == "degree":
        return sorted(records, key=lambda r: (r.degree, -r.frequency, r.key))
    return sorted(records, key=lambda r: r.order)


def select(
    records: Sequence[CategoryRecord],
    config: Optional[SelectionConfig] = None,
    *,
    sep: str = DEFAULT_SEP,
) -> Selection:
    """
    Selects and orders the categories shown on the axis.

    A record survives only if all of its labels survive the `sets`/`n_sets`
    filter; records are never shown partially. An empty result is valid.

    Args:
        records (Sequence[CategoryRecord]): Aggregated records.
        config (Optional[SelectionConfig]): Selection options. Defaults to SelectionConfig().

    Kwargs:
        sep (str): Key delimiter used to match explicit `intersections`. Defaults to "-".

    Returns:
        Selection: Ordered records plus the fixed label order (None unless `sets` is given).
    """
    if config is None:
        config = SelectionConfig()

    kept = list(records)
    label_order = None
    if config.sets is not None or config.n_sets is not None:
        candidates = _candidate_labels(records, config)
        allowed = set(candidates)
        kept = [r for r in kept if set(r.labels) <= allowed]
        if config.sets is not None:
            label_order = tuple(candidates)

    if config.intersections is not None:
        by_key = {r.key: r for r in kept}
        # Strings are category keys in any label order; other entries are label collections
        wanted = [
            make_key(normalize_label_set(split_key(entry, sep) if isinstance(entry, str) else entry, sep), sep)
            for entry in config.intersections
        ]
        ordered = [by_key[key] for key in dict.fromkeys(wanted) if key in by_key]
    else:
        ordered = _sort_records(kept, config.order_by)

    if config.n_intersections is not None:
        ordered = ordered[: config.n_intersections]
    if config.reverse:
        ordered = ordered[::-1]

    if not ordered:
        warn("No categories selected for display; the matrix panel will be empty", RuntimeWarning)
    return Selection(tuple(ordered), label_order)
