"""
upsetaxis/core/records
~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from .collapse import DEFAULT_SEP, make_key, normalize_label_set, split_key


@dataclass(frozen=True)
class CategoryRecord:
    """
    Data class for one observed category: its key, constituent labels, and frequency.
    """

    key: str
    labels: Tuple[str, ...]
    frequency: float
    order: int = 0

    @property
    def degree(self) -> int:
        """
        Returns the number of constituent labels.

        Returns:
            int: Degree of the category.
        """
        return len(self.labels)


def aggregate(
    collapsed: Sequence[Tuple[str, Tuple[str, ...]]],
    weights: Optional[Sequence[float]] = None,
) -> List[CategoryRecord]:
    """
    Aggregates collapsed observations into one CategoryRecord per key.

    Args:
        collapsed (Sequence[Tuple[str, Tuple[str, ...]]]): (key, labels) pairs from `collapse`.
        weights (Optional[Sequence[float]]): Per-observation weights to sum instead of
            counting (pre-counted data). Defaults to None.

    Returns:
        List[CategoryRecord]: Records in order of first appearance.

    Raises:
        ValueError: If `weights` does not match the number of observations.
    """
    if len(collapsed) == 0:
        return []
    keys = [key for key, _labels in collapsed]
    labels_by_key: Dict[str, Tuple[str, ...]] = {}
    for key, labels in collapsed:
        labels_by_key.setdefault(key, tuple(labels))

    if weights is None:
        values = np.ones(len(keys), dtype=int)
    else:
        values = np.asarray(weights, dtype=float)
        if values.shape != (len(keys),):
            raise ValueError(
                f"weights must have one value per observation ({len(keys)}), got shape {values.shape}"
            )
    # groupby(sort=False) keeps first-appearance order
    totals = pd.Series(values, index=pd.Index(keys, dtype=object)).groupby(level=0, sort=False).sum()

    records = []
    for order, (key, total) in enumerate(totals.items()):
        frequency = int(total) if weights is None else float(total)
        records.append(CategoryRecord(key, labels_by_key[key], frequency, order))
    return records


def from_counts(
    counts: Union[Mapping[Any, float], pd.Series], sep: str = DEFAULT_SEP
) -> List[CategoryRecord]:
    """
    Builds CategoryRecords from pre-aggregated counts. Keys may be category key
    strings (split by `sep`) or label collections.

    Args:
        counts (Union[Mapping[Any, float], pd.Series]): Count per category.
        sep (str): Key delimiter. Defaults to "-".

    Returns:
        List[CategoryRecord]: Records in input order; duplicate categories are summed.
    """
    items = counts.items()
    merged: Dict[str, float] = {}
    labels_by_key: Dict[str, Tuple[str, ...]] = {}
    for raw, count in items:
        # Key strings may list their labels in any order
        labels = normalize_label_set(split_key(raw, sep) if isinstance(raw, str) else raw, sep)
        key = make_key(labels, sep)
        labels_by_key.setdefault(key, labels)
        merged[key] = merged.get(key, 0) + count

    return [
        CategoryRecord(key, labels_by_key[key], total, order)
        for order, (key, total) in enumerate(merged.items())
    ]


def label_totals(records: Sequence[CategoryRecord]) -> pd.Series:
    """
    Sums record frequencies per individual label.

    Args:
        records (Sequence[CategoryRecord]): Records to total.

    Returns:
        pd.Series: Total frequency per label, descending, ties broken lexically.
    """
    totals: Dict[str, float] = {}
    for record in records:
        for label in record.labels:
            totals[label] = totals.get(label, 0) + record.frequency
    order = sorted(totals, key=lambda label: (-totals[label], label))
    return pd.Series([totals[label] for label in order], index=order, name="frequency", dtype=float)
