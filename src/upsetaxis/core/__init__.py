"""
upsetaxis/core
~~~~~~~~~~~~~~
"""

from .collapse import EMPTY_KEY, collapse, make_key, merge_labels, normalize_label_set, split_key
from .layout import LayoutFrame, compute_layout
from .records import CategoryRecord, aggregate, from_counts, label_totals
from .selection import Selection, SelectionConfig, select

__all__ = [
    "EMPTY_KEY",
    "CategoryRecord",
    "LayoutFrame",
    "Selection",
    "SelectionConfig",
    "aggregate",
    "collapse",
    "compute_layout",
    "from_counts",
    "label_totals",
    "make_key",
    "merge_labels",
    "normalize_label_set",
    "select",
    "split_key",
]
