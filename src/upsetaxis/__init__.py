"""
upsetaxis
~~~~~~~~~

UpSet-style combination-matrix axes for matplotlib
"""

from .core.collapse import collapse, merge_labels
from .core.layout import LayoutFrame, compute_layout
from .core.records import CategoryRecord, aggregate
from .core.selection import SelectionConfig, select
from .plot.axis import CombMatrixAxis, MergeAxis
from .plot.plotter import UpSetPlotter
from .plot.style import StyleConfig
from .util.errors import AlignmentViolation, InvalidLabelError, MisconfiguredOverride
from .util.warnings import InvalidLabelWarning

__all__ = [
    "AlignmentViolation",
    "CategoryRecord",
    "CombMatrixAxis",
    "InvalidLabelError",
    "InvalidLabelWarning",
    "LayoutFrame",
    "MergeAxis",
    "MisconfiguredOverride",
    "SelectionConfig",
    "StyleConfig",
    "UpSetPlotter",
    "aggregate",
    "collapse",
    "compute_layout",
    "merge_labels",
    "select",
]

__version__ = "0.1.0"
