"""
upsetaxis/plot
~~~~~~~~~~~~~~
"""

from .axis import AxisBuild, CombMatrixAxis, MergeAxis
from .plotter import UpSetPlotter
from .style import DEFAULT_STYLE, StyleConfig

__all__ = [
    "AxisBuild",
    "CombMatrixAxis",
    "DEFAULT_STYLE",
    "MergeAxis",
    "StyleConfig",
    "UpSetPlotter",
]
