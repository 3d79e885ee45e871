"""
upsetaxis/plot/renderers/combmatrix
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.collections import LineCollection

from .base import swap_xy

if TYPE_CHECKING:
    from ..style import StyleConfig
    from ...core.layout import LayoutFrame


def _draw_stripes(ax: plt.Axes, n_rows: int, orientation: str, style: StyleConfig) -> None:
    """
    Draws alternating row backgrounds spanning the whole panel.

    Args:
        ax (plt.Axes): Panel axes.
        n_rows (int): Number of label rows.
        orientation (str): "horizontal" or "vertical".
        style (StyleConfig): Style configuration.
    """
    span = ax.axhspan if orientation == "horizontal" else ax.axvspan
    colors = (style.get("stripe_color_one"), style.get("stripe_color_two"))
    for row in range(n_rows):
        span(row - 0.5, row + 0.5, facecolor=colors[row % 2], edgecolor="none", lw=0, zorder=0)


def _draw_points(ax: plt.Axes, frame: LayoutFrame, orientation: str, style: StyleConfig) -> None:
    df = frame.to_frame(orientation)
    if df.empty:
        return
    colors = np.where(
        df["observed"].to_numpy(),
        style.get("point_color_on"),
        style.get("point_color_off"),
    )
    ax.scatter(
        df["x"].to_numpy(dtype=float),
        df["y"].to_numpy(dtype=float),
        s=style.get("point_size"),
        c=list(colors),
        linewidths=0,
        zorder=3,
    )


def _draw_segments(ax: plt.Axes, frame: LayoutFrame, orientation: str, style: StyleConfig) -> None:
    segments = [
        (swap_xy(orientation, pos, first), swap_xy(orientation, pos, last))
        for pos, first, last in frame.segments()
    ]
    if not segments:
        return
    color = style.get("line_color") or style.get("point_color_on")
    ax.add_collection(
        LineCollection(
            segments,
            linewidths=style.get("line_width"),
            colors=color,
            zorder=2,
        ),
        autolim=False,
    )


class CombMatrixRenderer:
    """
    Class for rendering the default combination matrix: striped rows, one point per
    cell (filled when observed), and a segment joining the observed cells of each column.
    """

    def __init__(self, **kwargs: Any) -> None:
        """
        Initializes the CombMatrixRenderer instance.

        Kwargs:
            **kwargs: Style overrides applied on top of the panel style. Defaults to {}.
        """
        self.kwargs = dict(kwargs)

    def render(
        self,
        ax: plt.Axes,
        frame: LayoutFrame,
        style: StyleConfig,
        *,
        orientation: str = "horizontal",
    ) -> None:
        """
        Renders the combination matrix on the panel axes.

        Args:
            ax (plt.Axes): Panel axes.
            frame (LayoutFrame): Combination-matrix layout.
            style (StyleConfig): Style configuration.

        Kwargs:
            orientation (str): "horizontal" or "vertical". Defaults to "horizontal".
        """
        if self.kwargs:
            style = style.copy()
            style.update(self.kwargs)
        if style.get("stripe", True):
            _draw_stripes(ax, frame.n_rows, orientation, style)
        _draw_segments(ax, frame, orientation, style)
        _draw_points(ax, frame, orientation, style)
