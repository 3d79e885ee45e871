"""
upsetaxis/plot/renderers/base
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import Any, Protocol, Tuple, TYPE_CHECKING

import matplotlib.pyplot as plt

if TYPE_CHECKING:
    from ...core.layout import LayoutFrame
    from ..style import StyleConfig


class Renderer(Protocol):
    """
    Class for defining the renderer interface used by matrix panels.
    Protocol only; implement in concrete renderers.
    """

    def render(
        self,
        ax: plt.Axes,
        frame: LayoutFrame,
        style: StyleConfig,
        **kwargs: Any,
    ) -> None:
        """
        Executes rendering logic.

        Args:
            ax (plt.Axes): Target panel axes.
            frame (LayoutFrame): Combination-matrix layout.
            style (StyleConfig): Style configuration.

        Kwargs:
            **kwargs: Renderer keyword arguments. Defaults to {}.
        """
        # Protocol stub; no runtime implementation
        ...


def swap_xy(orientation: str, x: Any, y: Any) -> Tuple[Any, Any]:
    """
    Maps (position, row) coordinates to (x, y) for the given orientation.

    Args:
        orientation (str): "horizontal" or "vertical".
        x (Any): Coordinate along the categorical axis.
        y (Any): Coordinate along the label rows.

    Returns:
        Tuple[Any, Any]: Plot coordinates.
    """
    if orientation == "horizontal":
        return x, y
    return y, x
