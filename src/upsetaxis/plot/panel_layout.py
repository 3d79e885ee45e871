"""
upsetaxis/plot/panel_layout
~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np

from ..util.errors import AlignmentViolation

POSITIONS = ("bottom", "top", "left", "right")


class PanelLayoutManager:
    """
    Class for computing and storing the geometry of a matrix panel attached to a main axes.

    Panel bounds are expressed in the main axes' coordinates, so the panel spans
    exactly the main panel along the categorical axis and follows it on resize.
    """

    def __init__(self, position: str = "bottom", *, config: Optional[Dict[str, Any]] = None) -> None:
        """
        Initializes the PanelLayoutManager instance.

        Args:
            position (str): Side of the main axes holding the panel. Defaults to "bottom".

        Kwargs:
            config (Optional[Dict[str, Any]]): Axis configuration echoed in errors. Defaults to None.
        """
        if position not in POSITIONS:
            raise ValueError(f"position must be one of {POSITIONS}, got {position!r}")
        self.position = position
        self.config = dict(config) if config is not None else {}
        self._bounds: Optional[List[float]] = None

    @property
    def orientation(self) -> str:
        """
        Returns "horizontal" when categories run along x, else "vertical".

        Returns:
            str: Orientation of the categorical axis.
        """
        return "horizontal" if self.position in ("bottom", "top") else "vertical"

    def _fail(self, message: str) -> None:
        raise AlignmentViolation(f"{message} (position={self.position!r}, config={self.config})")

    def validate_host(self, ax: plt.Axes) -> None:
        """
        Ensures the main axes is a plain rectilinear axes.

        Args:
            ax (plt.Axes): Main axes.

        Raises:
            AlignmentViolation: For polar, 3D, or other non-rectilinear axes.
        """
        name = getattr(ax, "name", type(ax).__name__)
        if name != "rectilinear":
            self._fail(f"Cannot align a matrix panel with {name!r} axes")

    def reserve_space(self, ax: plt.Axes, size: float, pad: float, extra: float = 0.0) -> None:
        """
        Shrinks the main axes, if needed, so the panel fits inside the figure.

        Args:
            ax (plt.Axes): Main axes.
            size (float): Panel thickness in inches.
            pad (float): Gap between main axes and panel in inches.
            extra (float): Additional room beyond the panel (labels, title) in inches.

        Raises:
            AlignmentViolation: If the main axes cannot host the panel or would collapse.
        """
        self.validate_host(ax)
        fig_w, fig_h = ax.figure.get_size_inches()
        box = ax.get_position()
        x0, y0, x1, y1 = box.x0, box.y0, box.x1, box.y1
        if self.orientation == "horizontal":
            needed = (size + pad + extra) / fig_h
            if self.position == "bottom":
                y0 = max(y0, needed)
            else:
                y1 = min(y1, 1.0 - needed)
        else:
            needed = (size + pad + extra) / fig_w
            if self.position == "left":
                x0 = max(x0, needed)
            else:
                x1 = min(x1, 1.0 - needed)
        if x1 - x0 <= 0 or y1 - y0 <= 0:
            self._fail("Figure is too small to hold the matrix panel beside the main axes")
        ax.set_position([x0, y0, x1 - x0, y1 - y0])

    def compute_bounds(self, ax: plt.Axes, size: float, pad: float) -> List[float]:
        """
        Computes the panel bounds [x0, y0, w, h] in main-axes coordinates.

        Args:
            ax (plt.Axes): Main axes.
            size (float): Panel thickness in inches.
            pad (float): Gap between main axes and panel in inches.

        Returns:
            List[float]: Inset bounds for `Axes.inset_axes`.
        """
        fig_w, fig_h = ax.figure.get_size_inches()
        box = ax.get_position()
        span = box.height * fig_h if self.orientation == "horizontal" else box.width * fig_w
        if span <= 0:
            self._fail("Main axes has no extent")
        size_frac = size / span
        pad_frac = pad / span
        bounds = {
            "bottom": [0.0, -pad_frac - size_frac, 1.0, size_frac],
            "top": [0.0, 1.0 + pad_frac, 1.0, size_frac],
            "left": [-pad_frac - size_frac, 0.0, size_frac, 1.0],
            "right": [1.0 + pad_frac, 0.0, size_frac, 1.0],
        }[self.position]
        self._bounds = bounds
        return list(bounds)

    def attach(self, ax: plt.Axes, bounds: List[float]) -> plt.Axes:
        """
        Creates the panel axes, sharing the categorical axis with `ax`.

        Args:
            ax (plt.Axes): Main axes.
            bounds (List[float]): Bounds from `compute_bounds`.

        Returns:
            plt.Axes: Panel axes.

        Raises:
            AlignmentViolation: If the main axes cannot host an aligned panel.
        """
        self.validate_host(ax)
        if self.orientation == "horizontal":
            panel = ax.inset_axes(bounds, sharex=ax)
        else:
            panel = ax.inset_axes(bounds, sharey=ax)
        self.check_alignment(ax, bounds)
        return panel

    def check_alignment(self, ax: plt.Axes, bounds: List[float]) -> None:
        """
        Verifies that the panel spans exactly the main axes along the categorical axis.

        Args:
            ax (plt.Axes): Main axes.
            bounds (List[float]): Panel bounds in main-axes coordinates.

        Raises:
            AlignmentViolation: If the extents differ.
        """
        x0, y0, w, h = bounds
        to_fig = ax.transAxes + ax.figure.transFigure.inverted()
        corners = to_fig.transform(np.array([[x0, y0], [x0 + w, y0 + h]]))
        box = ax.get_position()
        if self.orientation == "horizontal":
            main, panel = (box.x0, box.x1), (corners[0, 0], corners[1, 0])
        else:
            main, panel = (box.y0, box.y1), (corners[0, 1], corners[1, 1])
        if not np.allclose(main, panel):
            self._fail(f"Matrix panel extent {panel} does not match main axes extent {main}")

    def get_bounds(self) -> Optional[Tuple[float, ...]]:
        """
        Returns the last computed panel bounds.

        Returns:
            Optional[Tuple[float, ...]]: Bounds, or None if not computed.
        """
        return tuple(self._bounds) if self._bounds is not None else None
