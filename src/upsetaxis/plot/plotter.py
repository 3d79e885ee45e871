# ============================================================
# Layered UpSet plot builder for upsetaxis
# ============================================================

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from .axis import AxisAdapter, AxisBuild, CombMatrixAxis
from .style import StyleConfig, StyleValue, resolve_style


class UpSetPlotter:
    """
    Layered plot builder for list-valued categorical data.

    The UpSetPlotter is the caller-held plot object:
      - It never mutates the input data
      - It accumulates declarative plotting layers
      - Every render performs a fresh axis build (collapse, aggregate, select, layout)
      - Rendering happens only when `render()` or `show()` is called
    """

    def __init__(
        self,
        data: Union[pd.DataFrame, pd.Series, List[Any]],
        column: Optional[str] = None,
        *,
        style: Union[StyleConfig, Mapping[str, StyleValue], None] = None,
    ) -> None:
        """
        Initializes the UpSetPlotter instance.

        Args:
            data (Union[pd.DataFrame, pd.Series, List[Any]]): Observations. A DataFrame
                needs `column` naming the list-valued column.
            column (Optional[str]): List-valued column of `data`. Defaults to None.

        Kwargs:
            style (Union[StyleConfig, Mapping[str, StyleValue], None]): Figure-level
                style overrides. Defaults to None.

        Raises:
            ValueError: If `data` is a DataFrame and `column` is missing or unknown.
        """
        if isinstance(data, pd.DataFrame):
            if column is None or column not in data.columns:
                raise ValueError(f"column must name a column of data, got {column!r}")
            self.data = data
            self.values = data[column]
        else:
            self.values = data if isinstance(data, pd.Series) else pd.Series(list(data), dtype=object)
            self.data = self.values.to_frame(name=column or "labels")
        self.column = column
        self._style = resolve_style(style)

        # Declarative plot plan (ordered)
        self._layers: List[Tuple[str, Dict[str, Any]]] = []
        self._axis: AxisAdapter = CombMatrixAxis()
        self._title: Optional[str] = None
        self._ylabel: Optional[str] = None
        self._background: Optional[str] = None
        self._fig: Optional[plt.Figure] = None
        self.build_: Optional[AxisBuild] = None

    def set_axis(self, axis: AxisAdapter) -> UpSetPlotter:
        """
        Sets the categorical axis (CombMatrixAxis or MergeAxis).
        """
        if not hasattr(axis, "build") or not hasattr(axis, "apply"):
            raise TypeError("axis must provide build() and apply()")
        self._axis = axis
        return self

    def set_background(self, color: str) -> UpSetPlotter:
        """
        Set figure background color (used for display and save).
        """
        self._background = color
        return self

    def set_ylabel(self, label: str) -> UpSetPlotter:
        self._ylabel = label
        return self

    def plot_title(self, title: str) -> UpSetPlotter:
        self._title = title
        return self

    def plot_bars(self, value: Optional[str] = None, **kwargs: Any) -> UpSetPlotter:
        """
        Declare one bar per category: the observation count, or the sum of `value`.
        """
        if value is not None and value not in self.data.columns:
            raise ValueError(f"value must name a column of data, got {value!r}")
        self._layers.append(("bars", {"value": value, **kwargs}))
        return self

    def plot_points(self, value: str, *, jitter: float = 0.2, seed: int = 0, **kwargs: Any) -> UpSetPlotter:
        """
        Declare one jittered point per observation at its category position, with height `value`.
        """
        if value not in self.data.columns:
            raise ValueError(f"value must name a column of data, got {value!r}")
        if jitter < 0 or jitter >= 0.5:
            raise ValueError("jitter must be in [0, 0.5)")
        self._layers.append(("points", {"value": value, "jitter": jitter, "seed": seed, **kwargs}))
        return self

    def _render_bars(self, ax: plt.Axes, build: AxisBuild, kwargs: Dict[str, Any]) -> None:
        value = kwargs.pop("value")
        if value is None:
            heights = build.counts
        else:
            # Sum of `value` over the observations mapped to each position
            sums = (
                pd.Series(self.data[value].to_numpy(dtype=float), index=build.observation_positions.to_numpy())
                .groupby(level=0)
                .sum()
            )
            heights = sums.reindex(build.positions, fill_value=0.0).to_numpy()
        kwargs.setdefault("color", self._style.get("bar_color"))
        kwargs.setdefault("width", 0.8)
        if self._axis.orientation == "horizontal":
            ax.bar(build.positions, heights, **kwargs)
        else:
            kwargs["height"] = kwargs.pop("width")
            ax.barh(build.positions, heights, **kwargs)

    def _render_points(self, ax: plt.Axes, build: AxisBuild, kwargs: Dict[str, Any]) -> None:
        value = kwargs.pop("value")
        jitter = kwargs.pop("jitter")
        rng = np.random.default_rng(kwargs.pop("seed"))
        positions = build.observation_positions.to_numpy(dtype=float)
        heights = self.data[value].to_numpy(dtype=float)
        # Observations whose category is not shown are dropped
        keep = ~np.isnan(positions)
        offsets = rng.uniform(-jitter, jitter, size=int(keep.sum()))
        kwargs.setdefault("color", self._style.get("bar_color"))
        kwargs.setdefault("alpha", self._style.get("point_alpha"))
        kwargs.setdefault("s", 12)
        if self._axis.orientation == "horizontal":
            ax.scatter(positions[keep] + offsets, heights[keep], **kwargs)
        else:
            ax.scatter(heights[keep], positions[keep] + offsets, **kwargs)

    def render(self, fig: Optional[plt.Figure] = None) -> Tuple[plt.Figure, Dict[str, plt.Axes]]:
        """
        Builds the axis and renders all declared layers.

        Args:
            fig (Optional[plt.Figure]): Figure to draw into. Defaults to a new figure.

        Returns:
            Tuple[plt.Figure, Dict[str, plt.Axes]]: Figure and axes ("main", plus "matrix" in matrix mode).

        Raises:
            RuntimeError: If no plot layers are declared.
        """
        if not self._layers:
            raise RuntimeError("No plot layers declared.")
        if fig is None:
            fig = plt.figure(figsize=self._style.get("figsize"))
        if self._background is not None:
            fig.patch.set_facecolor(self._background)
        ax = fig.add_subplot(111)

        # Fresh build per render: nothing is reused across builds
        build = self._axis.build(self.values)
        axes = self._axis.apply(ax, build)

        for layer, kwargs in self._layers:
            if layer == "bars":
                self._render_bars(ax, build, dict(kwargs))
            elif layer == "points":
                self._render_points(ax, build, dict(kwargs))
            else:
                raise NotImplementedError(f"Unknown plot layer: {layer}")

        if self._ylabel is not None:
            if self._axis.orientation == "horizontal":
                ax.set_ylabel(self._ylabel)
            else:
                ax.set_xlabel(self._ylabel)
        if self._title is not None:
            ax.set_title(
                self._title,
                fontsize=self._style.get("title_fontsize"),
                pad=self._style.get("title_pad"),
                color=self._style.get("text_color"),
            )
        for spine in ("top", "right"):
            ax.spines[spine].set_visible(False)

        # Attach build metadata for advanced users
        self.build_ = build
        self._fig = fig
        return fig, axes

    def show(self) -> None:
        """
        Render and display the figure.
        """
        self.render()
        plt.show()

    def save(self, path: str, **kwargs: Any) -> None:
        """
        Save the last rendered figure with correct background handling.
        """
        if self._fig is None:
            raise RuntimeError("Nothing to save: call render() or show() first.")
        kwargs.setdefault("bbox_inches", "tight")
        self._fig.savefig(
            path,
            facecolor=self._fig.get_facecolor(),
            **kwargs,
        )

