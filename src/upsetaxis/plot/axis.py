"""
upsetaxis/plot/axis
~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence, Tuple, Union

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from ..core.collapse import DEFAULT_SEP, EMPTY_KEY, LabelSet, _is_missing, collapse, split_key
from ..core.layout import LayoutFrame, ROW_ORDERS, compute_layout
from ..core.records import CategoryRecord, aggregate
from ..core.selection import Selection, SelectionConfig, select
from .panel_layout import POSITIONS, PanelLayoutManager
from .renderers.axes import AxesRenderer
from .renderers.combmatrix import CombMatrixRenderer
from .renderers.override import OverrideFunction, OverrideRenderer
from .style import StyleConfig, StyleValue, resolve_style


@dataclass(frozen=True, eq=False)
class AxisBuild:
    """
    Data class for the result of one axis build: selected categories, their
    positions, the matrix layout (matrix mode only), and per-observation mapping.
    """

    kind: str
    selection: Selection
    frame: Optional[LayoutFrame]
    observation_keys: pd.Series
    observation_positions: pd.Series
    sep: str = DEFAULT_SEP
    merged: bool = False

    @property
    def records(self) -> Tuple[CategoryRecord, ...]:
        return self.selection.records

    @property
    def keys(self) -> Tuple[str, ...]:
        return self.selection.keys

    @property
    def positions(self) -> np.ndarray:
        return np.arange(1, len(self.selection) + 1, dtype=float)

    @property
    def counts(self) -> np.ndarray:
        return np.array([r.frequency for r in self.records], dtype=float)

    def position_of(self, key: str) -> float:
        """
        Returns the axis position of a category key.

        Args:
            key (str): Category key.

        Returns:
            float: Position in 1..N, or NaN if the category is not shown.
        """
        return dict(zip(self.keys, self.positions)).get(key, np.nan)

    def map(self, values: Any) -> pd.Series:
        """
        Maps new observations onto axis positions.

        Args:
            values (Any): Sequence (or Series) of label sets, or keys if the build was merged.

        Returns:
            pd.Series: Position per observation; NaN where the category is not shown.
        """
        keys, _collapsed = _collapse_values(values, self.sep, merged=self.merged)
        lookup = dict(zip(self.keys, self.positions))
        return keys.map(lambda key: lookup.get(key, np.nan)).astype(float)


class AxisAdapter(Protocol):
    """
    Class for defining the categorical axis interface implemented by every axis kind.
    Protocol only; implement in concrete axes.
    """

    kind: str
    position: str

    @property
    def orientation(self) -> str:
        ...

    def build(self, values: Any, *, weights: Optional[Sequence[float]] = None, merged: bool = False) -> AxisBuild:
        ...

    def apply(self, ax: plt.Axes, build: AxisBuild) -> Dict[str, plt.Axes]:
        ...


def _collapse_values(
    values: Any, sep: str, *, merged: bool = False, strict: bool = False
) -> Tuple[pd.Series, List[Tuple[str, LabelSet]]]:
    """
    Collapses observations into category keys, keeping a Series index when present.

    Args:
        values (Any): Label sets, or category keys when `merged`.
        sep (str): Key delimiter.

    Kwargs:
        merged (bool): Whether string values are already-merged category keys. Defaults to False.
        strict (bool): Raise on ambiguous labels. Defaults to False.

    Returns:
        Tuple[pd.Series, List[Tuple[str, LabelSet]]]: Key per observation and (key, labels) pairs.
    """
    raw = values
    if merged:
        items = values.tolist() if isinstance(values, pd.Series) else list(values)
        raw = [
            () if _is_missing(v) else (split_key(v, sep) if isinstance(v, str) else v)
            for v in items
        ]
    collapsed = collapse(raw, sep, strict=strict)
    index = values.index if isinstance(values, pd.Series) else None
    keys = pd.Series([key for key, _labels in collapsed], index=index, dtype=object)
    return keys, collapsed


class _CategoricalAxis:
    """
    Class for the configuration and build steps shared by all axis kinds.
    """

    kind = "categorical"

    def __init__(
        self,
        *,
        sep: str = DEFAULT_SEP,
        order_by: str = "frequency",
        sets: Optional[Sequence[str]] = None,
        n_intersections: Optional[int] = None,
        n_sets: Optional[int] = None,
        intersections: Optional[Sequence[Union[str, Sequence[str]]]] = None,
        reverse: bool = False,
        position: str = "bottom",
        name: Optional[str] = None,
        style: Union[StyleConfig, Mapping[str, StyleValue], None] = None,
        strict: bool = False,
    ) -> None:
        if not isinstance(sep, str) or not sep:
            raise ValueError("`sep` must be a non-empty string")
        if position not in POSITIONS:
            raise ValueError(f"position must be one of {POSITIONS}, got {position!r}")
        self.sep = sep
        self.selection_config = SelectionConfig(
            order_by=order_by,
            sets=tuple(sets) if sets is not None and not isinstance(sets, str) else sets,
            n_intersections=n_intersections,
            n_sets=n_sets,
            intersections=tuple(intersections) if intersections is not None else None,
            reverse=reverse,
        )
        self.position = position
        self.name = name
        self.style = resolve_style(style)
        self.strict = strict

    @property
    def orientation(self) -> str:
        return "horizontal" if self.position in ("bottom", "top") else "vertical"

    def config(self) -> Dict[str, Any]:
        """
        Returns the axis configuration, echoed in error messages.

        Returns:
            Dict[str, Any]: Configuration options.
        """
        cfg = self.selection_config
        return {
            "sep": self.sep,
            "order_by": cfg.order_by,
            "sets": cfg.sets,
            "n_intersections": cfg.n_intersections,
            "n_sets": cfg.n_sets,
            "intersections": cfg.intersections,
            "reverse": cfg.reverse,
            "position": self.position,
            "name": self.name,
        }

    def __repr__(self) -> str:
        options = ", ".join(f"{k}={v!r}" for k, v in self.config().items() if v is not None)
        return f"{type(self).__name__}({options})"

    def _build(
        self,
        values: Any,
        weights: Optional[Sequence[float]],
        merged: bool,
        config: Optional[SelectionConfig] = None,
    ) -> Tuple[pd.Series, Selection]:
        keys, collapsed = _collapse_values(values, self.sep, merged=merged, strict=self.strict)
        records = aggregate(collapsed, weights)
        selection = select(records, config or self.selection_config, sep=self.sep)
        return keys, selection

    def _observation_positions(self, keys: pd.Series, selection: Selection) -> pd.Series:
        lookup = {key: float(i) for i, key in enumerate(selection.keys, start=1)}
        return keys.map(lambda key: lookup.get(key, np.nan)).astype(float)


class MergeAxis(_CategoricalAxis):
    """
    Class for the merge-only axis: label sets become category key tick labels.
    """

    kind = "merge"

    def __init__(self, *, none_label: str = "(none)", **kwargs: Any) -> None:
        """
        Initializes the MergeAxis instance.

        Kwargs:
            none_label (str): Tick text for the empty category. Defaults to "(none)".
            **kwargs: Shared axis options (sep, order_by, sets, n_intersections, n_sets,
                intersections, reverse, position, name, style, strict).
        """
        super().__init__(**kwargs)
        self.none_label = none_label

    def build(
        self,
        values: Any,
        *,
        weights: Optional[Sequence[float]] = None,
        merged: bool = False,
    ) -> AxisBuild:
        """
        Collapses, aggregates, and selects categories.

        Args:
            values (Any): Label set per observation.

        Kwargs:
            weights (Optional[Sequence[float]]): Per-observation weights. Defaults to None.
            merged (bool): Whether values are already category keys. Defaults to False.

        Returns:
            AxisBuild: Build without a matrix layout.
        """
        keys, selection = self._build(values, weights, merged)
        return AxisBuild(
            self.kind,
            selection,
            None,
            keys,
            self._observation_positions(keys, selection),
            self.sep,
            merged,
        )

    def apply(self, ax: plt.Axes, build: AxisBuild) -> Dict[str, plt.Axes]:
        """
        Writes category keys as tick labels on the categorical axis of `ax`.

        Args:
            ax (plt.Axes): Main axes.
            build (AxisBuild): Result of `build`.

        Returns:
            Dict[str, plt.Axes]: {"main": ax}.
        """
        labels = [self.none_label if key == EMPTY_KEY else key for key in build.keys]
        AxesRenderer(
            "category_ticks",
            positions=list(build.positions),
            labels=labels,
            position=self.position,
        ).render(ax, build.frame, self.style)
        AxesRenderer("axis_title", title=self.name, position=self.position).render(
            ax, build.frame, self.style
        )
        return {"main": ax}


class CombMatrixAxis(_CategoricalAxis):
    """
    Class for the combination-matrix axis: tick labels are replaced by a panel of
    label rows and category columns, pixel-aligned with the main axes.
    """

    kind = "combmatrix"

    def __init__(
        self,
        *,
        levels: Optional[Sequence[str]] = None,
        row_order: str = "frequency",
        override_plotting_function: Optional[OverrideFunction] = None,
        **kwargs: Any,
    ) -> None:
        """
        Initializes the CombMatrixAxis instance.

        Kwargs:
            levels (Optional[Sequence[str]]): Explicit row order and label universe; takes
                precedence over the order of `sets`, and `n_sets` caps within it.
                Defaults to None.
            row_order (str): Row order when neither `levels` nor `sets` is given,
                "frequency" or "input". Defaults to "frequency".
            override_plotting_function (Optional[OverrideFunction]): Function mapping the
                layout table to matplotlib Artists, replacing the default renderer.
                Defaults to None.
            **kwargs: Shared axis options (sep, order_by, sets, n_intersections, n_sets,
                intersections, reverse, position, name, style, strict).
        """
        super().__init__(**kwargs)
        if row_order not in ROW_ORDERS:
            raise ValueError(f"row_order must be one of {ROW_ORDERS}, got {row_order!r}")
        if isinstance(levels, str):
            raise TypeError("levels must be a sequence of labels, not a string")
        self.levels = tuple(levels) if levels is not None else None
        self.row_order = row_order
        self.override_plotting_function = override_plotting_function
        if override_plotting_function is not None:
            self._renderer: Any = OverrideRenderer(override_plotting_function, owner=repr(self))
        else:
            self._renderer = CombMatrixRenderer()

    def config(self) -> Dict[str, Any]:
        cfg = super().config()
        cfg["levels"] = self.levels
        cfg["row_order"] = self.row_order
        if self.override_plotting_function is not None:
            cfg["override_plotting_function"] = getattr(
                self.override_plotting_function, "__name__", repr(self.override_plotting_function)
            )
        return cfg

    def _levels_config(self) -> SelectionConfig:
        """
        Returns the selection options with `levels` as the label universe. Labels
        outside `sets` are dropped from `levels`; `n_sets` then caps within it.

        Returns:
            SelectionConfig: Options used by `build`.
        """
        config = self.selection_config
        if self.levels is None:
            return config
        allowed = set(config.sets) if config.sets is not None else None
        bound = tuple(label for label in self.levels if allowed is None or label in allowed)
        return replace(config, sets=bound)

    def build(
        self,
        values: Any,
        *,
        weights: Optional[Sequence[float]] = None,
        merged: bool = False,
    ) -> AxisBuild:
        """
        Collapses, aggregates, selects, and lays out the combination matrix.

        Args:
            values (Any): Label set per observation.

        Kwargs:
            weights (Optional[Sequence[float]]): Per-observation weights. Defaults to None.
            merged (bool): Whether values are already category keys joined by `sep`. Defaults to False.

        Returns:
            AxisBuild: Build with a fresh LayoutFrame.
        """
        keys, selection = self._build(values, weights, merged, self._levels_config())
        frame = compute_layout(selection.records, selection.label_order, row_order=self.row_order)
        return AxisBuild(
            self.kind,
            selection,
            frame,
            keys,
            self._observation_positions(keys, selection),
            self.sep,
            merged,
        )

    def apply(self, ax: plt.Axes, build: AxisBuild) -> Dict[str, plt.Axes]:
        """
        Replaces the categorical tick labels of `ax` with the combination-matrix panel.

        Args:
            ax (plt.Axes): Main axes.
            build (AxisBuild): Result of `build`.

        Returns:
            Dict[str, plt.Axes]: {"main": ax, "matrix": panel axes}.

        Raises:
            ValueError: If `build` has no layout frame.
            AlignmentViolation: If the panel cannot be aligned with `ax`.
            MisconfiguredOverride: If the override does not return drawables.
        """
        frame = build.frame
        if frame is None:
            raise ValueError("CombMatrixAxis.apply requires a build with a layout frame")
        layout = PanelLayoutManager(self.position, config=self.config())
        size = max(frame.n_rows, 1) * float(self.style.get("row_height"))
        pad = float(self.style.get("panel_pad"))
        extra = 0.3 if self.name else 0.0
        layout.reserve_space(ax, size, pad, extra)

        AxesRenderer(
            "category_ticks",
            positions=list(build.positions),
            labels=None,
            position=self.position,
        ).render(ax, frame, self.style)
        panel = layout.attach(ax, layout.compute_bounds(ax, size, pad))

        self._renderer.render(panel, frame, self.style, orientation=layout.orientation)
        AxesRenderer("panel_frame", position=self.position).render(panel, frame, self.style)
        AxesRenderer("row_labels", position=self.position).render(panel, frame, self.style)
        AxesRenderer("axis_title", title=self.name, position=self.position).render(
            panel, frame, self.style
        )
        return {"main": ax, "matrix": panel}
