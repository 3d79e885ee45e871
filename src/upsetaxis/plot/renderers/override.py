"""
upsetaxis/plot/renderers/override
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from collections.abc import Iterable as IterableABC
from typing import Any, Callable, List, TYPE_CHECKING

import matplotlib.pyplot as plt
import pandas as pd
from matplotlib.artist import Artist
from matplotlib.collections import Collection
from matplotlib.figure import FigureBase
from matplotlib.lines import Line2D
from matplotlib.patches import Patch

from ...util.errors import MisconfiguredOverride

if TYPE_CHECKING:
    from ..style import StyleConfig
    from ...core.layout import LayoutFrame

OverrideFunction = Callable[[pd.DataFrame], Any]


def _is_drawable(obj: Any) -> bool:
    return isinstance(obj, Artist) and not isinstance(obj, (plt.Axes, FigureBase))


class OverrideRenderer:
    """
    Class for rendering a matrix panel through a caller-supplied plotting function.

    The function receives a fresh copy of the layout's tabular projection on every
    call and must return a matplotlib Artist or an iterable of Artists, which are
    added to the panel in data coordinates.
    """

    def __init__(self, func: OverrideFunction, *, owner: str = "axis") -> None:
        """
        Initializes the OverrideRenderer instance.

        Args:
            func (OverrideFunction): Function mapping the layout table to drawables.

        Kwargs:
            owner (str): Description of the owning axis, used in error messages. Defaults to "axis".

        Raises:
            MisconfiguredOverride: If `func` is not callable.
        """
        if not callable(func):
            raise MisconfiguredOverride(
                f"override_plotting_function of {owner} must be callable, got {type(func).__name__}"
            )
        self.func = func
        self.owner = owner

    def _collect(self, result: Any) -> List[Artist]:
        """
        Validates the override's return value.

        Args:
            result (Any): Value returned by the override.

        Returns:
            List[Artist]: Artists to add.

        Raises:
            MisconfiguredOverride: If the value is not a drawable.
        """
        if _is_drawable(result):
            return [result]
        if isinstance(result, IterableABC) and not isinstance(result, (str, bytes, dict)):
            items = list(result)
            if all(_is_drawable(item) for item in items):
                return items
            bad = next(type(item).__name__ for item in items if not _is_drawable(item))
            raise MisconfiguredOverride(
                f"override_plotting_function of {self.owner} returned an iterable containing "
                f"{bad}; expected matplotlib Artists"
            )
        raise MisconfiguredOverride(
            f"override_plotting_function of {self.owner} returned {type(result).__name__}; "
            "expected a matplotlib Artist or an iterable of Artists"
        )

    def render(
        self,
        ax: plt.Axes,
        frame: LayoutFrame,
        style: StyleConfig,
        *,
        orientation: str = "horizontal",
    ) -> None:
        """
        Calls the override and adds its artists to the panel axes.

        Args:
            ax (plt.Axes): Panel axes.
            frame (LayoutFrame): Combination-matrix layout.
            style (StyleConfig): Style configuration (unused by overrides).

        Kwargs:
            orientation (str): "horizontal" or "vertical". Defaults to "horizontal".

        Raises:
            MisconfiguredOverride: If the override returns something that cannot be drawn.
        """
        artists = self._collect(self.func(frame.to_frame(orientation)))
        for artist in artists:
            try:
                if isinstance(artist, Collection):
                    ax.add_collection(artist, autolim=False)
                elif isinstance(artist, Line2D):
                    ax.add_line(artist)
                elif isinstance(artist, Patch):
                    ax.add_patch(artist)
                else:
                    ax.add_artist(artist)
            except (RuntimeError, ValueError) as exc:
                raise MisconfiguredOverride(
                    f"override_plotting_function of {self.owner} returned an artist that "
                    f"cannot be added to the matrix panel: {exc}"
                ) from exc
