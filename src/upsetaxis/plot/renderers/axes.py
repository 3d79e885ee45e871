"""Axis label and tick renderers."""

from __future__ import annotations

from typing import Any, Optional

import matplotlib.pyplot as plt
import numpy as np


class AxesRenderer:
    """
    Class for rendering ticks, row labels, and titles around the matrix panel.
    """

    def __init__(self, kind: str, **kwargs: Any) -> None:
        """
        Initializes the AxesRenderer instance.
        """
        self.kind = kind
        self.kwargs = dict(kwargs)

    def render(
        self,
        ax: plt.Axes,
        frame: Any,
        style: Any,
        **kwargs: Any,
    ) -> None:
        if self.kind == "panel_frame":
            self._render_panel_frame(ax, frame)
            return
        if self.kind == "row_labels":
            self._render_row_labels(ax, frame, style)
            return
        if self.kind == "category_ticks":
            self._render_category_ticks(ax, style)
            return
        if self.kind == "axis_title":
            self._render_axis_title(ax, style)
            return
        raise NotImplementedError(f"Unknown axes layer: {self.kind}")

    @property
    def _horizontal(self) -> bool:
        return self.kwargs.get("position", "bottom") in ("bottom", "top")

    def _render_panel_frame(self, ax: plt.Axes, frame: Any) -> None:
        n = max(frame.n_rows, 1)
        for spine in ax.spines.values():
            spine.set_visible(False)
        ax.grid(False)
        if self._horizontal:
            ax.set_ylim(n - 0.5, -0.5)
            ax.tick_params(axis="x", which="both", bottom=False, top=False,
                           labelbottom=False, labeltop=False)
        else:
            ax.set_xlim(-0.5, n - 0.5)
            ax.tick_params(axis="y", which="both", left=False, right=False,
                           labelleft=False, labelright=False)

    def _render_row_labels(self, ax: plt.Axes, frame: Any, style: Any) -> None:
        labels = list(frame.labels)
        ticks = np.arange(len(labels))
        show = style.get("label_show", True)
        if not show and not style.get("label_make_space", True):
            labels = [""] * len(labels)
        color = style.get("label_color") or style.get("text_color", "black")
        fontsize = self.kwargs.get("fontsize", style.get("label_fontsize", 9))

        if self._horizontal:
            ax.set_yticks(ticks)
            texts = ax.set_yticklabels(labels, fontsize=fontsize, color=color)
            ax.tick_params(axis="y", which="both", length=0)
        else:
            ax.set_xticks(ticks)
            texts = ax.set_xticklabels(labels, fontsize=fontsize, color=color, rotation=90)
            ax.tick_params(axis="x", which="both", length=0)
        # Hidden labels keep their extent so the panel reserves the same space
        if not show:
            for text in texts:
                text.set_alpha(0.0)

    def _render_category_ticks(self, ax: plt.Axes, style: Any) -> None:
        positions = self.kwargs.get("positions", [])
        labels: Optional[list] = self.kwargs.get("labels", None)
        n = len(positions)
        lo, hi = (0.5, n + 0.5) if n else (0.0, 1.0)
        if self._horizontal:
            ax.set_xlim(lo, hi)
            ax.set_xticks(positions)
            if labels is None:
                ax.tick_params(axis="x", which="both", labelbottom=False, labeltop=False)
                ax.set_xlabel("")
            else:
                ax.set_xticklabels(
                    labels,
                    rotation=self.kwargs.get("rotation", style.get("merge_label_rotation", 90)),
                    fontsize=style.get("label_fontsize", 9),
                )
                if self.kwargs.get("position") == "top":
                    ax.xaxis.tick_top()
        else:
            ax.set_ylim(lo, hi)
            ax.set_yticks(positions)
            if labels is None:
                ax.tick_params(axis="y", which="both", labelleft=False, labelright=False)
                ax.set_ylabel("")
            else:
                ax.set_yticklabels(labels, fontsize=style.get("label_fontsize", 9))
                if self.kwargs.get("position") == "right":
                    ax.yaxis.tick_right()

    def _render_axis_title(self, ax: plt.Axes, style: Any) -> None:
        title = self.kwargs.get("title")
        if not title:
            return
        position = self.kwargs.get("position", "bottom")
        text_kwargs = {
            "fontsize": self.kwargs.get("fontsize", style.get("axis_title_fontsize", 11)),
            "color": self.kwargs.get("color", style.get("text_color", "black")),
        }
        if self._horizontal:
            ax.set_xlabel(title, **text_kwargs)
            ax.xaxis.set_label_position("top" if position == "top" else "bottom")
        else:
            ax.set_ylabel(title, **text_kwargs)
            ax.yaxis.set_label_position("right" if position == "right" else "left")
