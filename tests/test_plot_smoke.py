"""
tests/test_plot_smoke
~~~~~~~~~~~~~~~~~~~~~
"""

import matplotlib.pyplot as plt
import numpy as np
import pytest

from upsetaxis import CombMatrixAxis, MergeAxis, UpSetPlotter


def _use_agg_backend():
    """
    Configures Matplotlib to use the Agg backend for tests.

    Returns:
        Any: Matplotlib pyplot module with Agg backend active.
    """
    matplotlib = pytest.importorskip("matplotlib")
    matplotlib.use("Agg", force=True)
    return plt


def test_plotter_smoke(movies_df, tmp_path):
    """
    Ensures UpSetPlotter can render and save a bar plot with a matrix axis.
    """
    plt = _use_agg_backend()
    plotter = (
        UpSetPlotter(movies_df, "genres")
        .set_axis(CombMatrixAxis(name="Genres"))
        .plot_bars()
        .plot_points("rating")
        .plot_title("Movies")
        .set_ylabel("Count")
    )
    fig, axes = plotter.render()
    try:
        assert set(axes) == {"main", "matrix"}
        heights = [p.get_height() for p in axes["main"].patches]
        assert heights == plotter.build_.counts.tolist()
        plotter.save(tmp_path / "upset.png")
        assert (tmp_path / "upset.png").exists()
    finally:
        plt.close(fig)


@pytest.mark.api
def test_plotter_requires_layers(movies_df):
    """
    Ensures UpSetPlotter refuses to render with no declared layers.
    """
    _use_agg_backend()
    with pytest.raises(RuntimeError):
        UpSetPlotter(movies_df, "genres").render()


@pytest.mark.api
def test_plotter_requires_known_column(movies_df):
    """
    Ensures the list-valued column must exist.
    """
    with pytest.raises(ValueError):
        UpSetPlotter(movies_df, "tags")
    with pytest.raises(ValueError):
        UpSetPlotter(movies_df, "genres").plot_bars(value="budget")


@pytest.mark.api
def test_plotter_bars_sum_values(movies_df):
    """
    Ensures bars sum `value` per category when given.
    """
    plt = _use_agg_backend()
    plotter = UpSetPlotter(movies_df, "genres").plot_bars(value="rating")
    fig, axes = plotter.render()
    try:
        heights = [p.get_height() for p in axes["main"].patches]
        # Order: Action-Drama (7.0 + 8.0), Drama (6.0 + 7.5), then "" and Comedy
        assert np.allclose(heights, [15.0, 13.5, 5.0, 6.5])
    finally:
        plt.close(fig)


@pytest.mark.api
def test_plotter_rebuilds_on_every_render(movies_df):
    """
    Ensures each render produces a fresh build.
    """
    plt = _use_agg_backend()
    plotter = UpSetPlotter(movies_df, "genres").plot_bars()
    fig1, _axes1 = plotter.render()
    first = plotter.build_
    fig2, _axes2 = plotter.render()
    try:
        assert plotter.build_ is not first
        assert plotter.build_.frame is not first.frame
        assert plotter.build_.keys == first.keys
    finally:
        plt.close(fig1)
        plt.close(fig2)


@pytest.mark.api
def test_plotter_merge_axis_horizontal_bars(movies_df):
    """
    Ensures a merge-only axis on the left renders horizontal bars.
    """
    plt = _use_agg_backend()
    plotter = (
        UpSetPlotter(movies_df["genres"])
        .set_axis(MergeAxis(position="left", order_by="none"))
        .plot_bars()
    )
    fig, axes = plotter.render()
    try:
        fig.canvas.draw()
        labels = [t.get_text() for t in axes["main"].get_yticklabels()]
        assert labels == ["Action-Drama", "Drama", "(none)", "Comedy"]
    finally:
        plt.close(fig)


def test_plotter_show_smoke(movies_df):
    """
    Ensures show() renders without opening a window.
    """
    plt = _use_agg_backend()
    plt_show = plt.show
    plt.show = lambda *args, **kwargs: None
    try:
        UpSetPlotter(movies_df, "genres").plot_bars().show()
    finally:
        plt.show = plt_show
        plt.close("all")
