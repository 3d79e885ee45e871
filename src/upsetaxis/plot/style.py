"""
upsetaxis/plot/style
~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional, Sequence, TypeAlias, TypedDict, Union

# Type alias for style values
StyleValue: TypeAlias = Union[
    str,
    float,
    int,
    bool,
    None,
    Sequence[float],
    Mapping[str, float],
]


class StyleDefaults(TypedDict):
    """
    Type class for combination-matrix style defaults.
    """

    figsize: tuple[float, float]
    point_color_on: str
    point_color_off: str
    point_size: float
    line_color: Optional[str]
    line_width: float
    stripe: bool
    stripe_color_one: str
    stripe_color_two: str
    label_fontsize: float
    label_color: Optional[str]
    label_show: bool
    label_make_space: bool
    row_height: float
    panel_pad: float
    merge_label_rotation: float
    bar_color: str
    point_alpha: float
    text_color: str
    title_fontsize: float
    title_pad: float
    axis_title_fontsize: float


DEFAULT_STYLE: StyleDefaults = {
    # Figure size used when the plotter creates the figure
    "figsize": (8, 6),
    # Matrix points (observed / not observed)
    "point_color_on": "black",
    "point_color_off": "#E0E0E0",
    "point_size": 30.0,
    # Connecting segment; None reuses point_color_on
    "line_color": None,
    "line_width": 1.2,
    # Alternating row background
    "stripe": True,
    "stripe_color_one": "white",
    "stripe_color_two": "#F7F7F7",
    # Row labels
    "label_fontsize": 9,
    "label_color": None,
    "label_show": True,
    # Keep label space when labels are hidden so panels stay aligned across plots
    "label_make_space": True,
    # Matrix panel geometry (inches)
    "row_height": 0.2,
    "panel_pad": 0.05,
    # Merge-only axis tick labels
    "merge_label_rotation": 90.0,
    # Plotter layers
    "bar_color": "#4c4c4c",
    "point_alpha": 0.6,
    # Text
    "text_color": "black",
    "title_fontsize": 14,
    "title_pad": 10,
    "axis_title_fontsize": 11,
}


class StyleConfig:
    """
    Class for storing plot style defaults and overrides.
    """

    def __init__(self, defaults: Optional[Mapping[str, StyleValue]] = None) -> None:
        """
        Initializes the StyleConfig instance.

        Args:
            defaults (Optional[Mapping[str, StyleValue]]): Base style defaults. Defaults to None.
        """
        if defaults is None:
            defaults = DEFAULT_STYLE
        self._defaults: Dict[str, StyleValue] = dict(defaults)
        self._overrides: Dict[str, StyleValue] = {}

    def get(self, key: str, default: Optional[StyleValue] = None) -> StyleValue:
        """
        Gets a style value with override priority.

        Args:
            key (str): Style key.
            default (Optional[StyleValue]): Default value if key not found. Defaults to None.

        Returns:
            StyleValue: Resolved style value.
        """
        if key in self._overrides:
            return self._overrides[key]
        return self._defaults.get(key, default)

    def set(self, key: str, value: StyleValue) -> None:
        """
        Overrides a style value.

        Args:
            key (str): Style key.
            value (StyleValue): Style value to set.

        Raises:
            KeyError: If `key` is not a known style key.
        """
        if key not in self._defaults:
            raise KeyError(f"Unknown style key: {key!r}")
        self._overrides[key] = value

    def update(self, overrides: Mapping[str, StyleValue]) -> None:
        """
        Applies multiple overrides at once.

        Args:
            overrides (Mapping[str, StyleValue]): Mapping of style keys to values.
        """
        for key, value in overrides.items():
            self.set(key, value)

    def copy(self) -> StyleConfig:
        """
        Returns an independent copy with the same defaults and overrides.

        Returns:
            StyleConfig: Copied style.
        """
        other = StyleConfig(self._defaults)
        other._overrides = dict(self._overrides)
        return other

    def as_dict(self) -> Dict[str, StyleValue]:
        """
        Returns a merged view of defaults and overrides.

        Returns:
            Dict[str, StyleValue]: Merged style dictionary.
        """
        merged = dict(self._defaults)
        merged.update(self._overrides)
        return merged

    def __getitem__(self, key: str) -> StyleValue:
        return self.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._overrides or key in self._defaults


def resolve_style(style: Union[StyleConfig, Mapping[str, StyleValue], None]) -> StyleConfig:
    """
    Resolves a StyleConfig from an existing config, a mapping of overrides, or None.

    Args:
        style (Union[StyleConfig, Mapping[str, StyleValue], None]): Style input.

    Returns:
        StyleConfig: Independent style config.

    Raises:
        TypeError: If `style` is of an unsupported type.
    """
    if style is None:
        return StyleConfig()
    if isinstance(style, StyleConfig):
        return style.copy()
    if isinstance(style, Mapping):
        config = StyleConfig()
        config.update(style)
        return config
    raise TypeError("style must be a StyleConfig, a mapping of overrides, or None")
