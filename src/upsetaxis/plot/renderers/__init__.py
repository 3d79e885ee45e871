"""Matrix panel renderers."""

from .base import Renderer
from .axes import AxesRenderer
from .combmatrix import CombMatrixRenderer
from .override import OverrideRenderer

__all__ = [
    "AxesRenderer",
    "CombMatrixRenderer",
    "OverrideRenderer",
    "Renderer",
]
