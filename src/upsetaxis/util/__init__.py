"""
upsetaxis/util
~~~~~~~~~~~~~~
"""

from .errors import AlignmentViolation, InvalidLabelError, MisconfiguredOverride, UpSetAxisError
from .warnings import InvalidLabelWarning, warn

__all__ = [
    "AlignmentViolation",
    "InvalidLabelError",
    "InvalidLabelWarning",
    "MisconfiguredOverride",
    "UpSetAxisError",
    "warn",
]
