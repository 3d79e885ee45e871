"""
upsetaxis/util/errors
"""

from __future__ import annotations


class UpSetAxisError(Exception):
    """
    Base class for errors raised by upsetaxis.
    """


class InvalidLabelError(UpSetAxisError, ValueError):
    """
    Raised in strict mode when a label cannot form an unambiguous category key.
    """


class MisconfiguredOverride(UpSetAxisError, TypeError):
    """
    Raised when an override plotting function does not return a drawable.
    """


class AlignmentViolation(UpSetAxisError, RuntimeError):
    """
    Raised when the matrix panel cannot be aligned with the main panel.
    """
