"""
partitionwm.core.errors - Exception hierarchy.

Every condition a key action can recover from derives from
PartitionWMError. The action runner turns these into user feedback;
anything else is logged with its traceback.
"""

from __future__ import annotations


class PartitionWMError(Exception):
    """Base class for recoverable partitionwm failures."""

    # Short text shown in the alert overlay
    feedback: str = "Error"

    def __init__(self, message: str = "", feedback: str | None = None) -> None:
        super().__init__(message or self.feedback)
        if feedback is not None:
            self.feedback = feedback


class UnknownPartitionError(PartitionWMError, KeyError):
    """Raised when a partition name is not in the catalog."""

    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(
            f"Unknown partition: {name!r}",
            feedback=f"Unknown partition\n{name}",
        )

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class NoFocusedWindowError(PartitionWMError):
    """Raised when there is no focused window to act upon."""

    feedback = "Nothing to move"


class NoScreensError(PartitionWMError):
    """Raised when the host reports no screens at all."""

    feedback = "No screens"


class NoOtherScreensError(PartitionWMError):
    """Raised when a screen move is requested with a single screen."""

    feedback = "No other screens"


class ConfigError(PartitionWMError, ValueError):
    """Raised when the settings file holds invalid values."""

    feedback = "Invalid configuration"
