"""Exceptions raised by mlp layers.

All of them subclass ``ValueError`` so callers that already guard array code
with ``except ValueError`` keep working.
"""


class MLPError(Exception):
    """Base class for errors raised by this package."""


class ConfigurationError(MLPError, ValueError):
    """A layer was constructed with an invalid id or length."""


class InvalidInputError(MLPError, ValueError):
    """Input or label vector is empty, not 1-D, or has the wrong size."""


class DimensionMismatchError(MLPError, ValueError):
    """Label vector size does not match the layer's output buffer."""


__all__ = [
    "MLPError",
    "ConfigurationError",
    "InvalidInputError",
    "DimensionMismatchError",
]
