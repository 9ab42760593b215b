"""
Error Types
===========

Exceptions shared by the signal model and the comparison renderer.
"""


class InvalidParameterError(ValueError):
    """A signal parameter, duration or configuration value is out of range."""


class RenderError(RuntimeError):
    """The comparison figure could not be drawn or written to disk."""
