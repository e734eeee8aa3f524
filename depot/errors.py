from __future__ import annotations


class ProjectionError(Exception):
    """Base class for errors raised by the projection engine."""


class ValidationError(ProjectionError, ValueError):
    """Raised when input cannot be turned into a projection snapshot."""


class ComputationError(ProjectionError, ArithmeticError):
    """Raised when compounding produces a non-finite value."""
