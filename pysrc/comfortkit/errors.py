"""comfortkit error types for actionable error messages.

These exceptions say which solver or parameter failed and why, rather than
surfacing a bare ``StopIteration`` or ``ValueError`` from deep inside a model.

Example:
    try:
        result = comfortkit.two_nodes(tdb=25, tr=25, v=0.3, rh=50, met=1.2, clo=0.5)
    except comfortkit.ConvergenceError as e:
        print(f"{e.solver} gave up after {e.max_iterations} iterations")
    except comfortkit.InvalidInputError as e:
        print(f"Bad value for '{e.parameter}': {e.value}")
"""

from __future__ import annotations


class ComfortError(Exception):
    """Base class for all comfortkit errors."""

    pass


class ConvergenceError(ComfortError):
    """Raised when a bounded iterative solver exceeds its iteration cap.

    Fatal: the model has no fallback value and the caller gets the error.

    Attributes:
        solver: Name of the solver that failed (e.g. "clothing temperature", "SET").
        max_iterations: The iteration cap that was hit.
        residual: Last step size or residual seen before giving up (optional).
    """

    def __init__(self, solver: str, max_iterations: int, residual: float | None = None):
        self.solver = solver
        self.max_iterations = max_iterations
        self.residual = residual
        message = f"Max iterations exceeded in {solver} solver ({max_iterations} iterations)"
        if residual is not None:
            message += f", last step {residual:.6g}"
        super().__init__(message)


class InvalidInputError(ComfortError, ValueError):
    """Raised for unsupported enumerated options or misaligned inputs.

    Also a ``ValueError`` so generic validation handlers still catch it.

    Attributes:
        parameter: Name of the offending parameter (e.g. "body_position").
        value: The value that was rejected.
        reason: Why the value is invalid (optional).
    """

    def __init__(self, parameter: str, value: object, reason: str | None = None):
        self.parameter = parameter
        self.value = value
        self.reason = reason
        message = f"Invalid value for '{parameter}': {value!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class ConfigurationError(ComfortError):
    """Raised when configuration is invalid or inconsistent.

    Attributes:
        parameter: The problematic parameter name.
        reason: Why the configuration is invalid.
    """

    def __init__(self, parameter: str, reason: str):
        self.parameter = parameter
        self.reason = reason
        message = f"Invalid configuration for '{parameter}': {reason}"
        super().__init__(message)
