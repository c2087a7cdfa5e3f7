"""Exception types raised by geodetics"""

__all__ = ['GeodeticsError', 'InvalidEllipsoid', 'IterationLimitExceeded']

from typing import Tuple


class GeodeticsError(Exception):
    """Base class for all geodetics errors"""


class InvalidEllipsoid(GeodeticsError, ValueError):
    """Raised when ellipsoid parameters do not describe an oblate ellipsoid"""


class IterationLimitExceeded(GeodeticsError, ValueError):
    """
    Raised when an iterative geodesic solution fails to converge.

    Args:
        operation:
            The name of the failing operation, e.g. 'inverse' or 'direct'

        inputs:
            The arguments of the failing call, kept for diagnostics

        iterations:
            The iteration cap that was reached
    """

    def __init__(self, operation: str, inputs: Tuple[float, ...], iterations: int):
        self.operation = operation
        self.inputs = tuple(inputs)
        self.iterations = iterations
        super().__init__(
            f'Too many iterations ({iterations}) calculating {operation}: '
            + ' '.join(map(str, self.inputs))
        )
