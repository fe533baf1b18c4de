"""
Exception types raised by geodatum
"""

__all__ = [
    'ConvergenceError', 'DomainError', 'GeodeticError', 'InvalidParameterError'
]


class GeodeticError(Exception):
    """Base class for all geodatum errors"""


class InvalidParameterError(GeodeticError, ValueError):
    """Malformed ellipsoid, mismatched ellipsoids or an out-of-range angle"""


class ConvergenceError(GeodeticError, ArithmeticError):
    """An iterative solver exhausted its iteration bound"""

    def __init__(self, message: str, iterations: int = 0):
        super().__init__(message)
        self.iterations = iterations


class DomainError(GeodeticError, ValueError):
    """Input lies outside the region where a series expansion is valid"""
