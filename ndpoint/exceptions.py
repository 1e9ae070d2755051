"""Custom exception types to more accurately represent difficulties"""

__author__ = "ndpoint developers"

__all__ = [
    "ConfigurationValueError",
    "DimensionMismatchError",
    "DimensionalityError",
    "NdpointException",
]


class NdpointException(Exception):
    "General base for exceptional situations related to the specifics of this project"
    pass


class DimensionalityError(NdpointException):
    """Error subtype for when one or more dimensions of an object are unexpected"""
    pass


class DimensionMismatchError(DimensionalityError):
    """Error subtype for when two operands which must be the same length aren't"""

    def __init__(self, left_dim: int, right_dim: int, context: str = "Elementwise operation"):
        super().__init__(f"{context} requires equal dimensionality; got {left_dim} and {right_dim}")
        self.left_dim = left_dim
        self.right_dim = right_dim


class ConfigurationValueError(NdpointException):
    "Exception subtype for when something's wrong with a config file value"
    pass
