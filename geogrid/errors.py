import geogrid


class GeoGridError(Exception):
    """Base class for all geogrid-specific exceptions.
    It automatically appends the geogrid version to help with debugging reports.
    """

    def __init__(self, message: str):
        self.geogrid_version = getattr(geogrid, "__version__", "unknown")
        # Store the original message cleanly for programmatic access
        self.original_message = message
        full_message = f"[geogrid {self.geogrid_version}] {message}"
        super().__init__(full_message)


# Configuration Errors
class ConfigurationError(GeoGridError):
    """Raised when globe parameters are invalid or missing."""

    def __init__(self, param_name: str = None, reason: str = None):
        # Allow flexible usage: raise ConfigurationError("Generic message")
        # OR: raise ConfigurationError("root_resolution", "must be positive")
        if param_name and reason:
            message = f"Invalid configuration for '{param_name}': {reason}"
            self.param_name = param_name
        else:
            message = param_name if param_name else "Invalid configuration"
            self.param_name = None

        super().__init__(message)


# Structural Errors
class StructuralError(GeoGridError):
    """Generic errors caused by misuse of the coordinate algebra.

    These are deterministic: retrying with the same inputs always fails the
    same way. Movement systems should treat them as "do not move this tick".
    """


class RootIndexError(StructuralError):
    """Raised when a root is built from an index outside ``0..5``."""

    def __init__(self, index):
        self.index = index
        message = f"Root index {index} is out of range; there are exactly 5 roots."
        super().__init__(message)


class OutOfBoundsError(StructuralError):
    """Raised when a position lies outside its root quad at the given resolution."""

    def __init__(self, pos, resolution):
        self.pos = pos
        self.resolution = resolution
        message = f"Position {pos} is outside its root at resolution {resolution}."
        super().__init__(message)


class IllegalDirectionError(StructuralError):
    """Raised when asked to step or turn while facing a cell vertex."""

    def __init__(self, dir):
        self.dir = dir
        message = f"{dir} points at a cell vertex, not at a neighboring cell."
        super().__init__(message)


class ChunkOriginError(StructuralError):
    """Raised when a position is not usable as an aligned chunk origin."""

    def __init__(self, pos, reason):
        self.pos = pos
        self.reason = reason
        message = f"{pos} is not a valid chunk origin: {reason}."
        super().__init__(message)


class MovementCaseError(StructuralError):
    """Raised when a boundary crossing matches none of the known cases."""
