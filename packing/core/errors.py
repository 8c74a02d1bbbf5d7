"""
Packing Errors
==============

Exception hierarchy for the panel packing pipeline.
"""


class PackingError(Exception):
    """Base class for all packing pipeline errors."""


class UnsupportedShapeError(PackingError, ValueError):
    """Component shape tag is not one of the supported shapes."""

    def __init__(self, shape, component: str = None):
        self.shape = shape
        self.component = component
        where = f" (component '{component}')" if component else ""
        super().__init__(f"Unsupported component shape: {shape!r}{where}")


class DegenerateIntervalError(PackingError, ValueError):
    """Panel interval has zero or ambiguous extent."""

    def __init__(self, axis: str, interval):
        self.axis = axis
        self.interval = interval
        super().__init__(f"Degenerate panel interval on {axis}: {interval!r}")


class OracleContractError(PackingError):
    """Packing oracle returned output that is not index-aligned with its input."""
