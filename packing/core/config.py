"""
Packing Configuration
=====================

Parameters shared by every stage of the panel packing pipeline.
"""

from dataclasses import dataclass


@dataclass
class PackingConfig:
    """Complete packing configuration."""
    # Gap the oracle keeps between neighbouring rectangles [m]
    tolerance: float = 0.01

    # Reject oracle output that is not index-aligned with its input
    check_oracle_output: bool = True

    # Log a per-panel summary at INFO instead of DEBUG
    verbose: bool = False

    def __post_init__(self):
        """Validate configuration."""
        assert self.tolerance >= 0, "Tolerance must be non-negative"


def create_default_config() -> PackingConfig:
    """Create configuration with the standard 1 cm packing tolerance."""
    return PackingConfig(tolerance=0.01)
