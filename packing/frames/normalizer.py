"""
Panel Frame Normalizer
======================

The packing oracle does not know which plane a panel lies in: it always
assumes the panel stands in the YZ plane with its normal along +X. This
module relabels a panel's available space into that (width, height,
length) convention.
"""

import numpy as np
from dataclasses import dataclass

from ..core.errors import DegenerateIntervalError
from ..core.panel import BuildableDir, NormalFace, PanelSurface


@dataclass
class NormalizedPanel:
    """
    Panel space in the oracle's convention.

    width:  base of the panel if it were stood up facing +X
    height: height of the panel if it were stood up facing +X
    length: how far away from the panel components may reach
    """
    width: np.ndarray
    height: np.ndarray
    length: np.ndarray

    @property
    def width_extent(self) -> float:
        """Absolute width handed to the oracle."""
        return float(abs(self.width[1] - self.width[0]))

    @property
    def length_extent(self) -> float:
        """Absolute length handed to the oracle."""
        return float(abs(self.length[1] - self.length[0]))

    @property
    def height_extent(self) -> float:
        """Signed height handed to the oracle."""
        return float(self.height[1] - self.height[0])


def check_interval(values, axis: str) -> np.ndarray:
    """
    Validate a [start, end] interval.

    Raises:
        DegenerateIntervalError: If the interval is not two finite,
            distinct endpoints
    """
    interval = np.atleast_1d(np.asarray(values, dtype=float))
    if interval.shape != (2,) or not np.all(np.isfinite(interval)):
        raise DegenerateIntervalError(axis, values)
    if interval[0] == interval[1]:
        raise DegenerateIntervalError(axis, values)
    return interval.copy()


def normalize_panel(surface: PanelSurface) -> NormalizedPanel:
    """
    Convert a panel surface to the oracle's (width, height, length).

    Args:
        surface: Surface the components are assigned to

    Returns:
        Signed width, height and length intervals

    Raises:
        DegenerateIntervalError: If any available interval is degenerate
    """
    x = check_interval(surface.available_x, 'available_x')
    y = check_interval(surface.available_y, 'available_y')
    z = check_interval(surface.available_z, 'available_z')

    if surface.buildable_dir == BuildableDir.XZ:
        # Reflect X so the +Y face keeps a right-handed sense after rotation
        width = -x if surface.normal_face == NormalFace.PLUS_Y else x
        return NormalizedPanel(width=width, height=z, length=y)
    if surface.buildable_dir == BuildableDir.YZ:
        return NormalizedPanel(width=y, height=z, length=x)
    if surface.buildable_dir == BuildableDir.XY:
        return NormalizedPanel(width=x, height=y, length=z)
    raise ValueError(f"Unknown buildable direction: {surface.buildable_dir}")
