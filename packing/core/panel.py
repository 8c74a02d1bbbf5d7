"""
Panel Surfaces
==============

Mounting targets: structure panels and the space available on each of
their surfaces, expressed in the satellite body frame.
"""

import numpy as np
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Union


class BuildableDir(Enum):
    """Body-frame plane a panel occupies."""
    XY = "XY"
    XZ = "XZ"
    YZ = "YZ"


class NormalFace(Enum):
    """Signed body axis the panel's outward normal points along."""
    PLUS_X = "+X"
    MINUS_X = "-X"
    PLUS_Y = "+Y"
    MINUS_Y = "-Y"
    PLUS_Z = "+Z"
    MINUS_Z = "-Z"

    @property
    def axis(self) -> int:
        """Body axis index (0=X, 1=Y, 2=Z)."""
        return "XYZ".index(self.value[1])

    @property
    def sign(self) -> int:
        """+1 or -1."""
        return 1 if self.value[0] == "+" else -1

    @property
    def vector(self) -> np.ndarray:
        """Unit normal in body frame."""
        v = np.zeros(3)
        v[self.axis] = self.sign
        return v


def _as_interval(values) -> np.ndarray:
    return np.atleast_1d(np.asarray(values, dtype=float)).copy()


@dataclass
class PanelSurface:
    """
    One mountable surface of a structure panel.

    Each available interval is [start, end] along a body axis. A descending
    interval (end < start) encodes the direction in which components are
    stacked; start is always the panel's origin corner on that axis.
    """
    buildable_dir: Union[BuildableDir, str]
    normal_face: Union[NormalFace, str]
    available_x: np.ndarray
    available_y: np.ndarray
    available_z: np.ndarray

    def __post_init__(self):
        self.buildable_dir = BuildableDir(self.buildable_dir)
        self.normal_face = NormalFace(self.normal_face)
        self.available_x = _as_interval(self.available_x)
        self.available_y = _as_interval(self.available_y)
        self.available_z = _as_interval(self.available_z)

    @property
    def origin(self) -> np.ndarray:
        """Panel origin corner in body frame."""
        return np.array([self.available_x[0], self.available_y[0], self.available_z[0]])


@dataclass
class Structure:
    """A structural panel carrying one or more mountable surfaces."""
    name: str
    surfaces: List[PanelSurface] = field(default_factory=list)

    def surface(self, index: int) -> PanelSurface:
        """Get surface by index."""
        return self.surfaces[index]
