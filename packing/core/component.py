"""
Component Model
===============

Physical items that get mounted on a panel: shape, size, mass and,
once placed, their location and orientation in the satellite body frame.
"""

import uuid
import numpy as np
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Tuple, Union

from .errors import UnsupportedShapeError


class Shape(Enum):
    """Supported component shapes."""
    RECTANGLE = "Rectangle"
    SPHERE = "Sphere"
    CONE = "Cone"
    CYLINDER = "Cylinder"

    @classmethod
    def parse(cls, value: Union['Shape', str]) -> 'Shape':
        """
        Convert a shape label to a Shape.

        Args:
            value: Shape member or its label (case-insensitive)

        Returns:
            Matching Shape

        Raises:
            UnsupportedShapeError: If the label names no supported shape
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for shape in cls:
                if shape.value.lower() == value.strip().lower():
                    return shape
        raise UnsupportedShapeError(value)


# Number of stored dimensions per shape:
# Rectangle (h, w, l), Sphere (r,), Cone (h, r1, r2), Cylinder (h, r)
DIMENSION_COUNT = {
    Shape.RECTANGLE: 3,
    Shape.SPHERE: 1,
    Shape.CONE: 3,
    Shape.CYLINDER: 2,
}


def _frozen_array(values, shape: Tuple[int, ...]) -> np.ndarray:
    arr = np.array(values, dtype=float).reshape(shape)
    arr.flags.writeable = False
    return arr


@dataclass(frozen=True, eq=False)
class Component:
    """
    A physical item to be placed on a panel.

    Records are immutable; the pipeline returns updated copies via placed().
    The uid is the stable key every pipeline stage uses, so two components
    may share a name.
    """
    name: str
    shape: Shape
    dimensions: Tuple[float, ...]
    mass: float
    subsystem: str = ""
    uid: str = field(default_factory=lambda: uuid.uuid4().hex)

    # Placement (None until placed)
    center_of_gravity: Optional[np.ndarray] = None
    vertices: Optional[np.ndarray] = None
    rotation_to_body_frame: Optional[np.ndarray] = None
    envelope: Optional[Tuple[float, float, float]] = None

    def __post_init__(self):
        shape = Shape.parse(self.shape)
        object.__setattr__(self, 'shape', shape)

        dims = tuple(float(d) for d in np.atleast_1d(np.asarray(self.dimensions, dtype=float)))
        if len(dims) != DIMENSION_COUNT[shape]:
            raise ValueError(
                f"{shape.value} '{self.name}' needs {DIMENSION_COUNT[shape]} "
                f"dimensions, got {len(dims)}"
            )
        if not all(np.isfinite(d) and d > 0 for d in dims):
            raise ValueError(f"Dimensions of '{self.name}' must be positive: {dims}")
        object.__setattr__(self, 'dimensions', dims)

        if not (np.isfinite(self.mass) and self.mass > 0):
            raise ValueError(f"Mass of '{self.name}' must be positive, got {self.mass}")

    @property
    def is_placed(self) -> bool:
        """Whether the component has a body-frame location."""
        return self.center_of_gravity is not None

    def placed(self,
               center_of_gravity: np.ndarray,
               rotation: np.ndarray,
               dimensions: Tuple[float, ...] = None,
               vertices: np.ndarray = None,
               envelope: Tuple[float, float, float] = None) -> 'Component':
        """
        Return a copy of this component stamped with a placement.

        Args:
            center_of_gravity: CG in satellite body frame
            rotation: Component-local to body frame rotation matrix
            dimensions: Replacement dimensions (defaults to current)
            vertices: 8x3 box corners in body frame (Rectangle only)
            envelope: Occupied bounding box (h, w, l) on the panel

        Returns:
            New placed Component
        """
        return replace(
            self,
            dimensions=self.dimensions if dimensions is None else dimensions,
            center_of_gravity=_frozen_array(center_of_gravity, (3,)),
            rotation_to_body_frame=_frozen_array(rotation, (3, 3)),
            vertices=None if vertices is None else _frozen_array(vertices, (8, 3)),
            envelope=None if envelope is None else tuple(float(e) for e in envelope),
        )
