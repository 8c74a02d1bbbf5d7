"""
Shape Projection
================

Converts components of any supported shape into the bounding rectangles
the packing oracle works with. Components are assumed to be mounted along
their own 'zy' axes, so the rectangle height runs along the panel height.
"""

import logging
import numpy as np
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional, Tuple

from ..core.component import Component, Shape
from ..core.errors import UnsupportedShapeError

logger = logging.getLogger(__name__)

Dims = Tuple[float, float, float]


@dataclass(frozen=True, eq=False)
class RectangleRecord:
    """Oracle-facing rectangle standing in for one component."""
    uid: str
    dimensions: Dims  # (h, w, l)
    mass: float
    # Filled in from the oracle, oracle-local frame
    center_of_gravity: Optional[np.ndarray] = None
    fit: bool = False

    @property
    def height(self) -> float:
        return self.dimensions[0]


def cone_bounding_width(r1: float, r2: float) -> float:
    """Side of the square bounding the larger of a cone's two bases."""
    return 2 * max(r1, r2)


def _rectangle(dims: Tuple[float, ...]) -> Dims:
    h, w, l = dims
    return h, w, l


def _sphere(dims: Tuple[float, ...]) -> Dims:
    r = dims[0]
    return 2 * r, 2 * r, 2 * r


def _cone(dims: Tuple[float, ...]) -> Dims:
    h, r1, r2 = dims
    side = cone_bounding_width(r1, r2)
    return h, side, side


def _cylinder(dims: Tuple[float, ...]) -> Dims:
    h, r = dims
    return h, 2 * r, 2 * r


_PROJECTORS: Dict[Shape, Callable[[Tuple[float, ...]], Dims]] = {
    Shape.RECTANGLE: _rectangle,
    Shape.SPHERE: _sphere,
    Shape.CONE: _cone,
    Shape.CYLINDER: _cylinder,
}

assert set(_PROJECTORS) == set(Shape), "Every shape needs a rectangle projection"


def bounding_dimensions(shape: Shape, dimensions: Tuple[float, ...], name: str = None) -> Dims:
    """
    Bounding rectangle (h, w, l) of a shape.

    Raises:
        UnsupportedShapeError: If the shape has no projection
    """
    try:
        project = _PROJECTORS[shape]
    except (KeyError, TypeError):
        raise UnsupportedShapeError(shape, name) from None
    return project(dimensions)


def project_component(component: Component) -> RectangleRecord:
    """
    Project a single component onto its bounding rectangle.

    Args:
        component: Component to convert

    Returns:
        Rectangle record with (h, w, l) and mass
    """
    dims = bounding_dimensions(component.shape, component.dimensions, component.name)
    return RectangleRecord(uid=component.uid, dimensions=dims, mass=component.mass)


def project_components(components: Iterable[Component]) -> Dict[str, RectangleRecord]:
    """
    Project a batch of components, keyed by uid in input order.

    The whole batch fails if any component has an unsupported shape.

    Raises:
        UnsupportedShapeError: On the first unsupported shape
        ValueError: If two components share a uid
    """
    rectangles: Dict[str, RectangleRecord] = {}
    for component in components:
        if component.uid in rectangles:
            raise ValueError(f"Duplicate component uid: {component.uid}")
        rectangles[component.uid] = project_component(component)

    logger.debug("Projected %d components to rectangles", len(rectangles))
    return rectangles
