"""
Shape Reconstruction
====================

Turns placed rectangles back into the components they stand for, with
dimensions, centre of gravity, vertices and body-frame rotation.
"""

import logging
import numpy as np
from typing import Callable, Dict, List, Mapping, Sequence

from ..core.component import Component, Shape
from ..core.errors import UnsupportedShapeError
from .projection import RectangleRecord, cone_bounding_width

logger = logging.getLogger(__name__)


def box_vertices(h: float, w: float, l: float) -> np.ndarray:
    """
    Corners of an (h, w, l) box centred on the origin.

    Length runs along local X, width along Y and height along Z. The first
    four corners form the -h/2 face, the last four the +h/2 face, each
    ordered (-l,-w), (-l,+w), (+l,+w), (+l,-w).

    Returns:
        8x3 array of corners in component-local axes
    """
    return np.array([
        [-l / 2, -w / 2, -h / 2],
        [-l / 2, w / 2, -h / 2],
        [l / 2, w / 2, -h / 2],
        [l / 2, -w / 2, -h / 2],
        [-l / 2, -w / 2, h / 2],
        [-l / 2, w / 2, h / 2],
        [l / 2, w / 2, h / 2],
        [l / 2, -w / 2, h / 2],
    ])


def _rectangle(component: Component, rectangle: RectangleRecord,
               cg: np.ndarray, rotation: np.ndarray) -> Component:
    h, w, l = rectangle.dimensions
    # CG is already in body frame, only the local corners need rotating
    vertices = (rotation @ box_vertices(h, w, l).T).T + cg
    return component.placed(cg, rotation, dimensions=(h, w, l),
                            vertices=vertices, envelope=(h, w, l))


def _sphere(component: Component, rectangle: RectangleRecord,
            cg: np.ndarray, rotation: np.ndarray) -> Component:
    h = rectangle.height
    return component.placed(cg, rotation, dimensions=(h / 2,), envelope=(h, h, h))


def _cone(component: Component, rectangle: RectangleRecord,
          cg: np.ndarray, rotation: np.ndarray) -> Component:
    h, r1, r2 = component.dimensions
    side = cone_bounding_width(r1, r2)
    return component.placed(cg, rotation, envelope=(h, side, side))


def _cylinder(component: Component, rectangle: RectangleRecord,
              cg: np.ndarray, rotation: np.ndarray) -> Component:
    h, r = component.dimensions
    return component.placed(cg, rotation, dimensions=(h, r), envelope=(h, 2 * r, 2 * r))


_RECONSTRUCTORS: Dict[Shape, Callable[..., Component]] = {
    Shape.RECTANGLE: _rectangle,
    Shape.SPHERE: _sphere,
    Shape.CONE: _cone,
    Shape.CYLINDER: _cylinder,
}

assert set(_RECONSTRUCTORS) == set(Shape), "Every shape needs a reconstruction"


def reconstruct_component(component: Component,
                          rectangle: RectangleRecord,
                          center_of_gravity: np.ndarray,
                          rotation: np.ndarray) -> Component:
    """
    Rebuild a placed component from its rectangle.

    Args:
        component: Original component
        rectangle: Rectangle as returned by the oracle
        center_of_gravity: CG in satellite body frame
        rotation: Component-local to body frame rotation

    Returns:
        Placed copy of the component

    Raises:
        UnsupportedShapeError: If the shape has no reconstruction
    """
    try:
        rebuild = _RECONSTRUCTORS[component.shape]
    except (KeyError, TypeError):
        raise UnsupportedShapeError(component.shape, component.name) from None
    cg = np.asarray(center_of_gravity, dtype=float)
    return rebuild(component, rectangle, cg, np.asarray(rotation, dtype=float))


def reconstruct_components(components: Sequence[Component],
                           rectangles: Mapping[str, RectangleRecord],
                           centers: Mapping[str, np.ndarray],
                           rotation: np.ndarray) -> List[Component]:
    """
    Rebuild every fitted component of a batch.

    Components whose rectangle did not fit are returned as the very same
    objects, untouched.

    Args:
        components: Input batch
        rectangles: Oracle rectangles keyed by uid
        centers: Body-frame CGs keyed by uid
        rotation: Component-local to body frame rotation

    Returns:
        Output batch in input order
    """
    result = []
    for component in components:
        rectangle = rectangles[component.uid]
        if rectangle.fit:
            result.append(reconstruct_component(
                component, rectangle, centers[component.uid], rotation))
        else:
            result.append(component)

    logger.debug("Reconstructed %d of %d components",
                 sum(r.fit for r in rectangles.values()), len(result))
    return result
