"""
Frame Reprojection
==================

Moves oracle-local centres of gravity onto the real panel in the
satellite body frame. Panels in the YZ plane need little more than a
translation; panels in the XZ and XY planes are rotated into place, and
some CG axes are flipped depending on the panel's normal face.
"""

import logging
import numpy as np
from dataclasses import dataclass
from typing import Callable

from ..core.panel import BuildableDir, NormalFace, PanelSurface
from ..geometry.rotation import rotation_from_normal
from .normalizer import NormalizedPanel

logger = logging.getLogger(__name__)

RotationFromNormal = Callable[[NormalFace, float], np.ndarray]


@dataclass
class ExpansionVector:
    """
    Extra panel space the oracle asked for, in body-frame semantics.

    flag is the oracle's first element, passed through untouched.
    """
    flag: float = 0.0
    height: float = 0.0
    width: float = 0.0
    length: float = 0.0

    def to_array(self) -> np.ndarray:
        """Return as 4-element [flag, height, width, length] array."""
        return np.array([self.flag, self.height, self.width, self.length])

    @classmethod
    def from_array(cls, values: np.ndarray) -> 'ExpansionVector':
        """Create from a 4-element array."""
        flag, height, width, length = (float(v) for v in values)
        return cls(flag=flag, height=height, width=width, length=length)


@dataclass
class Reprojection:
    """Result of moving oracle placements into the body frame."""
    centers: np.ndarray          # (N, 3) body-frame CGs
    rotation_matrix: np.ndarray  # component-local to body frame
    expansion: ExpansionVector


# Zero-based positions of (height, width, length) in the oracle's expand vector
_EXPANSION_SOURCES = {
    BuildableDir.XY: (3, 2, 1),
    BuildableDir.XZ: (1, 3, 2),
    BuildableDir.YZ: (1, 2, 3),
}


def runs_backward(interval: np.ndarray) -> bool:
    """True if the interval descends with its larger-magnitude end last."""
    return bool(abs(interval[1]) >= abs(interval[0]) and interval[1] < interval[0])


def reflect_centers(centers: np.ndarray,
                    surface: PanelSurface,
                    panel: NormalizedPanel) -> np.ndarray:
    """
    Flip oracle-local CG axes for panels laid out in negative directions.

    Args:
        centers: (N, 3) oracle-local CGs
        surface: Target panel surface
        panel: Normalized panel intervals

    Returns:
        (N, 3) reflected CGs (new array)
    """
    centers = np.array(centers, dtype=float).reshape(-1, 3)
    face = surface.normal_face

    # Width (body Y)
    if runs_backward(panel.width):
        if face != NormalFace.PLUS_Z:
            centers[:, 1] = -centers[:, 1]

    # Height (body Z): identity, left explicit. Unlike width and length,
    # this branch reflects nothing.
    if runs_backward(panel.height):
        centers[:, 2] = centers[:, 2]

    # Length (body X)
    if runs_backward(panel.length):
        if face in (NormalFace.PLUS_Y, NormalFace.MINUS_X):
            centers[:, 0] = -centers[:, 0]

    return centers


def remap_expansion(expand: np.ndarray, surface: PanelSurface) -> ExpansionVector:
    """
    Reorder the oracle's expand vector into [height, width, length].

    The height entry is offset by the panel's own height origin.

    Args:
        expand: 4-element oracle expansion vector
        surface: Target panel surface

    Returns:
        Body-frame expansion vector
    """
    expand = np.asarray(expand, dtype=float)
    sources = _EXPANSION_SOURCES.get(surface.buildable_dir)
    if sources is None:
        height = width = length = 0.0
    else:
        height, width, length = (float(expand[i]) for i in sources)

    return ExpansionVector(
        flag=float(expand[0]),
        height=height + float(surface.available_z[0]),
        width=width,
        length=length,
    )


def reproject(centers: np.ndarray,
              surface: PanelSurface,
              panel: NormalizedPanel,
              expand: np.ndarray,
              rotation_fn: RotationFromNormal = rotation_from_normal) -> Reprojection:
    """
    Convert oracle-local CGs to satellite body frame.

    Args:
        centers: (N, 3) oracle-local CGs
        surface: Panel surface the components were packed on
        panel: Normalized intervals used for the oracle call
        expand: 4-element oracle expansion vector
        rotation_fn: Rotation-from-normal utility (face, roll) -> 3x3

    Returns:
        Body-frame CGs, rotation matrix and remapped expansion vector
    """
    rotation = np.asarray(rotation_fn(surface.normal_face, 0), dtype=float)

    reflected = reflect_centers(centers, surface, panel)
    body = (rotation @ reflected.T).T + surface.origin

    expansion = remap_expansion(expand, surface)
    logger.debug("Reprojected %d CGs onto %s panel facing %s",
                 len(body), surface.buildable_dir.value, surface.normal_face.value)
    return Reprojection(centers=body, rotation_matrix=rotation, expansion=expansion)
