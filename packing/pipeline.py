"""
Panel Packer
============

Places a batch of components on one panel surface:

1. project each component onto a bounding rectangle
2. normalize the panel into the oracle's YZ/+X convention
3. run the packing oracle
4. move the returned CGs back into the satellite body frame
5. rebuild each fitted component's geometry

Components the oracle could not fit come back untouched.
"""

import logging
import numpy as np
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from .core.component import Component
from .core.config import PackingConfig
from .core.panel import PanelSurface, Structure
from .frames.normalizer import NormalizedPanel, normalize_panel
from .frames.reprojection import ExpansionVector, RotationFromNormal, reproject
from .geometry.projection import project_components
from .geometry.reconstruction import reconstruct_components
from .geometry.rotation import rotation_from_normal
from .oracle.adapter import PackingOracle, PackingOracleAdapter

logger = logging.getLogger(__name__)


@dataclass
class PackingResult:
    """Output batch of one panel packing run."""
    components: List[Component]
    fit: Dict[str, bool]
    expansion: ExpansionVector
    rotation_matrix: np.ndarray
    normalized_panel: NormalizedPanel
    surface: Optional[PanelSurface] = field(default=None, repr=False)

    @property
    def fitted(self) -> List[Component]:
        """Components the oracle placed."""
        return [c for c in self.components if self.fit.get(c.uid, False)]

    @property
    def unfitted(self) -> List[Component]:
        """Components that did not fit."""
        return [c for c in self.components if not self.fit.get(c.uid, False)]

    @property
    def all_fit(self) -> bool:
        return all(self.fit.values())

    @property
    def fitted_mass(self) -> float:
        """Total mass placed on the panel [kg]."""
        return float(sum(c.mass for c in self.fitted))

    def center_of_mass(self) -> Optional[np.ndarray]:
        """Mass-weighted CG of the fitted components, None if nothing fits."""
        fitted = self.fitted
        if not fitted:
            return None
        masses = np.array([c.mass for c in fitted])
        cgs = np.array([c.center_of_gravity for c in fitted])
        return masses @ cgs / masses.sum()

    def get_properties(self) -> Dict:
        """Summary of the packing run."""
        com = self.center_of_mass()
        return {
            'num_components': len(self.components),
            'num_fitted': len(self.fitted),
            'fitted_names': [c.name for c in self.fitted],
            'unfitted_names': [c.name for c in self.unfitted],
            'fitted_mass_kg': self.fitted_mass,
            'center_of_mass_m': None if com is None else com.tolist(),
            'expansion_hwl_m': [self.expansion.height,
                                self.expansion.width,
                                self.expansion.length],
        }


class PanelPacker:
    """
    Packs components onto panel surfaces through an external oracle.
    """

    def __init__(self,
                 oracle: PackingOracle,
                 config: PackingConfig = None,
                 rotation_fn: RotationFromNormal = rotation_from_normal):
        """
        Initialize packer.

        Args:
            oracle: Rectangle packing algorithm
            config: Packing configuration
            rotation_fn: Rotation-from-normal utility (face, roll) -> 3x3
        """
        self.config = config or PackingConfig()
        self.adapter = PackingOracleAdapter(oracle, self.config)
        self.rotation_fn = rotation_fn

    def pack(self, components: Sequence[Component], surface: PanelSurface) -> PackingResult:
        """
        Place components on a panel surface.

        Args:
            components: Components assigned to this surface
            surface: Target surface

        Returns:
            Packing result with the output batch in input order

        Raises:
            UnsupportedShapeError: If any component has an unsupported shape
            DegenerateIntervalError: If the surface has a degenerate interval
            OracleContractError: If the oracle output is misaligned
        """
        components = list(components)

        rectangles = project_components(components)
        panel = normalize_panel(surface)

        outcome = self.adapter.pack(rectangles, panel)

        reprojection = reproject(outcome.centers, surface, panel, outcome.expand,
                                 rotation_fn=self.rotation_fn)
        centers = dict(zip(outcome.rectangles, reprojection.centers))

        placed = reconstruct_components(components, outcome.rectangles, centers,
                                        reprojection.rotation_matrix)

        result = PackingResult(
            components=placed,
            fit=outcome.fit,
            expansion=reprojection.expansion,
            rotation_matrix=reprojection.rotation_matrix,
            normalized_panel=panel,
            surface=surface,
        )

        level = logging.INFO if self.config.verbose else logging.DEBUG
        logger.log(level, "Packed %d/%d components (%.3f kg) on %s panel facing %s",
                   len(result.fitted), len(placed), result.fitted_mass,
                   surface.buildable_dir.value, surface.normal_face.value)
        for component in result.unfitted:
            logger.log(level, "Component '%s' did not fit", component.name)

        return result


def pack_components(components: Sequence[Component],
                    surface: PanelSurface,
                    oracle: PackingOracle,
                    config: PackingConfig = None) -> PackingResult:
    """Pack components on a single surface with the default rotation utility."""
    return PanelPacker(oracle, config).pack(components, surface)


def pack_on_structure(components: Sequence[Component],
                      structures: Sequence[Structure],
                      structure_indices: Tuple[int, int],
                      oracle: PackingOracle,
                      config: PackingConfig = None) -> PackingResult:
    """
    Pack components on one surface of one structure.

    Args:
        components: Components assigned to the surface
        structures: All structures of the satellite
        structure_indices: (structure index, surface index)
        oracle: Rectangle packing algorithm
        config: Packing configuration

    Returns:
        Packing result for that surface
    """
    structure_index, surface_index = structure_indices
    surface = structures[structure_index].surface(surface_index)
    return pack_components(components, surface, oracle, config)
