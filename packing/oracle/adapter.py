"""
Packing Oracle Adapter
======================

Calls an external rectangle packing algorithm and maps its positional
output back onto component uids.

The oracle is any callable of the form

    oracle(dims, masses, tolerance, width, length, height)
        -> (cg, dims, expand, fit)

where dims is an (N, 3) array of rectangle (h, w, l), masses has N entries,
width and length are absolute panel extents and height is the signed panel
height. It returns N oracle-local CGs, N possibly reoriented (h, w, l), a
4-element expansion vector and N fit flags.
"""

import logging
import numpy as np
from dataclasses import dataclass, field, replace
from typing import Dict, Mapping, Protocol, Sequence, Tuple

from ..core.config import PackingConfig
from ..core.errors import OracleContractError
from ..frames.normalizer import NormalizedPanel
from ..geometry.projection import RectangleRecord

logger = logging.getLogger(__name__)


class PackingOracle(Protocol):
    """Rectangle packing algorithm working on a YZ panel facing +X."""

    def __call__(self,
                 dims: np.ndarray,
                 masses: np.ndarray,
                 tolerance: float,
                 width: float,
                 length: float,
                 height: float) -> Tuple[Sequence, Sequence, Sequence, Sequence]:
        ...


@dataclass
class OracleOutcome:
    """Oracle result keyed by component uid."""
    rectangles: Dict[str, RectangleRecord]
    expand: np.ndarray = field(default_factory=lambda: np.zeros(4))

    @property
    def fit(self) -> Dict[str, bool]:
        """Fit mask keyed by uid."""
        return {uid: rect.fit for uid, rect in self.rectangles.items()}

    @property
    def centers(self) -> np.ndarray:
        """(N, 3) oracle-local CGs in rectangle order."""
        if not self.rectangles:
            return np.zeros((0, 3))
        return np.array([rect.center_of_gravity for rect in self.rectangles.values()])


class PackingOracleAdapter:
    """
    Invokes the packing oracle for one panel.

    No retries happen here; the oracle is assumed to always return a
    result, possibly with nothing fitting.
    """

    def __init__(self, oracle: PackingOracle, config: PackingConfig = None):
        """
        Initialize adapter.

        Args:
            oracle: External packing algorithm
            config: Packing configuration (tolerance, output checks)
        """
        self.oracle = oracle
        self.config = config or PackingConfig()

    def pack(self,
             rectangles: Mapping[str, RectangleRecord],
             panel: NormalizedPanel) -> OracleOutcome:
        """
        Pack rectangles onto a normalized panel.

        Args:
            rectangles: Rectangles keyed by uid, in batch order
            panel: Normalized panel intervals

        Returns:
            Rectangles updated with CG, dimensions and fit flag, plus the
            raw 4-element expansion vector

        Raises:
            OracleContractError: If output checks are enabled and the oracle
                output is not aligned with its input
        """
        uids = list(rectangles)
        n = len(uids)
        if n == 0:
            return OracleOutcome(rectangles={})

        dims = np.array([rectangles[uid].dimensions for uid in uids], dtype=float)
        masses = np.array([rectangles[uid].mass for uid in uids], dtype=float)

        logger.debug(
            "Calling packing oracle: %d rectangles, width=%.4g length=%.4g height=%.4g",
            n, panel.width_extent, panel.length_extent, panel.height_extent
        )
        cg, new_dims, expand, fit = self.oracle(
            dims, masses, self.config.tolerance,
            panel.width_extent, panel.length_extent, panel.height_extent,
        )

        cg = np.asarray(cg, dtype=float)
        new_dims = np.asarray(new_dims, dtype=float)
        expand = np.asarray(expand, dtype=float).ravel()
        fit = np.asarray(fit, dtype=bool).ravel()

        if self.config.check_oracle_output:
            self._check_output(n, cg, new_dims, expand, fit)

        cg = cg.reshape(n, 3)
        new_dims = new_dims.reshape(n, 3)

        placed = {
            uid: replace(
                rectangles[uid],
                dimensions=tuple(float(d) for d in new_dims[i]),
                center_of_gravity=cg[i].copy(),
                fit=bool(fit[i]),
            )
            for i, uid in enumerate(uids)
        }

        logger.debug("Oracle fitted %d of %d rectangles", int(fit.sum()), n)
        return OracleOutcome(rectangles=placed, expand=expand)

    @staticmethod
    def _check_output(n: int,
                      cg: np.ndarray,
                      dims: np.ndarray,
                      expand: np.ndarray,
                      fit: np.ndarray):
        if cg.shape != (n, 3):
            raise OracleContractError(f"Expected {n}x3 centers of gravity, got shape {cg.shape}")
        if dims.shape != (n, 3):
            raise OracleContractError(f"Expected {n}x3 rectangle dimensions, got shape {dims.shape}")
        if expand.shape != (4,):
            raise OracleContractError(f"Expected 4-element expansion vector, got {expand.size}")
        if fit.shape != (n,):
            raise OracleContractError(f"Expected {n} fit flags, got {fit.size}")
