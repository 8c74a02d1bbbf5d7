"""
Panel Packing
=============

Places satellite components on structure panels of any orientation using
a rectangle packing algorithm that only knows one fixed reference plane.

Components:
- Shape to rectangle projection (rectangles, spheres, cones, cylinders)
- Panel normalization into the packing plane convention
- Packing oracle contract
- Reprojection of placements into the satellite body frame
- Reconstruction of placed component geometry
"""

__version__ = "1.0.0"

from packing.core.component import Component, Shape
from packing.core.config import PackingConfig
from packing.core.panel import BuildableDir, NormalFace, PanelSurface, Structure
from packing.pipeline import PanelPacker, PackingResult, pack_components, pack_on_structure

__all__ = [
    'Component',
    'Shape',
    'PackingConfig',
    'BuildableDir',
    'NormalFace',
    'PanelSurface',
    'Structure',
    'PanelPacker',
    'PackingResult',
    'pack_components',
    'pack_on_structure',
]
