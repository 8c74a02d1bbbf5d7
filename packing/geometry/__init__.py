"""
Geometry Module
===============

Shape/rectangle conversions and face rotations.
"""

from .rotation import rotation_from_normal
from .projection import RectangleRecord, project_component, project_components
from .reconstruction import box_vertices, reconstruct_component, reconstruct_components

__all__ = [
    'rotation_from_normal',
    'RectangleRecord',
    'project_component',
    'project_components',
    'box_vertices',
    'reconstruct_component',
    'reconstruct_components',
]
