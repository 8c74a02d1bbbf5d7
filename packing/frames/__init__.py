"""
Frames Module
=============

Conversions between panel body-frame space and the packing oracle's
fixed reference plane.
"""

from .normalizer import NormalizedPanel, normalize_panel
from .reprojection import ExpansionVector, Reprojection, reproject

__all__ = [
    'NormalizedPanel',
    'normalize_panel',
    'ExpansionVector',
    'Reprojection',
    'reproject',
]
