"""
Packing Core Module
===================

Records, configuration and errors shared by every pipeline stage.
"""

from .component import Component, Shape
from .config import PackingConfig, create_default_config
from .errors import (
    PackingError,
    UnsupportedShapeError,
    DegenerateIntervalError,
    OracleContractError,
)
from .panel import BuildableDir, NormalFace, PanelSurface, Structure
from .logging_config import setup_logging

__all__ = [
    'Component',
    'Shape',
    'PackingConfig',
    'create_default_config',
    'PackingError',
    'UnsupportedShapeError',
    'DegenerateIntervalError',
    'OracleContractError',
    'BuildableDir',
    'NormalFace',
    'PanelSurface',
    'Structure',
    'setup_logging',
]
