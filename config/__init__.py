"""
Configuration module.
"""

from .controls import ControlsConfig, GENERATION_CONTROLS, load_config, save_config
from .tree_config import (
    InkTreeConfig,
    LeafConfig,
    BranchConfig,
    SplatterConfig,
    GrowthConfig,
    WindConfig,
    GroundConfig,
    CanvasConfig
)
from .render_config import InkRenderConfig

__all__ = [
    'ControlsConfig',
    'GENERATION_CONTROLS',
    'load_config',
    'save_config',
    'InkTreeConfig',
    'LeafConfig',
    'BranchConfig',
    'SplatterConfig',
    'GrowthConfig',
    'WindConfig',
    'GroundConfig',
    'CanvasConfig',
    'InkRenderConfig'
]
