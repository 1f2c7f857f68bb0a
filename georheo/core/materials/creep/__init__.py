# 文件: georheo/core/materials/creep/__init__.py
"""
蠕变定律模块

提供粘性流变组件:
- LinearViscous: 线性粘性
- DiffusionCreep: 扩散蠕变
- DislocationCreep: 位错蠕变
- 预置参数库 (database)
"""

from .linear import LinearViscous
from .power_law import DiffusionCreep, DislocationCreep, R_GAS, APPARATUS_FACTORS
from .database import (
    set_diffusion_creep,
    set_dislocation_creep,
    diffusion_creep_presets,
    dislocation_creep_presets,
)

__all__ = [
    'LinearViscous',
    'DiffusionCreep',
    'DislocationCreep',
    'R_GAS',
    'APPARATUS_FACTORS',
    'set_diffusion_creep',
    'set_dislocation_creep',
    'diffusion_creep_presets',
    'dislocation_creep_presets',
]
