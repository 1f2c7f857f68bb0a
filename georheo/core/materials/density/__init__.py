# 文件: georheo/core/materials/density/__init__.py
"""
密度定律模块

提供:
- ConstantDensity: 常密度
- PTDensity: 压力/温度线性相关密度
- PhaseDiagramDensity: 相图查表密度
"""

from .laws import ConstantDensity, PTDensity
from .phase_diagram import PhaseDiagramDensity, PhaseDiagramLookupTable

__all__ = [
    'ConstantDensity',
    'PTDensity',
    'PhaseDiagramDensity',
    'PhaseDiagramLookupTable',
]
