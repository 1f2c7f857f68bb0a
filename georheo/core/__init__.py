# 文件: georheo/core/__init__.py
"""
georheo 核心模块

导出单位服务、材料系统和双签名调度器
"""

# ==============================================================================
# 单位
# ==============================================================================
from .units import ureg, Q_, Parameter, to_si

# ==============================================================================
# 材料系统
# ==============================================================================
from .materials import (
    PointConditions,
    MaterialParams,
    MaterialFactory,
    CompositeRheology,
    ShapeMismatchError,
    MixedConditionsError,
    UnsupportedCapabilityError,
    IllPosedParametersError,
)

# ==============================================================================
# 调度器
# ==============================================================================
from .dispatch import (
    compute_density,
    compute_density_inplace,
    compute_epsII,
    compute_epsII_inplace,
    compute_tauII,
    compute_tauII_inplace,
    dEpsII_dTauII,
    dTauII_dEpsII,
)


__all__ = [
    # === 单位 ===
    'ureg',
    'Q_',
    'Parameter',
    'to_si',

    # === 材料系统 ===
    'PointConditions',
    'MaterialParams',
    'MaterialFactory',
    'CompositeRheology',
    'ShapeMismatchError',
    'MixedConditionsError',
    'UnsupportedCapabilityError',
    'IllPosedParametersError',

    # === 调度器 ===
    'compute_density',
    'compute_density_inplace',
    'compute_epsII',
    'compute_epsII_inplace',
    'compute_tauII',
    'compute_tauII_inplace',
    'dEpsII_dTauII',
    'dTauII_dEpsII',
]
