# 文件: georheo/core/materials/density/laws.py
"""
解析密度定律

提供:
- ConstantDensity: 常密度
- PTDensity: 压力、温度线性相关的密度
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Dict

import numpy as np

from ..interfaces import DensityLaw


@dataclass(frozen=True)
class ConstantDensity(DensityLaw):
    """
    常密度

    ρ = cst

    Example:
        law = ConstantDensity(rho=2900)
        law.density(P=1e9, T=1000.0)   # 2900.0
    """

    rho: Any = 2900.0

    units: ClassVar[Dict[str, Any]] = {'rho': 'kg/m**3'}
    equation: ClassVar[str] = r"\rho = cst"

    def __post_init__(self):
        self._normalize_parameters()

    def density(self, P, T):
        if np.ndim(T) == 0 and np.ndim(P) == 0:
            return self.rho
        return np.full(np.broadcast(P, T).shape, self.rho)

    def __repr__(self) -> str:
        return f"ConstantDensity(ρ={self.rho})"


@dataclass(frozen=True)
class PTDensity(DensityLaw):
    """
    压力、温度相关密度

    ρ = ρ0 (1 - α (T - T0) + β (P - P0))

    Attributes:
        rho0: 参考密度 [kg/m^3]
        alpha: 热膨胀系数 [1/K]
        beta: 压缩系数 [1/Pa]
        T0: 参考温度 [K]
        P0: 参考压力 [Pa]

    Example:
        law = PTDensity(rho0=2900, alpha=3e-5, beta=1e-9)
        law.density(P=0.0, T=100.0)    # 2891.3
    """

    rho0: Any = 2900.0
    alpha: Any = 3e-5
    beta: Any = 1e-9
    T0: Any = 0.0
    P0: Any = 0.0

    units: ClassVar[Dict[str, Any]] = {
        'rho0': 'kg/m**3',
        'alpha': '1/K',
        'beta': '1/Pa',
        'T0': 'K',
        'P0': 'Pa',
    }
    equation: ClassVar[str] = r"\rho = \rho_0(1.0-\alpha (T-T_0) + \beta (P-P_0))"

    def __post_init__(self):
        self._normalize_parameters()

    def density(self, P, T):
        return self.rho0 * (1.0 - self.alpha * (T - self.T0) + self.beta * (P - self.P0))

    def __repr__(self) -> str:
        return (
            f"PTDensity(ρ0={self.rho0}, α={self.alpha}, β={self.beta}, "
            f"T0={self.T0}, P0={self.P0})"
        )
