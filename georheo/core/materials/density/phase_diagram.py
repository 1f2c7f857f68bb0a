# 文件: georheo/core/materials/density/phase_diagram.py
"""
相图密度

- PhaseDiagramLookupTable: 内存中的 (T, P) 规则网格密度表，双线性插值
- PhaseDiagramDensity: 委托给任意查表对象的密度定律

查表对象只需提供 density(T, P) 方法 (裸数值，支持数组广播)。
从文件读取相图不在本模块范围内。
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Dict

import numpy as np
from scipy.interpolate import RegularGridInterpolator

from ..interfaces import DensityLaw


class PhaseDiagramLookupTable:
    """
    规则网格密度表

    Attributes:
        T: 温度网格 (nT,) [K]，严格递增
        P: 压力网格 (nP,) [Pa]，严格递增
        rho: 密度值 (nT, nP) [kg/m^3]

    网格外的点取边界值。

    Example:
        table = PhaseDiagramLookupTable(
            T=np.linspace(273, 2000, 50),
            P=np.linspace(0, 5e9, 40),
            rho=rho_grid
        )
        table.density(T=1000.0, P=1e9)
    """

    def __init__(self, T, P, rho, name: str = ""):
        T = np.asarray(T, dtype=float)
        P = np.asarray(P, dtype=float)
        rho = np.asarray(rho, dtype=float)
        if rho.shape != (T.size, P.size):
            raise ValueError(
                f"Density table shape {rho.shape} does not match grid ({T.size}, {P.size})"
            )
        self.T = T
        self.P = P
        self.rho = rho
        self.name = name
        self._interp = RegularGridInterpolator((T, P), rho, method='linear')

    def density(self, T, P):
        T_b, P_b = np.broadcast_arrays(np.asarray(T, dtype=float), np.asarray(P, dtype=float))
        # 网格外取边界值
        pts = np.stack([
            np.clip(T_b, self.T[0], self.T[-1]),
            np.clip(P_b, self.P[0], self.P[-1]),
        ], axis=-1)
        values = self._interp(pts.reshape(-1, 2)).reshape(T_b.shape)
        if values.ndim == 0:
            return float(values)
        return values

    def __repr__(self) -> str:
        return (
            f"PhaseDiagramLookupTable(name='{self.name}', "
            f"T=[{self.T[0]:.1f}, {self.T[-1]:.1f}], P=[{self.P[0]:.2e}, {self.P[-1]:.2e}])"
        )


@dataclass(frozen=True)
class PhaseDiagramDensity(DensityLaw):
    """
    相图密度定律

    ρ = ρ(T, P)，由查表对象插值得到

    Attributes:
        table: 任意提供 density(T, P) 的对象
    """

    table: Any = None

    units: ClassVar[Dict[str, Any]] = {}
    equation: ClassVar[str] = r"\rho = \rho(T, P)"

    def __post_init__(self):
        if not callable(getattr(self.table, 'density', None)):
            raise ValueError("PhaseDiagramDensity requires a table with a density(T, P) method")

    def density(self, P, T):
        return self.table.density(T, P)

    def __repr__(self) -> str:
        return f"PhaseDiagramDensity(table={self.table!r})"
