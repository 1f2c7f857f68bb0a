# 文件: georheo/core/materials/elastic/constant.py
"""
常弹性模型

提供:
- ConstantElasticity: 各向同性常剪切模量弹性 (以应力不变量形式)
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Dict

import numpy as np

from ..interfaces import IllPosedParametersError, RheologyLaw, check_positive


@dataclass(frozen=True)
class ConstantElasticity(RheologyLaw):
    """
    常弹性 (Maxwell 元件的弹性部分)

    本构关系 (显式时间离散):
        εII = (τII - τII_old) / (2 G dt)
        τII = τII_old + 2 G dt εII

    需要条件中的 tauII_old 和 dt，因此结果依赖于加载历史。
    τII 对 εII 的导数不提供 (弹性元件单独不能由应变率唯一确定切线)。

    Attributes:
        G: 剪切模量 [Pa]
        nu: 泊松比
        K: 体积模量 K = 2G(1+ν) / (3(1-2ν))  (ν = 0.5 时为无穷大)
        E: 杨氏模量 E = 2G(1+ν)

    Example:
        elastic = ConstantElasticity(G=5e10)
        c = PointConditions(tauII_old=0.0, dt=1e3).resolved()
        elastic.stress(1e-15, c)
    """

    G: Any = 5e10
    nu: Any = 0.5

    units: ClassVar[Dict[str, Any]] = {'G': 'Pa', 'nu': ''}
    equation: ClassVar[str] = (
        r"\dot{\varepsilon}_{II} = {\tau_{II} - \tau_{II}^{old} \over 2 G dt}"
    )

    def __post_init__(self):
        self._normalize_parameters()
        if not (-1.0 < self.nu <= 0.5):
            raise ValueError(f"Poisson's ratio must be in (-1, 0.5], got {self.nu}")

    @property
    def K(self) -> float:
        """体积模量"""
        if self.nu == 0.5:
            return np.inf
        return 2.0 * self.G * (1.0 + self.nu) / (3.0 * (1.0 - 2.0 * self.nu))

    @property
    def E(self) -> float:
        """杨氏模量"""
        return 2.0 * self.G * (1.0 + self.nu)

    def _check(self, c):
        if self.G <= 0:
            raise IllPosedParametersError(f"ConstantElasticity: shear modulus must be positive, got {self.G}")
        check_positive('dt', c.dt, self)

    def strain_rate(self, tauII, c):
        self._check(c)
        return (tauII - c.tauII_old) / (2.0 * self.G * c.dt)

    def stress(self, epsII, c):
        self._check(c)
        return c.tauII_old + 2.0 * self.G * c.dt * epsII

    def dstrain_rate_dstress(self, tauII, c):
        self._check(c)
        return 0.0 * tauII + 1.0 / (2.0 * self.G * c.dt)

    def __repr__(self) -> str:
        return f"ConstantElasticity(G={self.G:.2e}, nu={self.nu:.3f})"
