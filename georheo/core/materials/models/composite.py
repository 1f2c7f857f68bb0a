# 文件: georheo/core/materials/models/composite.py
"""
组合流变模型

使用组合模式将多个流变元件串联成完整的流变关系。
"""

from typing import Any, Dict, Iterable, Tuple

import numpy as np
from scipy import optimize

from ..interfaces import (
    RheologyLaw,
    StrainRateDerivative,
    UnsupportedCapabilityError,
)


class CompositeRheology(RheologyLaw):
    """
    串联组合流变 (组合式实现)

    所有元件承受相同的应力，应变率相加:
        εII = Σ εII_i(τII)

    典型用法是粘弹性 Maxwell 体:
    - 弹性: ConstantElasticity
    - 粘性: LinearViscous / DiffusionCreep / DislocationCreep

    由 εII 求 τII 没有闭式解，使用 Newton 迭代求解
    (scipy.optimize.newton，数组输入时逐元素向量化)。
    初值取各元件单独承担全部应变率时的最小应力，
    εII(τ) 单调递增且为凸函数时迭代从右侧单调收敛。

    Attributes:
        elements: 元件元组
        rtol: Newton 迭代相对容差
        tol: Newton 迭代绝对容差 [Pa]
        maxiter: 最大迭代次数
        verbose: 是否输出求解信息

    Example:
        maxwell = CompositeRheology([ConstantElasticity(G=5e10), LinearViscous(eta=1e21)])
        c = PointConditions(tauII_old=0.0, dt=1e10).resolved()
        tau = maxwell.stress(1e-15, c)
    """

    def __init__(
        self,
        elements: Iterable[RheologyLaw],
        rtol: float = 1e-12,
        tol: float = 1e-10,
        maxiter: int = 50,
        verbose: bool = False,
    ):
        elements = tuple(elements)
        if not elements:
            raise ValueError("CompositeRheology requires at least one element")
        for e in elements:
            if not isinstance(e, RheologyLaw):
                raise TypeError(f"CompositeRheology element must be a RheologyLaw, got {e!r}")

        self._elements = elements
        self._rtol = float(rtol)
        self._tol = float(tol)
        self._maxiter = int(maxiter)
        self._verbose = bool(verbose)
        self.log_callback = print

    def set_log_callback(self, callback):
        self.log_callback = callback

    @property
    def elements(self) -> Tuple[RheologyLaw, ...]:
        return self._elements

    # 求解设置只读，构造后不可修改
    @property
    def rtol(self) -> float:
        return self._rtol

    @property
    def tol(self) -> float:
        return self._tol

    @property
    def maxiter(self) -> int:
        return self._maxiter

    @property
    def verbose(self) -> bool:
        return self._verbose

    def param_info(self) -> Dict[str, Any]:
        return {
            'name': type(self).__name__,
            'equation': r"\dot{\varepsilon}_{II} = \sum_i \dot{\varepsilon}_{II,i}(\tau_{II})",
            'parameters': {},
            'elements': [e.param_info() for e in self._elements],
        }

    def strain_rate(self, tauII, c):
        total = 0.0
        for e in self._elements:
            total = total + e.strain_rate(tauII, c)
        return total

    def dstrain_rate_dstress(self, tauII, c):
        total = 0.0
        for e in self._elements:
            if not isinstance(e, StrainRateDerivative):
                raise UnsupportedCapabilityError(
                    f"{type(e).__name__} does not provide dstrain_rate_dstress"
                )
            total = total + e.dstrain_rate_dstress(tauII, c)
        return total

    def stress(self, epsII, c):
        if len(self._elements) == 1:
            return self._elements[0].stress(epsII, c)

        # 初值: 各元件单独承担 εII 时的最小应力
        guesses = np.broadcast_arrays(*[np.asarray(e.stress(epsII, c), dtype=float)
                                        for e in self._elements])
        tau0 = np.minimum.reduce(guesses)

        def residual(tau):
            return self.strain_rate(tau, c) - epsII

        def jacobian(tau):
            return self.dstrain_rate_dstress(tau, c)

        # 数组路径只检查绝对步长，按初值量级折算相对容差
        atol = max(self.tol, self.rtol * float(np.max(np.abs(tau0))))
        tau = optimize.newton(
            residual, tau0, fprime=jacobian,
            tol=atol, rtol=self.rtol, maxiter=self.maxiter,
        )

        if self.verbose:
            self.log_callback(
                f"CompositeRheology: εII={np.max(np.abs(epsII)):.4e} -> "
                f"τII={np.max(np.abs(tau)):.4e} (max over points)"
            )
        return tau

    def dstress_dstrain_rate(self, epsII, c):
        tau = self.stress(epsII, c)
        return 1.0 / self.dstrain_rate_dstress(tau, c)

    def __repr__(self) -> str:
        body = ", ".join(repr(e) for e in self._elements)
        return f"CompositeRheology([{body}])"
