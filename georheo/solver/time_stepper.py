# 文件: georheo/solver/time_stepper.py
"""
0D 均匀实验驱动 (应力历史时间推进)

给定应变率历史，逐步求解历史相关 (粘弹性) 流变的应力历史:

    τ[0] = τ0
    τ[i] = τII(εII[i-1]; 条件 + (τII_old = τ[i-1], dt = t[i] - t[i-1]))

每一步的隐式求解完全在流变定律内部完成 (例如 CompositeRheology 的 Newton 迭代)，
这里只负责历史量的传递和条件的合并，没有提前终止或收敛判断。
"""

import enum
from typing import Any, Optional, Tuple

import numpy as np

from georheo.core.dispatch import as_conditions, compute_tauII
from georheo.core.materials.interfaces import ShapeMismatchError
from georheo.core.units import to_si


class ExperimentState(enum.Enum):
    UNINITIALIZED = 'uninitialized'   # 只设置了 t[0] / τ[0]
    ADVANCING = 'advancing'           # 1 <= i < n
    COMPLETE = 'complete'             # i = n


class ZeroDExperiment:
    """
    0D 实验驱动器

    Attributes:
        rheology: 流变定律 (通常为 CompositeRheology)
        conditions: 稳态条件 (SI 裸数值，历史量由驱动器填充)
        state: ExperimentState
        step: 已完成的时间样本数

    Example:
        maxwell = CompositeRheology([ConstantElasticity(G=5e10), LinearViscous(eta=1e21)])
        exp = ZeroDExperiment(maxwell, conditions={'T': 1000.0}, verbose=True)
        t_vec = np.linspace(0.0, 1e12, 51)
        tau_vec = np.zeros_like(t_vec)
        exp.run(tau_vec, np.full_like(t_vec, 1e-15), t_vec)
    """

    def __init__(self, rheology, conditions: Optional[Any] = None, verbose: bool = False):
        self.rheology = rheology
        self.conditions = as_conditions(conditions).resolved()
        self.verbose = verbose
        self.state = ExperimentState.UNINITIALIZED
        self.step = 0
        self.log_callback = print

    def set_log_callback(self, callback):
        self.log_callback = callback

    def run(self, tau_vec: np.ndarray, epsII_vec: np.ndarray, t_vec: np.ndarray) -> np.ndarray:
        """
        原位填充 tau_vec[1:]

        Args:
            tau_vec: 应力历史 [Pa]，tau_vec[0] 为初始应力 (调用方设置)
            epsII_vec: 应变率历史 [1/s]
            t_vec: 时间样本 [s]

        Returns:
            tau_vec

        Raises:
            ShapeMismatchError: 三个向量长度不一致
        """
        n = len(t_vec)
        if len(tau_vec) != n or len(epsII_vec) != n:
            raise ShapeMismatchError(
                f"Time, stress and strain rate vectors must have equal length "
                f"(got {n}, {len(tau_vec)}, {len(epsII_vec)})"
            )

        self.state = ExperimentState.UNINITIALIZED
        self.step = 1

        if self.verbose:
            self.log_callback(f"{'STEP':<6} | {'TIME':<12} | {'dt':<12} | {'EPS_II':<12} | {'TAU_II':<12}")
            self.log_callback("-" * 64)

        for i in range(1, n):
            self.state = ExperimentState.ADVANCING
            dt = t_vec[i] - t_vec[i - 1]
            c = self.conditions.with_history(tau_vec[i - 1], dt)
            tau_vec[i] = compute_tauII(self.rheology, epsII_vec[i - 1], c)
            self.step = i + 1

            if self.verbose:
                self.log_callback(
                    f"{i:<6} | {t_vec[i]:<12.4e} | {dt:<12.4e} | "
                    f"{epsII_vec[i - 1]:<12.4e} | {tau_vec[i]:<12.4e}"
                )

        self.state = ExperimentState.COMPLETE
        return tau_vec


def time_tauII_0D(
    rheology,
    epsII,
    conditions: Optional[Any] = None,
    t: Tuple[Any, Any] = (0.0, 100.0),
    tau0: Any = 0.0,
    nt: int = 100,
    verbose: bool = False,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    计算 0D 应力历史

    Args:
        rheology: 流变定律
        epsII: 应变率 [1/s]，常数或长度为 nt 的序列 (可带单位)
        conditions: 稳态条件 (PointConditions 或字典)
        t: 起止时间 (t0, t1) [s] (可带单位)
        tau0: 初始应力 [Pa] (可带单位)
        nt: 时间样本数
        verbose: 是否逐步输出

    Returns:
        (t_vec, tau_vec)，均为 SI 裸数值

    Raises:
        ValueError: nt < 1
        ShapeMismatchError: epsII 序列长度不等于 nt
    """
    if nt < 1:
        raise ValueError(f"Number of time samples must be at least 1, got {nt}")

    t0, t1 = (float(to_si(x, 's')) for x in t)
    t_vec = np.linspace(t0, t1, nt)

    eps = np.asarray(to_si(epsII, '1/s'), dtype=float)
    if eps.ndim == 0:
        eps = np.full(nt, float(eps))
    elif eps.shape != (nt,):
        raise ShapeMismatchError(
            f"Strain rate history has shape {eps.shape}, expected ({nt},)"
        )

    tau_vec = np.zeros(nt)
    tau_vec[0] = float(to_si(tau0, 'Pa'))

    experiment = ZeroDExperiment(rheology, conditions, verbose=verbose)
    experiment.run(tau_vec, eps, t_vec)
    return t_vec, tau_vec


def time_tauII_0D_inplace(
    tau_vec: np.ndarray,
    rheology,
    epsII_vec,
    conditions: Optional[Any],
    t_vec: np.ndarray,
    verbose: bool = False,
) -> None:
    """
    原位计算 0D 应力历史

    tau_vec[0] 由调用方设置为初始应力，其余元素被覆盖。

    Args:
        tau_vec: 应力历史 [Pa] (调用方持有)
        rheology: 流变定律
        epsII_vec: 应变率 [1/s]，常数或与 t_vec 等长的序列
        conditions: 稳态条件 (可为 None)
        t_vec: 时间样本 [s]，必须给出
        verbose: 是否逐步输出
    """
    t_vec = np.asarray(to_si(t_vec, 's'), dtype=float)
    eps = np.asarray(to_si(epsII_vec, '1/s'), dtype=float)
    if eps.ndim == 0:
        eps = np.full(t_vec.shape, float(eps))
    ZeroDExperiment(rheology, conditions, verbose=verbose).run(tau_vec, eps, t_vec)
