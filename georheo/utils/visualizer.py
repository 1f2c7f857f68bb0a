"""
流变结果可视化辅助函数 (matplotlib)

- plot_stress_strainrate(): 定律的 τII-εII 曲线 (双对数)
- plot_stress_time(): 0D 实验的应力历史

两个函数都返回 Axes，不调用 show()；未传入 ax 时新建一个 Figure。
"""

import numpy as np
from matplotlib.figure import Figure

from georheo.core.dispatch import compute_tauII


def _new_axes(ax):
    if ax is not None:
        return ax
    figure = Figure(figsize=(5, 4), dpi=100)
    return figure.add_subplot(111)


def plot_stress_strainrate(law, epsII, conditions=None, ax=None, **line_kwargs):
    """
    绘制 τII(εII) 曲线

    Args:
        law: 流变定律
        epsII: 应变率数组 [1/s] (裸数值)
        conditions: 点条件 (PointConditions 或字典)
        ax: 目标 Axes (可选)
        **line_kwargs: 传给 ax.loglog 的线型参数

    Returns:
        matplotlib Axes
    """
    ax = _new_axes(ax)
    eps = np.asarray(epsII, dtype=float)
    tau = compute_tauII(law, eps, conditions)

    ax.loglog(eps, tau, label=line_kwargs.pop('label', type(law).__name__), **line_kwargs)
    ax.set_xlabel(r"$\dot{\varepsilon}_{II}$ [1/s]")
    ax.set_ylabel(r"$\tau_{II}$ [Pa]")
    ax.grid(True, linestyle='--', alpha=0.6)
    ax.legend()
    return ax


def plot_stress_time(t_vec, tau_vec, ax=None, **line_kwargs):
    """
    绘制应力历史

    Args:
        t_vec: 时间 [s]
        tau_vec: 应力 [Pa]
        ax: 目标 Axes (可选)

    Returns:
        matplotlib Axes
    """
    ax = _new_axes(ax)
    ax.plot(t_vec, tau_vec, 'b.-', linewidth=1.5, markersize=4, **line_kwargs)
    ax.set_title("Stress History")
    ax.set_xlabel("Time [s]")
    ax.set_ylabel(r"$\tau_{II}$ [Pa]")
    ax.grid(True, linestyle='--', alpha=0.6)
    return ax
