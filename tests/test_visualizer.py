# 文件: tests/test_visualizer.py
"""
可视化辅助函数测试
"""

import matplotlib
matplotlib.use('Agg')

import numpy as np
from matplotlib.figure import Figure

from georheo.core.materials import CompositeRheology, ConstantElasticity, LinearViscous
from georheo.solver import time_tauII_0D
from georheo.utils import plot_stress_strainrate, plot_stress_time


class TestVisualizer:
    """测试绘图"""

    def test_stress_strainrate(self):
        eps = 10.0 ** np.arange(-18.0, -12.0)
        ax = plot_stress_strainrate(LinearViscous(eta=1e21), eps)
        line = ax.lines[0]
        assert np.allclose(line.get_ydata(), 2e21 * eps)
        assert ax.get_xscale() == 'log'

    def test_existing_axes(self):
        ax = Figure().add_subplot(111)
        out = plot_stress_strainrate(LinearViscous(), np.array([1e-15, 1e-14]), ax=ax, label='eta')
        assert out is ax
        assert ax.get_legend().get_texts()[0].get_text() == 'eta'

    def test_stress_time(self):
        maxwell = CompositeRheology([ConstantElasticity(), LinearViscous(eta=1e21)])
        t_vec, tau_vec = time_tauII_0D(maxwell, 1e-15, t=(0.0, 1e11), nt=11)
        ax = plot_stress_time(t_vec, tau_vec)
        assert len(ax.lines) == 1
        assert np.array_equal(ax.lines[0].get_xdata(), t_vec)
