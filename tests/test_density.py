# 文件: tests/test_density.py
"""
密度定律测试
"""

import numpy as np
import pytest

from georheo.core.units import Q_
from georheo.core.dispatch import compute_density, compute_density_inplace
from georheo.core.materials import (
    ConstantDensity,
    PTDensity,
    PhaseDiagramDensity,
    PhaseDiagramLookupTable,
)


class TestConstantDensity:
    """测试常密度"""

    def test_scalar_any_conditions(self):
        """任意 (P, T) 下密度恒为 2900"""
        law = ConstantDensity(rho=2900)
        for P, T in [(0.0, 0.0), (1e9, 1000.0), (5e10, 3000.0)]:
            assert compute_density(law, P=P, T=T) == 2900.0

    def test_array_shape(self):
        law = ConstantDensity()
        rho = compute_density(law, P=np.zeros((2, 3)), T=np.ones((2, 3)))
        assert rho.shape == (2, 3)
        assert np.all(rho == 2900.0)

    def test_dimensioned_parameter(self):
        law = ConstantDensity(rho=Q_(3.3, 'g/cm**3'))
        assert law.rho == pytest.approx(3300.0)

    def test_param_info(self):
        info = ConstantDensity().param_info()
        assert info['name'] == 'ConstantDensity'
        assert 'rho' in info['parameters']


class TestPTDensity:
    """测试压力/温度相关密度"""

    def test_reference_value(self):
        law = PTDensity(rho0=2900, alpha=3e-5, beta=1e-9, T0=0, P0=0)
        rho = compute_density(law, P=0.0, T=100.0)
        assert rho == pytest.approx(2900 * (1 - 3e-5 * 100))
        assert rho == pytest.approx(2891.3)

    def test_pressure_increases_density(self):
        law = PTDensity()
        assert compute_density(law, P=1e9, T=0.0) > compute_density(law, P=0.0, T=0.0)

    def test_dimensioned_call(self):
        """带单位调用返回 Quantity，数值与裸数值一致"""
        law = PTDensity()
        rho = compute_density(law, P=Q_(0.0, 'MPa'), T=Q_(100.0, 'K'))
        assert rho.to('kg/m**3').magnitude == pytest.approx(2891.3)

    def test_inplace(self):
        law = PTDensity()
        T = np.linspace(0.0, 1000.0, 5)
        P = np.full(5, 1e8)
        rho = np.zeros(5)
        compute_density_inplace(rho, law, P=P, T=T)
        expected = [compute_density(law, P=p, T=t) for p, t in zip(P, T)]
        assert np.allclose(rho, expected, rtol=1e-14)


class TestPhaseDiagram:
    """测试相图查表密度"""

    def setup_method(self):
        self.T = np.linspace(300.0, 1300.0, 11)
        self.P = np.linspace(0.0, 1e9, 6)
        TT, PP = np.meshgrid(self.T, self.P, indexing='ij')
        # 线性场，双线性插值精确
        self.rho = 3300.0 - 0.1 * (TT - 300.0) + 2e-7 * PP
        self.table = PhaseDiagramLookupTable(self.T, self.P, self.rho, name='linear')

    def test_interpolation(self):
        law = PhaseDiagramDensity(self.table)
        rho = compute_density(law, P=3.3e8, T=655.0)
        assert rho == pytest.approx(3300.0 - 0.1 * 355.0 + 2e-7 * 3.3e8)

    def test_clip_outside_grid(self):
        """网格外取边界值"""
        assert self.table.density(T=5000.0, P=0.0) == pytest.approx(self.rho[-1, 0])
        assert self.table.density(T=0.0, P=-1.0) == pytest.approx(self.rho[0, 0])

    def test_array_input(self):
        law = PhaseDiagramDensity(self.table)
        T = np.array([[400.0, 500.0], [600.0, 700.0]])
        P = np.full((2, 2), 5e8)
        rho = compute_density(law, P=P, T=T)
        assert rho.shape == (2, 2)
        assert np.allclose(rho, 3300.0 - 0.1 * (T - 300.0) + 100.0)

    def test_shape_validation(self):
        with pytest.raises(ValueError):
            PhaseDiagramLookupTable(self.T, self.P, self.rho.T)

    def test_requires_table(self):
        with pytest.raises(ValueError):
            PhaseDiagramDensity(table=None)
