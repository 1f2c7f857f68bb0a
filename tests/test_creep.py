# 文件: tests/test_creep.py
"""
蠕变定律测试
"""

import numpy as np
import pytest

from georheo.core.units import Q_
from georheo.core.dispatch import (
    compute_epsII,
    compute_epsII_inplace,
    compute_tauII,
    dEpsII_dTauII,
    dTauII_dEpsII,
)
from georheo.core.materials import (
    DiffusionCreep,
    DislocationCreep,
    IllPosedParametersError,
    LinearViscous,
    PointConditions,
    diffusion_creep_presets,
    dislocation_creep_presets,
    set_diffusion_creep,
    set_dislocation_creep,
)

ANORTHITE_DIFF = "Dry Anorthite | Bürgmann & Dresen (2008)"
ANORTHITE_DISL = "Dry Anorthite | Rybacki et al. (2006)"
OLIVINE_DISL = "Dry Olivine | Hirth & Kohlstedt (2003)"


class TestLinearViscous:
    """测试线性粘性"""

    def test_stress(self):
        law = LinearViscous(eta=1e21)
        assert compute_tauII(law, 1e-15) == pytest.approx(2e6)

    def test_strain_rate(self):
        law = LinearViscous(eta=Q_(1e21, 'Pa*s'))
        assert compute_epsII(law, 2e6) == pytest.approx(1e-15)

    def test_derivatives(self):
        law = LinearViscous(eta=1e20)
        assert dEpsII_dTauII(law, 1e6) == pytest.approx(1.0 / 2e20)
        assert dTauII_dEpsII(law, 1e-15) == pytest.approx(2e20)

    def test_non_positive_viscosity(self):
        law = LinearViscous(eta=0.0)
        with pytest.raises(IllPosedParametersError):
            compute_tauII(law, 1e-15)


class TestDiffusionCreep:
    """测试扩散蠕变"""

    def setup_method(self):
        self.law = set_diffusion_creep(ANORTHITE_DIFF)
        self.T = 650.0 + 273.15
        self.d = 100e-6

    def test_default_parameters(self):
        law = DiffusionCreep()
        assert law.n == 1.0
        assert law.p == -3.0
        # 1.5 MPa^-1 m^3 s^-1
        assert law.A == pytest.approx(1.5e-6)

    def test_default_prefactor_follows_exponents(self):
        """默认 A 的单位随 n 和 p 变化"""
        law = DiffusionCreep(n=3.0, p=-3.0)
        # 1.5 MPa^-3 m^3 s^-1
        assert law.A == pytest.approx(1.5e-18)
        assert law.parameter('A').quantity.to('MPa**-3 * m**3 / s').magnitude == pytest.approx(1.5)

    def test_preset_parameters(self):
        assert self.law.E == pytest.approx(460e3)
        assert self.law.V == pytest.approx(24e-6)
        assert self.law.A == pytest.approx(10.0 ** 12.1 * 1e-24, rel=1e-12)
        assert self.law.parameter('E').quantity.to('kJ/mol').magnitude == pytest.approx(460.0)

    def test_against_reference_formula(self):
        """与实验室单位 (MPa, µm, kJ) 下的粘度公式比较"""
        eII = 1e-22
        gsiz = 100.0
        TK = self.T
        R = 8.3145
        logA, npow, Qact, m_gr0 = 12.1, 1.0, 460.0, 3.0

        FG_e = 1.0 / (2.0 ** ((npow - 1.0) / npow) * 3.0 ** ((npow + 1.0) / (2.0 * npow)))
        mu1 = (FG_e * eII ** (1.0 / npow - 1.0) * (10.0 ** logA) ** (-1.0 / npow)
               * gsiz ** (m_gr0 / npow) * np.exp(Qact / (R * 1e-3 * TK * npow)))
        mu = mu1 * 1e6
        Tau = 2.0 * mu * eII

        tau = compute_tauII(self.law, Q_(eII, '1/s'), T=Q_(TK, 'K'), d=Q_(gsiz, 'micrometer'))
        assert tau.to('Pa').magnitude == pytest.approx(Tau, rel=1e-9)
        eta = tau / (2.0 * Q_(eII, '1/s'))
        assert eta.to('Pa*s').magnitude == pytest.approx(mu, rel=1e-9)

    def test_dimensioned_equals_bare(self):
        bare = compute_epsII(self.law, 1e6, T=self.T, d=self.d)
        dim = compute_epsII(self.law, Q_(1.0, 'MPa'), T=Q_(650.0, 'degC'), d=Q_(100.0, 'micrometer'))
        assert dim.to('1/s').magnitude == pytest.approx(bare, rel=1e-12)

    def test_scalar_array_equivalence(self):
        tau = np.array([1e5, 1e6, 1e7])
        T = np.array([900.0, 1000.0, 1100.0])
        eps = np.empty(3)
        compute_epsII_inplace(eps, self.law, tau, T=T, d=self.d)
        for i in range(3):
            assert eps[i] == pytest.approx(compute_epsII(self.law, tau[i], T=T[i], d=self.d), rel=1e-14)

    def test_scalar_conditions_with_array_stress(self):
        tau = np.full(10, 1e6)
        eps = np.empty(10)
        compute_epsII_inplace(eps, self.law, tau, T=self.T, d=self.d)
        assert np.allclose(eps, compute_epsII(self.law, 1e6, T=self.T, d=self.d), rtol=1e-14)

    def test_inverse(self):
        eps = 10.0 ** np.arange(-22.0, -12.0, 0.5)
        tau = compute_tauII(self.law, eps, T=self.T, d=self.d, P=0.0)
        eps_back = compute_epsII(self.law, tau, T=self.T, d=self.d, P=0.0)
        assert np.allclose(eps_back, eps, rtol=1e-10)

    def test_zero_grain_size_ill_posed(self):
        with pytest.raises(IllPosedParametersError):
            compute_epsII(self.law, 1e6, T=self.T, d=0.0)

    def test_zero_grain_size_in_array_fails_whole_call(self):
        with pytest.raises(IllPosedParametersError):
            compute_epsII(self.law, np.full(3, 1e6), T=self.T, d=np.array([1e-4, 0.0, 1e-4]))

    def test_zero_temperature_ill_posed(self):
        with pytest.raises(IllPosedParametersError):
            compute_epsII(self.law, 1e6, T=0.0, d=self.d)

    def test_replace(self):
        law = self.law.replace(apparatus='Invariant')
        assert law.FT == 1.0 and law.FE == 1.0
        assert law.E == self.law.E


class TestDislocationCreep:
    """测试位错蠕变"""

    def setup_method(self):
        self.law = set_dislocation_creep(OLIVINE_DISL)
        self.c = dict(T=1573.0, P=1e9)

    def test_inverse(self):
        tau = np.array([1e5, 1e6, 1e7, 1e8])
        eps = compute_epsII(self.law, tau, **self.c)
        assert np.allclose(compute_tauII(self.law, eps, **self.c), tau, rtol=1e-10)

    def test_stress_exponent(self):
        """应力加倍，应变率增加 2^n 倍"""
        e1 = compute_epsII(self.law, 1e6, **self.c)
        e2 = compute_epsII(self.law, 2e6, **self.c)
        assert e2 / e1 == pytest.approx(2.0 ** 3.5)

    def test_derivatives(self):
        tau = 1e7
        h = 1e-3 * tau
        fd = (compute_epsII(self.law, tau + h, **self.c)
              - compute_epsII(self.law, tau - h, **self.c)) / (2 * h)
        assert dEpsII_dTauII(self.law, tau, **self.c) == pytest.approx(fd, rel=1e-5)

        eps = compute_epsII(self.law, tau, **self.c)
        assert (dTauII_dEpsII(self.law, eps, **self.c)
                * dEpsII_dTauII(self.law, tau, **self.c)) == pytest.approx(1.0, rel=1e-10)

    def test_apparatus_factors(self):
        """简单剪切: ε = A (2τ)^n ... """
        base = DislocationCreep(n=3.0, A=1e-20, E=0.0, V=0.0, apparatus='Invariant')
        shear = base.replace(apparatus='SimpleShear')
        c = PointConditions(T=1000.0)
        e_inv = compute_epsII(base, 1e6, c)
        e_shear = compute_epsII(shear, 1e6, c)
        assert e_shear / e_inv == pytest.approx(8.0)

    def test_default_prefactor(self):
        law = DislocationCreep(n=3.5)
        # 1.5 MPa^-3.5 s^-1
        assert law.A == pytest.approx(1.5e-21)
        law = DislocationCreep(n=3.5, r=1.0)
        assert law.A == pytest.approx(1.5e-27)

    def test_negative_stress_rejected(self):
        """非整数 n 时负应力无意义"""
        with pytest.raises(IllPosedParametersError, match="tauII"):
            compute_epsII(self.law, -1e6, **self.c)
        with pytest.raises(IllPosedParametersError):
            dEpsII_dTauII(self.law, np.array([1e6, -1e6]), **self.c)

    def test_negative_strain_rate_rejected(self):
        with pytest.raises(IllPosedParametersError, match="epsII"):
            compute_tauII(self.law, np.array([1e-15, -1e-15]), **self.c)
        with pytest.raises(IllPosedParametersError):
            dTauII_dEpsII(self.law, -1e-15, **self.c)

    def test_unknown_apparatus(self):
        with pytest.raises(ValueError):
            DislocationCreep(apparatus='Torsion')

    def test_fugacity_exponent(self):
        law = DislocationCreep(n=1.0, r=1.0, A=1e-20, E=0.0, V=0.0, apparatus='Invariant')
        e1 = compute_epsII(law, 1e6, T=1000.0, f=1e8)
        e2 = compute_epsII(law, 1e6, T=1000.0, f=2e8)
        assert e2 / e1 == pytest.approx(2.0)
        with pytest.raises(IllPosedParametersError):
            compute_epsII(law, 1e6, T=1000.0, f=0.0)


class TestPresets:
    """测试预置参数库"""

    def test_listing(self):
        assert ANORTHITE_DIFF in diffusion_creep_presets()
        assert ANORTHITE_DISL in dislocation_creep_presets()

    def test_dislocation_anorthite(self):
        law = set_dislocation_creep(ANORTHITE_DISL)
        assert law.n == 3.0
        assert law.E == pytest.approx(641e3)
        # 10^12.7 MPa^-3 s^-1 -> Pa^-3 s^-1
        assert law.A == pytest.approx(10.0 ** 12.7 * 1e-18, rel=1e-12)

    def test_unknown_name(self):
        with pytest.raises(KeyError):
            set_diffusion_creep("Wet Granite | Nobody (1900)")
        with pytest.raises(KeyError):
            set_dislocation_creep("Wet Granite | Nobody (1900)")
