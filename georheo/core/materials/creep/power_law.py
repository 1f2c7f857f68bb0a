# 文件: georheo/core/materials/creep/power_law.py
"""
幂律蠕变

提供:
- DiffusionCreep: 扩散蠕变 (晶粒尺寸相关)
- DislocationCreep: 位错蠕变

通用形式:
    εII = A (τII FT)^n f^r d^p exp(-(E + P V) / (R T)) / FE

实验室数据通常以单轴压缩或简单剪切给出，FT / FE 将其转换为张量不变量形式。
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Dict

import numpy as np

from ...units import Q_, to_si, ureg
from ..interfaces import IllPosedParametersError, RheologyLaw, check_positive

# 气体常数 [J/mol/K]
R_GAS = 8.3145

# 未给出 A 时的默认指前因子 [MPa^(-n-r) m^(-p) s^-1]
DEFAULT_PREFACTOR = 1.5

# 实验装置修正系数 (FT, FE)
APPARATUS_FACTORS = {
    'AxialCompression': (np.sqrt(3.0), 2.0 / np.sqrt(3.0)),
    'SimpleShear': (2.0, 1.0),
    'Invariant': (1.0, 1.0),
}


def lab_prefactor(A: float, n: float, r: float = 0.0, p: float = 0.0, grain_unit=ureg.m):
    """A [MPa^(-n-r) grain_unit^(-p) s^-1]，单位由定律自身的指数决定"""
    return Q_(A, ureg.MPa ** (-(n + r)) * grain_unit ** (-p) / ureg.s)


class PowerLawCreep(RheologyLaw):
    """
    幂律蠕变公共实现

    子类需声明字段 n, r, A, E, V, apparatus；
    DiffusionCreep 另有晶粒指数 p。
    """

    @property
    def grain_size_exponent(self) -> float:
        return 0.0

    def _unit_of(self, name: str) -> Any:
        if name == 'A':
            # A: Pa^(-n-r) m^(-p) s^-1
            return (ureg.Pa ** (-(self.n + self.r))
                    * ureg.m ** (-self.grain_size_exponent) / ureg.s)
        return self.units[name]

    def _normalize_parameters(self) -> None:
        if self.A is None:
            n = float(to_si(self.n, ''))
            r = float(to_si(self.r, ''))
            p = float(to_si(self.grain_size_exponent, ''))
            object.__setattr__(self, 'A', lab_prefactor(DEFAULT_PREFACTOR, n, r, p))
        super()._normalize_parameters()

    @property
    def FT(self) -> float:
        return APPARATUS_FACTORS[self.apparatus][0]

    @property
    def FE(self) -> float:
        return APPARATUS_FACTORS[self.apparatus][1]

    def _check_apparatus(self):
        if self.apparatus not in APPARATUS_FACTORS:
            raise ValueError(
                f"Unknown apparatus '{self.apparatus}', "
                f"expected one of {sorted(APPARATUS_FACTORS)}"
            )

    def _check_invariant(self, name: str, x) -> None:
        """应力/应变率不变量不能为负"""
        if np.any(np.asarray(x) < 0):
            raise IllPosedParametersError(
                f"{type(self).__name__}: invariant '{name}' must be non-negative, got {x}"
            )

    def _prefactor(self, c):
        """
        A f^r d^p exp(-(E + P V) / (R T))
        """
        check_positive('T', c.T, self)
        if self.n == 0:
            raise IllPosedParametersError(f"{type(self).__name__}: stress exponent n must be non-zero")
        if self.r != 0:
            check_positive('f', c.f, self)
        p = self.grain_size_exponent
        if p != 0:
            check_positive('d', c.d, self)
        return (self.A * np.power(c.f, self.r) * np.power(c.d, p)
                * np.exp(-(self.E + c.P * self.V) / (R_GAS * c.T)))

    def strain_rate(self, tauII, c):
        self._check_invariant('tauII', tauII)
        return self._prefactor(c) * np.power(tauII * self.FT, self.n) / self.FE

    def stress(self, epsII, c):
        self._check_invariant('epsII', epsII)
        return np.power(epsII * self.FE / self._prefactor(c), 1.0 / self.n) / self.FT

    def dstrain_rate_dstress(self, tauII, c):
        self._check_invariant('tauII', tauII)
        n = self.n
        return n * self._prefactor(c) * self.FT ** n * np.power(tauII, n - 1.0) / self.FE

    def dstress_dstrain_rate(self, epsII, c):
        self._check_invariant('epsII', epsII)
        n = self.n
        return (np.power(self.FE / self._prefactor(c), 1.0 / n)
                * np.power(epsII, 1.0 / n - 1.0) / (n * self.FT))


@dataclass(frozen=True)
class DiffusionCreep(PowerLawCreep):
    """
    扩散蠕变

    εII = A (τII FT)^n f^r d^p exp(-(E + P V) / (R T)) / FE

    Attributes:
        n: 应力指数 (通常为 1)
        r: 逸度指数
        p: 晶粒尺寸指数 (通常为 -3)
        A: 指前因子 [Pa^(-n-r) m^(-p) s^-1]，未给出时为 1.5 MPa^(-n-r) m^(-p) s^-1
        E: 活化能 [J/mol]
        V: 活化体积 [m^3/mol]
        apparatus: 'AxialCompression' | 'SimpleShear' | 'Invariant'

    Example:
        law = set_diffusion_creep("Dry Anorthite | Bürgmann & Dresen (2008)")
        compute_tauII(law, 1e-15, T=923.15, d=100e-6)
    """

    name: str = ""
    n: Any = 1.0
    r: Any = 0.0
    p: Any = -3.0
    A: Any = None
    E: Any = "500 kJ/mol"
    V: Any = "6e-6 m**3/mol"
    apparatus: str = 'AxialCompression'

    units: ClassVar[Dict[str, Any]] = {
        'n': '',
        'r': '',
        'p': '',
        'A': None,
        'E': 'J/mol',
        'V': 'm**3/mol',
    }
    equation: ClassVar[str] = (
        r"\dot{\varepsilon}_{II} = A \tau_{II}^n d^{p} f_{H_2O}^r \exp\left(-{{E+PV} \over RT} \right)"
    )

    def __post_init__(self):
        self._check_apparatus()
        self._normalize_parameters()

    @property
    def grain_size_exponent(self) -> float:
        return self.p

    def __repr__(self) -> str:
        return (
            f"DiffusionCreep('{self.name}', n={self.n}, r={self.r}, p={self.p}, "
            f"A={self.A:.3e}, E={self.E:.3e}, V={self.V:.3e}, apparatus={self.apparatus})"
        )


@dataclass(frozen=True)
class DislocationCreep(PowerLawCreep):
    """
    位错蠕变

    εII = A (τII FT)^n f^r exp(-(E + P V) / (R T)) / FE

    Attributes:
        n: 应力指数
        r: 逸度指数
        A: 指前因子 [Pa^(-n-r) s^-1]，未给出时为 1.5 MPa^(-n-r) s^-1
        E: 活化能 [J/mol]
        V: 活化体积 [m^3/mol]
        apparatus: 'AxialCompression' | 'SimpleShear' | 'Invariant'
    """

    name: str = ""
    n: Any = 1.0
    r: Any = 0.0
    A: Any = None
    E: Any = "476 kJ/mol"
    V: Any = "6e-6 m**3/mol"
    apparatus: str = 'AxialCompression'

    units: ClassVar[Dict[str, Any]] = {
        'n': '',
        'r': '',
        'A': None,
        'E': 'J/mol',
        'V': 'm**3/mol',
    }
    equation: ClassVar[str] = (
        r"\dot{\varepsilon}_{II} = A \sigma_d^n f_{H_2O}^r \exp\left(-{{E+PV} \over RT} \right)"
    )

    def __post_init__(self):
        self._check_apparatus()
        self._normalize_parameters()

    def __repr__(self) -> str:
        return (
            f"DislocationCreep('{self.name}', n={self.n}, r={self.r}, "
            f"A={self.A:.3e}, E={self.E:.3e}, V={self.V:.3e}, apparatus={self.apparatus})"
        )
