# 文件: georheo/core/materials/creep/linear.py
"""
线性粘性蠕变

εII = τII / (2η)
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Dict

from ..interfaces import RheologyLaw, check_positive


@dataclass(frozen=True)
class LinearViscous(RheologyLaw):
    """
    线性粘性 (牛顿流体)

    τII = 2 η εII

    Attributes:
        eta: 粘度 [Pa s]

    Example:
        law = LinearViscous(eta=1e21)
        law.stress(1e-15, c)   # 2e6
    """

    eta: Any = 1e20

    units: ClassVar[Dict[str, Any]] = {'eta': 'Pa*s'}
    equation: ClassVar[str] = r"\tau_{II} = 2 \eta \dot{\varepsilon}_{II}"

    def __post_init__(self):
        self._normalize_parameters()

    def strain_rate(self, tauII, c):
        check_positive('eta', self.eta, self)
        return tauII / (2.0 * self.eta)

    def stress(self, epsII, c):
        check_positive('eta', self.eta, self)
        return 2.0 * self.eta * epsII

    def dstrain_rate_dstress(self, tauII, c):
        check_positive('eta', self.eta, self)
        return 0.0 * tauII + 1.0 / (2.0 * self.eta)

    def dstress_dstrain_rate(self, epsII, c):
        check_positive('eta', self.eta, self)
        return 0.0 * epsII + 2.0 * self.eta

    def __repr__(self) -> str:
        return f"LinearViscous(η={self.eta:.2e})"
