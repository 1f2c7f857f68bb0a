# 文件: georheo/core/materials/interfaces.py
"""
本构定律核心接口定义

设计原则:
1. ConstitutiveLaw: 所有定律的抽象基类，参数在构造时固定，计算不修改实例
2. DensityLaw / RheologyLaw: 按物理量划分的定律族
3. Protocol: 可选能力 (导数)，并非所有定律都提供闭式导数
4. 异常: 形状不匹配、单位混用、能力缺失、参数病态

所有 density() / strain_rate() / stress() 方法只接受 SI 裸数值
(标量或 np.ndarray，逐元素计算)。带单位的调用由 core.dispatch 处理。
"""

import dataclasses
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, Protocol, runtime_checkable

import numpy as np

from ..units import Parameter, to_si


# =============================================================================
# 异常
# =============================================================================

class ShapeMismatchError(ValueError):
    """数组形状不一致，或相分数数组维度不等于结果数组维度 + 1"""


class MixedConditionsError(TypeError):
    """同一次调用中混用了带单位的量和裸数值"""


class UnsupportedCapabilityError(NotImplementedError):
    """定律不具备所请求的闭式运算 (如反演或导数)"""


class IllPosedParametersError(ValueError):
    """参数与条件组合使公式无定义 (如晶粒尺寸为 0 而晶粒指数非 0)"""


# =============================================================================
# 定律基类
# =============================================================================

class ConstitutiveLaw(ABC):
    """
    本构定律抽象基类

    子类为 frozen dataclass，声明:
    - units: 参数名 -> SI 单位
    - equation: 闭式关系 (LaTeX)

    构造时可传入裸数值 (SI)、pint Quantity 或单位字符串，
    在 __post_init__ 中统一转换为 SI 浮点数。
    """

    units: ClassVar[Dict[str, Any]] = {}
    equation: ClassVar[str] = ""

    def _normalize_parameters(self) -> None:
        """将所有参数转换为 SI 浮点数 (frozen dataclass 内部使用)"""
        for name in self.units:
            value = to_si(getattr(self, name), self._unit_of(name))
            object.__setattr__(self, name, float(value))

    def _unit_of(self, name: str) -> Any:
        return self.units[name]

    def parameter(self, name: str) -> Parameter:
        """获取参数记录 (SI 数值 + 单位)"""
        if name not in self.units:
            raise KeyError(f"{type(self).__name__} has no parameter '{name}'")
        return Parameter(getattr(self, name), self._unit_of(name))

    def param_info(self) -> Dict[str, Any]:
        """返回定律名称、方程和参数"""
        return {
            'name': type(self).__name__,
            'equation': self.equation,
            'parameters': {name: self.parameter(name) for name in self.units},
        }

    def replace(self, **changes) -> 'ConstitutiveLaw':
        """返回修改了部分参数的新实例"""
        return dataclasses.replace(self, **changes)


class DensityLaw(ConstitutiveLaw):
    """密度定律"""

    @abstractmethod
    def density(self, P, T):
        """
        计算密度

        Args:
            P: 压力 [Pa]
            T: 温度 [K]

        Returns:
            ρ [kg/m^3]，与输入同形状
        """
        pass


class RheologyLaw(ConstitutiveLaw):
    """
    流变定律 (应力不变量 τII 与应变率不变量 εII 之间的关系)

    c 为已解析的 PointConditions (所有字段为 SI 裸数值)。
    """

    @abstractmethod
    def strain_rate(self, tauII, c):
        """由应力不变量计算应变率不变量 εII [1/s]"""
        pass

    @abstractmethod
    def stress(self, epsII, c):
        """由应变率不变量计算应力不变量 τII [Pa]"""
        pass


# =============================================================================
# 能力协议 (Protocol for duck typing)
# 没有闭式导数的定律不实现对应方法
# =============================================================================

@runtime_checkable
class StrainRateDerivative(Protocol):
    """∂εII/∂τII"""

    def dstrain_rate_dstress(self, tauII, c):
        ...


@runtime_checkable
class StressDerivative(Protocol):
    """∂τII/∂εII"""

    def dstress_dstrain_rate(self, epsII, c):
        ...


# =============================================================================
# 辅助函数
# =============================================================================

def check_positive(name: str, x, law: ConstitutiveLaw) -> None:
    """条件必须严格为正，否则公式无定义"""
    if np.any(np.asarray(x) <= 0):
        raise IllPosedParametersError(
            f"{type(law).__name__}: condition '{name}' must be positive, got {x}"
        )
