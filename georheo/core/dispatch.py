# 文件: georheo/core/dispatch.py
"""
双签名调度器

同一个定律公式通过四种调用形式暴露:
1. 标量、带单位:  compute_density(law, P=Q_(1e9, 'Pa'), T=Q_(1000, 'K'))  -> Quantity
2. 标量、裸数值:  compute_density(law, P=1e9, T=1000.0)                  -> float
3. 数组、函数式:  compute_density(law, P=P_arr, T=T_arr)                  -> np.ndarray
4. 数组、原位:    compute_density_inplace(rho, law, P_arr, T_arr)         -> None

规则:
- 同一次调用的输入必须全部带单位或全部为裸数值，混用抛出 MixedConditionsError
- 数组输入必须同形状 (标量可广播)，否则抛出 ShapeMismatchError
- 原位形式的输出数组形状必须与输入数组形状一致
- 定律不具备所请求能力时抛出 UnsupportedCapabilityError
- 带单位与裸数值两条路径调用同一公式，结果数值一致
"""

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Union

import numpy as np

from .units import is_quantity, shape_of, to_si, with_unit
from .materials.interfaces import (
    DensityLaw,
    MixedConditionsError,
    RheologyLaw,
    ShapeMismatchError,
    StrainRateDerivative,
    StressDerivative,
    UnsupportedCapabilityError,
)
from .materials.state import PointConditions


@dataclass(frozen=True)
class Operation:
    """
    一种定律运算

    Attributes:
        name: 运算名称
        method: 定律上的方法名
        unit: 结果的 SI 单位
        primary_unit: 主变量的 SI 单位 (密度运算没有主变量)
        requires: 定律必须满足的类型或协议
    """
    name: str
    method: str
    unit: str
    primary_unit: Optional[str]
    requires: Any

    def kernel(self, law) -> Callable:
        """取定律上的计算方法，能力缺失时报错"""
        if not isinstance(law, self.requires):
            raise UnsupportedCapabilityError(
                f"{type(law).__name__} does not support '{self.name}'"
            )
        return getattr(law, self.method)


DENSITY = Operation('density', 'density', 'kg/m**3', None, DensityLaw)
EPS_II = Operation('epsII', 'strain_rate', '1/s', 'Pa', RheologyLaw)
TAU_II = Operation('tauII', 'stress', 'Pa', '1/s', RheologyLaw)
DEPS_DTAU = Operation('dEpsII_dTauII', 'dstrain_rate_dstress', '1/(Pa*s)', 'Pa', StrainRateDerivative)
DTAU_DEPS = Operation('dTauII_dEpsII', 'dstress_dstrain_rate', 'Pa*s', '1/s', StressDerivative)

OPERATIONS = {op.name: op for op in (DENSITY, EPS_II, TAU_II, DEPS_DTAU, DTAU_DEPS)}


def get_operation(operation: Union[str, Operation]) -> Operation:
    if isinstance(operation, Operation):
        return operation
    try:
        return OPERATIONS[operation]
    except KeyError:
        raise ValueError(
            f"Unknown operation '{operation}', expected one of {sorted(OPERATIONS)}"
        ) from None


# =============================================================================
# 输入解析
# =============================================================================

def as_conditions(conditions: Optional[Any] = None, **fields) -> PointConditions:
    """
    将条件统一为 PointConditions

    Args:
        conditions: PointConditions、字典或 None
        **fields: 追加或覆盖的字段 (T=..., P=..., d=...)
    """
    if conditions is None:
        base = {}
    elif isinstance(conditions, PointConditions):
        base = dict(conditions.supplied())
    elif isinstance(conditions, Mapping):
        base = dict(conditions)
    else:
        raise TypeError(f"conditions must be PointConditions or a mapping, got {type(conditions).__name__}")
    base.update({k: v for k, v in fields.items() if v is not None})
    return PointConditions(**base)


def _check_consistency(primary, conditions: PointConditions) -> bool:
    """
    检查单位一致性与数组形状

    Returns:
        输入是否带单位
    """
    dimensioned = conditions.is_dimensioned()
    if primary is not None:
        if dimensioned is None:
            dimensioned = is_quantity(primary)
        elif is_quantity(primary) != dimensioned:
            raise MixedConditionsError(
                f"Primary argument {primary!r} and conditions {conditions!r} "
                f"mix dimensioned quantities and bare numbers"
            )
    return bool(dimensioned)


def _array_shape(primary, conditions: PointConditions) -> tuple:
    """
    所有数组输入的共同形状；全部为标量时返回 ()

    Raises:
        ShapeMismatchError: 数组形状不一致
    """
    shapes = {}
    if primary is not None and shape_of(primary) != ():
        shapes['primary'] = shape_of(primary)
    for name, value in conditions.supplied():
        if shape_of(value) != ():
            shapes[name] = shape_of(value)
    distinct = set(shapes.values())
    if len(distinct) > 1:
        raise ShapeMismatchError(f"Condition arrays have different shapes: {shapes}")
    return distinct.pop() if distinct else ()


def _evaluate_bare(op: Operation, law, primary, conditions: PointConditions):
    """在 SI 裸数值上执行公式"""
    kernel = op.kernel(law)
    c = conditions.resolved()
    if op is DENSITY:
        return kernel(c.P, c.T)
    return kernel(to_si(primary, op.primary_unit), c)


# =============================================================================
# 通用入口
# =============================================================================

def evaluate(law, operation: Union[str, Operation], primary=None, conditions=None, **fields):
    """
    函数式调用 (标量或数组，带单位或裸数值)

    Returns:
        标量带单位 -> Quantity；标量裸数值 -> float；
        数组 -> np.ndarray (带单位输入时为 Quantity 数组)
    """
    op = get_operation(operation)
    cond = as_conditions(conditions, **fields)
    dimensioned = _check_consistency(primary, cond)
    shape = _array_shape(primary, cond)

    if shape == ():
        value = float(_evaluate_bare(op, law, primary, cond))
    else:
        value = np.empty(shape)
        _fill(value, op, law, primary, cond)

    if dimensioned:
        return with_unit(value, op.unit)
    return value


def evaluate_inplace(out: np.ndarray, law, operation: Union[str, Operation],
                     primary=None, conditions=None, **fields) -> None:
    """
    原位调用: 将结果逐元素写入调用方提供的数组 out (SI 裸数值)

    Raises:
        ShapeMismatchError: out 与输入数组形状不一致
    """
    op = get_operation(operation)
    cond = as_conditions(conditions, **fields)
    _check_consistency(primary, cond)
    shape = _array_shape(primary, cond)
    if shape != () and np.shape(out) != shape:
        raise ShapeMismatchError(
            f"Output array shape {np.shape(out)} does not match input shape {shape}"
        )
    _fill(out, op, law, primary, cond)


def _fill(out: np.ndarray, op: Operation, law, primary, cond: PointConditions) -> None:
    out[...] = _evaluate_bare(op, law, primary, cond)


# =============================================================================
# 按物理量的便捷函数
# =============================================================================

def compute_density(law, P=None, T=None):
    """
    计算密度 ρ(P, T)

    Example:
        compute_density(PTDensity(), P=0.0, T=100.0)          # 2891.3
        compute_density(PTDensity(), P=Q_(0, 'MPa'), T=Q_(100, 'K'))
    """
    return evaluate(law, DENSITY, None, None, P=P, T=T)


def compute_density_inplace(rho: np.ndarray, law, P=None, T=None) -> None:
    """原位计算密度，写入 rho"""
    evaluate_inplace(rho, law, DENSITY, None, None, P=P, T=T)


def compute_epsII(law, tauII, conditions=None, **fields):
    """由 τII 计算 εII"""
    return evaluate(law, EPS_II, tauII, conditions, **fields)


def compute_epsII_inplace(epsII: np.ndarray, law, tauII, conditions=None, **fields) -> None:
    """原位由 τII 计算 εII，写入 epsII"""
    evaluate_inplace(epsII, law, EPS_II, tauII, conditions, **fields)


def compute_tauII(law, epsII, conditions=None, **fields):
    """由 εII 计算 τII"""
    return evaluate(law, TAU_II, epsII, conditions, **fields)


def compute_tauII_inplace(tauII: np.ndarray, law, epsII, conditions=None, **fields) -> None:
    """原位由 εII 计算 τII，写入 tauII"""
    evaluate_inplace(tauII, law, TAU_II, epsII, conditions, **fields)


def dEpsII_dTauII(law, tauII, conditions=None, **fields):
    """∂εII/∂τII"""
    return evaluate(law, DEPS_DTAU, tauII, conditions, **fields)


def dTauII_dEpsII(law, epsII, conditions=None, **fields):
    """∂τII/∂εII"""
    return evaluate(law, DTAU_DEPS, epsII, conditions, **fields)
