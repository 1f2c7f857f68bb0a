"""
按相汇总物理量

两种相场:
1. 独占相 (aggregate_by_phase): 每个点有一个整数相编号
2. 分数相 (aggregate_by_fraction): 每个点有一组相分数 (最后一维)，和为 1

每个相只在属于它的点子集上调用一次原位调度器，结果写回调用方的数组。
结果数组由调用方持有，这里只写入，不保留引用。
"""

from typing import Any, Optional

import numpy as np

from georheo.core.dispatch import (
    DENSITY,
    EPS_II,
    TAU_II,
    as_conditions,
    evaluate_inplace,
    get_operation,
)
from georheo.core.materials.interfaces import ShapeMismatchError
from georheo.core.materials.phase_params import MaterialCollection, as_material_list
from georheo.core.materials.state import PointConditions
from georheo.core.units import shape_of

# 运算 -> 所需的定律类型
_LAW_KIND = {
    'density': 'density',
    'epsII': 'rheology',
    'tauII': 'rheology',
    'dEpsII_dTauII': 'rheology',
    'dTauII_dEpsII': 'rheology',
}


def _check_point_arrays(shape: tuple, primary, cond: PointConditions) -> None:
    """所有数组输入必须与结果数组同形状 (标量可广播)"""
    inputs = [('primary', primary)] + list(cond.supplied())
    for name, value in inputs:
        if value is None:
            continue
        s = shape_of(value)
        if s != () and s != shape:
            raise ShapeMismatchError(
                f"Input '{name}' has shape {s}, expected {shape} (shape of the result array)"
            )


def _take(value, mask: np.ndarray):
    if value is None or shape_of(value) == ():
        return value
    return value[mask]


def _evaluate_subset(law, op, mask: np.ndarray, primary, cond: PointConditions) -> np.ndarray:
    """在掩码选中的点上求值，返回紧凑的一维数组"""
    local = np.empty(int(np.count_nonzero(mask)))
    evaluate_inplace(local, law, op, _take(primary, mask), cond.subset(mask))
    return local


def aggregate_by_phase(
    result: np.ndarray,
    phases: np.ndarray,
    materials: MaterialCollection,
    operation: Any = 'density',
    primary: Optional[Any] = None,
    conditions: Optional[Any] = None,
    **fields
) -> None:
    """
    独占相汇总 (原位写入 result)

    对集合中每个具有所需定律的相:
    1. 构造掩码 phases == phase
    2. 在掩码子集上调用该相的定律
    3. 写回 result[mask]

    相编号在集合中不存在、或该相没有所需定律的点保持原值不变
    (调用方需自行初始化 result)。

    Args:
        result: 结果数组 (调用方持有)
        phases: 整数相编号数组，与 result 同形状
        materials: MaterialParams 序列或 相编号 -> MaterialParams 映射
        operation: 'density' | 'epsII' | 'tauII' | 'dEpsII_dTauII' | 'dTauII_dEpsII'
        primary: 主变量 (流变运算的 τII 或 εII)
        conditions: PointConditions 或字典
        **fields: 条件字段 (P=..., T=..., d=...)

    Raises:
        ShapeMismatchError: 输入数组与 result 形状不一致
    """
    op = get_operation(operation)
    kind = _LAW_KIND[op.name]
    phases = np.asarray(phases)
    if phases.shape != np.shape(result):
        raise ShapeMismatchError(
            f"Phase array shape {phases.shape} does not match result shape {np.shape(result)}"
        )
    cond = as_conditions(conditions, **fields)
    _check_point_arrays(np.shape(result), primary, cond)

    for mat in as_material_list(materials):
        if mat.is_empty(kind):
            continue
        mask = phases == mat.phase
        if not mask.any():
            continue
        law = mat.law_for(kind)
        result[mask] = _evaluate_subset(law, op, mask, primary, cond)


def aggregate_by_fraction(
    result: np.ndarray,
    phase_ratios: np.ndarray,
    materials: MaterialCollection,
    operation: Any = 'density',
    primary: Optional[Any] = None,
    conditions: Optional[Any] = None,
    **fields
) -> None:
    """
    分数相汇总 (原位写入 result)

    result = Σ_i fraction_i * value_i

    result 先清零；第 i 个材料对应 phase_ratios[..., i]。
    每个相只在分数严格大于 0 的点上求值，因此在分数为 0 的点上
    即使定律奇异也不影响结果。所有分数都为 0 的点结果为 0.0。

    Args:
        result: 结果数组 (调用方持有)
        phase_ratios: 相分数数组，维度 = result 维度 + 1，
                      最后一维长度 = 材料数
        materials: 有序材料集合
        operation, primary, conditions, **fields: 同 aggregate_by_phase

    Raises:
        ShapeMismatchError: 相分数数组维度或形状不符
    """
    op = get_operation(operation)
    kind = _LAW_KIND[op.name]
    ratios = np.asarray(phase_ratios)
    shape = np.shape(result)
    mats = as_material_list(materials)

    if ratios.ndim != len(shape) + 1:
        raise ShapeMismatchError(
            f"The phase ratio array should have one dimension more than the result array "
            f"(got {ratios.ndim}, expected {len(shape) + 1})"
        )
    if ratios.shape[:-1] != shape:
        raise ShapeMismatchError(
            f"Phase ratio array shape {ratios.shape} does not match result shape {shape}"
        )
    if ratios.shape[-1] != len(mats):
        raise ShapeMismatchError(
            f"Phase ratio array has {ratios.shape[-1]} phases but {len(mats)} materials were given"
        )
    cond = as_conditions(conditions, **fields)
    _check_point_arrays(shape, primary, cond)

    result[...] = 0.0
    for i, mat in enumerate(mats):
        if mat.is_empty(kind):
            continue
        fraction = ratios[..., i]
        mask = fraction > 0.0
        if not mask.any():
            continue
        law = mat.law_for(kind)
        scratch = _evaluate_subset(law, op, mask, primary, cond)
        result[mask] += scratch * fraction[mask]


# =============================================================================
# 便捷入口
# =============================================================================

def compute_density_by_phase(rho, phases, P, T, materials) -> None:
    """
    全域密度 (独占相)

    Example:
        rho = np.zeros(phases.shape)
        compute_density_by_phase(rho, phases, P, T, [mantle, crust])
    """
    aggregate_by_phase(rho, phases, materials, DENSITY, P=P, T=T)


def compute_density_by_fraction(rho, phase_ratios, P, T, materials) -> None:
    """全域密度 (分数相)"""
    aggregate_by_fraction(rho, phase_ratios, materials, DENSITY, P=P, T=T)


def compute_epsII_by_phase(epsII, phases, tauII, materials, conditions=None, **fields) -> None:
    """全域应变率不变量 (独占相)"""
    aggregate_by_phase(epsII, phases, materials, EPS_II, tauII, conditions, **fields)


def compute_epsII_by_fraction(epsII, phase_ratios, tauII, materials, conditions=None, **fields) -> None:
    """全域应变率不变量 (分数相，按分数加权)"""
    aggregate_by_fraction(epsII, phase_ratios, materials, EPS_II, tauII, conditions, **fields)


def compute_tauII_by_phase(tauII, phases, epsII, materials, conditions=None, **fields) -> None:
    """全域应力不变量 (独占相)"""
    aggregate_by_phase(tauII, phases, materials, TAU_II, epsII, conditions, **fields)


def compute_tauII_by_fraction(tauII, phase_ratios, epsII, materials, conditions=None, **fields) -> None:
    """全域应力不变量 (分数相，按分数加权)"""
    aggregate_by_fraction(tauII, phase_ratios, materials, TAU_II, epsII, conditions, **fields)
