# 文件: georheo/core/units.py
"""
单位解析服务

所有定律内部使用 SI 参考单位制 (K, Pa, m, s, kg/m^3, J/mol)。
本模块负责在带单位的量 (pint Quantity) 与裸数值之间转换:

- to_si(): 带单位的量 / 单位字符串 -> SI 数值；裸数值原样返回
- with_unit(): 给裸数值结果附加单位
- Parameter: 定律参数记录 (SI 数值 + 单位)

Example:
    from georheo.core.units import Q_, to_si
    to_si(Q_(1400, 'degC'), 'K')     # 1673.15
    to_si('10 mm', 'm')              # 0.01
    to_si(0.01, 'm')                 # 0.01 (视为已是 SI)
"""

from dataclasses import dataclass
from typing import Any, Union

import numpy as np
import pint

ureg = pint.UnitRegistry()
Q_ = ureg.Quantity


def is_quantity(x: Any) -> bool:
    """是否为带单位的量"""
    return isinstance(x, pint.Quantity)


def to_si(x: Any, unit: Union[str, pint.Unit]) -> Any:
    """
    将输入解析为 unit 下的裸数值

    Args:
        x: pint Quantity、单位字符串 (如 "2900 kg/m^3") 或裸数值/数组
        unit: 目标单位

    Returns:
        裸数值 (float 或 np.ndarray)

    Raises:
        pint.DimensionalityError: 量纲不匹配
    """
    if isinstance(x, str):
        x = Q_(x)
    if is_quantity(x):
        return x.to(unit).magnitude
    return x


def with_unit(value: Any, unit: Union[str, pint.Unit]) -> pint.Quantity:
    """给裸数值附加单位"""
    return Q_(value, unit)


def magnitude(x: Any) -> Any:
    """取数值部分 (裸数值原样返回)"""
    return x.magnitude if is_quantity(x) else x


def shape_of(x: Any) -> tuple:
    """数值部分的形状，标量为 ()"""
    return np.shape(magnitude(x))


@dataclass(frozen=True)
class Parameter:
    """
    定律参数

    Attributes:
        value: SI 单位下的数值
        unit: SI 单位 (pint 可解析的字符串或 Unit)
    """
    value: float
    unit: Any

    @property
    def quantity(self) -> pint.Quantity:
        """带单位的形式"""
        return Q_(self.value, self.unit)

    def __repr__(self) -> str:
        return f"Parameter({self.quantity:~P})"
