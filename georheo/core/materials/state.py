# 文件: georheo/core/materials/state.py
"""
点条件管理

PointConditions: 一个点 (或一组独立点) 的计算条件，
包括温度、压力、晶粒尺寸、逸度以及历史量 (旧应力、时间增量)。
"""

from dataclasses import dataclass, fields, replace
from typing import Any, Iterator, Optional, Tuple

import numpy as np

from ..units import is_quantity, shape_of, to_si
from .interfaces import MixedConditionsError


@dataclass(frozen=True)
class PointConditions:
    """
    点条件容器 (不可变)

    未给出的字段为 None，解析为裸数值时使用默认值。
    字段可以是标量或数组；同一次调用中的数组必须同形状，标量可与数组广播。

    Attributes:
        T: 温度 [K]
        P: 压力 [Pa]
        d: 晶粒尺寸 [m]
        f: 水逸度 [Pa]
        tauII_old: 上一时间步的应力不变量 [Pa]
        dt: 时间增量 [s]

    Example:
        c = PointConditions(T=Q_(650, 'degC'), d=Q_(100, 'micrometer'))
        c_next = c.with_history(tauII_old=1e6, dt=1e10)
    """

    T: Optional[Any] = None
    P: Optional[Any] = None
    d: Optional[Any] = None
    f: Optional[Any] = None
    tauII_old: Optional[Any] = None
    dt: Optional[Any] = None

    # SI 单位与默认值
    UNITS = {'T': 'K', 'P': 'Pa', 'd': 'm', 'f': 'Pa', 'tauII_old': 'Pa', 'dt': 's'}
    DEFAULTS = {'T': 1.0, 'P': 0.0, 'd': 1.0, 'f': 1.0, 'tauII_old': 0.0, 'dt': 1.0}

    def with_history(self, tauII_old, dt) -> 'PointConditions':
        """
        合并历史量

        返回新记录，原记录不变。
        """
        return replace(self, tauII_old=tauII_old, dt=dt)

    def supplied(self) -> Iterator[Tuple[str, Any]]:
        """显式给出的 (字段名, 值)"""
        for fld in fields(self):
            value = getattr(self, fld.name)
            if value is not None:
                yield fld.name, value

    def is_dimensioned(self) -> Optional[bool]:
        """
        所有显式字段是否带单位

        Returns:
            True / False；没有显式字段时返回 None
        """
        kinds = {is_quantity(v) for _, v in self.supplied()}
        if len(kinds) == 1:
            return kinds.pop()
        if not kinds:
            return None
        raise MixedConditionsError(
            "Conditions mix dimensioned quantities and bare numbers: "
            + ", ".join(f"{k}={v!r}" for k, v in self.supplied())
        )

    def resolved(self) -> 'PointConditions':
        """转换为 SI 裸数值并填充默认值"""
        values = {}
        for fld in fields(self):
            value = getattr(self, fld.name)
            if value is None:
                values[fld.name] = self.DEFAULTS[fld.name]
            else:
                values[fld.name] = to_si(value, self.UNITS[fld.name])
        return PointConditions(**values)

    def subset(self, mask: np.ndarray) -> 'PointConditions':
        """按布尔掩码选取数组字段 (标量字段保持不变)"""
        values = {}
        for name, value in self.supplied():
            values[name] = value if shape_of(value) == () else value[mask]
        return PointConditions(**values)

    def __repr__(self) -> str:
        body = ", ".join(f"{k}={v!r}" for k, v in self.supplied())
        return f"PointConditions({body})"
