# 文件: georheo/core/materials/phase_params.py
"""
相材料参数容器

MaterialParams: 一个相 (phase) 的所有本构定律，按类型分组。
"""

from dataclasses import dataclass
from typing import Mapping, Sequence, Tuple, Union

from .interfaces import DensityLaw, RheologyLaw
from .models.composite import CompositeRheology


# 定律类型 -> MaterialParams 字段
KINDS = ('density', 'creep_laws', 'elasticity')


@dataclass(frozen=True)
class MaterialParams:
    """
    单个相的材料参数

    每种类型可以有零个或多个定律；某类型为空表示该相不参与对应物理量的计算。

    Attributes:
        name: 材料名称
        phase: 相编号
        density: 密度定律 (只使用第一个)
        creep_laws: 蠕变定律 (串联)
        elasticity: 弹性定律 (串联)

    Example:
        crust = MaterialParams(
            name='Crust', phase=2,
            density=(ConstantDensity(rho=2900),),
            creep_laws=(LinearViscous(eta=1e23),),
        )
        crust.is_empty('density')   # False
    """

    name: str
    phase: int
    density: Tuple[DensityLaw, ...] = ()
    creep_laws: Tuple[RheologyLaw, ...] = ()
    elasticity: Tuple[RheologyLaw, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'phase', int(self.phase))
        for kind in KINDS:
            value = getattr(self, kind)
            if not isinstance(value, (tuple, list)):
                value = (value,)
            object.__setattr__(self, kind, tuple(value))

    def is_empty(self, kind: str) -> bool:
        """
        是否没有指定类型的定律

        Args:
            kind: 'density' | 'creep_laws' | 'elasticity' | 'rheology'
                  ('rheology' 表示蠕变与弹性都为空)
        """
        if kind == 'rheology':
            return not (self.creep_laws or self.elasticity)
        if kind not in KINDS:
            raise ValueError(f"Unknown law kind '{kind}', expected one of {KINDS + ('rheology',)}")
        return len(getattr(self, kind)) == 0

    def density_law(self) -> DensityLaw:
        """第一个密度定律"""
        if not self.density:
            raise ValueError(f"Material '{self.name}' (phase {self.phase}) has no density law")
        return self.density[0]

    def rheology(self) -> RheologyLaw:
        """
        流变关系

        只有一个元件时直接返回该元件，否则返回蠕变与弹性的串联组合。
        """
        elements = self.creep_laws + self.elasticity
        if not elements:
            raise ValueError(f"Material '{self.name}' (phase {self.phase}) has no rheology")
        if len(elements) == 1:
            return elements[0]
        return CompositeRheology(elements)

    def law_for(self, kind: str):
        """按类型取用于计算的定律"""
        if kind == 'density':
            return self.density_law()
        if kind == 'rheology':
            return self.rheology()
        raise ValueError(f"Unknown law kind '{kind}'")

    def __repr__(self) -> str:
        return (
            f"MaterialParams('{self.name}', phase={self.phase}, "
            f"density={len(self.density)}, creep_laws={len(self.creep_laws)}, "
            f"elasticity={len(self.elasticity)})"
        )


MaterialCollection = Union[Sequence[MaterialParams], Mapping[int, MaterialParams]]


def as_material_list(materials: MaterialCollection) -> Tuple[MaterialParams, ...]:
    """
    将材料集合统一为有序元组

    接受 MaterialParams 序列，或 相编号 -> MaterialParams 的映射 (按插入顺序)。
    """
    if isinstance(materials, Mapping):
        result = []
        for phase, mat in materials.items():
            if mat.phase != int(phase):
                raise ValueError(
                    f"Material '{mat.name}' is stored under phase {phase} "
                    f"but declares phase {mat.phase}"
                )
            result.append(mat)
        return tuple(result)
    return tuple(materials)
