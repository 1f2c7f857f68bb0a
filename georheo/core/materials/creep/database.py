# 文件: georheo/core/materials/creep/database.py
"""
蠕变定律预置参数库

参数以实验室常用单位给出 (MPa, µm, kJ/mol, cm^3/mol)，构造时由 pint 转换为 SI。

扩展指南:
    在 _DIFFUSION_PRESETS / _DISLOCATION_PRESETS 中添加条目，
    键为 "矿物 | 文献"，值为构造参数字典。
"""

from typing import Dict, List

from ...units import Q_, ureg
from .power_law import DiffusionCreep, DislocationCreep, lab_prefactor


def _prefactor(A: float, n: float, r: float = 0.0, p: float = 0.0):
    """A [MPa^(-n-r) µm^(-p) s^-1]"""
    return lab_prefactor(A, n, r, p, grain_unit=ureg.micrometer)


_DIFFUSION_PRESETS: Dict[str, dict] = {
    "Dry Anorthite | Bürgmann & Dresen (2008)": dict(
        n=1.0, r=0.0, p=-3.0,
        A=_prefactor(10.0 ** 12.1, n=1.0, p=-3.0),
        E=Q_(460.0, 'kJ/mol'),
        V=Q_(24.0, 'cm**3/mol'),
        apparatus='AxialCompression',
    ),
    "Dry Olivine | Hirth & Kohlstedt (2003)": dict(
        n=1.0, r=0.0, p=-3.0,
        A=_prefactor(10.0 ** 9.176, n=1.0, p=-3.0),
        E=Q_(375.0, 'kJ/mol'),
        V=Q_(5.0, 'cm**3/mol'),
        apparatus='AxialCompression',
    ),
}

_DISLOCATION_PRESETS: Dict[str, dict] = {
    "Dry Anorthite | Rybacki et al. (2006)": dict(
        n=3.0, r=0.0,
        A=_prefactor(10.0 ** 12.7, n=3.0),
        E=Q_(641.0, 'kJ/mol'),
        V=Q_(24.0, 'cm**3/mol'),
        apparatus='AxialCompression',
    ),
    "Dry Olivine | Hirth & Kohlstedt (2003)": dict(
        n=3.5, r=0.0,
        A=_prefactor(1.1e5, n=3.5),
        E=Q_(530.0, 'kJ/mol'),
        V=Q_(15.0, 'cm**3/mol'),
        apparatus='AxialCompression',
    ),
}


def diffusion_creep_presets() -> List[str]:
    """可用的扩散蠕变预置名称"""
    return sorted(_DIFFUSION_PRESETS)


def dislocation_creep_presets() -> List[str]:
    """可用的位错蠕变预置名称"""
    return sorted(_DISLOCATION_PRESETS)


def set_diffusion_creep(name: str) -> DiffusionCreep:
    """
    按名称创建扩散蠕变定律

    Raises:
        KeyError: 名称不存在
    """
    if name not in _DIFFUSION_PRESETS:
        raise KeyError(
            f"Unknown diffusion creep law '{name}'. Available: {diffusion_creep_presets()}"
        )
    return DiffusionCreep(name=name, **_DIFFUSION_PRESETS[name])


def set_dislocation_creep(name: str) -> DislocationCreep:
    """
    按名称创建位错蠕变定律

    Raises:
        KeyError: 名称不存在
    """
    if name not in _DISLOCATION_PRESETS:
        raise KeyError(
            f"Unknown dislocation creep law '{name}'. Available: {dislocation_creep_presets()}"
        )
    return DislocationCreep(name=name, **_DISLOCATION_PRESETS[name])
