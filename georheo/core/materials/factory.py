# 文件: georheo/core/materials/factory.py
"""
材料工厂模块

提供统一的材料创建入口 (由配置字典创建 MaterialParams)。
"""

from typing import Any, Dict, List, Optional

from .interfaces import ConstitutiveLaw
from .phase_params import MaterialParams
from .density import ConstantDensity, PTDensity, PhaseDiagramDensity
from .creep import (
    LinearViscous,
    DiffusionCreep,
    DislocationCreep,
    set_diffusion_creep,
    set_dislocation_creep,
)
from .elastic import ConstantElasticity


_DENSITY_TYPES = {
    'Constant': ConstantDensity,
    'PT': PTDensity,
    'PhaseDiagram': PhaseDiagramDensity,
}

_CREEP_TYPES = {
    'LinearViscous': LinearViscous,
    'DiffusionCreep': DiffusionCreep,
    'DislocationCreep': DislocationCreep,
}

_CREEP_PRESETS = {
    'DiffusionCreep': set_diffusion_creep,
    'DislocationCreep': set_dislocation_creep,
}


class MaterialFactory:
    """
    材料工厂

    根据材料属性字典创建 MaterialParams。
    数值可以是 SI 裸数值、pint Quantity 或带单位的字符串。

    Example:
        # 从属性字典创建
        mat = MaterialFactory.create('Crust', {
            'phase': 2,
            'density': {'type': 'PT', 'rho0': '2900 kg/m^3', 'alpha': 3e-5},
            'creep': [
                {'type': 'DiffusionCreep',
                 'preset': 'Dry Anorthite | Bürgmann & Dresen (2008)'},
                {'type': 'LinearViscous', 'eta': '1e23 Pa*s'},
            ],
            'elasticity': {'G': '30 GPa'},
        })

        # 使用便捷方法
        rho = MaterialFactory.create_constant_density(2900)
    """

    @staticmethod
    def create(name: str, props: Dict[str, Any]) -> MaterialParams:
        """
        根据属性字典创建材料

        Args:
            name: 材料名称 (用于错误消息)
            props: 材料属性字典，结构:
                {
                    'phase': int,                  # 相编号 (必需)
                    'density': dict,               # 密度 (可选)
                        # {'type': 'Constant'|'PT'|'PhaseDiagram', ...参数}
                    'creep': dict | [dict, ...],   # 蠕变定律 (可选)
                        # {'type': 'LinearViscous'|'DiffusionCreep'|'DislocationCreep',
                        #  'preset': str (可选), ...参数}
                    'elasticity': dict,            # 弹性 (可选) {'G': ..., 'nu': ...}
                }

        Returns:
            MaterialParams: 材料参数

        Raises:
            ValueError: 缺少必需参数或类型未知
        """
        phase = props.get('phase')
        if phase is None:
            raise ValueError(f"Material '{name}' missing required parameter 'phase'")

        density = [
            MaterialFactory._create_density(name, spec)
            for spec in _as_list(props.get('density'))
        ]
        creep = [
            MaterialFactory._create_creep(name, spec)
            for spec in _as_list(props.get('creep'))
        ]
        elasticity = [
            MaterialFactory._create_elasticity(name, spec)
            for spec in _as_list(props.get('elasticity'))
        ]

        return MaterialParams(
            name=name,
            phase=int(phase),
            density=tuple(density),
            creep_laws=tuple(creep),
            elasticity=tuple(elasticity),
        )

    @staticmethod
    def create_collection(config: Dict[str, Dict[str, Any]]) -> List[MaterialParams]:
        """
        由 {名称: 属性字典} 创建有序材料列表 (按相编号排序)
        """
        materials = [MaterialFactory.create(name, props) for name, props in config.items()]
        phases = [m.phase for m in materials]
        if len(set(phases)) != len(phases):
            raise ValueError(f"Duplicate phase ids in material configuration: {phases}")
        return sorted(materials, key=lambda m: m.phase)

    @staticmethod
    def _create_density(name: str, spec: Dict[str, Any]) -> ConstitutiveLaw:
        spec = dict(spec)
        kind = spec.pop('type', 'Constant')
        cls = _DENSITY_TYPES.get(kind)
        if cls is None:
            raise ValueError(
                f"Material '{name}' has unknown density type '{kind}', "
                f"expected one of {sorted(_DENSITY_TYPES)}"
            )
        return cls(**spec)

    @staticmethod
    def _create_creep(name: str, spec: Dict[str, Any]) -> ConstitutiveLaw:
        spec = dict(spec)
        kind = spec.pop('type', None)
        cls = _CREEP_TYPES.get(kind)
        if cls is None:
            raise ValueError(
                f"Material '{name}' has unknown creep type '{kind}', "
                f"expected one of {sorted(_CREEP_TYPES)}"
            )
        preset = spec.pop('preset', None)
        if preset is None:
            return cls(**spec)
        if kind not in _CREEP_PRESETS:
            raise ValueError(f"Material '{name}': creep type '{kind}' has no presets")
        law = _CREEP_PRESETS[kind](preset)
        return law.replace(**spec) if spec else law

    @staticmethod
    def _create_elasticity(name: str, spec: Dict[str, Any]) -> ConstitutiveLaw:
        spec = dict(spec)
        kind = spec.pop('type', 'Constant')
        if kind != 'Constant':
            raise ValueError(f"Material '{name}' has unknown elasticity type '{kind}'")
        return ConstantElasticity(**spec)

    @staticmethod
    def create_constant_density(rho: Any = 2900.0) -> ConstantDensity:
        """
        创建常密度定律

        Args:
            rho: 密度 [kg/m^3]
        """
        return ConstantDensity(rho=rho)

    @staticmethod
    def create_pt_density(
        rho0: Any = 2900.0,
        alpha: Any = 3e-5,
        beta: Any = 1e-9,
        T0: Any = 0.0,
        P0: Any = 0.0
    ) -> PTDensity:
        """
        创建压力/温度相关密度定律
        """
        return PTDensity(rho0=rho0, alpha=alpha, beta=beta, T0=T0, P0=P0)

    @staticmethod
    def create_linear_viscous(eta: Any = 1e20) -> LinearViscous:
        """
        创建线性粘性定律

        Args:
            eta: 粘度 [Pa s]
        """
        return LinearViscous(eta=eta)


def _as_list(spec: Optional[Any]) -> List[Dict[str, Any]]:
    if spec is None:
        return []
    if isinstance(spec, dict):
        return [spec]
    return list(spec)
