# 文件: georheo/core/materials/__init__.py
"""
georheo 材料系统

分层架构:
- interfaces.py: 抽象基类、能力协议和异常
- state.py: 点条件管理
- density/: 密度定律 (常密度、P-T 密度、相图查表)
- creep/: 蠕变定律 (线性粘性、扩散蠕变、位错蠕变、预置参数库)
- elastic/: 弹性定律
- models/: 组合流变模型
- phase_params.py: 按相分组的材料参数
- factory.py: 材料工厂

使用方法:
    from georheo.core.materials import MaterialFactory, PointConditions

    # 创建材料
    crust = MaterialFactory.create('Crust', {
        'phase': 1,
        'density': {'type': 'PT', 'rho0': '2900 kg/m^3'},
        'creep': {'type': 'LinearViscous', 'eta': '1e21 Pa*s'},
    })

    # 计算
    law = crust.rheology()
    eps = law.strain_rate(1e6, PointConditions(T=1000.0).resolved())

扩展指南:
    添加新密度定律:
        1. 在 density/ 目录添加新类，继承 DensityLaw (frozen dataclass)
        2. 声明 units，实现 density(P, T)

    添加新流变定律:
        1. 继承 RheologyLaw，实现 strain_rate() 和 stress()
        2. 有闭式导数时实现 dstrain_rate_dstress() / dstress_dstrain_rate()
"""

# 核心接口
from .interfaces import (
    ConstitutiveLaw,
    DensityLaw,
    RheologyLaw,
    StrainRateDerivative,
    StressDerivative,
    ShapeMismatchError,
    MixedConditionsError,
    UnsupportedCapabilityError,
    IllPosedParametersError,
)

# 状态
from .state import PointConditions

# 密度
from .density import (
    ConstantDensity,
    PTDensity,
    PhaseDiagramDensity,
    PhaseDiagramLookupTable,
)

# 蠕变
from .creep import (
    LinearViscous,
    DiffusionCreep,
    DislocationCreep,
    set_diffusion_creep,
    set_dislocation_creep,
    diffusion_creep_presets,
    dislocation_creep_presets,
)

# 弹性
from .elastic import ConstantElasticity

# 组合模型
from .models import CompositeRheology

# 相参数与工厂
from .phase_params import MaterialParams, as_material_list
from .factory import MaterialFactory


__all__ = [
    # 核心接口
    'ConstitutiveLaw',
    'DensityLaw',
    'RheologyLaw',
    'StrainRateDerivative',
    'StressDerivative',

    # 异常
    'ShapeMismatchError',
    'MixedConditionsError',
    'UnsupportedCapabilityError',
    'IllPosedParametersError',

    # 状态
    'PointConditions',

    # 密度
    'ConstantDensity',
    'PTDensity',
    'PhaseDiagramDensity',
    'PhaseDiagramLookupTable',

    # 蠕变
    'LinearViscous',
    'DiffusionCreep',
    'DislocationCreep',
    'set_diffusion_creep',
    'set_dislocation_creep',
    'diffusion_creep_presets',
    'dislocation_creep_presets',

    # 弹性
    'ConstantElasticity',

    # 组合模型
    'CompositeRheology',

    # 相参数与工厂
    'MaterialParams',
    'as_material_list',
    'MaterialFactory',
]
