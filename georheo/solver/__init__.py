"""
求解模块

- phase_aggregation: 按相 (独占或分数) 汇总全域物理量
- time_stepper: 0D 均匀实验的应力历史推进
"""

from .phase_aggregation import (
    aggregate_by_phase,
    aggregate_by_fraction,
    compute_density_by_phase,
    compute_density_by_fraction,
    compute_epsII_by_phase,
    compute_epsII_by_fraction,
    compute_tauII_by_phase,
    compute_tauII_by_fraction,
)
from .time_stepper import (
    ExperimentState,
    ZeroDExperiment,
    time_tauII_0D,
    time_tauII_0D_inplace,
)

__all__ = [
    'aggregate_by_phase',
    'aggregate_by_fraction',
    'compute_density_by_phase',
    'compute_density_by_fraction',
    'compute_epsII_by_phase',
    'compute_epsII_by_fraction',
    'compute_tauII_by_phase',
    'compute_tauII_by_fraction',
    'ExperimentState',
    'ZeroDExperiment',
    'time_tauII_0D',
    'time_tauII_0D_inplace',
]
