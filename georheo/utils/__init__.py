from .visualizer import plot_stress_strainrate, plot_stress_time

__all__ = ['plot_stress_strainrate', 'plot_stress_time']
