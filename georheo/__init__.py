"""
georheo: 地球动力学本构定律计算

- core: 单位、材料定律、双签名调度器
- solver: 按相汇总、0D 时间推进
- utils: 可视化
"""

__version__ = '0.1.0'
