# 文件: georheo/core/materials/elastic/__init__.py
"""
弹性模型模块

提供各种弹性响应模型:
- ConstantElasticity: 常剪切模量弹性
"""

from .constant import ConstantElasticity

__all__ = ['ConstantElasticity']
