# 文件: georheo/core/materials/models/__init__.py
"""
组合流变模型

提供组装好的、可直接使用的流变模型:
- CompositeRheology: 串联组合 (如 Maxwell 粘弹性)
"""

from .composite import CompositeRheology

__all__ = ['CompositeRheology']
