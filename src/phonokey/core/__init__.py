"""
核心抽象層

定義演算法無關的接口、抽象基類與規則引擎。
"""

from .encoder_interface import StringEncoder
from .rules import RewriteRule, RuleKind, apply_rules

__all__ = [
    "StringEncoder",
    "RewriteRule",
    "RuleKind",
    "apply_rules",
]
