"""
比對模組

以語音 key 完全相同作為比對原語，提供索引與去重工具。
"""

from .index import PhoneticIndex, dedupe_by_code

__all__ = [
    "PhoneticIndex",
    "dedupe_by_code",
]
