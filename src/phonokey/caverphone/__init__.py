"""
Caverphone 模組

提供 Caverphone 2.0 語音編碼：將名字與單字映射到固定 10 碼的語音 key，
用於去重、搜尋與紀錄連結。

主要類別:
- Caverphone2: Caverphone 2.0 編碼器
- Caverphone2Config: 規則表與輸出格式

便捷函式:
- caverphone2: 使用預設編碼器編碼單字
"""

from __future__ import annotations

import importlib
from typing import Any

_LAZY_IMPORTS = {
    "Caverphone2": (".encoder", "Caverphone2"),
    "caverphone2": (".encoder", "caverphone2"),
    "Caverphone2Config": (".config", "Caverphone2Config"),
}

__all__ = [
    "Caverphone2",
    "Caverphone2Config",
    "caverphone2",
]


def __getattr__(name: str) -> Any:
    if name not in _LAZY_IMPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    module_path, attr_name = _LAZY_IMPORTS[name]
    module = importlib.import_module(module_path, __name__)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value


def __dir__() -> list[str]:
    return sorted(set(list(globals().keys()) + list(_LAZY_IMPORTS.keys())))
