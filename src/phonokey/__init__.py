"""
phonokey - 語音 key 編碼器 (Phonetic Key Encoder)

核心概念：
- 把名字/單字轉成固定長度的語音 key，發音相近的拼寫得到相同的 key
- 以 key 完全相同作為比對原語，用於去重、搜尋與紀錄連結
- 目前提供 Caverphone 2.0 演算法

官方入口（穩定 API）：
- `phonokey.Caverphone2`
- `phonokey.caverphone2`
- `phonokey.PhoneticIndex`
"""

# =============================================================================
# Encoder 層（官方入口）
# =============================================================================
from phonokey.caverphone.encoder import Caverphone2, caverphone2
from phonokey.caverphone.config import Caverphone2Config

# =============================================================================
# 比對工具
# =============================================================================
from phonokey.matching import PhoneticIndex, dedupe_by_code

# =============================================================================
# 核心抽象（進階用途）
# =============================================================================
from phonokey.core import RewriteRule, RuleKind, StringEncoder, apply_rules

# =============================================================================
# 配置與日誌工具
# =============================================================================
from phonokey.config import EncoderConfig
from phonokey.utils.logger import enable_debug_logging, enable_timing_logging, get_logger

__all__ = [
    # Encoders
    "Caverphone2",
    "Caverphone2Config",
    "caverphone2",
    # Matching
    "PhoneticIndex",
    "dedupe_by_code",
    # Core (advanced)
    "StringEncoder",
    "RewriteRule",
    "RuleKind",
    "apply_rules",
    # Config / logging
    "EncoderConfig",
    "get_logger",
    "enable_debug_logging",
    "enable_timing_logging",
]

__version__ = "0.1.0"
