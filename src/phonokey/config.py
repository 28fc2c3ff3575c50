"""
全域配置模組

提供統一的配置類別，控制日誌、計時等行為。

使用方式:
    from phonokey import Caverphone2

    # 簡單開啟 verbose 模式
    encoder = Caverphone2(verbose=True)

    # 進階: 使用標準 logging 控制
    import logging
    logging.getLogger("phonokey").setLevel(logging.DEBUG)
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .utils.logger import setup_logger


def configure_logging(verbose: bool = False) -> None:
    """
    根據 verbose 設定配置 logging

    Args:
        verbose: 是否開啟詳細日誌
    """
    if verbose:
        setup_logger(level=logging.DEBUG)
    # 非 verbose 時不主動設定，讓使用者透過標準 logging 控制


@dataclass
class EncoderConfig:
    """
    編碼器配置類別

    屬性:
        verbose: 是否開啟詳細日誌
        on_timing: 計時回呼函數 (operation: str, elapsed: float) -> None

    使用範例:
        def my_callback(op, elapsed):
            print(f"{op} took {elapsed:.3f}s")

        encoder = Caverphone2(EncoderConfig(verbose=True, on_timing=my_callback))
    """

    verbose: bool = False
    on_timing: Optional[Callable[[str, float], None]] = None

    def __post_init__(self):
        configure_logging(self.verbose)


# 預設配置實例 (靜默模式)
DEFAULT_CONFIG = EncoderConfig(verbose=False)
