"""
日誌與計時工具

所有 logger 都掛在 "phonokey" 命名空間底下，預設只有 NullHandler，
函式庫本身不會主動輸出任何訊息。

使用方式:
    from phonokey.utils.logger import get_logger, setup_logger

    logger = get_logger("encoder.caverphone2")
    setup_logger(level=logging.DEBUG)  # 需要時才開啟
"""

from __future__ import annotations

import functools
import logging
import sys
import time
from typing import Callable, Optional

ROOT_LOGGER_NAME = "phonokey"
TIMING_LOGGER_NAME = f"{ROOT_LOGGER_NAME}.timing"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    取得 phonokey 命名空間下的 logger

    Args:
        name: 子 logger 名稱 (如 "encoder.caverphone2")，None 則回傳根 logger
    """
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + ".") or name == ROOT_LOGGER_NAME:
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logger(level: int = logging.INFO, stream=None) -> logging.Logger:
    """
    為根 logger 加上一個 StreamHandler (重複呼叫只會調整等級)

    Args:
        level: 日誌等級
        stream: 輸出目標，預設 sys.stderr
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    handler = next(
        (h for h in logger.handlers if getattr(h, "_phonokey_handler", False)),
        None,
    )
    if handler is None:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._phonokey_handler = True
        logger.addHandler(handler)
    handler.setLevel(level)
    return logger


def enable_debug_logging() -> logging.Logger:
    """開啟完整 DEBUG 日誌"""
    return setup_logger(level=logging.DEBUG)


def enable_timing_logging() -> logging.Logger:
    """只開啟計時日誌 (其餘維持原狀)"""
    setup_logger(level=logging.getLogger(ROOT_LOGGER_NAME).getEffectiveLevel())
    timing_logger = logging.getLogger(TIMING_LOGGER_NAME)
    timing_logger.setLevel(logging.DEBUG)
    # 計時訊息由根 logger 的 handler 輸出，handler 等級需放寬
    for handler in logging.getLogger(ROOT_LOGGER_NAME).handlers:
        if getattr(handler, "_phonokey_handler", False):
            handler.setLevel(logging.DEBUG)
    return timing_logger


class TimingContext:
    """
    計時 context manager

    離開區塊時記錄耗時，並呼叫可選的回呼 callback(operation, elapsed_seconds)。

    範例:
        >>> with TimingContext("encode_batch", logger=get_logger("demo")):
        ...     pass
    """

    def __init__(
        self,
        operation: str,
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
        callback: Optional[Callable[[str, float], None]] = None,
    ):
        self.operation = operation
        self.logger = logger or logging.getLogger(TIMING_LOGGER_NAME)
        self.level = level
        self.callback = callback
        self.elapsed: float = 0.0
        self._start: float = 0.0

    def __enter__(self) -> "TimingContext":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.elapsed = time.perf_counter() - self._start
        self.logger.log(self.level, "%s took %.3f ms", self.operation, self.elapsed * 1000)
        if self.callback is not None:
            self.callback(self.operation, self.elapsed)
        return False


def log_timing(operation: Optional[str] = None, level: int = logging.DEBUG):
    """
    計時裝飾器 (TimingContext 的裝飾器版本)

    Args:
        operation: 記錄用名稱，預設為函式的 __qualname__
        level: 日誌等級
    """

    def decorator(func: Callable) -> Callable:
        name = operation or func.__qualname__

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            with TimingContext(name, level=level):
                return func(*args, **kwargs)

        return wrapper

    return decorator
