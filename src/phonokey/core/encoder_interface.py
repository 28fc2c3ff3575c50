"""
字串編碼器抽象基類

定義所有語音編碼演算法必須實作的介面。
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, Dict, Iterable, Optional

from phonokey.config import EncoderConfig
from phonokey.utils.logger import TimingContext, get_logger, setup_logger


class StringEncoder(ABC):
    """
    字串編碼器抽象基類 (Abstract Base Class)

    職責:
    - 定義 encode() 介面：字串 -> 語音 key，None 原樣傳回 None
    - 提供以 encode() 為基礎的 is_encode_equal() 與 encode_batch()
    - 管理日誌與計時回呼

    子類只需實作 encode()。編碼器本身不持有跨呼叫的可變狀態，
    同一實例可在多執行緒中共用。
    """

    _encoder_name: str = "base"

    def _init_logger(
        self,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
    ) -> None:
        self._verbose = verbose
        self._timing_callback = on_timing

        if verbose:
            setup_logger(level=logging.DEBUG)

        self._logger = get_logger(f"encoder.{self._encoder_name}")

    def _init_from_config(
        self,
        config: Optional[EncoderConfig],
        verbose: bool,
        on_timing: Optional[Callable[[str, float], None]],
    ) -> None:
        if config is not None:
            verbose = config.verbose or verbose
            on_timing = config.on_timing or on_timing
        self._init_logger(verbose=verbose, on_timing=on_timing)

    def _log_timing(self, operation: str) -> TimingContext:
        return TimingContext(
            operation=operation,
            logger=self._logger,
            level=logging.DEBUG,
            callback=self._timing_callback,
        )

    @staticmethod
    def _check_input(word) -> None:
        if word is not None and not isinstance(word, str):
            raise TypeError(
                f"Parameter supplied to encode must be str or None, got {type(word).__name__}"
            )

    @abstractmethod
    def encode(self, word: Optional[str]) -> Optional[str]:
        """
        將單字轉換為語音 key

        Args:
            word: 輸入字串，None 表示「沒有單字」

        Returns:
            語音 key；輸入為 None 時回傳 None
        """
        pass

    def is_encode_equal(self, word_a: Optional[str], word_b: Optional[str]) -> bool:
        """
        判斷兩個單字的語音 key 是否相同

        任一方為 None 時回傳 False（包含兩者皆為 None：「沒有單字」不視為彼此同音）。
        """
        code_a = self.encode(word_a)
        code_b = self.encode(word_b)
        if code_a is None or code_b is None:
            return False
        return code_a == code_b

    def encode_batch(self, words: Iterable[Optional[str]]) -> Dict[Optional[str], Optional[str]]:
        """
        批次編碼

        Returns:
            Dict: {原始單字: 語音 key}，重複的單字只保留一筆
        """
        words = list(words)
        with self._log_timing(f"{type(self).__name__}.encode_batch"):
            result = {word: self.encode(word) for word in words}
        self._logger.debug(f"Encoded {len(result)} distinct words ({len(words)} given)")
        return result
