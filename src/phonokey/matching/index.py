"""
語音 key 索引

以語音 key 將單字分桶，用於找出同音詞、名字去重與紀錄連結。
比對只依據 key 是否完全相同，不計算相似度分數。
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Optional

from phonokey.config import configure_logging
from phonokey.core.encoder_interface import StringEncoder
from phonokey.utils.logger import TimingContext, get_logger


def _default_encoder() -> StringEncoder:
    from phonokey.caverphone.encoder import Caverphone2

    return Caverphone2()


class PhoneticIndex:
    """
    語音 key 索引

    使用範例:
        >>> index = PhoneticIndex()
        >>> index.add_all(["Peter", "Stevenson", "Peady"])
        3
        >>> index.lookup("Peady")
        ['Peter', 'Peady']

    同一個單字只會被加入一次；每個桶內保持加入順序。
    """

    def __init__(
        self,
        encoder: Optional[StringEncoder] = None,
        *,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
    ):
        self._encoder = encoder or _default_encoder()
        self._buckets: Dict[str, List[str]] = {}
        self._codes: Dict[str, str] = {}
        self._timing_callback = on_timing
        self._logger = get_logger("matching.index")
        if verbose:
            configure_logging(verbose=True)

    @property
    def encoder(self) -> StringEncoder:
        return self._encoder

    def code_for(self, word: Optional[str]) -> Optional[str]:
        return self._encoder.encode(word)

    def add(self, word: Optional[str]) -> Optional[str]:
        """
        加入單字

        Returns:
            該單字的語音 key；None 不會被加入，回傳 None
        """
        code = self._encoder.encode(word)
        if code is None:
            return None
        if word not in self._codes:
            self._codes[word] = code
            self._buckets.setdefault(code, []).append(word)
        return code

    def add_all(self, words: Iterable[Optional[str]]) -> int:
        """加入多個單字，回傳實際被加入索引的數量"""
        with TimingContext("PhoneticIndex.add_all", logger=self._logger, callback=self._timing_callback):
            before = len(self._codes)
            for word in words:
                self.add(word)
            added = len(self._codes) - before
        self._logger.debug(f"Indexed {added} words into {len(self._buckets)} buckets")
        return added

    def lookup(self, word: Optional[str]) -> List[str]:
        """回傳與 word 語音 key 相同的已索引單字"""
        code = self._encoder.encode(word)
        if code is None:
            return []
        return list(self._buckets.get(code, ()))

    def groups(self) -> Dict[str, List[str]]:
        """回傳 {語音 key: [單字]} 的複本"""
        return {code: list(words) for code, words in self._buckets.items()}

    def __len__(self) -> int:
        return len(self._codes)

    def __contains__(self, word: object) -> bool:
        return word in self._codes


def dedupe_by_code(
    words: Iterable[Optional[str]],
    encoder: Optional[StringEncoder] = None,
) -> List[str]:
    """
    依語音 key 去重

    每個 key 只保留第一個出現的單字，None 會被略過。

    範例:
        >>> dedupe_by_code(["Peter", "Peady", "Stevenson"])
        ['Peter', 'Stevenson']
    """
    encoder = encoder or _default_encoder()
    seen = set()
    kept: List[str] = []
    for word in words:
        code = encoder.encode(word)
        if code is not None and code not in seen:
            kept.append(word)
            seen.add(code)
    return kept
