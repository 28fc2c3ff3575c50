"""
Caverphone 2.0 編碼器實作模組

將任意單字轉換為固定 10 碼的語音 key，發音相近的英文名字會得到相同的 key。

處理流程:
1. 正規化：轉小寫，移除 a-z 以外的字元
2. 依序套用 Caverphone2Config.RULE_STAGES 的各階段規則
3. 以 '1' 補齊並截斷為 10 碼

參考: https://caversham.otago.ac.nz/files/working/ctp150804.pdf
"""

import re
from typing import Callable, Optional

from phonokey.config import EncoderConfig
from phonokey.core.encoder_interface import StringEncoder
from phonokey.core.rules import apply_rules
from .config import Caverphone2Config

_NON_ALPHABET = re.compile(f"[^{Caverphone2Config.ALPHABET}]")


class Caverphone2(StringEncoder):
    """
    Caverphone 2.0 語音編碼器

    使用方式:
        encoder = Caverphone2()
        encoder.encode("Peter")                    # 'PTA1111111'
        encoder.is_encode_equal("Peter", "Peady")  # True

    編碼器不持有可變狀態，可安全地在多執行緒間共用。
    """

    _encoder_name = "caverphone2"

    def __init__(
        self,
        config: Optional[EncoderConfig] = None,
        *,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
    ):
        self._init_from_config(config, verbose, on_timing)
        self._rule_stages = Caverphone2Config.RULE_STAGES
        self._logger.debug(f"Caverphone2 initialized with {len(Caverphone2Config.RULES)} rules")

    @property
    def rule_stages(self):
        return self._rule_stages

    def encode(self, word: Optional[str]) -> Optional[str]:
        """
        將單字轉換為 Caverphone 2.0 key

        Args:
            word: 輸入字串；None 表示沒有單字

        Returns:
            str: 10 碼 key (A-Z 與 '1')；輸入為 None 時回傳 None

        Raises:
            TypeError: 輸入不是 str 也不是 None
        """
        self._check_input(word)
        if word is None:
            return None

        text = self.normalize(word)
        for _, rules in self._rule_stages:
            text = apply_rules(text, rules)
        return self.format_code(text)

    @staticmethod
    def normalize(word: str) -> str:
        """轉小寫後移除 a-z 以外的所有字元"""
        return _NON_ALPHABET.sub("", word.lower())

    @staticmethod
    def format_code(text: str) -> str:
        """以補齊字元填滿並截斷為固定長度"""
        length = Caverphone2Config.CODE_LENGTH
        return (text + Caverphone2Config.PAD_CHAR * length)[:length]


_default_encoder: Optional[Caverphone2] = None


def caverphone2(word: Optional[str]) -> Optional[str]:
    """使用預設 Caverphone2 實例編碼單字"""
    global _default_encoder
    if _default_encoder is None:
        _default_encoder = Caverphone2()
    return _default_encoder.encode(word)
