"""
改寫規則 (Rewrite Rule) 模組

以宣告式資料描述「比對樣式 -> 替換字串」，讓規則表可以逐條測試。

核心設計：
1. RuleKind 決定樣式的錨定方式（任意位置 / 開頭 / 結尾 / 連續重複）
2. RewriteRule 是不可變值物件，建立時即編譯正規表達式
3. apply_rules 依序套用，每條規則只看前一條規則的完整輸出

使用範例：
    >>> rules = (
    ...     RewriteRule("gn", "2n", RuleKind.PREFIX),
    ...     RewriteRule("s", "S", RuleKind.RUN),
    ... )
    >>> apply_rules("gnoss", rules)
    '2noS'
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable


class RuleKind(Enum):
    """規則錨定類型"""
    ANYWHERE = "anywhere"   # 任意位置，全部替換
    PREFIX = "prefix"       # 只比對字串開頭
    SUFFIX = "suffix"       # 只比對字串結尾
    RUN = "run"             # 連續重複視為一次，整段替換


_TEMPLATES = {
    RuleKind.ANYWHERE: "{}",
    RuleKind.PREFIX: "^{}",
    RuleKind.SUFFIX: "{}$",
    RuleKind.RUN: "(?:{})+",
}


@dataclass(frozen=True)
class RewriteRule:
    """
    單條改寫規則

    Attributes:
        pattern: 比對樣式（正規表達式片段，可為字元類別如 "[aeiou]"）
        replacement: 替換字串（字面值，不解析反向參照）
        kind: 錨定類型

    一次 apply() 只從左到右掃描一遍，替換後產生的文字不會再被同一條規則比對。
    """
    pattern: str
    replacement: str
    kind: RuleKind = RuleKind.ANYWHERE
    regex: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not self.pattern:
            raise ValueError("Pattern cannot be empty")
        if not isinstance(self.kind, RuleKind):
            raise ValueError(f"Unknown rule kind: {self.kind!r}")
        compiled = re.compile(_TEMPLATES[self.kind].format(self.pattern))
        object.__setattr__(self, "regex", compiled)

    def apply(self, text: str) -> str:
        # 以函式作為替換值，避免 replacement 中的 "\" 被當成反向參照
        return self.regex.sub(lambda _m: self.replacement, text)

    def matches(self, text: str) -> bool:
        return self.regex.search(text) is not None

    def __str__(self) -> str:
        return f"{self.regex.pattern} -> {self.replacement!r}"


def apply_rules(text: str, rules: Iterable[RewriteRule]) -> str:
    """依序套用規則，回傳最後結果"""
    for rule in rules:
        text = rule.apply(text)
    return text
