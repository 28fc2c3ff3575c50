"""
Caverphone 2.0 規則配置模組

集中管理 Caverphone 2.0 的改寫規則表與輸出格式。
規則內容依照 Caversham Project 技術報告 (David Hood, 2004) 逐條收錄，
順序即語意：每條規則都作用在前面所有規則改寫後的結果上。

暫存標記:
- '2': 要刪除的字母（無聲字母、二合字母的第二個字母）
- '3': 非首位母音
兩者都在 REMOVAL_RULES 階段清除。
"""

from phonokey.core.rules import RewriteRule, RuleKind

ANYWHERE = RuleKind.ANYWHERE
PREFIX = RuleKind.PREFIX
SUFFIX = RuleKind.SUFFIX
RUN = RuleKind.RUN


class Caverphone2Config:
    """Caverphone 2.0 配置類別 - 集中管理規則表與輸出格式"""

    # 輸出格式: 固定 10 碼，不足以 '1' 補齊
    CODE_LENGTH = 10
    PAD_CHAR = "1"

    # 正規化後保留的字母
    ALPHABET = "abcdefghijklmnopqrstuvwxyz"

    # 結尾的無聲 e
    TRAILING_E_RULES = (
        RewriteRule("e", "", SUFFIX),
    )

    # 開頭 / 結尾的特殊拼法
    START_RULES = (
        RewriteRule("cough", "cou2f", PREFIX),
        RewriteRule("rough", "rou2f", PREFIX),
        RewriteRule("tough", "tou2f", PREFIX),
        RewriteRule("enough", "enou2f", PREFIX),
        RewriteRule("trough", "trou2f", PREFIX),
        RewriteRule("gn", "2n", PREFIX),
        RewriteRule("mb", "m2", SUFFIX),
    )

    # 二合字母、無聲字母與同音子音
    REPLACEMENT_RULES = (
        RewriteRule("cq", "2q"),
        RewriteRule("ci", "si"),
        RewriteRule("ce", "se"),
        RewriteRule("cy", "sy"),
        RewriteRule("tch", "2ch"),
        RewriteRule("c", "k"),
        RewriteRule("q", "k"),
        RewriteRule("x", "k"),
        RewriteRule("v", "f"),
        RewriteRule("dg", "2g"),
        RewriteRule("tio", "sio"),
        RewriteRule("tia", "sia"),
        RewriteRule("d", "t"),
        RewriteRule("ph", "fh"),
        RewriteRule("b", "p"),
        RewriteRule("sh", "s2"),
        RewriteRule("z", "s"),
    )

    # 母音：首字母母音 -> A，其餘 -> 3；y/j 視情況當母音
    VOWEL_RULES = (
        RewriteRule("[aeiou]", "A", PREFIX),
        RewriteRule("[aeiou]", "3"),
        RewriteRule("j", "y"),
        RewriteRule("y3", "Y3", PREFIX),
        RewriteRule("y", "A", PREFIX),
        RewriteRule("y", "3"),
        RewriteRule("3gh3", "3kh3"),
        RewriteRule("gh", "22"),
        RewriteRule("g", "k"),
    )

    # 連續相同子音合併為單一大寫字母
    CONSONANT_RUN_RULES = (
        RewriteRule("s", "S", RUN),
        RewriteRule("t", "T", RUN),
        RewriteRule("p", "P", RUN),
        RewriteRule("k", "K", RUN),
        RewriteRule("f", "F", RUN),
        RewriteRule("m", "M", RUN),
        RewriteRule("n", "N", RUN),
    )

    # w/h/r/l：母音前保留，字尾轉為母音，其餘刪除
    CONTEXT_RULES = (
        RewriteRule("w3", "W3"),
        RewriteRule("wh3", "Wh3"),
        RewriteRule("w", "3", SUFFIX),
        RewriteRule("w", "2"),
        RewriteRule("h", "A", PREFIX),
        RewriteRule("h", "2"),
        RewriteRule("r3", "R3"),
        RewriteRule("r", "3", SUFFIX),
        RewriteRule("r", "2"),
        RewriteRule("l3", "L3"),
        RewriteRule("l", "3", SUFFIX),
        RewriteRule("l", "2"),
    )

    # 清除暫存標記
    REMOVAL_RULES = (
        RewriteRule("2", ""),
        RewriteRule("3", "A", SUFFIX),
        RewriteRule("3", ""),
    )

    # 完整規則表（依階段排列）
    RULE_STAGES = (
        ("trailing_e", TRAILING_E_RULES),
        ("start", START_RULES),
        ("replacement", REPLACEMENT_RULES),
        ("vowel", VOWEL_RULES),
        ("consonant_run", CONSONANT_RUN_RULES),
        ("context", CONTEXT_RULES),
        ("removal", REMOVAL_RULES),
    )

    RULES = tuple(rule for _, stage in RULE_STAGES for rule in stage)
