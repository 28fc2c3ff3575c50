"""
測試改寫規則引擎與 Caverphone 2.0 規則表

驗證：
1. RewriteRule 建立與驗證
2. RuleKind 錨定行為
3. 單次掃描：規則不會重新比對自己產生的文字
4. 規則表逐條行為與階段順序
"""

import pytest

from phonokey.caverphone.config import Caverphone2Config
from phonokey.core.rules import RewriteRule, RuleKind, apply_rules


class TestRewriteRule:
    """測試 RewriteRule 數據結構"""

    def test_basic_creation(self):
        rule = RewriteRule("ph", "fh")

        assert rule.pattern == "ph"
        assert rule.replacement == "fh"
        assert rule.kind == RuleKind.ANYWHERE
        assert rule.regex.pattern == "ph"

    def test_empty_pattern_rejected(self):
        with pytest.raises(ValueError, match="Pattern cannot be empty"):
            RewriteRule("", "x")

    def test_invalid_kind_rejected(self):
        with pytest.raises(ValueError, match="Unknown rule kind"):
            RewriteRule("a", "b", "prefix")

    def test_frozen(self):
        rule = RewriteRule("a", "b")
        with pytest.raises(AttributeError):
            rule.pattern = "c"

    def test_equality_ignores_compiled_regex(self):
        assert RewriteRule("a", "b", RuleKind.PREFIX) == RewriteRule("a", "b", RuleKind.PREFIX)
        assert RewriteRule("a", "b") != RewriteRule("a", "b", RuleKind.SUFFIX)

    def test_replacement_is_literal(self):
        rule = RewriteRule("a", r"\1")
        assert rule.apply("cat") == r"c\1t"

    def test_str(self):
        assert str(RewriteRule("e", "", RuleKind.SUFFIX)) == "e$ -> ''"


class TestRuleKind:
    """測試錨定類型"""

    def test_anywhere_replaces_all(self):
        assert RewriteRule("d", "t").apply("dodd") == "tott"

    def test_prefix_only_at_start(self):
        rule = RewriteRule("gn", "2n", RuleKind.PREFIX)
        assert rule.apply("gnome") == "2nome"
        assert rule.apply("signgn") == "signgn"

    def test_suffix_only_at_end(self):
        rule = RewriteRule("mb", "m2", RuleKind.SUFFIX)
        assert rule.apply("mbmb") == "mbm2"
        assert rule.apply("lamby") == "lamby"

    def test_run_collapses_repetitions(self):
        rule = RewriteRule("s", "S", RuleKind.RUN)
        assert rule.apply("sssas") == "SaS"

    def test_character_class_pattern(self):
        assert RewriteRule("[aeiou]", "3").apply("peter") == "p3t3r"
        assert RewriteRule("[aeiou]", "A", RuleKind.PREFIX).apply("eat") == "Aat"

    def test_matches(self):
        assert RewriteRule("gh", "22").matches("night")
        assert not RewriteRule("gh", "22", RuleKind.PREFIX).matches("night")


class TestSinglePass:
    """規則只掃描一次，不會重新比對自己的輸出"""

    def test_output_not_rematched(self):
        # "ci" -> "si" 之後不會把產生的 "s" 再次處理
        assert RewriteRule("ci", "si").apply("cici") == "sisi"
        # 取代結果仍含樣式時也不會遞迴
        assert RewriteRule("a", "aa").apply("aba") == "aabaa"

    def test_apply_rules_in_order(self):
        rules = (RewriteRule("c", "k"), RewriteRule("k", "K", RuleKind.RUN))
        assert apply_rules("ck", rules) == "K"
        assert apply_rules("ck", tuple(reversed(rules))) == "kK"

    def test_apply_rules_empty(self):
        assert apply_rules("", Caverphone2Config.RULES) == ""
        assert apply_rules("abc", ()) == "abc"


class TestCaverphone2RuleTable:
    """逐條測試 Caverphone 2.0 規則表"""

    def test_rule_count_and_stage_order(self):
        names = [name for name, _ in Caverphone2Config.RULE_STAGES]
        assert names == [
            "trailing_e", "start", "replacement", "vowel",
            "consonant_run", "context", "removal",
        ]
        assert len(Caverphone2Config.RULES) == 56

    def test_rules_are_flattened_in_stage_order(self):
        flattened = [rule for _, stage in Caverphone2Config.RULE_STAGES for rule in stage]
        assert list(Caverphone2Config.RULES) == flattened

    def test_trailing_e(self):
        assert apply_rules("pete", Caverphone2Config.TRAILING_E_RULES) == "pet"
        assert apply_rules("ee", Caverphone2Config.TRAILING_E_RULES) == "e"

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("cough", "cou2f"),
            ("rough", "rou2f"),
            ("tough", "tou2f"),
            ("enough", "enou2f"),
            ("trough", "trou2f"),
            ("gnat", "2nat"),
            ("lamb", "lam2"),
            ("mcough", "mcough"),
            ("sign", "sign"),
        ],
    )
    def test_start_rules(self, text, expected):
        assert apply_rules(text, Caverphone2Config.START_RULES) == expected

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("acquire", "a2kuire"),
            ("cider", "siter"),
            ("cell", "sell"),
            ("cyst", "syst"),
            ("witch", "wi2kh"),
            ("cat", "kat"),
            ("qat", "kat"),
            ("box", "pok"),
            ("vow", "fow"),
            ("edge", "e2ge"),
            ("nation", "nasion"),
            ("martial", "marsial"),
            ("dad", "tat"),
            ("phil", "fhil"),
            ("bob", "pop"),
            ("ship", "s2ip"),
            ("zoo", "soo"),
        ],
    )
    def test_replacement_rules(self, text, expected):
        assert apply_rules(text, Caverphone2Config.REPLACEMENT_RULES) == expected

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("ada", "Ad3"),
            ("peter", "p3t3r"),
            ("jon", "Y3n"),
            ("yates", "Y3t3s"),
            ("ylva", "Alv3"),
            ("lynn", "l3nn"),
            ("laughing", "l33kh3nk"),
            ("night", "n322t"),
            ("gag", "k3k"),
        ],
    )
    def test_vowel_rules(self, text, expected):
        assert apply_rules(text, Caverphone2Config.VOWEL_RULES) == expected

    def test_consonant_run_rules(self):
        text = "ssttppkkffmmnn3s"
        assert apply_rules(text, Caverphone2Config.CONSONANT_RUN_RULES) == "STPKFMN3S"

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("w3", "W3"),
            ("wh3", "W23"),
            ("T3w", "T33"),
            ("Twin", "T2in"),
            ("h3", "A3"),
            ("T3h", "T32"),
            ("r3", "R3"),
            ("T3r", "T33"),
            ("Tr", "T3"),
            ("3rT", "32T"),
            ("l3", "L3"),
            ("T3l", "T33"),
            ("3lT", "32T"),
        ],
    )
    def test_context_rules(self, text, expected):
        assert apply_rules(text, Caverphone2Config.CONTEXT_RULES) == expected

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("P3T3", "PTA"),
            ("K3L3N", "KLN"),
            ("2R3T33", "RTA"),
            ("A3", "AA"),
            ("M2", "M"),
        ],
    )
    def test_removal_rules(self, text, expected):
        assert apply_rules(text, Caverphone2Config.REMOVAL_RULES) == expected
