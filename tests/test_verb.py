"""
Tests for verb.py and kana.py - classification, kana tables and chart generation.
"""

import pytest

from katsuyo.services.english import EnglishConjugator
from katsuyo.services.kana import (
    Row,
    contains_japanese,
    euphonic_ta,
    euphonic_te,
    has_verb_ending,
    shift_row,
)
from katsuyo.services.phrases import CATEGORY_FORMS, Category
from katsuyo.services.verb import (
    ConjugationEntry,
    Form,
    VerbClass,
    classify,
    generate,
    inflect,
)


# =============================================================================
# Kana tables
# =============================================================================


class TestKanaTables:
    """Tests for the vowel-row and euphonic tables."""

    @pytest.mark.parametrize("ending,row,expected", [
        ("く", Row.A, "か"),
        ("く", Row.I, "き"),
        ("く", Row.E, "け"),
        ("く", Row.O, "こ"),
        ("う", Row.A, "わ"),
        ("つ", Row.I, "ち"),
        ("る", Row.E, "れ"),
    ])
    def test_shift_row(self, ending, row, expected):
        assert shift_row(ending, row) == expected

    def test_unknown_ending_uses_bare_vowel(self):
        """Endings outside the nine godan columns fall back to あいうえお."""
        assert shift_row("ふ", Row.A) == "あ"
        assert shift_row("x", Row.O) == "お"

    @pytest.mark.parametrize("ending,te,ta", [
        ("う", "って", "った"),
        ("つ", "って", "った"),
        ("る", "って", "った"),
        ("く", "いて", "いた"),
        ("ぐ", "いで", "いだ"),
        ("す", "して", "した"),
        ("ぬ", "んで", "んだ"),
        ("ぶ", "んで", "んだ"),
        ("む", "んで", "んだ"),
        ("ふ", "て", "た"),
    ])
    def test_euphonic_pairs(self, ending, te, ta):
        assert euphonic_te(ending) == te
        assert euphonic_ta(ending) == ta

    def test_japanese_detection(self):
        assert contains_japanese("食べる")
        assert contains_japanese("タベル")
        assert contains_japanese("abcか")
        assert not contains_japanese("taberu")
        assert not contains_japanese("")

    def test_verb_endings(self):
        assert has_verb_ending("飲む")
        assert has_verb_ending("買う")
        assert not has_verb_ending("本")
        assert not has_verb_ending("")


# =============================================================================
# Classification
# =============================================================================


class TestClassify:
    """Tests for classify()."""

    @pytest.mark.parametrize("verb,expected", [
        ("食べる", VerbClass.ICHIDAN),
        ("見る", VerbClass.GODAN),
        ("起きる", VerbClass.ICHIDAN),
        ("書く", VerbClass.GODAN),
        ("飲む", VerbClass.GODAN),
        ("作る", VerbClass.GODAN),
        ("する", VerbClass.IRREGULAR_SURU),
        ("為る", VerbClass.IRREGULAR_SURU),
        ("来る", VerbClass.IRREGULAR_KURU),
        ("くる", VerbClass.IRREGULAR_KURU),
    ])
    def test_classes(self, verb, expected):
        assert classify(verb) == expected

    def test_irregular_check_is_exact(self):
        """Compounds of する are not matched by suffix."""
        assert classify("勉強する") == VerbClass.GODAN

    def test_kanji_before_ru_is_godan(self):
        """Only kana before る count towards ichidan."""
        assert classify("走る") == VerbClass.GODAN
        assert classify("見る") == VerbClass.GODAN

    def test_kana_spelled_godan_reported_as_ichidan(self):
        """かえる and はいる look like -eru/-iru verbs."""
        assert classify("かえる") == VerbClass.ICHIDAN
        assert classify("はいる") == VerbClass.ICHIDAN

    def test_single_character(self):
        assert classify("る") == VerbClass.GODAN

    def test_garbage_input_still_classified(self):
        assert classify("") == VerbClass.GODAN
        assert classify("abc") == VerbClass.GODAN

    def test_deterministic(self):
        assert all(classify("食べる") == VerbClass.ICHIDAN for _ in range(5))

    def test_labels(self):
        assert VerbClass.ICHIDAN.label == "ichidan"
        assert VerbClass.GODAN.label == "godan"
        assert VerbClass.IRREGULAR_SURU.label == "irregular (する)"
        assert VerbClass.IRREGULAR_KURU.label == "irregular (来る)"


# =============================================================================
# Primitive forms
# =============================================================================


class TestInflect:
    """Tests for inflect() on regular verbs."""

    @pytest.mark.parametrize("form,expected", [
        (Form.DICTIONARY, "食べる"),
        (Form.PAST, "食べた"),
        (Form.TE, "食べて"),
        (Form.CONDITIONAL, "食べれば"),
        (Form.IMPERATIVE, "食べろ"),
        (Form.VOLITIONAL, "食べよう"),
        (Form.POTENTIAL, "食べられる"),
        (Form.CAUSATIVE, "食べさせる"),
        (Form.PASSIVE, "食べられた"),
        (Form.MASU_STEM, "食べ"),
        (Form.NEGATIVE_STEM, "食べな"),
    ])
    def test_ichidan(self, form, expected):
        assert inflect("食べる", VerbClass.ICHIDAN, form) == expected

    @pytest.mark.parametrize("form,expected", [
        (Form.PAST, "書いた"),
        (Form.TE, "書いて"),
        (Form.CONDITIONAL, "書けば"),
        (Form.IMPERATIVE, "書け"),
        (Form.VOLITIONAL, "書こう"),
        (Form.POTENTIAL, "書ける"),
        (Form.CAUSATIVE, "書かせる"),
        (Form.PASSIVE, "書かれた"),
        (Form.MASU_STEM, "書き"),
        (Form.NEGATIVE_STEM, "書か"),
    ])
    def test_godan(self, form, expected):
        assert inflect("書く", VerbClass.GODAN, form) == expected

    def test_godan_u_uses_wa(self):
        assert inflect("買う", VerbClass.GODAN, Form.CAUSATIVE) == "買わせる"
        assert inflect("買う", VerbClass.GODAN, Form.PAST) == "買った"

    @pytest.mark.parametrize("verb", ["買う", "待つ", "作る", "書く", "泳ぐ", "話す", "死ぬ", "遊ぶ", "飲む"])
    def test_te_and_past_share_sound_change(self, verb):
        te = inflect(verb, VerbClass.GODAN, Form.TE)
        ta = inflect(verb, VerbClass.GODAN, Form.PAST)
        assert te[:-1] == ta[:-1]
        assert (te[-1], ta[-1]) in (("て", "た"), ("で", "だ"))

    def test_irregular_rejected(self):
        with pytest.raises(ValueError):
            inflect("する", VerbClass.IRREGULAR_SURU, Form.PAST)


# =============================================================================
# Chart generation
# =============================================================================


def _japanese(table, category, form):
    return table[category][form].japanese


class TestGenerateRegular:
    """Tests for generate() on ichidan and godan verbs."""

    def test_every_form_present(self):
        table = generate("食べる", VerbClass.ICHIDAN)
        assert list(table) == list(CATEGORY_FORMS)
        for category, forms in CATEGORY_FORMS.items():
            assert tuple(table[category]) == forms

    def test_ichidan_chart(self):
        """食べる: past 食べた, progressive 食べている, potential 食べられる."""
        table = generate("食べる", VerbClass.ICHIDAN)
        assert _japanese(table, Category.TIME, "present") == "食べる"
        assert _japanese(table, Category.TIME, "past") == "食べた"
        assert _japanese(table, Category.TIME, "future") == "食べる"
        assert _japanese(table, Category.ASPECT, "progressive") == "食べている"
        assert _japanese(table, Category.ASPECT, "perfect") == "食べたばかり"
        assert _japanese(table, Category.ASPECT, "perfect_progressive") == "食べている"
        assert _japanese(table, Category.MOOD, "subjunctive") == "食べたらいいのに"
        assert _japanese(table, Category.MOOD, "conditional") == "食べれば"
        assert _japanese(table, Category.MOOD, "imperative") == "食べろ"
        assert _japanese(table, Category.MOOD, "volitional") == "食べよう"
        assert _japanese(table, Category.MODALS, "potential") == "食べられる"
        assert _japanese(table, Category.MODALS, "causative") == "食べさせる"
        assert _japanese(table, Category.MODALS, "deontic") == "食べなければならない"
        assert _japanese(table, Category.DESIRE, "subject") == "食べたい"
        assert _japanese(table, Category.VOICE, "active") == "食べる"
        assert _japanese(table, Category.VOICE, "passive") == "食べられた"

    def test_godan_chart(self):
        """書く: past 書いた, te-form 書いて, volitional 書こう."""
        table = generate("書く", VerbClass.GODAN)
        assert _japanese(table, Category.TIME, "past") == "書いた"
        assert _japanese(table, Category.ASPECT, "progressive") == "書いている"
        assert _japanese(table, Category.MOOD, "volitional") == "書こう"
        assert _japanese(table, Category.MOOD, "conditional") == "書けば"
        assert _japanese(table, Category.MODALS, "potential") == "書ける"
        assert _japanese(table, Category.DESIRE, "subject") == "書きたい"
        assert _japanese(table, Category.VOICE, "passive") == "書かれた"

    def test_godan_deontic_built_from_bare_negative_stem(self):
        """The godan negative stem has no な, so the deontic reads 書かければならない."""
        table = generate("書く", VerbClass.GODAN)
        assert _japanese(table, Category.MODALS, "deontic") == "書かければならない"

    def test_conditional_alternate(self):
        table = generate("書く", VerbClass.GODAN)
        assert table[Category.MOOD]["conditional"].alts == ("書いたら",)
        assert table[Category.TIME]["past"].alts == ()

    def test_fallback_english(self):
        table = generate("走る", VerbClass.GODAN)
        assert table[Category.TIME]["present"].english == "I do"
        assert table[Category.VOICE]["passive"].english == "It is done by me"
        assert all(entry.english for forms in table.values() for entry in forms.values())

    def test_english_from_definition(self):
        english = EnglishConjugator.from_definition("to eat; to consume")
        table = generate("食べる", VerbClass.ICHIDAN, english)
        assert table[Category.TIME]["past"].english == "I ate"
        assert table[Category.TIME]["future"].english == "I will eat"
        assert table[Category.ASPECT]["progressive"].english == "I am eating"
        assert table[Category.ASPECT]["perfect"].english == "I have eaten"
        assert table[Category.MOOD]["imperative"].english == "Eat"
        assert table[Category.VOICE]["passive"].english == "It is eaten by me"

    def test_entries_are_fresh_per_call(self):
        first = generate("食べる", VerbClass.ICHIDAN)
        second = generate("食べる", VerbClass.ICHIDAN)
        assert first == second
        assert first is not second
        assert first[Category.TIME] is not second[Category.TIME]


class TestGenerateIrregular:
    """Tests for the fixed する / 来る charts."""

    def test_suru(self):
        table = generate("する", VerbClass.IRREGULAR_SURU)
        assert _japanese(table, Category.TIME, "past") == "した"
        assert _japanese(table, Category.ASPECT, "progressive") == "している"
        assert _japanese(table, Category.MODALS, "potential") == "できる"
        assert _japanese(table, Category.VOICE, "passive") == "された"
        assert table[Category.MOOD]["imperative"] == ConjugationEntry("Do", "しろ", ("せよ",))
        assert table[Category.MOOD]["conditional"].alts == ("したら",)

    def test_kuru_in_kana_gets_kanji_chart(self):
        table = generate("くる", VerbClass.IRREGULAR_KURU)
        assert table[Category.TIME]["present"] == ConjugationEntry("I do", "来る", ("くる",))
        assert table[Category.TIME]["past"].alts == ("きた",)
        assert _japanese(table, Category.MOOD, "imperative") == "来い"
        assert _japanese(table, Category.VOICE, "passive") == "来られた"

    def test_irregular_english(self):
        english = EnglishConjugator.from_definition("to come")
        table = generate("来る", VerbClass.IRREGULAR_KURU, english)
        assert table[Category.TIME]["past"].english == "I came"
        assert table[Category.ASPECT]["perfect"].english == "I have come"
