"""Unit tests for btex.api.ref.infer_page_identifier module."""

import pytest

from btex.api.content.Paragraph import Paragraph
from btex.api.content.Span import Span
from btex.api.content.SpacingType import CJK, LETTER
from btex.api.ref.GREEK_SYMBOL_NAMES import GREEK_SYMBOL_NAMES
from btex.api.ref.infer_page_identifier import infer_page_identifier

pytestmark = pytest.mark.ref


def infer(text: str, suffix: str | None = None, spacing_kind: str = LETTER) -> str:
    return infer_page_identifier(Paragraph(text), suffix, spacing_kind)


class TestGreekSymbols:
    """Greek letters are spelled out with controlled spacing."""

    def test_symbol_followed_by_space(self):
        assert infer("Ω meson") == "Omega meson"

    def test_prefenced_name(self):
        assert infer("_Omega_meson") == "Omega meson"

    def test_symbol_glued_to_word(self):
        assert infer("Ωmeson") == "Omega meson"

    def test_adjacent_symbols_are_separated(self):
        assert infer("αβ") == "alpha beta"

    def test_symbol_between_han_characters(self):
        assert infer("中Ω文") == "中 Omega 文"

    def test_symbol_after_punctuation_stays_glued(self):
        assert infer("(α)") == "(alpha)"

    def test_symbol_matches_spelled_out_title(self):
        assert infer("Α Centauri") == infer("Alpha Centauri") == "Alpha Centauri"

    def test_table_covers_both_cases(self):
        assert len(GREEK_SYMBOL_NAMES) == 48
        assert GREEK_SYMBOL_NAMES["Α"] == "Alpha"
        assert GREEK_SYMBOL_NAMES["ω"] == "omega"


class TestCleanup:
    """Underscores, zero-width spaces and whitespace."""

    def test_underscores_become_spaces(self):
        assert infer("Standard_Model") == "Standard Model"

    def test_zero_width_space_removed(self):
        assert infer("Higgs\u200bboson") == "Higgsboson"

    def test_whitespace_collapsed_and_trimmed(self):
        assert infer("  Dark \t  matter \n") == "Dark matter"

    def test_empty_content(self):
        assert infer("") == ""

    @pytest.mark.parametrize(
        "text",
        ["Ω meson", "_Omega_meson", "a__b", "x\u200b_\u200by", "αβγ_δ", "中_文", "  __  "],
    )
    def test_output_has_no_underscores_or_zero_width_spaces(self, text):
        page = infer(text)
        assert "_" not in page
        assert "\u200b" not in page
        assert "  " not in page

    @pytest.mark.parametrize("text", ["Ω meson", "αβ", "中Ω文", "Category: Foo_bar"])
    def test_idempotent(self, text):
        page = infer(text)
        assert infer(page) == page


class TestSuffix:
    """Suffix spacing depends on the scripts on both sides."""

    def test_latin_suffix_gets_space(self):
        assert infer("Quantum", "mechanics") == "Quantum mechanics"

    def test_cjk_content_and_cjk_suffix_join(self):
        assert infer("量子", "力学", CJK) == "量子力学"

    def test_cjk_content_and_kana_suffix_join(self):
        assert infer("量子", "コンピュータ", CJK) == "量子コンピュータ"

    def test_cjk_content_and_latin_suffix_spaced(self):
        assert infer("量子", "theory", CJK) == "量子 theory"

    def test_latin_content_and_cjk_suffix_spaced(self):
        assert infer("Quantum", "力学", LETTER) == "Quantum 力学"

    def test_suffix_is_normalised_too(self):
        assert infer("Decay", "of_Ω") == "Decay of Omega"

    def test_caller_paragraph_untouched(self):
        paragraph = Paragraph("Quantum", Span())
        infer_page_identifier(paragraph, "mechanics", LETTER)
        assert len(paragraph.items) == 2
        assert paragraph.get_text() == "Quantum"
