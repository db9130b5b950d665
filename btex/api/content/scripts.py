"""Unicode script character classes for CJK-family text.

The re module has no script properties, so the blocks are listed
explicitly. Ranges cover the BMP blocks plus the CJK extension planes.
"""

HAN = (
    "⺀-⺙⺛-⻳⼀-⿕々〇〡-〩〸-〻"
    "㐀-䶿一-鿿豈-舘並-龎"
    "\U00020000-\U0002a6df\U0002a700-\U0002ebe0\U0002f800-\U0002fa1d\U00030000-\U0003134a"
)
HIRAGANA = "ぁ-ゖゝ-ゟ"
KATAKANA = "ァ-ヺヽ-ヿㇰ-ㇿ㋐-㋾㌀-㍗ｦ-ｯｱ-ﾝ"
HANGUL = "ᄀ-ᇿ〮〯ㄱ-ㆎ㈀-㈞㉠-㉾ꥠ-ꥼ가-힣ힰ-ퟻﾠ-ￜ"

CJK = HAN + HIRAGANA + KATAKANA + HANGUL
