# ═════════════════════════════════════════════════════════════════════════════════
# KEYWORD TABLES FOR DISPLAY NAME DECOMPOSITION
# ═════════════════════════════════════════════════════════════════════════════════
#
# Unicode names are parsed against fixed keyword tables in explicit precedence order:
# 1. SCRIPT_KEYWORDS: first-word script prefixes (priority order matters)
# 2. TYPE_KEYWORDS: semantic classifiers, matched right-to-left
# 3. SIGN_PATTERNS: lexical fallbacks for unscripted, untyped names
#
# These lists encode accumulated corrections for specific Unicode names. Changing an
# entry changes published output, so every edit must be checked against the golden
# master in tests/test_display_names_golden_master.py.
# ═════════════════════════════════════════════════════════════════════════════════

import re
from types import MappingProxyType

# Layer 1: SCRIPT_KEYWORDS - checked in order, first whole-word prefix wins
SCRIPT_KEYWORDS = (
    "LATIN",
    "GREEK",
    "CYRILLIC",
    "HEBREW",
    "ARABIC",
    "ARMENIAN",
    "GEORGIAN",
    "THAI",
    "DEVANAGARI",
    "BENGALI",
    "GURMUKHI",
    "GUJARATI",
    "ORIYA",
    "TAMIL",
    "TELUGU",
    "KANNADA",
    "MALAYALAM",
    "SINHALA",
    "TIBETAN",
    "MYANMAR",
    "ETHIOPIC",
    "CHEROKEE",
    "CANADIAN",
    "ABORIGINAL",
    "OGHAM",
    "RUNIC",
    "KHMER",
    "LAO",
    "HANGUL",
    "HIRAGANA",
    "KATAKANA",
    "BOPOMOFO",
    "YI",
    "CJK",
    "IDEOGRAPHIC",
    "NKO",
)

# Words that end a script span ("CANADIAN SYLLABICS ..." -> "canadian")
SCRIPT_TERMINATORS = frozenset(
    {
        "LETTER",
        "DIGIT",
        "NUMBER",
        "SYMBOL",
        "PUNCTUATION",
        "MARK",
        "ACCENT",
        "TONE",
        "VOWEL",
        "CONSONANT",
        "FIGURE",
        "CHARACTER",
        "SPACE",
        "CONTROL",
        "LIGATURE",
        "SYLLABICS",
        "SYLLABLE",
        "CAPITAL",
        "SMALL",
        "COMBINING",
    }
)

# Category words that are the type themselves when no script is present.
# SPACE is matched as a bare prefix, the others need a following word.
STANDALONE_TYPES = (
    ("DIGIT ", "digit"),
    ("NUMBER ", "number"),
    ("SYMBOL ", "symbol"),
    ("PUNCTUATION ", "punctuation"),
    ("MARK ", "mark"),
    ("SPACE", "space"),
)

# Layer 2: TYPE_KEYWORDS - order is only used by the left-to-right substring fallback
TYPE_KEYWORDS = (
    "LETTER",
    "DIGIT",
    "NUMBER",
    "SYMBOL",
    "PUNCTUATION",
    "MARK",
    "ACCENT",
    "TONE",
    "VOWEL",
    "CONSONANT",
    "FIGURE",
    "CHARACTER",
    "SPACE",
    "CONTROL",
    "LIGATURE",
    "SYLLABICS",
    "SYLLABLE",
    "SIGN",
    "ARROW",
    "PARENTHESIS",
    "BRACKET",
    "COMBINING",
    "APOSTROPHE",
)
TYPE_KEYWORD_SET = frozenset(TYPE_KEYWORDS)

# Type words located in the text before a WITH clause
WITH_CLAUSE_TYPE_WORDS = frozenset(
    {
        "LETTER",
        "DIGIT",
        "NUMBER",
        "SYMBOL",
        "PUNCTUATION",
        "MARK",
        "ACCENT",
        "TONE",
        "VOWEL",
        "CONSONANT",
        "FIGURE",
        "CHARACTER",
        "SPACE",
        "CONTROL",
        "LIGATURE",
        "SIGN",
        "ARROW",
        "PARENTHESIS",
        "BRACKET",
    }
)

# Type words used to anchor the literal when the detected type is not itself a token
LITERAL_ANCHOR_WORDS = WITH_CLAUSE_TYPE_WORDS | {"COMBINING", "APOSTROPHE"}

# Words never kept in a literal (script words are added per name)
SKIP_WORDS = frozenset(
    {
        "CAPITAL",
        "SMALL",
        "LETTER",
        "DIGIT",
        "NUMBER",
        "SYMBOL",
        "PUNCTUATION",
        "MARK",
        "ACCENT",
        "TONE",
        "VOWEL",
        "CONSONANT",
        "FIGURE",
        "CHARACTER",
        "SPACE",
        "CONTROL",
        "LIGATURE",
        "SIGN",
        "ARROW",
        "PARENTHESIS",
        "BRACKET",
        # Structural qualifiers
        "EXTENDED",
        "SUPPLEMENT",
        "SUPPLEMENTARY",
    }
)

# Layer 3: SIGN_PATTERNS - anchored at the start of the name, case-insensitive.
# Prefix match only: "AT" also matches "ATTIC ...".
_SIGN_WORDS = (
    # Operators and relations
    "ALMOST EQUAL TO",
    "NOT EQUAL TO",
    "EQUAL TO",
    "LESS-THAN",
    "GREATER-THAN",
    "PLUS",
    "MINUS",
    "MULTIPLICATION",
    "DIVISION",
    "INFINITY",
    "INTEGRAL",
    "SUM",
    "PRODUCT",
    "EMPTY SET",
    "ELEMENT OF",
    "SUBSET",
    "SUPERSET",
    "UNION",
    "INTERSECTION",
    "LOGICAL AND",
    "LOGICAL OR",
    "NOT",
    # Diacritic words
    "TILDE",
    "CIRCUMFLEX",
    "ACUTE",
    "GRAVE",
    "MACRON",
    "BREVE",
    "DOT",
    "RING",
    "CEDILLA",
    "DIAERESIS",
    "HOOK",
    "STROKE",
    "BAR",
    # Brackets and quotes
    "BRACKET",
    "PARENTHESIS",
    "BRACE",
    "QUOTATION",
    "APOSTROPHE",
    # Punctuation
    "COMMA",
    "PERIOD",
    "COLON",
    "SEMICOLON",
    "EXCLAMATION",
    "QUESTION",
    "SLASH",
    "BACKSLASH",
    "ASTERISK",
    "AMPERSAND",
    "AT",
    "HASH",
    "DOLLAR",
    "PERCENT",
    "CARET",
    "UNDERSCORE",
    "PIPE",
    "CURLY",
    "SQUARE",
    "ANGLE",
)

SIGN_PATTERNS = (re.compile("^(" + "|".join(_SIGN_WORDS) + ")", re.IGNORECASE),)

# Legacy mathematical script letters ("SCRIPT SMALL L")
SCRIPT_SMALL_LETTER_PATTERN = re.compile(r"^SCRIPT SMALL [A-Z]$")

# ═════════════════════════════════════════════════════════════════════════════════
# ASSEMBLY RULES
# ═════════════════════════════════════════════════════════════════════════════════

# Unscripted types written literal-first ("PLUS SIGN", "LEFT PARENTHESIS")
LITERAL_FIRST_TYPES = frozenset({"sign", "parenthesis", "arrow", "bracket"})

# Scripted types written literal-first ("N'Ko HIGH TONE APOSTROPHE")
SCRIPTED_LITERAL_FIRST_TYPES = frozenset({"tone", "apostrophe", "mark"})

# Digits named by locale instead of script
DIGIT_LOCALE_RANGES = MappingProxyType(
    {
        "Arabic": (0x0660, 0x0669),  # ARABIC-INDIC DIGIT ZERO..NINE
        "Farsi": (0x06F0, 0x06F9),  # EXTENDED ARABIC-INDIC DIGIT ZERO..NINE
    }
)

NKO_SCRIPT = "nko"
NKO_LETTER_LABEL = "N'Ko"
NKO_SYMBOL_LABEL = "NKO"
NKO_SYMBOL_TYPES = frozenset({"digit", "number", "symbol", "punctuation", "mark"})
PRESERVED_LABELS = frozenset({NKO_LETTER_LABEL, NKO_SYMBOL_LABEL})

# Assembled names that say nothing about the character
DEGENERATE_NAMES = frozenset({"SIGN", "ARROW"})
