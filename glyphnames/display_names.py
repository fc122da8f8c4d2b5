"""
Unicode Display Name Decomposition Module

This module rebuilds a readable display name from a raw Unicode character name by
recognizing its structural components and reassembling them under fixed ordering rules.

## Overview

The core functionality is provided by the `DisplayNameDecomposer` class, which runs an
ordered pipeline of pure stages over an immutable `NameComponents` value:

1. **Script Detection**: First-word script keyword (LATIN, GREEK, NKO, ...)
2. **Case Variant**: CAPITAL or SMALL
3. **Semantic Type**: Rightmost type keyword (LETTER, DIGIT, SIGN, ...) with fallbacks
4. **Literal & Modifier Extraction**: Distinguishing words and the trailing WITH clause
5. **Digit Locale Override**: Arabic-Indic digits are named by locale, not script
6. **Script Label Casing**: N'Ko letters vs NKO digits/symbols
7. **Assembly**: Label, case, literal/type in the right order, modifier clause
8. **Degenerate Output Guard**: Never publish a bare "SIGN" or "ARROW"

## Usage Examples

```python
from glyphnames.display_names import decompose

decompose("LATIN SMALL LETTER A WITH ACUTE", "00E1")
# Returns: "LATIN SMALL LETTER A WITH ACUTE"

decompose("ARABIC-INDIC DIGIT ZERO", "0660")
# Returns: "ARABIC DIGIT ZERO"

decompose("NKO HIGH TONE APOSTROPHE", "07F4")
# Returns: "N'Ko HIGH TONE APOSTROPHE"

decompose("<control>", "0000")
# Returns: None
```

Each stage can be run in isolation for debugging:

```python
from glyphnames.display_names import DisplayNameDecomposer, NameComponents

decomposer = DisplayNameDecomposer()
parsed = decomposer.parse("GREEK CAPITAL LETTER ALPHA")
decomposer.detect_script(parsed, NameComponents())
# Returns: NameComponents(script='greek', ...)
```

## Thread Safety

Decomposition is stateless and deterministic. The keyword tables are immutable, so a
single decomposer can be shared between threads or copied into worker processes.
"""

from __future__ import annotations
import re
from dataclasses import dataclass, replace
from typing import Optional, Tuple, Union

from glyphnames.display_names_data import (
    SCRIPT_KEYWORDS,
    SCRIPT_TERMINATORS,
    STANDALONE_TYPES,
    TYPE_KEYWORDS,
    TYPE_KEYWORD_SET,
    WITH_CLAUSE_TYPE_WORDS,
    LITERAL_ANCHOR_WORDS,
    SKIP_WORDS,
    SIGN_PATTERNS,
    SCRIPT_SMALL_LETTER_PATTERN,
    LITERAL_FIRST_TYPES,
    SCRIPTED_LITERAL_FIRST_TYPES,
    DIGIT_LOCALE_RANGES,
    NKO_SCRIPT,
    NKO_LETTER_LABEL,
    NKO_SYMBOL_LABEL,
    NKO_SYMBOL_TYPES,
    PRESERVED_LABELS,
    DEGENERATE_NAMES,
)

PLACEHOLDER_MARKER = "<"

_SCRIPT_KEYWORD_SET = frozenset(SCRIPT_KEYWORDS)


# ════════════════════════════════════════════════════════════════════════════════
# IMMUTABLE CONFIGURATION DATA
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class DisplayNameConfig:
    """Immutable configuration containing the precompiled patterns."""

    whitespace_pattern: re.Pattern[str]
    script_small_pattern: re.Pattern[str]
    sign_patterns: Tuple[re.Pattern[str], ...]

    # Separator introducing the modifier clause
    with_separator: str
    # Suffix dropped from literals ("final form" -> "final")
    form_suffix: str

    @classmethod
    def create_default(cls) -> "DisplayNameConfig":
        return cls(
            whitespace_pattern=re.compile(r"\s+"),
            script_small_pattern=SCRIPT_SMALL_LETTER_PATTERN,
            sign_patterns=SIGN_PATTERNS,
            with_separator=" WITH ",
            form_suffix=" form",
        )

    def with_sign_patterns(self, sign_patterns: Tuple[re.Pattern[str], ...]) -> "DisplayNameConfig":
        """Immutable update method for the sign-like fallback patterns."""
        return replace(self, sign_patterns=sign_patterns)


# ════════════════════════════════════════════════════════════════════════════════
# PIPELINE VALUES
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class ParsedName:
    """Tokenized view of a raw Unicode name."""

    raw: str  # Original input: "Latin Small Letter A"
    upper: str  # Uppercased, whitespace-collapsed: "LATIN SMALL LETTER A"
    tokens: Tuple[str, ...]  # ("LATIN", "SMALL", "LETTER", "A")

    @classmethod
    def from_raw(cls, raw_name: str, whitespace_pattern: re.Pattern[str]) -> "ParsedName":
        tokens = tuple(t for t in whitespace_pattern.split(raw_name.upper()) if t)
        return cls(raw=raw_name, upper=" ".join(tokens), tokens=tokens)


@dataclass(frozen=True)
class NameComponents:
    """Structural components of one name. Every stage returns a new instance."""

    script: Optional[str] = None  # "latin", "canadian aboriginal"
    case_variant: Optional[str] = None  # "capital" | "small"
    semantic_type: Optional[str] = None  # "letter", "digit", "sign", ...
    literal: Optional[str] = None  # "a", "high tone"
    modifier_clause: Optional[str] = None  # "acute" from "... WITH ACUTE"

    # Leading label for assembly: locale ("Arabic"), script label ("N'Ko") or script
    label: Optional[str] = None
    # Type came from the sign-like lexical fallback, not from a keyword in the name
    sign_inferred: bool = False
    # Literal was fixed by an override and must not be re-extracted
    literal_locked: bool = False


# ════════════════════════════════════════════════════════════════════════════════
# DECOMPOSER
# ════════════════════════════════════════════════════════════════════════════════


class DisplayNameDecomposer:
    """Rule-based decomposition of raw Unicode names into display names."""

    def __init__(self, config: Optional[DisplayNameConfig] = None):
        self._config = config or DisplayNameConfig.create_default()

    def decompose(self, raw_name: str, codepoint: Union[str, int]) -> Optional[str]:
        """
        Main API method: build the display name for one registry entry.

        Returns None for empty or placeholder names (``<control>``), otherwise a
        display name. Falls back to the uppercased raw name when nothing descriptive
        can be assembled.
        """
        if not raw_name or not raw_name.strip() or raw_name.startswith(PLACEHOLDER_MARKER):
            return None

        parsed = self.parse(raw_name)
        components = self.components(parsed, codepoint)
        return self.assemble(parsed, components)

    def parse(self, raw_name: str) -> ParsedName:
        return ParsedName.from_raw(raw_name, self._config.whitespace_pattern)

    def components(self, parsed: ParsedName, codepoint: Union[str, int]) -> NameComponents:
        """Run stages 1-6 and return the final components."""
        components = NameComponents()
        components = self.detect_script(parsed, components)
        components = self.detect_case_variant(parsed, components)
        components = self.detect_semantic_type(parsed, components)
        components = self.extract_literal(parsed, components)
        components = self.apply_digit_locale(components, codepoint)
        return self.resolve_label(components)

    # ── Stage 1 ──────────────────────────────────────────────────────────────────

    def detect_script(self, parsed: ParsedName, components: NameComponents) -> NameComponents:
        """Script keyword at the start of the name, or a standalone category word."""
        for keyword in SCRIPT_KEYWORDS:
            if parsed.upper == keyword or parsed.upper.startswith(keyword + " "):
                return replace(components, script=self._script_span(parsed.tokens).lower())

        # "DIGIT ZERO" is a digit without a script, not "DIGIT DIGIT ZERO".
        # "NUMBER SIGN" stays a sign.
        if " SIGN" in parsed.upper:
            return components
        for prefix, semantic_type in STANDALONE_TYPES:
            if parsed.upper.startswith(prefix):
                return replace(components, semantic_type=semantic_type)
        return components

    def _script_span(self, tokens: Tuple[str, ...]) -> str:
        # Multi-word scripts ("CANADIAN ABORIGINAL") extend over adjacent script
        # keywords, and only when a type marker closes the span.
        end = 1
        while end < len(tokens) and tokens[end] in _SCRIPT_KEYWORD_SET:
            end += 1
        if end > 1 and (end == len(tokens) or tokens[end] not in SCRIPT_TERMINATORS):
            end = 1
        return " ".join(tokens[:end])

    # ── Stage 2 ──────────────────────────────────────────────────────────────────

    def detect_case_variant(self, parsed: ParsedName, components: NameComponents) -> NameComponents:
        if " CAPITAL " in parsed.upper:
            return replace(components, case_variant="capital")
        if " SMALL " in parsed.upper:
            return replace(components, case_variant="small")
        return components

    # ── Stage 3 ──────────────────────────────────────────────────────────────────

    def detect_semantic_type(self, parsed: ParsedName, components: NameComponents) -> NameComponents:
        """
        Rightmost type keyword wins: "NKO HIGH TONE APOSTROPHE" is an apostrophe.

        Falls back to a substring scan, then to the SCRIPT SMALL override and the
        sign-like lexical patterns for names with neither type nor script.
        """
        semantic_type = components.semantic_type
        for token in reversed(parsed.tokens):
            if token in TYPE_KEYWORD_SET:
                semantic_type = token.lower()
                break
        else:
            if semantic_type is None:
                semantic_type = self._substring_type(parsed.upper)
        components = replace(components, semantic_type=semantic_type)

        if self._config.script_small_pattern.match(parsed.upper):
            return replace(components, semantic_type="symbol", literal=parsed.raw.lower(), literal_locked=True)

        if components.semantic_type is None and components.script is None:
            if any(pattern.match(parsed.upper) for pattern in self._config.sign_patterns):
                return replace(components, semantic_type="sign", sign_inferred=True)
        return components

    def _substring_type(self, upper_name: str) -> Optional[str]:
        for keyword in TYPE_KEYWORDS:
            if f" {keyword} " in upper_name or upper_name.endswith(f" {keyword}"):
                return keyword.lower()
        return None

    # ── Stage 4 ──────────────────────────────────────────────────────────────────

    def extract_literal(self, parsed: ParsedName, components: NameComponents) -> NameComponents:
        """Split off the WITH clause and pick the literal on the informative side of the type."""
        if components.literal_locked:
            return components

        with_index = parsed.upper.find(self._config.with_separator)
        if with_index != -1:
            before_with = tuple(parsed.upper[:with_index].split())
            modifier = parsed.upper[with_index + len(self._config.with_separator) :].lower()
            components = replace(
                components,
                literal=self._literal_before_with(before_with),
                modifier_clause=modifier or None,
            )
        else:
            components = replace(components, literal=self._literal_from_tokens(parsed.tokens, components))

        return self._ensure_descriptive_literal(parsed, components)

    def _literal_before_with(self, tokens: Tuple[str, ...]) -> Optional[str]:
        if not tokens:
            return None
        type_index = self._first_index(tokens, WITH_CLAUSE_TYPE_WORDS)
        if type_index == -1:
            return tokens[-1].lower()
        if type_index < len(tokens) - 1:
            words = tokens[type_index + 1 :]
        else:
            words = tokens[:type_index]
        return self._strip_form(" ".join(words).lower())

    def _literal_from_tokens(self, tokens: Tuple[str, ...], components: NameComponents) -> Optional[str]:
        script_words = components.script.upper().split() if components.script else []
        skip_words = SKIP_WORDS.union(script_words)
        semantic_type = components.semantic_type

        # Inferred signs ("TILDE") keep every descriptive word
        if components.sign_inferred:
            return " ".join(t for t in tokens if t not in skip_words).lower() or None

        type_index = -1
        if semantic_type:
            type_index = self._first_index(tokens, {semantic_type.upper()})
        if type_index == -1:
            type_index = self._first_index(tokens, LITERAL_ANCHOR_WORDS)

        if type_index == -1:
            meaningful = [t for t in tokens if t not in skip_words]
            return meaningful[-1].lower() if meaningful else None

        if type_index < len(tokens) - 1:
            words = tokens[type_index + 1 :]
            # "PHAISTOS DISC SIGN ..." keeps type-like words after SIGN
            if semantic_type != "sign":
                words = tuple(t for t in words if t not in skip_words)
        else:
            words = tokens[len(script_words) : type_index]
            keep_all = semantic_type == "sign" or (
                components.script is not None and semantic_type in SCRIPTED_LITERAL_FIRST_TYPES
            )
            if not keep_all:
                words = tuple(t for t in words if t not in skip_words)

        return self._strip_form(" ".join(words).lower())

    def _ensure_descriptive_literal(self, parsed: ParsedName, components: NameComponents) -> NameComponents:
        semantic_type = components.semantic_type
        if semantic_type is None or semantic_type not in LITERAL_FIRST_TYPES:
            return components
        if components.script or components.literal:
            return components
        words = [t for t in parsed.tokens if t != semantic_type.upper()]
        return replace(components, literal=" ".join(words).lower() or None)

    def _strip_form(self, literal: str) -> Optional[str]:
        if literal.endswith(self._config.form_suffix):
            literal = literal[: -len(self._config.form_suffix)].strip()
        return literal or None

    @staticmethod
    def _first_index(tokens: Tuple[str, ...], words) -> int:
        for i, token in enumerate(tokens):
            if token in words:
                return i
        return -1

    # ── Stages 5 and 6 ───────────────────────────────────────────────────────────

    def apply_digit_locale(self, components: NameComponents, codepoint: Union[str, int]) -> NameComponents:
        """Arabic-Indic digits are "ARABIC DIGIT ZERO", extended ones "FARSI DIGIT ZERO"."""
        if components.semantic_type != "digit":
            return components
        value = _codepoint_value(codepoint)
        if value is None:
            return components
        for label, (first, last) in DIGIT_LOCALE_RANGES.items():
            if first <= value <= last:
                return replace(components, label=label, script=None)
        return components

    def resolve_label(self, components: NameComponents) -> NameComponents:
        if components.label is not None or components.script is None:
            return components
        if components.script == NKO_SCRIPT:
            if components.semantic_type in NKO_SYMBOL_TYPES:
                return replace(components, label=NKO_SYMBOL_LABEL)
            return replace(components, label=NKO_LETTER_LABEL)
        return replace(components, label=components.script)

    # ── Stages 7 and 8 ───────────────────────────────────────────────────────────

    def assemble(self, parsed: ParsedName, components: NameComponents) -> str:
        words = []
        if components.label:
            words.append(components.label)
        if components.case_variant:
            words.append(components.case_variant)

        semantic_type = components.semantic_type
        literal_first = (semantic_type in LITERAL_FIRST_TYPES and not components.script) or (
            components.script is not None and bool(components.literal) and semantic_type in SCRIPTED_LITERAL_FIRST_TYPES
        )
        if literal_first:
            words.extend(w for w in (components.literal, semantic_type) if w)
        else:
            words.extend(w for w in (semantic_type, components.literal) if w)

        if components.modifier_clause:
            words.extend(("with", components.modifier_clause))

        display_name = " ".join(w if w in PRESERVED_LABELS else w.upper() for w in words)
        if not display_name or display_name in DEGENERATE_NAMES:
            return parsed.raw.upper()
        return display_name


def _codepoint_value(codepoint: Union[str, int]) -> Optional[int]:
    if isinstance(codepoint, int):
        return codepoint
    try:
        return int(codepoint, 16)
    except (TypeError, ValueError):
        return None


# ════════════════════════════════════════════════════════════════════════════════
# MODULE-LEVEL CONVENIENCE FUNCTIONS
# ════════════════════════════════════════════════════════════════════════════════

# Global decomposer instance for module-level functions
_global_decomposer: Optional[DisplayNameDecomposer] = None


def _get_global_decomposer() -> DisplayNameDecomposer:
    """Get or create the global decomposer instance."""
    global _global_decomposer
    if _global_decomposer is None:
        _global_decomposer = DisplayNameDecomposer()
    return _global_decomposer


def decompose(raw_name: str, codepoint: Union[str, int]) -> Optional[str]:
    """
    Module-level convenience function for display name decomposition.

    Args:
        raw_name: Raw Unicode character name ("LATIN CAPITAL LETTER H")
        codepoint: Hex codepoint ("0048")

    Returns:
        Display name, or None for empty/placeholder names
    """
    return _get_global_decomposer().decompose(raw_name, codepoint)
