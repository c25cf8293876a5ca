"""Text normalization for ingredient matching.

Every comparison in the matcher goes through `normalize`: queries, canonical
names and aliases are reduced to the same diacritic-free, lower-case,
whitespace-collapsed key so that "Thịt bò", "thit bo" and "THỊT  BÒ" compare
equal. Word boundaries survive so substring checks still see whole words.
"""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass
from typing import Iterable

_WHITESPACE_RE = re.compile(r"\s+")
# Đ/đ are standalone letters, NFD does not split them into d + mark.
_STROKE_D = str.maketrans({"đ": "d", "Đ": "d"})

_MEAT_PREFIX_RE = re.compile(r"^(thịt|thit)\s+", re.IGNORECASE)
_FRESHNESS_SUFFIX_RE = re.compile(
    r"\s+(tươi|tuoi|khô|kho|đông lạnh|dong lanh)$", re.IGNORECASE
)


@dataclass(frozen=True)
class NormalizedKey:
    """Comparison key derived from a display string."""

    value: str

    def __str__(self) -> str:
        return self.value

    def __len__(self) -> int:
        return len(self.value)

    def __bool__(self) -> bool:
        return bool(self.value)

    def __contains__(self, other: object) -> bool:
        if isinstance(other, NormalizedKey):
            return other.value in self.value
        return str(other) in self.value


def _collapse_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def normalize_text(text: str | None) -> str:
    """Normalize text into its comparison form.

    Steps:
    - Lowercase.
    - NFD decomposition, then drop every combining mark.
    - Map đ/Đ to d.
    - Collapse whitespace to single spaces and trim.

    Digits and punctuation are left alone.
    """
    if not text:
        return ""
    lowered = str(text).lower()
    decomposed = unicodedata.normalize("NFD", lowered)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return _collapse_whitespace(stripped.translate(_STROKE_D))


def normalize(text: str | NormalizedKey | None) -> NormalizedKey:
    if isinstance(text, NormalizedKey):
        text = text.value
    return NormalizedKey(normalize_text(text))


def fold_text(text: str | None) -> str:
    """Lower-case and whitespace-collapse text but keep its diacritics."""
    if not text:
        return ""
    return _collapse_whitespace(unicodedata.normalize("NFC", str(text)).lower())


def has_diacritics(text: str | None) -> bool:
    folded = fold_text(text)
    return folded != normalize_text(folded)


def clean_ingredient_name(name: str | None) -> str:
    """Drop a leading "thịt" and a trailing freshness word from a name."""
    if not name:
        return ""
    cleaned = _collapse_whitespace(str(name))
    cleaned = _MEAT_PREFIX_RE.sub("", cleaned)
    cleaned = _FRESHNESS_SUFFIX_RE.sub("", cleaned)
    return _collapse_whitespace(cleaned)


def _unique(items: Iterable[str]) -> list[str]:
    return [item for item in dict.fromkeys(items) if item]


def ingredient_variations(name: str | None) -> list[str]:
    if not name:
        return []
    cleaned = clean_ingredient_name(name)
    variations = [
        name,
        cleaned,
        normalize_text(name),
        normalize_text(cleaned),
    ]
    words = cleaned.lower().split()
    if len(words) > 1:
        for word in words:
            if len(word) > 2:
                variations.append(word)
                variations.append(normalize_text(word))
    return _unique(variations)


def search_keywords(name: str | None) -> list[str]:
    """Normalized words plus adjacent word pairs, in order of appearance."""
    words = [word for word in normalize_text(name).split(" ") if len(word) > 1]
    keywords = list(words)
    keywords.extend(f"{left} {right}" for left, right in zip(words, words[1:]))
    return _unique(keywords)
