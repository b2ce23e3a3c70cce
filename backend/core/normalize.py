"""
Alias keys for exercise name matching.

Catalog ids, Japanese and English names and aliases are all folded into one
key space, so "BB Bench", "bb-bench" and "ＢＢ ＢＥＮＣＨ" land on the same
alias table entry. Japanese is written without word spaces, so a gap or a
katakana middle dot between two Japanese words is dropped entirely:
"ダンベル・プレス" and "ダンベルプレス" share a key.
"""
import functools
import re
import unicodedata
from pathlib import Path
from typing import Dict, Iterable, Optional, Union

import yaml

ROOT = Path(__file__).resolve().parents[2]
DEFAULT_DICTIONARY = ROOT / "shared/dictionaries/normalization.yaml"

_SEPARATORS = re.compile(r"[-_/・]+")
_PUNCTUATION = re.compile(r"[^\w\s]")
# Whitespace with kana or kanji on both sides
_JAPANESE_GAP = re.compile(r"(?<=[\u3040-\u30ff\u3400-\u9fff])\s+(?=[\u3040-\u30ff\u3400-\u9fff])")


class AliasNormalizer:
    """
    Folds exercise names into alias keys.

    Steps: NFKC (full-width and half-width kana folding), lower-case,
    abbreviation expansion, separators to spaces, punctuation removal,
    stopwords, plural to singular, then Japanese gaps are closed.

    Usage:
        >>> normalizer = AliasNormalizer(expand={"db": "dumbbell"})
        >>> normalizer("DB Bench-Press!")
        'dumbbell bench press'
    """

    def __init__(
        self,
        expand: Optional[Dict[str, str]] = None,
        stopwords: Iterable[str] = (),
        plural_to_singular: Optional[Dict[str, str]] = None,
    ):
        self._expansions = [
            (re.compile(rf"\b{re.escape(short)}\b"), full)
            for short, full in (expand or {}).items()
        ]
        self._stopwords = frozenset(stopwords)
        self._singular = dict(plural_to_singular or {})

    @classmethod
    def from_yaml(cls, path: Union[str, Path] = DEFAULT_DICTIONARY) -> "AliasNormalizer":
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
        return cls(
            expand=data.get("expand"),
            stopwords=data.get("stopwords") or (),
            plural_to_singular=data.get("plural_to_singular"),
        )

    def __call__(self, text: str) -> str:
        key = unicodedata.normalize("NFKC", text or "").lower()
        for pattern, full in self._expansions:
            key = pattern.sub(full, key)
        key = _PUNCTUATION.sub("", _SEPARATORS.sub(" ", key))
        words = [self._singular.get(w, w) for w in key.split() if w not in self._stopwords]
        return _JAPANESE_GAP.sub("", " ".join(words))


@functools.lru_cache()
def default_normalizer() -> AliasNormalizer:
    """Normalizer over the bundled dictionary, loaded on first use."""
    return AliasNormalizer.from_yaml()


def normalize(text: str) -> str:
    return default_normalizer()(text)
