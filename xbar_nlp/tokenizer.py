"""
Whitespace/punctuation tokenizer producing untagged word tokens.

Tokens carry character offsets into the input and sentence positions
0..n-1. When affix stripping is enabled each token also records its
stripped base and the affixes removed; grammatical features are left to
dictionary lookup during tagging.
"""
from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Optional

from .lexicon.affixes import DEFAULT_AFFIXES, AffixTable
from .token import Token

logger = logging.getLogger(__name__)

PUNCTUATION = frozenset('.,!?;:-—–()[]{}"\'`/\\@#$%^&*+=<>|~')
SENTENCE_ENDINGS = frozenset('.!?')

_PUNCT_CLASS = re.escape(''.join(sorted(PUNCTUATION)))
# A run of one repeated punctuation character, or a word
_TOKEN_PATTERN = re.compile(rf"([{_PUNCT_CLASS}])\1*|[^\s{_PUNCT_CLASS}]+")
_CLOSERS = frozenset('"\')')


class Tokenizer:
    """Splits text into `Token`s."""

    DEFAULT_OPTIONS = {
        'strip_affixes': True,
        'include_punctuation': False,
    }

    def __init__(self, affixes: AffixTable = DEFAULT_AFFIXES, options: Optional[Dict[str, Any]] = None):
        self.affixes = affixes
        self.options = self.DEFAULT_OPTIONS.copy()
        if options:
            unknown = set(options) - set(self.DEFAULT_OPTIONS)
            if unknown:
                raise ValueError(f"Unknown tokenizer option(s): {', '.join(sorted(unknown))}")
            self.options.update(options)

    def tokenize(self, text: str) -> List[Token]:
        """Return word tokens (plus punctuation if configured) in text order."""
        tokens: List[Token] = []
        for match in _TOKEN_PATTERN.finditer(text or ''):
            word = match.group(0)
            is_punct = word[0] in PUNCTUATION
            if is_punct and not self.options['include_punctuation']:
                continue
            tokens.append(self._make_token(word, match.start(), match.end(), len(tokens), is_punct))
        logger.debug("Tokenized %d tokens", len(tokens))
        return tokens

    def _make_token(self, word: str, start: int, end: int, position: int, is_punct: bool) -> Token:
        if is_punct or not self.options['strip_affixes']:
            return Token(text=word, start=start, end=end, position=position)
        stripped = self.affixes.strip_affixes(word)
        if not stripped.changed:
            return Token(text=word, start=start, end=end, position=position)
        return Token(text=word, start=start, end=end, position=position,
                     base=stripped.base, stripped_affixes=stripped.affix_texts)

    def split_sentences(self, text: str) -> List[str]:
        """Split on . ! ? (keeping trailing quotes/brackets with their sentence)."""
        sentences = []
        current = []
        i = 0
        while i < len(text):
            char = text[i]
            current.append(char)
            i += 1
            if char in SENTENCE_ENDINGS:
                while i < len(text) and text[i] in _CLOSERS:
                    current.append(text[i])
                    i += 1
                sentence = ''.join(current).strip()
                if sentence:
                    sentences.append(sentence)
                current = []
        remaining = ''.join(current).strip()
        if remaining:
            sentences.append(remaining)
        return sentences

    def tokenize_sentences(self, text: str) -> List[List[Token]]:
        return [self.tokenize(sentence) for sentence in self.split_sentences(text)]

    @staticmethod
    def normalize_word(word: str) -> str:
        """Lowercase and trim surrounding punctuation."""
        return word.strip(''.join(PUNCTUATION)).lower()
