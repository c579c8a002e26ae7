"""
Word tokens: the leaves of every phrase-structure tree.

A token is created by the tokenizer with `pos=UNKNOWN`, then replaced once by
its tagged counterpart. Tokens are frozen; nothing downstream mutates them.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional, Tuple

from .features import Features
from .grammar import POS

_WORD_PATTERN = re.compile(r"[a-zA-Z]")


@dataclass(frozen=True)
class Token:
    text: str
    start: int = 0
    end: int = 0
    position: int = 0
    pos: POS = POS.UNKNOWN
    lemma: Optional[str] = None
    base: Optional[str] = None
    features: Features = field(default_factory=Features)
    categories: Tuple[str, ...] = ()
    found: bool = False
    stripped_affixes: Tuple[str, ...] = ()

    @property
    def normalized(self) -> str:
        return self.text.lower()

    @property
    def effective_lemma(self) -> str:
        """Lemma if tagged, else the affix-stripped base, else the lowercased text."""
        return self.lemma or self.base or self.normalized

    def is_word(self) -> bool:
        return bool(_WORD_PATTERN.search(self.text))

    def has_pos(self, *pos: POS) -> bool:
        return self.pos in pos

    def is_noun(self) -> bool:
        return self.pos in (POS.NOUN, POS.PRONOUN)

    def is_verb(self) -> bool:
        return self.pos == POS.VERB

    def is_copula(self) -> bool:
        return self.pos == POS.COPULA

    def tagged(self, pos: POS, lemma: Optional[str] = None,
               features: Optional[Features] = None,
               categories: Tuple[str, ...] = (), found: bool = False) -> Token:
        """Return the tagged copy of this token."""
        return replace(
            self,
            pos=pos,
            lemma=lemma if lemma is not None else self.lemma,
            features=self.features.merged(features),
            categories=tuple(categories) or self.categories,
            found=found,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'text': self.text,
            'normalized': self.normalized,
            'start': self.start,
            'end': self.end,
            'position': self.position,
            'pos': self.pos.value,
            'lemma': self.lemma,
            'base': self.base,
            'features': self.features.to_dict(),
            'categories': list(self.categories),
            'found': self.found,
            'stripped_affixes': list(self.stripped_affixes),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Token:
        return cls(
            text=data['text'],
            start=data.get('start', 0),
            end=data.get('end', 0),
            position=data.get('position', 0),
            pos=POS(data.get('pos', POS.UNKNOWN.value)),
            lemma=data.get('lemma'),
            base=data.get('base'),
            features=Features.from_dict(data.get('features')),
            categories=tuple(data.get('categories', ())),
            found=data.get('found', False),
            stripped_affixes=tuple(data.get('stripped_affixes', ())),
        )

    def __str__(self) -> str:
        return f"{self.text}/{self.pos.value}"
