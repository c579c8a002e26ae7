"""
Lexical dictionary: word -> part of speech, lemma, categories and features.

Lookup is case-insensitive and tries, in order, the lemma itself, the known
inflected forms of every entry, and finally the bases left after affix
stripping. A listed form carries the features of the suffix that spells it
("walked": PAST), or the features declared for it when it is irregular.
The dictionary is built once and only read during analysis.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from ..features import Features
from ..grammar import POS
from .affixes import DEFAULT_AFFIXES, AffixTable, StripResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LexicalEntry:
    lemma: str
    pos: POS
    categories: Tuple[str, ...] = ()
    features: Features = field(default_factory=Features)
    forms: Tuple[str, ...] = ()
    alternate_pos: Tuple[POS, ...] = ()
    definition: Optional[str] = None
    # Features of irregular forms ("ran", "men") that no suffix explains
    form_features: Tuple[Tuple[str, Features], ...] = ()

    def has_pos(self, pos: POS) -> bool:
        return self.pos == pos or pos in self.alternate_pos

    def features_for_form(self, form: str) -> Optional[Features]:
        for name, features in self.form_features:
            if name == form:
                return features
        return None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'lemma': self.lemma,
            'pos': self.pos.value,
            'categories': list(self.categories),
            'features': self.features.to_dict(),
            'forms': list(self.forms),
        }
        if self.alternate_pos:
            data['alternate_pos'] = [p.value for p in self.alternate_pos]
        if self.definition:
            data['definition'] = self.definition
        if self.form_features:
            data['form_features'] = {form: features.to_dict() for form, features in self.form_features}
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> LexicalEntry:
        if 'lemma' not in data or 'pos' not in data:
            raise ValueError(f"Lexical entry needs 'lemma' and 'pos': {data!r}")
        return cls(
            lemma=data['lemma'].lower(),
            pos=POS(data['pos']),
            categories=tuple(data.get('categories', ())),
            features=Features.from_dict(data.get('features')),
            forms=tuple(f.lower() for f in data.get('forms', ())),
            alternate_pos=tuple(POS(p) for p in data.get('alternate_pos', ())),
            definition=data.get('definition'),
            form_features=tuple((form.lower(), Features.from_dict(features))
                                for form, features in data.get('form_features', {}).items()),
        )


@dataclass(frozen=True)
class LookupResult:
    entry: LexicalEntry
    matched_form: str
    affix_features: Features = field(default_factory=Features)
    from_affix_stripping: bool = False

    @property
    def pos(self) -> POS:
        return self.entry.pos

    @property
    def lemma(self) -> str:
        return self.entry.lemma

    @property
    def categories(self) -> Tuple[str, ...]:
        return self.entry.categories

    @property
    def alternate_pos(self) -> Tuple[POS, ...]:
        return self.entry.alternate_pos

    @property
    def features(self) -> Features:
        """Entry features, overridden by features implied by stripped affixes."""
        return self.entry.features.merged(self.affix_features)


class Dictionary:
    """In-memory lexicon indexed by lemma, inflected form, POS and category."""

    def __init__(self, affixes: AffixTable = DEFAULT_AFFIXES,
                 entries: Optional[Iterable[Union[LexicalEntry, Dict[str, Any]]]] = None):
        self.affixes = affixes
        self._entries: Dict[str, LexicalEntry] = {}
        self._forms: Dict[str, str] = {}
        self._pos_index: Dict[POS, List[str]] = {}
        self._category_index: Dict[str, List[str]] = {}
        if entries:
            self.add_entries(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, word: str) -> bool:
        return self.has(word)

    def add_entry(self, entry: Union[LexicalEntry, Dict[str, Any]]) -> Dictionary:
        """Add (or replace) an entry. Returns self for chaining."""
        if isinstance(entry, dict):
            entry = LexicalEntry.from_dict(entry)
        lemma = entry.lemma.lower()
        if lemma in self._entries:
            logger.debug("Replacing dictionary entry '%s'", lemma)
            self._unindex(self._entries[lemma])
        self._entries[lemma] = entry

        for pos in (entry.pos,) + entry.alternate_pos:
            self._pos_index.setdefault(pos, []).append(lemma)
        for category in entry.categories:
            self._category_index.setdefault(category, []).append(lemma)
        for form in entry.forms:
            self._forms[form.lower()] = lemma
        return self

    def add_entries(self, entries: Iterable[Union[LexicalEntry, Dict[str, Any]]]) -> Dictionary:
        for entry in entries:
            self.add_entry(entry)
        return self

    def _unindex(self, entry: LexicalEntry) -> None:
        lemma = entry.lemma.lower()
        for lemmas in list(self._pos_index.values()) + list(self._category_index.values()):
            while lemma in lemmas:
                lemmas.remove(lemma)
        for form in entry.forms:
            if self._forms.get(form.lower()) == lemma:
                del self._forms[form.lower()]

    @staticmethod
    def _accepts(entry: LexicalEntry, expected_pos: Optional[POS]) -> bool:
        return expected_pos is None or entry.has_pos(expected_pos)

    def _reading_for(self, normalized: str, analysis: StripResult, entry: LexicalEntry) -> StripResult:
        """Prefer the affix reading that fits the entry's POS ("runs": verb -s, not plural -s)."""
        if all(entry.pos in affix.applies_to for affix in analysis.stripped):
            return analysis
        typed = self.affixes.strip_affixes(normalized, entry.pos)
        return typed if typed.base == analysis.base else analysis

    def _form_features(self, form: str, entry: LexicalEntry) -> Features:
        """Features of a listed inflected form: declared ones, else those of its regular suffix."""
        declared = entry.features_for_form(form)
        if declared is not None:
            return declared
        reading = self.affixes.inflection_of(form, entry.lemma, entry.pos)
        return reading.features if reading is not None else Features()

    def lookup(self, word: str, expected_pos: Optional[POS] = None) -> Optional[LookupResult]:
        """
        Look a word up. Returns None when nothing matches.

        Args:
            word: Surface form (any case).
            expected_pos: Only accept entries that have this POS (primary or alternate).
        """
        normalized = word.lower()

        entry = self._entries.get(normalized)
        if entry is not None and self._accepts(entry, expected_pos):
            return LookupResult(entry, normalized)

        lemma = self._forms.get(normalized)
        if lemma is not None:
            entry = self._entries.get(lemma)
            if entry is not None and self._accepts(entry, expected_pos):
                return LookupResult(entry, normalized, self._form_features(normalized, entry))

        for analysis in self.affixes.possible_bases(normalized):
            if analysis.base == normalized:
                continue
            entry = self._entries.get(analysis.base)
            if entry is not None and self._accepts(entry, expected_pos):
                analysis = self._reading_for(normalized, analysis, entry)
                return LookupResult(entry, normalized, analysis.features, from_affix_stripping=True)

        return None

    def lookup_all(self, word: str) -> List[LookupResult]:
        """All analyses of an ambiguous word, direct matches first."""
        normalized = word.lower()
        results = []

        entry = self._entries.get(normalized)
        if entry is not None:
            results.append(LookupResult(entry, normalized))

        lemma = self._forms.get(normalized)
        if lemma is not None and lemma != normalized and lemma in self._entries:
            entry = self._entries[lemma]
            results.append(LookupResult(entry, normalized, self._form_features(normalized, entry)))

        for analysis in self.affixes.possible_bases(normalized):
            if analysis.base == normalized:
                continue
            entry = self._entries.get(analysis.base)
            if entry is not None:
                analysis = self._reading_for(normalized, analysis, entry)
                results.append(LookupResult(entry, normalized, analysis.features, from_affix_stripping=True))

        return results

    def has(self, word: str) -> bool:
        normalized = word.lower()
        return normalized in self._entries or normalized in self._forms

    def get(self, lemma: str) -> Optional[LexicalEntry]:
        return self._entries.get(lemma.lower())

    def by_pos(self, pos: POS) -> List[LexicalEntry]:
        return [self._entries[lemma] for lemma in self._pos_index.get(pos, [])]

    def by_category(self, category: str) -> List[LexicalEntry]:
        return [self._entries[lemma] for lemma in self._category_index.get(category, [])]

    def lemmas(self) -> List[str]:
        return list(self._entries)

    def clear(self) -> None:
        self._entries.clear()
        self._forms.clear()
        self._pos_index.clear()
        self._category_index.clear()

    def to_dict(self) -> Dict[str, Any]:
        return {'entries': [entry.to_dict() for entry in self._entries.values()]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any], affixes: AffixTable = DEFAULT_AFFIXES) -> Dictionary:
        return cls(affixes=affixes, entries=data.get('entries', []))

    @classmethod
    def default(cls, affixes: AffixTable = DEFAULT_AFFIXES) -> Dictionary:
        """Dictionary loaded with the built-in vocabulary."""
        from .entries import ALL_ENTRIES
        return cls(affixes=affixes, entries=ALL_ENTRIES)
