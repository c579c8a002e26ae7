"""
English affix table used for morphological fallback lookups.

The table is immutable: `DEFAULT_AFFIXES` is built once and handed to the
tokenizer and the dictionary explicitly. Callers wanting extra affixes build
a new table with `AffixTable.extended(...)` instead of mutating a shared list.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from ..features import Features
from ..grammar import POS, AffixType


@dataclass(frozen=True)
class Affix:
    affix: str
    type: AffixType
    applies_to: Tuple[POS, ...]
    meaning: str
    resulting_pos: Optional[POS] = None  # None: same POS as the base
    examples: Tuple[str, ...] = ()
    features: Features = field(default_factory=Features)


@dataclass(frozen=True)
class StripResult:
    """Base form left after stripping, with the affixes removed and their features."""
    base: str
    stripped: Tuple[Affix, ...] = ()
    features: Features = field(default_factory=Features)

    @property
    def changed(self) -> bool:
        return bool(self.stripped)

    @property
    def affix_texts(self) -> Tuple[str, ...]:
        return tuple(a.affix for a in self.stripped)


def _suffix(affix, applies_to, meaning, resulting_pos, examples, **features) -> Affix:
    return Affix(affix, AffixType.SUFFIX, tuple(applies_to), meaning, resulting_pos,
                 tuple(examples), Features.from_dict(features))


def _prefix(affix, applies_to, meaning, examples) -> Affix:
    return Affix(affix, AffixType.PREFIX, tuple(applies_to), meaning, None, tuple(examples))


SUFFIXES: Tuple[Affix, ...] = (
    # Nouns
    _suffix('s', [POS.NOUN], 'PLURAL', POS.NOUN, ['cats', 'dogs', 'books'], number='PLURAL'),
    _suffix('es', [POS.NOUN], 'PLURAL', POS.NOUN, ['boxes', 'watches', 'buses'], number='PLURAL'),
    _suffix('er', [POS.VERB], 'AGENT', POS.NOUN, ['runner', 'teacher', 'writer'], derivation='AGENT'),
    _suffix('tion', [POS.VERB], 'NOMINALIZATION', POS.NOUN, ['action', 'creation', 'information']),
    _suffix('ness', [POS.ADJECTIVE], 'STATE', POS.NOUN, ['happiness', 'darkness', 'kindness']),
    _suffix('ment', [POS.VERB], 'RESULT', POS.NOUN, ['movement', 'development', 'agreement']),
    # Verbs
    _suffix('ed', [POS.VERB], 'PAST', POS.VERB, ['walked', 'played', 'watched'], tense='PAST'),
    _suffix('ing', [POS.VERB], 'PROGRESSIVE', POS.VERB, ['running', 'eating', 'sleeping'],
            aspect='PROGRESSIVE'),
    _suffix('s', [POS.VERB], 'THIRD_PERSON_SINGULAR', POS.VERB, ['runs', 'walks', 'eats'],
            person='THIRD', number='SINGULAR'),
    _suffix('es', [POS.VERB], 'THIRD_PERSON_SINGULAR', POS.VERB, ['watches', 'fixes', 'goes'],
            person='THIRD', number='SINGULAR'),
    # Adjectives
    _suffix('er', [POS.ADJECTIVE], 'COMPARATIVE', POS.ADJECTIVE, ['bigger', 'smaller', 'faster'],
            degree='COMPARATIVE'),
    _suffix('est', [POS.ADJECTIVE], 'SUPERLATIVE', POS.ADJECTIVE, ['biggest', 'smallest', 'fastest'],
            degree='SUPERLATIVE'),
    _suffix('able', [POS.VERB], 'CAPABLE', POS.ADJECTIVE, ['readable', 'movable', 'breakable']),
    _suffix('ful', [POS.NOUN], 'FULL_OF', POS.ADJECTIVE, ['beautiful', 'helpful', 'careful']),
    _suffix('less', [POS.NOUN], 'WITHOUT', POS.ADJECTIVE, ['careless', 'homeless', 'endless']),
    _suffix('ous', [POS.NOUN], 'HAVING', POS.ADJECTIVE, ['famous', 'dangerous', 'curious']),
    _suffix('ive', [POS.VERB], 'TENDING_TO', POS.ADJECTIVE, ['active', 'creative', 'attractive']),
    # Adverbs
    _suffix('ly', [POS.ADJECTIVE], 'MANNER', POS.ADVERB, ['quickly', 'slowly', 'happily']),
)

PREFIXES: Tuple[Affix, ...] = (
    # Negation
    _prefix('un', [POS.ADJECTIVE, POS.VERB], 'NOT', ['unhappy', 'undo', 'unfair']),
    _prefix('dis', [POS.VERB, POS.ADJECTIVE], 'NOT', ['disagree', 'dishonest', 'dislike']),
    _prefix('in', [POS.ADJECTIVE], 'NOT', ['incorrect', 'incomplete', 'invisible']),
    _prefix('im', [POS.ADJECTIVE], 'NOT', ['impossible', 'imperfect', 'immature']),
    _prefix('ir', [POS.ADJECTIVE], 'NOT', ['irregular', 'irresponsible']),
    _prefix('il', [POS.ADJECTIVE], 'NOT', ['illegal', 'illogical']),
    _prefix('non', [POS.NOUN, POS.ADJECTIVE], 'NOT', ['nonexistent', 'nonsense', 'nonstop']),
    # Direction / location
    _prefix('re', [POS.VERB], 'AGAIN', ['rewrite', 'redo', 'rebuild']),
    _prefix('pre', [POS.VERB, POS.NOUN], 'BEFORE', ['preview', 'prewar', 'predict']),
    _prefix('post', [POS.NOUN, POS.ADJECTIVE], 'AFTER', ['postwar', 'postpone', 'postgraduate']),
    _prefix('sub', [POS.NOUN, POS.ADJECTIVE], 'UNDER', ['submarine', 'subway', 'substandard']),
    _prefix('super', [POS.NOUN, POS.ADJECTIVE], 'ABOVE', ['superhuman', 'supermarket', 'supernatural']),
    _prefix('inter', [POS.VERB, POS.ADJECTIVE], 'BETWEEN', ['interact', 'international', 'intervene']),
    _prefix('trans', [POS.VERB, POS.NOUN], 'ACROSS', ['transport', 'translate', 'transform']),
    # Size / degree
    _prefix('mini', [POS.NOUN, POS.ADJECTIVE], 'SMALL', ['minivan', 'miniature', 'minimal']),
    _prefix('micro', [POS.NOUN], 'VERY_SMALL', ['microscope', 'microphone', 'microorganism']),
    _prefix('mega', [POS.NOUN, POS.ADJECTIVE], 'VERY_LARGE', ['megaphone', 'megalomaniac']),
    # Other
    _prefix('over', [POS.VERB, POS.ADJECTIVE], 'EXCESSIVE', ['overeat', 'overworked', 'overconfident']),
    _prefix('under', [POS.VERB, POS.ADJECTIVE], 'INSUFFICIENT', ['underestimate', 'underpaid']),
    _prefix('mis', [POS.VERB, POS.NOUN], 'WRONGLY', ['misunderstand', 'misplace', 'mistake']),
    _prefix('out', [POS.VERB], 'EXCEEDING', ['outdo', 'outnumber', 'outgrow']),
)

# A stripped word must keep at least this many characters
MIN_BASE_LENGTH = 2


def stem_matches(stem: str, lemma: str) -> bool:
    """True when `stem` is `lemma` after a regular spelling change (mov-ed, sitt-ing, citi-es)."""
    if stem == lemma or stem + 'e' == lemma:
        return True
    if len(stem) > 2 and stem[-1] == stem[-2] and stem[:-1] == lemma:
        return True
    return stem.endswith('i') and stem[:-1] + 'y' == lemma


class AffixTable:
    """Read-only collection of suffixes and prefixes."""

    def __init__(self, suffixes: Iterable[Affix] = (), prefixes: Iterable[Affix] = ()):
        self._suffixes = tuple(suffixes)
        self._prefixes = tuple(prefixes)
        # Longest first; ties keep declaration order
        self._suffix_order = tuple(sorted(self._suffixes, key=lambda a: len(a.affix), reverse=True))
        self._prefix_order = tuple(sorted(self._prefixes, key=lambda a: len(a.affix), reverse=True))
        index: Dict[str, List[Affix]] = {}
        for affix in self._suffixes + self._prefixes:
            index.setdefault(affix.affix.lower(), []).append(affix)
        self._index = {key: tuple(value) for key, value in index.items()}

    @property
    def suffixes(self) -> Tuple[Affix, ...]:
        return self._suffixes

    @property
    def prefixes(self) -> Tuple[Affix, ...]:
        return self._prefixes

    def __len__(self) -> int:
        return len(self._suffixes) + len(self._prefixes)

    def extended(self, suffixes: Iterable[Affix] = (), prefixes: Iterable[Affix] = ()) -> AffixTable:
        """Return a new table with extra affixes appended."""
        return AffixTable(self._suffixes + tuple(suffixes), self._prefixes + tuple(prefixes))

    def lookup(self, text: str) -> Tuple[Affix, ...]:
        return self._index.get(text.lower(), ())

    def is_known_suffix(self, text: str) -> bool:
        return any(a.type == AffixType.SUFFIX for a in self.lookup(text))

    def is_known_prefix(self, text: str) -> bool:
        return any(a.type == AffixType.PREFIX for a in self.lookup(text))

    def strip_suffixes(self, word: str, expected_pos: Optional[POS] = None) -> StripResult:
        """Strip the longest matching suffix (at most one)."""
        normalized = word.lower()
        for affix in self._suffix_order:
            if not normalized.endswith(affix.affix):
                continue
            base = normalized[:-len(affix.affix)]
            if len(base) < MIN_BASE_LENGTH:
                continue
            if expected_pos is not None and expected_pos not in affix.applies_to:
                continue
            return StripResult(base, (affix,), affix.features)
        return StripResult(normalized)

    def strip_prefixes(self, word: str, expected_pos: Optional[POS] = None) -> StripResult:
        """Strip the longest matching prefix (at most one)."""
        normalized = word.lower()
        for affix in self._prefix_order:
            if not normalized.startswith(affix.affix):
                continue
            base = normalized[len(affix.affix):]
            if len(base) < MIN_BASE_LENGTH:
                continue
            if expected_pos is not None and expected_pos not in affix.applies_to:
                continue
            return StripResult(base, (affix,), affix.features)
        return StripResult(normalized)

    def strip_affixes(self, word: str, expected_pos: Optional[POS] = None) -> StripResult:
        """Strip one suffix, then one prefix from what remains."""
        suffix = self.strip_suffixes(word, expected_pos)
        prefix = self.strip_prefixes(suffix.base, expected_pos)
        return StripResult(
            prefix.base,
            suffix.stripped + prefix.stripped,
            suffix.features.merged(prefix.features),
        )

    def inflection_of(self, word: str, lemma: str, pos: POS) -> Optional[StripResult]:
        """
        Suffix reading of `word` as a regular inflection of `lemma`.

        Returns None when no suffix for `pos` leaves a stem that spells the
        lemma (see `stem_matches`), e.g. for irregular forms like "ran".
        """
        result = self.strip_suffixes(word, pos)
        lemma = lemma.lower()
        if result.changed and stem_matches(result.base, lemma):
            return StripResult(lemma, result.stripped, result.features)
        return None

    def possible_bases(self, word: str) -> List[StripResult]:
        """
        Candidate analyses of `word`: unstripped, suffix only, prefix only,
        and both (when two affixes came off).
        """
        normalized = word.lower()
        results = [StripResult(normalized)]
        suffix = self.strip_suffixes(normalized)
        if suffix.changed:
            results.append(suffix)
        prefix = self.strip_prefixes(normalized)
        if prefix.changed:
            results.append(prefix)
        both = self.strip_affixes(normalized)
        if len(both.stripped) > 1:
            results.append(both)
        return results


DEFAULT_AFFIXES = AffixTable(SUFFIXES, PREFIXES)
