"""
Closed grammatical vocabularies shared by every layer of the analyzer.

The parser, the phrase builder and the semantic layer all speak in terms of
these enums. Values are the upper-case names used in serialized output, so
`POS('NOUN')` and `PhraseCategory('AdvP')` round-trip through JSON.
"""
from enum import Enum
from typing import Dict, Optional, Tuple


class POS(Enum):
    """Part of speech assigned by the tagger."""
    NOUN = "NOUN"
    VERB = "VERB"
    ADJECTIVE = "ADJECTIVE"
    ADVERB = "ADVERB"
    DETERMINER = "DETERMINER"
    PREPOSITION = "PREPOSITION"
    CONJUNCTION = "CONJUNCTION"
    AUXILIARY = "AUXILIARY"
    COPULA = "COPULA"
    PRONOUN = "PRONOUN"
    UNKNOWN = "UNKNOWN"


class PhraseCategory(Enum):
    """Phrase categories of the X-Bar tree."""
    NP = "NP"
    VP = "VP"
    AP = "AP"
    PP = "PP"
    TP = "TP"
    DP = "DP"
    ADVP = "AdvP"


class NodeLevel(Enum):
    """Projection level of a tree node: head, bar or maximal projection."""
    HEAD = "X"
    BAR = "X'"
    PHRASE = "XP"


class SemanticRole(Enum):
    AGENT = "AGENT"
    PATIENT = "PATIENT"
    THEME = "THEME"
    EXPERIENCER = "EXPERIENCER"
    RECIPIENT = "RECIPIENT"
    SOURCE = "SOURCE"
    GOAL = "GOAL"
    LOCATION = "LOCATION"
    TIME = "TIME"
    INSTRUMENT = "INSTRUMENT"
    CAUSE = "CAUSE"
    PROPERTY = "PROPERTY"
    NONE = "NONE"


class PredicateType(Enum):
    IS_A = "IS_A"
    HAS_PROPERTY = "HAS_PROPERTY"
    DOES = "DOES"
    IS_LOCATED = "IS_LOCATED"
    HAS = "HAS"
    UNKNOWN = "UNKNOWN"


class SentenceType(Enum):
    DECLARATIVE = "DECLARATIVE"
    INTERROGATIVE = "INTERROGATIVE"
    IMPERATIVE = "IMPERATIVE"
    EXCLAMATORY = "EXCLAMATORY"
    UNKNOWN = "UNKNOWN"


class Number(Enum):
    SINGULAR = "SINGULAR"
    PLURAL = "PLURAL"
    MASS = "MASS"
    UNKNOWN = "UNKNOWN"


class Tense(Enum):
    PRESENT = "PRESENT"
    PAST = "PAST"
    FUTURE = "FUTURE"
    PRESENT_PERFECT = "PRESENT_PERFECT"
    PAST_PERFECT = "PAST_PERFECT"
    UNKNOWN = "UNKNOWN"


class Aspect(Enum):
    SIMPLE = "SIMPLE"
    PROGRESSIVE = "PROGRESSIVE"
    PERFECT = "PERFECT"
    PERFECT_PROGRESSIVE = "PERFECT_PROGRESSIVE"
    UNKNOWN = "UNKNOWN"


class Person(Enum):
    FIRST = "FIRST"
    SECOND = "SECOND"
    THIRD = "THIRD"
    UNKNOWN = "UNKNOWN"


class AffixType(Enum):
    PREFIX = "PREFIX"
    SUFFIX = "SUFFIX"


# Parts of speech that may head each phrase category
HEAD_POS: Dict[PhraseCategory, Tuple[POS, ...]] = {
    PhraseCategory.NP: (POS.NOUN, POS.PRONOUN),
    PhraseCategory.VP: (POS.VERB,),
    PhraseCategory.AP: (POS.ADJECTIVE,),
    PhraseCategory.ADVP: (POS.ADVERB,),
    PhraseCategory.PP: (POS.PREPOSITION,),
    PhraseCategory.TP: (POS.AUXILIARY, POS.COPULA),
    PhraseCategory.DP: (POS.DETERMINER,),
}

# Parts of speech that may fill the specifier position
SPECIFIER_POS: Dict[PhraseCategory, Tuple[POS, ...]] = {
    PhraseCategory.NP: (POS.DETERMINER,),
    PhraseCategory.VP: (POS.ADVERB,),
    PhraseCategory.AP: (POS.ADVERB,),
    PhraseCategory.PP: (),
    PhraseCategory.TP: (),
    PhraseCategory.DP: (),
    PhraseCategory.ADVP: (POS.ADVERB,),
}

HEAD_SYMBOLS: Dict[PhraseCategory, str] = {
    PhraseCategory.NP: "N",
    PhraseCategory.VP: "V",
    PhraseCategory.AP: "A",
    PhraseCategory.ADVP: "Adv",
    PhraseCategory.PP: "P",
    PhraseCategory.TP: "T",
    PhraseCategory.DP: "D",
}


def is_valid_head(pos: POS, category: PhraseCategory) -> bool:
    """Return True if a token with `pos` can head a phrase of `category`."""
    return pos in HEAD_POS.get(category, ())


def is_valid_specifier(pos: POS, category: PhraseCategory) -> bool:
    return pos in SPECIFIER_POS.get(category, ())


def head_symbol(category: PhraseCategory) -> str:
    """Short head label used in bar labels, e.g. N for NP (N')."""
    return HEAD_SYMBOLS.get(category, "?")


def pos_to_category(pos: POS) -> Optional[PhraseCategory]:
    """Phrase category a part of speech projects, or None (conjunctions, unknown)."""
    for category, heads in HEAD_POS.items():
        if pos in heads:
            return category
    return None
