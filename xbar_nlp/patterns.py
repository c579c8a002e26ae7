"""
Clause patterns: pick a clause template for a tagged sentence and build its tree.

The four clause kinds are a closed enum. Each kind has a shape predicate over
the POS sequence, a component extractor producing a kind-specific clause
record, and a tree builder. Kinds are tried in a fixed priority order
(Property, Identity, Location, Action); the first kind whose shape matches
and whose tree can be built wins.

A shape match is only a hint: when extraction or tree building fails the
matcher records why and moves on to the next kind.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from .grammar import POS, PredicateType, SentenceType
from .logging_config import log_with_context
from .phrase_builder import build_ap, build_np, build_pp, build_tp, build_vp
from .token import Token
from .tree import PhraseTree

logger = logging.getLogger(__name__)


class ClauseKind(Enum):
    PROPERTY = "Property"
    IDENTITY = "Identity"
    LOCATION = "Location"
    ACTION = "Action"


@dataclass(frozen=True)
class ActionClause:
    """Subject + verb + optional object."""
    subject: Tuple[Token, ...]
    verb: Token
    obj: Tuple[Token, ...] = ()

    kind = ClauseKind.ACTION


@dataclass(frozen=True)
class PropertyClause:
    """Subject + copula + adjective phrase."""
    subject: Tuple[Token, ...]
    copula: Token
    predicate: Tuple[Token, ...]

    kind = ClauseKind.PROPERTY


@dataclass(frozen=True)
class IdentityClause:
    """Subject + copula + predicate nominal."""
    subject: Tuple[Token, ...]
    copula: Token
    obj: Tuple[Token, ...]

    kind = ClauseKind.IDENTITY


@dataclass(frozen=True)
class LocationClause:
    """Subject + copula + prepositional phrase."""
    subject: Tuple[Token, ...]
    copula: Token
    location: Tuple[Token, ...]

    kind = ClauseKind.LOCATION


Clause = Union[ActionClause, PropertyClause, IdentityClause, LocationClause]


@dataclass(frozen=True)
class ClausePattern:
    """Static description of a clause kind."""
    kind: ClauseKind
    description: str
    pos_sequence: Tuple[str, ...]
    predicate_type: PredicateType
    sentence_type: SentenceType = SentenceType.DECLARATIVE

    @property
    def name(self) -> str:
        return self.kind.value


PATTERNS: Dict[ClauseKind, ClausePattern] = {
    ClauseKind.PROPERTY: ClausePattern(
        ClauseKind.PROPERTY, 'Subject has a property',
        ('NP', 'COPULA', 'AP'), PredicateType.HAS_PROPERTY),
    ClauseKind.IDENTITY: ClausePattern(
        ClauseKind.IDENTITY, 'Subject is identified as another entity',
        ('NP', 'COPULA', 'NP'), PredicateType.IS_A),
    ClauseKind.LOCATION: ClausePattern(
        ClauseKind.LOCATION, 'Subject is located somewhere',
        ('NP', 'COPULA', 'PP'), PredicateType.IS_LOCATED),
    ClauseKind.ACTION: ClausePattern(
        ClauseKind.ACTION, 'Subject performs action on object',
        ('NP', 'VP'), PredicateType.DOES),
}

# Later kinds have looser shapes; order matters.
PATTERN_ORDER: Tuple[ClauseKind, ...] = (
    ClauseKind.PROPERTY,
    ClauseKind.IDENTITY,
    ClauseKind.LOCATION,
    ClauseKind.ACTION,
)


def _first_index(tokens: List[Token], *pos: POS) -> int:
    for i, token in enumerate(tokens):
        if token.pos in pos:
            return i
    return -1


# ----------------------------------------------------------------------
# Shape predicates
# ----------------------------------------------------------------------

def matches(kind: ClauseKind, tokens: List[Token]) -> bool:
    """Return True if the POS shape of `tokens` fits clause `kind`."""
    if not tokens:
        return False

    copula = _first_index(tokens, POS.COPULA)

    if kind == ClauseKind.PROPERTY:
        adjective = _first_index(tokens, POS.ADJECTIVE)
        return copula >= 0 and adjective >= 0 and copula < adjective

    if kind == ClauseKind.IDENTITY:
        if copula < 0:
            return False
        after = tokens[copula + 1:]
        return (any(t.is_noun() for t in after)
                and not any(t.pos == POS.ADJECTIVE for t in after))

    if kind == ClauseKind.LOCATION:
        return copula >= 0 and copula + 1 < len(tokens) and tokens[copula + 1].pos == POS.PREPOSITION

    if kind == ClauseKind.ACTION:
        has_nominal = any(t.pos in (POS.NOUN, POS.PRONOUN, POS.DETERMINER) for t in tokens)
        has_verb = any(t.is_verb() for t in tokens)
        return has_nominal and has_verb and not tokens[0].is_verb()

    raise ValueError(f"Unhandled clause kind: {kind}")


# ----------------------------------------------------------------------
# Component extraction
# ----------------------------------------------------------------------

def extract_components(kind: ClauseKind, tokens: List[Token]) -> Tuple[Optional[Clause], Optional[str]]:
    """
    Split `tokens` into the clause record for `kind`.

    Returns (clause, None) on success or (None, error message).
    """
    if kind == ClauseKind.ACTION:
        verb = _first_index(tokens, POS.VERB)
        if verb < 0:
            return None, 'No verb found in action pattern'
        return ActionClause(
            subject=tuple(tokens[:verb]),
            verb=tokens[verb],
            obj=tuple(tokens[verb + 1:]),
        ), None

    if kind not in (ClauseKind.PROPERTY, ClauseKind.IDENTITY, ClauseKind.LOCATION):
        raise ValueError(f"Unhandled clause kind: {kind}")

    copula = _first_index(tokens, POS.COPULA)
    if copula < 0:
        return None, f'No copula found in {kind.value.lower()} pattern'

    subject = tuple(tokens[:copula])
    rest = tuple(tokens[copula + 1:])
    if kind == ClauseKind.PROPERTY:
        return PropertyClause(subject, tokens[copula], rest), None
    if kind == ClauseKind.IDENTITY:
        return IdentityClause(subject, tokens[copula], rest), None
    return LocationClause(subject, tokens[copula], rest), None


# ----------------------------------------------------------------------
# Tree building
# ----------------------------------------------------------------------

def build_clause_tree(clause: Clause) -> Optional[PhraseTree]:
    """Build the TP tree for a clause record, or None if any phrase fails."""
    subject = build_np(list(clause.subject))
    if not subject.success:
        logger.debug("%s: subject failed: %s", clause.kind.value, subject.errors)
        return None

    if isinstance(clause, ActionClause):
        predicate = build_vp([clause.verb] + list(clause.obj))
        tense_marker = None
    elif isinstance(clause, PropertyClause):
        predicate = build_ap(list(clause.predicate))
        tense_marker = clause.copula
    elif isinstance(clause, IdentityClause):
        predicate = build_np(list(clause.obj))
        tense_marker = clause.copula
    elif isinstance(clause, LocationClause):
        predicate = build_pp(list(clause.location))
        tense_marker = clause.copula
    else:
        raise ValueError(f"Unhandled clause: {clause!r}")

    if not predicate.success:
        logger.debug("%s: predicate failed: %s", clause.kind.value, predicate.errors)
        return None

    return build_tp(subject.tree, predicate.tree, tense_marker)


# ----------------------------------------------------------------------
# Matching
# ----------------------------------------------------------------------

@dataclass
class MatchResult:
    pattern: Optional[ClausePattern] = None
    clause: Optional[Clause] = None
    tree: Optional[PhraseTree] = None
    errors: List[str] = field(default_factory=list)

    @property
    def kind(self) -> Optional[ClauseKind]:
        return self.pattern.kind if self.pattern else None

    @property
    def success(self) -> bool:
        return self.tree is not None


def match_pattern(tokens: Optional[List[Token]]) -> MatchResult:
    """
    Try each clause kind in priority order; the first one that builds wins.

    Never raises for bad input: an empty sequence or a sequence no kind can
    build yields a result with `pattern=None` and the accumulated errors.
    """
    if not tokens:
        return MatchResult(errors=['No tokens provided for pattern matching'])

    words = [t.text for t in tokens]
    errors: List[str] = []
    for kind in PATTERN_ORDER:
        pattern = PATTERNS[kind]
        if not matches(kind, tokens):
            continue
        logger.debug("Shape matched: %s", pattern.name)

        clause, error = extract_components(kind, tokens)
        if error:
            log_with_context(logger, f"{pattern.name} rejected", {"tokens": words, "error": error},
                             level=logging.DEBUG)
            errors.append(f"{pattern.name}: {error}")
            continue

        tree = build_clause_tree(clause)
        if tree is None:
            log_with_context(logger, f"{pattern.name} rejected", {"tokens": words, "error": "tree build failed"},
                             level=logging.DEBUG)
            errors.append(f"{pattern.name}: Failed to build tree")
            continue

        logger.debug("Pattern %s selected", pattern.name)
        return MatchResult(pattern=pattern, clause=clause, tree=tree, errors=[])

    return MatchResult(errors=errors or ['No matching pattern found'])


def get_sentence_type(pattern: Optional[ClausePattern]) -> SentenceType:
    return pattern.sentence_type if pattern else SentenceType.UNKNOWN


def get_predicate_type(pattern: Optional[ClausePattern]) -> PredicateType:
    return pattern.predicate_type if pattern else PredicateType.UNKNOWN
