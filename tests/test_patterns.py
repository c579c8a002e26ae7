"""
Tests for clause pattern matching.
"""
import logging

import pytest

from xbar_nlp.grammar import POS, PhraseCategory, PredicateType, SentenceType
from xbar_nlp.patterns import (
    PATTERN_ORDER,
    PATTERNS,
    ActionClause,
    ClauseKind,
    IdentityClause,
    PropertyClause,
    build_clause_tree,
    extract_components,
    get_predicate_type,
    get_sentence_type,
    match_pattern,
    matches,
)
from xbar_nlp.token import Token


def tokens(*pairs):
    return [Token(text=text, position=i, pos=pos, lemma=text.lower())
            for i, (text, pos) in enumerate(pairs)]


D, N, V, A, P, ADV, COP = (POS.DETERMINER, POS.NOUN, POS.VERB, POS.ADJECTIVE,
                           POS.PREPOSITION, POS.ADVERB, POS.COPULA)

APPLE_IS_RED = (('the', D), ('apple', N), ('is', COP), ('red', A))
SOCRATES_IS_A_MAN = (('Socrates', N), ('is', COP), ('a', D), ('man', N))
CAT_ON_TABLE = (('the', D), ('cat', N), ('is', COP), ('on', P), ('the', D), ('table', N))
MAN_READS_BOOK = (('the', D), ('man', N), ('reads', V), ('a', D), ('book', N))


class TestPatternTable:

    def test_priority_order(self):
        assert PATTERN_ORDER == (ClauseKind.PROPERTY, ClauseKind.IDENTITY,
                                 ClauseKind.LOCATION, ClauseKind.ACTION)

    def test_every_kind_has_a_pattern(self):
        assert set(PATTERNS) == set(ClauseKind)
        assert PATTERNS[ClauseKind.ACTION].predicate_type == PredicateType.DOES
        assert PATTERNS[ClauseKind.PROPERTY].name == 'Property'

    def test_type_helpers(self):
        pattern = PATTERNS[ClauseKind.IDENTITY]
        assert get_sentence_type(pattern) == SentenceType.DECLARATIVE
        assert get_predicate_type(pattern) == PredicateType.IS_A
        assert get_sentence_type(None) == SentenceType.UNKNOWN
        assert get_predicate_type(None) == PredicateType.UNKNOWN


class TestShapes:

    def test_property_shape(self):
        assert matches(ClauseKind.PROPERTY, tokens(*APPLE_IS_RED))
        assert not matches(ClauseKind.PROPERTY, tokens(*SOCRATES_IS_A_MAN))

    def test_identity_shape_excludes_adjectives(self):
        assert matches(ClauseKind.IDENTITY, tokens(*SOCRATES_IS_A_MAN))
        seq = tokens(('Socrates', N), ('is', COP), ('a', D), ('wise', A), ('man', N))
        assert not matches(ClauseKind.IDENTITY, seq)

    def test_location_shape(self):
        assert matches(ClauseKind.LOCATION, tokens(*CAT_ON_TABLE))
        assert not matches(ClauseKind.LOCATION, tokens(*APPLE_IS_RED))

    def test_action_shape(self):
        assert matches(ClauseKind.ACTION, tokens(*MAN_READS_BOOK))
        assert not matches(ClauseKind.ACTION, tokens(('reads', V), ('books', N)))
        assert not matches(ClauseKind.ACTION, tokens(*APPLE_IS_RED))

    def test_empty_never_matches(self):
        for kind in ClauseKind:
            assert not matches(kind, [])


class TestComponents:

    def test_action_components(self):
        clause, error = extract_components(ClauseKind.ACTION, tokens(*MAN_READS_BOOK))
        assert error is None
        assert isinstance(clause, ActionClause)
        assert clause.kind == ClauseKind.ACTION
        assert [t.text for t in clause.subject] == ['the', 'man']
        assert clause.verb.text == 'reads'
        assert [t.text for t in clause.obj] == ['a', 'book']

    def test_property_components(self):
        clause, error = extract_components(ClauseKind.PROPERTY, tokens(*APPLE_IS_RED))
        assert isinstance(clause, PropertyClause)
        assert clause.copula.text == 'is'
        assert [t.text for t in clause.predicate] == ['red']

    def test_missing_verb(self):
        clause, error = extract_components(ClauseKind.ACTION, tokens(*APPLE_IS_RED))
        assert clause is None
        assert error == 'No verb found in action pattern'

    def test_missing_copula(self):
        clause, error = extract_components(ClauseKind.IDENTITY, tokens(*MAN_READS_BOOK))
        assert clause is None
        assert error == 'No copula found in identity pattern'

    def test_build_clause_tree_rejects_unknown_clause(self):
        with pytest.raises((ValueError, AttributeError)):
            build_clause_tree(object())


class TestMatchPattern:

    def test_property(self):
        result = match_pattern(tokens(*APPLE_IS_RED))
        assert result.success
        assert result.kind == ClauseKind.PROPERTY
        tree = result.tree
        bar = tree[tree[tree.root].bar]
        assert tree[bar.complement].category == PhraseCategory.AP

    def test_identity(self):
        result = match_pattern(tokens(*SOCRATES_IS_A_MAN))
        assert result.kind == ClauseKind.IDENTITY
        assert isinstance(result.clause, IdentityClause)

    def test_location_when_identity_build_fails(self):
        assert matches(ClauseKind.IDENTITY, tokens(*CAT_ON_TABLE))
        result = match_pattern(tokens(*CAT_ON_TABLE))
        assert result.kind == ClauseKind.LOCATION
        tree = result.tree
        bar = tree[tree[tree.root].bar]
        assert tree[bar.complement].category == PhraseCategory.PP

    def test_action(self):
        result = match_pattern(tokens(*MAN_READS_BOOK))
        assert result.kind == ClauseKind.ACTION
        assert result.errors == []

    def test_property_wins_over_later_kinds(self):
        seq = tokens(('the', D), ('dog', N), ('is', COP), ('happy', A), ('in', P), ('the', D), ('park', N))
        assert matches(ClauseKind.PROPERTY, seq)
        result = match_pattern(seq)
        assert result.kind == ClauseKind.PROPERTY

    def test_empty_input(self):
        result = match_pattern([])
        assert result.pattern is None
        assert result.tree is None
        assert result.errors == ['No tokens provided for pattern matching']

    def test_no_pattern(self):
        result = match_pattern(tokens(('very', ADV), ('quickly', ADV)))
        assert result.pattern is None
        assert result.errors == ['No matching pattern found']

    def test_failed_builds_are_reported(self):
        # Subject has no noun: shape matches but the subject NP cannot be built
        result = match_pattern(tokens(('the', D), ('is', COP), ('red', A)))
        assert result.pattern is None
        assert 'Property: Failed to build tree' in result.errors

    def test_rejections_are_logged_with_tokens(self, caplog):
        with caplog.at_level(logging.DEBUG, logger='xbar_nlp.patterns'):
            match_pattern(tokens(('the', D), ('is', COP), ('red', A)))
        assert ("Property rejected [tokens=['the', 'is', 'red'], error=tree build failed]"
                in caplog.messages)
