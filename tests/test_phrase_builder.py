"""
Tests for the phrase builder.

Tokens are tagged by hand so each test states exactly the POS sequence it
builds from.
"""
import pytest

from xbar_nlp.grammar import POS, PhraseCategory, SemanticRole
from xbar_nlp.phrase_builder import (
    build_advp,
    build_ap,
    build_dp,
    build_np,
    build_phrase,
    build_pp,
    build_tp,
    build_tp_from_tokens,
    build_vp,
    find_complement,
    find_head,
    find_np,
    find_specifier,
)
from xbar_nlp.token import Token


def tokens(*pairs):
    return [Token(text=text, position=i, pos=pos, lemma=text.lower())
            for i, (text, pos) in enumerate(pairs)]


D, N, V, A, P, ADV, COP = (POS.DETERMINER, POS.NOUN, POS.VERB, POS.ADJECTIVE,
                           POS.PREPOSITION, POS.ADVERB, POS.COPULA)


class TestFinders:

    def test_find_head_is_rightmost(self):
        seq = tokens(('the', D), ('dog', N), ('house', N))
        index, token = find_head(seq, PhraseCategory.NP)
        assert index == 2
        assert token.text == 'house'

    def test_find_head_none(self):
        assert find_head(tokens(('the', D)), PhraseCategory.NP) is None
        assert find_head([], PhraseCategory.NP) is None

    def test_find_specifier_stops_at_first_non_specifier(self):
        seq = tokens(('all', D), ('the', D), ('big', A), ('dog', N))
        assert find_specifier(seq, 3, PhraseCategory.NP) == [0, 1]

    def test_find_specifier_must_start_at_first_token(self):
        seq = tokens(('big', A), ('the', D), ('dog', N))
        assert find_specifier(seq, 2, PhraseCategory.NP) == []

    def test_find_np_greedy(self):
        seq = tokens(('the', D), ('big', A), ('dog', N), ('runs', V))
        result, count = find_np(seq)
        assert count == 3
        assert result.success

    def test_find_np_without_noun(self):
        assert find_np(tokens(('the', D), ('big', A))) is None

    def test_find_complement_of_noun_prefers_np_then_pp(self):
        seq = tokens(('book', N), ('on', P), ('the', D), ('table', N))
        result, count = find_complement(seq, 0, PhraseCategory.NP)
        assert result.node.category == PhraseCategory.PP
        assert count == 3

    def test_find_complement_nothing_after_head(self):
        assert find_complement(tokens(('dog', N)), 0, PhraseCategory.NP) is None


class TestBuildNP:

    def test_determiner_adjective_noun(self):
        result = build_np(tokens(('the', D), ('big', A), ('dog', N)))
        assert result.success
        assert result.errors == []
        tree = result.tree
        root = result.node
        assert root.category == PhraseCategory.NP
        assert tree.head_token().text == 'dog'
        assert tree.head_token(root.specifier).text == 'the'
        assert len(root.adjuncts) == 1
        adjunct = tree[root.adjuncts[0]]
        assert adjunct.category == PhraseCategory.AP
        assert adjunct.role == SemanticRole.PROPERTY
        assert [t.text for t in result.consumed] == ['the', 'big', 'dog']

    def test_empty_input(self):
        result = build_np([])
        assert not result.success
        assert result.errors == ['No tokens provided for NP']

    def test_missing_head(self):
        result = build_np(tokens(('the', D), ('big', A)))
        assert not result.success
        assert result.errors == ['No noun found for NP head']

    def test_preposition_before_head_fails(self):
        result = build_np(tokens(('on', P), ('the', D), ('table', N)))
        assert not result.success
        assert 'Preposition "on" precedes NP head "table"' in result.errors[0]

    def test_nested_specifier_run(self):
        result = build_np(tokens(('all', D), ('the', D), ('dogs', N)))
        tree = result.tree
        spec = tree[result.node.specifier]
        assert tree.head_token(spec.index).text == 'the'
        assert tree.head_token(spec.specifier).text == 'all'

    def test_pronoun_heads_np(self):
        result = build_np(tokens(('she', POS.PRONOUN)))
        assert result.success
        assert result.tree.head_token().text == 'she'


class TestOtherPhrases:

    def test_vp_with_object_and_adjuncts(self):
        seq = tokens(('reads', V), ('a', D), ('book', N), ('quickly', ADV),
                     ('in', P), ('the', D), ('house', N))
        result = build_vp(seq)
        tree = result.tree
        root = result.node
        bar = tree[root.bar]
        assert tree.head_token().text == 'reads'
        assert tree[bar.complement].role == SemanticRole.PATIENT
        assert [tree[a].category for a in root.adjuncts] == [PhraseCategory.ADVP, PhraseCategory.PP]
        assert len(result.consumed) == len(seq)

    def test_vp_missing_verb(self):
        assert build_vp(tokens(('dog', N))).errors == ['No verb found for VP head']

    def test_ap_with_degree_adverb(self):
        result = build_ap(tokens(('very', ADV), ('happy', A)))
        assert result.node.role == SemanticRole.PROPERTY
        assert result.tree.head_token(result.node.specifier).text == 'very'

    def test_pp_with_object(self):
        result = build_pp(tokens(('on', P), ('the', D), ('table', N)))
        tree = result.tree
        bar = tree[result.node.bar]
        assert result.node.role == SemanticRole.LOCATION
        assert tree.head_token(bar.complement).text == 'table'
        assert tree[bar.complement].role == SemanticRole.LOCATION

    def test_advp_and_dp(self):
        assert build_advp(tokens(('very', ADV), ('quickly', ADV))).tree.head_token().text == 'quickly'
        assert build_dp(tokens(('the', D))).tree.head_token().text == 'the'
        assert build_advp(tokens(('dog', N))).errors == ['No adverb found for AdvP head']

    def test_build_phrase_dispatches(self):
        assert build_phrase(tokens(('red', A)), PhraseCategory.AP).node.category == PhraseCategory.AP
        assert build_phrase(tokens(('red', A)), 'AP').success

    def test_build_phrase_unknown_category(self):
        with pytest.raises(ValueError):
            build_phrase(tokens(('red', A)), 'XP')


class TestBuildTP:

    def test_action_subject_is_agent(self):
        subject = build_np(tokens(('the', D), ('dog', N))).tree
        predicate = build_vp(tokens(('runs', V))).tree
        tree = build_tp(subject, predicate)
        root = tree[tree.root]
        assert root.category == PhraseCategory.TP
        assert tree[root.specifier].role == SemanticRole.AGENT
        assert tree[root.bar].head is None
        assert tree.is_complete()

    def test_copular_subject_is_theme(self):
        subject = build_np(tokens(('the', D), ('apple', N))).tree
        predicate = build_ap(tokens(('red', A))).tree
        copula = Token(text='is', position=2, pos=COP)
        tree = build_tp(subject, predicate, copula)
        root = tree[tree.root]
        assert tree[root.specifier].role == SemanticRole.THEME
        assert tree[tree[root.bar].head].token.text == 'is'

    def test_build_from_tokens(self):
        seq = tokens(('the', D), ('apple', N), ('is', COP), ('red', A))
        result = build_tp_from_tokens(seq)
        assert result.success
        assert [t.text for t in result.consumed] == ['the', 'apple', 'is', 'red']

    def test_build_from_tokens_without_predicate(self):
        result = build_tp_from_tokens(tokens(('the', D), ('apple', N)))
        assert not result.success
        assert result.errors == ['No predicate found']

    def test_binary_branching(self):
        seq = tokens(('the', D), ('big', A), ('dog', N), ('chases', V), ('the', D),
                     ('small', A), ('cat', N), ('quickly', ADV))
        result = build_tp_from_tokens(seq)
        tree = result.tree
        for index in tree.walk():
            assert len(tree[index].structural_children()) <= 2
