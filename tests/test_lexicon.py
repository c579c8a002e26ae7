"""
Tests for the affix table and the dictionary.
"""
import pytest

from xbar_nlp.features import Features
from xbar_nlp.grammar import POS, AffixType, Aspect, Number, Person, Tense
from xbar_nlp.lexicon import DEFAULT_AFFIXES, Affix, AffixTable, Dictionary, LexicalEntry
from xbar_nlp.lexicon.affixes import stem_matches


class TestAffixTable:

    def test_longest_suffix_wins(self):
        result = DEFAULT_AFFIXES.strip_suffixes('boxes')
        assert result.base == 'box'
        assert result.affix_texts == ('es',)
        assert result.features.number == Number.PLURAL

    def test_expected_pos_selects_reading(self):
        agent = DEFAULT_AFFIXES.strip_suffixes('faster')
        assert agent.features.derivation == 'AGENT'
        comparative = DEFAULT_AFFIXES.strip_suffixes('faster', POS.ADJECTIVE)
        assert comparative.base == 'fast'
        assert comparative.features.degree == 'COMPARATIVE'

    def test_third_person_verb_suffix(self):
        result = DEFAULT_AFFIXES.strip_suffixes('walks', POS.VERB)
        assert result.base == 'walk'
        assert result.features.person == Person.THIRD
        assert result.features.number == Number.SINGULAR

    def test_minimum_base_length(self):
        assert not DEFAULT_AFFIXES.strip_suffixes('is').changed
        assert DEFAULT_AFFIXES.strip_suffixes('is').base == 'is'

    def test_prefix_stripping(self):
        result = DEFAULT_AFFIXES.strip_prefixes('Unhappy')
        assert result.base == 'happy'
        assert result.affix_texts == ('un',)

    def test_strip_affixes_suffix_then_prefix(self):
        result = DEFAULT_AFFIXES.strip_affixes('unhappiness')
        assert result.base == 'happi'
        assert result.affix_texts == ('ness', 'un')

    def test_possible_bases_starts_with_word_itself(self):
        bases = [r.base for r in DEFAULT_AFFIXES.possible_bases('unhappy')]
        assert bases[0] == 'unhappy'
        assert 'happy' in bases

    def test_lookup_by_text(self):
        assert DEFAULT_AFFIXES.is_known_suffix('ness')
        assert DEFAULT_AFFIXES.is_known_prefix('re')
        assert not DEFAULT_AFFIXES.is_known_prefix('ness')
        assert len(DEFAULT_AFFIXES.lookup('er')) == 2

    def test_inflection_of_undoes_spelling_changes(self):
        moved = DEFAULT_AFFIXES.inflection_of('moved', 'move', POS.VERB)
        assert moved.base == 'move'
        assert moved.features.tense == Tense.PAST
        assert DEFAULT_AFFIXES.inflection_of('sitting', 'sit', POS.VERB).features.aspect == Aspect.PROGRESSIVE
        assert DEFAULT_AFFIXES.inflection_of('cities', 'city', POS.NOUN).features.number == Number.PLURAL
        assert DEFAULT_AFFIXES.inflection_of('watches', 'watch', POS.VERB).features.person == Person.THIRD

    def test_inflection_of_irregular_form(self):
        assert DEFAULT_AFFIXES.inflection_of('ran', 'run', POS.VERB) is None
        assert DEFAULT_AFFIXES.inflection_of('better', 'good', POS.ADJECTIVE) is None

    def test_stem_matches(self):
        assert stem_matches('walk', 'walk')
        assert stem_matches('lov', 'love')
        assert stem_matches('bigg', 'big')
        assert stem_matches('happi', 'happy')
        assert not stem_matches('hous', 'horse')

    def test_extended_returns_new_table(self):
        extra = Affix('ish', AffixType.SUFFIX, (POS.ADJECTIVE,), 'SOMEWHAT')
        table = DEFAULT_AFFIXES.extended(suffixes=[extra])
        assert len(table) == len(DEFAULT_AFFIXES) + 1
        assert table.is_known_suffix('ish')
        assert not DEFAULT_AFFIXES.is_known_suffix('ish')
        assert table.strip_suffixes('reddish').base == 'redd'

    def test_empty_table_strips_nothing(self):
        assert not AffixTable().strip_affixes('walked').changed


class TestDictionary:

    def setup_method(self):
        self.dictionary = Dictionary.default()

    def test_direct_lookup_is_case_insensitive(self):
        result = self.dictionary.lookup('Dog')
        assert result.pos == POS.NOUN
        assert result.lemma == 'dog'
        assert 'animal' in result.categories
        assert not result.from_affix_stripping

    def test_inflected_form_lookup(self):
        result = self.dictionary.lookup('men')
        assert result.lemma == 'man'
        assert result.matched_form == 'men'

    def test_listed_forms_carry_suffix_features(self):
        walked = self.dictionary.lookup('walked')
        assert walked.lemma == 'walk'
        assert walked.features.tense == Tense.PAST
        assert walked.features.transitive is False
        assert not walked.from_affix_stripping
        assert self.dictionary.lookup('dogs').features.number == Number.PLURAL
        assert self.dictionary.lookup('sees').features.person == Person.THIRD
        assert self.dictionary.lookup('houses').features.number == Number.PLURAL
        assert self.dictionary.lookup('bigger').features.degree == 'COMPARATIVE'

    def test_irregular_forms_use_declared_features(self):
        assert self.dictionary.lookup('ran').features.tense == Tense.PAST
        assert self.dictionary.lookup('men').features.number == Number.PLURAL
        assert self.dictionary.lookup('children').features.number == Number.PLURAL
        assert self.dictionary.lookup('seen').features.aspect == Aspect.PERFECT
        assert self.dictionary.lookup('best').features.degree == 'SUPERLATIVE'
        assert self.dictionary.lookup('has').lemma == 'have'

    def test_affix_fallback(self):
        result = self.dictionary.lookup('unhappy')
        assert result.lemma == 'happy'
        assert result.pos == POS.ADJECTIVE
        assert result.from_affix_stripping

    def test_missing_word(self):
        assert self.dictionary.lookup('xyzzy') is None

    def test_expected_pos_uses_alternates(self):
        assert self.dictionary.lookup('love', POS.NOUN).lemma == 'love'
        assert self.dictionary.lookup('love', POS.ADJECTIVE) is None

    def test_membership_and_indexes(self):
        assert 'dogs' in self.dictionary
        assert 'xyzzy' not in self.dictionary
        copulas = [entry.lemma for entry in self.dictionary.by_pos(POS.COPULA)]
        assert 'is' in copulas
        assert 'be' in copulas
        assert self.dictionary.get('CAT').pos == POS.NOUN
        assert any(entry.lemma == 'table' for entry in self.dictionary.by_category('furniture'))

    def test_serialization_round_trip(self):
        restored = Dictionary.from_dict(self.dictionary.to_dict())
        assert len(restored) == len(self.dictionary)
        assert restored.get('read') == self.dictionary.get('read')


class TestCustomDictionary:

    def test_plural_suffix_sets_number(self):
        dictionary = Dictionary(entries=[
            {'lemma': 'widget', 'pos': 'NOUN', 'features': {'number': 'SINGULAR'}},
        ])
        result = dictionary.lookup('widgets')
        assert result.lemma == 'widget'
        assert result.from_affix_stripping
        assert result.features.number == Number.PLURAL

    def test_verb_suffix_reading_follows_entry(self):
        dictionary = Dictionary(entries=[{'lemma': 'jog', 'pos': 'VERB'}])
        result = dictionary.lookup('jogs')
        assert result.pos == POS.VERB
        assert result.features.person == Person.THIRD
        assert result.features.number == Number.SINGULAR

    def test_lookup_all_lists_every_reading(self):
        dictionary = Dictionary(entries=[
            {'lemma': 'saw', 'pos': 'NOUN', 'categories': ['tool']},
            {'lemma': 'see', 'pos': 'VERB', 'forms': ['saw', 'seen']},
        ])
        results = dictionary.lookup_all('saw')
        assert [(r.lemma, r.pos) for r in results] == [('saw', POS.NOUN), ('see', POS.VERB)]
        assert dictionary.lookup_all('xyzzy') == []

    def test_form_without_regular_suffix(self):
        dictionary = Dictionary(entries=[
            {'lemma': 'mouse', 'pos': 'NOUN', 'features': {'number': 'SINGULAR'}, 'forms': ['mice']},
            {'lemma': 'goose', 'pos': 'NOUN', 'features': {'number': 'SINGULAR'}, 'forms': ['geese'],
             'form_features': {'geese': {'number': 'PLURAL'}}},
        ])
        assert dictionary.lookup('mice').features.number == Number.SINGULAR
        assert dictionary.lookup('geese').features.number == Number.PLURAL
        assert dictionary.lookup_all('geese')[0].features.number == Number.PLURAL

    def test_replacing_an_entry_reindexes(self):
        dictionary = Dictionary()
        dictionary.add_entry({'lemma': 'gadget', 'pos': 'NOUN', 'categories': ['object'],
                              'forms': ['gadgets']})
        dictionary.add_entry(LexicalEntry('gadget', POS.NOUN, categories=('tool',)))
        assert len(dictionary) == 1
        assert dictionary.by_category('object') == []
        assert [e.lemma for e in dictionary.by_category('tool')] == ['gadget']
        assert not dictionary.has('gadgets')

    def test_custom_affix_table_is_used(self):
        table = AffixTable().extended(suffixes=[
            Affix('ish', AffixType.SUFFIX, (POS.ADJECTIVE,), 'SOMEWHAT'),
        ])
        dictionary = Dictionary(affixes=table, entries=[{'lemma': 'green', 'pos': 'ADJECTIVE'}])
        assert dictionary.lookup('greenish').lemma == 'green'
        assert dictionary.lookup('greens') is None

    def test_clear(self):
        dictionary = Dictionary(entries=[{'lemma': 'jog', 'pos': 'VERB'}])
        dictionary.clear()
        assert len(dictionary) == 0
        assert dictionary.by_pos(POS.VERB) == []


class TestLexicalEntry:

    def test_from_dict_requires_lemma_and_pos(self):
        with pytest.raises(ValueError):
            LexicalEntry.from_dict({'lemma': 'jog'})

    def test_round_trip(self):
        entry = LexicalEntry('love', POS.VERB, ('emotion',), Features(transitive=True),
                             ('loves',), (POS.NOUN,))
        data = entry.to_dict()
        assert data['alternate_pos'] == ['NOUN']
        assert LexicalEntry.from_dict(data) == entry
        assert entry.has_pos(POS.NOUN)

    def test_form_features_round_trip(self):
        entry = LexicalEntry.from_dict({'lemma': 'go', 'pos': 'VERB', 'forms': ['went', 'goes'],
                                        'form_features': {'Went': {'tense': 'PAST'}}})
        assert entry.features_for_form('went') == Features(tense=Tense.PAST)
        assert entry.features_for_form('goes') is None
        assert LexicalEntry.from_dict(entry.to_dict()) == entry
