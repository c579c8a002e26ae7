"""
Tests for the closed grammatical feature record.
"""
import unittest

from xbar_nlp.features import Features
from xbar_nlp.grammar import Aspect, Number, Person, Tense


class TestFeatures(unittest.TestCase):

    def test_defaults_are_empty(self):
        features = Features()
        self.assertTrue(features.is_empty())
        self.assertEqual(features.to_dict(), {})
        self.assertIsNone(features.number)
        self.assertEqual(features.modifiers, ())

    def test_from_dict_coerces_enum_values(self):
        features = Features.from_dict({'number': 'PLURAL', 'tense': 'PAST', 'transitive': 1})
        self.assertEqual(features.number, Number.PLURAL)
        self.assertEqual(features.tense, Tense.PAST)
        self.assertIs(features.transitive, True)

    def test_from_dict_rejects_unknown_names(self):
        with self.assertRaises(ValueError):
            Features.from_dict({'colour': 'red'})

    def test_get_unknown_name_raises_key_error(self):
        with self.assertRaises(KeyError):
            Features().get('mood')

    def test_with_values_returns_new_record(self):
        original = Features(number=Number.SINGULAR)
        updated = original.with_values(person='THIRD', modifiers=['big'])
        self.assertIsNone(original.person)
        self.assertEqual(updated.person, Person.THIRD)
        self.assertEqual(updated.number, Number.SINGULAR)
        self.assertEqual(updated.modifiers, ('big',))

    def test_with_values_rejects_unknown_name(self):
        with self.assertRaises(TypeError):
            Features().with_values(mood='happy')

    def test_merged_overrides_only_set_fields(self):
        base = Features(number=Number.SINGULAR, transitive=True)
        merged = base.merged(Features(number=Number.PLURAL, aspect=Aspect.PROGRESSIVE))
        self.assertEqual(merged.number, Number.PLURAL)
        self.assertEqual(merged.aspect, Aspect.PROGRESSIVE)
        self.assertIs(merged.transitive, True)
        self.assertIs(base.merged(None), base)

    def test_to_dict_round_trip(self):
        features = Features(number=Number.PLURAL, person=Person.FIRST, degree='very',
                            modifiers=('big', 'red'))
        data = features.to_dict()
        self.assertEqual(data, {'number': 'PLURAL', 'person': 'FIRST', 'degree': 'very',
                                'modifiers': ['big', 'red']})
        self.assertEqual(Features.from_dict(data), features)

    def test_records_are_frozen(self):
        with self.assertRaises(AttributeError):
            Features().number = Number.PLURAL


if __name__ == '__main__':
    unittest.main()
