"""
Tests for semantic validation.
"""
import pytest

from xbar_nlp.extractor import extract_meaning
from xbar_nlp.features import Features
from xbar_nlp.grammar import Number, Person, PredicateType, SemanticRole
from xbar_nlp.meaning import Entity, MeaningRepresentation, Predicate
from xbar_nlp.parser import Parser
from xbar_nlp.validator import (
    SemanticValidator,
    Severity,
    ValidationCode,
    ValidationResult,
    validate,
)


def action(verb, agent=None, patient=None, **predicate_kwargs):
    meaning = MeaningRepresentation(predicate=Predicate(verb, type=PredicateType.DOES, **predicate_kwargs))
    if agent is not None:
        meaning.set_argument(SemanticRole.AGENT, agent)
    if patient is not None:
        meaning.set_argument(SemanticRole.PATIENT, patient)
    return meaning


@pytest.fixture(scope='module')
def parser():
    return Parser(options={'strict_mode': False})


class TestRequiredComponents:

    def test_null_meaning(self):
        result = validate(None)
        assert not result.is_valid
        assert result.codes() == [ValidationCode.NULL_MEANING]
        assert result.details is None

    def test_missing_predicate(self):
        meaning = MeaningRepresentation()
        meaning.set_argument(SemanticRole.THEME, Entity('apple', categories=['food']))
        result = validate(meaning)
        assert not result.is_valid
        assert [m.code for m in result.errors] == [ValidationCode.MISSING_PREDICATE]
        assert result.details['has_predicate'] is False
        assert result.details['predicate_type'] is None

    def test_missing_subject_is_a_warning(self):
        result = validate(action('runs'))
        assert result.is_valid
        assert ValidationCode.MISSING_SUBJECT in result.codes()
        assert ValidationCode.NO_ARGUMENTS in result.codes()
        assert ValidationCode.MISSING_AGENT in result.codes()

    def test_missing_subject_in_strict_mode(self):
        result = validate(action('runs'), strict_mode=True)
        assert not result.is_valid
        assert [m.code for m in result.errors] == [ValidationCode.MISSING_SUBJECT]

    def test_unknown_option(self):
        with pytest.raises(ValueError):
            SemanticValidator({'pedantic': True})


class TestArgumentStructure:

    def test_transitive_without_patient(self):
        meaning = action('reads', Entity('man', categories=['person']),
                         features=Features(transitive=True))
        result = validate(meaning)
        assert result.is_valid
        assert result.codes() == [ValidationCode.MISSING_PATIENT]

    def test_identity_without_value(self):
        meaning = MeaningRepresentation(predicate=Predicate('man', type=PredicateType.IS_A))
        meaning.set_argument(SemanticRole.THEME, Entity('Socrates', categories=['person']))
        assert validate(meaning).codes() == [ValidationCode.MISSING_VALUE]

    def test_property_without_theme(self):
        meaning = MeaningRepresentation(predicate=Predicate('red', type=PredicateType.HAS_PROPERTY))
        codes = validate(meaning).codes()
        assert ValidationCode.MISSING_THEME in codes


class TestSelectionalRestrictions:

    def test_inanimate_thinker(self):
        meaning = action('think', Entity('rock', categories=['object']))
        result = validate(meaning)
        assert result.is_valid
        assert result.errors == []
        assert result.count(ValidationCode.SELECTIONAL_VIOLATION) == 1
        warning = result.warnings[0]
        assert warning.severity == Severity.WARNING
        assert warning.location == 'subject "rock"'

    def test_uncategorised_arguments_are_not_checked(self):
        meaning = action('think', Entity('Socrates'))
        assert validate(meaning).count(ValidationCode.SELECTIONAL_VIOLATION) == 0

    def test_animate_object(self):
        meaning = action('love', Entity('man', categories=['person']),
                         Entity('table', categories=['object']))
        assert validate(meaning).count(ValidationCode.SELECTIONAL_VIOLATION) == 1

    def test_inanimate_object(self):
        meaning = action('break', Entity('man', categories=['person']),
                         Entity('dog', categories=['animal']))
        result = validate(meaning)
        assert result.count(ValidationCode.SELECTIONAL_VIOLATION) == 1
        assert 'requires an inanimate object' in result.warnings[0].message

    def test_checks_can_be_disabled(self):
        meaning = action('think', Entity('rock', categories=['object']))
        assert validate(meaning, check_selectional_restrictions=False).warnings == []

    def test_single_pair(self):
        validator = SemanticValidator()
        result = validator.validate_predicate_argument(
            Predicate('tell'), Entity('idea', categories=['abstract']), SemanticRole.PATIENT)
        assert result.is_valid
        assert result.count(ValidationCode.SELECTIONAL_VIOLATION) == 1


class TestAgreement:

    def test_number_mismatch(self):
        meaning = action('runs', Entity('dogs', categories=['animal'],
                                        features=Features(number=Number.PLURAL)),
                         features=Features(number=Number.SINGULAR, person=Person.THIRD))
        result = validate(meaning)
        assert not result.is_valid
        assert len(result.errors) == 1
        error = result.errors[0]
        assert error.code == ValidationCode.AGREEMENT_ERROR
        assert error.location == 'subject-predicate agreement'
        assert error.message == 'Subject "dogs" is plural but predicate is singular'

    def test_number_and_person_reported_separately(self):
        subject = Entity('I', categories=['person'],
                         features=Features(number=Number.PLURAL, person=Person.FIRST))
        predicate = Predicate('runs', features=Features(number=Number.SINGULAR, person=Person.THIRD))
        messages = SemanticValidator.check_agreement(subject, predicate)
        assert len(messages) == 2
        assert messages[1] == 'Subject "I" is first person but predicate is third person'

    def test_missing_features_agree(self):
        subject = Entity('dog', features=Features(number=Number.SINGULAR))
        assert SemanticValidator.check_agreement(subject, Predicate('runs')) == []

    def test_parsed_sentence_agreement(self, parser):
        result = validate(extract_meaning(parser.parse('The dogs walks').tree))
        assert not result.is_valid
        assert [m.code for m in result.errors] == [ValidationCode.AGREEMENT_ERROR]
        assert result.errors[0].message == 'Subject "dogs" is plural but predicate is singular'

    @pytest.mark.parametrize('sentence', ['The dogs walk', 'The dog walks', 'She reads a book'])
    def test_parsed_sentences_that_agree(self, parser, sentence):
        result = validate(extract_meaning(parser.parse(sentence).tree))
        assert result.count(ValidationCode.AGREEMENT_ERROR) == 0

    def test_agreement_can_be_disabled(self):
        meaning = action('runs', Entity('dogs', categories=['animal'],
                                        features=Features(number=Number.PLURAL)),
                         features=Features(number=Number.SINGULAR))
        assert validate(meaning, check_agreement=False).is_valid


class TestConsistency:

    def test_duplicate_entities(self):
        meaning = action('sees', Entity('dog', categories=['animal']),
                         Entity('Dog', categories=['animal']))
        assert validate(meaning).count(ValidationCode.DUPLICATE_ENTITY) == 1

    def test_double_negation(self, parser):
        meaning = extract_meaning(parser.parse('The man is not unhappy').tree)
        assert meaning.predicate.negated
        result = validate(meaning)
        assert result.is_valid
        assert result.count(ValidationCode.DOUBLE_NEGATION) == 1

    def test_uncategorised_entity(self):
        meaning = action('runs', Entity('Socrates'))
        assert validate(meaning).count(ValidationCode.UNKNOWN_CATEGORY) == 1


class TestPipelineMeanings:

    @pytest.mark.parametrize('sentence, entity_count', [
        ('The man reads a book', 2),
        ('The apple is red', 1),
        ('The cat is on the table', 2),
    ])
    def test_clean_sentences(self, parser, sentence, entity_count):
        result = validate(extract_meaning(parser.parse(sentence).tree))
        assert result.is_valid
        assert result.warnings == []
        assert result.details['entity_count'] == entity_count

    def test_validation_does_not_change_meaning(self, parser):
        meaning = extract_meaning(parser.parse('The man reads a book').tree)
        before = meaning.to_dict()
        SemanticValidator().validate(meaning)
        assert meaning.to_dict() == before

    def test_adding_a_problem_never_validates(self):
        meaning = action('think', Entity('rock', categories=['object']))
        assert validate(meaning).is_valid
        meaning.predicate = None
        assert not validate(meaning).is_valid


class TestOutput:

    def test_to_dict_and_summary(self):
        result = ValidationResult(is_valid=True, details={
            'entity_count': 1, 'has_predicate': True, 'predicate_type': 'DOES'})
        result.warnings.append(validate(action('runs')).warnings[0])
        data = result.to_dict()
        assert data['warnings'][0]['type'] == 'warning'
        assert data['warnings'][0]['code'] == 'MISSING_SUBJECT'

        summary = SemanticValidator.create_summary(result)
        assert summary.splitlines() == [
            'Valid: Yes',
            '',
            'Warnings (1):',
            '  - [MISSING_SUBJECT] Meaning representation has no subject',
            '',
            'Details:',
            '  - Entity count: 1',
            '  - Has predicate: true',
            '  - Predicate type: DOES',
        ]
