"""
Semantic validation of meaning representations.

Checks are independent and all run on every call:

1. required components (predicate, subject, any arguments)
2. predicate-argument shape per predicate type
3. selectional restrictions (optional)
4. subject-predicate agreement (optional)
5. general consistency (duplicates, double negation, uncategorised entities)

Errors are structural impossibilities and make the meaning invalid. Warnings
are plausibility problems and never affect `is_valid`.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .grammar import PredicateType, SemanticRole
from .meaning import Entity, MeaningRepresentation, Predicate

logger = logging.getLogger(__name__)


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


class ValidationCode(Enum):
    NULL_MEANING = "NULL_MEANING"
    MISSING_PREDICATE = "MISSING_PREDICATE"
    MISSING_SUBJECT = "MISSING_SUBJECT"
    NO_ARGUMENTS = "NO_ARGUMENTS"
    MISSING_AGENT = "MISSING_AGENT"
    MISSING_PATIENT = "MISSING_PATIENT"
    MISSING_THEME = "MISSING_THEME"
    MISSING_VALUE = "MISSING_VALUE"
    SELECTIONAL_VIOLATION = "SELECTIONAL_VIOLATION"
    AGREEMENT_ERROR = "AGREEMENT_ERROR"
    DUPLICATE_ENTITY = "DUPLICATE_ENTITY"
    DOUBLE_NEGATION = "DOUBLE_NEGATION"
    UNKNOWN_CATEGORY = "UNKNOWN_CATEGORY"
    ANALYSIS_ERROR = "ANALYSIS_ERROR"


# Verb lemmas with selectional preferences on their arguments
SELECTIONAL_RESTRICTIONS: Dict[str, frozenset] = {
    'animate_subject': frozenset({'think', 'believe', 'know', 'feel', 'love', 'hate',
                                  'want', 'need', 'say', 'tell', 'ask'}),
    'animate_object': frozenset({'love', 'hate', 'tell', 'ask', 'persuade', 'convince'}),
    'inanimate_object': frozenset({'build', 'construct', 'destroy', 'break', 'fix'}),
}

NEGATIVE_PREFIX = re.compile(r'^(un|dis|non|in|im)', re.IGNORECASE)


@dataclass
class Message:
    severity: Severity
    code: ValidationCode
    message: str
    location: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {'type': self.severity.value, 'code': self.code.value, 'message': self.message}
        if self.location is not None:
            data['location'] = self.location
        return data

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.message}"


@dataclass
class ValidationResult:
    is_valid: bool
    errors: List[Message] = field(default_factory=list)
    warnings: List[Message] = field(default_factory=list)
    details: Optional[Dict[str, Any]] = None

    def codes(self) -> List[ValidationCode]:
        return [m.code for m in self.errors + self.warnings]

    def count(self, code: ValidationCode) -> int:
        return sum(1 for m in self.errors + self.warnings if m.code == code)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'is_valid': self.is_valid,
            'errors': [m.to_dict() for m in self.errors],
            'warnings': [m.to_dict() for m in self.warnings],
            'details': dict(self.details) if self.details is not None else None,
        }


def _error(code: ValidationCode, message: str, location: Optional[str] = None) -> Message:
    return Message(Severity.ERROR, code, message, location)


def _warning(code: ValidationCode, message: str, location: Optional[str] = None) -> Message:
    return Message(Severity.WARNING, code, message, location)


class SemanticValidator:
    """
    Validates MeaningRepresentations.

    Options (see DEFAULT_OPTIONS):
        strict_mode: a missing subject is an error instead of a warning.
        check_selectional_restrictions: run the animacy checks.
        check_agreement: run subject-predicate number/person agreement.
    """

    DEFAULT_OPTIONS = {
        'strict_mode': False,
        'check_selectional_restrictions': True,
        'check_agreement': True,
    }

    def __init__(self, options: Optional[Dict[str, Any]] = None):
        self.options = self.DEFAULT_OPTIONS.copy()
        if options:
            unknown = set(options) - set(self.DEFAULT_OPTIONS)
            if unknown:
                raise ValueError(f"Unknown validator option(s): {', '.join(sorted(unknown))}")
            self.options.update(options)

    def validate(self, meaning: Optional[MeaningRepresentation]) -> ValidationResult:
        if meaning is None:
            return ValidationResult(
                is_valid=False,
                errors=[_error(ValidationCode.NULL_MEANING, 'No meaning representation provided')],
            )

        errors: List[Message] = []
        warnings: List[Message] = []

        self.check_required_components(meaning, errors, warnings)
        self.check_predicate_argument_structure(meaning, errors, warnings)
        if self.options['check_selectional_restrictions']:
            self.check_all_selectional_restrictions(meaning, errors, warnings)
        if self.options['check_agreement']:
            self.check_all_agreement(meaning, errors, warnings)
        self.check_semantic_consistency(meaning, errors, warnings)

        details = {
            'entity_count': len(meaning.all_entities()),
            'has_predicate': meaning.predicate is not None,
            'predicate_type': meaning.predicate.type.value if meaning.predicate else None,
        }
        logger.debug("Validation: %d error(s), %d warning(s)", len(errors), len(warnings))
        return ValidationResult(is_valid=not errors, errors=errors, warnings=warnings, details=details)

    def check_required_components(self, meaning: MeaningRepresentation,
                                  errors: List[Message], warnings: List[Message]) -> None:
        if meaning.predicate is None:
            errors.append(_error(ValidationCode.MISSING_PREDICATE,
                                 'Meaning representation has no predicate'))

        if meaning.get_subject() is None:
            message = 'Meaning representation has no subject'
            if self.options['strict_mode']:
                errors.append(_error(ValidationCode.MISSING_SUBJECT, message))
            else:
                warnings.append(_warning(ValidationCode.MISSING_SUBJECT, message))

        if not meaning.arguments:
            warnings.append(_warning(ValidationCode.NO_ARGUMENTS,
                                     'Meaning representation has no arguments'))

    def check_predicate_argument_structure(self, meaning: MeaningRepresentation,
                                           errors: List[Message], warnings: List[Message]) -> None:
        predicate = meaning.predicate
        if predicate is None:
            return

        if predicate.type == PredicateType.DOES:
            if not (meaning.has_argument(SemanticRole.AGENT) or meaning.has_argument(SemanticRole.THEME)):
                warnings.append(_warning(ValidationCode.MISSING_AGENT,
                                         f'Action predicate "{predicate.text}" has no agent'))
            if predicate.is_transitive() and not meaning.has_argument(SemanticRole.PATIENT):
                warnings.append(_warning(ValidationCode.MISSING_PATIENT,
                                         f'Transitive verb "{predicate.text}" has no object/patient'))
        elif predicate.type == PredicateType.HAS_PROPERTY:
            if not meaning.has_argument(SemanticRole.THEME):
                warnings.append(_warning(ValidationCode.MISSING_THEME,
                                         f'Property predicate "{predicate.text}" has no theme'))
        elif predicate.type == PredicateType.IS_A:
            if not meaning.has_argument(SemanticRole.THEME):
                warnings.append(_warning(ValidationCode.MISSING_THEME,
                                         'Identity predicate has no theme (subject)'))
            if not meaning.has_argument(SemanticRole.PROPERTY):
                warnings.append(_warning(ValidationCode.MISSING_VALUE,
                                         'Identity predicate has no value (predicate nominal)'))

    def check_all_selectional_restrictions(self, meaning: MeaningRepresentation,
                                           errors: List[Message], warnings: List[Message]) -> None:
        predicate = meaning.predicate
        if predicate is None:
            return

        subject = meaning.get_subject()
        if subject is not None:
            message = self.check_selectional_restrictions(predicate, subject, SemanticRole.AGENT)
            if message:
                warnings.append(_warning(ValidationCode.SELECTIONAL_VIOLATION, message,
                                         f'subject "{subject.text}"'))

        obj = meaning.get_object()
        if obj is not None:
            message = self.check_selectional_restrictions(predicate, obj, SemanticRole.PATIENT)
            if message:
                warnings.append(_warning(ValidationCode.SELECTIONAL_VIOLATION, message,
                                         f'object "{obj.text}"'))

    @staticmethod
    def check_selectional_restrictions(predicate: Predicate, argument: Entity,
                                       role: SemanticRole) -> Optional[str]:
        """
        Return a violation message, or None when the argument fits.

        Entities without categories are never reported.
        """
        lemma = (predicate.lemma or predicate.text).lower()
        categories = argument.categories
        if not categories:
            return None

        if role in (SemanticRole.AGENT, SemanticRole.THEME):
            if lemma in SELECTIONAL_RESTRICTIONS['animate_subject'] and not argument.is_animate():
                return (f'Predicate "{predicate.text}" typically requires an animate subject, '
                        f'but "{argument.text}" is not animate')

        if role == SemanticRole.PATIENT:
            if lemma in SELECTIONAL_RESTRICTIONS['animate_object'] and not argument.is_animate():
                return (f'Predicate "{predicate.text}" typically requires an animate object, '
                        f'but "{argument.text}" is not animate')
            if (lemma in SELECTIONAL_RESTRICTIONS['inanimate_object']
                    and argument.is_animate() and not argument.is_inanimate()):
                return (f'Predicate "{predicate.text}" typically requires an inanimate object, '
                        f'but "{argument.text}" is animate')

        return None

    def check_all_agreement(self, meaning: MeaningRepresentation,
                            errors: List[Message], warnings: List[Message]) -> None:
        subject = meaning.get_subject()
        predicate = meaning.predicate
        if subject is None or predicate is None:
            return
        for message in self.check_agreement(subject, predicate):
            errors.append(_error(ValidationCode.AGREEMENT_ERROR, message, 'subject-predicate agreement'))

    @staticmethod
    def check_agreement(subject: Entity, predicate: Predicate) -> List[str]:
        """Number and person mismatches, one message each."""
        messages = []
        subject_number = subject.features.number
        predicate_number = predicate.features.number
        if subject_number and predicate_number and subject_number != predicate_number:
            messages.append(f'Subject "{subject.text}" is {subject_number.value.lower()} '
                            f'but predicate is {predicate_number.value.lower()}')

        subject_person = subject.features.person
        predicate_person = predicate.features.person
        if subject_person and predicate_person and subject_person != predicate_person:
            messages.append(f'Subject "{subject.text}" is {subject_person.value.lower()} person '
                            f'but predicate is {predicate_person.value.lower()} person')
        return messages

    def check_semantic_consistency(self, meaning: MeaningRepresentation,
                                   errors: List[Message], warnings: List[Message]) -> None:
        entities = meaning.all_entities()

        seen = set()
        for entity in entities:
            key = entity.text.lower()
            if key in seen:
                warnings.append(_warning(ValidationCode.DUPLICATE_ENTITY,
                                         f'Entity "{entity.text}" appears multiple times'))
            seen.add(key)

        predicate = meaning.predicate
        if predicate is not None and predicate.negated and NEGATIVE_PREFIX.match(predicate.text):
            warnings.append(_warning(ValidationCode.DOUBLE_NEGATION,
                                     f'Predicate "{predicate.text}" appears to have double negation'))

        for entity in entities:
            if not entity.categories:
                warnings.append(_warning(ValidationCode.UNKNOWN_CATEGORY,
                                         f'Entity "{entity.text}" has no semantic categories'))

    def validate_predicate_argument(self, predicate: Predicate, argument: Entity,
                                    role: SemanticRole) -> ValidationResult:
        """Selectional check of one predicate/argument pair."""
        warnings = []
        message = self.check_selectional_restrictions(predicate, argument, role)
        if message:
            warnings.append(_warning(ValidationCode.SELECTIONAL_VIOLATION, message))
        return ValidationResult(is_valid=True, warnings=warnings)

    @staticmethod
    def create_summary(result: ValidationResult) -> str:
        parts = [f"Valid: {'Yes' if result.is_valid else 'No'}"]

        if result.errors:
            parts.append(f"\nErrors ({len(result.errors)}):")
            parts.extend(f"  - {m}" for m in result.errors)

        if result.warnings:
            parts.append(f"\nWarnings ({len(result.warnings)}):")
            parts.extend(f"  - {m}" for m in result.warnings)

        if result.details:
            parts.append('\nDetails:')
            parts.append(f"  - Entity count: {result.details['entity_count']}")
            parts.append(f"  - Has predicate: {str(result.details['has_predicate']).lower()}")
            if result.details.get('predicate_type'):
                parts.append(f"  - Predicate type: {result.details['predicate_type']}")

        return "\n".join(parts)


def validate(meaning: Optional[MeaningRepresentation], **options) -> ValidationResult:
    """Validate with a one-off validator; keyword arguments override DEFAULT_OPTIONS."""
    return SemanticValidator(options).validate(meaning)
