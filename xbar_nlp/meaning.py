"""
Meaning representation: a predicate plus role-tagged entity arguments.

Built once per sentence by the extractor, then read by the validator and the
summary/serialization code. Confidence is fixed at 1.0: a sentence either
yields a definite meaning or no meaning at all.
"""
from __future__ import annotations

import json
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from .features import Features
from .grammar import Aspect, Number, PredicateType, SemanticRole, SentenceType, Tense

ANIMATE_CATEGORIES = frozenset({'person', 'animal', 'being'})
INANIMATE_CATEGORIES = frozenset({'object', 'place', 'substance', 'abstract'})


def _new_entity_id() -> str:
    return f"entity_{uuid.uuid4().hex[:12]}"


@dataclass
class Entity:
    """A participant in the sentence, built from a noun phrase."""
    text: str
    lemma: Optional[str] = None
    categories: List[str] = field(default_factory=list)
    features: Features = field(default_factory=Features)
    determiner: Optional[str] = None
    id: str = field(default_factory=_new_entity_id)

    def __post_init__(self):
        if self.lemma is None:
            self.lemma = self.text.lower()
        self.categories = list(self.categories)

    def has_category(self, category: str) -> bool:
        return category in self.categories

    def add_category(self, category: str) -> Entity:
        if category not in self.categories:
            self.categories.append(category)
        return self

    def get_feature(self, name: str) -> Any:
        return self.features.get(name)

    def set_feature(self, name: str, value: Any) -> Entity:
        self.features = self.features.with_values(**{name: value})
        return self

    def is_singular(self) -> bool:
        return self.features.number == Number.SINGULAR

    def is_plural(self) -> bool:
        return self.features.number == Number.PLURAL

    def is_animate(self) -> bool:
        return any(c in ANIMATE_CATEGORIES for c in self.categories)

    def is_inanimate(self) -> bool:
        return any(c in INANIMATE_CATEGORIES for c in self.categories)

    def is_person(self) -> bool:
        return self.has_category('person')

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'text': self.text,
            'lemma': self.lemma,
            'categories': list(self.categories),
            'features': self.features.to_dict(),
            'determiner': self.determiner,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Entity:
        kwargs = dict(
            text=data['text'],
            lemma=data.get('lemma'),
            categories=list(data.get('categories', [])),
            features=Features.from_dict(data.get('features')),
            determiner=data.get('determiner'),
        )
        if data.get('id'):
            kwargs['id'] = data['id']
        return cls(**kwargs)

    def __str__(self) -> str:
        if self.categories:
            return f"{self.text} [{', '.join(self.categories)}]"
        return self.text


@dataclass
class Predicate:
    """The main action, property or relation of a sentence."""
    text: str
    lemma: Optional[str] = None
    type: PredicateType = PredicateType.UNKNOWN
    argument_structure: Dict[SemanticRole, Dict[str, Any]] = field(default_factory=dict)
    features: Features = field(default_factory=Features)
    negated: bool = False

    def __post_init__(self):
        if self.lemma is None:
            self.lemma = self.text.lower()

    @property
    def tense(self) -> Tense:
        return self.features.tense or Tense.UNKNOWN

    @property
    def aspect(self) -> Aspect:
        return self.features.aspect or Aspect.UNKNOWN

    def is_action(self) -> bool:
        return self.type == PredicateType.DOES

    def is_property(self) -> bool:
        return self.type == PredicateType.HAS_PROPERTY

    def is_identity(self) -> bool:
        return self.type == PredicateType.IS_A

    def is_location(self) -> bool:
        return self.type == PredicateType.IS_LOCATED

    def is_transitive(self) -> bool:
        return self.features.transitive is True

    def expected_roles(self) -> List[SemanticRole]:
        return list(self.argument_structure)

    def role_constraints(self, role: SemanticRole) -> Optional[Dict[str, Any]]:
        return self.argument_structure.get(role)

    def get_feature(self, name: str) -> Any:
        return self.features.get(name)

    def set_feature(self, name: str, value: Any) -> Predicate:
        self.features = self.features.with_values(**{name: value})
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {
            'text': self.text,
            'lemma': self.lemma,
            'type': self.type.value,
            'argument_structure': {role.value: dict(c) for role, c in self.argument_structure.items()},
            'features': self.features.to_dict(),
            'negated': self.negated,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Predicate:
        return cls(
            text=data['text'],
            lemma=data.get('lemma'),
            type=PredicateType(data.get('type', PredicateType.UNKNOWN.value)),
            argument_structure={SemanticRole(role): dict(c)
                                for role, c in data.get('argument_structure', {}).items()},
            features=Features.from_dict(data.get('features')),
            negated=data.get('negated', False),
        )

    def __str__(self) -> str:
        text = f"{self.text} [{self.type.value}]"
        return f"{text} (NEGATED)" if self.negated else text


Argument = Union[Entity, List[Entity]]


@dataclass
class MeaningRepresentation:
    """
    Sentence meaning: type, predicate, ordered role -> entity map, features.

    Arguments keep insertion order; `rename_argument` keeps the position of
    the renamed role.
    """
    sentence_type: SentenceType = SentenceType.DECLARATIVE
    predicate: Optional[Predicate] = None
    arguments: Dict[SemanticRole, Argument] = field(default_factory=dict)
    features: Features = field(default_factory=Features)

    @property
    def confidence(self) -> float:
        return 1.0

    def get_argument(self, role: SemanticRole) -> Optional[Argument]:
        return self.arguments.get(role)

    def has_argument(self, role: SemanticRole) -> bool:
        return role in self.arguments

    def set_argument(self, role: SemanticRole, entity: Argument) -> MeaningRepresentation:
        self.arguments[role] = entity
        return self

    def add_argument(self, role: SemanticRole, entity: Entity) -> MeaningRepresentation:
        """Add an entity to a role, turning the slot into a list on the second add."""
        existing = self.arguments.get(role)
        if existing is None:
            self.arguments[role] = entity
        elif isinstance(existing, list):
            existing.append(entity)
        else:
            self.arguments[role] = [existing, entity]
        return self

    def remove_argument(self, role: SemanticRole) -> Optional[Argument]:
        return self.arguments.pop(role, None)

    def rename_argument(self, old: SemanticRole, new: SemanticRole) -> MeaningRepresentation:
        """Move the argument under `old` to `new` in place, replacing any value under `new`."""
        if old not in self.arguments or old == new:
            return self
        self.arguments = {(new if role == old else role): value
                          for role, value in self.arguments.items() if role != new}
        return self

    @staticmethod
    def _first(value: Optional[Argument]) -> Optional[Entity]:
        if isinstance(value, list):
            return value[0] if value else None
        return value

    def get_subject(self) -> Optional[Entity]:
        """AGENT for actions, otherwise THEME."""
        if SemanticRole.AGENT in self.arguments:
            return self._first(self.arguments[SemanticRole.AGENT])
        return self._first(self.arguments.get(SemanticRole.THEME))

    def get_object(self) -> Optional[Entity]:
        return self._first(self.arguments.get(SemanticRole.PATIENT))

    def all_entities(self) -> List[Entity]:
        entities: List[Entity] = []
        for value in self.arguments.values():
            if isinstance(value, list):
                entities.extend(value)
            else:
                entities.append(value)
        return entities

    def get_feature(self, name: str) -> Any:
        return self.features.get(name)

    def set_feature(self, name: str, value: Any) -> MeaningRepresentation:
        self.features = self.features.with_values(**{name: value})
        return self

    def is_question(self) -> bool:
        return self.sentence_type == SentenceType.INTERROGATIVE

    def is_command(self) -> bool:
        return self.sentence_type == SentenceType.IMPERATIVE

    def is_statement(self) -> bool:
        return self.sentence_type == SentenceType.DECLARATIVE

    def to_dict(self) -> Dict[str, Any]:
        arguments = {}
        for role, value in self.arguments.items():
            if isinstance(value, list):
                arguments[role.value] = [e.to_dict() for e in value]
            else:
                arguments[role.value] = value.to_dict()
        return {
            'type': self.sentence_type.value,
            'predicate': self.predicate.to_dict() if self.predicate else None,
            'arguments': arguments,
            'features': self.features.to_dict(),
            'confidence': self.confidence,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> MeaningRepresentation:
        arguments: Dict[SemanticRole, Argument] = {}
        for role, value in data.get('arguments', {}).items():
            if isinstance(value, list):
                arguments[SemanticRole(role)] = [Entity.from_dict(e) for e in value]
            else:
                arguments[SemanticRole(role)] = Entity.from_dict(value)
        predicate = data.get('predicate')
        return cls(
            sentence_type=SentenceType(data.get('type', SentenceType.DECLARATIVE.value)),
            predicate=Predicate.from_dict(predicate) if predicate else None,
            arguments=arguments,
            features=Features.from_dict(data.get('features')),
        )

    def to_summary(self) -> str:
        lines = [f"Type: {self.sentence_type.value}"]
        if self.predicate:
            lines.append(f"Predicate: {self.predicate.text} ({self.predicate.type.value})")
        for role, value in self.arguments.items():
            if isinstance(value, list):
                lines.append(f"{role.value}: {', '.join(e.text for e in value)}")
            else:
                lines.append(f"{role.value}: {value.text}")
        features = self.features.to_dict()
        if features:
            lines.append(f"Features: {json.dumps(features)}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_summary()
