"""
Grammatical feature record attached to tokens, entities, predicates and meanings.

Features form a closed set of named, optional fields rather than an open
string-keyed map. Lexicon data and serialized input still arrive as plain
dicts; `Features.from_dict` converts them and rejects unknown names.
"""
from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Iterable, Optional, Tuple

from .grammar import Aspect, Number, Person, Tense


# Enum-valued fields and the enum used to coerce their raw values
_ENUM_FIELDS = {
    'number': Number,
    'person': Person,
    'tense': Tense,
    'aspect': Aspect,
}


@dataclass(frozen=True)
class Features:
    """
    Closed record of grammatical features.

    `degree` holds either a lexical degree (POSITIVE, COMPARATIVE,
    SUPERLATIVE) or, on a property predicate, the text of its degree adverb.
    `modifiers` collects adjective texts on entities and adverb texts on
    meanings.
    """
    number: Optional[Number] = None
    person: Optional[Person] = None
    tense: Optional[Tense] = None
    aspect: Optional[Aspect] = None
    degree: Optional[str] = None
    transitive: Optional[bool] = None
    definiteness: Optional[str] = None
    distance: Optional[str] = None
    derivation: Optional[str] = None
    modifiers: Tuple[str, ...] = ()

    @classmethod
    def names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def get(self, name: str) -> Any:
        """Read a feature by name; unknown names raise KeyError."""
        if name not in self.names():
            raise KeyError(f"Unknown feature '{name}'")
        return getattr(self, name)

    def with_values(self, **values) -> Features:
        """Return a copy with the given features replaced (raw values are coerced)."""
        return replace(self, **{name: _coerce(name, value) for name, value in values.items()})

    def merged(self, other: Optional[Features]) -> Features:
        """Return a copy where every feature set on `other` overrides this record."""
        if other is None:
            return self
        overrides = {name: value for name, value in other.items()}
        return replace(self, **overrides) if overrides else self

    def items(self) -> Iterable[Tuple[str, Any]]:
        """Yield (name, value) for every feature that is set."""
        for name in self.names():
            value = getattr(self, name)
            if value is None or value == ():
                continue
            yield name, value

    def is_empty(self) -> bool:
        return not any(True for _ in self.items())

    def to_dict(self) -> Dict[str, Any]:
        result = {}
        for name, value in self.items():
            if name in _ENUM_FIELDS:
                result[name] = value.value
            elif name == 'modifiers':
                result[name] = list(value)
            else:
                result[name] = value
        return result

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Features:
        if not data:
            return cls()
        unknown = set(data) - set(cls.names())
        if unknown:
            raise ValueError(f"Unknown feature(s): {', '.join(sorted(unknown))}")
        return cls(**{name: _coerce(name, value) for name, value in data.items()})


def _coerce(name: str, value: Any) -> Any:
    if value is None:
        return None
    if name in _ENUM_FIELDS:
        enum_type = _ENUM_FIELDS[name]
        return value if isinstance(value, enum_type) else enum_type(value)
    if name == 'modifiers':
        return tuple(value)
    if name == 'transitive':
        return bool(value)
    return value
