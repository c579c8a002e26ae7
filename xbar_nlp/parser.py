"""
Sentence parser: tagged tokens -> X-Bar clause tree.

`parse(tokens)` is the core entry point over already-tagged tokens. The
`Parser` class adds the text front end: tokenization, dictionary-based POS
tagging with inference for unknown words, and strict-mode handling.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

from .grammar import POS, PredicateType, SentenceType
from .lexicon.dictionary import Dictionary
from .patterns import Clause, ClausePattern, get_predicate_type, get_sentence_type, match_pattern
from .token import Token
from .tokenizer import Tokenizer
from .tree import PhraseTree

logger = logging.getLogger(__name__)


@dataclass
class ParseResult:
    tokens: List[Token] = field(default_factory=list)
    tree: Optional[PhraseTree] = None
    sentence_type: SentenceType = SentenceType.UNKNOWN
    predicate_type: PredicateType = PredicateType.UNKNOWN
    pattern: Optional[ClausePattern] = None
    clause: Optional[Clause] = None
    errors: List[str] = field(default_factory=list)
    success: bool = False

    @classmethod
    def failure(cls, message: str, tokens: Optional[List[Token]] = None,
                errors: Optional[List[str]] = None) -> ParseResult:
        return cls(tokens=list(tokens or []), errors=[message] + list(errors or []), success=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'success': self.success,
            'tokens': [t.to_dict() for t in self.tokens],
            'tree': self.tree.to_dict() if self.tree is not None else None,
            'sentence_type': self.sentence_type.value,
            'predicate_type': self.predicate_type.value,
            'pattern': self.pattern.name if self.pattern else None,
            'errors': list(self.errors),
        }


def parse(tokens: Optional[List[Token]]) -> ParseResult:
    """
    Build the clause tree for a tagged token sequence.

    Never raises for linguistic failures: an empty sequence or a sentence no
    clause pattern can build gives `success=False` with the reasons in `errors`.
    """
    tokens = list(tokens or [])
    match = match_pattern(tokens)
    if match.pattern is None:
        logger.debug("No pattern built for %d tokens: %s", len(tokens), match.errors)
        return ParseResult(tokens=tokens, errors=list(match.errors), success=False)

    return ParseResult(
        tokens=tokens,
        tree=match.tree,
        sentence_type=get_sentence_type(match.pattern),
        predicate_type=get_predicate_type(match.pattern),
        pattern=match.pattern,
        clause=match.clause,
        errors=[],
        success=True,
    )


@dataclass
class TagResult:
    tokens: List[Token]
    errors: List[str] = field(default_factory=list)
    unknown_words: List[str] = field(default_factory=list)


# Suffix heuristics for words missing from the dictionary, tried in order
_INFERENCE_SUFFIXES = (
    (re.compile(r'(tion|ness|ment|ity|er|or)$'), POS.NOUN),
    (re.compile(r'(ize|ate|ify|en)$'), POS.VERB),
    (re.compile(r'(able|ible|ful|less|ous|ive)$'), POS.ADJECTIVE),
    (re.compile(r'ly$'), POS.ADVERB),
)


class Parser:
    """
    Text-level parser.

    Options (see DEFAULT_OPTIONS):
        strict_mode: fail the parse when any word is missing from the dictionary.
        allow_partial_parse: in strict mode, still try to build a tree.
        include_details: keep tagging messages in the result errors.
    """

    DEFAULT_OPTIONS = {
        'strict_mode': True,
        'allow_partial_parse': False,
        'include_details': True,
    }

    def __init__(self, dictionary: Optional[Dictionary] = None,
                 tokenizer: Optional[Tokenizer] = None,
                 options: Optional[Dict[str, Any]] = None):
        self.dictionary = dictionary if dictionary is not None else Dictionary.default()
        self.tokenizer = tokenizer if tokenizer is not None else Tokenizer(self.dictionary.affixes)
        self.options = self.DEFAULT_OPTIONS.copy()
        if options:
            unknown = set(options) - set(self.DEFAULT_OPTIONS)
            if unknown:
                raise ValueError(f"Unknown parser option(s): {', '.join(sorted(unknown))}")
            self.options.update(options)

    def tokenize(self, sentence: str) -> List[Token]:
        """Word tokens with positions 0..n-1."""
        tokens = [t for t in self.tokenizer.tokenize(sentence) if t.is_word()]
        return [t if t.position == i else replace(t, position=i) for i, t in enumerate(tokens)]

    def parse(self, sentence: str) -> ParseResult:
        tokens = self.tokenize(sentence)
        if not tokens:
            return ParseResult.failure('No tokens found in input')

        tagged = self.tag(tokens)
        messages = tagged.errors if self.options['include_details'] else []

        if (tagged.unknown_words and self.options['strict_mode']
                and not self.options['allow_partial_parse']):
            return ParseResult.failure(
                f"Unknown words found: {', '.join(tagged.unknown_words)}",
                tagged.tokens, messages)

        result = parse(tagged.tokens)
        result.errors = list(messages) + result.errors
        return result

    def parse_multiple(self, text: str) -> List[ParseResult]:
        return [self.parse(sentence) for sentence in self.tokenizer.split_sentences(text)]

    def tag(self, tokens: List[Token]) -> TagResult:
        """
        Assign POS, lemma, categories and features to every token.

        All dictionary lookups happen first so that context rules for
        unknown words see the tags of known neighbours.
        """
        tagged = list(tokens)
        errors: List[str] = []
        unknown: List[int] = []

        for i, token in enumerate(tagged):
            if not token.is_word():
                continue
            lookup = self.dictionary.lookup(token.normalized)
            if lookup is None:
                unknown.append(i)
                continue
            tagged[i] = token.tagged(
                lookup.pos,
                lemma=lookup.lemma,
                features=lookup.features,
                categories=lookup.categories,
                found=True,
            )

        for i in unknown:
            inferred = self.infer_pos(i, tagged)
            if inferred is not None:
                tagged[i] = tagged[i].tagged(inferred)
                errors.append(f'Inferred POS for unknown word "{tagged[i].text}": {inferred.value}')
            else:
                errors.append(f'Unknown word: "{tagged[i].text}"')

        unknown_words = [tagged[i].text for i in unknown]
        if unknown_words:
            logger.debug("Unknown words: %s", unknown_words)
        return TagResult(tokens=tagged, errors=errors, unknown_words=unknown_words)

    @staticmethod
    def infer_pos(index: int, context: List[Token]) -> Optional[POS]:
        """Guess the POS of an unknown word from its suffix, then its neighbours."""
        text = context[index].normalized

        for pattern, pos in _INFERENCE_SUFFIXES:
            if pattern.search(text):
                return pos

        following = context[index + 1].pos if index + 1 < len(context) else None

        if index == 0:
            return POS.DETERMINER if following == POS.NOUN else POS.NOUN

        previous = context[index - 1].pos
        if previous == POS.DETERMINER:
            return POS.ADJECTIVE if following == POS.NOUN else POS.NOUN
        if previous == POS.COPULA:
            return POS.ADJECTIVE

        return None

    def validate(self, result: ParseResult) -> Dict[str, Any]:
        """Structural sanity check of a parse result."""
        errors = []
        if not result.success:
            errors.append('Parse was not successful')
        if result.tree is None:
            errors.append('No tree was generated')
        elif not result.tree.is_complete():
            errors.append('Tree is incomplete')

        unknown = [t.text for t in result.tokens if t.pos == POS.UNKNOWN]
        if unknown:
            errors.append(f"Unknown words: {', '.join(unknown)}")

        return {'is_valid': not errors, 'errors': errors}

    def summary(self, result: ParseResult) -> str:
        if not result.success:
            return f"Parse failed: {'; '.join(result.errors)}"

        lines = [
            f"Sentence type: {result.sentence_type.value}",
            f"Predicate type: {result.predicate_type.value}",
        ]
        tree = result.tree
        root = tree[tree.root]
        if root.specifier is not None:
            lines.append(f"Subject: {tree.head_token(root.specifier).text}")
        bar = tree[root.bar] if root.bar is not None else None
        if bar is not None and bar.complement is not None:
            predicate = tree[bar.complement]
            lines.append(f"Predicate: {tree.head_token(predicate.index).text}")
            if predicate.bar is not None and tree[predicate.bar].complement is not None:
                obj = tree.head_token(tree[predicate.bar].complement)
                if obj is not None:
                    lines.append(f"Object: {obj.text}")
        return "\n".join(lines)