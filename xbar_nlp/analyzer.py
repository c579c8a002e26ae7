"""
End-to-end analysis: text -> tokens -> X-Bar tree -> meaning -> validation.

`NLPAnalyzer.analyze` returns an `AnalysisResult`; `NLPAnalyzer.run` performs
the same stages but records each of them in an `ExecutionTrace`.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .extractor import SemanticExtractor
from .grammar import POS
from .lexicon.dictionary import Dictionary
from .logging_config import log_with_context
from .meaning import MeaningRepresentation
from .parser import ParseResult, Parser, parse as parse_tokens
from .token import Token
from .trace import ExecutionTrace
from .tree import PhraseTree
from .validator import Message, SemanticValidator, Severity, ValidationCode, ValidationResult

logger = logging.getLogger(__name__)

VERSION = '1.0.0'

PIPELINE_STEPS = ('Tokenizer', 'Tagger', 'Parser', 'Extractor', 'Validator')


@dataclass
class AnalysisResult:
    tokens: List[Token] = field(default_factory=list)
    tree: Optional[PhraseTree] = None
    meaning: Optional[MeaningRepresentation] = None
    validation: ValidationResult = field(default_factory=lambda: ValidationResult(is_valid=True))
    summary: str = ''
    errors: List[str] = field(default_factory=list)
    success: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            'success': self.success,
            'tokens': [t.to_dict() for t in self.tokens],
            'tree': self.tree.to_dict() if self.tree is not None else None,
            'meaning': self.meaning.to_dict() if self.meaning is not None else None,
            'validation': self.validation.to_dict(),
            'summary': self.summary,
            'errors': list(self.errors),
        }


class NLPAnalyzer:
    """
    Runs the full analysis pipeline over one dictionary.

    Options (see DEFAULT_OPTIONS):
        strict_mode: unknown words fail the parse; a missing subject is a
            validation error.
        include_details: keep tagging messages and list tokens in summaries.
        validate: run the semantic validator.
    """

    DEFAULT_OPTIONS = {
        'strict_mode': False,
        'include_details': True,
        'validate': True,
    }

    VERSION = VERSION

    def __init__(self, dictionary: Optional[Dictionary] = None, options: Optional[Dict[str, Any]] = None):
        self.options = self.DEFAULT_OPTIONS.copy()
        if options:
            unknown = set(options) - set(self.DEFAULT_OPTIONS)
            if unknown:
                raise ValueError(f"Unknown analyzer option(s): {', '.join(sorted(unknown))}")
            self.options.update(options)

        self.dictionary = dictionary if dictionary is not None else Dictionary.default()
        self.parser = Parser(self.dictionary, options={
            'strict_mode': self.options['strict_mode'],
            'include_details': self.options['include_details'],
        })
        self.extractor = SemanticExtractor()
        self.validator = SemanticValidator({'strict_mode': self.options['strict_mode']})

    @classmethod
    def create_default(cls, options: Optional[Dict[str, Any]] = None) -> NLPAnalyzer:
        """Analyzer over the built-in vocabulary."""
        return cls(Dictionary.default(), options)

    def analyze(self, text: str) -> AnalysisResult:
        logger.info(f"Analyzing: '{text}'")
        parse_result = self.parser.parse(text)

        if not parse_result.success:
            logger.info("Parsing failed: %s", '; '.join(parse_result.errors))
            return self._failure('Parsing failed', parse_result.tokens, parse_result.errors)

        errors: List[str] = []
        meaning = self.extractor.extract(parse_result.tree)
        if meaning is None:
            errors.append('Failed to extract meaning from parse tree')

        validation = ValidationResult(is_valid=True)
        if meaning is not None and self.options['validate']:
            validation = self.validator.validate(meaning)

        return AnalysisResult(
            tokens=parse_result.tokens,
            tree=parse_result.tree,
            meaning=meaning,
            validation=validation,
            summary=self.generate_summary(parse_result, meaning, validation),
            errors=errors + parse_result.errors,
            success=meaning is not None,
        )

    def analyze_multiple(self, text: str) -> List[AnalysisResult]:
        return [self.analyze(sentence) for sentence in self.parser.tokenizer.split_sentences(text)]

    def extract_meaning(self, text: str) -> Optional[MeaningRepresentation]:
        return self.analyze(text).meaning

    def parse(self, text: str) -> Optional[PhraseTree]:
        return self.parser.parse(text).tree

    def tokenize(self, text: str) -> List[Token]:
        """Tagged tokens for `text`, whether or not it parses."""
        tokens = self.parser.tokenize(text)
        return self.parser.tag(tokens).tokens if tokens else []

    def run(self, text: str, stop_after: Optional[str] = None) -> ExecutionTrace:
        """
        Analyze `text`, recording every stage in an ExecutionTrace.

        Args:
            text: The sentence to analyze.
            stop_after: Name of a stage in PIPELINE_STEPS to stop after.

        Returns:
            The trace; failures are recorded with `set_error`, never raised.
        """
        if stop_after is not None and stop_after not in PIPELINE_STEPS:
            raise ValueError(f"Unknown pipeline step '{stop_after}'")

        logger.info(f"Starting analysis run for: '{text}'")
        trace = ExecutionTrace(initial_query=text)

        try:
            tokens = self.parser.tokenize(text)
            log_with_context(logger, "Step 1: Tokenizer - Split text into word tokens.",
                             {"tokens": [t.text for t in tokens]})
            trace.add_step(
                "Tokenizer",
                inputs={"text": text},
                outputs={"tokens": [t.text for t in tokens]},
                description="Split the sentence into word tokens.",
            )
            if stop_after == "Tokenizer":
                return trace
            if not tokens:
                trace.set_error('No tokens found in input')
                return trace

            tagged = self.parser.tag(tokens)
            log_with_context(logger, "Step 2: Tagger - Looked up parts of speech.",
                             {"tags": [str(t) for t in tagged.tokens], "unknown_words": tagged.unknown_words})
            trace.add_step(
                "Tagger",
                inputs={"tokens": [t.text for t in tokens]},
                outputs={"tags": [str(t) for t in tagged.tokens],
                         "unknown_words": tagged.unknown_words,
                         "messages": tagged.errors},
                description="Assigned parts of speech from the dictionary.",
            )
            if stop_after == "Tagger":
                return trace
            if tagged.unknown_words and self.options['strict_mode']:
                trace.set_error(f"Unknown words found: {', '.join(tagged.unknown_words)}")
                return trace

            parse_result = parse_tokens(tagged.tokens)
            log_with_context(logger, "Step 3: Parser - Matched clause patterns.",
                             {"pattern": parse_result.pattern.name if parse_result.pattern else None,
                              "errors": parse_result.errors})
            trace.add_step(
                "Parser",
                inputs={"tags": [str(t) for t in tagged.tokens]},
                outputs={"success": parse_result.success,
                         "pattern": parse_result.pattern.name if parse_result.pattern else None,
                         "tree": parse_result.tree.to_dict() if parse_result.tree else None,
                         "errors": parse_result.errors},
                description="Built the X-Bar clause tree.",
            )
            if stop_after == "Parser":
                return trace
            if not parse_result.success:
                trace.set_error(f"Parsing failed: {'; '.join(parse_result.errors)}")
                return trace

            meaning = self.extractor.extract(parse_result.tree)
            log_with_context(logger, "Step 4: Extractor - Extracted meaning.",
                             {"meaning": meaning.to_dict() if meaning else None})
            trace.add_step(
                "Extractor",
                inputs={"tree": parse_result.tree.to_dict()},
                outputs={"meaning": meaning.to_dict() if meaning else None},
                description="Extracted predicate and role-tagged arguments.",
            )
            if stop_after == "Extractor":
                return trace
            if meaning is None:
                trace.set_error('Failed to extract meaning from parse tree')
                return trace

            validation = ValidationResult(is_valid=True)
            if self.options['validate']:
                validation = self.validator.validate(meaning)
                log_with_context(logger, "Step 5: Validator - Checked semantic consistency.",
                                 {"codes": [code.value for code in validation.codes()]})
                trace.add_step(
                    "Validator",
                    inputs={"meaning": meaning.to_dict()},
                    outputs=validation.to_dict(),
                    description="Validated the meaning representation.",
                )
            if stop_after == "Validator":
                return trace

            logger.info("Analysis run completed successfully.")
            trace.set_final_response(self.generate_summary(parse_result, meaning, validation))

        except Exception as e:
            logger.error(f"Analysis failed with error: {e}", exc_info=True)
            trace.set_error(str(e))

        return trace

    def generate_summary(self, parse_result: ParseResult, meaning: Optional[MeaningRepresentation],
                         validation: ValidationResult) -> str:
        parts = [f'Sentence: "{" ".join(t.text for t in parse_result.tokens)}"', '']

        parts.append('=== Parse Information ===')
        parts.append(f"Sentence Type: {parse_result.sentence_type.value}")
        parts.append(f"Predicate Type: {parse_result.predicate_type.value}")

        if self.options['include_details'] and parse_result.tokens:
            parts.append('')
            parts.append('Tokens:')
            for token in parse_result.tokens:
                pos = f" [{token.pos.value}]" if token.pos != POS.UNKNOWN else ''
                lemma = f" (lemma: {token.lemma})" if token.lemma and token.lemma != token.normalized else ''
                parts.append(f"  - {token.text}{pos}{lemma}")

        if meaning is not None:
            parts.append('')
            parts.append('=== Semantic Meaning ===')
            parts.append(meaning.to_summary())

        if not validation.is_valid:
            parts.append('')
            parts.append('=== Validation Issues ===')
            parts.extend(f"  ERROR: {m.message}" for m in validation.errors)

        if validation.warnings:
            parts.append('')
            parts.append('=== Warnings ===')
            parts.extend(f"  WARNING: {m.message}" for m in validation.warnings)

        return "\n".join(parts)

    @staticmethod
    def _failure(message: str, tokens: List[Token], errors: List[str]) -> AnalysisResult:
        return AnalysisResult(
            tokens=list(tokens),
            validation=ValidationResult(
                is_valid=False,
                errors=[Message(Severity.ERROR, ValidationCode.ANALYSIS_ERROR, message)],
            ),
            summary=f"Analysis failed: {message}",
            errors=[message] + list(errors),
            success=False,
        )


def analyze(text: str, **options) -> AnalysisResult:
    """Analyze one sentence with a default analyzer."""
    return NLPAnalyzer.create_default(options or None).analyze(text)
