# This file makes the 'xbar_nlp' directory a Python package.

from xbar_nlp.analyzer import AnalysisResult, NLPAnalyzer, VERSION, analyze
from xbar_nlp.extractor import SemanticExtractor, extract_meaning
from xbar_nlp.lexicon import AffixTable, DEFAULT_AFFIXES, Dictionary
from xbar_nlp.meaning import Entity, MeaningRepresentation, Predicate
from xbar_nlp.parser import ParseResult, Parser, parse
from xbar_nlp.tokenizer import Tokenizer
from xbar_nlp.tree import PhraseNode, PhraseTree
from xbar_nlp.validator import SemanticValidator, ValidationResult, validate

__version__ = VERSION

__all__ = [
    'AffixTable',
    'AnalysisResult',
    'DEFAULT_AFFIXES',
    'Dictionary',
    'Entity',
    'MeaningRepresentation',
    'NLPAnalyzer',
    'ParseResult',
    'Parser',
    'PhraseNode',
    'PhraseTree',
    'Predicate',
    'SemanticExtractor',
    'SemanticValidator',
    'Tokenizer',
    'ValidationResult',
    'analyze',
    'extract_meaning',
    'parse',
    'validate',
]
