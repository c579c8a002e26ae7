"""Lexical resources: affix table, dictionary and built-in vocabulary."""
from .affixes import DEFAULT_AFFIXES, Affix, AffixTable, StripResult
from .dictionary import Dictionary, LexicalEntry, LookupResult

__all__ = [
    'Affix',
    'AffixTable',
    'DEFAULT_AFFIXES',
    'Dictionary',
    'LexicalEntry',
    'LookupResult',
    'StripResult',
]
