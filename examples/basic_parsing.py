#!/usr/bin/env python3
"""
Basic Parsing Examples

This script demonstrates how to parse English sentences into X-Bar trees,
look words up in the dictionary, and read the extracted meaning.
"""
import sys
import json
from pathlib import Path

# Add parent directory to path to import xbar_nlp
sys.path.insert(0, str(Path(__file__).parent.parent))

from xbar_nlp import NLPAnalyzer, Parser
from xbar_nlp.lexicon import Dictionary


def example_1_word_lookup():
    """Look up an inflected word and a word found by affix stripping."""
    print("=" * 60)
    print("Example 1: Dictionary Lookup")
    print("=" * 60)

    dictionary = Dictionary.default()
    for word in ("books", "unhappy"):
        result = dictionary.lookup(word)
        print(f"\nInput: '{word}'")
        print(f"  Lemma:            {result.lemma}")
        print(f"  Part of Speech:   {result.pos.value}")
        print(f"  Categories:       {', '.join(result.categories)}")
        print(f"  Affix stripping:  {result.from_affix_stripping}")

    print("\nExplanation:")
    print("  'books' is a listed form of 'book'")
    print("  'unhappy' is not listed; stripping the prefix 'un' finds 'happy'")


def example_2_tree():
    """Parse a sentence and print its X-Bar tree."""
    print("\n" + "=" * 60)
    print("Example 2: X-Bar Tree")
    print("=" * 60)

    sentence = "The big dog sees the small cat"
    print(f"\nInput: '{sentence}'")

    result = Parser().parse(sentence)
    print(f"\nPattern: {result.pattern.name}")
    print("\nTree:")
    print(result.tree.pretty())

    print("\nExplanation:")
    print("  TP has the subject NP as specifier and a covert T head")
    print("  The VP takes the object NP as complement (PATIENT)")
    print("  Adjectives attach to their NP as AP adjuncts")


def example_3_meaning():
    """Extract the meaning of each clause kind."""
    print("\n" + "=" * 60)
    print("Example 3: Meaning Extraction")
    print("=" * 60)

    analyzer = NLPAnalyzer.create_default()
    sentences = [
        "The man reads a book",
        "The apple is red",
        "Socrates is a man",
        "The cat is on the table",
    ]
    for sentence in sentences:
        result = analyzer.analyze(sentence)
        print(f"\nInput: '{sentence}'")
        for line in result.meaning.to_summary().splitlines():
            print(f"  {line}")
        print(f"  Valid: {result.validation.is_valid}")


def example_4_json_output():
    """Show the full analysis as JSON."""
    print("\n" + "=" * 60)
    print("Example 4: Full Analysis as JSON")
    print("=" * 60)

    sentence = "The dog runs"
    print(f"\nInput: '{sentence}'")

    result = NLPAnalyzer.create_default().analyze(sentence)
    data = result.to_dict()
    data.pop('tokens')

    print("\nMeaning and validation (JSON format):")
    print(json.dumps({'meaning': data['meaning'], 'validation': data['validation']},
                     indent=2, ensure_ascii=False))


def main():
    """Run all examples."""
    print("\n")
    print("*" * 60)
    print("  XBAR-NLP: Basic Parsing Examples")
    print("*" * 60)

    example_1_word_lookup()
    example_2_tree()
    example_3_meaning()
    example_4_json_output()

    print("\n" + "=" * 60)
    print("Examples Complete!")
    print("=" * 60)
    print("\nNext steps:")
    print("  - See examples/round_trip.py for tree serialization")
    print("  - Run `xbar-nlp analyze --format trace \"...\"` for a stage-by-stage trace")
    print("\n")


if __name__ == "__main__":
    main()
