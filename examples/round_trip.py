#!/usr/bin/env python3
"""
Round-Trip Conversion: Text → Tree → JSON → Tree → Text

Demonstrates serializing parse trees and rebuilding the sentence from the
leaves of the restored tree.
"""
import sys
import json
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from xbar_nlp import Parser, PhraseTree


def round_trip(parser: Parser, sentence: str):
    """Parse a sentence, serialize the tree, restore it and read it back."""
    print(f"\n  Original:      '{sentence}'")

    result = parser.parse(sentence)
    if not result.success:
        print(f"  Parse failed:  {'; '.join(result.errors)}")
        return False

    # Tree → JSON → Tree
    encoded = json.dumps(result.tree.to_dict())
    restored = PhraseTree.from_dict(json.loads(encoded))

    reconstructed = " ".join(token.text for token in restored.leaves())
    print(f"  Reconstructed: '{reconstructed}'")

    match = sentence.lower().strip('.') == reconstructed.lower() and restored == result.tree
    status = "✓" if match else "✗"
    print(f"  Match: {status}")

    return match


def main():
    """Run round-trip conversions on a few sentences."""
    print("\n")
    print("*" * 60)
    print("  XBAR-NLP: Round-Trip Conversion Examples")
    print("*" * 60)

    parser = Parser(options={'strict_mode': False})
    sentences = [
        "The man reads a book.",
        "The big dog sees the small cat.",
        "The cat is on the table.",
        "Socrates is a man.",
    ]

    results = [round_trip(parser, sentence) for sentence in sentences]

    print("\n" + "=" * 60)
    print(f"Round-trip: {sum(results)}/{len(results)} sentences preserved")
    print("=" * 60)
    print("\n")


if __name__ == "__main__":
    main()
