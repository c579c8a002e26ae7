"""
Command-line interface for xbar-nlp.

- Parsing sentences into X-Bar trees
- Full analysis (meaning + validation), optionally as a stage trace
- Dictionary lookups
- Evaluating a sentence corpus
"""
import sys
import os
import argparse
import json
import logging
import time

from tqdm import tqdm

logger = logging.getLogger(__name__)

DEFAULT_CORPUS = os.path.join('data', 'test_corpus.json')


def _read_text(args):
    if args.text:
        return args.text
    if args.file:
        with open(args.file, 'r', encoding='utf-8') as f:
            return f.read().strip()
    print("Enter a sentence:")
    return input().strip()


def _fail(message):
    print(f"ERROR: {message}", file=sys.stderr)
    sys.exit(1)


def cmd_parse(args):
    """Parse a sentence into an X-Bar tree."""
    from xbar_nlp.parser import Parser

    text = _read_text(args)
    parser = Parser(options={'strict_mode': args.strict})
    result = parser.parse(text)

    if not result.success:
        if args.format == 'json':
            print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        _fail('; '.join(result.errors))

    if args.format == 'json':
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    elif args.format == 'tree':
        print(result.tree.pretty())
    else:
        print(parser.summary(result))
        print(f"Pattern: {result.pattern.name}")


def cmd_analyze(args):
    """Analyze a sentence: parse, extract meaning and validate."""
    from xbar_nlp.analyzer import NLPAnalyzer

    text = _read_text(args)
    analyzer = NLPAnalyzer.create_default({
        'strict_mode': args.strict,
        'validate': not args.no_validate,
    })

    if args.format == 'trace':
        trace = analyzer.run(text)
        print(trace.to_json())
        if trace.error:
            _fail(trace.error)
        return

    result = analyzer.analyze(text)
    if args.format == 'json':
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    elif args.format == 'tree':
        if result.tree is not None:
            print(result.tree.pretty())
    else:
        print(result.summary)

    if not result.success:
        _fail('; '.join(result.errors))


def cmd_lookup(args):
    """Look a word up in the built-in dictionary."""
    from xbar_nlp.lexicon import Dictionary

    dictionary = Dictionary.default()
    results = dictionary.lookup_all(args.word)
    if not results:
        _fail(f'"{args.word}" not found in dictionary')

    if args.format == 'json':
        print(json.dumps([{
            'lemma': r.lemma,
            'pos': r.pos.value,
            'alternate_pos': [p.value for p in r.alternate_pos],
            'categories': list(r.categories),
            'features': r.features.to_dict(),
            'from_affix_stripping': r.from_affix_stripping,
        } for r in results], indent=2, ensure_ascii=False))
        return

    for r in results:
        print(f"{args.word} -> {r.lemma} [{r.pos.value}]")
        if r.alternate_pos:
            print(f"  Also: {', '.join(p.value for p in r.alternate_pos)}")
        if r.categories:
            print(f"  Categories: {', '.join(r.categories)}")
        features = r.features.to_dict()
        if features:
            print(f"  Features: {json.dumps(features)}")
        if r.from_affix_stripping:
            print("  (found via affix stripping)")


def cmd_evaluate(args):
    """Run every sentence of a test corpus through the analyzer."""
    from xbar_nlp.analyzer import NLPAnalyzer
    from xbar_nlp.logging_config import log_case_result

    try:
        with open(args.corpus, 'r', encoding='utf-8') as f:
            corpus = json.load(f)
    except FileNotFoundError:
        _fail(f"Test corpus not found at {args.corpus}")
    except json.JSONDecodeError:
        _fail(f"Could not decode JSON from {args.corpus}")

    cases = [case if isinstance(case, dict) else {'text': case} for case in corpus]
    if args.num_sentences is not None:
        cases = cases[:args.num_sentences]

    analyzer = NLPAnalyzer.create_default({'strict_mode': args.strict})

    passed = 0
    failed = 0
    for case in tqdm(cases, desc="Evaluating sentences", disable=args.quiet):
        text = case['text']
        started = time.perf_counter()
        result = analyzer.analyze(text)
        duration_ms = (time.perf_counter() - started) * 1000

        error = _check_case(case, result)
        log_case_result(logger, text, error, duration_ms)
        if error:
            failed += 1
            print(f"FAIL: {text} - {error}")
        else:
            passed += 1

    logger.info(f"Evaluation complete: {passed} passed, {failed} failed out of {len(cases)}")
    print(f"\nEvaluation complete: {passed} passed, {failed} failed out of {len(cases)}")
    if failed:
        sys.exit(1)


def _check_case(case, result):
    """Mismatch description for a corpus case, or None."""
    expect_success = case.get('success', True)
    if result.success != expect_success:
        reason = '; '.join(result.errors) if result.errors else 'analysis succeeded'
        return f"expected success={expect_success}: {reason}"
    if not result.success:
        return None

    predicate = result.meaning.predicate
    expected_type = case.get('predicate_type')
    if expected_type and (predicate is None or predicate.type.value != expected_type):
        actual = predicate.type.value if predicate else None
        return f"expected predicate type {expected_type}, got {actual}"

    if 'valid' in case and result.validation.is_valid != case['valid']:
        return f"expected valid={case['valid']}, got {result.validation.is_valid}"
    return None


def cmd_info(args):
    """Display vocabulary and grammar information."""
    from xbar_nlp.analyzer import VERSION
    from xbar_nlp.grammar import POS
    from xbar_nlp.lexicon import DEFAULT_AFFIXES, Dictionary
    from xbar_nlp.patterns import PATTERN_ORDER, PATTERNS

    dictionary = Dictionary.default()

    print("=== xbar-nlp System Information ===\n")
    print(f"Version: {VERSION}")
    print(f"Python: {sys.version.split()[0]}")

    print(f"\nVocabulary: {len(dictionary)} entries")
    for pos in POS:
        count = len(dictionary.by_pos(pos))
        if count:
            print(f"  {pos.value.title()}: {count}")

    print("\nAffixes:")
    print(f"  Suffixes: {len(DEFAULT_AFFIXES.suffixes)}")
    print(f"  Prefixes: {len(DEFAULT_AFFIXES.prefixes)}")

    print("\nClause patterns (priority order):")
    for kind in PATTERN_ORDER:
        print(f"  {PATTERNS[kind].name}: {PATTERNS[kind].description}")


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='xbar-nlp',
        description='xbar-nlp: rule-based X-Bar parsing and semantic analysis of simple English sentences',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Parse a sentence
  xbar-nlp parse "The man reads a book"
  xbar-nlp parse --format tree "The apple is red"

  # Full analysis
  xbar-nlp analyze "Socrates is a man"
  xbar-nlp analyze --format trace "The cat is on the table"

  # Dictionary
  xbar-nlp lookup books

  # Corpus evaluation
  xbar-nlp evaluate --corpus data/test_corpus.json

  # System info
  xbar-nlp info
        """
    )
    parser.add_argument('--debug', action='store_true', help='Enable DEBUG logging')
    parser.add_argument('--log-file', help='Also write log output to this file')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # --- parse command ---
    parser_parse = subparsers.add_parser('parse', help='Parse a sentence into an X-Bar tree')
    parser_parse.add_argument('text', nargs='?', help='Sentence to parse')
    parser_parse.add_argument('-f', '--file', help='Read input from file')
    parser_parse.add_argument('--format', choices=['text', 'json', 'tree'], default='text',
                              help='Output format (default: text)')
    parser_parse.add_argument('--strict', action='store_true', help='Fail on unknown words')
    parser_parse.set_defaults(func=cmd_parse)

    # --- analyze command ---
    parser_analyze = subparsers.add_parser('analyze', help='Parse, extract meaning and validate')
    parser_analyze.add_argument('text', nargs='?', help='Sentence to analyze')
    parser_analyze.add_argument('-f', '--file', help='Read input from file')
    parser_analyze.add_argument('--format', choices=['text', 'json', 'tree', 'trace'], default='text',
                                help='Output format (default: text)')
    parser_analyze.add_argument('--strict', action='store_true',
                                help='Fail on unknown words; missing subject is an error')
    parser_analyze.add_argument('--no-validate', action='store_true', help='Skip semantic validation')
    parser_analyze.set_defaults(func=cmd_analyze)

    # --- lookup command ---
    parser_lookup = subparsers.add_parser('lookup', help='Look a word up in the dictionary')
    parser_lookup.add_argument('word', help='Word to look up')
    parser_lookup.add_argument('--format', choices=['text', 'json'], default='text',
                               help='Output format (default: text)')
    parser_lookup.set_defaults(func=cmd_lookup)

    # --- evaluate command ---
    parser_evaluate = subparsers.add_parser('evaluate', help='Evaluate the analyzer on a test corpus')
    parser_evaluate.add_argument('--corpus', default=DEFAULT_CORPUS,
                                 help=f'Path to the test corpus JSON (default: {DEFAULT_CORPUS})')
    parser_evaluate.add_argument('--num-sentences', type=int, default=None,
                                 help='Only evaluate the first N sentences')
    parser_evaluate.add_argument('--strict', action='store_true', help='Fail on unknown words')
    parser_evaluate.add_argument('-q', '--quiet', action='store_true', help='Hide the progress bar')
    parser_evaluate.set_defaults(func=cmd_evaluate)

    # --- info command ---
    parser_info = subparsers.add_parser('info', help='Display system information')
    parser_info.set_defaults(func=cmd_info)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.debug or args.log_file:
        from xbar_nlp.logging_config import setup_logging
        setup_logging(log_file=args.log_file, debug=args.debug, command=args.command)

    args.func(args)


if __name__ == '__main__':
    main()
