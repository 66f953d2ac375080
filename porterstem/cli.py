#!/usr/bin/env python3
"""
porterstem CLI

Usage:
    porterstem stem WORD [WORD...] [--lower]
    porterstem text [FILE] [--lower]
    porterstem step WORD STEP
    porterstem trace WORD
    porterstem irregular

Global options:
    --no-irregular    skip the irregular-form table
    -v, --verbose     debug logging on stderr
"""

import argparse
import logging
import sys

from porterstem.config import StemmerConfig
from porterstem.stemmer import PorterStemmer
from porterstem.steps import STEPS
from porterstem.tokenizers import replace_tokens


def get_stemmer(args) -> PorterStemmer:
    """Build a stemmer from the environment plus command-line overrides."""
    config = StemmerConfig.from_env()
    if args.no_irregular:
        config.irregular_forms = {}
    return PorterStemmer(config)


def cmd_stem(args):
    """Stem each word given on the command line."""
    stemmer = get_stemmer(args)
    stem_fn = stemmer.stem_lower if args.lower else stemmer.stem
    for word in args.words:
        print(f"{word}\t{stem_fn(word)}")


def cmd_text(args):
    """Stem every token of a file (or stdin), keeping the text layout."""
    stemmer = get_stemmer(args)
    if args.file and args.file != "-":
        with open(args.file, encoding="utf-8") as f:
            lines = f.readlines()
    else:
        lines = sys.stdin
    for line in lines:
        sys.stdout.write(replace_tokens(line, stemmer, lower=args.lower))


def cmd_step(args):
    """Run a single pipeline step."""
    stemmer = get_stemmer(args)
    print(stemmer.stem_step(args.word, args.step))


def cmd_trace(args):
    """Show the word after each pipeline step."""
    stemmer = get_stemmer(args)
    print(f"{args.word}")
    for name, region in stemmer.trace(args.word):
        print(f"  {name:10} → {region}")


def cmd_irregular(args):
    """List the irregular-form table."""
    stemmer = get_stemmer(args)
    if not stemmer.irregular:
        print("No irregular forms.")
        return
    print(f"Irregular forms ({len(stemmer.irregular)}):\n")
    for surface, canonical in sorted(stemmer.irregular.items()):
        print(f"  {surface:12} → {canonical}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="porterstem",
        description="porterstem: Porter suffix-stripping stemmer for English",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--no-irregular", action="store_true", help="Skip the irregular-form table")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # stem
    stem_parser = subparsers.add_parser("stem", help="Stem words")
    stem_parser.add_argument("words", nargs="+", help="Words to stem")
    stem_parser.add_argument("--lower", action="store_true", help="Skip case restoration")

    # text
    text_parser = subparsers.add_parser("text", help="Stem every word of a file or stdin")
    text_parser.add_argument("file", nargs="?", help="Input file (default: stdin)")
    text_parser.add_argument("--lower", action="store_true", help="Skip case restoration")

    # step
    step_parser = subparsers.add_parser("step", help="Run a single pipeline step")
    step_parser.add_argument("word", help="Word to stem")
    step_parser.add_argument("step", choices=list(STEPS), help="Step name")

    # trace
    trace_parser = subparsers.add_parser("trace", help="Show each pipeline step")
    trace_parser.add_argument("word", help="Word to stem")

    # irregular
    subparsers.add_parser("irregular", help="List irregular forms")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [porterstem] %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    commands = {
        "stem": cmd_stem,
        "text": cmd_text,
        "step": cmd_step,
        "trace": cmd_trace,
        "irregular": cmd_irregular,
    }

    try:
        commands[args.command](args)
    except (OSError, ValueError) as e:
        print(f"✗ {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
