"""Command-line front end for the lexicon."""

from __future__ import annotations

import argparse
import logging
import random

from lexicon.constants import DEFAULT_PREFIX_LENGTH
from lexicon.loader import load_content
from lexicon.service import Lexicon

log = logging.getLogger("lexicon")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Lexicon -- word validation and challenge prefixes",
    )
    parser.add_argument("--words", type=str, default=None,
                        help='JSON file with a "words" array')
    parser.add_argument("--prefixes", type=str, default=None,
                        help='JSON file with a "prefixes" array')
    parser.add_argument("--nsfw", type=str, default=None,
                        help='JSON file with an "nsfw" array')
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for reproducible sampling")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")

    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="Validate one or more words")
    check.add_argument("words", nargs="+", metavar="WORD")

    sub.add_parser("prefix", help="Print a random curated prefix")

    challenge = sub.add_parser("challenge", help="Generate challenge prefixes")
    challenge.add_argument("--length", type=int, default=DEFAULT_PREFIX_LENGTH,
                           help="Prefix length (upper bound with --randomize)")
    challenge.add_argument("--randomize", action="store_true",
                           help="Pick a random length in [1, LENGTH]")
    challenge.add_argument("--count", type=int, default=1,
                           help="Number of prefixes to generate")
    return parser


def run_check(lexicon: Lexicon, words: list[str]) -> int:
    print(f" {'Word':<20} {'Valid':>5}  {'NSFW':>4}  {'Letters':>7}")
    print("-" * 42)
    for word in words:
        valid = "yes" if lexicon.check_user_word(word) else "no"
        nsfw = "yes" if lexicon.is_nsfw_word(word) else "no"
        print(f" {word:<20} {valid:>5}  {nsfw:>4}  {lexicon.count_letters(word):>7}")
    return 0


def run_prefix(lexicon: Lexicon) -> int:
    prefix = lexicon.get_random_prefix()
    if not prefix:
        return 1
    print(prefix)
    return 0


def run_challenge(lexicon: Lexicon, length: int, randomize: bool, count: int) -> int:
    status = 0
    for _ in range(count):
        prefix = lexicon.generate_prefix_from_random_word(length, randomize)
        if not prefix:
            status = 1
            break
        print(prefix)
    return status


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    content = load_content(args.words, args.prefixes, args.nsfw)
    lexicon = Lexicon(random.Random(args.seed))
    lexicon.initialize(content.words, content.prefixes, content.nsfw)

    if args.command == "check":
        return run_check(lexicon, args.words)
    if args.command == "prefix":
        return run_prefix(lexicon)
    return run_challenge(lexicon, args.length, args.randomize, args.count)


if __name__ == "__main__":
    raise SystemExit(main())
