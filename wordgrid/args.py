"""Standard command-line arguments shared across tools."""

import argparse
from typing import Iterable

from wordgrid.dictionary import Dictionary

DEFAULT_DICTIONARY = "/usr/share/dict/words"


def add_standard_args(parser: argparse.ArgumentParser, *, positional=False):
    if positional:
        parser.add_argument(
            "dictionary",
            metavar="DICT_FILE",
            nargs="?",
            default=DEFAULT_DICTIONARY,
            help="Path to dictionary file with one word per line. "
            f"Default: {DEFAULT_DICTIONARY}",
        )
    else:
        parser.add_argument(
            "--dictionary",
            type=str,
            default=DEFAULT_DICTIONARY,
            help="Path to dictionary file with one word per line.",
        )


def get_dictionary_from_args(
    args: argparse.Namespace, alphabet: Iterable[str] | None = None
) -> Dictionary:
    return Dictionary.create_from_file(args.dictionary, alphabet)
