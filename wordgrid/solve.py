#!/usr/bin/env python
"""Find all the words on a grid and print them."""

import argparse
import sys
import time

from wordgrid.args import add_standard_args, get_dictionary_from_args
from wordgrid.grid import Grid
from wordgrid.solver import find_words

EPILOG = """\
example:
  %(prog)s "adut qsoa iism irta"
  %(prog)s "adut qsoa iism irta" /usr/share/dict/words
"""


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Find all the words on a grid of letters.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "puzzle",
        metavar="PUZZLE",
        help="The grid, lowercase only, each row separated by a space. "
        'Example: "adut qsoa iism irta".',
    )
    add_standard_args(parser, positional=True)
    parser.add_argument(
        "--print_paths",
        action="store_true",
        help="Also print the cells used to spell each word.",
    )
    args = parser.parse_args(argv)

    try:
        grid = Grid.from_str(args.puzzle)
    except ValueError as e:
        parser.error(str(e))

    start_s = time.time()
    try:
        dictionary = get_dictionary_from_args(args, grid.alphabet)
    except OSError as e:
        parser.error(f"Unable to read dictionary: {e}")
    sys.stderr.write(
        f"Loaded {dictionary.size()} words ({dictionary.num_prefixes()} prefixes) "
        f"in {time.time() - start_s:.2f}s\n"
    )

    start_s = time.time()
    found = find_words(grid, dictionary)
    elapsed_s = time.time() - start_s

    for i, word in enumerate(sorted(found)):
        if args.print_paths:
            path = " ".join(f"{r},{c}" for r, c in found[word])
            print(f"{i:>4}: {word} ({path})")
        else:
            print(f"{i:>4}: {word}")
    sys.stderr.write(f"{len(found)} words in {elapsed_s:.2f}s\n")


if __name__ == "__main__":
    main()
