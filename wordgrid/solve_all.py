#!/usr/bin/env python
"""Solve many grids, one per line, from files or stdin."""

import argparse
import fileinput
import sys
import time

from tqdm import tqdm

from wordgrid.args import add_standard_args, get_dictionary_from_args
from wordgrid.grid import Grid
from wordgrid.solver import search


def read_grids(files: list[str]) -> list[Grid]:
    grids = []
    with fileinput.input(files=files) as f:
        for line in f:
            puzzle = line.strip()
            if not puzzle:
                continue
            try:
                grids.append(Grid.from_str(puzzle))
            except ValueError as e:
                where = f"{f.filename()}:{f.filelineno()}"
                raise ValueError(f"{where}: {e}") from e
    return grids


def main(argv=None):
    parser = argparse.ArgumentParser(description="Solve word grids in bulk")
    add_standard_args(parser)
    parser.add_argument(
        "files", metavar="FILE", nargs="*", help="Files containing grids, or stdin"
    )
    parser.add_argument(
        "--print_words",
        action="store_true",
        help="Print all the words that can be found on each grid.",
    )
    args = parser.parse_args(argv)

    try:
        grids = read_grids(args.files)
    except ValueError as e:
        parser.error(str(e))

    start_s = time.time()
    alphabet = set()
    for grid in grids:
        alphabet |= grid.alphabet
    # One index serves every grid, so filter by the union of their letters.
    dictionary = get_dictionary_from_args(args, alphabet)
    sys.stderr.write(
        f"Loaded {dictionary.size()} words in {time.time() - start_s:.2f}s\n"
    )

    start_s = time.time()
    total_words = 0
    for grid in tqdm(grids, smoothing=0, file=sys.stderr):
        words = search(grid, dictionary)
        total_words += len(words)
        print(f"{grid}: {len(words)} words")
        if args.print_words:
            print("\n".join(words))
    elapsed_s = time.time() - start_s
    rate = len(grids) / elapsed_s if elapsed_s else 0.0
    sys.stderr.write(
        f"{len(grids)} grids, {total_words} words in {elapsed_s:.2f}s "
        f"= {rate:.2f} grids/s\n"
    )


if __name__ == "__main__":
    main()
