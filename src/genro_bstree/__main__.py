# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Command-line demonstration of BstTree.

Builds a tree, clones it, inserts more values into the original and prints
both renderings followed by the original's values, one per line.

Usage:
    python -m genro_bstree
    python -m genro_bstree --root 10 --first 4 12 --after-clone 7 -v
"""

from __future__ import annotations

import argparse
import logging

from .tree import BstTree


def run(root: int, first: list[int], after_clone: list[int]) -> list[str]:
    """Run the demonstration and return the output lines."""
    tree = BstTree(root)
    for value in first:
        tree.insert(value)
    snapshot = tree.clone()
    for value in after_clone:
        tree.insert(value)

    lines = [tree.display(), snapshot.display()]
    lines.extend(str(value) for value in tree)
    return lines


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description='Build a binary search tree, clone it and print both'
    )
    parser.add_argument('--root', type=int, default=5, help='Root value')
    parser.add_argument('--first', type=int, nargs='*', default=[3],
                        help='Values inserted before cloning')
    parser.add_argument('--after-clone', type=int, nargs='*', default=[7],
                        help='Values inserted into the original after cloning')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    for line in run(args.root, args.first, args.after_clone):
        print(line)


if __name__ == '__main__':
    main()
