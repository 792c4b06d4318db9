"""
Demo driver: fills a Tree with random keys, checks lookups, deletes a few.

Usage:
    python demo.py [--count N] [--deletes N] [--low K] [--high K] [--seed S]
"""

import argparse
import logging
import os
import random
import sys

from avlmap import Node, Tree

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger()


def run(
    count: int = 100,
    deletes: int = 10,
    low: int = -100,
    high: int = 100,
    seed: int | None = None,
    out=None,
) -> Tree:
    """
    Run the demo and return the tree left after the deletions.

    Raises:
        ValueError: If a count is negative or the key range is empty.
        AssertionError: If an inserted key does not round-trip through get.
    """
    if count < 0 or deletes < 0:
        raise ValueError(f"counts must be >= 0, got count={count}, deletes={deletes}")
    if low > high:
        raise ValueError(f"empty key range [{low}, {high}]")

    out = out or sys.stdout
    rng = random.Random(seed)

    logger.info(f"tree: {sys.getsizeof(Tree())} bytes")
    logger.info(f"node: {sys.getsizeof(Node(key=0, value=0))} bytes")

    tree = Tree()
    inserted = []
    for _ in range(count):
        r = rng.randint(low, high)
        tree.add(r, r)
        inserted.append(r)

    print(f"{tree.level_min()} | {tree.level_max()}", file=out)
    tree.dump(out)

    for key in inserted:
        assert tree.get(key) == key, f"lookup failed for {key}"
    logger.info(f"ok! {len(inserted)} lookups, {tree.size()} distinct keys")

    for _ in range(deletes):
        r = rng.randint(low, high)
        print(f"deleting: {r}", file=out)
        detached = tree.delete(r)
        detached.dump(out)

    return tree


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--count", type=int, default=100, help="keys to insert")
    parser.add_argument("--deletes", type=int, default=10, help="random deletions")
    parser.add_argument("--low", type=int, default=-100, help="smallest key")
    parser.add_argument("--high", type=int, default=100, help="largest key")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    try:
        run(args.count, args.deletes, args.low, args.high, args.seed)
    except ValueError as e:
        logger.error(f"Invalid arguments: {e}")
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
