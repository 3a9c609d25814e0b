"""Search a generator stream for the draw that hits a given value."""

from __future__ import annotations

import re
import sys
from itertools import count

from .rngs import LehmerStreams

SCALE = 1_000_000_000


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def find_target(seed: int, target: int) -> int:
    """Return how many draws from stream 1 seeded with ``seed`` reach ``target``.

    Each draw is scaled to an integer below one billion.
    """
    if not 0 <= target < SCALE:
        raise ValueError(f"target must be in [0, {SCALE}), got {target}")
    rng = LehmerStreams()
    rng.select_stream(1)
    rng.put_seed(seed)
    for draws in count(1):
        if int(rng.random() * SCALE) == target:
            return draws
    raise AssertionError("unreachable")


def main(argv: list[str] | None = None) -> int:
    """Command entry point: ``seek SEED TARGET``."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 2:
        sys.stdout.write("Not enough inputs:  seed target\n")
        return 1
    try:
        find_target(_atoi(args[0]), _atoi(args[1]))
    except ValueError as error:
        sys.stderr.write(f"{error}\n")
        return 1
    sys.stdout.write("Found the bug!\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())