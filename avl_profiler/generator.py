"""
Random key batches for the profiling routes.

Keys are drawn uniformly from [0, length), so larger batches contain
duplicates that the tree silently ignores.
"""

import random
from typing import List, Optional

DEFAULT_QUERY_LENGTH = 100000


def generate_test_data(length: int, rng: Optional[random.Random] = None) -> List[int]:
    """Return `length` pseudo-random integers in [0, length)."""
    rand = rng or random
    return [rand.randrange(length) for _ in range(length)]


def parse_query_length(raw: Optional[str], default: int = DEFAULT_QUERY_LENGTH) -> int:
    """
    Parse the `length` request parameter.

    Only plain ASCII digits with an optional leading '-' are read; anything
    else (blank, '1_000', '12abc', '+5', non-ASCII digits) falls back to
    `default`, as does zero. Negative values are rejected with ValueError.
    """
    if raw is None:
        return default
    text = str(raw).strip()
    digits = text[1:] if text.startswith("-") else text
    if not (digits.isascii() and digits.isdigit()):
        return default

    length = int(digits)
    if text.startswith("-") and length:
        raise ValueError("length must be a non-negative integer")
    return length or default
