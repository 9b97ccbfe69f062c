import random
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture()
def greetings():
    """Small alphabet of words with distinct weights."""
    return [("hello", 2), ("hey", 3), ("howdy", 1)]


@pytest.fixture()
def fibonacci_weights():
    """Alphabet whose Fibonacci weights produce a maximally skewed tree."""
    weights = [1, 1, 2, 3, 5, 8, 13, 21]
    return [(chr(ord("a") + i), w) for i, w in enumerate(weights)]


@pytest.fixture()
def random_weights():
    """Seeded alphabet of 40 integer symbols with weights in ``1..100``."""
    rng = random.Random(1234)
    return [(sym, rng.randint(1, 100)) for sym in range(40)]


@pytest.fixture()
def random_message(random_weights):
    """Seeded sequence of 500 symbols drawn from ``random_weights``."""
    rng = random.Random(4321)
    symbols = [sym for sym, _ in random_weights]
    return [rng.choice(symbols) for _ in range(500)]


def is_prefix_free(codes) -> bool:
    """Check that no codeword is a prefix of another one."""
    words = sorted(code.to01() for code in codes)
    return all(
        not b.startswith(a) for a, b in zip(words, words[1:])
    )


@pytest.fixture()
def is_prefix_free_fn():
    return is_prefix_free
