"""
Probabilistic primality testing, used to size the hash table of a cache.
"""

import math
from random import Random

DEFAULT_CERTAINTY = 1000

_SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61, 67, 71, 73, 79, 83, 89, 97)

_random = Random()


def is_probable_prime(n: int, certainty: int = DEFAULT_CERTAINTY) -> bool:
    """Returns True if ``n`` is probably prime.

    Composite numbers pass with a probability of at most ``2 ** -certainty``; primes always pass.

    :param n: the number to test
    :param certainty: the negative base-2 logarithm of the accepted false-positive rate
    """
    if n < 2:
        return False
    for p in _SMALL_PRIMES:
        if n == p:
            return True
        if n % p == 0:
            return False

    # n - 1 == d * 2**s with d odd
    d = n - 1
    s = 0
    while d % 2 == 0:
        d //= 2
        s += 1

    # each Miller-Rabin round lets a composite through with probability <= 1/4
    rounds = max(1, math.ceil(certainty / 2))
    for _ in range(rounds):
        a = _random.randrange(2, n - 1)
        x = pow(a, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(s - 1):
            x = pow(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True


def next_probable_prime(n: int, certainty: int = DEFAULT_CERTAINTY) -> int:
    """Returns the smallest probable prime greater than or equal to ``n``."""
    if n <= 2:
        return 2
    candidate = n if n % 2 else n + 1
    while not is_probable_prime(candidate, certainty):
        candidate += 2
    return candidate
