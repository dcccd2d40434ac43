import logging
import random
from typing import Optional

from rabin_lab.exceptions import PrimeGenerationError

logger = logging.getLogger(__name__)

# Miller-Rabin error probability is at most 4**-DEFAULT_ROUNDS (2**-80).
DEFAULT_ROUNDS = 40
DEFAULT_MAX_ATTEMPTS = 100000

_SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


def is_prime(n: int, rounds: int = DEFAULT_ROUNDS, rng: Optional[random.Random] = None) -> bool:
    """
    Miller-Rabin probabilistic primality test, preceded by trial division.

    Args:
        n (int): The number to test for primality.
        rounds (int): Number of random witnesses to try. A composite survives
            all of them with probability at most 4**-rounds.
        rng (random.Random, optional): Source for the witnesses. Defaults to the
            process-wide `random` module.

    Returns:
        bool: True if n is probably prime, False if n is definitely composite.
    """
    rng = rng or random

    if n < 2:
        return False

    for small in _SMALL_PRIMES:
        if n % small == 0:
            return n == small

    # Write n-1 as d * 2^r where d is odd
    r, d = 0, n - 1
    while d % 2 == 0:
        r += 1
        d //= 2

    for _ in range(rounds):
        a = rng.randrange(2, n - 1)
        x = pow(a, d, n)
        if x == 1 or x == n - 1:
            continue

        # Square x repeatedly r-1 times
        for _ in range(r - 1):
            x = pow(x, 2, n)
            if x == n - 1: break
        else:
            # If we never found x == n-1, n is composite
            return False
    return True


def generate_prime(bit_length: int, rng: Optional[random.Random] = None,
                   max_attempts: int = DEFAULT_MAX_ATTEMPTS) -> int:
    """
    Generate a random prime congruent to 3 mod 4 with exactly the specified bit length.

    Args:
        bit_length (int): The desired bit length of the prime (at least 2).
        rng (random.Random, optional): Randomness source for candidates and witnesses.
            Defaults to random.SystemRandom().
        max_attempts (int): Maximum number of candidates to draw.

    Returns:
        int: A prime p with p.bit_length() == bit_length and p % 4 == 3.

    Raises:
        ValueError: If bit_length is smaller than 2.
        PrimeGenerationError: If no suitable prime was found within max_attempts.
    """
    if bit_length < 2:
        raise ValueError("Bit length must be at least 2.")

    rng = rng or random.SystemRandom()

    for attempt in range(1, max_attempts + 1):
        # Set MSB to 1 (ensures exact bit length) and LSB to 1 (ensures odd)
        candidate = rng.getrandbits(bit_length) | (1 << bit_length - 1) | 1
        if candidate % 4 != 3:
            continue
        if is_prime(candidate, rng=rng):
            logger.debug("Found %d bits prime after %d attempts", bit_length, attempt)
            return candidate
    raise PrimeGenerationError(
        f"Unable to generate a {bit_length} bits prime congruent to 3 mod 4 after {max_attempts} attempts."
    )
