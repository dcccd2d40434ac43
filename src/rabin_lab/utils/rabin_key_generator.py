import logging
import random
from multiprocessing.pool import ThreadPool
from typing import List, Optional

from rabin_lab.core import RabinKey
from rabin_lab.exceptions import PrimeGenerationError
from rabin_lab.utils.math import generate_prime

logger = logging.getLogger(__name__)


class RabinKeyGenerator:
    """
    Utility class to generate Rabin key pairs.
    """

    @staticmethod
    def generate_keypair(bit_length: int, max_attempts: int = 10000, seed: Optional[int] = None,
                         rng: Optional[random.Random] = None) -> RabinKey:
        """
        Generate a new Rabin key pair whose primes both have the specified bit length.

        The two primes are drawn as two independent tasks and joined before the
        modulus is computed.

        Args:
            bit_length (int): Desired bit length of each prime factor (e.g., 512).
            max_attempts (int): The maximum number of prime pairs to draw before giving up. Defaults to 10000.
            seed (int, optional): random seed for forcing reproducibility. Ignored when rng is given.
            rng (random.Random, optional): explicit randomness source. Defaults to random.SystemRandom()
                when no seed is given either.

        Returns:
            RabinKey: The RabinKey object containing n, p and q.

        Raises:
            ValueError: If bit_length is too small to hold a prime congruent to 3 mod 4.
            PrimeGenerationError: If unable to draw two distinct primes after max_attempts.
        """
        if rng is None:
            rng = random.Random(seed) if seed is not None else random.SystemRandom()

        logger.info("Starting key generation with bit size %d", bit_length)

        with ThreadPool(2) as pool:
            # Loop until the two primes differ or the max attempts limit is reached
            for attempt in range(1, max_attempts + 1):
                p, q = pool.map(lambda stream: generate_prime(bit_length, rng=stream), _split(rng, 2))

                # Ensure primes are distinct
                if p == q:
                    continue

                logger.info("Generated primes p and q after %d attempts", attempt)
                return RabinKey(n=p * q, p=p, q=q)

        raise PrimeGenerationError(f"Unable to generate two distinct {bit_length} bits primes after {max_attempts} attempts")


def _split(rng: random.Random, count: int) -> List[random.Random]:
    """
    Derives independent randomness streams, one per concurrent task.

    A SystemRandom holds no state and is shared as is. Any other generator is
    split into seeded children so that results do not depend on scheduling.
    """
    if isinstance(rng, random.SystemRandom):
        return [rng] * count
    return [random.Random(rng.getrandbits(128)) for _ in range(count)]
