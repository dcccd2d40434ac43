import random
import time
from typing import List, Tuple, Optional

from rabin_lab.core import RabinCipherInterface, RabinKey, RoundTripSample


class RoundTripCollector:
    """
    Runs encrypt/decrypt round trips against a single key.
    Its sole responsibility is to generate and return the resulting samples.
    """

    def __init__(self, cipher: RabinCipherInterface):
        self.cipher = cipher

    def collect_samples(
            self,
            key: RabinKey,
            num_samples: int,
            seed: Optional[int] = None
    ) -> Tuple[List[RoundTripSample], float]:
        """
        Collects and returns round-trip samples for random messages in [1, n).

        Args:
            key (RabinKey): The key to use.
            num_samples (int): The number of samples to collect.
            seed (int, optional): The seed for the message generator. Defaults to None.

        Returns:
            (List[RoundTripSample], float): A tuple containing the samples and the time taken for the operation (in seconds).
        """
        if num_samples <= 0:
            raise ValueError("Number of samples must be positive.")
        rng = random.Random(seed)

        samples = []
        start_time = time.time()

        for _ in range(num_samples):
            message = rng.randrange(1, key.n)
            ciphertext = self.cipher.encrypt(message, key.public_key)

            decrypt_start = time.perf_counter()
            candidates = self.cipher.decrypt(ciphertext, key)
            decryption_time = time.perf_counter() - decrypt_start

            samples.append(RoundTripSample(message, ciphertext, message in candidates, decryption_time))

        collection_time = time.time() - start_time
        return samples, collection_time
