from dataclasses import dataclass

from rabin_lab.exceptions import InvalidModulusError
from rabin_lab.utils.math import is_prime


@dataclass(frozen=True, slots=True)
class RabinPublicKey:
    """
    Represents a Rabin public key.

    Attributes:
        n (int): The modulus (the product of the two secret primes).

    Raises:
        InvalidModulusError: If the modulus is not positive.
        ValueError: If the modulus is even.
    """
    n: int

    def __post_init__(self):
        if self.n <= 0:
            raise InvalidModulusError("Modulus (n) must be positive.")
        if self.n % 2 == 0:
            raise ValueError("Modulus (n) must be odd.")


@dataclass(frozen=True, slots=True)
class RabinKey:
    """
    Represents a Rabin keypair. The primes p and q are the private key, n is public.

    Both primes are congruent to 3 mod 4, which makes n a Blum integer: every
    quadratic residue mod n then has exactly four square roots.

    Attributes:
        n (int): The modulus, p * q.
        p (int): First prime factor.
        q (int): Second prime factor.

    Raises:
        InvalidModulusError: If n, p or q is not positive.
        ValueError: If the key is otherwise malformed.
    """
    n: int
    p: int
    q: int

    def __post_init__(self):
        if self.n <= 0:
            raise InvalidModulusError("Modulus (n) must be positive.")

        if self.p <= 0:
            raise InvalidModulusError("First prime factor (p) must be positive.")

        if self.q <= 0:
            raise InvalidModulusError("Second prime factor (q) must be positive.")

        if self.p == self.q:
            raise ValueError(
                "First prime factor (p) must be different than second prime factor (q)."
            )

        if self.p * self.q != self.n:
            raise ValueError("Modulus (n) is not equal to the product of prime factors (p,q).")

        if self.p % 4 != 3:
            raise ValueError("First prime factor (p) must be congruent to 3 mod 4.")

        if self.q % 4 != 3:
            raise ValueError("Second prime factor (q) must be congruent to 3 mod 4.")

        if not is_prime(self.p):
            raise ValueError("First prime factor (p) is not prime.")

        if not is_prime(self.q):
            raise ValueError("Second prime factor (q) is not prime.")

    @property
    def public_key(self) -> RabinPublicKey:
        """Returns the public part of the key as a RabinPublicKey instance."""
        return RabinPublicKey(n=self.n)


@dataclass(frozen=True, slots=True)
class RoundTripSample:
    """
    Represents a single encrypt/decrypt trial.

    Attributes:
        message (int): The plaintext integer that was encrypted.
        ciphertext (int): The resulting ciphertext.
        recovered (bool): Whether the message was among the four decryption candidates.
        decryption_time (float): The observed decryption time, in seconds.

    Raises:
        ValueError: If message, ciphertext or time values are negative.
    """
    message: int
    ciphertext: int
    recovered: bool
    decryption_time: float

    def __post_init__(self):
        if self.message < 0:
            raise ValueError("Message cannot be negative.")
        if self.ciphertext < 0:
            raise ValueError("Ciphertext cannot be negative.")
        if self.decryption_time < 0:
            raise ValueError("Decryption time cannot be negative.")
