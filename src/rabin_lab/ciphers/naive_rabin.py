from typing import Tuple

from rabin_lab.core import RabinCipherInterface, RabinPublicKey, RabinKey
from rabin_lab.exceptions import InvalidModulusError


class NaiveRabin(RabinCipherInterface):
    """
    Textbook Rabin: encryption is a modular squaring, decryption returns the
    four square roots recombined with the Chinese Remainder Theorem.
    No padding or redundancy is added, so equal plaintexts give equal ciphertexts.
    """

    def encrypt(self, message: int, public_key: RabinPublicKey) -> int:
        return encrypt(message, public_key.n)

    def decrypt(self, ciphertext: int, private_key: RabinKey) -> Tuple[int, int, int, int]:
        return decrypt(ciphertext, private_key.p, private_key.q)


def encrypt(message: int, n: int) -> int:
    """
    Computes message^2 mod n.

    The message is not checked against n: values >= n alias other plaintexts.

    Raises:
        InvalidModulusError: If n is not positive.
    """
    if n <= 0:
        raise InvalidModulusError("Modulus (n) must be positive.")
    return (message * message) % n


def decrypt(ciphertext: int, p: int, q: int) -> Tuple[int, int, int, int]:
    """
    Computes the four square roots of the ciphertext modulo n = p * q.

    Valid for primes p and q congruent to 3 mod 4, where c^((p+1)/4) is a
    square root of c mod p. Primality, quadratic residuosity and the range of
    the ciphertext are not checked: malformed inputs give meaningless roots.

    Args:
        ciphertext (int): The ciphertext to decrypt.
        p (int): First prime factor.
        q (int): Second prime factor.

    Returns:
        (int, int, int, int): The candidates (r1, n - r1, r3, n - r3), all in [0, n).

    Raises:
        InvalidModulusError: If p or q is not positive.
    """
    if p <= 0 or q <= 0:
        raise InvalidModulusError("Prime factors (p, q) must be positive.")

    n = p * q

    # Square roots modulo each prime
    mp = pow(ciphertext, (p + 1) // 4, p)
    mq = pow(ciphertext, (q + 1) // 4, q)

    # Inverses of q mod p and p mod q (Fermat's little theorem)
    yp = pow(q, p - 2, p)
    yq = pow(p, q - 2, q)

    r1 = (yp * q * mp + yq * p * mq) % n
    r2 = (n - r1) % n
    # Python's % takes the sign of n, so -mq needs no prior reduction
    r3 = (yp * q * mp + yq * p * (-mq)) % n
    r4 = (n - r3) % n

    return r1, r2, r3, r4
