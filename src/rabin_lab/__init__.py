from rabin_lab.ciphers.naive_rabin import decrypt, encrypt
from rabin_lab.exceptions import InvalidCharacterError, InvalidModulusError, PrimeGenerationError
from rabin_lab.utils.encoding import DEFAULT_ALPHABET, decode, encode
from rabin_lab.utils.rabin_key_generator import RabinKeyGenerator

generate_keypair = RabinKeyGenerator.generate_keypair

__all__ = [
    "DEFAULT_ALPHABET",
    "InvalidCharacterError",
    "InvalidModulusError",
    "PrimeGenerationError",
    "decode",
    "decrypt",
    "encode",
    "encrypt",
    "generate_keypair",
]
