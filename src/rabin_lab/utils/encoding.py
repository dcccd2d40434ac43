"""
Bijective mapping between texts over a symbol alphabet and non-negative integers.

A text is read as a number written in base len(alphabet), most significant digit
first, where each symbol's index in the alphabet is its digit value. Leading
symbols of index 0 are therefore lost on a round trip: "0xy" and "xy" encode to
the same integer.
"""
import functools
import logging
from typing import Dict

from rabin_lab.exceptions import InvalidCharacterError

logger = logging.getLogger(__name__)

DEFAULT_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz(.,;:!?)[<+-*/=>]@| "


@functools.lru_cache(maxsize=32)
def _digit_table(alphabet: str) -> Dict[str, int]:
    """Builds the symbol -> digit lookup for an alphabet, validating it on the way."""
    if len(alphabet) < 2:
        raise ValueError("Alphabet must contain at least two symbols.")

    table = {}
    for index, symbol in enumerate(alphabet):
        if symbol in table:
            raise ValueError(f"Alphabet contains duplicate symbol '{symbol}'.")
        table[symbol] = index
    return table


def encode(text: str, alphabet: str = DEFAULT_ALPHABET) -> int:
    """
    Encodes a text as an integer in base len(alphabet).

    Args:
        text (str): The text to encode. The empty string encodes to 0.
        alphabet (str): Ordered, duplicate-free symbol set.

    Returns:
        int: The encoded number.

    Raises:
        InvalidCharacterError: On the first character missing from the alphabet.
        ValueError: If the alphabet is invalid.
    """
    table = _digit_table(alphabet)
    base = len(alphabet)

    number = 0
    for position, character in enumerate(text):
        digit = table.get(character)
        if digit is None:
            raise InvalidCharacterError(character, position)
        number = number * base + digit
    return number


def decode(number: int, alphabet: str = DEFAULT_ALPHABET) -> str:
    """
    Decodes a non-negative integer back into a text over the alphabet.

    Args:
        number (int): The number to decode.
        alphabet (str): Ordered, duplicate-free symbol set.

    Returns:
        str: The decoded text. Zero decodes to alphabet[0].

    Raises:
        ValueError: If the number is negative or the alphabet is invalid.
    """
    _digit_table(alphabet)
    if number < 0:
        raise ValueError("Number to decode cannot be negative.")

    logger.debug("Decoding number %d with a %d symbols alphabet", number, len(alphabet))

    if number == 0:
        return alphabet[0]

    base = len(alphabet)
    digits = []
    while number > 0:
        number, remainder = divmod(number, base)
        digits.append(alphabet[remainder])
    return "".join(reversed(digits))
