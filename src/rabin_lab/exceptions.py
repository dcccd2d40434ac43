class InvalidCharacterError(ValueError):
    """
    Raised when a text contains a symbol that is not part of the alphabet.

    Attributes:
        character (str): The offending character.
        position (int): Its 0-based index in the encoded text.
    """

    def __init__(self, character: str, position: int):
        self.character = character
        self.position = position
        super().__init__(f"Invalid character '{character}' at position {position}")


class InvalidModulusError(ValueError):
    """Raised when a modulus or prime factor is not strictly positive."""


class PrimeGenerationError(RuntimeError):
    """Raised when a bounded prime search runs out of attempts."""
