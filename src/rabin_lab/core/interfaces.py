from abc import ABC, abstractmethod
from typing import List, Tuple

from rabin_lab.utils.encoding import DEFAULT_ALPHABET, decode, encode
from .models import RabinPublicKey, RabinKey


class RabinCipherInterface(ABC):
    """
    Abstract interface for Rabin cryptosystem implementations.

    This contract requires implementing integer encryption and decryption.
    It provides concrete text helpers built on top of them, since a text is
    only an encoded integer from the cipher's point of view.
    """
    @abstractmethod
    def encrypt(self, message: int, public_key: RabinPublicKey) -> int:
        """
        Encrypts the given message using the public key.

        Args:
            message (int): The message to encrypt (should be < n).
            public_key (RabinPublicKey): The Rabin public key to use.

        Returns:
            int: The ciphertext.
        """
        pass

    @abstractmethod
    def decrypt(self, ciphertext: int, private_key: RabinKey) -> Tuple[int, int, int, int]:
        """
        Decrypts the given ciphertext using the private key.

        Args:
            ciphertext (int): The ciphertext to decrypt.
            private_key (RabinKey): The Rabin keypair to use.

        Returns:
            (int, int, int, int): The four square roots of the ciphertext mod n.
            Choosing the actual plaintext among them is up to the caller.
        """
        pass

    def encrypt_text(self, text: str, public_key: RabinPublicKey, alphabet: str = DEFAULT_ALPHABET) -> int:
        """
        Encodes the text with the given alphabet and encrypts the resulting integer.

        Args:
            text (str): The text to encrypt. Its encoding should be < n.
            public_key (RabinPublicKey): The Rabin public key to use.
            alphabet (str): The symbol set used for encoding.

        Returns:
            int: The ciphertext.
        """
        return self.encrypt(encode(text, alphabet), public_key)

    def decrypt_text(self, ciphertext: int, private_key: RabinKey, alphabet: str = DEFAULT_ALPHABET) -> List[str]:
        """
        Decrypts the ciphertext and decodes every candidate with the given alphabet.

        Returns:
            List[str]: The four decoded candidates, in decryption order.
        """
        return [decode(candidate, alphabet) for candidate in self.decrypt(ciphertext, private_key)]

    def recovers(self, message: int, ciphertext: int, private_key: RabinKey) -> bool:
        """Returns True if the message is among the decryption candidates of the ciphertext."""
        return message in self.decrypt(ciphertext, private_key)
