import argparse
import logging

from rabin_lab import decode, decrypt, encode, encrypt, generate_keypair

logger = logging.getLogger("rabin_demo")


def main():
    parser = argparse.ArgumentParser(description="Encrypt and decrypt one message with a fresh Rabin keypair.")
    parser.add_argument('--bits', type=int, default=512, help="Bit length of each prime.")
    parser.add_argument('--message', type=int, default=42, help="Integer message to encrypt.")
    parser.add_argument('--text', help="Text to encode and encrypt instead of --message.")
    parser.add_argument('--seed', type=int, default=None, help="Random seed for a reproducible keypair.")
    parser.add_argument('--log-level', default="INFO", help="Logging level (DEBUG, INFO, ...).")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s: %(message)s")
    logger.info("Naive Rabin cryptosystem demonstration")

    key = generate_keypair(args.bits, seed=args.seed)
    message = encode(args.text) if args.text is not None else args.message
    if message >= key.n:
        logger.warning("Message is not smaller than n and will alias another plaintext")

    ciphertext = encrypt(message, key.n)
    candidates = decrypt(ciphertext, key.p, key.q)

    logger.info("Public key (n): %d", key.n)
    logger.info("Message: %d", message)
    logger.info("Ciphertext: %d", ciphertext)
    logger.info("Plaintext candidates: %s", list(candidates))
    if args.text is not None:
        logger.info("Decoded candidates: %s", [decode(c) for c in candidates])


if __name__ == '__main__':
    main()
