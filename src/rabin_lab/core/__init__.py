from .interfaces import RabinCipherInterface

from .models import (
    RabinKey,
    RabinPublicKey,
    RoundTripSample,
)

__all__ = [
    "RabinCipherInterface",
    "RabinKey",
    "RabinPublicKey",
    "RoundTripSample",
]
