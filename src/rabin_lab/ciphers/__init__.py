from .naive_rabin import NaiveRabin

__all__ = [
    "NaiveRabin",
]
