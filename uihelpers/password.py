"""Random password generation.

Passwords always contain at least one letter, one digit and one special
character. Randomness defaults to the operating system CSPRNG; pass an
explicit ``random.Random`` to get reproducible output in tests.
"""

import random
import secrets

LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
DIGITS = "0123456789"
SPECIAL_CHARS = "$!@%"
ALL_CHARS = LETTERS + DIGITS + SPECIAL_CHARS

MIN_LENGTH = 8

_system_random = secrets.SystemRandom()


class InvalidLength(ValueError):
    """Raised when a password shorter than the minimum is requested."""

    def __init__(self, length: int, minimum: int = MIN_LENGTH):
        self.length: int = length
        self.minimum: int = minimum
        super().__init__(
            f"Password length must be at least {minimum} characters. Got {length}."
        )


def generate_password(
    length: int = MIN_LENGTH, *, rng: random.Random | None = None
) -> str:
    """Generate a random password of exactly ``length`` characters.

    One character from each class is placed first, the rest are sampled
    with replacement from the union of all classes, and the whole sequence
    is shuffled so the guaranteed characters land at random positions.

    Raises:
        InvalidLength: If ``length`` is below 8
        TypeError: If ``length`` is not an integer
    """
    if isinstance(length, bool) or not isinstance(length, int):
        raise TypeError(
            f"Password length must be an int.\n"
            f"Got {type(length).__name__!r}: {length!r}\n"
            f"Hint: Convert before generating:\n"
            f"  generate_password(int(raw_length))"
        )
    if length < MIN_LENGTH:
        raise InvalidLength(length)

    rng = rng or _system_random

    chars = [rng.choice(LETTERS), rng.choice(DIGITS), rng.choice(SPECIAL_CHARS)]
    chars.extend(rng.choices(ALL_CHARS, k=length - len(chars)))
    rng.shuffle(chars)

    return "".join(chars)
