"""Short code generation utilities."""

import random
import string
import time
from typing import Optional


class ShortCodeGenerator:
    """Generate random short codes for URLs."""

    # Base62 characters (alphanumeric, case-sensitive)
    BASE62_CHARS = string.ascii_letters + string.digits  # a-zA-Z0-9

    def __init__(self, default_length: int = 6, secure: bool = False):
        """Initialize short code generator.

        Args:
            default_length: Default length for generated codes
            secure: Draw from the OS CSPRNG instead of a clock-seeded PRNG
        """
        if default_length < 1:
            raise ValueError("default_length must be at least 1")

        self.default_length = default_length
        self.secure = secure

        if secure:
            self._rng = random.SystemRandom()
        else:
            self._rng = random.Random(time.time_ns())

    def generate_random(self, length: Optional[int] = None) -> str:
        """Generate a random short code.

        Characters are drawn uniformly, with replacement. The result is a
        candidate only; callers must handle collisions.

        Args:
            length: Length of the code (uses default if not specified)

        Returns:
            Random short code
        """
        length = length or self.default_length
        return ''.join(self._rng.choices(self.BASE62_CHARS, k=length))

    @staticmethod
    def is_valid_format(code: str) -> bool:
        """Check if code only uses the base62 alphabet.

        Args:
            code: Code to validate

        Returns:
            True if valid format
        """
        return bool(code) and all(c in ShortCodeGenerator.BASE62_CHARS for c in code)
