"""
passforge.random_source
Cryptographically secure integer source backed by the secrets module.
"""

import secrets
from typing import Sequence, TypeVar

from .errors import InvalidArgument

T = TypeVar("T")


class SecureRandomSource:
    """
    Uniform integers in [0, bound) from the operating system CSPRNG.

    There is no seed: every instance draws from ``secrets``, which is safe to
    share between threads. Generators still create one instance per call.
    """

    def next_int(self, bound: int) -> int:
        if isinstance(bound, bool) or not isinstance(bound, int):
            raise InvalidArgument("Bound must be an integer")
        if bound <= 0:
            raise InvalidArgument("Bound must be positive")
        return secrets.randbelow(bound)

    def choice(self, seq: Sequence[T]) -> T:
        """Pick one element of a non-empty sequence."""
        return seq[self.next_int(len(seq))]
