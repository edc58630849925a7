"""Id generators for screens and elements.

Generators only promise short tokens; uniqueness within a document is
enforced by ``unique_id``, which draws until the candidate is unused.
"""

import itertools
import secrets
import string
from abc import ABC, abstractmethod
from collections.abc import Container

BASE36_ALPHABET = string.digits + string.ascii_lowercase
DEFAULT_TOKEN_LENGTH = 7
MAX_ID_ATTEMPTS = 1000


class IdGenerator(ABC):
    """Abstract source of short id tokens."""

    @abstractmethod
    def new_id(self) -> str:
        """Produce a new token."""
        pass


class RandomIdGenerator(IdGenerator):
    """Random base-36 tokens, e.g. ``k3f9a0z``."""

    def __init__(self, length: int = DEFAULT_TOKEN_LENGTH):
        if length < 1:
            raise ValueError("Token length must be positive")
        self.length = length

    def new_id(self) -> str:
        return "".join(secrets.choice(BASE36_ALPHABET) for _ in range(self.length))


class SequentialIdGenerator(IdGenerator):
    """Deterministic counter tokens (``1``, ``2``, ...), useful for tests and scripting."""

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)

    def new_id(self) -> str:
        return str(next(self._counter))


def unique_id(generator: IdGenerator, prefix: str, taken: Container[str]) -> str:
    """
    Draw ``prefix + token`` ids until one is not taken.

    Args:
        generator: Token source
        prefix: Id prefix such as ``"screen_"``
        taken: Ids already used in the document

    Returns:
        An id not contained in ``taken``

    Raises:
        RuntimeError: If the generator keeps producing taken ids
    """
    for _ in range(MAX_ID_ATTEMPTS):
        candidate = f"{prefix}{generator.new_id()}"
        if candidate not in taken:
            return candidate
    raise RuntimeError(f"Id generator exhausted after {MAX_ID_ATTEMPTS} attempts")
