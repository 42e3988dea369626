"""Password generation for fixed character-class policies.

A password is built in three steps when category coverage is enforced: one
character is drawn from each category of the policy, the rest is filled from
the policy's union alphabet, and the buffer is shuffled so the mandatory
characters do not sit at predictable positions. Without coverage, characters
are drawn independently from the union alphabet.

Randomness comes from a `RandomSource`; the default uses `secrets`.
"""

from __future__ import annotations

import logging
import random
import secrets
import string
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Protocol, Tuple

from common.exceptions import InvalidRequest

logger = logging.getLogger(__name__)


LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
DIGITS = string.digits
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"


class CharacterClassPolicy(str, Enum):
    """Which character classes a password may contain."""

    STANDARD = "standard"
    ALPHABETIC_ONLY = "alphabets-only"
    NUMERIC_ONLY = "numbers-only"
    ALPHANUMERIC = "alphanumeric"

    @property
    def categories(self) -> Tuple[str, ...]:
        """Category alphabets in the order mandatory characters are drawn."""
        return POLICY_CATEGORIES[self]

    @property
    def alphabet(self) -> str:
        """Union of all category alphabets."""
        return "".join(self.categories)

    @property
    def mandatory_count(self) -> int:
        return len(self.categories)


POLICY_CATEGORIES: Dict[CharacterClassPolicy, Tuple[str, ...]] = {
    CharacterClassPolicy.STANDARD: (LOWERCASE, UPPERCASE, DIGITS, SYMBOLS),
    CharacterClassPolicy.ALPHABETIC_ONLY: (LOWERCASE, UPPERCASE),
    CharacterClassPolicy.NUMERIC_ONLY: (DIGITS,),
    CharacterClassPolicy.ALPHANUMERIC: (LOWERCASE, UPPERCASE, DIGITS),
}


@dataclass(frozen=True)
class GenerationRequest:
    length: int
    policy: CharacterClassPolicy = CharacterClassPolicy.STANDARD
    enforce_coverage: bool = True


class RandomSource(Protocol):
    """Anything that yields uniform integers in ``[0, n)``."""

    def randbelow(self, n: int) -> int: ...


class SystemRandomSource:
    """Cryptographically strong source backed by `secrets`."""

    def randbelow(self, n: int) -> int:
        return secrets.randbelow(n)


class SeededRandomSource:
    """Reproducible source for tests and demos. Not suitable for real secrets."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._random = random.Random(seed)

    def randbelow(self, n: int) -> int:
        return self._random.randrange(n)


def pick(alphabet: str, rng: RandomSource) -> str:
    return alphabet[rng.randbelow(len(alphabet))]


def validate_request(request: GenerationRequest) -> None:
    """Reject requests that cannot produce a password of the asked length.

    Raises:
        InvalidRequest: On negative length, an empty or duplicated alphabet,
            or a length shorter than the mandatory coverage count.
    """
    if request.length < 0:
        raise InvalidRequest(f"length must be >= 0, got {request.length}")

    for category in request.policy.categories:
        if not category:
            raise InvalidRequest(f"policy {request.policy.value} has an empty alphabet")
        if len(set(category)) != len(category):
            raise InvalidRequest(
                f"policy {request.policy.value} has duplicate characters in {category!r}"
            )

    needed = request.policy.mandatory_count
    if request.enforce_coverage and request.length < needed:
        raise InvalidRequest(
            f"length must be >= {needed} for policy {request.policy.value} "
            "when coverage is enforced"
        )


def seed_mandatory(policy: CharacterClassPolicy, rng: RandomSource) -> List[str]:
    """Draw one character from each category of the policy, in table order."""
    return [pick(category, rng) for category in policy.categories]


def fill_remaining(
    chars: List[str], alphabet: str, length: int, rng: RandomSource
) -> List[str]:
    """Append uniform draws from `alphabet` until `chars` holds `length` items."""
    while len(chars) < length:
        chars.append(pick(alphabet, rng))
    return chars


def shuffle_in_place(chars: List[str], rng: RandomSource) -> List[str]:
    """Fisher-Yates shuffle driven by `rng`."""
    for i in range(len(chars) - 1, 0, -1):
        j = rng.randbelow(i + 1)
        chars[i], chars[j] = chars[j], chars[i]
    return chars


def generate(request: GenerationRequest, rng: Optional[RandomSource] = None) -> str:
    """Generate one password satisfying `request`.

    Args:
        request: Length, policy and coverage flag
        rng: Random source (defaults to `SystemRandomSource`)

    Returns:
        Password of exactly `request.length` characters

    Raises:
        InvalidRequest: If the request cannot be satisfied
    """
    validate_request(request)
    if rng is None:
        rng = SystemRandomSource()
    alphabet = request.policy.alphabet

    if not request.enforce_coverage:
        return "".join(pick(alphabet, rng) for _ in range(request.length))

    chars = seed_mandatory(request.policy, rng)
    fill_remaining(chars, alphabet, request.length, rng)
    shuffle_in_place(chars, rng)
    logger.debug(
        f"Generated {request.policy.value} password of length {len(chars)} "
        f"({request.policy.mandatory_count} mandatory)"
    )
    return "".join(chars)
