import random
from typing import List, NamedTuple, Optional

from strength import DIGITS, LOWERCASE, SYMBOLS, UPPERCASE, StrengthLevel


class GenerationPolicy(NamedTuple):
    min_length: int
    max_length: int
    charset: str

    @property
    def lengths(self) -> range:
        return range(self.min_length, self.max_length + 1)


POLICIES = {
    # 4-7 chars, lowercase only
    StrengthLevel.LOW: GenerationPolicy(4, 7, LOWERCASE),
    # 8-10 chars, lowercase + uppercase + digits
    StrengthLevel.INTERMEDIATE: GenerationPolicy(8, 10, UPPERCASE + LOWERCASE + DIGITS),
    # 12-16 chars, mixed complexity
    StrengthLevel.STRONG: GenerationPolicy(12, 16, UPPERCASE + LOWERCASE + DIGITS + SYMBOLS),
}


def _policy(level) -> GenerationPolicy:
    if not isinstance(level, StrengthLevel):
        raise TypeError(f"level must be a StrengthLevel, got {type(level).__name__}")
    return POLICIES[level]


def generate(level: StrengthLevel, rng: Optional[random.Random] = None) -> str:
    """
    Random password for the given tier.
    Length is uniform over the tier's range and every character is drawn
    independently from the tier's charset. Without an rng a fresh
    random.Random() is used for this call only.
    """
    policy = _policy(level)
    if rng is None:
        rng = random.Random()

    length = rng.randint(policy.min_length, policy.max_length)
    return ''.join(rng.choice(policy.charset) for _ in range(length))


def generate_many(level: StrengthLevel, count: int, rng: Optional[random.Random] = None) -> List[str]:
    """Generate several passwords from one random source."""
    if count < 1:
        raise ValueError("count must be at least 1")
    if rng is None:
        rng = random.Random()
    return [generate(level, rng) for _ in range(count)]


def keyspace_size(level: StrengthLevel) -> int:
    """Number of distinct passwords the tier's policy can produce."""
    policy = _policy(level)
    base = len(policy.charset)
    return sum(base ** n for n in policy.lengths)
