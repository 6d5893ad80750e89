from collections import Counter
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional

from wordle_helper.tokenizer import Token
from wordle_helper.weighting import letter_index

WILDCARD = "_"
DEFAULT_LENGTH = 5

Predicate = Callable[[Token], bool]


class ConstraintError(ValueError):
    """Raised when a set of constraints cannot be built from the given arguments."""


@dataclass(frozen=True)
class Constraints:
    """
    Restrictions a word must satisfy to be a candidate.

    - length: Target word length
    - required: Letters the word must contain, counted with multiplicity ("ee" needs two e's)
    - forbidden: Letters the word must not contain
    - pattern: One character per position, either a letter or "_" for any letter

    Blank letter strings mean "no constraint". A pattern of None means no pattern; an empty pattern is
    rejected like any other of the wrong length.
    """
    length: int = DEFAULT_LENGTH
    required: str = ""
    forbidden: str = ""
    pattern: Optional[str] = None

    def __post_init__(self):
        if self.length <= 0:
            raise ConstraintError(f"Word length must be positive, got {self.length}")
        for name, letters in (("required", self.required), ("forbidden", self.forbidden)):
            if letters and not (letters.isascii() and letters.isalpha()):
                raise ConstraintError(f"{name.capitalize()} letters must be alphabetic: {letters!r}")
        if self.pattern is not None and (
            len(self.pattern) != self.length
            or not all(ch == WILDCARD or (ch.isascii() and ch.isalpha()) for ch in self.pattern)
        ):
            raise ConstraintError(
                f"Pattern must be of length {self.length} and only contain underscores and/or letters: "
                f"{self.pattern!r}"
            )


def _letter_counts(token: Token) -> list[int]:
    counts = [0] * 26
    for byte in token.raw:
        index = letter_index(byte)
        if index >= 0:
            counts[index] += 1
    return counts


def matches_length(token: Token, length: int) -> bool:
    return len(token) == length


def contains_required(token: Token, required: str) -> bool:
    """
    Checks that the token holds at least as many of each letter as the required string does, ignoring case.
    """
    counts = _letter_counts(token)
    for letter, needed in Counter(required.lower()).items():
        if counts[ord(letter) - ord("a")] < needed:
            return False
    return True


def excludes_forbidden(token: Token, forbidden: str) -> bool:
    """
    Checks that the token shares no letter with the forbidden string, ignoring case.
    """
    banned = set(forbidden.lower().encode("ascii"))
    return not any(byte in banned for byte in token.lower())


def matches_pattern(token: Token, pattern: str) -> bool:
    """
    Checks the token against a positional pattern.

    Every non-wildcard position of the pattern must equal the token's byte exactly. This comparison is
    case-sensitive, unlike the letter containment checks.
    """
    if len(token) != len(pattern):
        return False
    raw = token.raw
    for i, ch in enumerate(pattern):
        if ch == WILDCARD:
            continue
        if raw[i] != ord(ch):
            return False
    return True


class Filter:

    def __init__(self, constraints: Constraints):
        """
        Builds the predicate pipeline for a set of constraints.

        Only active constraints get a predicate. They are checked in the order length, required, forbidden,
        pattern, stopping at the first failure.

        Args:
            constraints (Constraints): The constraints candidates must satisfy.
        """
        self.constraints = constraints
        self.predicates: list[Predicate] = [lambda token: matches_length(token, constraints.length)]

        if constraints.required:
            self.predicates.append(lambda token: contains_required(token, constraints.required))
        if constraints.forbidden:
            self.predicates.append(lambda token: excludes_forbidden(token, constraints.forbidden))
        if constraints.pattern is not None:
            self.predicates.append(lambda token: matches_pattern(token, constraints.pattern))

    def __str__(self) -> str:
        return f"""
        Length: {self.constraints.length}
        With: {self.constraints.required or '-'}
        Without: {self.constraints.forbidden or '-'}
        Pattern: {self.constraints.pattern or '-'}
        """

    @property
    def length(self) -> int:
        return self.constraints.length

    def accepts(self, token: Token) -> bool:
        return all(predicate(token) for predicate in self.predicates)

    def candidates(self, tokens: Iterable[Token]) -> Iterator[Token]:
        """
        Yields the tokens that satisfy every constraint, preserving their order.

        Args:
            tokens (Iterable[Token]): The tokens to filter.

        Returns:
            Iterator[Token]: The tokens that passed.
        """
        for token in tokens:
            if self.accepts(token):
                yield token
