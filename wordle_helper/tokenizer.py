import re
from dataclasses import dataclass, field
from typing import Iterator

_WORD_RE = re.compile(rb"\S+")


@dataclass(frozen=True)
class Token:
    """
    A word in the corpus, held as a view rather than a copy.

    - corpus: The full dictionary buffer the word was found in
    - offset: Index of the first byte of the word
    - length: Number of bytes in the word
    """
    corpus: bytes = field(repr=False, compare=False)
    offset: int
    length: int

    def __len__(self) -> int:
        return self.length

    def __repr__(self) -> str:
        return f"Token({self.text!r}, offset={self.offset})"

    @property
    def raw(self) -> memoryview:
        return memoryview(self.corpus)[self.offset:self.offset + self.length]

    def lower(self) -> bytes:
        return bytes(self.raw).lower()

    @property
    def text(self) -> str:
        return bytes(self.raw).decode("utf-8", errors="replace")


def tokenize(corpus: bytes) -> Iterator[Token]:
    """
    Lazily splits the corpus into whitespace-delimited tokens, in corpus order.

    Casing is left untouched. Trailing whitespace ends the sequence without producing an empty token.

    Args:
        corpus (bytes): The full dictionary contents.

    Returns:
        Iterator[Token]: Tokens in the order they appear in the corpus.
    """
    for match in _WORD_RE.finditer(corpus):
        yield Token(corpus, match.start(), match.end() - match.start())
