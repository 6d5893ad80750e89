from wordle_helper.tokenizer import Token

ALPHABET_SIZE = 26
_A = ord("a")


def letter_index(byte: int) -> int:
    """
    Returns the 0-25 alphabet index of an ASCII letter byte (either case), or -1 for anything else.
    """
    if 65 <= byte <= 90:
        byte += 32
    if 97 <= byte <= 122:
        return byte - _A
    return -1


class WeightingTable:

    """
    Per-letter, per-position frequency statistics over every corpus word of the target length.

    Counts are accumulated one token at a time and then normalized once, after which the table is only read.
    Weightings come from the whole same-length population rather than the filtered candidates, so that they
    reflect how common a letter is in a position across the dictionary.
    """

    def __init__(self, length: int):
        self.length = length
        self._cells = [[0.0] * length for _ in range(ALPHABET_SIZE)]
        self._normalized = False

    def __getitem__(self, key: tuple[int, int]) -> float:
        letter, position = key
        return self._cells[letter][position]

    def accumulate(self, token: Token) -> None:
        """
        Adds one token's letters to the counts. Non-letter bytes are skipped.

        Args:
            token (Token): A token whose length equals the table length.
        """
        for i, byte in enumerate(token.raw):
            index = letter_index(byte)
            if index >= 0:
                self._cells[index][i] += 1

    def normalize(self, total: int) -> None:
        """
        Converts the counts into relative frequencies by dividing every cell by total.

        A total of 0 leaves the table at all zeros, so every word then scores 0.

        Args:
            total (int): Number of tokens that were accumulated.
        """
        self._normalized = True
        if total == 0:
            return
        for row in self._cells:
            for i in range(self.length):
                row[i] /= total

    @property
    def normalized(self) -> bool:
        return self._normalized

    def frequency(self, letter: str, position: int) -> float:
        index = letter_index(ord(letter))
        if index < 0:
            raise ValueError(f"Not a letter: {letter!r}")
        return self._cells[index][position]

    def column_sum(self, position: int) -> float:
        return sum(row[position] for row in self._cells)
