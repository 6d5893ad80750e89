from wordle_helper.tokenizer import Token
from wordle_helper.weighting import ALPHABET_SIZE, WeightingTable, letter_index

# Rough English letter frequencies, a to z
LETTER_FREQUENCY = (
    8, 1, 3, 4, 13, 2, 2, 6, 7, 0, 1, 4, 2,
    7, 8, 2, 0, 6, 6, 9, 3, 1, 2, 0, 2, 0,
)
REPEAT_PENALTY = 2


def score(token: Token, table: WeightingTable) -> int:
    """
    Scores a word by how common its letters are in the positions they occupy.

    Each letter contributes its English frequency multiplied by the letter's positional weighting in the table.
    Every extra occurrence of an already-seen letter costs REPEAT_PENALTY, since duplicate letters waste
    information in a guess. The total is truncated toward zero.

    Args:
        token (Token): The candidate word to score.
        table (WeightingTable): Normalized positional weightings for the target length.

    Returns:
        int: The word's score.
    """
    total = 0.0
    letter_counts = [0] * ALPHABET_SIZE

    for i, byte in enumerate(token.raw):
        index = letter_index(byte)
        if index < 0:
            continue
        letter_counts[index] += 1
        total += LETTER_FREQUENCY[index] * table[index, i]

    for count in letter_counts:
        if count > 1:
            total -= REPEAT_PENALTY * (count - 1)

    return int(total)


class PositionalScorer:

    """
    Scores candidate words against one weighting table. Instances are callable, so they can be used directly as
    a sort key.
    """

    def __init__(self, table: WeightingTable):
        if not table.normalized:
            raise ValueError("Weighting table must be normalized before scoring.")
        self.table = table

    def __call__(self, token: Token) -> int:
        return self.score(token)

    def score(self, token: Token) -> int:
        return score(token, self.table)
