import pytest

from wordle_helper.tokenizer import tokenize
from wordle_helper.weighting import WeightingTable


@pytest.fixture
def make_table():
    """Builds a normalized weighting table from every corpus word of the given length."""
    def build(corpus: bytes, length: int) -> WeightingTable:
        table = WeightingTable(length)
        count = 0
        for token in tokenize(corpus):
            if len(token) == length:
                table.accumulate(token)
                count += 1
        table.normalize(count)
        return table
    return build
