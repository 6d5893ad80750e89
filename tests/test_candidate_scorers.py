import pytest

from wordle_helper.candidate_scorers import LETTER_FREQUENCY, PositionalScorer, score
from wordle_helper.tokenizer import tokenize
from wordle_helper.weighting import WeightingTable


def token(word: str):
    return next(tokenize(word.encode()))


def test_letter_frequency_table():
    assert len(LETTER_FREQUENCY) == 26
    assert LETTER_FREQUENCY[ord("e") - ord("a")] == 13
    assert LETTER_FREQUENCY[ord("t") - ord("a")] == 9
    assert LETTER_FREQUENCY[ord("z") - ord("a")] == 0


def test_score_weights_letters_by_position(make_table):
    table = make_table(b"abc", 3)

    assert score(token("abc"), table) == 8 + 1 + 3
    assert score(token("ABC"), table) == 12
    assert score(token("cba"), table) == 1


def test_repeated_letters_are_penalized(make_table):
    table = make_table(b"eee", 3)

    assert score(token("eee"), table) == 13 * 3 - 2 * 2


def test_score_truncates_toward_zero(make_table):
    table = make_table(b"ab ac", 2)
    assert score(token("ab"), table) == 8
    assert score(token("ac"), table) == 9

    table = make_table(b"bb cd cd cd", 2)
    assert score(token("bb"), table) == -1


def test_empty_table_scores_only_penalties():
    table = WeightingTable(5)
    table.normalize(0)

    assert score(token("crane"), table) == 0
    assert score(token("geese"), table) == -4


def test_positional_scorer_is_a_key_function(make_table):
    table = make_table(b"ab ac ad", 2)
    scorer = PositionalScorer(table)
    tokens = list(tokenize(b"ab ac ad"))

    assert [scorer(t) for t in tokens] == [8, 9, 9]
    assert max(tokens, key=scorer).text == "ac"


def test_positional_scorer_needs_a_normalized_table():
    with pytest.raises(ValueError):
        PositionalScorer(WeightingTable(5))
