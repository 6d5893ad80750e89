import pytest

from wordle_helper.weighting import ALPHABET_SIZE, WeightingTable, letter_index


def test_letter_index():
    assert letter_index(ord("a")) == 0
    assert letter_index(ord("Z")) == 25
    assert letter_index(ord("_")) == -1
    assert letter_index(ord("1")) == -1


def test_frequencies_are_relative_to_token_count(make_table):
    table = make_table(b"ab ac Ad bd", 2)

    assert table.frequency("a", 0) == pytest.approx(0.75)
    assert table.frequency("b", 0) == pytest.approx(0.25)
    assert table.frequency("d", 1) == pytest.approx(0.5)
    assert table.frequency("z", 1) == 0.0


def test_columns_sum_to_one(make_table):
    table = make_table(b"crane trace brown apple aptly", 5)

    for position in range(5):
        assert table.column_sum(position) == pytest.approx(1.0)


def test_non_letters_are_not_counted(make_table):
    table = make_table(b"a1 ab", 2)

    assert table.column_sum(0) == pytest.approx(1.0)
    assert table.column_sum(1) == pytest.approx(0.5)


def test_empty_population_stays_zero(make_table):
    table = make_table(b"apple applet", 3)

    assert table.normalized
    for position in range(3):
        assert table.column_sum(position) == 0.0
    assert all(table[letter, 0] == 0.0 for letter in range(ALPHABET_SIZE))


def test_frequency_rejects_non_letters():
    with pytest.raises(ValueError):
        WeightingTable(5).frequency("_", 0)
