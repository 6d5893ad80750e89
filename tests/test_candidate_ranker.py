import pytest

from wordle_helper.candidate_ranker import Candidate, CandidateRanker, RankingPolicy
from wordle_helper.tokenizer import tokenize


def words(candidates: list[Candidate]) -> list[str]:
    return [c.word for c in candidates]


def test_best_sorts_by_descending_score_with_stable_ties(make_table):
    table = make_table(b"ab ac ad", 2)
    ranked = CandidateRanker(RankingPolicy.BEST, table).rank(tokenize(b"ab ac ad"))

    assert words(ranked) == ["ac", "ad", "ab"]
    assert [c.score for c in ranked] == [9, 9, 8]


def test_best_requires_a_table():
    with pytest.raises(ValueError):
        CandidateRanker(RankingPolicy.BEST).rank(tokenize(b"ab ac"))


def test_alphabetical_ignores_case_and_corpus_order():
    ranker = CandidateRanker(RankingPolicy.ALPHABETICAL)

    assert words(ranker.rank(tokenize(b"Crane apple Bread"))) == ["apple", "Bread", "Crane"]
    assert words(ranker.rank(tokenize(b"Bread Crane apple"))) == ["apple", "Bread", "Crane"]


def test_corpus_order_is_discovery_order():
    ranked = CandidateRanker().rank(tokenize(b"zebra apple mango"))

    assert words(ranked) == ["zebra", "apple", "mango"]
    assert all(c.score is None for c in ranked)


def test_with_scores_keeps_policy_order(make_table):
    table = make_table(b"ab ac ad", 2)
    ranked = CandidateRanker(RankingPolicy.CORPUS, table).rank(tokenize(b"ab ac ad"), with_scores=True)

    assert words(ranked) == ["ab", "ac", "ad"]
    assert [c.score for c in ranked] == [8, 9, 9]


def test_truncation():
    corpus = b" ".join(bytes([97 + i]) * 3 for i in range(15))
    ranker = CandidateRanker()

    assert len(ranker.rank(tokenize(corpus))) == 10
    assert len(ranker.rank(tokenize(corpus), n=3)) == 3
    assert len(ranker.rank(tokenize(corpus), n=-1)) == 15
    assert ranker.rank([], n=10) == []
