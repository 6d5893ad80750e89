from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from wordle_helper.candidate_scorers import PositionalScorer
from wordle_helper.tokenizer import Token
from wordle_helper.weighting import WeightingTable

DEFAULT_CANDIDATE_NUMBER = 10


class RankingPolicy(Enum):
    """How the surviving candidates are ordered"""
    BEST = "best"
    ALPHABETICAL = "alpha"
    CORPUS = "corpus"


@dataclass(frozen=True)
class Candidate:
    """
    A word that passed every filter.

    - token: The word as it appears in the corpus
    - score: Positional score, or None when the word was never scored
    """
    token: Token
    score: Optional[int] = None

    @property
    def word(self) -> str:
        return self.token.text


class CandidateRanker:

    def __init__(self, policy: RankingPolicy = RankingPolicy.CORPUS, table: Optional[WeightingTable] = None):
        """
        Initializes the CandidateRanker with a ranking policy.

        Args:
            policy (RankingPolicy, optional): The ordering to apply. Defaults to corpus order.
            table (Optional[WeightingTable], optional): Normalized weightings, needed whenever scores are computed.
        """
        self.policy = policy
        self.table = table
        self.scorer = PositionalScorer(table) if table is not None else None

    def _score(self, candidates: list[Candidate]) -> list[Candidate]:
        if self.scorer is None:
            raise ValueError("A weighting table is required to score candidates.")
        return [Candidate(c.token, self.scorer(c.token)) for c in candidates]

    def rank(self, candidates: Iterable[Token | Candidate], n: int = DEFAULT_CANDIDATE_NUMBER,
             with_scores: bool = False) -> list[Candidate]:
        """
        Orders the candidates under the ranking policy and keeps the first n.

        Best-score ranking sorts by descending score, alphabetical ranking sorts by case-insensitive bytes, and
        corpus ranking leaves discovery order alone. Both sorts are stable, so ties keep corpus order.

        Args:
            candidates (Iterable[Token | Candidate]): Candidates in discovery order.
            n (int): The number of candidates to return. -1 returns all candidates.
            with_scores (bool): Score candidates even when the policy does not need it.

        Returns:
            list[Candidate]: The ranked candidates.
        """
        ranked = [c if isinstance(c, Candidate) else Candidate(c) for c in candidates]

        if self.policy is RankingPolicy.BEST or with_scores:
            ranked = self._score(ranked)

        if self.policy is RankingPolicy.BEST:
            ranked.sort(key=lambda c: c.score, reverse=True)
        elif self.policy is RankingPolicy.ALPHABETICAL:
            ranked.sort(key=lambda c: c.token.lower())

        if n == -1:
            return ranked
        return ranked[:n]
