# Package initialization for wordle_helper
from wordle_helper.candidate_ranker import Candidate, CandidateRanker, RankingPolicy
from wordle_helper.filter import ConstraintError, Constraints, Filter
from wordle_helper.solver import find_candidates
from wordle_helper.tokenizer import Token, tokenize
from wordle_helper.weighting import WeightingTable

__all__ = [
    "Candidate",
    "CandidateRanker",
    "ConstraintError",
    "Constraints",
    "Filter",
    "RankingPolicy",
    "Token",
    "WeightingTable",
    "find_candidates",
    "tokenize",
]
