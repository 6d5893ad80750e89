import logging
from typing import Sequence

from rich.console import Console

from wordle_helper.candidate_ranker import DEFAULT_CANDIDATE_NUMBER, Candidate, CandidateRanker, RankingPolicy
from wordle_helper.filter import Constraints, Filter
from wordle_helper.tokenizer import tokenize
from wordle_helper.utils import (
    CorpusError,
    constraints_from_args,
    format_candidates,
    load_corpus,
    parse_args,
    ranking_policy,
    scores_table,
    setup_logging,
)
from wordle_helper.weighting import WeightingTable

logger = logging.getLogger(__name__)


def find_candidates(corpus: bytes, constraints: Constraints, policy: RankingPolicy = RankingPolicy.CORPUS,
                    n: int = DEFAULT_CANDIDATE_NUMBER, with_scores: bool = False) -> list[Candidate]:
    """
    Runs the whole pipeline over a corpus and returns the ranked shortlist.

    A single pass over the corpus does two things. Every token of the target length is counted into the
    weighting table, whatever the other constraints say. Tokens that pass every filter are kept as candidates,
    in corpus order. The table is then normalized and the candidates are ranked and truncated.

    Args:
        corpus (bytes): The raw word list.
        constraints (Constraints): The constraints candidates must satisfy.
        policy (RankingPolicy): How to order the candidates.
        n (int): The number of candidates to return. -1 returns all candidates.
        with_scores (bool): Attach scores to the candidates even when the policy does not need them.

    Returns:
        list[Candidate]: At most n candidates in ranked order.
    """
    filter = Filter(constraints)
    table = WeightingTable(constraints.length)

    total_tokens = 0
    weighting_words = 0
    candidates = []

    for token in tokenize(corpus):
        total_tokens += 1
        if len(token) != filter.length:
            continue

        weighting_words += 1
        table.accumulate(token)

        if filter.accepts(token):
            candidates.append(token)

    table.normalize(weighting_words)

    logger.debug("Filter: %s", filter)
    logger.debug("Tokens: %d, of length %d: %d, candidates: %d",
                 total_tokens, constraints.length, weighting_words, len(candidates))
    if weighting_words == 0:
        logger.info("No words of length %d in the word list", constraints.length)

    return CandidateRanker(policy, table).rank(candidates, n, with_scores=with_scores)


def main(argv: Sequence[str] | None = None) -> int:

    args = parse_args(argv)
    setup_logging(args.verbose)

    constraints = constraints_from_args(args)
    policy = ranking_policy(args)
    logger.debug("Ranking: %s", policy.value)

    try:
        corpus = load_corpus(args.wordlist)
    except CorpusError as e:
        logger.error("%s", e)
        return 1

    try:
        candidates = find_candidates(corpus, constraints, policy, args.candidate_number,
                                     with_scores=args.show_scores)
    except MemoryError:
        logger.error("Ran out of memory building weightings for words of length %d", constraints.length)
        return 1

    if args.show_scores:
        Console().print(scores_table(candidates))
    else:
        print(format_candidates(candidates), end="")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
