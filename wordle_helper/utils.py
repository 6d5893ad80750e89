import argparse
import logging
import os
from typing import Sequence

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from wordle_helper.candidate_ranker import DEFAULT_CANDIDATE_NUMBER, Candidate, RankingPolicy
from wordle_helper.filter import DEFAULT_LENGTH, ConstraintError, Constraints

DEFAULT_WORDLIST = "words.txt"

logger = logging.getLogger(__name__)
console = Console(stderr=True)


class CorpusError(OSError):
    """Raised when the word list cannot be read in full."""


def _length(value: str) -> int:
    if not (value.isascii() and value.isdigit()) or int(value) == 0:
        raise argparse.ArgumentTypeError(f"invalid length: {value!r}")
    return int(value)


def _candidate_number(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid candidate number: {value!r}") from None
    if number < -1:
        raise argparse.ArgumentTypeError(f"invalid candidate number: {value!r}")
    return number


class _Once(argparse.Action):
    """Stores an option like "store" or "store_true", but rejects a second occurrence of the same option."""

    def __call__(self, parser, namespace, values, option_string=None):
        seen = namespace.__dict__.setdefault("_seen_options", set())
        if self.dest in seen:
            parser.error(f"argument {option_string}: may only be given once")
        seen.add(self.dest)
        setattr(namespace, self.dest, self.const if self.nargs == 0 else values)


# Argument Parser
parser = argparse.ArgumentParser(
    prog="wordle-helper",
    description="Suggest Wordle guesses from a word list.",
    allow_abbrev=False,
)
ranking = parser.add_mutually_exclusive_group()
ranking.add_argument("-alpha", "--alpha", help="Sort candidates alphabetically",
                     nargs=0, const=True, default=False, action=_Once)
ranking.add_argument("-best", "--best", help="Sort candidates by positional letter score",
                     nargs=0, const=True, default=False, action=_Once)
parser.add_argument("-len", "--length", help="Word length", type=_length, default=DEFAULT_LENGTH, action=_Once)
parser.add_argument("-with", "--with-letters", help="Letters the word must contain",
                    type=str, default="", action=_Once)
parser.add_argument("-without", "--without-letters", help="Letters the word must not contain",
                    type=str, default="", action=_Once)
parser.add_argument("pattern", help="Known letter positions, '_' for unknown (e.g. cr___)", nargs="?", default=None)
parser.add_argument("-w", "--wordlist", help="Wordlist to use", type=str, default=DEFAULT_WORDLIST, action=_Once)
parser.add_argument("-c", "--candidate-number", help="Number of candidates to return (-1 for all)",
                    type=_candidate_number, default=DEFAULT_CANDIDATE_NUMBER, action=_Once)
parser.add_argument("-s", "--show-scores", help="Show each candidate's score in a table",
                    nargs=0, const=True, default=False, action=_Once)
parser.add_argument("-v", "--verbose", help="Log pipeline details",
                    nargs=0, const=True, default=False, action=_Once)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    args = parser.parse_args(argv)
    if args.pattern is not None and args.pattern.startswith("-"):
        parser.error(f"unrecognized arguments: {args.pattern}")
    return args


def ranking_policy(args: argparse.Namespace) -> RankingPolicy:
    if args.best:
        return RankingPolicy.BEST
    if args.alpha:
        return RankingPolicy.ALPHABETICAL
    return RankingPolicy.CORPUS


def constraints_from_args(args: argparse.Namespace) -> Constraints:
    """
    Builds the Constraints from parsed arguments. Invalid letters or patterns end the program with a usage message.

    Args:
        args (argparse.Namespace): Parsed command line arguments.

    Returns:
        Constraints: The validated constraints.
    """
    try:
        return Constraints(
            length=args.length,
            required=args.with_letters,
            forbidden=args.without_letters,
            pattern=args.pattern,
        )
    except ConstraintError as e:
        parser.error(str(e))


def setup_logging(verbose: bool = False) -> None:
    package_logger = logging.getLogger("wordle_helper")
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not package_logger.handlers:
        package_logger.addHandler(RichHandler(console=console, show_path=False))


def load_corpus(file: str) -> bytes:
    """
    Reads a whole word list into memory.

    If the file does not have an extension, '.txt' is appended to the end of the name.

    Args:
        file (str): The filename of the word list.

    Returns:
        bytes: The raw contents of the file.

    Raises:
        CorpusError: If the file is missing or cannot be read.
    """

    # Caution where extension is not specified
    if not file.endswith(".txt") and '.' not in os.path.basename(file):
        file += ".txt"

    try:
        with open(file, "rb") as f:
            corpus = f.read()
    except OSError as e:
        raise CorpusError(f"Could not read file {file}: {e.strerror or e}") from e

    logger.debug("Read %d bytes from %s", len(corpus), file)
    return corpus


def format_candidates(candidates: list[Candidate]) -> str:
    return "".join(c.word + "\n" for c in candidates)


def scores_table(candidates: list[Candidate]) -> Table:
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right")
    table.add_column("Word", justify="left")
    table.add_column("Score", justify="right")

    for i, candidate in enumerate(candidates, start=1):
        table.add_row(str(i), candidate.word, "" if candidate.score is None else str(candidate.score))
    return table
