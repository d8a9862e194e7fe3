"""
Guess scoring.

A guess splits the remaining candidates into buckets, one per feedback code
it could produce. A guess is good when those buckets are all about the same
size, so its cost is the squared distance of every bucket from the uniform
split, summed over every possible bucket (empty ones included):

    avg  = total / buckets
    cost = sum((avg - count) ** 2)

Lower is better. With every bucket counted, ranking by this cost is the same
as ranking by the sum of squared bucket sizes, i.e. by the expected number of
candidates left over.
"""

from collections import Counter
from functools import cmp_to_key
from multiprocessing import Pool, cpu_count
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from tqdm import tqdm

from wordlesolver.classes.Feedback import ALL_CORRECT, FeedbackCode, compare_words
from wordlesolver.classes.GameState import GameState, Status
from wordlesolver.classes.Word import Word
from wordlesolver.constants import EXCLUDE_ALL_CORRECT, NUM_FEEDBACK_CODES
from wordlesolver.errors import EmptyCandidateSet

EPSILON = 1e-10


def results_distribution(word: Word, candidates: Iterable[Word],
                         out: Optional[Counter] = None) -> Counter:
    """Count how many candidates fall into each feedback bucket for `word`"""
    if out is None:
        out = Counter()
    out.clear()
    for other in candidates:
        out[compare_words(word, other)] += 1
    return out


def distribution_cost(distribution: Dict[FeedbackCode, int],
                      exclude_all_correct: bool = EXCLUDE_ALL_CORRECT) -> float:
    buckets = NUM_FEEDBACK_CODES
    counts = distribution.items()
    if exclude_all_correct:
        # Guessing the answer outright ends the game, it is not a split
        buckets -= 1
        counts = [(code, c) for code, c in counts if code != ALL_CORRECT]
    else:
        counts = list(counts)

    total = sum(c for _, c in counts)
    avg = total / buckets
    cost = sum((avg - c) ** 2 for _, c in counts)
    return cost + (buckets - len(counts)) * avg ** 2


def compare_costs(a: float, b: float) -> int:
    if abs(a - b) < EPSILON:
        return 0
    return -1 if a < b else 1


def _compare_scored(a: Tuple[Word, float], b: Tuple[Word, float]) -> int:
    res = compare_costs(a[1], b[1])
    if res == 0:
        res = (a[0] > b[0]) - (a[0] < b[0])
    return res


def _score(word: Word, candidates: Sequence[Word], scratch: Counter,
           exclude_all_correct: bool) -> Tuple[Word, float]:
    distribution = results_distribution(word, candidates, scratch)
    return word, distribution_cost(distribution, exclude_all_correct)


def best_next_word(candidates: Iterable[Word],
                   exclude_all_correct: bool = EXCLUDE_ALL_CORRECT) -> Word:
    """The candidate expected to narrow the field fastest"""
    words = sorted(candidates)
    if not words:
        raise EmptyCandidateSet("cannot pick a guess from an empty candidate set")

    scratch = Counter()
    best, best_cost = None, 0.0
    # Sorted order means the first of several equal costs wins
    for w in words:
        _, cost = _score(w, words, scratch, exclude_all_correct)
        if best is None or compare_costs(cost, best_cost) < 0:
            best, best_cost = w, cost
    return best


# Per-process state for best_starting_words workers
_CANDIDATES: Tuple[Word, ...] = ()
_EXCLUDE_ALL_CORRECT = EXCLUDE_ALL_CORRECT
_SCRATCH: Counter = Counter()


def _init_worker(candidates: Tuple[Word, ...], exclude_all_correct: bool):
    global _CANDIDATES, _EXCLUDE_ALL_CORRECT, _SCRATCH
    _CANDIDATES = candidates
    _EXCLUDE_ALL_CORRECT = exclude_all_correct
    _SCRATCH = Counter()


def _score_in_worker(word: Word) -> Tuple[Word, float]:
    return _score(word, _CANDIDATES, _SCRATCH, _EXCLUDE_ALL_CORRECT)


def best_starting_words(candidates: Iterable[Word],
                        exclude_all_correct: bool = EXCLUDE_ALL_CORRECT,
                        workers: Optional[int] = None,
                        progress: bool = False) -> List[Tuple[Word, float]]:
    """Every candidate with its cost, best first"""
    words = tuple(sorted(candidates))
    if not words:
        raise EmptyCandidateSet("cannot rank guesses for an empty candidate set")

    if workers is None:
        workers = cpu_count()
    workers = max(1, min(workers, len(words)))

    if workers == 1:
        scratch = Counter()
        scored = [
            _score(w, words, scratch, exclude_all_correct)
            for w in tqdm(words, desc="Scoring", unit="word", disable=not progress)
        ]
    else:
        chunksize = max(1, len(words) // (workers * 4))
        with Pool(processes=workers,
                  initializer=_init_worker,
                  initargs=(words, exclude_all_correct)) as pool:
            # imap keeps input order regardless of which worker finishes first
            scored = list(tqdm(pool.imap(_score_in_worker, words, chunksize=chunksize),
                               total=len(words), desc="Scoring", unit="word",
                               disable=not progress))

    scored.sort(key=cmp_to_key(_compare_scored))
    return scored


def solve(game: GameState, opener: Optional[Word] = None,
          exclude_all_correct: bool = EXCLUDE_ALL_CORRECT) -> Status:
    """Play `game` to the end, opening with `opener` when given"""
    if opener is not None:
        game.guess(opener)
    while game.status == Status.running:
        game.guess(best_next_word(game.words_left, exclude_all_correct))
    return game.status
