"""
Bulk self-play - solve every dictionary word and report the guesses
"""

import json
from collections import Counter
from dataclasses import dataclass
from multiprocessing import Pool, cpu_count
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

try:
    import wandb
    HAS_WANDB = True
except ImportError:
    HAS_WANDB = False

from tqdm import tqdm

from wordlesolver.classes.GameState import GameState, Status
from wordlesolver.classes.Solver import solve
from wordlesolver.classes.Word import Word
from wordlesolver.constants import (
    EXCLUDE_ALL_CORRECT, LOG_DIR, MAX_GUESSES, STARTER, SUMMARY_FILE, WANDB_PROJECT,
)


@dataclass(frozen=True)
class GameResult:
    answer: Word
    guesses: Tuple[Word, ...]
    status: Status

    @property
    def success(self) -> bool:
        return self.status == Status.success


def format_result(result: GameResult) -> str:
    return f"{result.answer}:" + ",".join(str(g) for g in result.guesses)


def run_game_with_answer(game: GameState, answer: Word, opener: Optional[Word] = None,
                         exclude_all_correct: bool = EXCLUDE_ALL_CORRECT) -> GameResult:
    game.reset_with_answer(answer)
    if opener is None:
        opener = Word.parse(STARTER)
    status = solve(game, opener, exclude_all_correct)
    return GameResult(answer, tuple(game.guesses), status)


def partition(count: int, workers: int) -> List[Tuple[int, int]]:
    """Split range(count) into `workers` contiguous, near-equal (start, end) slices"""
    workers = max(1, min(workers, count))
    size, extra = divmod(count, workers)
    slices = []
    start = 0
    for n in range(workers):
        end = start + size + (1 if n < extra else 0)
        slices.append((start, end))
        start = end
    return slices


def _play_chunk(words: Sequence[Word], start: int, end: int, chunk_id: int,
                opener: Word, exclude_all_correct: bool,
                output_dir: Optional[Path]) -> List[GameResult]:
    # Each chunk owns its game and its output file
    game = GameState(words, words[start])
    results = []
    out = open(output_dir / f"selfplay_{chunk_id}.txt", "w") if output_dir else None
    try:
        for answer in words[start:end]:
            result = run_game_with_answer(game, answer, opener, exclude_all_correct)
            results.append(result)
            if out:
                out.write(format_result(result) + "\n")
    finally:
        if out:
            out.close()
    return results


# Per-process state for run_all workers
_WORDS: Sequence[Word] = ()
_OPTIONS: dict = {}


def _init_worker(words: Sequence[Word], options: dict):
    global _WORDS, _OPTIONS
    _WORDS = words
    _OPTIONS = options


def _play_chunk_in_worker(task: Tuple[int, int, int]) -> List[GameResult]:
    start, end, chunk_id = task
    return _play_chunk(_WORDS, start, end, chunk_id, **_OPTIONS)


def run_all(words: Sequence[Word], workers: Optional[int] = None,
            output_dir: Optional[Path] = None, opener: Optional[Word] = None,
            exclude_all_correct: bool = EXCLUDE_ALL_CORRECT,
            progress: bool = False) -> List[GameResult]:
    """Solve every word in `words`. Results come back in dictionary order."""
    if not words:
        return []

    words = tuple(words)
    if opener is None:
        opener = Word.parse(STARTER)
    if output_dir is not None:
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
    if workers is None:
        workers = cpu_count()

    options = {"opener": opener, "exclude_all_correct": exclude_all_correct,
               "output_dir": output_dir}
    tasks = [(start, end, n) for n, (start, end) in enumerate(partition(len(words), workers))]

    if len(tasks) == 1:
        chunks = [_play_chunk(words, *tasks[0], **options)]
    else:
        with Pool(processes=len(tasks),
                  initializer=_init_worker,
                  initargs=(words, options)) as pool:
            chunks = list(tqdm(pool.imap(_play_chunk_in_worker, tasks),
                               total=len(tasks), desc="Self-play", unit="chunk",
                               disable=not progress))

    return [r for chunk in chunks for r in chunk]


def summarize(results: Sequence[GameResult]) -> dict:
    games = len(results)
    wins = [r for r in results if r.success]
    tries = Counter(len(r.guesses) for r in wins)

    return {
        "num_games": games,
        "wins": len(wins),
        "win_rate": len(wins) / games if games else 0.0,
        "avg_tries": sum(len(r.guesses) for r in wins) / len(wins) if wins else 0.0,
        "tries_histogram": {str(n): tries.get(n, 0) for n in range(1, MAX_GUESSES + 1)},
        "failures": [str(r.answer) for r in results if not r.success],
    }


def print_summary(summary: dict):
    print(f"\n{'='*50}")
    print(f"  SELF-PLAY - FINAL RESULTS")
    print(f"{'='*50}")
    print(f"  Games:           {summary['num_games']}")
    print(f"  Win Rate:        {summary['win_rate']:.1%} ({summary['wins']}/{summary['num_games']})")
    print(f"  Average Tries:   {summary['avg_tries']:.2f}")
    for n, count in summary["tries_histogram"].items():
        print(f"  {n} guesses:       {count}")
    if summary["failures"]:
        print(f"  Failures ({len(summary['failures'])}): {', '.join(summary['failures'][:10])}")
    print(f"{'='*50}")


def write_summary(summary: dict, log_dir: Path = LOG_DIR) -> Path:
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / SUMMARY_FILE
    with open(log_file, "w") as f:
        json.dump(summary, f, indent=2)
    return log_file


def log_to_wandb(summary: dict, run_name: str = "selfplay") -> bool:
    """Push the summary figures to Weights & Biases. Returns False when unavailable."""
    if not HAS_WANDB:
        print("wandb not installed - running without logging")
        return False

    wandb.init(project=WANDB_PROJECT, name=run_name)
    wandb.log({
        "win_rate": summary["win_rate"],
        "avg_tries": summary["avg_tries"],
        "failures": len(summary["failures"]),
        **{f"tries_{n}": c for n, c in summary["tries_histogram"].items()},
    })
    wandb.finish()
    return True
