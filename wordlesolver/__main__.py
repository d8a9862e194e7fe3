"""
Command line entry point

    wordlesolver rank [BOARD]     ranked `word: cost` lines
    wordlesolver next [BOARD]     single best next guess
    wordlesolver play WORD        solve against WORD, print the guesses
    wordlesolver selfplay         solve every dictionary word
"""

import argparse
import sys
from typing import List, Optional

from wordlesolver.benchmark import (
    format_result, log_to_wandb, print_summary, run_all, run_game_with_answer,
    summarize, write_summary,
)
from wordlesolver.classes.BoardParser import apply_board, load_board
from wordlesolver.classes.GameState import GameState
from wordlesolver.classes.Solver import best_next_word, best_starting_words
from wordlesolver.classes.Word import Word
from wordlesolver.classes.WordList import load_words
from wordlesolver.constants import EXCLUDE_ALL_CORRECT, LOG_DIR, NUM_WORKERS, STARTER, WORDS_FILE
from wordlesolver.errors import WordleError


def non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or more, got {value}")
    return value


def _candidates(args) -> List[Word]:
    words = load_words(args.words)
    if args.board is None:
        return list(words)
    return apply_board(words, load_board(args.board))


def cmd_rank(args):
    ranked = best_starting_words(_candidates(args), args.exclude_all_correct,
                                 workers=args.workers, progress=not args.quiet)
    if args.top is not None:
        ranked = ranked[:args.top]
    for w, cost in ranked:
        print(f"{w}: {cost}")


def cmd_next(args):
    print(best_next_word(_candidates(args), args.exclude_all_correct))


def cmd_play(args):
    words = load_words(args.words)
    answer = Word.parse(args.word)
    game = GameState(words, answer, logging=not args.quiet)
    result = run_game_with_answer(game, answer, Word.parse(args.opener), args.exclude_all_correct)
    print(",".join(str(g) for g in result.guesses))


def cmd_selfplay(args):
    words = load_words(args.words)
    results = run_all(words, workers=args.workers, output_dir=args.output_dir,
                      opener=Word.parse(args.opener),
                      exclude_all_correct=args.exclude_all_correct,
                      progress=not args.quiet)

    if args.output_dir is None:
        # Emitted in dictionary order once every game is done
        sys.stdout.write("".join(format_result(r) + "\n" for r in results))

    summary = summarize(results)
    if not args.quiet:
        print_summary(summary)
    if args.summary:
        log_file = write_summary(summary, args.log_dir)
        print(f"\nResults saved to: {log_file}", file=sys.stderr)
    if args.wandb:
        log_to_wandb(summary)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordlesolver",
        description="Wordle solver: pick guesses that split the candidates evenly",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--words", default=WORDS_FILE, help="dictionary, one word per line")
    parser.add_argument("--exclude-all-correct", action="store_true", default=EXCLUDE_ALL_CORRECT,
                        help="ignore the all-correct feedback bucket when scoring")
    parser.add_argument("-q", "--quiet", action="store_true", help="no progress or game output")
    sub = parser.add_subparsers(dest="command", required=True)

    rank = sub.add_parser("rank", help="rank every remaining word as a guess")
    rank.add_argument("board", nargs="?", help="file with played `<word> <gybbb>` lines")
    rank.add_argument("--workers", type=int, default=NUM_WORKERS)
    rank.add_argument("--top", type=non_negative_int, help="only print the N best words")
    rank.set_defaults(func=cmd_rank)

    nxt = sub.add_parser("next", help="print the single best next guess")
    nxt.add_argument("board", nargs="?", help="file with played `<word> <gybbb>` lines")
    nxt.set_defaults(func=cmd_next)

    play = sub.add_parser("play", help="solve against a known answer")
    play.add_argument("word")
    play.add_argument("--opener", default=STARTER)
    play.set_defaults(func=cmd_play)

    selfplay = sub.add_parser("selfplay", help="solve every dictionary word")
    selfplay.add_argument("--workers", type=int, default=NUM_WORKERS)
    selfplay.add_argument("--opener", default=STARTER)
    selfplay.add_argument("--output-dir", help="write one file per worker instead of stdout")
    selfplay.add_argument("--summary", action="store_true", help="save JSON results")
    selfplay.add_argument("--log-dir", default=LOG_DIR)
    selfplay.add_argument("--wandb", action="store_true", help="log results to Weights & Biases")
    selfplay.set_defaults(func=cmd_selfplay)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        args.func(args)
    except WordleError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
