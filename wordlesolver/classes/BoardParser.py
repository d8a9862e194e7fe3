"""
Reads a played board so a solve can resume mid-game.

Each line holds a guess and its feedback, e.g.

    rales byybb
    tunic bbgbg

where g = right letter right place, y = right letter wrong place, b = absent.
"""

import re
from pathlib import Path
from typing import Iterable, List, Tuple, Union

from wordlesolver.classes.Feedback import FeedbackCode, compare_words
from wordlesolver.classes.Word import Word
from wordlesolver.classes.WordList import read_text
from wordlesolver.errors import EmptyCandidateSet, MalformedBoardLine, WordleError, with_location

BoardEntry = Tuple[Word, FeedbackCode]

_FEEDBACK_RE = re.compile(r"[gyb]{5}")


def parse_board(text: str, source: str = "<board>") -> List[BoardEntry]:
    lines = text.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()

    board = []
    for i, line in enumerate(lines, start=1):
        tokens = line.split()
        if len(tokens) != 2:
            raise MalformedBoardLine(i, line)

        word_token, feedback_token = tokens
        if not _FEEDBACK_RE.fullmatch(feedback_token):
            raise MalformedBoardLine(i, line, "feedback must be 5 of g/y/b")

        try:
            word = Word.parse(word_token)
        except WordleError as e:
            raise with_location(e, source, i)
        board.append((word, FeedbackCode.from_pattern(feedback_token)))
    return board


def load_board(path: Union[str, Path]) -> List[BoardEntry]:
    return parse_board(read_text(path), source=str(path))


def apply_board(words: Iterable[Word], board: Iterable[BoardEntry]) -> List[Word]:
    """Keep only the words that would have produced every recorded feedback"""
    candidates = list(words)
    for guess, res in board:
        candidates = [w for w in candidates if compare_words(guess, w) == res]

    if not candidates:
        raise EmptyCandidateSet("no dictionary word matches the board")
    return candidates
