"""
wordlesolver - narrows a 5-letter dictionary toward the answer and picks
the guess that splits the remaining candidates most evenly
"""

from wordlesolver.classes.BoardParser import apply_board, load_board, parse_board
from wordlesolver.classes.Feedback import ALL_CORRECT, Feedback, FeedbackCode, compare_words
from wordlesolver.classes.GameState import GameState, Status
from wordlesolver.classes.Solver import best_next_word, best_starting_words, solve
from wordlesolver.classes.Word import Word
from wordlesolver.classes.WordList import load_words
from wordlesolver.errors import (
    EmptyCandidateSet, InvalidWordCharacters, InvalidWordLength, IOFailure,
    MalformedBoardLine, MissingFile, WordleError,
)

__version__ = "0.1.0"
