"""
GameState - a Wordle game played against a known answer
"""

from enum import Enum
from typing import List, Sequence

from wordlesolver.classes.Feedback import compare_words
from wordlesolver.classes.Word import Word
from wordlesolver.constants import MAX_GUESSES


class Status(Enum):
    running = "running"
    success = "success"
    failure = "failure"


class GameState:

    def __init__(self, words: Sequence[Word], answer: Word,
                 max_guesses: int = MAX_GUESSES, logging: bool = False):
        self.logging = logging
        self.max_guesses = max_guesses

        # Full dictionary, shared with every other game and never mutated
        self.all_words: Sequence[Word] = words

        self.guesses: List[Word] = []
        self.words_left: List[Word] = list(words)
        self.answer = answer
        self.status = Status.running

    def reset_with_answer(self, answer: Word):
        """Start a new game against `answer`, reusing the candidate list"""
        self.guesses.clear()
        if len(self.words_left) != len(self.all_words):
            self.words_left.clear()
            self.words_left.extend(self.all_words)
        self.status = Status.running
        self.answer = answer

        if self.logging:
            print(f"New game. Target: {self.answer}")

    def guess(self, word: Word) -> Status:
        """Play `word`. Once the game has ended this does nothing."""
        if self.status != Status.running:
            return self.status

        self.guesses.append(word)

        res = compare_words(word, self.answer)
        self.words_left[:] = [x for x in self.words_left if compare_words(word, x) == res]

        if word == self.answer:
            self.status = Status.success
        elif len(self.guesses) >= self.max_guesses:
            self.status = Status.failure

        if self.logging:
            print(f"  {str(word).upper()} {res.emoji()}  ({len(self.words_left)} left)")

        return self.status

    def num_of_tries(self) -> int:
        """Return number of guesses made"""
        return len(self.guesses)

    @property
    def success(self) -> bool:
        return self.status == Status.success
