from enum import Enum
from typing import Iterable, List

from wordlesolver.classes.Word import Word
from wordlesolver.constants import WORD_LENGTH


class Feedback(Enum):
    # value is the base-3 digit used in FeedbackCode
    correct = 0
    present = 1
    incorrect = 2

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @property
    def emoji(self) -> str:
        return _EMOJI[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> "Feedback":
        for fb, s in _SYMBOLS.items():
            if s == symbol:
                return fb
        raise ValueError(f"unknown feedback symbol: {symbol!r}")


_SYMBOLS = {Feedback.correct: "g", Feedback.present: "y", Feedback.incorrect: "b"}
_EMOJI = {Feedback.correct: "🟩", Feedback.present: "🟨", Feedback.incorrect: "⬛"}


class FeedbackCode(int):
    """
    Feedback for a whole word packed into one base-3 integer.
    Position 0 is the most significant digit, so codes range 0..242.
    """

    def __new__(cls, value: int):
        if not 0 <= value < 3 ** WORD_LENGTH:
            raise ValueError(f"feedback code out of range: {value}")
        return super().__new__(cls, value)

    @classmethod
    def from_states(cls, states: Iterable[Feedback]) -> "FeedbackCode":
        states = list(states)
        if len(states) != WORD_LENGTH:
            raise ValueError(f"expected {WORD_LENGTH} feedback states, got {len(states)}")
        n = 0
        for fb in states:
            n = n * 3 + fb.value
        return cls(n)

    @classmethod
    def from_pattern(cls, pattern: str) -> "FeedbackCode":
        """Build from a `gybbb` style string"""
        return cls.from_states(Feedback.from_symbol(c) for c in pattern)

    def states(self) -> List[Feedback]:
        digits = []
        n = int(self)
        for _ in range(WORD_LENGTH):
            n, d = divmod(n, 3)
            digits.append(Feedback(d))
        digits.reverse()
        return digits

    def pattern(self) -> str:
        return "".join(fb.symbol for fb in self.states())

    def emoji(self) -> str:
        return "".join(fb.emoji for fb in self.states())

    def __repr__(self) -> str:
        return f"FeedbackCode({self.pattern()!r})"


ALL_CORRECT = FeedbackCode.from_states([Feedback.correct] * WORD_LENGTH)


def compare_words(guess: Word, answer: Word) -> FeedbackCode:
    """Feedback the game gives for `guess` when the hidden word is `answer`"""
    remaining = list(answer.letters)
    result = [Feedback.incorrect] * WORD_LENGTH

    # First pass: greens, each consumes its letter
    for i in range(WORD_LENGTH):
        if guess[i] == remaining[i]:
            result[i] = Feedback.correct
            remaining[i] = None

    # Second pass: yellows claim the first unconsumed occurrence
    for i in range(WORD_LENGTH):
        if result[i] == Feedback.incorrect and guess[i] in remaining:
            result[i] = Feedback.present
            remaining[remaining.index(guess[i])] = None

    return FeedbackCode.from_states(result)
