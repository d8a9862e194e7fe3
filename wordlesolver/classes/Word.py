from dataclasses import dataclass

from wordlesolver.constants import WORD_LENGTH
from wordlesolver.errors import InvalidWordCharacters, InvalidWordLength


@dataclass(frozen=True, order=True)
class Word:
    """A single 5-letter word, used for both guesses and answers"""
    letters: str

    def __post_init__(self):
        if len(self.letters) != WORD_LENGTH:
            raise InvalidWordLength(self.letters, WORD_LENGTH)
        if not (self.letters.isascii() and self.letters.isalpha()):
            raise InvalidWordCharacters(self.letters)

    @classmethod
    def parse(cls, text: str) -> "Word":
        return cls(text)

    def __str__(self) -> str:
        return self.letters

    def __repr__(self) -> str:
        return f"Word({self.letters!r})"

    def __len__(self) -> int:
        return WORD_LENGTH

    def __getitem__(self, index: int) -> str:
        return self.letters[index]

    def __iter__(self):
        return iter(self.letters)
