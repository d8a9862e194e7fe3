from pathlib import Path
from typing import Iterable, Tuple, Union

from wordlesolver.classes.Word import Word
from wordlesolver.errors import EmptyCandidateSet, IOFailure, MissingFile, WordleError, with_location


def read_text(path: Union[str, Path]) -> str:
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        raise MissingFile(path) from None
    except (OSError, UnicodeDecodeError) as e:
        raise IOFailure(path, e) from e


def parse_words(lines: Iterable[str], source: str = "<words>") -> Tuple[Word, ...]:
    """Parse, de-duplicate and sort a word list. Any bad line aborts the load."""
    lines = [line.strip() for line in lines]
    while lines and not lines[-1]:
        lines.pop()

    words = set()
    for i, line in enumerate(lines, start=1):
        try:
            words.add(Word.parse(line))
        except WordleError as e:
            raise with_location(e, source, i)

    if not words:
        raise EmptyCandidateSet(f"{source} contains no words")

    # Sorted order drives deterministic tie-breaks in the solver
    return tuple(sorted(words))


def load_words(path: Union[str, Path]) -> Tuple[Word, ...]:
    """Load the dictionary. The returned tuple is shared read-only by every game."""
    return parse_words(read_text(path).splitlines(), source=str(path))
