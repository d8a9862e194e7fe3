"""
Errors raised while loading words, reading boards and solving
"""


class WordleError(Exception):
    """Base class for every error the solver reports"""


class InvalidWordLength(WordleError, ValueError):
    def __init__(self, text: str, expected: int = 5):
        self.text = text
        self.expected = expected
        super().__init__(f"unexpected word length {len(text)}: `{text}` (expected {expected})")


class InvalidWordCharacters(WordleError, ValueError):
    def __init__(self, text: str):
        self.text = text
        super().__init__(f"word must contain only ASCII letters: `{text}`")


class MalformedBoardLine(WordleError, ValueError):
    def __init__(self, line_number: int, line: str, reason: str = "expected `<word> <feedback>`"):
        self.line_number = line_number
        self.line = line
        super().__init__(f"board line {line_number} is malformed ({reason}): `{line}`")


class MissingFile(WordleError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"file not found: {path}")


class IOFailure(WordleError):
    def __init__(self, path, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"failed to read {path}: {cause}")


class EmptyCandidateSet(WordleError):
    def __init__(self, context: str = "no candidate words left"):
        super().__init__(context)


def with_location(error: WordleError, source: str, line_number: int) -> WordleError:
    """Prefix `error`'s message with `source:line_number`"""
    error.args = (f"{source}:{line_number}: {error}",)
    return error
