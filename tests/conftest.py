import pytest

from wordlesolver.classes.Word import Word


def words(*texts):
    return [Word.parse(t) for t in texts]


@pytest.fixture
def small_dictionary():
    # fgxyz splits the other three apart, each abcd? word leaves two together
    return tuple(words("abcde", "abcdf", "abcdg", "fgxyz"))


@pytest.fixture
def abide_dictionary():
    return tuple(words("abide", "added", "adieu"))


@pytest.fixture
def words_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("fgxyz\nabcdg\nabcde\nabcdf\n")
    return path
