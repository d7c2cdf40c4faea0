import pytest

from pipex.words import count_words, split_words


def test_split_simple_command():
    assert split_words("grep -v foo", " ") == ["grep", "-v", "foo"]


def test_repeated_and_edge_separators_are_dropped():
    assert split_words("  ls   -l  ", " ") == ["ls", "-l"]


def test_empty_and_separator_only_text():
    assert split_words("", " ") == []
    assert split_words(":::", ":") == []
    assert count_words("", " ") == 0
    assert count_words(":::", ":") == 0


@pytest.mark.parametrize(
    "text, sep",
    [
        ("/usr/bin:/bin::/usr/local/bin:", ":"),
        ("a b  c   d", " "),
        ("no-separator-here", " "),
        ("x,,y,z,,", ","),
    ],
)
def test_words_are_clean_and_counted(text, sep):
    words = split_words(text, sep)
    assert count_words(text, sep) == len(words)
    assert all(word and sep not in word for word in words)
    assert "".join(words) == text.replace(sep, "")


def test_single_word_round_trip():
    assert split_words("cat", " ") == ["cat"]
    assert count_words("cat", " ") == 1


@pytest.mark.parametrize("sep", ["", "ab"])
def test_separator_must_be_one_character(sep):
    with pytest.raises(ValueError):
        split_words("a b", sep)
    with pytest.raises(ValueError):
        count_words("a b", sep)