import pytest

from expc.paths import erase, replace_extension


def test_replace_simple_extension():
    assert replace_extension("/some/kind/of/file.txt", "s") == "/some/kind/of/file.s"


def test_replace_with_dotted_extension():
    assert replace_extension("/some/kind/of/file.txt", ".o") == "/some/kind/of/file.o"


def test_only_final_extension_replaced():
    result = replace_extension("/some/kind/of/file.with.multiple.extensions", "s")
    assert result == "/some/kind/of/file.with.multiple.s"


def test_hidden_file_with_extension():
    assert replace_extension("/some/kind/of/.file.txt", "o") == "/some/kind/of/.file.o"


def test_hidden_file_without_extension_gains_one():
    assert replace_extension("/some/kind/of/.file", "o") == "/some/kind/of/.file.o"


def test_file_without_extension_gains_one():
    assert replace_extension("program", "s") == "program.s"


def test_empty_extension_removes_extension():
    assert replace_extension("dir/file.exp", "") == "dir/file"


def test_dot_in_directory_is_not_an_extension():
    assert replace_extension("a.b/file", "o") == "a.b/file.o"


def test_replace_extension_is_idempotent():
    once = replace_extension("x/y/source.exp", "s")
    assert replace_extension(once, "s") == once


def test_replace_then_remove_gives_stem():
    path = "x/y/source.exp"
    assert replace_extension(replace_extension(path, "o"), "") == replace_extension(path, "")


def test_erase_middle():
    assert erase("abcdef", 2, 2) == "abef"


def test_erase_everything():
    assert erase("abcdef", 0, 6) == ""


def test_erase_suffix():
    assert erase("abcdef", 3, 3) == "abc"


def test_erase_zero_length_is_identity():
    assert erase("abcdef", 4, 0) == "abcdef"


def test_erase_length_invariant():
    text = "hello world"
    for offset in range(len(text) + 1):
        for length in range(len(text) - offset + 1):
            assert len(erase(text, offset, length)) == len(text) - length


@pytest.mark.parametrize("offset,length", [(7, 0), (3, 4), (-1, 1), (0, -1)])
def test_erase_out_of_range(offset, length):
    with pytest.raises(ValueError):
        erase("abcdef", offset, length)