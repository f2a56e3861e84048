import pytest

from shadowing.alignment.edit_distance import edit_distance


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ([], [], 0),
        ([], ["a", "b"], 2),
        (["a", "b", "c"], [], 3),
        (["a", "b", "c"], ["a", "b", "c"], 0),
        (["a", "b", "c"], ["a", "x", "c"], 1),
        (["a", "b", "c"], ["a", "c"], 1),
        (["kitten", "sat"], ["sitting", "sat", "down"], 2),
    ],
)
def test_edit_distance(a, b, expected):
    assert edit_distance(a, b) == expected


def test_symmetric():
    a = ["this", "is", "a", "test"]
    b = ["this", "was", "test", "again"]
    assert edit_distance(a, b) == edit_distance(b, a)


def test_identity():
    tokens = ["hello", "world", "hello"]
    assert edit_distance(tokens, tokens) == 0


def test_comparison_ignores_case_regardless_of_tokenizer():
    assert edit_distance(["Hello", "World"], ["hello", "WORLD"]) == 0
