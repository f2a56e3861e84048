from shadowing.alignment.aligner import align, lcs_table
from shadowing.models.diff_entry import DiffType


def _pairs(entries):
    return [(e.word, e.type.value) for e in entries]


def _without(entries, dropped):
    return [e.word for e in entries if e.type is not dropped]


def test_lcs_table_corner_is_lcs_length():
    table = lcs_table(["a", "b", "c", "d"], ["a", "c", "d", "e"])
    assert table[4][4] == 3


def test_missing_tail():
    original = "this is a sample text for testing".split()
    recognized = "this is a sample text".split()
    assert _pairs(align(original, recognized)) == [
        ("this", "correct"),
        ("is", "correct"),
        ("a", "correct"),
        ("sample", "correct"),
        ("text", "correct"),
        ("for", "missing"),
        ("testing", "missing"),
    ]


def test_extra_tail():
    assert _pairs(align(["hello", "world"], ["hello", "world", "extra"])) == [
        ("hello", "correct"),
        ("world", "correct"),
        ("extra", "extra"),
    ]


def test_substitution_reported_as_missing_then_extra():
    # backtracking consumes the recognized side first, so after reversal the
    # missing reference word comes before the spoken replacement
    assert _pairs(align(["a", "b", "c"], ["a", "x", "c"])) == [
        ("a", "correct"),
        ("b", "missing"),
        ("x", "extra"),
        ("c", "correct"),
    ]


def test_only_recognized_gives_all_extra():
    entries = align([], ["um", "hello"])
    assert [e.type for e in entries] == [DiffType.EXTRA, DiffType.EXTRA]


def test_only_original_gives_all_missing():
    entries = align(["hello", "there"], [])
    assert [e.type for e in entries] == [DiffType.MISSING, DiffType.MISSING]


def test_both_empty():
    assert align([], []) == []


def test_positions_are_contiguous_from_zero():
    entries = align("the quick brown fox".split(), "a quick fox jumps".split())
    assert [e.position for e in entries] == list(range(len(entries)))


def test_dropping_extra_or_missing_reconstructs_inputs():
    original = "the cat sat on the mat today".split()
    recognized = "a cat sat on mat the today now".split()
    entries = align(original, recognized)
    assert _without(entries, DiffType.EXTRA) == original
    assert _without(entries, DiffType.MISSING) == recognized


def test_never_emits_incorrect():
    entries = align("one two three four".split(), "one too three for".split())
    assert DiffType.INCORRECT not in {e.type for e in entries}


def test_deterministic():
    original = "she sells sea shells by the sea shore".split()
    recognized = "she sell sea shell by sea the shore".split()
    assert align(original, recognized) == align(original, recognized)


def test_error_entries_are_the_non_correct_ones():
    entries = align("one two three".split(), "one three four".split())
    assert [e.word for e in entries if e.is_error] == ["two", "four"]
    assert [e.word for e in entries if e.is_correct] == ["one", "three"]
