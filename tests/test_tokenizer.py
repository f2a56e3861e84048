import pytest

from shadowing.alignment.normalizer import expand_contractions, strip_punctuation
from shadowing.alignment.tokenizer import tokenize
from shadowing.config import NormalizationOptions, load_options
from shadowing.errors import ConfigurationError


def test_default_options_lowercase_and_strip_punctuation():
    assert tokenize("  Hello,   World!  ") == ["hello", "world"]


def test_contraction_expanded_before_split():
    assert tokenize("I don't know") == ["i", "do", "not", "know"]


def test_contraction_match_is_case_insensitive_and_whole_word():
    assert expand_contractions("DON'T stop") == "do not stop"
    # not a whole-word match, left alone
    assert expand_contractions("xdon't") == "xdon't"


def test_typographic_apostrophe_is_expanded():
    assert tokenize("It’s fine") == ["it", "is", "fine"]


def test_expand_contractions_disabled_keeps_apostrophe_token():
    opts = NormalizationOptions(expand_contractions=False)
    assert tokenize("I don't know.", opts) == ["i", "don't", "know"]


def test_case_sensitive_keeps_case():
    opts = NormalizationOptions(case_sensitive=True)
    assert tokenize("This is Fine", opts) == ["This", "is", "Fine"]


def test_ignore_punctuation_disabled_keeps_marks():
    opts = NormalizationOptions(ignore_punctuation=False)
    assert tokenize("Hello, world.", opts) == ["hello,", "world."]


def test_punctuation_only_tokens_are_dropped():
    assert tokenize("well -- okay ... $ fine") == ["well", "okay", "fine"]


def test_inner_punctuation_survives():
    assert strip_punctuation("«e-mail»") == "e-mail"
    assert tokenize("five o'clock") == ["five", "o'clock"]


def test_trim_whitespace_disabled_still_splits_on_whitespace():
    opts = NormalizationOptions(trim_whitespace=False)
    assert tokenize("  a \n b\t c ", opts) == ["a", "b", "c"]


def test_empty_text():
    assert tokenize("") == []
    assert tokenize("   \n ") == []


def test_tokenize_is_deterministic():
    text = "Don't worry, we'll be there!"
    assert tokenize(text) == tokenize(text) == ["do", "not", "worry", "we", "will", "be", "there"]


def test_load_options_accepts_camel_case():
    opts = load_options({"caseSensitive": True, "expandContractions": False})
    assert opts.case_sensitive is True
    assert opts.expand_contractions is False
    assert opts.ignore_punctuation is True


def test_load_options_none_gives_defaults():
    assert load_options(None) == NormalizationOptions()


@pytest.mark.parametrize(
    "bad",
    [
        {"caseSensitive": "yes"},
        {"unknownOption": True},
        ["caseSensitive"],
    ],
)
def test_load_options_rejects_malformed_config(bad):
    with pytest.raises(ConfigurationError):
        load_options(bad)


def test_options_are_frozen():
    opts = NormalizationOptions()
    with pytest.raises(Exception):
        opts.case_sensitive = True
