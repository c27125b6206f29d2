from cueline.alignment.normalizer import (
    CONTRACTIONS,
    expand_contractions,
    normalize,
    simple_tokenize,
)


def test_normalize_lowercases_and_strips_punctuation():
    assert normalize("To be, or NOT to be!") == ["to", "be", "or", "not", "to", "be"]


def test_normalize_expands_contractions():
    assert normalize("I can't believe you're leaving") == [
        "i", "cannot", "believe", "you", "are", "leaving",
    ]
    assert normalize("It's what I'm saying, don't you see?") == [
        "it", "is", "what", "i", "am", "saying", "do", "not", "you", "see",
    ]


def test_contractions_are_case_insensitive_and_word_bounded():
    assert expand_contractions("WON'T") == "will not"
    # "scan't" is not a word-bounded "can't"
    assert expand_contractions("scan't") == "scan't"


def test_normalize_empty_and_whitespace():
    assert normalize("") == []
    assert normalize("   \n\t ") == []
    assert normalize("?!...") == []


def test_normalize_non_string_is_empty():
    assert normalize(None) == []
    assert normalize(42) == []


def test_simple_tokenize_does_not_expand_contractions():
    assert simple_tokenize("I can't GO.") == ["i", "cant", "go"]
    assert simple_tokenize(None) == []


def test_contraction_table_is_immutable_tuple():
    assert isinstance(CONTRACTIONS, tuple)
    assert len(CONTRACTIONS) == 22


def test_non_ascii_letters_are_stripped():
    assert normalize("Café naïve") == ["caf", "nave"]
    assert simple_tokenize("Café") == ["caf"]


def test_unicode_whitespace_still_splits():
    assert normalize("go\u00a0now") == ["go", "now"]
