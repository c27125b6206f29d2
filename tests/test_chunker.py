import pytest

from cueline.structure.chunker import is_chunkable, needs_punctuation_tip, split_into_chunks

FIFTEEN = "a b c d e f g h i j k l m n o"


def test_split_on_sentences():
    assert split_into_chunks("Go now. Don't look back.") == ["Go now.", "Don't look back."]


def test_repeated_punctuation_stays_attached():
    assert split_into_chunks("Wait!! Who goes there? Speak up.") == [
        "Wait!!", "Who goes there?", "Speak up.",
    ]


def test_split_before_quote():
    assert split_into_chunks('He said no. "Why?" she asked.') == [
        "He said no.", '"Why?" she asked.',
    ]


def test_no_split_before_lowercase():
    line = "Go now. don't look back."
    assert split_into_chunks(line) == [line]
    assert not is_chunkable(line)


def test_comma_fallback_for_long_lines():
    line = ("When the night comes and the stars are out, "
            "we will walk along the river; and we will sing")
    assert split_into_chunks(line) == [
        "When the night comes and the stars are out",
        "we will walk along the river",
        "and we will sing",
    ]
    assert is_chunkable(line)


def test_short_line_with_commas_is_not_split():
    assert split_into_chunks("Yes, my lord, at once") == ["Yes, my lord, at once"]


def test_long_line_without_commas_is_single_chunk():
    assert split_into_chunks(FIFTEEN) == [FIFTEEN]


def test_split_is_repeatable():
    line = "Go now. Don't look back."
    assert split_into_chunks(line) == split_into_chunks(line)


@pytest.mark.parametrize("line,expected", [
    (FIFTEEN, True),
    (FIFTEEN + ".", False),
    (FIFTEEN.replace(" h ", " h? "), False),
    ("a b c d e f g h i j k l m n", False),
    ("", False),
])
def test_needs_punctuation_tip(line, expected):
    assert needs_punctuation_tip(line) is expected
