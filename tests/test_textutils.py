from writing_style_checker.textutils import (
    clean_text,
    clean_word,
    code_point_index,
    utf16_column,
    utf16_length,
)


def test_clean_text_keeps_periods_and_spaces():
    assert clean_text("Hello, world; it's done.") == "Hello world its done."


def test_clean_word_strips_punctuation():
    assert clean_word("closed,") == "closed"


def test_utf16_length_counts_surrogate_pairs():
    assert utf16_length("abc") == 3
    assert utf16_length("a\U0001F600b") == 4
    assert utf16_length("été") == 3


def test_utf16_column_and_back():
    text = "a\U0001F600b"

    assert utf16_column(text, 2) == 3
    assert code_point_index(text, 3) == 2
    assert code_point_index(text, 2) == 1
    assert code_point_index(text, 10) == 3
