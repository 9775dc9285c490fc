from tests.utils import (
    HARD_SENTENCE,
    SIMPLE_SENTENCE,
    VERY_HARD_SENTENCE,
    get_line,
    lines_for_document,
)
from writing_style_checker.models import Position, Severity
from writing_style_checker.readability import (
    calculate_sentence_score,
    get_difficulty_warning,
    sentence_text,
)


def test_scores_an_empty_sentence_zero():
    assert calculate_sentence_score([get_line("")]) == 0
    assert calculate_sentence_score([]) == 0


def test_scores_a_simple_sentence_below_ten():
    score = calculate_sentence_score([get_line(SIMPLE_SENTENCE)])
    assert score < 10
    assert score == 2


def test_scores_a_hard_sentence_between_ten_and_fourteen():
    score = calculate_sentence_score([get_line(HARD_SENTENCE)])
    assert 10 < score <= 14
    assert score == 13


def test_scores_a_very_hard_sentence_above_fourteen():
    score = calculate_sentence_score([get_line(VERY_HARD_SENTENCE)])
    assert score > 14
    assert score == 19


def test_sentence_text_joins_fragments_with_spaces():
    sentence = lines_for_document(["first line", "second line."])
    assert sentence_text(sentence) == "first line second line."


def test_no_diagnostic_for_a_simple_sentence():
    assert get_difficulty_warning([get_line(SIMPLE_SENTENCE)]) == []


def test_information_diagnostic_for_a_hard_sentence():
    diagnostics = get_difficulty_warning([get_line(HARD_SENTENCE)])

    assert len(diagnostics) == 1
    assert diagnostics[0].severity is Severity.INFORMATION
    assert diagnostics[0].message == "Hard sentence. Shorten or split it."


def test_warning_diagnostic_for_a_very_hard_sentence():
    diagnostics = get_difficulty_warning([get_line(VERY_HARD_SENTENCE)])

    assert len(diagnostics) == 1
    assert diagnostics[0].severity is Severity.WARNING
    assert diagnostics[0].message == "Very hard sentence. Shorten or split it."


def test_difficulty_range_spans_every_line_of_the_sentence():
    head, tail = VERY_HARD_SENTENCE.split(" meandering", 1)
    tail = "meandering" + tail
    sentence = lines_for_document([head, tail])

    diagnostics = get_difficulty_warning(sentence)

    assert len(diagnostics) == 1
    assert diagnostics[0].severity is Severity.WARNING
    assert diagnostics[0].range.start == Position(0, 0)
    assert diagnostics[0].range.end == Position(1, len(tail))


def test_thresholds_are_configurable():
    diagnostics = get_difficulty_warning(
        [get_line(SIMPLE_SENTENCE)], hard_threshold=0, very_hard_threshold=10
    )

    assert len(diagnostics) == 1
    assert diagnostics[0].severity is Severity.INFORMATION
