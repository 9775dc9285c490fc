import pytest

from tests.utils import SIMPLE_SENTENCE, build_document, get_line, lines_for_document
from writing_style_checker.models import Position
from writing_style_checker.passive import get_passive_language
from writing_style_checker.segmentation import get_sentences
from writing_style_checker.word_lists import default_word_lists


@pytest.fixture(scope="module")
def precursors():
    return default_word_lists().passive_precursors


def test_no_passive_language(precursors):
    assert get_passive_language([get_line(SIMPLE_SENTENCE)], precursors) == []


def test_one_use_of_passive_language(precursors):
    sentence = [get_line("This sentence should be marked for passive language.")]
    diagnostics = get_passive_language(sentence, precursors)

    assert len(diagnostics) == 1
    assert diagnostics[0].message == "Passive voice. Use active voice."
    assert diagnostics[0].range.start == Position(0, 21)
    assert diagnostics[0].range.end == Position(0, 30)


def test_passive_language_across_two_lines(precursors):
    sentence = lines_for_document(
        ["This sentence should be ", "marked for passive language."]
    )
    diagnostics = get_passive_language(sentence, precursors)

    assert len(diagnostics) == 1
    assert diagnostics[0].range.start == Position(0, 21)
    assert diagnostics[0].range.end == Position(1, 6)


def test_two_uses_of_passive_language(precursors):
    sentence = lines_for_document(
        [
            "This sentence should be marked for passive language.",
            "This sentence also should be marked for passive language.",
        ]
    )
    diagnostics = get_passive_language(sentence, precursors)

    assert len(diagnostics) == 2
    assert diagnostics[0].range.start == Position(0, 21)
    assert diagnostics[1].range.start == Position(1, 26)


def test_following_word_after_leading_spaces(precursors):
    sentence = lines_for_document(["It was", "  praised by all."])
    diagnostics = get_passive_language(sentence, precursors)

    assert len(diagnostics) == 1
    assert diagnostics[0].range.start == Position(0, 3)
    assert diagnostics[0].range.end == Position(1, 9)


def test_fragment_offsets_carry_into_the_range(precursors):
    text = "Hi. It was painted red."
    sentences = get_sentences(build_document([text]))
    diagnostics = get_passive_language(sentences[1], precursors)

    assert len(diagnostics) == 1
    assert diagnostics[0].range.start == Position(0, text.index("was"))
    assert diagnostics[0].range.end == Position(0, text.index(" red"))


def test_precursor_match_is_case_sensitive(precursors):
    sentence = [get_line("Was finished early.")]

    assert get_passive_language(sentence, precursors) == []
    assert len(get_passive_language(sentence, ["Was"])) == 1


def test_punctuation_is_stripped_before_suffix_check(precursors):
    sentence = [get_line("The door was closed, then locked.")]
    diagnostics = get_passive_language(sentence, precursors)

    assert len(diagnostics) == 1
    assert diagnostics[0].range.start == Position(0, 9)
    assert diagnostics[0].range.end == Position(0, 20)


def test_irregular_participles_are_not_flagged(precursors):
    sentence = [get_line("The letter was written yesterday.")]
    assert get_passive_language(sentence, precursors) == []


def test_final_word_is_never_a_precursor(precursors):
    assert get_passive_language([get_line("I know what it was")], precursors) == []


def test_columns_after_astral_characters_count_surrogate_pairs(precursors):
    diagnostics = get_passive_language([get_line("\U0001F600 It was painted.")], precursors)

    assert len(diagnostics) == 1
    assert diagnostics[0].range.start == Position(0, 6)
    assert diagnostics[0].range.end == Position(0, 18)
