import pytest

from talking_calculator.core.transcript import normalize_transcript, speech_error_message


@pytest.mark.parametrize("spoken, expression", [
    ("five plus three", "5 + 3"),
    ("Five Plus Three", "5 + 3"),
    ("  seven minus nine ", "7 - 9"),
    ("twenty divided by four", "20 / 4"),
    ("ten over two", "10 / 2"),
    ("three into four", "3 * 4"),
    ("six times eleven", "6 * 11"),
    ("one add one", "1 + 1"),
    ("eight subtract two", "8 - 2"),
    ("nineteen multiply eighteen", "19 * 18"),
    ("two point five", "2 . 5"),
    ("12 plus 4", "12 + 4"),
])
def test_normalize_transcript(spoken, expression):
    assert normalize_transcript(spoken) == expression


def test_number_words_need_word_boundaries():
    assert normalize_transcript("someone") == "someone"


def test_empty_transcript():
    assert normalize_transcript("") == ""
    assert normalize_transcript(None) == ""
    assert normalize_transcript("   ") == ""


def test_speech_error_message():
    assert speech_error_message("no_match") == "No speech detected"
    assert speech_error_message("speech_timeout") == "Speech timeout"
    assert speech_error_message("network") == "Speech recognition error"
