from docchunker.text_processing.break_points import find_break


def test_target_at_or_past_max_returns_max():
    assert find_break("abc", 3, 3) == 3
    assert find_break("abc", 5, 3) == 3


def test_paragraph_break_beats_earlier_word_break():
    text = "aaaa bbbb\n\ncccc dddd"

    assert find_break(text, 15, len(text)) == 10


def test_sentence_end_beats_word_break():
    text = "One. Two three"

    assert find_break(text, 10, len(text)) == 4


def test_lowest_word_break_in_window_wins():
    text = "alpha beta gamma"

    assert find_break(text, 12, len(text)) == 5


def test_no_break_returns_target():
    text = "x" * 200

    assert find_break(text, 100, len(text)) == 100


def test_breaks_outside_window_are_ignored():
    text = "a" * 10 + " " + "a" * 200

    assert find_break(text, 100, len(text)) == 100


def test_window_stops_before_max_offset():
    text = "a" * 60 + " tail"

    assert find_break(text, 40, 60) == 40
