import io

from mrdle.stats import LetterStats

WORDS = ["abc", "abd", "xbz"]


def test_position_frequencies():
    stats = LetterStats(WORDS)
    freqs = stats.position_frequencies

    assert stats.word_size == 3
    assert freqs[0] == {"a": 2 / 3, "x": 1 / 3}
    assert freqs[1] == {"b": 1.0}
    assert freqs[2] == {"c": 1 / 3, "d": 1 / 3, "z": 1 / 3}


def test_empty_list_has_no_positions():
    assert LetterStats([]).position_frequencies == {}


def test_overall_frequency():
    stats = LetterStats(WORDS)
    overall = stats.get_overall_letter_frequency(WORDS)

    assert overall["b"] == 3 / 9
    assert stats.top_letters(overall, 2) == [("b", 3 / 9), ("a", 2 / 9)]
    assert stats.get_overall_letter_frequency([]) == {}


def test_report():
    out = io.StringIO()
    LetterStats(WORDS).report(out, top=2)
    text = out.getvalue()

    assert "Words:          3" in text
    assert "Word size:      3" in text
    assert "Top letters:    b 0.333  a 0.222" in text
    assert "  1: a 0.667  x 0.333" in text


def test_report_empty_list():
    out = io.StringIO()
    LetterStats([]).report(out)

    assert out.getvalue() == "Words:          0\nWord size:      0\n"
