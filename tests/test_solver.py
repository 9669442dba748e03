import io

from mrdle.constraints import Hint
from mrdle.solver import NO_MATCHES, filter_candidates, list_words


def test_filter_keeps_store_order(store):
    hints = [Hint.parse("crane", "x~xxx")]
    assert filter_candidates(store, hints) == ["hurry", "story"]


def test_filter_without_hints_returns_everything(store):
    assert filter_candidates(store, []) == list(store.words)


def test_list_words(store):
    out = io.StringIO()

    assert list_words(store, [("crane", "x~xxx")], out) == 0
    assert out.getvalue() == "hurry\nstory\n"


def test_list_words_no_matches(store):
    out = io.StringIO()

    assert list_words(store, [("crane", "!!!!!")], out) == 0
    assert out.getvalue() == NO_MATCHES + "\n"


def test_list_words_invalid_hint(store, caplog):
    out = io.StringIO()

    assert list_words(store, [("crane", "x~xxx"), ("crane", "x~x")], out) == 1
    assert out.getvalue() == ""
    assert "Invalid hint: crane x~x" in caplog.text
