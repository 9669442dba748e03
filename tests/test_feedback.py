import pytest

from mrdle.dictionary import get_word_store
from mrdle.feedback import (
    CharacterStates,
    Verdict,
    evaluate_guess,
    is_solved,
    parse_verdicts,
    verdicts_to_string,
)

M, L, X = Verdict.MATCHED, Verdict.MISLAID, Verdict.MISSING


def test_duplicate_letters_credited_once_per_occurrence():
    verdicts = evaluate_guess("allot", "lolly")
    assert verdicts == [L, L, M, X, X]

    credited = sum(1 for letter, v in zip("lolly", verdicts) if letter == "l" and v is not X)
    assert credited <= "allot".count("l")


def test_surplus_copies_after_mislaid_are_missing():
    # Both of the secret's e's are claimed before the last guessed e
    assert evaluate_guess("speed", "eerie") == [L, L, X, X, X]


def test_exact_guess_is_all_matched():
    assert evaluate_guess("crane", "crane") == [M] * 5
    assert is_solved(evaluate_guess("crane", "crane"))


@pytest.mark.parametrize("secret, guess, expected", [
    ("abide", "speed", "xx~x~"),
    ("crane", "nacre", "~~~~!"),
    ("hello", "world", "x~x!x"),
    ("eerie", "geese", "x!~x!"),
    ("apple", "paper", "~~!~x"),
])
def test_known_results(secret, guess, expected):
    assert verdicts_to_string(evaluate_guess(secret, guess)) == expected


def test_matched_occurrence_is_not_reused_for_mislaid():
    # The only S in the secret is matched at the end
    assert evaluate_guess("bears", "sears") == [X, M, M, M, M]


def test_every_position_resolved():
    store = get_word_store()
    words = store.words[::37]
    for secret in words[:10]:
        for guess in words:
            verdicts = evaluate_guess(secret, guess)
            assert len(verdicts) == len(secret)
            assert Verdict.UNKNOWN not in verdicts


def test_verdict_strings():
    verdicts = parse_verdicts("!~x")
    assert verdicts == [M, L, X]
    assert verdicts_to_string(verdicts) == "!~x"


@pytest.mark.parametrize("text", ["!~?", "!! ", "GYB"])
def test_parse_verdicts_rejects_unknown_symbols(text):
    with pytest.raises(ValueError):
        parse_verdicts(text)


def test_is_solved_needs_all_matched():
    assert not is_solved([M, M, L])
    assert not is_solved([])


def test_character_states_keep_best_verdict():
    states = CharacterStates()
    states.update("lolly", [L, L, M, X, X])

    assert states.get("l") is M
    assert states.get("o") is L
    assert states.get("y") is X
    assert states.get("z") is None

    states.update("lotus", [X, M, M, X, X])
    assert states.get("l") is M
    assert states.get("o") is M
    assert "u" in states
    assert len(states) == 6
