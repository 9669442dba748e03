import io

import pytest

from mrdle import __version__
from mrdle.main import EXIT_FAILURE, EXIT_OK, EXIT_USAGE, main, parse_args
from mrdle.player_stats import PlayerStats


def test_unknown_argument(capsys):
    assert main(["--frobnicate"]) == EXIT_USAGE
    assert "unrecognized arguments" in capsys.readouterr().err


def test_missing_hint_value():
    assert main(["--hint", "crane"]) == EXIT_USAGE


def test_bad_guess_limit():
    assert main(["--max-guesses", "0"]) == EXIT_USAGE


def test_hint_implies_list_and_words_are_lowercased():
    args = parse_args(["--hint", "CRANE", "x~xxx", "--secret-word", " Allot "])
    assert args.list
    assert args.hint == [("crane", "x~xxx")]
    assert args.secret_word == "allot"


def test_list_with_hint(word_file, capsys):
    assert main(["--word-file", str(word_file), "--hint", "crane", "x~xxx"]) == EXIT_OK
    assert capsys.readouterr().out == "hurry\nstory\n"


def test_list_everything(word_file, capsys):
    assert main(["--word-file", str(word_file), "--list"]) == EXIT_OK
    assert capsys.readouterr().out.split() == ["allot", "apple", "frost", "hurry", "lolly", "story"]


def test_invalid_hint(word_file, capsys, caplog):
    assert main(["--word-file", str(word_file), "--hint", "crane", "x~x"]) == EXIT_FAILURE
    assert capsys.readouterr().out == ""
    assert "Invalid hint" in caplog.text


def test_empty_word_file(tmp_path):
    path = tmp_path / "blank.txt"
    path.write_text("\n  \n")
    assert main(["--word-file", str(path)]) == EXIT_FAILURE


def test_inconsistent_word_file(tmp_path, caplog):
    path = tmp_path / "bad.txt"
    path.write_text("apple\nbanana\n")
    assert main(["--word-file", str(path), "--list"]) == EXIT_FAILURE
    assert "Inconsistent word length" in caplog.text


def test_secret_word_length(word_file, caplog):
    assert main(["--word-file", str(word_file), "--secret-word", "toolong"]) == EXIT_FAILURE
    assert "Invalid secret word length" in caplog.text


def test_play(word_file, data_dir, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("story\nallot\n"))

    assert main(["--word-file", str(word_file), "--secret-word", "allot", "--no-color"]) == EXIT_OK
    assert "Magnificent" in capsys.readouterr().out

    stats = PlayerStats("", 5, 6, data_dir)
    assert stats.load()
    assert stats.win_count == 1

    assert main(["--word-file", str(word_file), "--player-stats", "--no-color"]) == EXIT_OK
    assert "Played:         1" in capsys.readouterr().out


def test_play_with_builtin_list(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["--player", "ann"]) == EXIT_OK


def test_version(capsys):
    assert main(["--version", "--no-color"]) == EXIT_OK
    assert f"Version {__version__}" in capsys.readouterr().out


def test_rules(capsys):
    assert main(["--rules", "--max-guesses", "4", "--no-color"]) == EXIT_OK
    out = capsys.readouterr().out
    assert "Guess the secret word in 4 tries." in out
    assert "5 letters long" in out


def test_rules_with_bad_word_file(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("ab\nabc\n")
    assert main(["--word-file", str(path), "--rules", "--no-color"]) == EXIT_OK
    assert "5 letters long" in capsys.readouterr().out


def test_player_stats_with_empty_word_file(tmp_path, capsys):
    path = tmp_path / "blank.txt"
    path.write_text("\n")
    assert main(["--word-file", str(path), "--player-stats", "--no-color"]) == EXIT_OK
    assert "Played:         0" in capsys.readouterr().out


def test_word_stats(word_file, capsys):
    assert main(["--word-file", str(word_file), "--word-stats"]) == EXIT_OK
    assert "Words:          6" in capsys.readouterr().out


@pytest.mark.parametrize("flag", ["--help", "-h"])
def test_help(flag, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([flag])
    assert exc_info.value.code == 0
    assert "--hint WORD VERDICT" in capsys.readouterr().out
