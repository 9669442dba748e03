import json
import random

import pytest

from mrdle.dictionary import WordStore


WORDS = ["story", "allot", "hurry", "apple", "lolly", "frost"]


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point settings at a temp config so tests never touch ~/.mrdle."""
    data_dir = tmp_path / "data"
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({"data_dir": str(data_dir)}))
    monkeypatch.setenv("MRDLE_CONFIG", str(config_file))
    monkeypatch.delenv("NO_COLOR", raising=False)
    return config_file


@pytest.fixture
def data_dir(tmp_path):
    return tmp_path / "data"


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def store(rng):
    return WordStore(WORDS, rng)


@pytest.fixture
def word_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("\n".join(WORDS) + "\n")
    return path
