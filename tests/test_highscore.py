import json
import logging

from star_catcher.highscore import HighScoreStore


def test_missing_file_reads_zero(tmp_path) -> None:
    store = HighScoreStore(str(tmp_path / "nope.json"))
    assert store.load() == 0


def test_save_then_load(tmp_path) -> None:
    path = tmp_path / "nested" / "dir" / "highscore.json"
    store = HighScoreStore(str(path))
    assert store.save(42) is True
    assert json.loads(path.read_text(encoding="utf-8")) == {"high_score": 42}
    assert HighScoreStore(str(path)).load() == 42
    assert not (tmp_path / "nested" / "dir" / "highscore.json.tmp").exists()


def test_corrupt_file_reads_zero(tmp_path, caplog) -> None:
    path = tmp_path / "highscore.json"
    store = HighScoreStore(str(path))
    for content in ("{not json", "[1, 2]", '{"high_score": "lots"}'):
        path.write_text(content, encoding="utf-8")
        with caplog.at_level(logging.WARNING):
            assert store.load() == 0
    assert "Could not read high score" in caplog.text


def test_negative_value_is_floored(tmp_path) -> None:
    path = tmp_path / "highscore.json"
    path.write_text('{"high_score": -5}', encoding="utf-8")
    assert HighScoreStore(str(path)).load() == 0


def test_save_failure_is_reported_not_raised(tmp_path, caplog) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    store = HighScoreStore(str(blocker / "highscore.json"))
    with caplog.at_level(logging.WARNING):
        assert store.save(3) is False
    assert "Could not save high score" in caplog.text
